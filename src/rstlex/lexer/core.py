"""Streaming tokenizer with one token of lookahead.

Pulls positioned characters from a Source, classifies each one, and
coalesces runs of unclassified characters into WORD tokens. A word can only
be emitted once the character after it has been seen, so the stream holds
back at most one ``(Token, SourceSpan)`` pair at a time.

Thread Safety:
TokenStream instances are single-use and own their source exclusively.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from rstlex.config import get_lex_config
from rstlex.errors import SourceReadError
from rstlex.lexer.chars import PositionedChars
from rstlex.lexer.modes import LexerState
from rstlex.location import SourceLocation, SourceSpan
from rstlex.source import Source, TextSource
from rstlex.stringbuilder import StringBuilder
from rstlex.tokens import Token, classify
from rstlex.utils.logger import get_logger

logger = get_logger(__name__)

# A held-back token; word runs stay in a builder until they end.
_Pending = tuple[Token | StringBuilder, SourceSpan]


class TokenStream:
    """Iterator of ``(Token, SourceSpan)`` pairs in source order.

    Spans partition the input: consecutive spans meet exactly and together
    cover every character once.

    Usage:
            >>> from rstlex.source import TextSource
            >>> for token, span in TokenStream(TextSource("example", "a-b")):
            ...     print(span, token)
        example[0:0..0:1] Token(WORD, 'a')
        example[0:1..0:2] Token(HYPHEN)
        example[0:2..0:3] Token(WORD, 'b')

    Errors:
        Construction raises SourceConsumedError if the source was already
        consumed. A failing read raises SourceReadError from ``__next__``;
        the stream is exhausted afterwards. With ``flush_on_error`` (the
        default) a held-back token is returned first and the error is raised
        on the following pull.

    """

    __slots__ = ("_chars", "_buffer", "_pending_error", "_exhausted", "_flush_on_error")

    def __init__(self, source: Source) -> None:
        self._chars = PositionedChars(source)
        self._buffer: _Pending | None = None
        self._pending_error: SourceReadError | None = None
        self._exhausted = False
        self._flush_on_error = get_lex_config().flush_on_error
        logger.debug("Opened token stream over %s", source.name)

    @property
    def state(self) -> LexerState:
        if self._pending_error is not None:
            return LexerState.BUFFERED
        if self._exhausted:
            return LexerState.EXHAUSTED
        if self._buffer is not None:
            return LexerState.BUFFERED
        return LexerState.IDLE

    def __iter__(self) -> TokenStream:
        return self

    def __next__(self) -> tuple[Token, SourceSpan]:
        if self._pending_error is not None:
            error, self._pending_error = self._pending_error, None
            raise error
        if self._exhausted:
            raise StopIteration

        while True:
            try:
                char, location = next(self._chars)
            except StopIteration:
                self._exhausted = True
                pending = self._take_buffer()
                if pending is None:
                    raise
                return pending
            except SourceReadError as error:
                self._exhausted = True
                pending = self._take_buffer()
                logger.debug("Read error surfaced from %s: %s", error.source_name, error.message)
                if pending is not None and self._flush_on_error:
                    self._pending_error = error
                    return pending
                raise

            token = classify(char)
            buffer = self._buffer

            if token is None:
                if buffer is not None and isinstance(buffer[0], StringBuilder):
                    builder, span = buffer
                    builder.append(char)
                    self._buffer = (builder, span.extended_span(char))
                    continue
                self._buffer = (StringBuilder(char), self._char_span(location, char))
                if buffer is not None:
                    return self._finish(buffer)
                continue

            if buffer is not None:
                self._buffer = (token, self._char_span(location, char))
                return self._finish(buffer)
            return token, self._char_span(location, char)

    @staticmethod
    def _char_span(location: SourceLocation, char: str) -> SourceSpan:
        return location.span_to(location.location.location_after(char))

    @staticmethod
    def _finish(pending: _Pending) -> tuple[Token, SourceSpan]:
        held, span = pending
        if isinstance(held, StringBuilder):
            return Token.word(held.build()), span
        return held, span

    def _take_buffer(self) -> tuple[Token, SourceSpan] | None:
        pending, self._buffer = self._buffer, None
        if pending is None:
            return None
        return self._finish(pending)


def tokenize(source: Source) -> TokenStream:
    """Open a token stream over a source.

    Raises:
        SourceConsumedError: If the source was already consumed.
        SourceReadError: If the underlying stream fails mid-way.
    """
    return TokenStream(source)


def tokenize_text(text: str, name: str = "<string>") -> list[tuple[Token, SourceSpan]]:
    """Convenience function: tokenize a string and return the token list."""
    return list(TokenStream(TextSource(name, text)))

"""Character sources for the token stream.

A source is "a place text comes from". It has a stable name used in
diagnostics and hands out its characters exactly once: the first call to
``chars()`` returns an iterator, every later call returns ``None``.

Two implementations are provided:

- TextSource: an in-memory string. Never fails and supports excerpts.
- ReaderSource: an incremental byte (or text) stream, decoded one line at a
  time. Supports arbitrarily large input but cannot produce excerpts.

Thread Safety:
A source is exclusively owned by the one token stream that consumes it.
Only ``name`` and ``excerpt`` may be used from other threads.

"""

from __future__ import annotations

import codecs
from abc import ABC, abstractmethod
from collections.abc import Iterator
from enum import Enum, auto
from typing import IO, TYPE_CHECKING

from rstlex.config import get_lex_config
from rstlex.errors import ExcerptUnavailableError, SourceReadError
from rstlex.utils.logger import get_logger

if TYPE_CHECKING:
    from rstlex.location import Span

logger = get_logger(__name__)


class SourceState(Enum):
    """Whether a source's characters can still be taken."""

    AVAILABLE = auto()
    CONSUMED = auto()


class Source(ABC):
    """A named, single-use iterable of characters.

    Subclasses implement ``_open`` to produce the character iterator and
    ``excerpt`` to recover the text of a span.

    """

    __slots__ = ("_name", "_state")

    def __init__(self, name: str) -> None:
        self._name = name
        self._state = SourceState.AVAILABLE

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r}, {self._state.name})"

    @property
    def name(self) -> str:
        """Label displayed when showing positions and errors in the source."""
        return self._name

    @property
    def state(self) -> SourceState:
        return self._state

    @property
    def consumed(self) -> bool:
        return self._state is SourceState.CONSUMED

    def chars(self) -> Iterator[str] | None:
        """Take the iterator over the characters in the source.

        Returns:
            An iterator the first time, ``None`` on every later call.
        """
        if self._state is SourceState.CONSUMED:
            return None
        self._state = SourceState.CONSUMED
        return self._open()

    @abstractmethod
    def _open(self) -> Iterator[str]:
        """Produce the character iterator. Called at most once."""

    @abstractmethod
    def excerpt(self, span: Span) -> str:
        """Get the text covered by ``span``.

        Raises:
            ExcerptUnavailableError: If the text is not (or no longer) held.
        """


class TextSource(Source):
    """A source backed by an in-memory string.

    Usage:
            >>> source = TextSource("example", "An example")
            >>> "".join(source.chars())
            'An example'
            >>> source.chars() is None
            True

    """

    __slots__ = ("_text",)

    def __init__(self, name: str, text: str) -> None:
        super().__init__(name)
        self._text = text

    def _open(self) -> Iterator[str]:
        return iter(self._text)

    def excerpt(self, span: Span) -> str:
        start, end = span.start.offset, span.end.offset
        if not 0 <= start <= end <= len(self._text):
            raise ExcerptUnavailableError(self._name, span, "span lies outside the source text")
        return self._text[start:end]


class ReaderSource(Source):
    """A source backed by a readable stream.

    The stream is read one line at a time; each line is decoded into a small
    character buffer that is served before the next read. Binary streams are
    decoded with an incremental decoder so multi-byte sequences survive line
    boundaries; text streams are used as-is.

    Args:
        name: Label for diagnostics
        reader: Binary or text stream with a ``readline`` method
        encoding: Codec for binary streams (default from LexConfig)
        errors: Codec error handler (default from LexConfig)

    """

    __slots__ = ("_reader", "_encoding", "_errors")

    def __init__(
        self,
        name: str,
        reader: IO[bytes] | IO[str],
        *,
        encoding: str | None = None,
        errors: str | None = None,
    ) -> None:
        super().__init__(name)
        config = get_lex_config()
        self._reader = reader
        self._encoding = encoding or config.encoding
        self._errors = errors or config.decode_errors

    @property
    def encoding(self) -> str:
        return self._encoding

    def _open(self) -> Iterator[str]:
        return self._read_chars()

    def _read_chars(self) -> Iterator[str]:
        decoder = codecs.getincrementaldecoder(self._encoding)(self._errors)
        lines = 0
        while True:
            try:
                chunk = self._reader.readline()
                if isinstance(chunk, str):
                    buffer = chunk
                else:
                    buffer = decoder.decode(chunk, final=not chunk)
            except (OSError, ValueError) as exc:
                logger.debug("Read failed in %s after %d lines", self._name, lines)
                raise SourceReadError(self._name, str(exc)) from exc

            if not chunk:
                # End of input; a final decode may still flush buffered bytes.
                yield from buffer
                logger.debug("Source %s exhausted after %d lines", self._name, lines)
                return

            lines += 1
            # A line ending mid-character decodes to nothing, so the loop
            # reads again before this pull produces a character.
            yield from buffer

    def excerpt(self, span: Span) -> str:
        raise ExcerptUnavailableError(self._name, span, "line-buffered readers discard consumed input")


def from_text(name: str, text: str) -> TextSource:
    """Create a one-shot source over an in-memory string."""
    return TextSource(name, text)


def from_reader(
    name: str,
    reader: IO[bytes] | IO[str],
    *,
    encoding: str | None = None,
    errors: str | None = None,
) -> ReaderSource:
    """Create a one-shot, line-buffered source over a readable stream."""
    return ReaderSource(name, reader, encoding=encoding, errors=errors)

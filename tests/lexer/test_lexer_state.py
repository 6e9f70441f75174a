"""Tests for the token stream state machine.

Covers the one-token lookahead buffer, end-of-input flushing, exhaustion,
single consumption of sources, and the read-error buffer policy.
"""

import io
import logging

import pytest

from rstlex.config import LexConfig, lex_config_context
from rstlex.errors import SourceConsumedError, SourceReadError
from rstlex.lexer import LexerState, PositionedChars, TokenStream, tokenize
from rstlex.location import Location
from rstlex.source import ReaderSource, TextSource
from rstlex.tokens import Token, TokenType


class FailingReader:
    """Serves the given lines, then fails every read."""

    def __init__(self, *lines: bytes, error: Exception | None = None) -> None:
        self._lines = list(lines)
        self._error = error or OSError("device unplugged")
        self.reads = 0

    def readline(self) -> bytes:
        self.reads += 1
        if self._lines:
            return self._lines.pop(0)
        raise self._error


class TestBuffering:
    """The stream holds back exactly one token when it must."""

    def test_initial_state_is_idle(self) -> None:
        stream = TokenStream(TextSource("doc", "abc"))
        assert stream.state is LexerState.IDLE

    def test_punctuation_with_empty_buffer_is_emitted_immediately(self) -> None:
        """A classified character with nothing held back is not buffered."""
        stream = TokenStream(TextSource("doc", "-abc"))

        token, _ = next(stream)
        assert token == Token(TokenType.HYPHEN, "-")
        assert stream.state is LexerState.IDLE

    def test_word_is_held_until_run_ends(self) -> None:
        """A word is emitted only after the following character is seen."""
        stream = TokenStream(TextSource("doc", "ab-cd"))

        token, _ = next(stream)
        assert token == Token.word("ab")
        # The hyphen that ended the word is now held back.
        assert stream.state is LexerState.BUFFERED

        token, _ = next(stream)
        assert token == Token(TokenType.HYPHEN, "-")

    def test_word_following_punctuation_replaces_buffer(self) -> None:
        tokens = [t for t, _ in TokenStream(TextSource("doc", "a.b.c"))]
        assert [t.value for t in tokens] == ["a", ".", "b", ".", "c"]

    def test_end_of_input_flushes_buffered_word(self) -> None:
        """The final word is emitted when the source runs out."""
        stream = TokenStream(TextSource("doc", "trailing"))

        token, span = next(stream)
        assert token == Token.word("trailing")
        assert span.end == Location(0, 8, 8)
        assert stream.state is LexerState.EXHAUSTED

    def test_bullet_glyphs_are_not_word_characters(self) -> None:
        tokens = [t.type for t, _ in TokenStream(TextSource("doc", "x•y‣z⁃"))]
        assert tokens == [
            TokenType.WORD,
            TokenType.BULLET,
            TokenType.WORD,
            TokenType.TRIANGULAR_BULLET,
            TokenType.WORD,
            TokenType.HYPHEN_BULLET,
        ]


class TestExhaustion:
    """Once exhausted, a stream stays exhausted."""

    def test_empty_source_yields_nothing(self) -> None:
        stream = TokenStream(TextSource("doc", ""))
        assert list(stream) == []
        assert stream.state is LexerState.EXHAUSTED

    def test_pulls_after_exhaustion_stop(self) -> None:
        stream = TokenStream(TextSource("doc", "a b"))
        assert len(list(stream)) == 3

        for _ in range(3):
            with pytest.raises(StopIteration):
                next(stream)


class TestSingleConsumption:
    """Sources can be opened by exactly one stream."""

    def test_second_stream_over_same_source_fails(self) -> None:
        source = TextSource("doc", "abc")
        TokenStream(source)

        with pytest.raises(SourceConsumedError) as exc_info:
            TokenStream(source)
        assert exc_info.value.source_name == "doc"
        assert "doc" in str(exc_info.value)

    def test_tokenize_fails_eagerly_on_consumed_source(self) -> None:
        source = TextSource("doc", "abc")
        list(tokenize(source))

        with pytest.raises(SourceConsumedError):
            tokenize(source)

    def test_positioned_chars_pairs_characters_with_locations(self) -> None:
        chars = PositionedChars(TextSource("doc", "a\nb"))

        pairs = [(c, loc.location) for c, loc in chars]
        assert pairs == [
            ("a", Location(0, 0, 0)),
            ("\n", Location(0, 1, 1)),
            ("b", Location(1, 0, 2)),
        ]
        assert chars.location.location == Location(1, 1, 3)


class TestReadErrors:
    """Read failures surface once and end the stream."""

    def test_error_without_buffered_token(self) -> None:
        stream = TokenStream(ReaderSource("flaky", FailingReader()))

        with pytest.raises(SourceReadError) as exc_info:
            next(stream)
        assert exc_info.value.source_name == "flaky"
        assert isinstance(exc_info.value.__cause__, OSError)
        assert next(stream, None) is None

    def test_buffered_token_is_flushed_before_error(self) -> None:
        """By default a held-back word is returned before the error."""
        stream = TokenStream(ReaderSource("flaky", FailingReader(b"ab")))

        token, _ = next(stream)
        assert token == Token.word("ab")
        with pytest.raises(SourceReadError):
            next(stream)
        assert next(stream, None) is None

    def test_buffered_token_dropped_when_flush_disabled(self) -> None:
        with lex_config_context(LexConfig(flush_on_error=False)):
            stream = TokenStream(ReaderSource("flaky", FailingReader(b"ab")))

        with pytest.raises(SourceReadError):
            next(stream)
        assert next(stream, None) is None

    def test_tokens_before_the_failing_read_are_delivered(self) -> None:
        stream = TokenStream(ReaderSource("flaky", FailingReader(b"a-\n", b"b ")))

        tokens = []
        with pytest.raises(SourceReadError):
            for token, _ in stream:
                tokens.append(token.value)
        assert tokens == ["a", "-", "\n", "b", " "]

    def test_decode_error_surfaces_as_read_error(self) -> None:
        stream = TokenStream(ReaderSource("bad", io.BytesIO(b"ok \xff\n")))

        with pytest.raises(SourceReadError) as exc_info:
            next(stream)
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_closed_stream_surfaces_as_read_error(self) -> None:
        reader = io.BytesIO(b"abc")
        stream = TokenStream(ReaderSource("closed", reader))
        reader.close()

        with pytest.raises(SourceReadError) as exc_info:
            next(stream)
        assert isinstance(exc_info.value.__cause__, ValueError)
        assert next(stream, None) is None

    def test_value_error_after_word_flushes_then_stops(self) -> None:
        """A ValueError from readline follows the same buffer policy as OSError."""
        reader = FailingReader(b"ab", error=ValueError("I/O operation on closed file."))
        stream = TokenStream(ReaderSource("closed", reader))

        token, _ = next(stream)
        assert token == Token.word("ab")
        assert stream.state is LexerState.BUFFERED
        with pytest.raises(SourceReadError):
            next(stream)
        assert stream.state is LexerState.EXHAUSTED
        assert next(stream, None) is None

    def test_pending_error_reported_as_buffered(self) -> None:
        stream = TokenStream(ReaderSource("flaky", FailingReader(b"ab")))

        next(stream)
        assert stream.state is LexerState.BUFFERED
        with pytest.raises(SourceReadError):
            next(stream)
        assert stream.state is LexerState.EXHAUSTED

    def test_split_multibyte_character_reads_until_complete(self) -> None:
        """A line ending mid-character is followed by another read in the same pull."""
        reader = FailingReader(b"\xc3", b"\xa9")
        stream = TokenStream(ReaderSource("split", reader))

        token, span = next(stream)
        assert token == Token.word("é")
        assert span.end == Location(0, 1, 1)
        assert reader.reads == 3


class TestLogging:
    """The stream reports its lifecycle at DEBUG level only."""

    def test_open_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="rstlex")
        TokenStream(TextSource("doc.rst", ""))

        assert any("doc.rst" in r.getMessage() for r in caplog.records)
        assert all(r.levelno == logging.DEBUG for r in caplog.records)

    def test_read_error_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="rstlex")
        stream = TokenStream(ReaderSource("flaky", FailingReader()))

        with pytest.raises(SourceReadError):
            next(stream)
        assert any("device unplugged" in r.getMessage() for r in caplog.records)

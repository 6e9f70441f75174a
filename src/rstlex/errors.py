"""Exception classes for rstlex.

Provides standardized exceptions for the three ways a token stream can fail:
opening an already consumed source, reading from a failing byte stream, and
asking for an excerpt a source cannot produce.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rstlex.location import Span


class RstlexError(Exception):
    """Base exception for all rstlex errors.

    Subclass this for specific error categories.
    """

    pass


class SourceConsumedError(RstlexError):
    """Error when a token stream is opened over an exhausted source.

    Sources hand out their characters once. A second attempt to open the
    same source fails at construction time and is not retried.
    """

    def __init__(self, source_name: str) -> None:
        """Initialize consumed-source error.

        Args:
            source_name: Name of the source that was already consumed
        """
        self.source_name = source_name
        super().__init__(f"Couldn't read chars from {source_name}: source already consumed")


class SourceReadError(RstlexError):
    """Error while pulling characters from an underlying stream.

    Raised on the single pull where the read or decode failed. The
    iterator that raised it yields nothing afterwards.
    """

    def __init__(self, source_name: str, message: str) -> None:
        """Initialize read error.

        Args:
            source_name: Name of the failing source
            message: Description of the underlying failure
        """
        self.source_name = source_name
        self.message = message
        super().__init__(f"{source_name}: {message}")


class ExcerptUnavailableError(RstlexError):
    """Error when the text covered by a span cannot be recovered.

    Only sources that retain their full text support excerpts. Line-buffered
    readers discard consumed input and always raise this.
    """

    def __init__(self, source_name: str, span: Span, reason: str) -> None:
        """Initialize excerpt error.

        Args:
            source_name: Name of the source asked for the excerpt
            span: The span that was requested
            reason: Why the excerpt is unavailable
        """
        self.source_name = source_name
        self.span = span
        self.reason = reason
        super().__init__(f"{source_name}[{span}]: excerpt unavailable ({reason})")

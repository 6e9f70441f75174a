"""Positioned character iteration.

Pairs every character taken from a Source with the SourceLocation it
occupies, threading the location forward one character at a time.
"""

from __future__ import annotations

from collections.abc import Iterator

from rstlex.errors import SourceConsumedError
from rstlex.location import SourceLocation
from rstlex.source import Source


class PositionedChars:
    """Iterator of ``(char, SourceLocation)`` pairs over a source.

    Opening takes the source's one-shot character iterator. Read errors
    raised by the source propagate unchanged.

    Raises:
        SourceConsumedError: If the source's characters were already taken.

    """

    __slots__ = ("_chars", "_location")

    def __init__(self, source: Source) -> None:
        chars = source.chars()
        if chars is None:
            raise SourceConsumedError(source.name)
        self._chars: Iterator[str] = chars
        self._location = SourceLocation.source_start(source)

    @property
    def location(self) -> SourceLocation:
        """Location of the next character to be produced."""
        return self._location

    def __iter__(self) -> PositionedChars:
        return self

    def __next__(self) -> tuple[str, SourceLocation]:
        char = next(self._chars)
        location = self._location
        self._location = location.location_after(char)
        return char, location

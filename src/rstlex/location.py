"""Source location tracking for tokens and diagnostics.

Provides four composable value types:

- Location: a single point (row, column, character offset)
- Span: a half-open interval between two Locations
- SourceLocation / SourceSpan: the same, qualified by the Source that
  produced them

All four share the operations ``location_after``, ``span_to`` and (for spans)
``extended_span`` so the lexer can thread positions forward without caring
which layer it holds. Rows and columns are zero-based; offsets count
characters, not bytes.

Thread Safety:
All types are frozen (immutable) and safe to share across threads. The
qualified types hold a shared reference to their source and never mutate it.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rstlex.source import Source


@dataclass(frozen=True, slots=True, order=True)
class Location:
    """A single position within a stream of text.

    Attributes:
        row: Zero-based line number
        column: Zero-based column within the row
        offset: Number of characters consumed before this position

    Examples:
            >>> loc = Location().location_after("a").location_after("\\n")
            >>> str(loc)
            '1:0'
            >>> loc.offset
            2

    """

    row: int = 0
    column: int = 0
    offset: int = 0

    def __str__(self) -> str:
        return f"{self.row}:{self.column}"

    @property
    def location(self) -> Location:
        return self

    def location_after(self, char: str) -> Location:
        """Return the location following ``char``.

        Only a newline is special: it moves to the start of the next row.
        Every other character, control characters included, advances the
        column by one.
        """
        if char == "\n":
            row, column = self.row + 1, 0
        else:
            row, column = self.row, self.column + 1
        return Location(row, column, self.offset + 1)

    def span_to(self, end: Location) -> Span:
        """Create a span from this location up to ``end``.

        ``end`` must not be before this location; this is not checked.
        """
        return Span(self, end)


@dataclass(frozen=True, slots=True, order=True)
class Span:
    """A span between two locations within a stream of text.

    Inclusive of the start and non-inclusive of the end.

    Attributes:
        start: First location covered by the span
        end: First location after the span

    """

    start: Location = field(default_factory=Location)
    end: Location = field(default_factory=Location)

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"

    @property
    def location(self) -> Location:
        return self.start

    @property
    def span(self) -> Span:
        return self

    @property
    def length(self) -> int:
        """Number of characters covered."""
        return self.end.offset - self.start.offset

    def location_after(self, char: str) -> Span:
        """Return the single-character span for ``char`` following this span."""
        return Span(self.end, self.end.location_after(char))

    def span_to(self, end: Location) -> Span:
        return Span(self.start, end)

    def extended_span(self, char: str) -> Span:
        """Grow the span by one character at its end."""
        return Span(self.start, self.end.location_after(char))

    def contains(self, location: Location) -> bool:
        """Check whether ``location`` falls inside the half-open span."""
        return self.start.offset <= location.offset < self.end.offset


@dataclass(frozen=True, slots=True, order=True)
class SourceLocation:
    """A location within a particular source.

    Equality, ordering and hashing use the inner Location only; the source
    is carried along for display and excerpt lookup.

    Examples:
            >>> from rstlex.source import TextSource
            >>> start = SourceLocation.source_start(TextSource("doc.rst", "ab"))
            >>> str(start.location_after("a"))
            'doc.rst[0:1]'

    """

    source: Source = field(compare=False, repr=False)
    location: Location = field(default_factory=Location)

    def __str__(self) -> str:
        return f"{self.source.name}[{self.location}]"

    def __repr__(self) -> str:
        return f"SourceLocation({self.source.name!r}, {self.location})"

    @classmethod
    def source_start(cls, source: Source) -> SourceLocation:
        """Create the zero location of ``source``."""
        return cls(source, Location())

    def location_after(self, char: str) -> SourceLocation:
        return SourceLocation(self.source, self.location.location_after(char))

    def span_to(self, end: Location) -> SourceSpan:
        return SourceSpan(self.source, self.location.span_to(end))


@dataclass(frozen=True, slots=True, order=True)
class SourceSpan:
    """A span within a particular source.

    Equality, ordering and hashing use the inner Span only.

    """

    source: Source = field(compare=False, repr=False)
    span: Span = field(default_factory=Span)

    def __str__(self) -> str:
        return f"{self.source.name}[{self.span}]"

    def __repr__(self) -> str:
        return f"SourceSpan({self.source.name!r}, {self.span})"

    @property
    def location(self) -> Location:
        return self.span.start

    @property
    def start(self) -> Location:
        return self.span.start

    @property
    def end(self) -> Location:
        return self.span.end

    def location_after(self, char: str) -> SourceSpan:
        return SourceSpan(self.source, self.span.location_after(char))

    def span_to(self, end: Location) -> SourceSpan:
        return SourceSpan(self.source, self.span.span_to(end))

    def extended_span(self, char: str) -> SourceSpan:
        return SourceSpan(self.source, self.span.extended_span(char))

    def excerpt(self) -> str:
        """Return the source text covered by this span.

        Raises:
            ExcerptUnavailableError: If the source does not retain its text.
        """
        return self.source.excerpt(self.span)

"""Protocols for rstlex.

Defines the shared surface of the position types in ``rstlex.location`` so
downstream consumers can accept a bare or source-qualified position without
caring which one they hold.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Self, runtime_checkable

if TYPE_CHECKING:
    from rstlex.location import Location, Span


@runtime_checkable
class Locator(Protocol):
    """A single position within the input.

    Implemented by Location, Span, SourceLocation and SourceSpan.

    """

    @property
    def location(self) -> Location:
        """The current (start) location."""
        ...

    def location_after(self, char: str) -> Self:
        """The subsequent position after seeing ``char``."""
        ...

    def span_to(self, end: Location) -> SpanLocator:
        """A span from this position up to ``end``."""
        ...


@runtime_checkable
class SpanLocator(Locator, Protocol):
    """A region within the input.

    Implemented by Span and SourceSpan.

    """

    @property
    def span(self) -> Span:
        """The unqualified region."""
        ...

    def extended_span(self, char: str) -> Self:
        """The region grown to include ``char``."""
        ...

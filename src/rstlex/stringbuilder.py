"""StringBuilder for O(n) word accumulation.

The token stream grows a word one character at a time. Appending to a list
and joining once when the word ends is O(n) total, where repeated string
concatenation would be O(n²) for long runs.

Thread Safety:
StringBuilder instances are local to a single token stream.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator.

    Usage:
            >>> sb = StringBuilder("ab")
            >>> sb.append("c").build()
            'abc'
            >>> len(sb)
            3

    """

    __slots__ = ("_parts", "_length")

    def __init__(self, initial: str = "") -> None:
        self._parts: list[str] = []
        self._length = 0
        self.append(initial)

    def append(self, s: str) -> StringBuilder:
        """Append a string to the builder.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
            self._length += len(s)
        return self

    def build(self) -> str:
        """Join all parts into the final string."""
        return "".join(self._parts)

    def __len__(self) -> int:
        """Return the total number of characters appended."""
        return self._length

    def __bool__(self) -> bool:
        return self._length > 0

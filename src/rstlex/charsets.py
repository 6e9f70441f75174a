"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Reference: reStructuredText section adornments and bullet lists.

Usage:
    from rstlex.charsets import ADORNMENT_CHARS

    if char in ADORNMENT_CHARS:  # O(1) lookup
        ...
"""

# Any of these may underline or overline a section title.
# ! " # $ % & ' ( ) * + , - . / : ; < = > ? @ [ \ ] ^ _ ` { | } ~
ADORNMENT_CHARS: frozenset[str] = frozenset("!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~")

BULLET = "\u2022"  # •
TRIANGULAR_BULLET = "\u2023"  # ‣
HYPHEN_BULLET = "\u2043"  # ⁃

# str.isspace() also accepts the ASCII information separators, which do not
# carry the Unicode White_Space property.
_NOT_WHITESPACE: frozenset[str] = frozenset("\x1c\x1d\x1e\x1f")


def is_whitespace(char: str) -> bool:
    """Check if character has the Unicode White_Space property."""
    return char.isspace() and char not in _NOT_WHITESPACE

"""Token and TokenType definitions for the rstlex token stream.

The lexer produces a flat stream of Token objects. Every character of the
input is either classified as its own token (newline, whitespace, bullet
glyph, punctuation, bracket) or belongs to a maximal run of unclassified
characters that becomes a single WORD token.

Bullets: ``*`` ``+`` ``-`` are ordinary punctuation tokens that are merely
*bullet-capable*; the glyphs ``•`` ``‣`` ``⁃`` have dedicated token types.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from rstlex import numerals
from rstlex.charsets import (
    ADORNMENT_CHARS,
    BULLET,
    HYPHEN_BULLET,
    TRIANGULAR_BULLET,
    is_whitespace,
)


class TokenType(Enum):
    """Token types produced by the lexer.

    Organized by category:
    - Whitespace (NEWLINE, WHITESPACE)
    - Bullet glyphs
    - Punctuation (each usable as a section adornment)
    - Bracket pairs
    - WORD

    """

    # Whitespace
    NEWLINE = auto()
    WHITESPACE = auto()

    # Bullets
    BULLET = auto()  # •
    HYPHEN_BULLET = auto()  # ⁃
    TRIANGULAR_BULLET = auto()  # ‣

    # Punctuation
    AMPERSAND = auto()  # &
    ASTERISK = auto()  # *
    AT = auto()  # @
    BACKSLASH = auto()  # \
    BACKTICK = auto()  # `
    CARET = auto()  # ^
    COLON = auto()  # :
    COMMA = auto()  # ,
    DOLLAR = auto()  # $
    DOUBLE_QUOTE = auto()  # "
    EQUAL = auto()  # =
    EXCLAMATION = auto()  # !
    FORWARD_SLASH = auto()  # /
    GREATER_THAN = auto()  # >
    HASH = auto()  # #
    HYPHEN = auto()  # -
    LESS_THAN = auto()  # <
    PERCENT = auto()  # %
    PERIOD = auto()  # .
    PIPE = auto()  # |
    PLUS = auto()  # +
    QUESTION = auto()  # ?
    SEMICOLON = auto()  # ;
    SINGLE_QUOTE = auto()  # '
    TILDE = auto()  # ~
    UNDERSCORE = auto()  # _

    # Brackets
    OPEN_PAREN = auto()  # (
    CLOSE_PAREN = auto()  # )
    OPEN_BRACKET = auto()  # [
    CLOSE_BRACKET = auto()  # ]
    OPEN_BRACE = auto()  # {
    CLOSE_BRACE = auto()  # }

    # A continuous run of characters that are neither whitespace nor
    # punctuation.
    WORD = auto()


CHAR_TOKEN_TYPES: dict[str, TokenType] = {
    BULLET: TokenType.BULLET,
    TRIANGULAR_BULLET: TokenType.TRIANGULAR_BULLET,
    HYPHEN_BULLET: TokenType.HYPHEN_BULLET,
    "!": TokenType.EXCLAMATION,
    '"': TokenType.DOUBLE_QUOTE,
    "'": TokenType.SINGLE_QUOTE,
    "#": TokenType.HASH,
    "$": TokenType.DOLLAR,
    "%": TokenType.PERCENT,
    "&": TokenType.AMPERSAND,
    "*": TokenType.ASTERISK,
    "+": TokenType.PLUS,
    ",": TokenType.COMMA,
    "-": TokenType.HYPHEN,
    ".": TokenType.PERIOD,
    "/": TokenType.FORWARD_SLASH,
    ":": TokenType.COLON,
    ";": TokenType.SEMICOLON,
    "<": TokenType.LESS_THAN,
    "=": TokenType.EQUAL,
    ">": TokenType.GREATER_THAN,
    "?": TokenType.QUESTION,
    "@": TokenType.AT,
    "\\": TokenType.BACKSLASH,
    "^": TokenType.CARET,
    "_": TokenType.UNDERSCORE,
    "`": TokenType.BACKTICK,
    "|": TokenType.PIPE,
    "~": TokenType.TILDE,
    "(": TokenType.OPEN_PAREN,
    ")": TokenType.CLOSE_PAREN,
    "[": TokenType.OPEN_BRACKET,
    "]": TokenType.CLOSE_BRACKET,
    "{": TokenType.OPEN_BRACE,
    "}": TokenType.CLOSE_BRACE,
}

BULLET_TYPES: frozenset[TokenType] = frozenset(
    {
        TokenType.ASTERISK,
        TokenType.PLUS,
        TokenType.HYPHEN,
        TokenType.BULLET,
        TokenType.TRIANGULAR_BULLET,
        TokenType.HYPHEN_BULLET,
    }
)

ADORNMENT_TYPES: frozenset[TokenType] = frozenset(CHAR_TOKEN_TYPES[c] for c in ADORNMENT_CHARS)

REFERENCE_TYPES: frozenset[TokenType] = frozenset(
    {
        TokenType.WORD,
        TokenType.HYPHEN,
        TokenType.UNDERSCORE,
        TokenType.PERIOD,
        TokenType.COLON,
        TokenType.PLUS,
    }
)

BRACKET_PAIRS: dict[TokenType, TokenType] = {
    TokenType.OPEN_PAREN: TokenType.CLOSE_PAREN,
    TokenType.OPEN_BRACKET: TokenType.CLOSE_BRACKET,
    TokenType.OPEN_BRACE: TokenType.CLOSE_BRACE,
}


@dataclass(frozen=True, slots=True)
class Token:
    """A single token from the input stream.

    Attributes:
        type: The token type (from TokenType enum)
        value: The source text of the token; the character itself for
            single-character tokens, the whole run for WORD

    """

    type: TokenType
    value: str

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        if self.type is TokenType.WORD or self.type is TokenType.WHITESPACE:
            return f"Token({self.type.name}, {self.value!r})"
        return f"Token({self.type.name})"

    @classmethod
    def word(cls, text: str) -> Token:
        """Create a WORD token; words are never empty."""
        if not text:
            raise ValueError("word tokens cannot be empty")
        return cls(TokenType.WORD, text)

    def is_bullet(self) -> bool:
        """The token could represent a bullet."""
        return self.type in BULLET_TYPES

    def is_adornment(self) -> bool:
        """The token could be a section adornment character."""
        return self.type in ADORNMENT_TYPES

    def closes(self, opener: Token) -> bool:
        """If the token is the matching closing bracket for ``opener``."""
        return BRACKET_PAIRS.get(opener.type) is self.type

    def reference_member(self) -> bool:
        """If the token could be part of a reference name."""
        return self.type in REFERENCE_TYPES

    def numeral(self) -> int | None:
        """Value of any kind of numeral (arabic, then latin, then roman)."""
        if self.type is not TokenType.WORD:
            return None
        return numerals.parse_numeral(self.value)

    def arabic_numeral(self) -> int | None:
        if self.type is not TokenType.WORD:
            return None
        return numerals.parse_arabic(self.value)

    def latin_numeral(self) -> int | None:
        if self.type is not TokenType.WORD:
            return None
        return numerals.parse_latin(self.value)

    def roman_numeral(self) -> int | None:
        if self.type is not TokenType.WORD:
            return None
        return numerals.parse_roman(self.value)


NEWLINE = Token(TokenType.NEWLINE, "\n")

# Shared instances for every fixed single-character token.
_CHAR_TOKENS: dict[str, Token] = {c: Token(tt, c) for c, tt in CHAR_TOKEN_TYPES.items()}


def classify(char: str) -> Token | None:
    """Classify a single character.

    Args:
        char: One character of input

    Returns:
        The character's dedicated token, or None if it belongs to a word run.
    """
    if char == "\n":
        return NEWLINE
    if is_whitespace(char):
        return Token(TokenType.WHITESPACE, char)
    return _CHAR_TOKENS.get(char)

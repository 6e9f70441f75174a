"""
rstlex: streaming reStructuredText tokenizer

Turns an arbitrary character source into a flat stream of classified,
position-annotated tokens. Document structure (sections, lists, tables,
directives, inline markup) is left to downstream parsers.

Quick Start:
    >>> from rstlex import TextSource, TokenStream
    >>> for token, span in TokenStream(TextSource("example", "1. Item")):
    ...     print(span, token)
    example[0:0..0:1] Token(WORD, '1')
    example[0:1..0:2] Token(PERIOD)
    example[0:2..0:3] Token(WHITESPACE, ' ')
    example[0:3..0:7] Token(WORD, 'Item')

    >>> # Large inputs can be read incrementally
    >>> import sys
    >>> from rstlex import ReaderSource
    >>> stream = TokenStream(ReaderSource("stdin", sys.stdin.buffer))

Installation:
    pip install rstlex              # zero runtime dependencies
"""

from rstlex.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from rstlex.errors import (
    ExcerptUnavailableError,
    RstlexError,
    SourceConsumedError,
    SourceReadError,
)
from rstlex.lexer import LexerState, TokenStream, tokenize, tokenize_text
from rstlex.location import Location, SourceLocation, SourceSpan, Span
from rstlex.numerals import parse_arabic, parse_latin, parse_numeral, parse_roman
from rstlex.protocols import Locator, SpanLocator
from rstlex.source import ReaderSource, Source, SourceState, TextSource, from_reader, from_text
from rstlex.tokens import Token, TokenType, classify

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "LexConfig",
    "get_lex_config",
    "lex_config_context",
    "reset_lex_config",
    "set_lex_config",
    # Errors
    "ExcerptUnavailableError",
    "RstlexError",
    "SourceConsumedError",
    "SourceReadError",
    # Positions
    "Location",
    "Locator",
    "SourceLocation",
    "SourceSpan",
    "Span",
    "SpanLocator",
    # Sources
    "ReaderSource",
    "Source",
    "SourceState",
    "TextSource",
    "from_reader",
    "from_text",
    # Tokens
    "Token",
    "TokenType",
    "classify",
    "parse_arabic",
    "parse_latin",
    "parse_numeral",
    "parse_roman",
    # Lexer
    "LexerState",
    "TokenStream",
    "tokenize",
    "tokenize_text",
]

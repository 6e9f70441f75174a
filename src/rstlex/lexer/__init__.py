"""Streaming tokenizer for rstlex.

This package turns a character Source into a flat stream of classified,
position-annotated tokens.

Architecture:
lexer/
├── __init__.py          # Re-exports TokenStream, LexerState, tokenize
├── core.py              # TokenStream (one-token lookahead state machine)
├── chars.py             # PositionedChars (char + SourceLocation pairs)
└── modes.py             # LexerState enum

Usage:
    >>> from rstlex.lexer import TokenStream
    >>> from rstlex.source import TextSource
    >>> for token, span in TokenStream(TextSource("doc", "Hi!")):
    ...     print(span, token)
doc[0:0..0:2] Token(WORD, 'Hi')
doc[0:2..0:3] Token(EXCLAMATION)

"""

from rstlex.lexer.chars import PositionedChars
from rstlex.lexer.core import TokenStream, tokenize, tokenize_text
from rstlex.lexer.modes import LexerState

__all__ = ["LexerState", "PositionedChars", "TokenStream", "tokenize", "tokenize_text"]

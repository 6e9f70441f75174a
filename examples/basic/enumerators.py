"""Find enumerated list markers and decode their values."""

from rstlex import TextSource, TokenType, tokenize

text = """\
1. arabic
b. latin
iv. roman
C. latin wins over roman for single letters
"""

tokens = [token for token, _ in tokenize(TextSource("list.rst", text))]
for word, period in zip(tokens, tokens[1:]):
    if word.type is TokenType.WORD and period.type is TokenType.PERIOD:
        value = word.numeral()
        if value is not None:
            print(f"{word.value!r} -> {value}")

"""Tokenize a sample string, then standard input, printing every span."""

import sys

from rstlex import ReaderSource, TextSource, TokenStream

example = "An example: 'this' has some punctuation (special chars)"
for token, span in TokenStream(TextSource("example", example)):
    print(f"{span}: {span.excerpt()!r} = {token!r}")

for token, span in TokenStream(ReaderSource("stdin", sys.stdin.buffer)):
    print(f"{span}: {token!r}")

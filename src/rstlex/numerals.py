"""Numeral decoders for enumerated list markers.

Enumerators in reStructuredText can be arabic (``3.``), alphabetic (``c.``)
or roman (``iii.``). Each decoder takes the text of a single word and
returns its value, or ``None`` when the text is not that kind of numeral.
Zero is never a valid enumerator value.

Thread Safety:
Pure functions over immutable module-level tables.

"""

from __future__ import annotations

# Largest value an enumerator may take (unsigned 64-bit).
MAX_NUMERAL = 2**64 - 1

# (symbol, skip, value) ordered from largest to smallest value. After a
# symbol matches, matching resumes ``skip`` rows past it so that symbols
# which cannot legally follow it are never tried (no "CMCM", no "IVI").
# A skip of 0 resumes at the matched row so additive symbols may repeat.
ROMAN_NUMERALS: tuple[tuple[str, int, int], ...] = (
    ("MMMM", 2, 4000),
    ("M", 0, 1000),
    ("CM", 4, 900),
    ("D", 1, 500),
    ("CD", 2, 400),
    ("C", 0, 100),
    ("XC", 4, 90),
    ("L", 1, 50),
    ("XL", 2, 40),
    ("X", 0, 10),
    ("IX", 4, 9),
    ("V", 1, 5),
    ("IV", 2, 4),
    ("I", 0, 1),
)

_MAX_REPEATS = 3


def parse_arabic(text: str) -> int | None:
    """Decode a base-10 numeral such as ``"12"``.

    Only ASCII digits are accepted; zero and values beyond MAX_NUMERAL are
    rejected.
    """
    if not (text.isascii() and text.isdigit()):
        return None
    value = int(text)
    if value == 0 or value > MAX_NUMERAL:
        return None
    return value


def parse_latin(text: str) -> int | None:
    """Decode a single ASCII letter by alphabet position (A/a = 1)."""
    if len(text) != 1 or not (text.isascii() and text.isalpha()):
        return None
    return ord(text.upper()) - ord("A") + 1


def parse_roman(text: str) -> int | None:
    """Decode a roman numeral such as ``"XIV"`` or ``"mcmxcix"``.

    A word that is entirely lowercase is uppercased first. Any other word is
    matched as written, so mixed case such as ``"McM"`` only decodes when
    its uppercase letters alone form the whole numeral.

    Returns:
        The value, or None if any text is left unmatched, a symbol repeats
        more than three times, a subtractive symbol repeats, or the total
        is zero.
    """
    if all("a" <= c <= "z" for c in text):
        text = text.upper()

    start = 0
    total = 0
    pos = 0
    last: str | None = None
    repeats = 0

    while pos < len(text):
        for index in range(start, len(ROMAN_NUMERALS)):
            numeral, skip, value = ROMAN_NUMERALS[index]
            if text.startswith(numeral, pos):
                break
        else:
            return None

        if numeral == last:
            if skip:
                return None
            repeats += 1
            if repeats > _MAX_REPEATS:
                return None
        else:
            last = numeral
            repeats = 1

        total += value
        pos += len(numeral)
        start = index + skip

    return total or None


def parse_numeral(text: str) -> int | None:
    """Decode any numeral: arabic, then latin, then roman.

    The order matters for single letters. ``"C"`` is the third letter before
    it is a hundred, so it decodes to 3.
    """
    for parse in (parse_arabic, parse_latin, parse_roman):
        value = parse(text)
        if value is not None:
            return value
    return None

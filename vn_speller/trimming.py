"""
Sign and decimal split, plus removal of non-significant zeros.

    "-00123.4500"  →  NumberData(is_negative=True, integral="123", fractional="45")
    "7.000"        →  fractional ""  (or "0" with keep_one_zero_when_all_zeros)

The integral part never comes back empty; "000" trims to "0".
"""

from __future__ import annotations

from .lexicon import Lexicon
from .models import NumberData

ZERO = "0"
MINUS = "-"


# ─── Trim Helpers ───────────────────────────────────────────────────


def trim_left(text: str, char: str = ZERO) -> str:
    """Drop leading `char`s, keeping one `char` if nothing else is left.

    trim_left("000123") → "123"
    trim_left("000")    → "0"
    """
    return text.lstrip(char) or char


def trim_right(text: str, char: str = ZERO, keep_one: bool = False) -> str:
    """Drop trailing `char`s.

    An input made only of `char`s becomes "" (or a single `char` when
    keep_one is set).
    """
    stripped = text.rstrip(char)
    if not stripped and keep_one:
        return char
    return stripped


def trim_redundant_zeros(number: str, lexicon: Lexicon) -> str:
    """Trim a clean (unsigned) number string at string level.

    The decimal point survives even when the fraction is dropped:
    "000.000" → "0." by default, "0.0" with keep_one_zero_when_all_zeros.
    """
    point = lexicon.decimal_point
    if point not in number:
        return trim_left(number)
    integral, fractional = number.split(point, 1)
    return (
        trim_left(integral)
        + point
        + trim_right(fractional, keep_one=lexicon.keep_one_zero_when_all_zeros)
    )


# ─── Parser ─────────────────────────────────────────────────────────


def parse_number_data(clean: str, lexicon: Lexicon) -> NumberData:
    """Split a clean number string into sign, integral and fractional digits.

    A custom lexicon.parser gets the first go; returning None hands the
    string back to the built-in split below.
    """
    if lexicon.parser is not None:
        custom = lexicon.parser(clean, lexicon)
        if custom is not None:
            return custom

    is_negative = clean.startswith(MINUS)
    if is_negative:
        clean = clean[len(MINUS):]

    integral, _, fractional = clean.partition(lexicon.decimal_point)

    return NumberData(
        is_negative=is_negative,
        integral_part=trim_left(integral),
        fractional_part=trim_right(
            fractional, keep_one=lexicon.keep_one_zero_when_all_zeros
        )
        if fractional
        else "",
    )

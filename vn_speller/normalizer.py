"""
Input normalization — turns whatever the caller handed us into clean digits.

Accepted inputs:
    "1,234.5"        → "1234.5"    (thousand separators and spaces removed)
    "–42"            → "-42"       (en/em dash read as minus)
    1234             → "1234"      (ints of any size)
    1.23e-05         → "0.0000123" (floats expanded out of exponent form)
    -0.0             → "0"
    Decimal("1E+3")  → "1000"

Everything else is rejected here, and only here:
    FormatError        — None, "", unsupported types, inf / nan
    NumberFormatError  — text that is not  -?DIGITS(<point>DIGITS)?
"""

from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Union

from .exceptions import FormatError, NumberFormatError
from .lexicon import Lexicon

InputNumber = Union[str, int, float, Decimal]

# ─── Patterns ───────────────────────────────────────────────────────

_WHITESPACE = re.compile(r"[\s\u00a0]")
_DASHES = re.compile(r"[\u2013\u2014]")


def _number_pattern(decimal_point: str) -> re.Pattern[str]:
    # [0-9] rather than \d: \d would also accept non-ASCII digits
    return re.compile(r"^-?[0-9]+(?:" + re.escape(decimal_point) + r"[0-9]+)?$")


# ─── Public API ─────────────────────────────────────────────────────


def normalize_number_string(text: str, thousand_sign: str = ",") -> str:
    """Strip spaces, unify dashes and drop thousand separators."""
    cleaned = _WHITESPACE.sub("", text)
    cleaned = _DASHES.sub("-", cleaned)
    if thousand_sign:
        cleaned = cleaned.replace(thousand_sign, "")
    return cleaned


def clean_input_number(value: InputNumber, lexicon: Lexicon) -> str:
    """Validate an input and return its canonical digit string.

    Args:
        value: text, int, float or Decimal.
        lexicon: supplies the thousand separator and decimal point.

    Returns:
        "-?DIGITS" optionally followed by lexicon.decimal_point and DIGITS.

    Raises:
        FormatError: absent input, unsupported type, non-finite number.
        NumberFormatError: text that does not match the digit grammar.
    """
    if value is None or (isinstance(value, str) and value == ""):
        raise FormatError("Input cannot be null or undefined", _details(value))

    # bool is an int subclass but not a number anyone means to spell
    if isinstance(value, bool):
        raise FormatError("Input must be a number or numeric string", _details(value))

    if isinstance(value, int):
        return _int_to_plain(value)

    if isinstance(value, float):
        if not math.isfinite(value):
            raise FormatError("Input must be a finite number", _details(value))
        return _with_point(_float_to_plain(value), lexicon)

    if isinstance(value, Decimal):
        if not value.is_finite():
            raise FormatError("Input must be a finite number", _details(value))
        return _with_point(format(value, "f"), lexicon)

    if not isinstance(value, str):
        raise FormatError("Input must be a number or numeric string", _details(value))

    cleaned = normalize_number_string(value, lexicon.thousand_sign)
    if not _number_pattern(lexicon.decimal_point).match(cleaned):
        raise NumberFormatError("Invalid number format", _details(value))
    return cleaned


def expand_scientific(text: str) -> str:
    """Rewrite "1.23e-05" style text as plain decimal digits.

    The decimal point is shifted by the exponent, padding with zeros on
    either side as needed. Text without an exponent is returned unchanged.
    """
    lowered = text.lower()
    if "e" not in lowered:
        return text

    base, exponent_text = lowered.split("e", 1)
    exponent = int(exponent_text)
    negative = base.startswith("-")
    base = base.lstrip("+-")
    if exponent == 0:
        return ("-" if negative else "") + base

    if "." in base:
        point = base.index(".")
        coefficient = base.replace(".", "")
    else:
        point = len(base)
        coefficient = base
    point += exponent

    if point <= 0:
        result = "0." + "0" * -point + coefficient
    elif point >= len(coefficient):
        result = coefficient + "0" * (point - len(coefficient))
    else:
        result = coefficient[:point] + "." + coefficient[point:]

    return ("-" if negative else "") + result


# ─── Helpers ────────────────────────────────────────────────────────


def describe_input(value: object) -> str:
    """repr() for logs and error details, safe for ints of any size."""
    if isinstance(value, int) and not isinstance(value, bool):
        return _int_to_plain(value)
    return repr(value)


def _int_to_plain(value: int) -> str:
    # str(int) refuses more than sys.get_int_max_str_digits() digits
    return format(Decimal(value), "f")


def _float_to_plain(value: float) -> str:
    """Shortest round-tripping text for a float, without exponent or '.0'."""
    if value == 0:
        # -0.0 reads as plain zero
        value = 0.0
    text = expand_scientific(repr(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def _with_point(text: str, lexicon: Lexicon) -> str:
    """Swap Python's '.' for the configured decimal point."""
    if lexicon.decimal_point == ".":
        return text
    return text.replace(".", lexicon.decimal_point)


def _details(value: object) -> dict:
    return {"input": describe_input(value), "type": type(value).__name__}

"""
Spell one three-digit group (hundreds, tens, units).

Vietnamese reading rules applied here:
    "101" → một trăm lẻ một      zero tens spoken as "lẻ"
    "110" → một trăm mười        no "lẻ" before a non-zero tens digit
    "115" → một trăm mười lăm    5 after any non-zero tens → "lăm"
    "121" → một trăm hai mươi mốt   1 after tens 2..9 → "mốt"
    "124" → một trăm hai mươi tư    4 after tens 2..9 → "tư"
    "011" → không trăm mười một  (only once the number has started)

The 5 rule already fires after tens "1" ("mười lăm") while 1 and 4 keep
their plain form there ("mười một", "mười bốn").
"""

from __future__ import annotations

from .lexicon import Lexicon
from .models import SLOT_UNITS, Magnitude

ZERO = "0"

# Units digit → (Lexicon attribute of the tone-shifted word, tens digits that trigger it)
_TONE_SHIFTS: dict[str, tuple[str, frozenset[str]]] = {
    "1": ("one_tone_text", frozenset("23456789")),
    "4": ("four_tone_text", frozenset("23456789")),
    "5": ("five_tone_text", frozenset("123456789")),
}


# ─── Entry Point ────────────────────────────────────────────────────


def spell_triplet(
    tokens: list[str],
    lexicon: Lexicon,
    triplet: str,
    slot: Magnitude,
    leading: bool,
) -> bool:
    """Append the words for `triplet` to `tokens`.

    Args:
        tokens: output list, appended in place.
        lexicon: word source.
        triplet: exactly three digits.
        slot: BILLION, MILLION or THOUSAND; picks the trailing word
            (triệu / nghìn / nothing).
        leading: True while no non-zero digit has been spelled yet, which
            suppresses the "không trăm" / "lẻ" placeholders.

    Returns:
        Whether the number is still in its leading zeros afterwards.
    """
    hundreds, tens, units = triplet

    if not leading:
        spell_hundreds(tokens, lexicon, hundreds, tens, units)
        spell_tens(tokens, lexicon, tens, units)
        spell_units(tokens, lexicon, hundreds, tens, units, slot)
        return False

    if hundreds != ZERO:
        leading = False
        spell_hundreds(tokens, lexicon, hundreds, tens, units)
    if not leading or tens != ZERO:
        leading = False
        spell_tens(tokens, lexicon, tens, units)
    if not leading or units != ZERO:
        leading = False
        spell_units(tokens, lexicon, hundreds, tens, units, slot)
    return leading


# ─── Positional Rules ───────────────────────────────────────────────


def spell_hundreds(
    tokens: list[str], lexicon: Lexicon, hundreds: str, tens: str, units: str
) -> None:
    """'<digit> trăm', or nothing for a zero hundreds before "00"."""
    if hundreds == ZERO and tens == ZERO and units == ZERO:
        return
    tokens.append(lexicon.digit(hundreds))
    tokens.append(lexicon.unit(Magnitude.HUNDRED))


def spell_tens(tokens: list[str], lexicon: Lexicon, tens: str, units: str) -> None:
    if tens == ZERO:
        if units != ZERO:
            tokens.append(lexicon.odd_text)
    elif tens == "1":
        tokens.append(lexicon.ten_text)
    else:
        tokens.append(lexicon.digit(tens))
        tokens.append(lexicon.unit(Magnitude.TEN))


def spell_units(
    tokens: list[str],
    lexicon: Lexicon,
    hundreds: str,
    tens: str,
    units: str,
    slot: Magnitude,
) -> None:
    """Units digit (tone-shifted where needed), then the slot's trailing word.

    A zero units digit still closes the triplet with its trailing word
    ("năm trăm nghìn") unless the whole triplet is zero.
    """
    if units == ZERO:
        if tens != ZERO or hundreds != ZERO:
            _append_trailing_unit(tokens, lexicon, slot)
        return

    tokens.append(units_word(lexicon, tens, units))
    _append_trailing_unit(tokens, lexicon, slot)


def units_word(lexicon: Lexicon, tens: str, units: str) -> str:
    """The word for a non-zero units digit given the tens digit before it."""
    shift = _TONE_SHIFTS.get(units)
    if shift is not None:
        attribute, triggers = shift
        if tens in triggers:
            return getattr(lexicon, attribute)
    return lexicon.digit(units)


def _append_trailing_unit(tokens: list[str], lexicon: Lexicon, slot: Magnitude) -> None:
    trailing = SLOT_UNITS[slot]
    # the last slot of a super-group carries no word of its own
    if trailing is not Magnitude.UNIT:
        tokens.append(lexicon.unit(trailing))

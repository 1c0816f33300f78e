"""
Pydantic models for parsed numbers and positional indices.

NumberData is produced once per spelling call and thrown away after
assembly. Its digit strings are checked at the boundary so the grouper
and speller can index them without further validation.
"""

from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel, Field


# ─── Magnitude Indices ──────────────────────────────────────────────


class Magnitude(IntEnum):
    """Index into Lexicon.unit_names.

    BILLION..THOUSAND double as the slot of a triplet inside a 9-digit
    super-group (slot 0 is the "triệu" triplet, slot 2 the plain units).
    HUNDRED..UNIT are the positions inside a single triplet.
    """

    BILLION = 0
    MILLION = 1
    THOUSAND = 2
    HUNDRED = 3
    TEN = 4
    UNIT = 5


# Number of triplet slots in one super-group
GROUP_SLOTS = 3

# Number of digits in one triplet
TRIPLET_SIZE = 3

# Trailing word for a triplet, keyed by its slot in the super-group
SLOT_UNITS: dict[Magnitude, Magnitude] = {
    Magnitude.BILLION: Magnitude.MILLION,
    Magnitude.MILLION: Magnitude.THOUSAND,
    Magnitude.THOUSAND: Magnitude.UNIT,
}


# ─── Parse Result ───────────────────────────────────────────────────


class NumberData(BaseModel):
    """Sign, integral digits and fractional digits of one input."""

    is_negative: bool = False
    integral_part: str = Field(default="0", pattern=r"^[0-9]+$")
    fractional_part: str = Field(default="", pattern=r"^[0-9]*$")

    @property
    def has_fraction(self) -> bool:
        return bool(self.fractional_part)

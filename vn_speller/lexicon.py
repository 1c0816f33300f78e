"""
The Lexicon — every word and formatting flag the speller uses.

A Lexicon is a frozen pydantic model. There is no module-level default
instance: default_lexicon() builds a fresh one, and build_lexicon() applies
a sparse set of overrides on top of the defaults without touching them.

    >>> build_lexicon({"separator": "-", "point_text": "phẩy"}).separator
    '-'
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .models import Magnitude, NumberData

logger = logging.getLogger(__name__)


# ─── Default Word Tables ────────────────────────────────────────────

DEFAULT_DIGIT_NAMES: dict[str, str] = {
    "0": "không",
    "1": "một",
    "2": "hai",
    "3": "ba",
    "4": "bốn",
    "5": "năm",
    "6": "sáu",
    "7": "bảy",
    "8": "tám",
    "9": "chín",
}

DEFAULT_UNIT_NAMES: dict[Magnitude, str] = {
    Magnitude.BILLION: "tỷ",
    Magnitude.MILLION: "triệu",
    Magnitude.THOUSAND: "nghìn",
    Magnitude.HUNDRED: "trăm",
    Magnitude.TEN: "mươi",
    Magnitude.UNIT: "",
}

# Fields merged key-by-key instead of replaced wholesale
_MAPPING_FIELDS = ("digit_names", "unit_names")

# Environment variable → (field name, is boolean)
ENV_OVERRIDES: dict[str, tuple[str, bool]] = {
    "VN_SPELLER_SEPARATOR": ("separator", False),
    "VN_SPELLER_POINT_TEXT": ("point_text", False),
    "VN_SPELLER_NEGATIVE_TEXT": ("negative_text", False),
    "VN_SPELLER_THOUSAND_SIGN": ("thousand_sign", False),
    "VN_SPELLER_DECIMAL_POINT": ("decimal_point", False),
    "VN_SPELLER_CAPITALIZE_INITIAL": ("capitalize_initial", True),
    "VN_SPELLER_KEEP_ONE_ZERO": ("keep_one_zero_when_all_zeros", True),
    "VN_SPELLER_CURRENCY_UNIT": ("currency_unit", False),
}

_TRUTHY = frozenset({"1", "true", "yes", "on"})


# ─── Lexicon Model ──────────────────────────────────────────────────


class Lexicon(BaseModel):
    """Immutable spelling configuration.

    Mapping fields must stay total: every digit '0'-'9' needs a name and
    every Magnitude needs a unit word (UNIT is normally empty). A Lexicon
    that breaks this is a programming error and fails at construction
    with pydantic.ValidationError.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Words
    digit_names: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_DIGIT_NAMES))
    unit_names: dict[Magnitude, str] = Field(default_factory=lambda: dict(DEFAULT_UNIT_NAMES))
    odd_text: str = "lẻ"
    ten_text: str = "mười"
    one_tone_text: str = "mốt"
    four_tone_text: str = "tư"
    five_tone_text: str = "lăm"

    # Punctuation
    separator: str = " "
    point_text: str = "chấm"
    negative_text: str = "âm"
    thousand_sign: str = ","
    decimal_point: str = "."

    # Formatting
    capitalize_initial: bool = False
    keep_one_zero_when_all_zeros: bool = False
    currency_unit: Optional[str] = None

    # Custom parse strategy: (clean_string, lexicon) -> NumberData, or None
    # to fall through to the built-in parser.
    parser: Optional[Callable[..., Optional[NumberData]]] = None

    @field_validator("unit_names", mode="before")
    @classmethod
    def coerce_unit_keys(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return {_to_magnitude(k): v for k, v in value.items()}
        return value

    @field_validator("digit_names")
    @classmethod
    def check_digit_names(cls, value: dict[str, str]) -> dict[str, str]:
        missing = [d for d in DEFAULT_DIGIT_NAMES if d not in value]
        if missing:
            raise ValueError(f"digit_names is missing digits: {missing}")
        return value

    @field_validator("unit_names")
    @classmethod
    def check_unit_names(cls, value: dict[Magnitude, str]) -> dict[Magnitude, str]:
        missing = [m.name for m in Magnitude if m not in value]
        if missing:
            raise ValueError(f"unit_names is missing magnitudes: {missing}")
        return value

    @model_validator(mode="after")
    def check_marks(self) -> Lexicon:
        if len(self.decimal_point) != 1:
            raise ValueError("decimal_point must be exactly one character")
        if len(self.thousand_sign) > 1:
            raise ValueError("thousand_sign must be at most one character")
        if self.decimal_point == self.thousand_sign:
            raise ValueError("decimal_point and thousand_sign must differ")
        return self

    # ─── Lookups ────────────────────────────────────────────────────

    def digit(self, char: str) -> str:
        return self.digit_names[char]

    def unit(self, magnitude: Magnitude) -> str:
        return self.unit_names[magnitude]

    # ─── Builders ───────────────────────────────────────────────────

    def with_overrides(self, overrides: Mapping[str, Any] | None) -> Lexicon:
        """Return a new Lexicon with only the given fields replaced.

        digit_names and unit_names are merged key-by-key, so a caller can
        rename a single unit without restating the others. Unknown keys
        are rejected.
        """
        if not overrides:
            return self

        fields = {name: getattr(self, name) for name in type(self).model_fields}
        for key, value in overrides.items():
            if key in _MAPPING_FIELDS and isinstance(value, Mapping):
                merged = dict(fields[key])
                merged.update(value)
                fields[key] = merged
            else:
                fields[key] = value
        return type(self)(**fields)


def _to_magnitude(key: Any) -> Any:
    """Accept Magnitude members, their ints, numeric strings or names."""
    if isinstance(key, Magnitude):
        return key
    if isinstance(key, str):
        if key.isdigit():
            return Magnitude(int(key))
        if key.upper() in Magnitude.__members__:
            return Magnitude[key.upper()]
    if isinstance(key, int) and not isinstance(key, bool):
        return Magnitude(key)
    return key


# ─── Public API ─────────────────────────────────────────────────────


def default_lexicon() -> Lexicon:
    """A fresh Lexicon holding the standard Vietnamese vocabulary."""
    return Lexicon()


def build_lexicon(overrides: Lexicon | Mapping[str, Any] | None = None) -> Lexicon:
    """Resolve a full Lexicon from either a Lexicon or sparse overrides."""
    if isinstance(overrides, Lexicon):
        return overrides
    return default_lexicon().with_overrides(overrides)


def env_overrides(environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    """Collect Lexicon overrides from VN_SPELLER_* environment variables."""
    env = os.environ if environ is None else environ
    overrides: dict[str, Any] = {}
    for var, (field, is_bool) in ENV_OVERRIDES.items():
        raw = env.get(var)
        if raw is None:
            continue
        overrides[field] = raw.strip().lower() in _TRUTHY if is_bool else raw
        logger.debug("Lexicon override from %s: %s=%r", var, field, overrides[field])
    return overrides


def lexicon_from_env(environ: Mapping[str, str] | None = None) -> Lexicon:
    """Build a Lexicon from the defaults plus environment overrides."""
    return build_lexicon(env_overrides(environ))

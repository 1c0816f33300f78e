"""
Spelling pipeline — orchestrates one number from input to text.

Flow:
  ┌─────────────┐
  │    input    │   str / int / float / Decimal
  └──────┬──────┘
  ┌──────▼──────┐
  │  Normalizer │   ← FormatError / NumberFormatError raised here only
  └──────┬──────┘
  ┌──────▼──────┐
  │ Sign, point │   ← zero trimming, custom parser hook
  │  & trimming │
  └──────┬──────┘
  ┌──────▼──────┐
  │   Grouper   │   ← integral and fractional parts separately
  │ + Triplets  │
  └──────┬──────┘
  ┌──────▼──────┐
  │  Assembler  │   ← sign word, "chấm", separator, capital, currency
  └─────────────┘

Every call is pure: it reads its Lexicon and returns a string.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Optional

from .exceptions import SpellingError
from .grouping import spell_part
from .lexicon import Lexicon, build_lexicon, default_lexicon
from .models import NumberData
from .normalizer import InputNumber, clean_input_number, describe_input
from .trimming import parse_number_data

logger = logging.getLogger(__name__)


def assemble(
    number: NumberData,
    integral_tokens: list[str],
    fractional_tokens: list[str],
    lexicon: Lexicon,
) -> str:
    """Join spelled parts into the final text."""
    tokens: list[str] = []
    if number.is_negative:
        tokens.append(lexicon.negative_text)
    tokens.extend(integral_tokens)
    if fractional_tokens:
        tokens.append(lexicon.point_text)
        tokens.extend(fractional_tokens)

    text = lexicon.separator.join(tokens)
    if lexicon.capitalize_initial and text:
        text = text[0].upper() + text[1:]
    if lexicon.currency_unit:
        text = f"{text} {lexicon.currency_unit}"
    return text


def spell_with_config(config: Lexicon | Mapping[str, Any] | None, value: InputNumber) -> str:
    """Spell `value` in Vietnamese.

    Args:
        config: a Lexicon, or a mapping of overrides applied to the defaults.
        value: text, int, float or Decimal.

    Raises:
        FormatError: absent input, unsupported type, non-finite number.
        NumberFormatError: malformed numeric text.
    """
    lexicon = build_lexicon(config)

    clean = clean_input_number(value, lexicon)
    number = parse_number_data(clean, lexicon)

    integral_tokens = spell_part(number.integral_part, lexicon)
    fractional_tokens: list[str] = []
    if number.has_fraction:
        fractional_tokens = spell_part(number.fractional_part, lexicon)

    return assemble(number, integral_tokens, fractional_tokens, lexicon)


def spell(value: InputNumber) -> str:
    """Spell `value` with the default Lexicon.

        >>> spell("1,234")
        'một nghìn hai trăm ba mươi bốn'
    """
    return spell_with_config(default_lexicon(), value)


def spell_or_default(
    value: InputNumber,
    overrides: Lexicon | Mapping[str, Any] | None = None,
    fallback: Optional[str] = None,
) -> str:
    """Like spell_with_config, but return `fallback` instead of raising.

    Without a fallback the error propagates. The Lexicon is built before
    the guarded call, so a bad configuration always raises.
    """
    lexicon = build_lexicon(overrides)
    try:
        return spell_with_config(lexicon, value)
    except SpellingError as e:
        if fallback is None:
            raise
        logger.warning(
            "%s: %s (input=%s, type=%s)",
            type(e).__name__,
            e,
            describe_input(value),
            type(value).__name__,
        )
        return fallback
    except Exception:
        if fallback is None:
            raise
        logger.error(
            "Unexpected error spelling input %s (type=%s)",
            describe_input(value),
            type(value).__name__,
            exc_info=True,
        )
        return fallback

#!/usr/bin/env python3
"""
VN Speller — Entry Point
========================

Spells numbers given on the command line, or walks through a demo table.

Usage:
    python main.py                       # Demo of the reading rules
    python main.py 1234 -5.06 "1 000"    # Spell each argument
    VN_SPELLER_POINT_TEXT=phẩy python main.py 1.5
"""

from __future__ import annotations

import logging
import sys

from dotenv import load_dotenv

from vn_speller.exceptions import SpellingError
from vn_speller.lexicon import Lexicon, lexicon_from_env
from vn_speller.speller import spell_with_config


# ─── Demo Table ──────────────────────────────────────────────────────

DEMO_SECTIONS: list[tuple[str, list[str]]] = [
    ("Basic usage", ["0", "123", "1,234"]),
    ("Special cases", ["101", "115", "21", "24", "25"]),
    ("Negative numbers", ["-1234"]),
    ("Decimal numbers", ["123.45", "123.45000"]),
    ("Large numbers", [
        "1,000,000,000",
        "1,234,567,890",
        "110,000,031,000,001",
        "20,000,000,000,000,000,000",
    ]),
]

CUSTOM_OVERRIDES = {"separator": "-", "point_text": "phẩy"}


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printer Helpers ─────────────────────────────────────────


def _print_row(raw: str, lexicon: Lexicon) -> bool:
    """Print one input and its reading. Returns False if it was rejected."""
    try:
        text = spell_with_config(lexicon, raw)
    except SpellingError as e:
        print(f"  {raw:>28}  {_RED}[{e.code}] {e}{_RESET}")
        return False
    print(f"  {raw:>28}  {_DIM}→{_RESET} {text}")
    return True


def print_demo(lexicon: Lexicon) -> int:
    """Print the demo table. Returns 0 (the demo inputs are all valid)."""
    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  VIETNAMESE NUMBER SPELLER{_RESET}")
    print(f"{'=' * _WIDTH}")

    for title, inputs in DEMO_SECTIONS:
        print(f"\n  {_BOLD}{title}{_RESET}")
        for raw in inputs:
            _print_row(raw, lexicon)

    print(f"\n  {_BOLD}Custom configuration{_RESET} {_DIM}{CUSTOM_OVERRIDES}{_RESET}")
    _print_row("123.45", lexicon.with_overrides(CUSTOM_OVERRIDES))

    print(f"\n{'=' * _WIDTH}\n")
    return 0


# ─── Main ────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Spell every argument, or run the demo when there are none.

    Returns:
        0 if every input was spelled, 1 otherwise.
    """
    args = sys.argv[1:] if argv is None else argv
    load_dotenv()
    lexicon = lexicon_from_env()

    if not args:
        return print_demo(lexicon)

    ok = True
    for raw in args:
        ok = _print_row(raw, lexicon) and ok
    return 0 if ok else 1


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    sys.exit(main())

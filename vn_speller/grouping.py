"""
Magnitude grouping — cut a digit string into triplets and super-groups.

Counting from the right, every triplet gets a slot inside a 9-digit
super-group:

    1 | 234 567 890 | 123 456 789
    ^   ^   ^   ^
    |   |   |   └─ slot THOUSAND (no trailing word)
    |   |   └───── slot MILLION  (… nghìn)
    |   └───────── slot BILLION  (… triệu)
    └───────────── partial leading super-group

Between super-groups the speller says "tỷ". Past three tiers the names
simply repeat, so 10^18 reads "một tỷ tỷ".
"""

from __future__ import annotations

from .lexicon import Lexicon
from .models import GROUP_SLOTS, TRIPLET_SIZE, Magnitude
from .triplet import spell_triplet

SuperGroup = list[tuple[Magnitude, str]]


def pad_to_triplets(digits: str) -> str:
    """Left-pad with zeros to a multiple of three digits."""
    return digits.rjust(len(digits) + (-len(digits) % TRIPLET_SIZE), "0")


def group_triplets(digits: str) -> list[SuperGroup]:
    """Split digits into super-groups of (slot, triplet), most significant first.

    Only the first super-group may be short; it starts at the slot that
    lines the last triplet up with THOUSAND.
    """
    padded = pad_to_triplets(digits)
    triplets = [padded[i:i + TRIPLET_SIZE] for i in range(0, len(padded), TRIPLET_SIZE)]

    groups: list[SuperGroup] = []
    current: SuperGroup = []
    slot = -len(triplets) % GROUP_SLOTS
    for triplet in triplets:
        current.append((Magnitude(slot), triplet))
        slot += 1
        if slot == GROUP_SLOTS:
            groups.append(current)
            current = []
            slot = 0
    return groups


def spell_part(digits: str, lexicon: Lexicon) -> list[str]:
    """Spell an unsigned digit string into tokens.

    "" gives [] (no fractional part). A string of zeros gives just the
    zero word. Leading zero triplets say nothing; once the first non-zero
    digit is out, every later triplet is read in full, so 1001 becomes
    "một nghìn không trăm lẻ một".
    """
    tokens: list[str] = []
    if not digits:
        return tokens

    leading = True
    for index, group in enumerate(group_triplets(digits)):
        if index > 0 and not leading:
            tokens.append(lexicon.unit(Magnitude.BILLION))
        for slot, triplet in group:
            leading = spell_triplet(tokens, lexicon, triplet, slot, leading)

    if leading:
        tokens.append(lexicon.digit("0"))
    return tokens

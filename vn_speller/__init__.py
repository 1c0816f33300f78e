"""
VN Speller — read numbers aloud in Vietnamese.

Architecture: Normalize → Trim → Group into triplets → Spell → Assemble
Philosophy:  Digits in, words out. No floats past the front door.
"""

from .exceptions import FormatError, NumberFormatError, SpellingError
from .lexicon import Lexicon, build_lexicon, default_lexicon, lexicon_from_env
from .models import Magnitude, NumberData
from .normalizer import clean_input_number, normalize_number_string
from .speller import spell, spell_or_default, spell_with_config
from .trimming import trim_redundant_zeros

__version__ = "1.0.0"

__all__ = [
    "FormatError",
    "Lexicon",
    "Magnitude",
    "NumberData",
    "NumberFormatError",
    "SpellingError",
    "build_lexicon",
    "clean_input_number",
    "default_lexicon",
    "lexicon_from_env",
    "normalize_number_string",
    "spell",
    "spell_or_default",
    "spell_with_config",
    "trim_redundant_zeros",
]

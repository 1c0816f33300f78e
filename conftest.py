"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))

from vn_speller.lexicon import ENV_OVERRIDES, Lexicon, build_lexicon, default_lexicon  # noqa: E402


@pytest.fixture
def lexicon() -> Lexicon:
    """The stock Vietnamese Lexicon."""
    return default_lexicon()


@pytest.fixture
def capitalized() -> Lexicon:
    """Default words with the first letter upper-cased."""
    return build_lexicon({"capitalize_initial": True})


@pytest.fixture(autouse=True)
def _clean_speller_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep VN_SPELLER_* variables from the developer's shell out of tests."""
    for var in ENV_OVERRIDES:
        monkeypatch.delenv(var, raising=False)

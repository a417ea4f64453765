"""Core test fixtures for diceroll tests."""

import os

import pytest

from diceroll.config import get_settings
from diceroll.dice.die import SequenceSource


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep DICEROLL_* variables from the outer environment out of tests.

    Clears the cached Settings before and after each test so env changes
    made with monkeypatch are picked up.
    """
    for key in list(os.environ):
        if key.upper().startswith("DICEROLL_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def min_source() -> SequenceSource:
    """Source that always rolls 1."""
    return SequenceSource([1])


"""Shared fixtures for wordshard tests."""

import os
import random

import pytest

from wordshard.config import get_settings


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch):
    """Clear cached settings and any WORDSHARD_* environment around each test."""
    for key in list(os.environ):
        if key.startswith("WORDSHARD_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def rng():
    """Deterministic random source for property-style tests."""
    return random.Random(0x5EED)

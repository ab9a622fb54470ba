"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def _default_settings(monkeypatch):
    """Keep a developer's .env or shell settings out of the suite."""
    monkeypatch.delenv("NUMBER_WORDS_DEFAULT_LANG", raising=False)
    monkeypatch.delenv("NUMBER_WORDS_LOG_LEVEL", raising=False)

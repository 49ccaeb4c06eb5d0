"""Shared pytest fixtures."""

import pytest

from sentence_checker.config import get_settings
from sentence_checker.logging_config import configure_logging
from sentence_checker.validators import SentenceValidator


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Keep env-driven settings from leaking between tests."""
    for var in ("INPUT_FILE", "LOG_LEVEL", "DEBUG"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    configure_logging(level="debug")
    yield
    get_settings.cache_clear()


@pytest.fixture
def validator() -> SentenceValidator:
    return SentenceValidator()


@pytest.fixture
def write_input(tmp_path):
    """Write text to an input file and return its path."""

    def _write(text: str, name: str = "input.txt"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write

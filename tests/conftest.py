"""Shared pytest fixtures."""
from pathlib import Path

import pytest


FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_path() -> Path:
    """Text file with 13 words over three non-empty lines."""
    return FIXTURES_DIR / "sample.txt"


@pytest.fixture
def dictionary_path() -> Path:
    return FIXTURES_DIR / "dictionary.txt"


@pytest.fixture
def extra_dictionary_path() -> Path:
    return FIXTURES_DIR / "extra_dictionary.txt"


@pytest.fixture
def write_text(tmp_path):
    """Write text to a file under tmp_path and return its path."""
    def _write(content: str, name: str = "input.txt") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write

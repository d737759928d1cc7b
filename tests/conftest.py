"""Pytest fixtures and utilities for jsonprep tests."""

import tempfile
from pathlib import Path
from typing import Generator

import pytest


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def isolated_config(temp_dir: Path, monkeypatch) -> Path:
    """Point settings lookup at a temp home so user files never leak in."""
    home = temp_dir / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("JSONPREP_CONFIG", raising=False)
    return home


def all_two_way_splits(text: str) -> Generator[list[str], None, None]:
    """Yield every partition of ``text`` into two chunks."""
    for i in range(len(text) + 1):
        yield [text[:i], text[i:]]


def all_three_way_splits(text: str) -> Generator[list[str], None, None]:
    """Yield every partition of ``text`` into three chunks."""
    for i in range(len(text) + 1):
        for j in range(i, len(text) + 1):
            yield [text[:i], text[i:j], text[j:]]

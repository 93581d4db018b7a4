"""Pytest configuration and shared fixtures for tests."""

from __future__ import annotations

import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest


SAMPLE_PGN = """[Event "Casual Game"]
[Site "Test"]
[Date "2024.01.05"]
[White "TestUser"]
[Black "Opponent1"]
[Result "1-0"]

1. e4 e5 2. Nf3 Nc6 3. Bb5 a6 4. Ba4 Nf6 1-0

[Event "Casual Game"]
[Site "Test"]
[Date "2024.01.06"]
[White "Opponent2"]
[Black "testuser"]
[Result "0-1"]

1. e4 c5 2. Nf3 d6 3. d4 cxd4 4. Nxd4 Nf6 5. Nc3 a6 0-1

[Event "Casual Game"]
[Site "Test"]
[Date "2024.01.07"]
[White "Opponent3"]
[Black "TestUser"]
[Result "1/2-1/2"]

1. d4 d5 2. c4 dxc4 1/2-1/2

[Event "Casual Game"]
[Site "Test"]
[Date "2024.01.08"]
[White "TestUser"]
[Black "Opponent4"]
[Result "*"]

1. e4 *
"""


@pytest.fixture
def temp_dir() -> Generator[Path]:
    """Provide a temporary directory that cleans up after the test."""
    with tempfile.TemporaryDirectory() as tmp:
        yield Path(tmp)


@pytest.fixture
def sample_pgn() -> str:
    return SAMPLE_PGN


@pytest.fixture
def sample_pgn_path(temp_dir: Path) -> Path:
    path = temp_dir / "games.pgn"
    path.write_text(SAMPLE_PGN, encoding="utf-8")
    return path


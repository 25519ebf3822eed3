"""Shared pytest fixtures for test modules."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Generator
    from pathlib import Path

from tests.helpers import annotation, pgn_game


@pytest.fixture(autouse=True)
def _reset_logging() -> Generator[None]:
    """Drop handlers installed by CLI invocations so they don't outlive captured streams."""
    yield
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.WARNING)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Isolate tests from CARA__ env vars and any cara.yaml in the working directory."""
    for key in list(os.environ):
        if key.startswith("CARA__"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def sample_pgn(tmp_path: Path) -> Path:
    """Three games exercising the resign rule, the draw rule and neither.

    Game 1 (0-1): first mover's eval sits at or below -2.50 on plies 2, 4 and 6.
    Game 2 (1/2-1/2): every eval is 0.00.
    Game 3 (1-0): second mover drops below -2.50 only twice.
    """
    game1 = [
        annotation(10, 1000),
        annotation(20, 1000),
        annotation(-300, 1000),
        annotation(300, 1000),
        annotation(-300, 1000),
        annotation(310, 1000),
        annotation(-350, 1000),
        annotation(350, 1000),
    ]
    game2 = [annotation(0, 500)] * 6
    game3 = [annotation(100, 250), annotation(-260, 250), annotation(200, 250), annotation(-270, 250)]
    path = tmp_path / "sample.pgn"
    path.write_text(pgn_game("0-1", game1) + pgn_game("1/2-1/2", game2) + pgn_game("1-0", game3))
    return path

from __future__ import annotations

import random
import sys
from pathlib import Path

# Ensure local src importable before we import salvo
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

import pytest

from salvo.session import GameSession
from salvo.turns import Player

# One horizontal piece per fleet length, each on its own row.
P1_LAYOUT = [
    [(0, 0), (0, 1)],
    [(2, 0), (2, 1), (2, 2)],
    [(4, 0), (4, 1), (4, 2), (4, 3)],
    [(6, 0), (6, 1), (6, 2), (6, 3), (6, 4)],
]
# Same lengths laid out vertically for player two.
P2_LAYOUT = [
    [(0, 7), (1, 7)],
    [(0, 5), (1, 5), (2, 5)],
    [(0, 3), (1, 3), (2, 3), (3, 3)],
    [(3, 0), (4, 0), (5, 0), (6, 0), (7, 0)],
]


def cells_of(layout: list[list[tuple[int, int]]]) -> list[tuple[int, int]]:
    return [c for piece in layout for c in piece]


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def empty_session() -> GameSession:
    return GameSession(size=8, fleet=[2, 3, 4, 5])


@pytest.fixture
def session(empty_session: GameSession) -> GameSession:
    """A session with both default fleets placed at known positions."""
    for cells in P1_LAYOUT:
        empty_session.place_piece(Player.ONE, cells)
    for cells in P2_LAYOUT:
        empty_session.place_piece(Player.TWO, cells)
    return empty_session


@pytest.fixture
def p1_misses() -> list[tuple[int, int]]:
    """Cells on player one's board that hold no piece."""
    occupied = set(cells_of(P1_LAYOUT))
    return [(r, c) for r in range(8) for c in range(8) if (r, c) not in occupied]


@pytest.fixture
def p2_misses() -> list[tuple[int, int]]:
    occupied = set(cells_of(P2_LAYOUT))
    return [(r, c) for r in range(8) for c in range(8) if (r, c) not in occupied]

# views.py
"""
Read-only projections of boards
–––––––––––––––––––––––––––––––
• board_view()   – Board → rows of CellState (pieces optionally hidden)
• grid_rows()    – Board → [". . X o", …] text helper (pieces optionally revealed)
• encode_board() – Board → (2, size, size) float32 array of hits / misses
• GameStatus     – the per-viewer snapshot returned by GameSession.status()

A redacted view shows OCCUPIED cells as EMPTY, so the opponent learns nothing
about un-hit pieces.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from .board import CELL_SYMBOLS, Board, CellState, ReadOnlyBoard
from .turns import Player

logger = logging.getLogger(__name__)

BoardView = Tuple[Tuple[CellState, ...], ...]


def _public(state: CellState, reveal: bool) -> CellState:
    if not reveal and state is CellState.OCCUPIED:
        return CellState.EMPTY
    return state


def board_view(board: Board | ReadOnlyBoard, *, reveal: bool = False) -> BoardView:
    return tuple(tuple(_public(state, reveal) for state in row) for row in board.grid)


def grid_rows(board: Board | ReadOnlyBoard, *, reveal: bool = False) -> List[str]:
    logger.debug("grid_rows() start – reveal=%s", reveal)
    rows: list[str] = []
    for row in board.grid:
        rows.append(" ".join(CELL_SYMBOLS[_public(state, reveal)] for state in row))
    return rows


def encode_board(board: Board | ReadOnlyBoard) -> np.ndarray:
    """Encode guessed cells as a 2-channel float32 tensor.

    chan 0 = 1.0 at cells guessed *and hit*
    chan 1 = 1.0 at cells guessed *and missed*
    Un-guessed cells are zero in both channels, so the encoding is safe to
    hand to the opponent.
    """
    obs = np.zeros((2, board.size, board.size), dtype=np.float32)
    grid = np.array([[state.value for state in row] for row in board.grid])
    obs[0][grid == CellState.HIT.value] = 1.0
    obs[1][grid == CellState.MISS.value] = 1.0
    return obs


@dataclass(frozen=True)
class GameStatus:
    """What one viewer is allowed to see of a match.

    ``viewer`` is None for the full, unredacted view of both boards; in that
    case ``self_board`` belongs to player one and ``opponent_board`` to player
    two.
    """

    viewer: Optional[Player]
    self_board: BoardView
    opponent_board: BoardView
    turn: Player
    winner: Optional[Player]

    @property
    def over(self) -> bool:
        return self.winner is not None

    def to_dict(self) -> dict:
        def rows(view: BoardView) -> list[str]:
            return ["".join(CELL_SYMBOLS[state] for state in row) for row in view]

        return {
            "viewer": None if self.viewer is None else int(self.viewer),
            "self_board": rows(self.self_board),
            "opponent_board": rows(self.opponent_board),
            "turn": int(self.turn),
            "winner": None if self.winner is None else int(self.winner),
        }

"""Guess resolution against a single board."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Tuple

from .board import Board, CellState
from .coord_utils import Coordinate

logger = logging.getLogger(__name__)


class Outcome(str, enum.Enum):
    MISS = "miss"
    HIT = "hit"
    SUNK = "sunk"
    ALREADY_GUESSED = "already_guessed"


@dataclass(frozen=True)
class GuessOutcome:
    """Result of one guess.

    ``piece_id`` is set for HIT and SUNK and names the piece on the target
    board that was struck.
    """

    kind: Outcome
    coord: Coordinate
    piece_id: int | None = None

    @property
    def accepted(self) -> bool:
        """True if the guess changed the board (and therefore ends the turn)."""
        return self.kind is not Outcome.ALREADY_GUESSED

    def to_dict(self) -> dict:
        return {"result": self.kind.value, "coord": list(self.coord), "piece": self.piece_id}


def resolve_guess(board: Board, coord: Tuple[int, int]) -> GuessOutcome:
    """Process a guess at *coord* and return what happened.

    Raises OutOfBounds for coordinates off the grid. A repeated guess is
    reported as ALREADY_GUESSED and leaves the board untouched.
    """
    c = board.check_bounds(coord)
    cell = board.grid[c.row][c.col]
    if cell.guessed:
        return GuessOutcome(Outcome.ALREADY_GUESSED, c)

    if cell is CellState.OCCUPIED:
        board._set_cell(c, CellState.HIT)
        piece = board.piece_at(c)
        piece._register_hit(c)
        kind = Outcome.SUNK if piece.sunk else Outcome.HIT
        logger.debug("resolve_guess() – %s on piece %d at %s", kind.value, piece.piece_id, tuple(c))
        return GuessOutcome(kind, c, piece.piece_id)

    board._set_cell(c, CellState.MISS)
    logger.debug("resolve_guess() – miss at %s", tuple(c))
    return GuessOutcome(Outcome.MISS, c)

"""Game utilities re-exporting core engine classes for external import."""

from __future__ import annotations

from .board import Board, CellState, Piece, ReadOnlyBoard
from .coord_utils import Coordinate
from .errors import (
    AlreadyGuessed,
    GameAlreadyStarted,
    GameError,
    GameOver,
    InvalidCoordinate,
    InvalidLength,
    InvalidShape,
    NotYourTurn,
    OutOfBounds,
    Overlap,
    PlacementError,
    SetupIncomplete,
    SnapshotError,
)
from .resolver import GuessOutcome, Outcome
from .session import GameSession, GuessResult
from .turns import Player, TurnController
from .views import GameStatus

__all__ = [
    "AlreadyGuessed",
    "Board",
    "CellState",
    "Coordinate",
    "GameAlreadyStarted",
    "GameError",
    "GameOver",
    "GameSession",
    "GameStatus",
    "GuessOutcome",
    "GuessResult",
    "InvalidCoordinate",
    "InvalidLength",
    "InvalidShape",
    "NotYourTurn",
    "Outcome",
    "OutOfBounds",
    "Overlap",
    "Piece",
    "PlacementError",
    "Player",
    "ReadOnlyBoard",
    "SetupIncomplete",
    "SnapshotError",
    "TurnController",
]

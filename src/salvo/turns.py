"""Two-state turn controller."""

from __future__ import annotations

import enum

from . import config as _cfg


class Player(enum.IntEnum):
    ONE = 1
    TWO = 2

    @property
    def other(self) -> "Player":
        return Player.TWO if self is Player.ONE else Player.ONE


class TurnController:
    """Tracks which player holds the move.

    The session calls :meth:`advance` exactly once per accepted guess, hit or
    miss alike; rejected guesses leave the controller alone.
    """

    def __init__(self, first: Player | int | None = None):
        self.first = Player(_cfg.FIRST_PLAYER if first is None else first)
        self.current = self.first

    def __repr__(self) -> str:
        return f"TurnController(current={self.current.name})"

    def is_turn(self, player: Player | int) -> bool:
        return Player(player) is self.current

    def advance(self) -> Player:
        """Hand the move to the other player and return who is now to move."""
        self.current = self.current.other
        return self.current

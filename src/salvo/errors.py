"""Typed failures reported by the engine.

Every error is recoverable: the operation that raised it left the board,
pieces and turn exactly as they were. ``code`` is a stable identifier a
transport layer can map onto its own error replies.
"""

from __future__ import annotations


class GameError(Exception):
    """Base class for every rejection the engine reports."""

    code = "game_error"


class InvalidCoordinate(GameError, ValueError):
    """A coordinate is not a (row, col) pair of integers."""

    code = "invalid_coordinate"


class OutOfBounds(GameError):

    """A coordinate lies outside the board."""

    code = "out_of_bounds"


class InvalidLength(GameError):
    """A piece has a length the rules (or the remaining fleet) do not allow."""

    code = "invalid_length"


class InvalidShape(GameError):
    """A piece is not a run of distinct, co-linear, contiguous cells."""

    code = "invalid_shape"


class Overlap(GameError):
    """A piece would share a cell with a piece already on the board."""

    code = "overlap"


class AlreadyGuessed(GameError):
    """The targeted cell was guessed before."""

    code = "already_guessed"


class NotYourTurn(GameError):
    code = "not_your_turn"


class GameOver(GameError):
    code = "game_over"


class GameAlreadyStarted(GameError):
    """Pieces can no longer be placed once guessing has begun."""

    code = "game_already_started"


class SetupIncomplete(GameError):
    """A guess was attempted before both fleets were fully placed."""

    code = "setup_incomplete"


class PlacementError(GameError):
    """Random placement could not fit a piece on the board."""

    code = "placement_failed"


class SnapshotError(GameError, ValueError):
    """A snapshot could not be turned back into a session."""

    code = "bad_snapshot"

"""Two-player game session.

A :class:`GameSession` owns both players' boards and the turn controller for a
*single* match and is the only surface a host application needs:

place_piece(player, cells)    Put one piece of the player's fleet on their board.
place_random_pieces(player)   Fill the player's outstanding fleet at random.
guess(player, coord)          Guess a cell on the opponent's board.
status(viewer)                Per-viewer snapshot with the opponent's pieces hidden.
forfeit(player)               End the match in the opponent's favour.
snapshot() / restore(data)    Plain-dict state for persistence.

Each session is a single-writer resource. Mutations and reads run under one
re-entrant lock so that a host serving both players from different threads
never interleaves two guesses or observes a half-applied one.

The engine performs no I/O. Hosts learn about changes either from return
values or by registering an event subscriber with :meth:`subscribe`.
"""

from __future__ import annotations

import logging
import random
import threading
from collections import Counter
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from typing_extensions import Self

from . import config as _cfg
from .board import Board, Piece, ReadOnlyBoard
from .coord_utils import Coordinate
from .errors import (
    AlreadyGuessed,
    GameAlreadyStarted,
    GameOver,
    InvalidLength,
    NotYourTurn,
    SetupIncomplete,
)
from .events import Category, Event, Subscriber
from .placement import place_random_pieces, validate_piece
from .resolver import GuessOutcome, resolve_guess
from .turns import Player, TurnController
from .views import GameStatus, board_view

logger = logging.getLogger(__name__)

FLEET_DESTROYED = "fleet destroyed"


@dataclass(frozen=True)
class GuessResult:
    outcome: GuessOutcome
    winner: Optional[Player]


@dataclass(frozen=True)
class Move:
    """One accepted guess, as recorded in :attr:`GameSession.history`."""

    player: Player
    coord: Coordinate
    outcome: GuessOutcome


class GameSession:
    """State of a single two-player match."""

    def __init__(
        self,
        *,
        size: int | None = None,
        fleet: Sequence[int] | None = None,
        first: Player | int | None = None,
    ):
        self.size = size if size is not None else _cfg.BOARD_SIZE
        self.fleet: Tuple[int, ...] = tuple(_cfg.FLEET if fleet is None else fleet)
        for length in self.fleet:
            if not _cfg.MIN_PIECE_LENGTH <= length <= _cfg.MAX_PIECE_LENGTH:
                raise InvalidLength(
                    f"Fleet piece length {length} not in [{_cfg.MIN_PIECE_LENGTH}, {_cfg.MAX_PIECE_LENGTH}]"
                )

        # Each player gets their *own* board; guesses land on the other one.
        self._boards = {Player.ONE: Board(self.size), Player.TWO: Board(self.size)}
        self._turns = TurnController(first)
        self._lock = threading.RLock()

        self._winner: Player | None = None
        self.win_reason: str | None = None
        self._history: List[Move] = []
        self._subs: List[Subscriber] = []

    def __repr__(self) -> str:
        return (
            f"GameSession(size={self.size}, fleet={list(self.fleet)}, turn={self.turn.name}, "
            f"winner={None if self._winner is None else self._winner.name})"
        )

    # -------------------- read-only state --------------------
    @property
    def turn(self) -> Player:
        return self._turns.current

    @property
    def first(self) -> Player:
        return self._turns.first

    @property
    def winner(self) -> Player | None:
        return self._winner

    @property
    def started(self) -> bool:
        """True once the first guess has been accepted."""
        return bool(self._history)

    @property
    def ready(self) -> bool:
        """True once both fleets are fully placed."""
        with self._lock:
            return not self.outstanding(Player.ONE) and not self.outstanding(Player.TWO)

    @property
    def history(self) -> Tuple[Move, ...]:
        with self._lock:
            return tuple(self._history)

    def board(self, player: Player | int) -> ReadOnlyBoard:
        """Read-only view of *player*'s own board, unredacted.

        Changes go through :meth:`place_piece` and :meth:`guess` only.
        """
        return ReadOnlyBoard(self._boards[Player(player)])

    def outstanding(self, player: Player | int) -> List[int]:
        """Piece lengths *player* still has to place, longest first."""
        with self._lock:
            placed = Counter(len(p) for p in self._boards[Player(player)].pieces)
            missing = Counter(self.fleet) - placed
            return sorted(missing.elements(), reverse=True)

    # -------------------- events --------------------
    def subscribe(self, callback: Subscriber) -> None:
        """Register a callable that receives every :class:`Event` this session emits."""
        self._subs.append(callback)

    def _emit(self, event: Event) -> None:
        for sub in list(self._subs):
            try:
                sub(event)
            except Exception:  # noqa: BLE001
                logger.exception("Event subscriber failed for %s", event)

    # -------------------- setup --------------------
    def place_piece(self, player: Player | int, cells: Iterable[Tuple[int, int]]) -> Piece:
        """Place one piece of *player*'s fleet on their own board."""
        player = Player(player)
        with self._lock:
            if self.started or self._winner is not None:
                raise GameAlreadyStarted("Pieces cannot be placed after guessing has begun")
            board = self._boards[player]
            coords = validate_piece(board, cells)
            if len(coords) not in self.outstanding(player):
                raise InvalidLength(f"Player {int(player)} has no piece of length {len(coords)} left to place")
            piece = board._commit_piece(coords)
            logger.debug("Player %d placed piece %d: %s", player, piece.piece_id, [tuple(c) for c in coords])
            self._emit(
                Event(
                    Category.SETUP,
                    "placed",
                    {"player": int(player), "piece": piece.piece_id, "length": len(piece)},
                )
            )
            self._after_placement(player)
            return piece

    def place_random_pieces(self, player: Player | int, rng: random.Random | None = None) -> List[Piece]:
        """Place every outstanding piece of *player*'s fleet at random."""
        player = Player(player)
        with self._lock:
            if self.started or self._winner is not None:
                raise GameAlreadyStarted("Pieces cannot be placed after guessing has begun")
            pieces = place_random_pieces(self._boards[player], self.outstanding(player), rng=rng)
            for piece in pieces:
                self._emit(
                    Event(
                        Category.SETUP,
                        "placed",
                        {"player": int(player), "piece": piece.piece_id, "length": len(piece)},
                    )
                )
            self._after_placement(player)
            return pieces

    def _after_placement(self, player: Player) -> None:
        if not self.outstanding(player):
            logger.debug("Player %d fleet complete", player)
            self._emit(Event(Category.SETUP, "fleet_complete", {"player": int(player)}))

    # -------------------- gameplay --------------------
    def guess(self, player: Player | int, coord: Tuple[int, int]) -> GuessResult:
        """Guess *coord* on the opponent's board.

        Raises GameOver, SetupIncomplete, NotYourTurn, InvalidCoordinate,
        OutOfBounds or AlreadyGuessed without changing anything. An accepted guess always
        passes the move to the other player.
        """
        player = Player(player)
        with self._lock:
            if self._winner is not None:
                raise GameOver(f"Player {int(self._winner)} has already won")
            if not self.ready:
                raise SetupIncomplete("Both fleets must be placed before guessing")
            if not self._turns.is_turn(player):
                raise NotYourTurn(f"It is player {int(self.turn)}'s turn")

            target = self._boards[player.other]
            outcome = resolve_guess(target, coord)
            if not outcome.accepted:
                raise AlreadyGuessed(f"{tuple(outcome.coord)} was already guessed")

            self._turns.advance()
            self._history.append(Move(player, outcome.coord, outcome))
            self._emit(Event(Category.TURN, "guess", {"player": int(player), **outcome.to_dict()}))

            if target.all_sunk():
                self._conclude(player, reason=FLEET_DESTROYED)
            return GuessResult(outcome, self._winner)

    def forfeit(self, player: Player | int, *, reason: str = "forfeit") -> Player:
        """End the match with *player* conceding; returns the winner.

        Used by hosts that enforce their own move clocks or disconnect rules.
        """
        player = Player(player)
        with self._lock:
            if self._winner is not None:
                raise GameOver(f"Player {int(self._winner)} has already won")
            self._conclude(player.other, reason=reason)
            return player.other

    def _conclude(self, winner: Player, *, reason: str) -> None:
        self._winner = winner
        self.win_reason = reason
        shots = sum(1 for m in self._history if m.player is winner)
        logger.info("Player %d won (%s) after %d shots", winner, reason, shots)
        self._emit(Event(Category.TURN, "end", {"winner": int(winner), "reason": reason, "shots": shots}))

    # -------------------- views --------------------
    def status(self, viewer: Player | int | None = None) -> GameStatus:
        """Snapshot of the match as *viewer* may see it.

        The viewer's own board is shown in full; the opponent's board hides
        every piece cell that has not been hit. With no viewer both boards
        are returned unredacted.
        """
        with self._lock:
            if viewer is None:
                return GameStatus(
                    viewer=None,
                    self_board=board_view(self._boards[Player.ONE], reveal=True),
                    opponent_board=board_view(self._boards[Player.TWO], reveal=True),
                    turn=self.turn,
                    winner=self._winner,
                )
            viewer = Player(viewer)
            return GameStatus(
                viewer=viewer,
                self_board=board_view(self._boards[viewer], reveal=True),
                opponent_board=board_view(self._boards[viewer.other], reveal=False),
                turn=self.turn,
                winner=self._winner,
            )

    # -------------------- persistence --------------------
    def snapshot(self) -> dict[str, Any]:
        from .snapshot import to_dict

        return to_dict(self)

    @classmethod
    def restore(cls, data: dict[str, Any]) -> Self:
        from .snapshot import from_dict

        return from_dict(data)

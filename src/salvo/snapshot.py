"""Plain-data snapshots of a GameSession.

A snapshot is a JSON-compatible dict::

    {
      "version": 1,
      "size": 8,
      "fleet": [2, 3, 4, 5],
      "first": 1,
      "turn": 2,
      "winner": null,
      "win_reason": null,
      "boards": {
        "1": {"pieces": [[[0, 0], [0, 1]], ...], "grid": ["SS......", ...]},
        "2": {...}
      },
      "history": [[1, 3, 4, "hit", 2], ...]   # player, row, col, outcome, piece
    }

Grid rows use one character per cell ('.' empty, 'S' occupied, 'o' miss,
'X' hit). Restoring re-runs every piece through placement validation and
replays guessed cells through the resolver, so a snapshot that does not
describe a legal position is rejected with SnapshotError.
"""

from __future__ import annotations

import json
from collections import Counter
from typing import Any

from .board import CELL_SYMBOLS, SYMBOL_CELLS, Board, CellState
from .coord_utils import as_coord
from .errors import GameError, SnapshotError
from .placement import place_piece
from .resolver import GuessOutcome, Outcome, resolve_guess
from .session import FLEET_DESTROYED, GameSession, Move
from .turns import Player

VERSION = 1


def _board_dict(board: Board) -> dict[str, Any]:
    return {
        "pieces": [[list(c) for c in piece.cells] for piece in board.pieces],
        "grid": ["".join(CELL_SYMBOLS[state] for state in row) for row in board.grid],
    }


def to_dict(session: GameSession) -> dict[str, Any]:
    """Serialise *session* to a plain dict (taken under the session lock)."""
    with session._lock:
        return {
            "version": VERSION,
            "size": session.size,
            "fleet": list(session.fleet),
            "first": int(session.first),
            "turn": int(session.turn),
            "winner": None if session.winner is None else int(session.winner),
            "win_reason": session.win_reason,
            "boards": {str(int(p)): _board_dict(session._boards[p]) for p in Player},
            "history": [
                [int(m.player), m.coord.row, m.coord.col, m.outcome.kind.value, m.outcome.piece_id]
                for m in session._history
            ],
        }


def _restore_board(board: Board, data: dict[str, Any]) -> None:
    for cells in data["pieces"]:
        place_piece(board, [tuple(c) for c in cells])

    rows = data["grid"]
    if len(rows) != board.size or any(len(row) != board.size for row in rows):
        raise SnapshotError(f"Grid is not {board.size}x{board.size}")
    for r, row in enumerate(rows):
        for c, symbol in enumerate(row):
            state = SYMBOL_CELLS.get(symbol)
            if state is None:
                raise SnapshotError(f"Unknown cell symbol {symbol!r} at {(r, c)}")
            covered = board.piece_at((r, c)) is not None
            if covered != (state in (CellState.OCCUPIED, CellState.HIT)):
                raise SnapshotError(f"Cell {(r, c)} is {state.value!r} but pieces say otherwise")
            if state.guessed:
                resolve_guess(board, (r, c))


def _check_consistency(session: GameSession) -> None:
    """Reject positions that no sequence of legal moves could have produced."""
    history = session._history
    first = session.first
    for i, move in enumerate(history):
        if move.player is not (first if i % 2 == 0 else first.other):
            raise SnapshotError(f"History move {i} by player {int(move.player)} is out of turn")
    expected = first.other if len(history) % 2 else first
    if session.turn is not expected:
        raise SnapshotError(f"Turn is player {int(session.turn)} after {len(history)} moves, expected {int(expected)}")

    for player in Player:
        guessed = sum(1 for _, state in session._boards[player].cells() if state.guessed)
        targets = [m.coord for m in history if m.player is player.other]
        if len(set(targets)) != len(targets) or guessed != len(targets):
            raise SnapshotError(
                f"Player {int(player)} board has {guessed} guessed cells but history records {len(targets)}"
            )
        if guessed and not session.ready:
            raise SnapshotError("Guessed cells present while a fleet is incomplete")

    winner, reason = session.winner, session.win_reason
    if (winner is None) != (reason is None) or (reason is not None and not isinstance(reason, str)):
        raise SnapshotError(f"Winner {winner!r} and win reason {reason!r} do not agree")
    for player in Player:
        if session._boards[player].all_sunk() and (winner is not player.other or reason != FLEET_DESTROYED):
            raise SnapshotError(f"Player {int(player)} fleet is destroyed but the winner does not match")
    if winner is not None and reason == FLEET_DESTROYED and not session._boards[winner.other].all_sunk():
        raise SnapshotError(f"Player {int(winner.other)} still has pieces afloat")


def from_dict(data: dict[str, Any]) -> GameSession:
    """Rebuild a GameSession from :func:`to_dict` output."""
    try:
        if data.get("version") != VERSION:
            raise SnapshotError(f"Unsupported snapshot version {data.get('version')!r}")
        session = GameSession(size=int(data["size"]), fleet=data["fleet"], first=data["first"])
        for player in Player:
            board = session._boards[player]
            _restore_board(board, data["boards"][str(int(player))])
            if Counter(len(p) for p in board.pieces) - Counter(session.fleet):
                raise SnapshotError(f"Player {int(player)} has pieces outside the fleet {list(session.fleet)}")
            if session.outstanding(player) and data["history"]:
                raise SnapshotError(f"Player {int(player)} fleet incomplete in a started game")

        for p, row, col, kind, piece_id in data["history"]:
            player = Player(p)
            coord = as_coord((row, col))
            if not session._boards[player.other].cell_at(coord).guessed:
                raise SnapshotError(f"History guess {tuple(coord)} is not marked on the board")
            outcome = GuessOutcome(Outcome(kind), coord, piece_id)
            session._history.append(Move(player, coord, outcome))

        session._turns.current = Player(data["turn"])
        session._winner = None if data["winner"] is None else Player(data["winner"])
        session.win_reason = data.get("win_reason")
        _check_consistency(session)
    except SnapshotError:
        raise
    except (GameError, AttributeError, KeyError, TypeError, ValueError) as exc:
        raise SnapshotError(f"Malformed snapshot: {exc}") from exc
    return session


def dumps(session: GameSession, **kwargs: Any) -> str:
    return json.dumps(to_dict(session), **kwargs)


def loads(text: str) -> GameSession:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SnapshotError(f"Snapshot is not valid JSON: {exc}") from exc
    return from_dict(data)

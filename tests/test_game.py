"""Public re-exports used by host applications."""

from __future__ import annotations

import pytest

from salvo.game import CellState, GameError, GameSession, Outcome, Overlap, Player


def test_reexported_names_play_a_match() -> None:
    session = GameSession(size=8, fleet=[2])
    session.place_piece(Player.ONE, [(0, 0), (0, 1)])
    session.place_piece(Player.TWO, [(4, 4), (5, 4)])

    assert session.guess(Player.ONE, (4, 4)).outcome.kind is Outcome.HIT
    session.guess(Player.TWO, (7, 7))
    result = session.guess(Player.ONE, (5, 4))
    assert result.outcome.kind is Outcome.SUNK
    assert result.winner is Player.ONE
    assert session.status(Player.TWO).self_board[4][4] is CellState.HIT


def test_errors_share_a_base_class() -> None:
    session = GameSession(size=8, fleet=[2, 3])
    session.place_piece(Player.ONE, [(0, 0), (0, 1)])
    with pytest.raises(GameError) as info:
        session.place_piece(Player.ONE, [(0, 1), (1, 1), (2, 1)])
    assert isinstance(info.value, Overlap)
    assert info.value.code == "overlap"

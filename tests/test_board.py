"""Unit tests for the Board data structure."""

from __future__ import annotations

import pytest

from salvo.board import Board, CellState
from salvo.errors import OutOfBounds
from salvo.resolver import Outcome


def test_new_board_is_empty() -> None:
    board = Board(size=8)
    assert board.size == 8
    assert all(state is CellState.EMPTY for _, state in board.cells())
    assert board.pieces == ()


def test_default_size_is_eight() -> None:
    assert Board().size == 8


@pytest.mark.parametrize("coord", [(-1, 0), (0, -1), (8, 0), (0, 8), (9, 9)])
def test_cell_at_out_of_bounds(coord: tuple[int, int]) -> None:
    with pytest.raises(OutOfBounds):
        Board(size=8).cell_at(coord)


def test_all_sunk_false_without_pieces() -> None:
    assert Board().all_sunk() is False


def test_place_and_sink_single_piece() -> None:
    """8x8 board, one 3-long piece along the top row."""
    board = Board(size=8)
    piece = board.place_piece([(0, 0), (0, 1), (0, 2)])
    assert [board.cell_at(c) for c in piece.cells] == [CellState.OCCUPIED] * 3

    assert board.apply_guess((0, 1)).kind is Outcome.HIT
    assert board.apply_guess((0, 0)).kind is Outcome.HIT
    assert not board.all_sunk()
    last = board.apply_guess((0, 2))
    assert last.kind is Outcome.SUNK
    assert last.piece_id == piece.piece_id

    assert [board.cell_at(c) for c in piece.cells] == [CellState.HIT] * 3
    assert piece.sunk and piece.hit_count == 3
    assert board.all_sunk()


def test_all_sunk_needs_every_piece() -> None:
    board = Board(size=8)
    board.place_piece([(0, 0), (0, 1)])
    board.place_piece([(5, 5), (6, 5)])
    for coord in [(0, 0), (0, 1), (5, 5)]:
        board.apply_guess(coord)
        assert not board.all_sunk()
    board.apply_guess((6, 5))
    assert board.all_sunk()


def test_piece_at_and_remaining() -> None:
    board = Board(size=8)
    a = board.place_piece([(1, 1), (1, 2)])
    b = board.place_piece([(3, 3), (4, 3), (5, 3)])
    assert board.piece_at((1, 2)) is a
    assert board.piece_at((4, 3)) is b
    assert board.piece_at((7, 7)) is None
    assert board.remaining() == 2

    board.apply_guess((1, 1))
    board.apply_guess((1, 2))
    assert board.remaining() == 1


def test_reset_clears_pieces_and_guesses() -> None:
    board = Board(size=8)
    board.place_piece([(0, 0), (0, 1)])
    board.apply_guess((7, 7))
    board.reset()
    assert board.pieces == ()
    assert board.cell_at((0, 0)) is CellState.EMPTY
    assert board.cell_at((7, 7)) is CellState.EMPTY
    assert board.piece_at((0, 0)) is None


def test_invalid_size_rejected() -> None:
    with pytest.raises(ValueError):
        Board(size=0)

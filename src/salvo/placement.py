"""Piece placement rules.

``place_piece`` is the single entry point that puts a piece on a board. It
checks, in order and stopping at the first failure:

1. the piece length is within the configured bounds   -> InvalidLength
2. every cell lies on the board                       -> OutOfBounds
3. cells are distinct, in one row or column, gap-free -> InvalidShape
4. no cell is already covered by another piece         -> Overlap

Nothing on the board changes unless every check passes.
"""

from __future__ import annotations

import logging
import random
from typing import Iterable, List, Sequence, Tuple

from . import config as _cfg
from .board import Board, CellState, Piece
from .coord_utils import Coordinate, as_coord
from .errors import InvalidLength, InvalidShape, OutOfBounds, Overlap, PlacementError

logger = logging.getLogger(__name__)

HORIZONTAL = 0
VERTICAL = 1


def _is_straight_run(cells: Sequence[Coordinate]) -> bool:
    if len(set(cells)) != len(cells):
        return False
    rows = {c.row for c in cells}
    cols = {c.col for c in cells}
    if len(rows) == 1:
        line = sorted(c.col for c in cells)
    elif len(cols) == 1:
        line = sorted(c.row for c in cells)
    else:
        return False
    return all(b - a == 1 for a, b in zip(line, line[1:]))


def validate_piece(
    board: Board,
    cells: Iterable[Tuple[int, int]],
    *,
    min_length: int | None = None,
    max_length: int | None = None,
) -> List[Coordinate]:
    """Run every placement check without touching *board*.

    Returns the cells as Coordinates in the order given.
    """
    lo = _cfg.MIN_PIECE_LENGTH if min_length is None else min_length
    hi = _cfg.MAX_PIECE_LENGTH if max_length is None else max_length
    coords = [as_coord(c) for c in cells]

    if not lo <= len(coords) <= hi:
        raise InvalidLength(f"Piece length {len(coords)} not in [{lo}, {hi}]")
    for c in coords:
        if not board.in_bounds(c):
            raise OutOfBounds(f"{tuple(c)} is outside the {board.size}x{board.size} board")
    if not _is_straight_run(coords):
        raise InvalidShape(f"Cells {[tuple(c) for c in coords]} are not a contiguous straight run")
    for c in coords:
        if board.grid[c.row][c.col] is not CellState.EMPTY:
            raise Overlap(f"{tuple(c)} is already occupied")
    return coords


def place_piece(board: Board, cells: Iterable[Tuple[int, int]], **bounds: int) -> Piece:
    """Validate *cells* and commit them to *board* as a new piece."""
    coords = validate_piece(board, cells, **bounds)
    piece = board._commit_piece(coords)
    logger.debug("place_piece() – id=%d cells=%s", piece.piece_id, [tuple(c) for c in coords])
    return piece


def piece_cells(row: int, col: int, length: int, orientation: int) -> List[Coordinate]:
    """Cells of a straight piece starting at (*row*, *col*)."""
    if orientation == HORIZONTAL:
        return [Coordinate(row, col + i) for i in range(length)]
    return [Coordinate(row + i, col) for i in range(length)]


def place_random_pieces(
    board: Board,
    lengths: Sequence[int] | None = None,
    *,
    rng: random.Random | None = None,
    attempts: int | None = None,
) -> List[Piece]:
    """Randomly position one piece per entry of *lengths* without collisions.

    Positions are chosen for the whole set before anything is committed, so a
    piece that cannot be fitted leaves the board untouched and raises
    PlacementError.
    """
    lengths = list(_cfg.FLEET if lengths is None else lengths)
    rng = rng or random.Random()
    attempts = _cfg.PLACEMENT_ATTEMPTS if attempts is None else attempts

    taken = {c for c, state in board.cells() if state is not CellState.EMPTY}
    chosen: list[list[Coordinate]] = []
    for length in lengths:
        if not _cfg.MIN_PIECE_LENGTH <= length <= _cfg.MAX_PIECE_LENGTH:
            raise InvalidLength(f"Piece length {length} not in [{_cfg.MIN_PIECE_LENGTH}, {_cfg.MAX_PIECE_LENGTH}]")
        if length > board.size:
            raise PlacementError(f"Piece of length {length} cannot fit a {board.size}x{board.size} board")
        for _ in range(attempts):
            orientation = rng.randint(HORIZONTAL, VERTICAL)
            if orientation == HORIZONTAL:
                row, col = rng.randint(0, board.size - 1), rng.randint(0, board.size - length)
            else:
                row, col = rng.randint(0, board.size - length), rng.randint(0, board.size - 1)
            cells = piece_cells(row, col, length, orientation)
            if taken.isdisjoint(cells):
                taken.update(cells)
                chosen.append(cells)
                break
        else:
            raise PlacementError(f"Could not fit a piece of length {length} after {attempts} attempts")

    return [place_piece(board, cells) for cells in chosen]

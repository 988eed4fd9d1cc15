"""
board.py

Core data structures for one player's side of a match:
 - CellState, the four states a grid cell moves through
 - Piece, a contiguous straight run of cells (one "ship")
 - Board, the grid plus the pieces placed on it
 - ReadOnlyBoard, the query-only Board handed out by sessions

Validation of new pieces lives in :mod:`salvo.placement` and guess handling in
:mod:`salvo.resolver`; the Board methods below delegate to them so callers
only ever need a Board instance.
"""

from __future__ import annotations

import enum
from typing import Iterable, Iterator, Tuple

from . import config as _cfg
from .coord_utils import Coordinate, as_coord
from .errors import OutOfBounds


class CellState(str, enum.Enum):
    """State of a single grid cell.

    EMPTY and OCCUPIED are the only states a cell starts in. MISS and HIT are
    terminal: once guessed a cell never changes again.
    """

    EMPTY = "empty"
    OCCUPIED = "occupied"
    MISS = "miss"
    HIT = "hit"

    @property
    def guessed(self) -> bool:
        return self in (CellState.MISS, CellState.HIT)


# One-character symbols used by text grids and snapshots
CELL_SYMBOLS = {
    CellState.EMPTY: ".",
    CellState.OCCUPIED: "S",
    CellState.MISS: "o",
    CellState.HIT: "X",
}
SYMBOL_CELLS = {v: k for k, v in CELL_SYMBOLS.items()}


class Piece:
    """A placed piece.

    The cell sequence is fixed at construction; only the set of hit cells
    changes afterwards. ``piece_id`` is the piece's index on its board.
    """

    __slots__ = ("piece_id", "cells", "_hits")

    def __init__(self, piece_id: int, cells: Iterable[Coordinate]):
        self.piece_id = piece_id
        self.cells: Tuple[Coordinate, ...] = tuple(cells)
        self._hits: set[Coordinate] = set()

    def __len__(self) -> int:
        return len(self.cells)

    def __contains__(self, coord: object) -> bool:
        return coord in self.cells

    def __repr__(self) -> str:
        return f"Piece(id={self.piece_id}, cells={list(self.cells)!r}, hits={self.hit_count})"

    @property
    def hit_count(self) -> int:
        return len(self._hits)

    @property
    def sunk(self) -> bool:
        return self.hit_count == len(self.cells)

    def _register_hit(self, coord: Coordinate) -> None:
        self._hits.add(coord)


class Board:
    """
    Represents a single player's board with hidden pieces.
    We store:
      - self.grid: one CellState per cell, indexed grid[row][col]
      - self._pieces: pieces in placement order (index == piece_id)
      - self._owner: maps every occupied or hit cell to the index of its piece,
        used to find which piece a guess landed on.

    In a two-player match each player has their own Board instance and the
    session applies a player's guesses to the opponent's board.
    """

    def __init__(self, size: int | None = None):
        """Initialise an empty *size*×*size* board with no pieces placed."""
        self.size = size if size is not None else _cfg.BOARD_SIZE
        if self.size < 1:
            raise ValueError(f"Board size must be positive, got {self.size}")
        self.grid: list[list[CellState]] = [[CellState.EMPTY] * self.size for _ in range(self.size)]
        self._pieces: list[Piece] = []
        self._owner: dict[Coordinate, int] = {}

    def __repr__(self) -> str:
        return f"Board(size={self.size}, pieces={len(self._pieces)}, remaining={self.remaining()})"

    # -------------------- queries --------------------
    @property
    def pieces(self) -> Tuple[Piece, ...]:
        return tuple(self._pieces)

    def in_bounds(self, coord: Tuple[int, int]) -> bool:
        row, col = as_coord(coord)
        return 0 <= row < self.size and 0 <= col < self.size

    def check_bounds(self, coord: Tuple[int, int]) -> Coordinate:
        """Return *coord* as a Coordinate, raising OutOfBounds if it is off the grid."""
        c = as_coord(coord)
        if not self.in_bounds(c):
            raise OutOfBounds(f"{tuple(c)} is outside the {self.size}x{self.size} board")
        return c

    def cell_at(self, coord: Tuple[int, int]) -> CellState:
        c = self.check_bounds(coord)
        return self.grid[c.row][c.col]

    def piece_at(self, coord: Tuple[int, int]) -> Piece | None:
        """Return the piece covering *coord*, or None for open water."""
        idx = self._owner.get(self.check_bounds(coord))
        return None if idx is None else self._pieces[idx]

    def cells(self) -> Iterator[Tuple[Coordinate, CellState]]:
        for r in range(self.size):
            for c in range(self.size):
                yield Coordinate(r, c), self.grid[r][c]

    def all_sunk(self) -> bool:
        """Return True if every piece on this board has been sunk.

        A board with no pieces is never "all sunk"; sessions only ask once
        placement is complete.
        """
        return bool(self._pieces) and all(p.sunk for p in self._pieces)

    def remaining(self) -> int:
        """Number of pieces that are still afloat."""
        return sum(1 for p in self._pieces if not p.sunk)

    # -------------------- mutations --------------------
    def place_piece(self, cells: Iterable[Tuple[int, int]]):
        """Validate and commit a piece; see :func:`salvo.placement.place_piece`."""
        from .placement import place_piece

        return place_piece(self, cells)

    def apply_guess(self, coord: Tuple[int, int]):
        """Resolve a guess on this board; see :func:`salvo.resolver.resolve_guess`."""
        from .resolver import resolve_guess

        return resolve_guess(self, coord)

    def reset(self) -> None:
        """Clear every piece and guess, returning the board to its initial state."""
        self.grid = [[CellState.EMPTY] * self.size for _ in range(self.size)]
        self._pieces.clear()
        self._owner.clear()

    # Mutating helpers for placement / resolver. They do not validate.
    def _commit_piece(self, cells: Iterable[Coordinate]) -> Piece:
        piece = Piece(len(self._pieces), cells)
        for c in piece.cells:
            self.grid[c.row][c.col] = CellState.OCCUPIED
            self._owner[c] = piece.piece_id
        self._pieces.append(piece)
        return piece

    def _set_cell(self, coord: Coordinate, state: CellState) -> None:
        self.grid[coord.row][coord.col] = state


class ReadOnlyBoard:
    """Read-only window onto a Board.

    Exposes every query a Board answers but none of its mutators, so a
    session can hand boards to callers without letting them bypass turn
    order or fleet checks. ``grid`` is a fresh tuple-of-tuples copy.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board):
        self._board = board

    def __repr__(self) -> str:
        return f"ReadOnlyBoard({self._board!r})"

    @property
    def size(self) -> int:
        return self._board.size

    @property
    def grid(self) -> Tuple[Tuple[CellState, ...], ...]:
        return tuple(tuple(row) for row in self._board.grid)

    @property
    def pieces(self) -> Tuple[Piece, ...]:
        return self._board.pieces

    def in_bounds(self, coord: Tuple[int, int]) -> bool:
        return self._board.in_bounds(coord)

    def cell_at(self, coord: Tuple[int, int]) -> CellState:
        return self._board.cell_at(coord)

    def piece_at(self, coord: Tuple[int, int]) -> Piece | None:
        return self._board.piece_at(coord)

    def cells(self) -> Iterator[Tuple[Coordinate, CellState]]:
        return self._board.cells()

    def all_sunk(self) -> bool:
        return self._board.all_sunk()

    def remaining(self) -> int:
        return self._board.remaining()

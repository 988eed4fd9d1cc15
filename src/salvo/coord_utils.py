import operator
import re
from typing import NamedTuple, Tuple

from .errors import InvalidCoordinate

# Board labels like 'A1' (row letter, 1-based column) and tile ids like '3,4'
COORD_RE = re.compile(r"^([A-Z])([1-9][0-9]?)$")
TILE_ID_RE = re.compile(r"^(\d+)\s*,\s*(\d+)$")


class Coordinate(NamedTuple):
    """Zero-based (row, col) position on a board."""

    row: int
    col: int


def as_coord(value: Tuple[int, int]) -> Coordinate:
    """Coerce a (row, col) pair of integers into a :class:`Coordinate`.

    Floats, strings and anything that is not exactly two integer-like
    components raise InvalidCoordinate; nothing is truncated.
    """
    if isinstance(value, (str, bytes)):
        raise InvalidCoordinate(f"Expected a (row, col) pair, got {value!r}")
    try:
        row, col = value
        coord = Coordinate(operator.index(row), operator.index(col))
    except (TypeError, ValueError):
        raise InvalidCoordinate(f"Expected a (row, col) pair of integers, got {value!r}") from None
    if isinstance(value, Coordinate) and value == coord:
        return value
    return coord


def coord_to_rowcol(coord: str) -> Coordinate:
    """
    Convert a coordinate like 'A1' or a tile id like '0,0' to a zero-based
    (row, col) tuple. Raises ValueError on anything else.
    """
    raw = coord.strip().upper()
    m = COORD_RE.match(raw)
    if m:
        return Coordinate(ord(m.group(1)) - ord("A"), int(m.group(2)) - 1)
    m = TILE_ID_RE.match(raw)
    if m:
        return Coordinate(int(m.group(1)), int(m.group(2)))
    raise ValueError(f"Invalid coordinate: {coord!r}")


def format_coord(row: int, col: int) -> str:
    """
    Convert zero-based (row, col) to coordinate string like 'A1'.
    """
    return f"{chr(ord('A') + row)}{col + 1}"

import numpy as np
import pytest

from salvo.coord_utils import Coordinate, as_coord, coord_to_rowcol, format_coord
from salvo.errors import GameError, InvalidCoordinate


@pytest.mark.parametrize(
    "text, expected",
    [("A1", (0, 0)), ("c10", (2, 9)), ("H8", (7, 7)), ("0,0", (0, 0)), (" 3, 4 ", (3, 4))],
)
def test_coord_to_rowcol(text, expected):
    assert coord_to_rowcol(text) == expected


@pytest.mark.parametrize("text", ["", "A", "A0", "11", "1,", "A-1", "1;2"])
def test_coord_to_rowcol_invalid(text):
    with pytest.raises(ValueError):
        coord_to_rowcol(text)


def test_format_coord():
    assert format_coord(0, 0) == "A1"
    assert format_coord(7, 9) == "H10"


def test_as_coord():
    c = as_coord([2, 5])
    assert isinstance(c, Coordinate)
    assert (c.row, c.col) == (2, 5)
    assert as_coord(c) is c
    assert as_coord((np.int64(3), np.int32(1))) == (3, 1)


@pytest.mark.parametrize(
    "value",
    [(0.9, 7.6), (1.0, 2), ("1", "2"), "A1", "12", (1,), (1, 2, 3), 7, None, Coordinate(0.5, 1)],
)
def test_as_coord_rejects_non_integers(value):
    with pytest.raises(InvalidCoordinate) as info:
        as_coord(value)
    assert isinstance(info.value, GameError)
    assert isinstance(info.value, ValueError)

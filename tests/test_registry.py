import pytest

from conftest import P1_LAYOUT, P2_LAYOUT
from salvo.registry import SessionRegistry
from salvo.turns import Player


def test_create_get_archive():
    reg = SessionRegistry()
    s = reg.create("m1", size=8, fleet=[2, 3, 4, 5])
    assert "m1" in reg and len(reg) == 1
    assert reg.get("m1") is s
    for cells in P1_LAYOUT:
        s.place_piece(Player.ONE, cells)
    for cells in P2_LAYOUT:
        s.place_piece(Player.TWO, cells)
    s.guess(Player.ONE, (0, 7))

    data = reg.archive("m1")
    assert "m1" not in reg
    assert data["history"] == [[1, 0, 7, "hit", 0]]


def test_duplicate_and_unknown_ids():
    reg = SessionRegistry()
    reg.create("m1")
    with pytest.raises(ValueError):
        reg.create("m1")
    with pytest.raises(KeyError):
        reg.get("nope")
    with pytest.raises(KeyError):
        reg.archive("nope")


def test_load_from_archive():
    reg = SessionRegistry()
    s = reg.create("a", fleet=[2])
    s.place_piece(Player.ONE, [(0, 0), (0, 1)])
    data = reg.archive("a")
    restored = reg.load("b", data)
    assert list(reg) == ["b"]
    assert restored.outstanding(Player.ONE) == []
    assert restored.outstanding(Player.TWO) == [2]

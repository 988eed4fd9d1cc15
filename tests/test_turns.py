import pytest

from salvo.turns import Player, TurnController


def test_player_one_moves_first_by_default():
    tc = TurnController()
    assert tc.current is Player.ONE
    assert tc.is_turn(1) and not tc.is_turn(Player.TWO)


def test_first_player_configurable():
    assert TurnController(first=2).current is Player.TWO


@pytest.mark.parametrize("n", range(6))
def test_parity_after_n_advances(n):
    tc = TurnController()
    for _ in range(n):
        tc.advance()
    assert tc.current is (Player.ONE if n % 2 == 0 else Player.TWO)


def test_advance_returns_new_player():
    tc = TurnController()
    assert tc.advance() is Player.TWO
    assert tc.advance() is Player.ONE


def test_other():
    assert Player.ONE.other is Player.TWO
    assert Player.TWO.other is Player.ONE


def test_invalid_player_rejected():
    with pytest.raises(ValueError):
        TurnController(first=3)

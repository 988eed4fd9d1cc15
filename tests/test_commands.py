import pytest

from salvo.commands import (
    CommandParseError,
    FireCommand,
    PlaceCommand,
    QuitCommand,
    StatusCommand,
    parse_command,
)


def test_fire_label():
    cmd = parse_command("FIRE B5")
    assert isinstance(cmd, FireCommand)
    assert cmd.coord == (1, 4)


def test_fire_tile_id_and_case():
    cmd = parse_command("  fire 3,2 ")
    assert isinstance(cmd, FireCommand)
    assert cmd.coord == (3, 2)


def test_place():
    cmd = parse_command("place A1 A2 A3")
    assert isinstance(cmd, PlaceCommand)
    assert cmd.cells == ((0, 0), (0, 1), (0, 2))


def test_status_and_quit():
    assert isinstance(parse_command("STATUS"), StatusCommand)
    assert isinstance(parse_command("quit"), QuitCommand)


@pytest.mark.parametrize(
    "line",
    ["", "   ", "FIRE", "FIRE A1 A2", "FIRE Z", "PLACE", "PLACE A1 ??", "HELLO there", "QUIT now"],
)
def test_invalid(line):
    with pytest.raises(CommandParseError):
        parse_command(line)

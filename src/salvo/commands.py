from dataclasses import dataclass
from typing import Tuple, Union

from .coord_utils import Coordinate, coord_to_rowcol


class CommandParseError(Exception):
    """Raised when a line cannot be parsed as a valid command."""


@dataclass(frozen=True)
class FireCommand:
    coord: Coordinate


@dataclass(frozen=True)
class PlaceCommand:
    cells: Tuple[Coordinate, ...]


@dataclass(frozen=True)
class StatusCommand:
    pass


@dataclass(frozen=True)
class QuitCommand:
    pass


Command = Union[FireCommand, PlaceCommand, StatusCommand, QuitCommand]


def _coord(text: str) -> Coordinate:
    try:
        return coord_to_rowcol(text)
    except ValueError:
        raise CommandParseError(f"Invalid coordinate: {text}") from None


def parse_command(line: str) -> Command:
    if line is None:
        raise CommandParseError("No command to parse")
    raw = line.strip()
    if not raw:
        raise CommandParseError("Empty command")
    parts = raw.split()
    verb = parts[0].upper()
    if verb == "FIRE":
        if len(parts) != 2:
            raise CommandParseError("FIRE requires exactly one coordinate")
        return FireCommand(coord=_coord(parts[1]))
    elif verb == "PLACE":
        if len(parts) < 2:
            raise CommandParseError("PLACE requires the piece's coordinates")
        return PlaceCommand(cells=tuple(_coord(p) for p in parts[1:]))
    elif verb == "STATUS" and len(parts) == 1:
        return StatusCommand()
    elif verb == "QUIT" and len(parts) == 1:
        return QuitCommand()
    else:
        raise CommandParseError(f"Unknown command: {raw}")

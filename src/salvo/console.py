"""Local hot-seat match on a single terminal.

Both players share stdin/stdout. Fleets are placed at random unless
``--manual`` is given, in which case each player enters ``PLACE`` commands
(e.g. ``PLACE A1 A2 A3``) until their fleet is complete. Players then
alternate ``FIRE <coord>`` commands; ``STATUS`` reprints the boards and
``QUIT`` concedes.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import Callable, List, Optional, TextIO

from . import config as _cfg
from .commands import CommandParseError, FireCommand, PlaceCommand, QuitCommand, StatusCommand, parse_command
from .coord_utils import format_coord
from .errors import GameError
from .resolver import Outcome
from .session import GameSession
from .turns import Player
from .views import grid_rows

logger = logging.getLogger(__name__)


def _print_boards(session: GameSession, player: Player, out: TextIO) -> None:
    own = grid_rows(session.board(player), reveal=True)
    opp = grid_rows(session.board(player.other), reveal=False)
    header = " ".join(str(i + 1) for i in range(session.size))
    out.write(f"\n  {'Your board':<{len(header)}}    Opponent\n")
    out.write(f"  {header}    {header}\n")
    for r, (mine, theirs) in enumerate(zip(own, opp)):
        label = chr(ord("A") + r)
        out.write(f"{label} {mine}    {theirs}\n")


def _place_manually(session: GameSession, player: Player, read_line: Callable[[], str], out: TextIO) -> bool:
    while session.outstanding(player):
        _print_boards(session, player, out)
        out.write(f"Player {int(player)}: place a piece of length {session.outstanding(player)}\n> ")
        out.flush()
        line = read_line()
        if not line:
            return False
        try:
            cmd = parse_command(line)
        except CommandParseError as exc:
            out.write(f"ERR {exc}\n")
            continue
        if isinstance(cmd, QuitCommand):
            return False
        if not isinstance(cmd, PlaceCommand):
            out.write("ERR Expected PLACE <coord> <coord> ...\n")
            continue
        try:
            session.place_piece(player, cmd.cells)
        except GameError as exc:
            out.write(f"ERR {exc.code}: {exc}\n")
    return True


def play(
    session: GameSession,
    read_line: Callable[[], str],
    out: TextIO,
    *,
    manual: bool = False,
    rng: Optional[random.Random] = None,
) -> Optional[Player]:
    """Run a match to completion and return the winner (None if input ran out)."""
    for player in Player:
        if manual:
            if not _place_manually(session, player, read_line, out):
                return None
        else:
            session.place_random_pieces(player, rng=rng)

    while session.winner is None:
        player = session.turn
        out.write(f"Player {int(player)} to move > ")
        out.flush()
        line = read_line()
        if not line:
            return None
        try:
            cmd = parse_command(line)
        except CommandParseError as exc:
            out.write(f"ERR {exc}\n")
            continue

        if isinstance(cmd, QuitCommand):
            session.forfeit(player, reason="concession")
            break
        if isinstance(cmd, StatusCommand):
            _print_boards(session, player, out)
            continue
        if not isinstance(cmd, FireCommand):
            out.write("ERR Expected FIRE <coord>\n")
            continue

        try:
            result = session.guess(player, cmd.coord)
        except GameError as exc:
            out.write(f"ERR {exc.code}: {exc}\n")
            continue
        label = format_coord(*cmd.coord)
        if result.outcome.kind is Outcome.SUNK:
            out.write(f"SUNK {label} – piece {result.outcome.piece_id} destroyed\n")
        else:
            out.write(f"{result.outcome.kind.value.upper()} {label}\n")

    out.write(f"Player {int(session.winner)} wins ({session.win_reason})\n")
    return session.winner


def main(argv: Optional[List[str]] = None) -> int:  # pragma: no cover – CLI entry
    parser = argparse.ArgumentParser(description="Salvo hot-seat match")
    parser.add_argument("--size", type=int, default=_cfg.BOARD_SIZE, help="Board width and height")
    parser.add_argument("--seed", type=int, default=None, help="Seed for random placement")
    parser.add_argument("--manual", action="store_true", help="Place pieces with PLACE commands")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if (args.debug or _cfg.DEBUG) else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    session = GameSession(size=args.size)
    rng = random.Random(args.seed)
    try:
        winner = play(session, sys.stdin.readline, sys.stdout, manual=args.manual, rng=rng)
    except KeyboardInterrupt:
        logger.info("Interrupted – exiting")
        return 1
    return 0 if winner is not None else 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())

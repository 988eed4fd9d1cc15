"""Concurrent callers against one session must observe atomic, serialised guesses."""

from __future__ import annotations

import threading

import pytest

from salvo.errors import GameError
from salvo.session import GameSession
from salvo.turns import Player


@pytest.mark.timeout(10)  # type: ignore[arg-type]
def test_racing_players_never_break_turn_order(session: GameSession, p1_misses, p2_misses) -> None:
    start = threading.Barrier(3)
    accepted: dict[Player, int] = {Player.ONE: 0, Player.TWO: 0}

    def worker(player: Player, targets) -> None:
        start.wait()
        queue = list(targets)
        while queue and session.winner is None:
            try:
                session.guess(player, queue[0])
            except GameError:
                continue
            accepted[player] += 1
            queue.pop(0)

    def reader(stop: threading.Event, torn: list) -> None:
        start.wait()
        while not stop.is_set():
            data = session.snapshot()
            guessed = sum(
                row.count("o") + row.count("X") for b in ("1", "2") for row in data["boards"][b]["grid"]
            )
            if guessed != len(data["history"]):
                torn.append(data)

    stop = threading.Event()
    torn: list = []
    threads = [
        threading.Thread(target=worker, args=(Player.ONE, p2_misses[:20])),
        threading.Thread(target=worker, args=(Player.TWO, p1_misses[:20])),
    ]
    r = threading.Thread(target=reader, args=(stop, torn))
    for t in threads + [r]:
        t.start()
    for t in threads:
        t.join()
    stop.set()
    r.join()

    assert torn == []
    moves = session.history
    assert len(moves) == 40
    assert [m.player for m in moves] == [Player.ONE, Player.TWO] * 20
    assert session.turn is Player.ONE

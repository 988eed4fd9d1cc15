"""SessionRegistry: keep the live GameSession for every match a host is serving."""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Iterator

from .session import GameSession

logger = logging.getLogger(__name__)


class SessionRegistry:
    """
    Maps match identifiers to sessions.

    The registry lock only guards the mapping itself; each session serialises
    its own guesses, so matches never wait on each other.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._sessions: Dict[str, GameSession] = {}

    def __contains__(self, match_id: object) -> bool:
        with self._lock:
            return match_id in self._sessions

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def __iter__(self) -> Iterator[str]:
        with self._lock:
            return iter(list(self._sessions))

    def _add(self, match_id: str, session: GameSession) -> GameSession:
        with self._lock:
            if match_id in self._sessions:
                raise ValueError(f"Match {match_id!r} already exists")
            self._sessions[match_id] = session
        logger.debug("Registered match %s", match_id)
        return session

    def create(self, match_id: str, **kwargs: Any) -> GameSession:
        """Start a new session under *match_id*; kwargs go to GameSession."""
        return self._add(match_id, GameSession(**kwargs))

    def load(self, match_id: str, data: dict[str, Any]) -> GameSession:
        """Register a session rebuilt from a snapshot."""
        return self._add(match_id, GameSession.restore(data))

    def get(self, match_id: str) -> GameSession:
        with self._lock:
            return self._sessions[match_id]

    def archive(self, match_id: str) -> dict[str, Any]:
        """Remove the match and return its final snapshot for storage."""
        with self._lock:
            session = self._sessions.pop(match_id)
        logger.info("Archived match %s (winner=%s)", match_id, session.winner)
        return session.snapshot()

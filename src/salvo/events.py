"""Lightweight event model used by GameSession to decouple game logic from its host.

The goal is to emit strongly-typed events that a transport layer can translate
into wire messages and other subscribers (e.g. logging or persistence) can
consume without polling the session.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable, Dict


class Category(Enum):
    """High-level event categories."""

    SETUP = auto()  # piece placement, fleet complete
    TURN = auto()  # accepted guesses and the end of the match


@dataclass(frozen=True, slots=True)
class Event:
    """Immutable event emitted by GameSession."""

    category: Category
    type: str  # finer-grained identifier, e.g. "placed", "guess", "end"
    payload: Dict[str, Any] = field(default_factory=dict)


Subscriber = Callable[[Event], None]

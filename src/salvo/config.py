"""Central configuration for engine defaults.

All constants can be overridden via environment variables so that a host
application can change the board geometry or fleet without code changes,
while the test-suite runs against the documented defaults.
"""

from __future__ import annotations

import os


def _int_list(raw: str) -> list[int]:
    return [int(part) for part in raw.split(",") if part.strip()]


# ===========================================================================
# Board Geometry
# ===========================================================================
# SALVO_BOARD_SIZE: Width and height of each player's board.
#   Defaults to 8 (for an 8x8 grid).
#   Example: export SALVO_BOARD_SIZE=10
BOARD_SIZE: int = int(os.getenv("SALVO_BOARD_SIZE", "8"))


# ===========================================================================
# Fleet
# ===========================================================================
# SALVO_FLEET: Comma-separated piece lengths every player must place, one
#   piece per entry. Defaults to "2,3,4,5".
#   Example: export SALVO_FLEET=2,3,3,4,5
FLEET: list[int] = _int_list(os.getenv("SALVO_FLEET", "2,3,4,5"))

# SALVO_MIN_PIECE / SALVO_MAX_PIECE: Inclusive bounds on the length of a
#   single piece. Defaults to 2 and 5.
MIN_PIECE_LENGTH: int = int(os.getenv("SALVO_MIN_PIECE", "2"))
MAX_PIECE_LENGTH: int = int(os.getenv("SALVO_MAX_PIECE", "5"))

# SALVO_PLACEMENT_ATTEMPTS: Random placement gives up on a piece after this
#   many collisions. Defaults to 1000.
PLACEMENT_ATTEMPTS: int = int(os.getenv("SALVO_PLACEMENT_ATTEMPTS", "1000"))


# ===========================================================================
# Turn Order
# ===========================================================================
# SALVO_FIRST_PLAYER: Which player (1 or 2) holds the first move.
#   Defaults to 1.
FIRST_PLAYER: int = int(os.getenv("SALVO_FIRST_PLAYER", "1"))


# ===========================================================================
# Debugging and Logging
# ===========================================================================
# SALVO_DEBUG: If "1", the console entry point logs at DEBUG level.
#   Defaults to "0" (disabled).
DEBUG: bool = os.getenv("SALVO_DEBUG", "0") == "1"

"""Gameplay constants shared across the game modules."""

from __future__ import annotations

import enum

TICK_INTERVAL: float = 0.1
TICKS_PER_SECOND: int = round(1 / TICK_INTERVAL)

SNAKE_INITIAL_LENGTH: int = 3
MONSTER_INTERVAL: int = 2
PLACEMENT_RADIUS: int = 10
PLACEMENT_INTERVAL: int = 5 * TICKS_PER_SECOND

APPLE_PROBABILITY: float = 0.80
ORANGE_PROBABILITY: float = 0.15
APPLE_LIFETIME: int = 15 * TICKS_PER_SECOND
ORANGE_LIFETIME: int = 7 * TICKS_PER_SECOND
APPLE_POINTS: int = 1
ORANGE_POINTS: int = 3

DEFAULT_COLUMNS: int = 80
DEFAULT_ROWS: int = 40
DEFAULT_CELL_SIZE: int = 14
EVENT_POLL_INTERVAL: float = 1 / 60


class Color(enum.Enum):
    """The four pixel colors an entity can be drawn with."""

    GREEN = "#00ff00"
    RED = "#ff0000"
    ORANGE = "#ff8c00"
    MAGENTA = "#ff00ff"

    @property
    def rgb(self) -> tuple[int, int, int]:
        """Return the color as an ``(r, g, b)`` tuple."""

        value = self.value.lstrip("#")
        return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)

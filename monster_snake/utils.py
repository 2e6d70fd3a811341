"""Coordinate primitives for the toroidal game grid."""

from __future__ import annotations

import enum
import math
from typing import Tuple

Coordinate = Tuple[int, int]
Dimensions = Tuple[int, int]


class Direction(enum.Enum):
    """One of the four cardinal movement directions."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)


def translate(coord: Coordinate, direction: Direction, dimensions: Dimensions) -> Coordinate:
    """Return the coordinate one step from ``coord`` in ``direction``.

    Both axes wrap around the grid ``dimensions``, so the result is always a
    valid cell.
    """

    x, y = coord
    width, height = dimensions
    if direction is Direction.LEFT:
        return (x - 1) % width, y
    if direction is Direction.RIGHT:
        return (x + 1) % width, y
    if direction is Direction.UP:
        return x, (y - 1) % height
    return x, (y + 1) % height


def wrap(coord: Coordinate, dimensions: Dimensions) -> Coordinate:
    """Return ``coord`` folded back onto the grid ``dimensions``."""

    return coord[0] % dimensions[0], coord[1] % dimensions[1]


def distance(a: Coordinate, b: Coordinate) -> float:
    """Return the Euclidean distance between ``a`` and ``b``."""

    return math.hypot(a[0] - b[0], a[1] - b[1])


def compass(a: Coordinate, b: Coordinate) -> Direction:
    """Return the cardinal direction that leads from ``a`` towards ``b``.

    The axis with the larger absolute delta wins. Ties go to the vertical
    axis, and identical coordinates yield ``Direction.DOWN``.
    """

    dx = a[0] - b[0]
    dy = a[1] - b[1]
    if abs(dx) > abs(dy):
        return Direction.LEFT if dx > 0 else Direction.RIGHT
    return Direction.UP if dy > 0 else Direction.DOWN


def equals(a: Coordinate, b: Coordinate) -> bool:
    return a[0] == b[0] and a[1] == b[1]

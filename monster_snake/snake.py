"""Snake entity implementation."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from .constants import Color
from .entity import Entity, EntityKind
from .utils import Coordinate, Dimensions, Direction, translate, wrap

if TYPE_CHECKING:
    from .screen import Screen
    from .world import World


class SnakeEntity(Entity):
    """The player controlled snake.

    ``segments`` are ordered head first. The snake starts heading right with
    its body trailing to the left of ``position``, wrapped onto the grid.
    """

    kind = EntityKind.SNAKE

    def __init__(self, position: Coordinate, length: int, dimensions: Dimensions) -> None:
        super().__init__()
        if length < 1:
            raise ValueError(f"Snake length must be at least 1, got {length}")
        x, y = position
        self.segments: List[Coordinate] = [wrap((x - i, y), dimensions) for i in range(length)]
        self._direction = Direction.RIGHT
        self._pending_growth = 0

    @property
    def head(self) -> Coordinate:
        return self.segments[0]

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def length(self) -> int:
        return len(self.segments)

    def update(self, world: "World") -> None:
        self.segments.insert(0, translate(self.head, self._direction, world.dimensions))
        if self._pending_growth > 0:
            self._pending_growth -= 1
        else:
            self.segments.pop()

    def locate(self) -> List[Coordinate]:
        return self.segments

    def render(self, screen: "Screen") -> None:
        for coord in self.segments:
            screen.draw_pixel(coord, Color.GREEN)

    def handle_key(self, direction: Direction) -> None:
        """Turn towards ``direction`` unless it lies on the current axis.

        This rejects both repeating the current heading and reversing it.
        """

        if direction.horizontal == self._direction.horizontal:
            return
        self._direction = direction

    def grow(self) -> None:
        """Add one segment on the next update."""

        self._pending_growth += 1

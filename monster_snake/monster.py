"""Monster entity chasing food and the snake."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from .constants import Color
from .entity import Entity, EntityKind
from .utils import Coordinate, Dimensions, compass, distance, translate, wrap

if TYPE_CHECKING:
    from .screen import Screen
    from .world import World

# Center first, then the four diagonal neighbours.
_CLUSTER_OFFSETS = ((0, 0), (1, 1), (-1, -1), (-1, 1), (1, -1))


class MonsterEntity(Entity):
    """A rigid five cell cluster that moves once every ``interval`` ticks.

    The monster goes for the nearest food, and for the snake once no food
    is left in the world.
    """

    kind = EntityKind.MONSTER

    def __init__(self, center: Coordinate, interval: int, dimensions: Dimensions) -> None:
        super().__init__()
        if interval < 1:
            raise ValueError(f"Monster interval must be at least 1, got {interval}")
        x, y = center
        self.cells: List[Coordinate] = [wrap((x + dx, y + dy), dimensions) for dx, dy in _CLUSTER_OFFSETS]
        self.interval = interval

    def update(self, world: "World") -> None:
        if world.frame % self.interval != 0:
            return

        target = self.choose_target(world)
        if target is None:
            return

        direction = compass(self.cells[0], target.locate()[0])
        self.cells = [translate(coord, direction, world.dimensions) for coord in self.cells]

    def choose_target(self, world: "World") -> Optional[Entity]:
        """Return the entity the monster heads for this tick, if any."""

        apple = world.find(EntityKind.APPLE)
        orange = world.find(EntityKind.ORANGE)
        if apple is not None and orange is not None:
            center = self.cells[0]
            if distance(center, apple.locate()[0]) < distance(center, orange.locate()[0]):
                return apple
            return orange
        if apple is not None or orange is not None:
            return apple or orange
        return world.find(EntityKind.SNAKE)

    def locate(self) -> List[Coordinate]:
        return self.cells

    def render(self, screen: "Screen") -> None:
        for coord in self.cells:
            screen.draw_pixel(coord, Color.MAGENTA)

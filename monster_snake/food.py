"""Food entities that expire after a fixed number of ticks."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, List

from .constants import Color
from .entity import Entity, EntityKind
from .utils import Coordinate

if TYPE_CHECKING:
    from .screen import Screen
    from .world import World


class FoodEntity(Entity):
    """A single cell of food which removes itself once its lifetime runs out."""

    color: ClassVar[Color]

    def __init__(self, position: Coordinate, lifetime: int) -> None:
        super().__init__()
        if lifetime <= 0:
            raise ValueError(f"Food lifetime must be positive, got {lifetime}")
        self.position = position
        self._lifetime = lifetime

    @property
    def lifetime(self) -> int:
        return self._lifetime

    def update(self, world: "World") -> None:
        self._lifetime -= 1
        if self._lifetime == 0:
            world.remove(self)

    def locate(self) -> List[Coordinate]:
        return [self.position]

    def render(self, screen: "Screen") -> None:
        screen.draw_pixel(self.position, self.color)


class AppleEntity(FoodEntity):
    kind = EntityKind.APPLE
    color = Color.RED


class OrangeEntity(FoodEntity):
    kind = EntityKind.ORANGE
    color = Color.ORANGE

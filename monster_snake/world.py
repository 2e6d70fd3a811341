"""Game world holding every live entity."""

from __future__ import annotations

import logging
import math
import random
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

from . import collision
from .entity import Entity, EntityKind
from .utils import Coordinate, Dimensions, distance

if TYPE_CHECKING:
    from .screen import Screen

logger = logging.getLogger(__name__)


class World:
    """Holds all entities and advances them on every tick.

    Entities are keyed by their ``id`` in registration order. The frame
    counter starts at zero and only goes back to zero through :meth:`reset`.
    """

    def __init__(self, dimensions: Dimensions, rng: Optional[random.Random] = None) -> None:
        width, height = dimensions
        if width <= 0 or height <= 0:
            raise ValueError(f"World dimensions must be positive, got {dimensions}")
        self.dimensions: Dimensions = (width, height)
        self.frame: int = 0
        self.rng = rng if rng is not None else random.Random()
        self._entities: Dict[int, Entity] = {}

    def __len__(self) -> int:
        return len(self._entities)

    @property
    def entities(self) -> Tuple[Entity, ...]:
        return tuple(self._entities.values())

    def reset(self) -> None:
        self.frame = 0
        self._entities = {}

    def add(self, entity: Entity) -> None:
        self._entities.setdefault(entity.id, entity)

    def remove(self, entity: Entity) -> None:
        if self._entities.pop(entity.id, None) is not None:
            logger.debug("Removed %r at frame %d", entity, self.frame)

    def find(self, kind: EntityKind) -> Optional[Entity]:
        """Return the first registered entity of ``kind`` or ``None``."""

        for entity in self._entities.values():
            if entity.is_kind(kind):
                return entity
        return None

    def has(self, kind: EntityKind) -> bool:
        return self.find(kind) is not None

    def update(self) -> None:
        for entity in list(self._entities.values()):
            entity.update(self)
        self.frame += 1

    def detect_collisions(self) -> List[Tuple[Entity, Entity]]:
        """Return every colliding pair of entities for the current frame.

        An entity overlapping itself is paired with itself. Distinct entities
        are paired at most once, the earlier registered entity first.
        """

        entities = list(self._entities.values())
        cells = [entity.locate() for entity in entities]
        collisions: List[Tuple[Entity, Entity]] = []
        for i, entity in enumerate(entities):
            if collision.self_collision(cells[i]):
                collisions.append((entity, entity))
            for j in range(i + 1, len(entities)):
                if collision.collision(cells[i], cells[j]):
                    collisions.append((entity, entities[j]))
        return collisions

    def render(self, screen: "Screen") -> None:
        screen.clear()
        for entity in self._entities.values():
            entity.render(screen)
        screen.render()

    def get_random_position(self, radius: int, loop: bool = False) -> Optional[Coordinate]:
        """Sample a cell further than ``radius`` from every entity.

        Candidates are drawn from ``[radius, width) × [radius, height)`` and
        compared against the primary cell of each entity. With ``loop`` set
        the sampling repeats until it succeeds, which never returns on a
        saturated world. Otherwise ``None`` is returned after one miss.
        """

        if radius < 0:
            raise ValueError(f"Placement radius must not be negative, got {radius}")
        width, height = self.dimensions
        while True:
            position = (
                math.floor(radius + self.rng.random() * (width - radius)),
                math.floor(radius + self.rng.random() * (height - radius)),
            )
            if all(distance(position, e.locate()[0]) > radius for e in self._entities.values()):
                return position
            if not loop:
                return None

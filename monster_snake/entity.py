"""Base class shared by every simulated entity."""

from __future__ import annotations

import abc
import enum
import itertools
from typing import TYPE_CHECKING, ClassVar, List

from .utils import Coordinate

if TYPE_CHECKING:
    from .screen import Screen
    from .world import World

_id_counter = itertools.count(1)


class EntityKind(enum.Enum):
    """Tag identifying the concrete variant of an entity."""

    SNAKE = "snake"
    APPLE = "apple"
    ORANGE = "orange"
    MONSTER = "monster"


class Entity(abc.ABC):
    """A unit of simulation state living inside a :class:`World`.

    Subclasses set ``kind`` and implement the three per-tick hooks. Each
    instance receives a unique ``id`` which the world uses as its handle.
    """

    kind: ClassVar[EntityKind]

    def __init__(self) -> None:
        self.id: int = next(_id_counter)

    @abc.abstractmethod
    def update(self, world: "World") -> None:
        """Advance this entity by one tick."""

    @abc.abstractmethod
    def locate(self) -> List[Coordinate]:
        """Return the cells occupied by this entity, primary cell first."""

    @abc.abstractmethod
    def render(self, screen: "Screen") -> None:
        """Draw this entity onto ``screen``."""

    def is_kind(self, kind: EntityKind) -> bool:
        return self.kind is kind

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id}, at={self.locate()[:1]})"

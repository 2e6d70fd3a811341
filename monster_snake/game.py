"""Game controller tying the world, the rules and the screen together."""

from __future__ import annotations

import asyncio
import logging
import random
import sys
from typing import Optional, Type

from . import constants
from .entity import Entity, EntityKind
from .food import AppleEntity, FoodEntity, OrangeEntity
from .monster import MonsterEntity
from .screen import Screen
from .snake import SnakeEntity
from .utils import Direction
from .world import World

logger = logging.getLogger(__name__)

WELCOME_TITLE = "Welcome to Snake!"
WELCOME_TEXT = (
    f"\nApples are worth {constants.APPLE_POINTS}."
    f"\nOranges are worth {constants.ORANGE_POINTS}."
    "\nAvoid the hungry monster.\n\nPress enter to start."
)
GAME_OVER_TITLE = "Game Over"


class SnakeGame:
    """Runs the fixed interval tick loop and applies the game rules.

    The game is idle until :meth:`start` is called, usually through the
    confirm key, and returns to idle on :meth:`stop`. It has to be created
    from inside a running asyncio event loop, which drives the ticks.
    """

    def __init__(self, screen: Screen, rng: Optional[random.Random] = None) -> None:
        self._loop = asyncio.get_running_loop()
        self._screen = screen
        self._world = World((screen.width, screen.height), rng)
        self._timer: Optional[asyncio.Task[None]] = None
        self._score = 0

        self._screen.bind_inputs(self.handle_key, self.handle_enter, self.handle_quit)
        self._screen.show_modal(WELCOME_TITLE, WELCOME_TEXT)

    @property
    def world(self) -> World:
        return self._world

    @property
    def score(self) -> int:
        return self._score

    @property
    def running(self) -> bool:
        return self._timer is not None

    def start(self) -> None:
        self._score = 0
        self._world.reset()
        self._screen.reset()

        snake_position = self._world.get_random_position(constants.PLACEMENT_RADIUS, loop=True)
        self._world.add(SnakeEntity(snake_position, constants.SNAKE_INITIAL_LENGTH, self._world.dimensions))
        monster_position = self._world.get_random_position(constants.PLACEMENT_RADIUS, loop=True)
        self._world.add(MonsterEntity(monster_position, constants.MONSTER_INTERVAL, self._world.dimensions))

        self._timer = self._loop.create_task(self._run_tick_loop())
        logger.info("Game started, snake at %s, monster at %s", snake_position, monster_position)

    def stop(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
            logger.info("Game over with score %d at frame %d", self._score, self._world.frame)

        self._screen.show_modal(
            GAME_OVER_TITLE, f"\nYour score is {self._score}.\n\nPress enter to restart."
        )

    async def _run_tick_loop(self) -> None:
        while True:
            await asyncio.sleep(constants.TICK_INTERVAL)
            self.handle_tick()

    def handle_tick(self) -> None:
        """Run one spawn, update, collision and render cycle."""

        if self._world.frame % constants.PLACEMENT_INTERVAL == 0:
            self._spawn_food()

        self._world.update()

        for first, second in self._world.detect_collisions():
            self._resolve_collision(first, second)

        self._screen.draw_status(f"Score: {self._score}")
        self._world.render(self._screen)

    def _spawn_food(self) -> None:
        rng = self._world.rng
        if not self._world.has(EntityKind.APPLE) and rng.random() < constants.APPLE_PROBABILITY:
            self._place(AppleEntity, constants.APPLE_LIFETIME)
        if not self._world.has(EntityKind.ORANGE) and rng.random() < constants.ORANGE_PROBABILITY:
            self._place(OrangeEntity, constants.ORANGE_LIFETIME)

    def _place(self, food_cls: Type[FoodEntity], lifetime: int) -> None:
        position = self._world.get_random_position(constants.PLACEMENT_RADIUS)
        if position is None:
            logger.debug("No room for %s at frame %d", food_cls.__name__, self._world.frame)
            return
        self._world.add(food_cls(position, lifetime))
        logger.debug("Spawned %s at %s", food_cls.__name__, position)

    def _resolve_collision(self, first: Entity, second: Entity) -> None:
        if first.is_kind(EntityKind.SNAKE) and second.is_kind(EntityKind.SNAKE):
            self.stop()
        elif first.is_kind(EntityKind.SNAKE) and second.is_kind(EntityKind.MONSTER):
            self.stop()
        elif first.is_kind(EntityKind.SNAKE) and second.is_kind(EntityKind.APPLE):
            self._eat(first, second, constants.APPLE_POINTS)
        elif first.is_kind(EntityKind.SNAKE) and second.is_kind(EntityKind.ORANGE):
            self._eat(first, second, constants.ORANGE_POINTS)
        elif first.is_kind(EntityKind.MONSTER) and second.is_kind(EntityKind.APPLE):
            self._world.remove(second)
        elif first.is_kind(EntityKind.MONSTER) and second.is_kind(EntityKind.ORANGE):
            self._world.remove(second)

    def _eat(self, snake: Entity, food: Entity, points: int) -> None:
        assert isinstance(snake, SnakeEntity)
        snake.grow()
        self._score += points
        self._world.remove(food)
        logger.debug("Snake ate %r for %d points", food, points)

    def handle_key(self, direction: Direction) -> None:
        snake = self._world.find(EntityKind.SNAKE)
        if isinstance(snake, SnakeEntity):
            snake.handle_key(direction)

    def handle_enter(self) -> None:
        if not self.running:
            self.start()

    def handle_quit(self) -> None:
        logger.info("Quit requested")
        sys.exit(0)

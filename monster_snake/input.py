"""Translate pygame keyboard events into game commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional

import pygame

from .screen import DirectionHandler, Handler
from .utils import Direction

DIRECTION_KEYS: Dict[int, Direction] = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}
CONFIRM_KEYS = frozenset({pygame.K_RETURN, pygame.K_KP_ENTER})
QUIT_KEYS = frozenset({pygame.K_ESCAPE, pygame.K_q})


@dataclass
class InputBindings:
    """The three callbacks registered by the game controller."""

    on_direction: DirectionHandler
    on_confirm: Handler
    on_quit: Handler


class InputManager:
    """Dispatch keyboard events to the bound callbacks."""

    def __init__(self) -> None:
        self._bindings: Optional[InputBindings] = None

    def bind(self, on_direction: DirectionHandler, on_confirm: Handler, on_quit: Handler) -> None:
        if self._bindings is not None:
            raise RuntimeError("Inputs are already bound")
        self._bindings = InputBindings(on_direction, on_confirm, on_quit)

    def dispatch(self, events: Iterable[pygame.event.Event]) -> None:
        """Handle each of ``events`` in order. Unbound managers ignore input."""

        if self._bindings is None:
            return
        for event in events:
            if event.type == pygame.QUIT:
                self._bindings.on_quit()
            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event.key, getattr(event, "mod", 0))

    def _handle_keydown(self, key: int, mod: int) -> None:
        assert self._bindings is not None
        if key in DIRECTION_KEYS:
            self._bindings.on_direction(DIRECTION_KEYS[key])
        elif key in CONFIRM_KEYS:
            self._bindings.on_confirm()
        elif key in QUIT_KEYS or (key == pygame.K_c and mod & pygame.KMOD_CTRL):
            self._bindings.on_quit()

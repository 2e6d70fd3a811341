"""Contract of the render and input surface the game draws on."""

from __future__ import annotations

from typing import Callable, Protocol

from .constants import Color
from .utils import Coordinate, Direction

DirectionHandler = Callable[[Direction], None]
Handler = Callable[[], None]


class Screen(Protocol):
    """A grid of ``width`` × ``height`` cells plus a status line and overlay.

    Input callbacks registered through :meth:`bind_inputs` must only fire
    between renders, never from inside one of the drawing methods.
    """

    width: int
    height: int

    def clear(self) -> None:
        ...

    def draw_pixel(self, coord: Coordinate, color: Color) -> None:
        ...

    def draw_status(self, text: str) -> None:
        ...

    def render(self) -> None:
        ...

    def reset(self) -> None:
        ...

    def show_modal(self, title: str, text: str) -> None:
        ...

    def bind_inputs(
        self, on_direction: DirectionHandler, on_confirm: Handler, on_quit: Handler
    ) -> None:
        ...

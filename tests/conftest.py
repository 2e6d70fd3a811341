from __future__ import annotations

import os
from typing import Dict, List, Optional, Tuple

import pytest

from monster_snake.constants import Color
from monster_snake.utils import Coordinate

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


class RecordingScreen:
    """In-memory screen that records every call made by the game."""

    def __init__(self, width: int = 40, height: int = 30) -> None:
        self.width = width
        self.height = height
        self.pixels: Dict[Coordinate, Color] = {}
        self.status = ""
        self.modals: List[Tuple[str, str]] = []
        self.modal: Optional[Tuple[str, str]] = None
        self.clears = 0
        self.renders = 0
        self.resets = 0
        self.handlers = None

    def clear(self) -> None:
        self.clears += 1
        self.pixels = {}

    def draw_pixel(self, coord: Coordinate, color: Color) -> None:
        self.pixels[coord] = color

    def draw_status(self, text: str) -> None:
        self.status = text

    def render(self) -> None:
        self.renders += 1

    def reset(self) -> None:
        self.resets += 1
        self.modal = None
        self.status = ""
        self.pixels = {}

    def show_modal(self, title: str, text: str) -> None:
        self.modal = (title, text)
        self.modals.append(self.modal)

    def bind_inputs(self, on_direction, on_confirm, on_quit) -> None:
        assert self.handlers is None, "inputs bound twice"
        self.handlers = (on_direction, on_confirm, on_quit)


@pytest.fixture
def screen() -> RecordingScreen:
    return RecordingScreen()

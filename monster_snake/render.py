"""Pygame based implementation of the game screen."""

from __future__ import annotations

from typing import List, Optional, Tuple

import pygame

from .constants import Color
from .input import InputManager
from .screen import DirectionHandler, Handler
from .utils import Coordinate


class PygameScreen:
    """A window of ``width`` × ``height`` square cells with a status bar below."""

    def __init__(self, columns: int, rows: int, cell_size: int) -> None:
        pygame.init()
        self.width = columns
        self.height = rows
        self.cell_size = cell_size
        self.window = pygame.display.set_mode((columns * cell_size, (rows + 1) * cell_size))
        pygame.display.set_caption("Monster Snake")
        self.canvas = pygame.Surface((columns * cell_size, rows * cell_size))
        self.font = pygame.font.Font(None, max(cell_size + 4, 16))
        self.background_color = (0, 0, 0)
        self.text_color = (255, 255, 255)
        self.border_color = (240, 240, 240)
        self.input = InputManager()
        self._status = ""
        self._modal: Optional[Tuple[str, str]] = None

    def reset(self) -> None:
        self._modal = None
        self._status = ""
        self.clear()

    def clear(self) -> None:
        self.canvas.fill(self.background_color)

    def draw_pixel(self, coord: Coordinate, color: Color) -> None:
        x, y = coord
        size = self.cell_size
        self.canvas.fill(color.rgb, pygame.Rect(x * size, y * size, size, size))

    def draw_status(self, text: str) -> None:
        self._status = text

    def render(self) -> None:
        self.window.fill(self.background_color)
        self.window.blit(self.canvas, (0, 0))
        self._draw_status_bar()
        if self._modal is not None:
            self._draw_modal(*self._modal)
        pygame.display.flip()

    def show_modal(self, title: str, text: str) -> None:
        self._modal = (title, text)
        self.render()

    def bind_inputs(self, on_direction: DirectionHandler, on_confirm: Handler, on_quit: Handler) -> None:
        self.input.bind(on_direction, on_confirm, on_quit)

    def pump_events(self) -> None:
        """Deliver pending window events to the bound input callbacks."""

        self.input.dispatch(pygame.event.get())

    def _draw_status_bar(self) -> None:
        label = self.font.render(self._status, True, self.text_color)
        top = self.height * self.cell_size
        self.window.blit(label, (2, top + (self.cell_size - label.get_height()) // 2))

    def _draw_modal(self, title: str, text: str) -> None:
        self.font.set_bold(True)
        lines: List[pygame.Surface] = [self.font.render(title, True, self.text_color)]
        self.font.set_bold(False)
        lines += [self.font.render(line, True, self.text_color) for line in text.split("\n")]

        padding = 8
        line_height = self.font.get_linesize()
        box_width = max(line.get_width() for line in lines) + 2 * padding
        box_height = line_height * len(lines) + 2 * padding
        box = pygame.Rect(0, 0, box_width, box_height)
        box.center = self.canvas.get_rect().center

        pygame.draw.rect(self.window, self.background_color, box)
        pygame.draw.rect(self.window, self.border_color, box, width=1)
        for index, line in enumerate(lines):
            x = box.centerx - line.get_width() // 2
            self.window.blit(line, (x, box.top + padding + index * line_height))

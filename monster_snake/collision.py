"""Collision helpers over lists of occupied coordinates."""

from __future__ import annotations

from typing import Sequence

from .utils import Coordinate, equals


def self_collision(coords: Sequence[Coordinate]) -> bool:
    """Return ``True`` if any two cells of ``coords`` are the same cell."""

    for i in range(len(coords)):
        for j in range(i + 1, len(coords)):
            if equals(coords[i], coords[j]):
                return True
    return False


def collision(first: Sequence[Coordinate], second: Sequence[Coordinate]) -> bool:
    """Return ``True`` if ``first`` and ``second`` share at least one cell."""

    for a in first:
        for b in second:
            if equals(a, b):
                return True
    return False

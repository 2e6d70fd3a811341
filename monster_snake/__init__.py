"""Monster Snake: a toroidal grid snake game with a hungry monster."""

__all__ = [
    "collision",
    "constants",
    "entity",
    "food",
    "game",
    "input",
    "main",
    "monster",
    "render",
    "screen",
    "snake",
    "utils",
    "world",
]

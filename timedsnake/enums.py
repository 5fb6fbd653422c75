"""Tile kinds and movement directions used across the game."""

from enum import IntEnum


class ElementType(IntEnum):
    """What occupies a single cell of the board."""

    EMPTY = 0
    WALL = 1
    IMMUNE_WALL = 2
    SNAKE_HEAD = 3
    SNAKE_BODY = 4
    GROWTH_ITEM = 5
    POISON_ITEM = 6
    OPENED_GATE = 7
    SLOW_ITEM = 8
    TIMED_WALL = 9


class Direction(IntEnum):
    """Heading of the snake; also names the wall a gate sits on."""

    RIGHT = 0
    LEFT = 1
    UP = 2
    DOWN = 3

    @property
    def delta(self) -> tuple[int, int]:
        """The (dx, dy) step taken when moving one cell this way."""
        return _DELTAS[self]


_DELTAS = {
    Direction.RIGHT: (1, 0),
    Direction.LEFT: (-1, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
}
"""The square playing field: tiles, timed walls and item spawning."""

from __future__ import annotations

import curses
import random
import time
from typing import Callable, Iterable, Optional, Sequence

from .enums import ElementType

SIZE = 21
MAX_ITEMS = 3
ITEM_LIFETIME = 10

_ITEMS = frozenset(
    {ElementType.GROWTH_ITEM, ElementType.POISON_ITEM, ElementType.SLOW_ITEM}
)

# Text drawn for each tile and the colour pair used for it.
_APPEARANCE = {
    ElementType.WALL: ("  ", 1),
    ElementType.IMMUNE_WALL: ("  ", 2),
    ElementType.SNAKE_HEAD: ("  ", 3),
    ElementType.SNAKE_BODY: ("  ", 4),
    ElementType.GROWTH_ITEM: ("GI", 5),
    ElementType.POISON_ITEM: ("PI", 6),
    ElementType.OPENED_GATE: ("  ", 7),
    ElementType.SLOW_ITEM: ("SI", 8),
    ElementType.TIMED_WALL: ("  ", 1),
}


class Board:
    """A SIZE x SIZE grid of tiles addressed by (x, y)."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self.size = SIZE
        self.rng = rng if rng is not None else random.Random()
        self.clock = clock if clock is not None else time.monotonic
        self.num_items = 0
        self.timed_walls: list[tuple[int, int]] = []
        self.timed_wall_period = 0
        self._timed_wall_ticks = 0
        self._growth_spawned_at: Optional[float] = None
        self._poison_spawned_at: Optional[float] = None
        self._grid = [[ElementType.EMPTY] * SIZE for _ in range(SIZE)]

    def initialize(self, layout: Sequence[Sequence[int]]) -> None:
        """Load a stage layout given as rows of tile codes, then restamp timed walls."""
        rows = [[ElementType(value) for value in row] for row in layout]
        if len(rows) != self.size or any(len(row) != self.size for row in rows):
            raise ValueError(f"layout must be {self.size}x{self.size}")
        self._grid = rows
        for x, y in self.timed_walls:
            self._grid[y][x] = ElementType.TIMED_WALL

    def draw(self, window) -> None:
        """Paint every tile onto a curses window, two columns per cell."""
        for y, row in enumerate(self._grid):
            for x, elem in enumerate(row):
                appearance = _APPEARANCE.get(elem)
                if appearance is None:
                    window.addstr(y, x * 2, "  ")
                else:
                    text, pair = appearance
                    window.addstr(y, x * 2, text, curses.color_pair(pair))

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.size and 0 <= y < self.size):
            raise IndexError(f"cell ({x}, {y}) is outside the board")

    def set_tile(self, x: int, y: int, elem: ElementType) -> None:
        self._check(x, y)
        self._grid[y][x] = ElementType(elem)

    def get_tile(self, x: int, y: int) -> ElementType:
        self._check(x, y)
        return self._grid[y][x]

    def init_timed_walls(
        self, positions: Iterable[tuple[int, int]], period_ticks: int
    ) -> None:
        """Place walls that toggle on and off every ``period_ticks`` updates."""
        self.timed_walls = [(x, y) for x, y in positions]
        self.timed_wall_period = period_ticks
        self._timed_wall_ticks = 0
        for x, y in self.timed_walls:
            self.set_tile(x, y, ElementType.TIMED_WALL)

    def update_timed_walls(self) -> None:
        """Advance one tick; toggle timed walls when the period elapses."""
        if not self.timed_walls:
            return
        self._timed_wall_ticks += 1
        if self._timed_wall_ticks < self.timed_wall_period:
            return
        self._timed_wall_ticks = 0
        for x, y in self.timed_walls:
            tile = self._grid[y][x]
            if tile is ElementType.TIMED_WALL:
                self._grid[y][x] = ElementType.EMPTY
            elif tile is ElementType.EMPTY:
                self._grid[y][x] = ElementType.TIMED_WALL

    def _expired(self, spawned_at: Optional[float], now: float) -> bool:
        return spawned_at is None or now - spawned_at >= ITEM_LIFETIME

    def _random_empty_cell(self) -> tuple[int, int]:
        while True:
            x = self.rng.randrange(1, self.size - 1)
            y = self.rng.randrange(1, self.size - 1)
            if self._grid[y][x] is ElementType.EMPTY:
                return x, y

    def spawn_items(self) -> None:
        """Replace all items with a fresh growth, poison and slow item when due.

        Items are respawned when fewer than three are on the board or when the
        growth or poison item has been lying there for ten seconds or more.
        """
        now = self.clock()
        if not (
            self.num_items < MAX_ITEMS
            or self._expired(self._growth_spawned_at, now)
            or self._expired(self._poison_spawned_at, now)
        ):
            return

        for row in self._grid:
            for x, tile in enumerate(row):
                if tile in _ITEMS:
                    row[x] = ElementType.EMPTY
        self.num_items = 0

        for item in (
            ElementType.GROWTH_ITEM,
            ElementType.POISON_ITEM,
            ElementType.SLOW_ITEM,
        ):
            x, y = self._random_empty_cell()
            self._grid[y][x] = item
            self.num_items += 1
        self._growth_spawned_at = now
        self._poison_spawned_at = now

    def remove_item(self, x: int, y: int) -> None:
        """Clear an item that was picked up."""
        self.set_tile(x, y, ElementType.EMPTY)
        self.num_items -= 1

    def is_snake_body(self, x: int, y: int) -> bool:
        return self.get_tile(x, y) is ElementType.SNAKE_BODY
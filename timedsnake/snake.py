"""The snake: its body on the board, movement, items and score counters."""

from __future__ import annotations

import curses
import time
from typing import Callable, Iterable, Optional

from .board import Board
from .enums import Direction, ElementType
from .gates import Gate

INITIAL_LENGTH = 3
MAX_CELLS = 21 * 21
BASE_TICK = 200
SLOW_DURATION = 2.0
QUIT_KEY = ord("q")

_DEADLY = frozenset(
    {
        ElementType.WALL,
        ElementType.IMMUNE_WALL,
        ElementType.SNAKE_BODY,
        ElementType.TIMED_WALL,
    }
)

_KEY_DIRECTIONS = {
    curses.KEY_RIGHT: Direction.RIGHT,
    curses.KEY_LEFT: Direction.LEFT,
    curses.KEY_UP: Direction.UP,
    curses.KEY_DOWN: Direction.DOWN,
}

# Leaving a gate on a given wall: the direction the snake heads off in.
_EXIT_HEADING = {
    Direction.RIGHT: Direction.LEFT,
    Direction.LEFT: Direction.RIGHT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}


class SnakeBody:
    """The cells the snake occupies, head first."""

    def __init__(self, positions: Iterable[tuple[int, int]] = ()) -> None:
        self.cells: list[tuple[int, int]] = [(x, y) for x, y in positions]

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self):
        return iter(self.cells)

    @property
    def head(self) -> tuple[int, int]:
        """Position of the head."""
        if not self.cells:
            raise IndexError("the snake has no cells")
        return self.cells[0]

    @property
    def tail(self) -> tuple[int, int]:
        """Position of the last cell."""
        if not self.cells:
            raise IndexError("the snake has no cells")
        return self.cells[-1]

    def move_to(self, x: int, y: int) -> None:
        """Put the head at (x, y); every other cell follows the one ahead."""
        if not self.cells:
            return
        self.cells = [(x, y)] + self.cells[:-1]

    def draw(self, board: Board) -> None:
        """Mark the head and body cells on the board."""
        for index, (x, y) in enumerate(self.cells):
            kind = ElementType.SNAKE_HEAD if index == 0 else ElementType.SNAKE_BODY
            board.set_tile(x, y, kind)

    def erase_tail(self, board: Board) -> None:
        """Clear the tail's cell, ahead of a move."""
        x, y = self.tail
        board.set_tile(x, y, ElementType.EMPTY)

    def grow(self) -> None:
        """Add one cell at the tail, up to the size of the board."""
        if self.cells and len(self.cells) < MAX_CELLS:
            self.cells.append(self.cells[-1])

    def shrink(self, board: Board) -> None:
        """Drop the tail cell, never removing the head."""
        if len(self.cells) > 1:
            x, y = self.cells.pop()
            board.set_tile(x, y, ElementType.EMPTY)


class Snake:
    """The player's snake and the score it has collected."""

    def __init__(
        self,
        length: int,
        board: Board,
        gate: Optional[Gate] = None,
        direction: Direction = Direction.LEFT,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self.length = length
        self.max_length = length
        self.board = board
        self.gate = gate
        self.direction = direction
        self.clock = clock if clock is not None else time.monotonic
        self.body = SnakeBody()
        self.is_gaming = False
        self.teleporting = 0
        self.growth_items = 0
        self.poison_items = 0
        self.gate_uses = 0
        self.game_time = 0
        self.is_slowed = False
        self._slowed_at = 0.0
        self.base_tick = BASE_TICK
        self.current_tick = BASE_TICK

    @property
    def position(self) -> tuple[int, int]:
        """Position of the head."""
        return self.body.head

    def reset(self, positions: Optional[Iterable[tuple[int, int]]] = None) -> None:
        """Place the snake anew (when positions are given) and clear the score."""
        if positions:
            self.body = SnakeBody(positions)
        self.length = INITIAL_LENGTH
        self.max_length = INITIAL_LENGTH
        self.growth_items = 0
        self.poison_items = 0
        self.gate_uses = 0
        self.teleporting = 0

    def start(self) -> None:
        self.is_gaming = True

    def end(self) -> None:
        self.is_gaming = False

    def handle_key(self, key: int) -> None:
        """Turn on an arrow key; stop the game on 'q'. Other keys do nothing."""
        if key in _KEY_DIRECTIONS:
            self.direction = _KEY_DIRECTIONS[key]
        elif key == QUIT_KEY:
            self.is_gaming = False

    def decrease_teleporting(self) -> None:
        self.teleporting -= 1

    def move(self) -> None:
        """Advance one cell, handling walls, gates and items in the way."""
        hx, hy = self.body.head
        dx, dy = self.direction.delta
        nx, ny = hx + dx, hy + dy
        elem = self.board.get_tile(nx, ny)

        if elem in _DEADLY:
            self.is_gaming = False
            return

        if elem is ElementType.OPENED_GATE:
            if self.gate is None:
                raise RuntimeError("snake entered a gate but has no gate attached")
            self.body.erase_tail(self.board)
            exit_end = self.gate.teleport(nx, ny)
            self.teleporting = self.length
            heading = _EXIT_HEADING[exit_end.wall]
            ox, oy = heading.delta
            self.body.move_to(exit_end.x + ox, exit_end.y + oy)
            self.direction = heading
            self.gate_uses += 1
            self.draw()
            return

        if elem is ElementType.GROWTH_ITEM:
            self.pick_up_growth_item()
            self.board.remove_item(nx, ny)
        elif elem is ElementType.POISON_ITEM:
            self.pick_up_poison_item()
            self.board.remove_item(nx, ny)
        elif elem is ElementType.SLOW_ITEM:
            self.is_slowed = True
            self._slowed_at = self.clock()
            self.current_tick = self.base_tick * 2
            self.board.remove_item(nx, ny)
        self.body.erase_tail(self.board)
        self.body.move_to(nx, ny)
        self.draw()

    def draw(self) -> None:
        self.body.draw(self.board)

    def longer(self) -> None:
        """Grow by one cell."""
        self.length += 1
        self.body.grow()
        if self.teleporting > 0:
            self.teleporting += 1
        self.max_length = max(self.max_length, self.length)

    def shorter(self) -> None:
        """Shrink by one cell; at the minimum length the game ends instead."""
        if self.length > INITIAL_LENGTH:
            self.length -= 1
            self.body.shrink(self.board)
            if self.teleporting > 0:
                self.teleporting -= 1
        else:
            self.end()

    def pick_up_growth_item(self) -> None:
        self.longer()
        self.growth_items += 1

    def pick_up_poison_item(self) -> None:
        self.shorter()
        self.poison_items += 1

    def update_tick_if_needed(self) -> None:
        """Restore normal speed once the slow effect has lasted long enough."""
        if self.is_slowed and self.clock() - self._slowed_at > SLOW_DURATION:
            self.is_slowed = False
            self.current_tick = self.base_tick
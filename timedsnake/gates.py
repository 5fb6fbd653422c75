"""A pair of gates opened on the outer walls that teleport the snake."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from .board import Board
from .enums import Direction, ElementType

MAX_ATTEMPTS = 100


@dataclass(frozen=True)
class GateEnd:
    """One gate: its cell and the wall it sits on."""

    x: int
    y: int
    wall: Direction


class Gate:
    """Two linked gates on the outer wall of a board."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.gate_a = GateEnd(0, 0, Direction.RIGHT)
        self.gate_b = GateEnd(0, 0, Direction.RIGHT)
        self.can_use = True

    def _pick_end(
        self, board: Board, taken: Optional[tuple[int, int]] = None
    ) -> Optional[GateEnd]:
        edge = board.size - 1
        for _ in range(MAX_ATTEMPTS):
            wall = Direction(self.rng.randrange(4))
            if wall is Direction.RIGHT:
                x, y = edge, self.rng.randrange(board.size)
            elif wall is Direction.LEFT:
                x, y = 0, self.rng.randrange(board.size)
            elif wall is Direction.UP:
                x, y = self.rng.randrange(board.size), 0
            else:
                x, y = self.rng.randrange(board.size), edge
            if board.get_tile(x, y) is not ElementType.IMMUNE_WALL and (x, y) != taken:
                return GateEnd(x, y, wall)
        return None

    def open(self, board: Board) -> None:
        """Open two distinct gates on non-immune outer wall cells.

        Gives up silently if a place cannot be found within the attempt limit.
        """
        end_a = self._pick_end(board)
        if end_a is None:
            return
        self.gate_a = end_a
        end_b = self._pick_end(board, taken=(end_a.x, end_a.y))
        if end_b is None:
            return
        self.gate_b = end_b
        board.set_tile(end_a.x, end_a.y, ElementType.OPENED_GATE)
        board.set_tile(end_b.x, end_b.y, ElementType.OPENED_GATE)
        self.can_use = False

    def close(self, board: Board) -> None:
        """Turn both gates back into ordinary walls."""
        board.set_tile(self.gate_a.x, self.gate_a.y, ElementType.WALL)
        board.set_tile(self.gate_b.x, self.gate_b.y, ElementType.WALL)

    def teleport(self, x: int, y: int) -> GateEnd:
        """Return the gate opposite the one entered at (x, y)."""
        if (x, y) == (self.gate_a.x, self.gate_a.y):
            return self.gate_b
        return self.gate_a
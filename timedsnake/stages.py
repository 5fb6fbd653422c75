"""Stage layouts, starting positions and missions, and the stage manager."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, Optional

from .board import SIZE, Board
from .enums import Direction
from .gates import Gate
from .snake import INITIAL_LENGTH, Snake
from .windows import Mission

STAGE_COUNT = 4

_LAYOUTS = (
    (
        "211111111111111111112",
        "100000000000000000001",
        "100000000000000000001",
        "100011111000111110001",
        "100000000000000000001",
        "100000000000000000001",
        "100000000000000000001",
        "100000000000000000001",
        "100010000000000010001",
        "100010000000000010001",
        "100010000000000010001",
        "100010000000000010001",
        "100010000000000010001",
        "100000000000000000001",
        "100000000000000000001",
        "100000000000000000001",
        "100000000000000000001",
        "100011111000111110001",
        "100000000000000000001",
        "100000000000000000001",
        "211111111111111111112",
    ),
    (
        "211111111111112111112",
        "100000000000001000001",
        "100000000000001000001",
        "100000000000010000001",
        "100000000000010000001",
        "100000000000010000001",
        "100111110000000000001",
        "100000000000000000001",
        "100000000000000000001",
        "100000000000000000001",
        "100000000000000000001",
        "100000000000000000001",
        "100000000000000000001",
        "100000000000000000001",
        "100000000000000000001",
        "100000010000011111001",
        "100000010000000000001",
        "100000010000000000001",
        "100000100000000000001",
        "100000100000000000001",
        "211111211111111111112",
    ),
    (
        "211111111121111111112",
        "100000000010000000001",
        "100000000010000000001",
        "100000110010011000001",
        "100000010000010000001",
        "100000000000000000001",
        "100100000000000001001",
        "100110000000000011001",
        "100000000000000000001",
        "100000000000000000001",
        "211000000000000000112",
        "100000000000000000001",
        "100000000000000000001",
        "100110000000000011001",
        "100100000000000001001",
        "100000000000000000001",
        "100000010000010000001",
        "100000110010011000001",
        "100000000010000000001",
        "100000000010000000001",
        "211111111121111111112",
    ),
    (
        "211111111111111111112",
        "100000000000000000001",
        "100000000000000000001",
        "100110000000000011001",
        "100100000000000001001",
        "100000000000000000001",
        "100000000000000000001",
        "100002200000002200001",
        "100002000000000200001",
        "100000000000000000001",
        "100000000000000000001",
        "100000000000000000001",
        "100002000000000200001",
        "100002200000002200001",
        "100000000000000000001",
        "100000000000000000001",
        "100100000000000001001",
        "100110000000000011001",
        "100000000000000000001",
        "100000000000000000001",
        "211111111111111111112",
    ),
)

_SNAKE_BODIES = (
    ((9, 12), (10, 12), (11, 12)),
    ((9, 13), (10, 13), (11, 13)),
    ((10, 15), (11, 15), (12, 15)),
    ((9, 12), (10, 12), (11, 12)),
)

_TIMED_WALLS = ((10, 10), (10, 11), (10, 9), (11, 10), (9, 10))
_TIMED_WALL_PERIOD = 20


def _missions(length_goal: int, growth_goal: int) -> tuple[Mission, ...]:
    # The shown goals differ from the thresholds actually tested on stage one.
    return (
        Mission("B", length_goal, lambda board, snake: snake.length >= 5),
        Mission("+", growth_goal, lambda board, snake: snake.growth_items >= 2),
        Mission("-", 1, lambda board, snake: snake.poison_items >= 1),
        Mission("G", 2, lambda board, snake: snake.gate_uses >= 2),
    )


_MISSIONS = (_missions(4, 1), _missions(5, 2), _missions(5, 2), _missions(5, 2))


@dataclass(frozen=True)
class StageData:
    """Everything needed to set up one stage."""

    layout: tuple[tuple[int, ...], ...]
    size: int
    snake: tuple[tuple[int, int], ...]
    missions: tuple[Mission, ...]
    timed_walls: tuple[tuple[int, int], ...]
    timed_wall_period: int


def stage_data(stage: int) -> StageData:
    """Return the data of a stage numbered from 1."""
    if not 1 <= stage <= STAGE_COUNT:
        raise ValueError(f"stage must be 1 to {STAGE_COUNT}")
    index = stage - 1
    layout = tuple(tuple(int(ch) for ch in row) for row in _LAYOUTS[index])
    return StageData(
        layout=layout,
        size=SIZE,
        snake=_SNAKE_BODIES[index],
        missions=_MISSIONS[index],
        timed_walls=_TIMED_WALLS,
        timed_wall_period=_TIMED_WALL_PERIOD,
    )


class Stage:
    """Owns the board and snake and moves them through the stages."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self.current_stage = 0
        self.board = Board(rng, clock)
        self.snake = Snake(INITIAL_LENGTH, self.board, None, Direction.LEFT, clock)
        self.missions: list[Mission] = []

    def load(self, stage: int) -> None:
        """Set up the board, snake and missions of the given stage."""
        data = stage_data(stage)
        self.current_stage = stage
        self.board.initialize(data.layout)
        self.snake.reset(data.snake)
        self.board.init_timed_walls(data.timed_walls, data.timed_wall_period)
        self.missions = list(data.missions)

    def next_stage(self) -> None:
        self.load(self.current_stage + 1)

    def set_snake_gate(self, gate: Gate) -> None:
        self.snake.gate = gate

    def draw_map(self, window) -> None:
        self.board.draw(window)

    def spawn_items(self) -> None:
        self.board.spawn_items()

    def check_missions(self) -> bool:
        """True when every mission of the current stage is met."""
        return all(m.is_met(self.board, self.snake) for m in self.missions)
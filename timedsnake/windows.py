"""Side panels showing the score and the stage missions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable

from .board import Board
from .snake import Snake

WINDOW_HEIGHT = 10
WINDOW_WIDTH = 20


@dataclass(frozen=True)
class Mission:
    """A stage goal: a label, the target shown to the player and its test."""

    title: str
    goal: int
    condition: Callable[[Board, Snake], bool]

    def is_met(self, board: Board, snake: Snake) -> bool:
        return bool(self.condition(board, snake))


def _score_lines(snake: Snake) -> list[str]:
    return [
        "Score Board",
        f"B: {snake.length} / {snake.max_length}",
        f"+: {snake.growth_items}",
        f"-: {snake.poison_items}",
        f"G: {snake.gate_uses}",
    ]


def _paint(window, lines: Iterable[str]) -> None:
    window.erase()
    window.box()
    for row, text in enumerate(lines, start=1):
        window.addstr(row, 1, text)
    window.refresh()


class ScoreboardWindow:
    """A boxed window listing the snake's length and item and gate counts."""

    def __init__(self, window, board: Board, snake: Snake) -> None:
        self.window = window
        self.board = board
        self.snake = snake
        self.window.box()

    def lines(self) -> list[str]:
        """The text shown inside the box, top to bottom."""
        return _score_lines(self.snake)

    def refresh(self) -> None:
        _paint(self.window, self.lines())


class MissionWindow:
    """A boxed window listing the missions, ticking those that are met."""

    def __init__(
        self, window, board: Board, snake: Snake, missions: Iterable[Mission]
    ) -> None:
        self.window = window
        self.board = board
        self.snake = snake
        self.missions = list(missions)
        self.completed = False
        self.window.box()

    @property
    def is_complete(self) -> bool:
        """Whether every mission was met at the last check."""
        return self.completed

    def lines(self) -> list[str]:
        """The text shown inside the box; also records whether all are met."""
        result = ["Mission"]
        completed = True
        for mission in self.missions:
            met = mission.is_met(self.board, self.snake)
            result.append(f"{mission.title}: {mission.goal} ({'v' if met else ' '})")
            completed = completed and met
        self.completed = completed
        return result

    def refresh(self) -> None:
        _paint(self.window, self.lines())


class ScoreBoard:
    """The score printed straight onto the screen at a fixed position."""

    def __init__(self, snake: Snake, startx: int, starty: int) -> None:
        self.snake = snake
        self.startx = startx
        self.starty = starty

    def display(self, screen) -> None:
        for offset, text in enumerate(_score_lines(self.snake)):
            screen.addstr(self.starty + offset, self.startx, text)

    def update_time(self, screen, seconds: int) -> None:
        """Show elapsed time as minutes and seconds."""
        minutes, sec = divmod(seconds, 60)
        screen.addstr(10, 5, f"Time: {minutes:02d}:{sec:02d}")
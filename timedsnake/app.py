"""The game loop: stage play against the clock, drawn with curses."""

from __future__ import annotations

import argparse
import curses
import random
import time
from typing import Callable, Optional, Sequence

from .gates import Gate
from .stages import STAGE_COUNT, Stage
from .windows import MissionWindow, ScoreboardWindow

TIME_LIMIT = 100
SPAWN_INTERVAL = 5
GAME_OVER_PAUSE = 3
PANEL_HEIGHT = 10
PANEL_WIDTH = 20
PANEL_X = 45
SCOREBOARD_Y = 0
MISSION_Y = 12

_COLOR_PAIRS = (
    (1, curses.COLOR_WHITE, curses.COLOR_BLUE),  # walls
    (2, curses.COLOR_WHITE, curses.COLOR_GREEN),  # immune walls
    (3, curses.COLOR_WHITE, curses.COLOR_RED),  # snake head
    (4, curses.COLOR_WHITE, curses.COLOR_MAGENTA),  # snake body
    (5, curses.COLOR_WHITE, curses.COLOR_YELLOW),  # growth item
    (6, curses.COLOR_WHITE, curses.COLOR_CYAN),  # poison item
    (7, curses.COLOR_WHITE, curses.COLOR_WHITE),  # opened gate
    (8, curses.COLOR_WHITE, curses.COLOR_BLACK),  # slow item
    (9, curses.COLOR_WHITE, curses.COLOR_GREEN),
)


class Game:
    """One play session: the stages, the gate pair, the side panels and the timer."""

    def __init__(
        self,
        screen,
        clock: Optional[Callable[[], float]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.screen = screen
        self.clock = clock if clock is not None else time.monotonic
        self._started_at = self.clock()
        self._last_spawn: Optional[float] = None
        self.time_over = False
        self.cleared = False
        self.stage = Stage(rng, self.clock)
        self.stage.load(1)
        self.gate = Gate(rng)
        self.stage.set_snake_gate(self.gate)
        self._make_panels()
        self.snake.start()

    @property
    def board(self):
        return self.stage.board

    @property
    def snake(self):
        return self.stage.snake

    def _make_panels(self) -> None:
        self.scoreboard = ScoreboardWindow(
            self.screen.subwin(PANEL_HEIGHT, PANEL_WIDTH, SCOREBOARD_Y, PANEL_X),
            self.board,
            self.snake,
        )
        self.mission_window = MissionWindow(
            self.screen.subwin(PANEL_HEIGHT, PANEL_WIDTH, MISSION_Y, PANEL_X),
            self.board,
            self.snake,
            self.stage.missions,
        )

    def elapsed(self) -> int:
        """Whole seconds since the game began."""
        return int(self.clock() - self._started_at)

    def time_left(self) -> int:
        """Seconds remaining before the time limit ends the game."""
        return TIME_LIMIT - self.elapsed()

    def step(self, key: int) -> bool:
        """Play one tick with the given key (-1 for none); return whether play goes on."""
        if self.gate.can_use:
            self.gate.open(self.board)

        self.snake.handle_key(key)
        self.snake.move()

        if self.elapsed() >= TIME_LIMIT:
            self.time_over = True
            self.snake.end()
            return False

        if self.snake.teleporting > 0:
            self.snake.decrease_teleporting()
        elif self.snake.teleporting == 0:
            self.snake.decrease_teleporting()
            self.gate.close(self.board)
            self.gate.can_use = True

        self.board.update_timed_walls()

        now = self.clock()
        if self._last_spawn is None:
            self._last_spawn = now
        if now - self._last_spawn >= SPAWN_INTERVAL:
            self.board.spawn_items()
            self._last_spawn = now

        if self.stage.check_missions():
            if self.stage.current_stage >= STAGE_COUNT:
                self.cleared = True
                self.snake.end()
            else:
                self.stage.next_stage()
                self.gate.can_use = True
                self._make_panels()

        self.snake.update_tick_if_needed()
        return self.snake.is_gaming

    def render(self) -> None:
        """Draw the board, the side panels and the remaining time."""
        self.stage.draw_map(self.screen)
        self.scoreboard.refresh()
        self.mission_window.refresh()
        self.screen.addstr(20, 50, f"Time: {self.time_left():3d}")
        self.screen.refresh()


def _setup_screen(screen) -> None:
    curses.start_color()
    curses.curs_set(0)
    curses.noecho()
    for pair, fg, bg in _COLOR_PAIRS:
        curses.init_pair(pair, fg, bg)
    screen.keypad(True)
    screen.nodelay(True)


def run(screen) -> None:
    """Play a whole game on a curses screen until it ends, then wait for a key."""
    _setup_screen(screen)
    screen.refresh()
    game = Game(screen)
    while True:
        key = screen.getch()
        playing = game.step(key)
        if game.time_over:
            screen.addstr(0, 0, "Game Over! Time limit exceeded.")
            screen.refresh()
            time.sleep(GAME_OVER_PAUSE)
            break
        game.render()
        if not playing:
            break
        time.sleep(game.snake.current_tick / 1000)
    screen.nodelay(False)
    screen.getch()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the game in the terminal."""
    parser = argparse.ArgumentParser(
        prog="timedsnake",
        description="Snake with gates, items, timed walls and a time limit.",
    )
    parser.parse_args(argv)
    curses.wrapper(run)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
import curses
import random

import pytest

from timedsnake.app import SPAWN_INTERVAL, TIME_LIMIT, Game, main
from timedsnake.board import MAX_ITEMS
from timedsnake.enums import Direction, ElementType
from timedsnake.stages import STAGE_COUNT, stage_data


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now


class FakeWindow:
    def __init__(self):
        self.text = []
        self.subwindows = []

    def subwin(self, height, width, y, x):
        window = FakeWindow()
        self.subwindows.append((height, width, y, x))
        return window

    def box(self):
        pass

    def erase(self):
        self.text.clear()

    def addstr(self, y, x, text, *attrs):
        self.text.append((y, x, text))

    def refresh(self):
        pass


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def game(clock):
    return Game(FakeWindow(), clock, random.Random(7))


def count(board, kind):
    return sum(
        1
        for y in range(board.size)
        for x in range(board.size)
        if board.get_tile(x, y) is kind
    )


def meet_missions(snake):
    snake.length = 5
    snake.growth_items = 2
    snake.poison_items = 1
    snake.gate_uses = 2


def test_starts_on_stage_one_and_playing(game):
    assert game.stage.current_stage == 1
    assert game.snake.is_gaming is True
    assert game.time_left() == TIME_LIMIT


def test_time_left_plus_elapsed_is_limit(game, clock):
    clock.now += 30.5
    assert game.time_left() + game.elapsed() == TIME_LIMIT
    assert game.time_left() < TIME_LIMIT


def test_snake_moves_left_by_default(game):
    start = stage_data(1).snake[0]
    assert game.step(-1) is True
    assert game.snake.position == (start[0] - 1, start[1])


def test_arrow_key_turns_snake(game):
    start = stage_data(1).snake[0]
    game.step(curses.KEY_UP)
    assert game.snake.direction is Direction.UP
    assert game.snake.position == (start[0], start[1] - 1)


def test_quit_key_stops_play(game):
    assert game.step(ord("q")) is False
    assert game.snake.is_gaming is False


def test_time_limit_ends_game(game, clock):
    clock.now += TIME_LIMIT
    assert game.step(-1) is False
    assert game.time_over is True
    assert game.snake.is_gaming is False


def test_gates_open_and_stay_open(game):
    game.step(-1)
    # The first tick closes the gates again as the teleport counter hits zero.
    assert count(game.board, ElementType.OPENED_GATE) == 0
    assert game.gate.can_use is True
    game.step(-1)
    assert count(game.board, ElementType.OPENED_GATE) == 2
    assert game.gate.can_use is False


def test_gates_close_when_teleport_counter_runs_out(game):
    game.step(-1)
    game.step(-1)
    game.snake.teleporting = 1
    game.step(-1)
    assert game.snake.teleporting == 0
    assert count(game.board, ElementType.OPENED_GATE) == 2
    game.step(-1)
    assert count(game.board, ElementType.OPENED_GATE) == 0
    assert game.gate.can_use is True


def test_items_spawn_after_interval(game, clock):
    game.step(-1)
    assert game.board.num_items == 0
    clock.now += SPAWN_INTERVAL
    game.step(-1)
    assert game.board.num_items == MAX_ITEMS
    assert count(game.board, ElementType.GROWTH_ITEM) == 1
    assert count(game.board, ElementType.POISON_ITEM) == 1
    assert count(game.board, ElementType.SLOW_ITEM) == 1


def test_timed_walls_toggle_after_period(game):
    x, y = stage_data(1).timed_walls[0]
    assert game.board.get_tile(x, y) is ElementType.TIMED_WALL
    for _ in range(stage_data(1).timed_wall_period):
        game.step(-1)
    assert game.board.get_tile(x, y) is ElementType.EMPTY


def test_completed_missions_advance_stage(game):
    meet_missions(game.snake)
    game.step(-1)
    assert game.stage.current_stage == 2
    assert game.snake.growth_items == 0
    assert game.snake.gate_uses == 0
    assert game.mission_window.missions == list(stage_data(2).missions)
    assert game.gate.can_use is True


def test_clearing_last_stage_ends_game(game):
    game.stage.load(STAGE_COUNT)
    meet_missions(game.snake)
    assert game.step(-1) is False
    assert game.cleared is True
    assert game.stage.current_stage == STAGE_COUNT


def test_panels_follow_the_snake(game):
    game.step(-1)
    lines = game.scoreboard.lines()
    assert lines[0] == "Score Board"
    assert lines[4] == f"G: {game.snake.gate_uses}"
    assert game.mission_window.lines()[0] == "Mission"


def test_panels_are_placed_on_the_screen():
    screen = FakeWindow()
    Game(screen, FakeClock(), random.Random(1))
    assert screen.subwindows == [(10, 20, 0, 45), (10, 20, 12, 45)]


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2
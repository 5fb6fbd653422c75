import random
from unittest import mock

import pytest

from timedsnake.enums import ElementType
from timedsnake.gates import Gate
from timedsnake.stages import STAGE_COUNT, Stage, stage_data


class FakeWindow:
    def __init__(self):
        self.text = {}

    def addstr(self, y, x, text, *attrs):
        self.text[(y, x)] = text


@pytest.fixture
def stage():
    s = Stage(rng=random.Random(7), clock=lambda: 0.0)
    s.load(1)
    return s


@pytest.mark.parametrize("number", range(1, STAGE_COUNT + 1))
def test_stage_data_shape(number):
    data = stage_data(number)
    assert len(data.layout) == data.size
    assert all(len(row) == data.size for row in data.layout)
    assert len(data.snake) == 3
    assert len(data.missions) == 4
    assert data.timed_wall_period == 20
    corners = {data.layout[0][0], data.layout[0][-1], data.layout[-1][0], data.layout[-1][-1]}
    assert corners == {int(ElementType.IMMUNE_WALL)}
    for x, y in data.snake + data.timed_walls:
        assert data.layout[y][x] == int(ElementType.EMPTY)


@pytest.mark.parametrize("number", [0, 5, -1])
def test_stage_data_rejects_out_of_range(number):
    with pytest.raises(ValueError):
        stage_data(number)


def test_load_places_snake_and_timed_walls(stage):
    assert stage.current_stage == 1
    assert stage.snake.position == (9, 12)
    assert stage.board.get_tile(10, 10) is ElementType.TIMED_WALL
    assert stage.board.get_tile(9, 10) is ElementType.TIMED_WALL
    assert stage.board.get_tile(4, 3) is ElementType.WALL
    assert [m.title for m in stage.missions] == ["B", "+", "-", "G"]


def test_check_missions(stage):
    assert stage.check_missions() is False
    stage.snake.length = 4
    stage.snake.growth_items = 2
    stage.snake.poison_items = 1
    stage.snake.gate_uses = 2
    assert stage.check_missions() is False
    stage.snake.length = 5
    assert stage.check_missions() is True


def test_next_stage_resets_score(stage):
    stage.snake.growth_items = 3
    stage.snake.gate_uses = 2
    stage.next_stage()
    assert stage.current_stage == 2
    assert stage.snake.position == (9, 13)
    assert stage.snake.growth_items == 0
    assert stage.snake.gate_uses == 0
    assert stage.board.get_tile(14, 0) is ElementType.IMMUNE_WALL
    assert stage.missions[0].goal == 5


def test_next_stage_past_last_raises(stage):
    stage.load(STAGE_COUNT)
    with pytest.raises(ValueError):
        stage.next_stage()


def test_spawn_items_puts_three_items(stage):
    stage.spawn_items()
    assert stage.board.num_items == 3
    tiles = [stage.board.get_tile(x, y) for y in range(21) for x in range(21)]
    assert tiles.count(ElementType.GROWTH_ITEM) == 1
    assert tiles.count(ElementType.POISON_ITEM) == 1
    assert tiles.count(ElementType.SLOW_ITEM) == 1


def test_set_snake_gate(stage):
    gate = Gate(random.Random(1))
    stage.set_snake_gate(gate)
    assert stage.snake.gate is gate


@mock.patch("curses.color_pair", side_effect=lambda n: n)
def test_draw_map_paints_every_cell(color_pair, stage):
    stage.spawn_items()
    window = FakeWindow()
    stage.draw_map(window)
    assert len(window.text) == 21 * 21
    assert sorted(t for t in window.text.values() if t.strip()) == ["GI", "PI", "SI"]
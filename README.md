# timedsnake

A snake game for the terminal. Steer the snake around a 21 × 21 board,
collect items, pass through gates and finish each stage's missions before
the clock runs out. Some walls near the centre of the board appear and
disappear on a timer, so a path that is open now may be blocked a moment
later.

## Installing

```
pip install .
```

The game draws with `curses` from the standard library, so it needs a
terminal where that module is available (Linux, macOS and other POSIX
systems). There are no other dependencies.

## Playing

```
timedsnake
```

The command takes no options apart from `--help`.

Controls:

- Arrow keys change the snake's direction.
- `q` quits.

When the game ends, press any key to leave.

### The board

- **Walls** end the game if the snake runs into them. Immune walls (the
  corners, and a few other marked wall cells) never hold a gate.
- **Timed walls** sit in a small cross at the centre of the board and
  toggle between wall and empty floor every 20 ticks. Hitting one while
  it is up ends the game.
- **Gates** open as a pair in the outer walls. Entering one sends the
  snake out of the other, heading away from that wall. Once the whole
  snake has passed through, the pair closes back into wall and a new pair
  opens on the next tick.
- **Items** (`GI` growth, `PI` poison, `SI` slow) are checked every five
  seconds: when fewer than three are on the board, or they have lain there
  for ten seconds or more, all items are cleared and a fresh set of one of
  each is placed on empty cells.
  - Growth makes the snake one segment longer.
  - Poison makes it one segment shorter; at three segments it ends the
    game instead.
  - Slow doubles the delay between moves for about two seconds.
- Running into the snake's own body ends the game.

### Missions and stages

The side panels show a score board (current and longest length, growth
and poison items collected, gates used) and the current stage's missions,
each ticked with `v` once it is met. Every stage's missions are: length at
least 5, at least 2 growth items, at least 1 poison item and at least 2
gate uses. (The first stage's panel shows goals of 4 and 1 for the first
two, but the same thresholds apply.) When all missions are met the next
stage is loaded; after the fourth stage the game ends.

The whole game has a 100-second limit, shown under the panels. When it
runs out, "Game Over! Time limit exceeded." is shown for three seconds.

Nothing is saved between games: there is no high-score table.

## Using the pieces

The game logic does not need a terminal and can be driven directly:

- `timedsnake.stages.Stage` owns a `Board` and a `Snake`; `load(n)` sets up
  stage `n` (1–4), `next_stage()` moves on, `check_missions()` tells
  whether every mission is met. `stage_data(n)` returns a stage's layout,
  starting cells, missions and timed walls, and raises `ValueError`
  outside 1–4.
- `timedsnake.board.Board` holds the tiles (`get_tile`, `set_tile`,
  `spawn_items`, `update_timed_walls`, ...), with tile kinds from
  `timedsnake.enums.ElementType`.
- `timedsnake.snake.Snake` moves with `move()`, turns with
  `handle_key(key)` and keeps the score counters.
- `timedsnake.gates.Gate` opens, closes and resolves the gate pair.
- `timedsnake.app.Game(screen, clock, rng)` plays one tick per
  `step(key)` (pass `-1` for no key) and returns whether play goes on;
  `time_left()` gives the seconds remaining. The screen only needs to
  provide `subwin()`, and a clock and `random.Random` may be passed in.

## Running the tests

```
pip install .[test]
pytest
```
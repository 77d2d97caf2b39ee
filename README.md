# meteorfall

A small arcade game. Asteroids fall from the top of the playing field. You fly
a ship in the lower third of the field and shoot them down before they reach
the bottom.

## Installing

```
pip install .
```

This installs pygame along with the game.

## Playing

```
meteorfall
```

This opens an 800×600 window titled "Meteorfall". The playing field is the
window less a 10-pixel margin on every side.

Options:

- `--seed N`: seed the random generator that places new asteroids, so that
  runs repeat.
- `--frames N`: stop after `N` frames. `N` must be a positive integer.

| Input                 | Action                                     |
|-----------------------|--------------------------------------------|
| `W` / `A` / `S` / `D` | move up / left / down / right              |
| left mouse button     | fire while held, at most once every 500 ms |

- Each asteroid is drawn as a polygon outline. A bullet hit takes one side off
  it. When it has fewer than three sides, it is destroyed and you score 10
  points.
- A new asteroid with a random size, side count and speed appears above the
  field every five seconds. Asteroids with more sides fall more slowly.
- An asteroid that passes the bottom of the field costs you health: two hearts
  if it has more than six sides, one heart otherwise.
- You start with ten hearts. The game ends when your health is exactly zero,
  when an asteroid touches your ship, or when you close the window.

The hearts are shown along the top of the field, and the score is shown below
them as seven-segment digits.

## Using the pieces

- `meteorfall.board.Board(x, y, w, h, window, clock=None, rng=None)` holds the
  player's `Ship`, the lists of `bullets` and `asteroids`, and the `playing`
  flag. `window` needs two things: a `keys` attribute, which is a
  `meteorfall.window.KeyState`, and an `add_text` method. `clock` is a callable
  that returns milliseconds; it defaults to a monotonic clock. `rng` is a
  `random.Random`.
- `Board.update()` steps the simulation by `Board.delta_time` seconds.
  `Board.draw(renderer)` paints it.
- `meteorfall.drawing.Renderer(surface)` draws onto any pygame surface. The
  module also has pure geometry helpers: `circle_points`, `digit_rects` and
  `text_rects`.
- `meteorfall.window.KeyState` records which keys are held. Letters are stored
  as their upper-case codes. `0` stands for the left mouse button.

## What it does not do

The game has no pause, no restart and no game-over screen. When a game ends,
the window closes. Scores are not saved anywhere.

## Running the tests

```
pip install .[test]
pytest
```
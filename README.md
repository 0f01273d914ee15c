# flappygopher

A small side-scrolling arcade game. A gopher falls under gravity; press the
jump button to lift it and steer it through the gaps in an endless row of
pipes. Every pipe that scrolls off the left of the screen adds a point to
your score, and the best score of the session is shown on the menu and the
game-over screen.

## Installing

```
pip install .
```

This pulls in `pygame`, which opens the window and draws the game.

## Playing

```
flappygopher
```

Options:

- `--width N`, `--height N` – window size (default 640 × 448; both must be
  positive).
- `--seed N` – seed for the pipe positions, for a repeatable run.
- `--frames N` – stop after this many frames.
- `--verbose` – log the start-up steps.

The keyboard stands in for a controller: *Enter* (or keypad *Enter*) is
*Start*, *Space* or *X* is *Cross*; the arrow keys, *Q*, *1*, *E*, *3*, *W*,
*S*, *A* and *Tab* map to the remaining buttons, which the game does not use.
*Escape* or closing the window quits.

The game moves through three screens:

- **Menu** – shows the title and your high score. Press *Start* to play.
- **In game** – press *Cross* to jump. Touching a pipe or falling off the
  bottom of the screen ends the run.
- **Game over** – shows your score and the high score. Press *Start* to go
  back to the menu.

A frames-per-second counter is drawn in the top-left corner.

## What it does not do

The gopher, the pipes and the title and game-over banners are drawn as plain
coloured rectangles; the game ships no image art, sound or saved high scores.

## Using the pieces

The game logic has no dependency on a window and can be driven directly:

```python
from flappygopher.game import Game, GameState
from flappygopher.pad import PadState
from flappygopher.rng import Random

game = Game(640, 448, Random(1))
game.handle_input(PadState(start=True))
assert game.state is GameState.IN_GAME

game.handle_input(PadState(cross=True))
game.update()
```

`Game.update()` advances one frame and does nothing outside a round.
After a round ends (`Game.end()`) or on returning to the menu
(`Game.go_to_menu()`), `Game.hold()` returns `True` for a few frames.

- `flappygopher.game` – the `Game` state machine, `GameState`, `Pipe`,
  `SegmentKind`, and helpers `pipe_segments`, `menu_lines` and
  `game_over_lines`.
- `flappygopher.pad` – `Button` flags, `PadState`, and `decode_buttons` /
  `encode_buttons` for the active-low controller button word.
- `flappygopher.rng` – a seedable `Random` with `next()` and `between()`.
- `flappygopher.regs` – packing helpers for colour and alpha register values
  (`gs_setreg_rgbaq`, `gs_setreg_alpha`, `unpack_rgbaq`).
- `flappygopher.app` – the `Renderer`, `fps_from_frame_time`, `keys_to_pad`
  and the `main` entry point (also runnable as `python -m flappygopher.app`).

## Running the tests

```
pip install ".[test]"
pytest
```
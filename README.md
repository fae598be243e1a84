# hitlanes

A small four-lane arcade game built on pygame. There are four spawn circles
along the top of the window and four hit circles along the bottom. Each hit
circle lights up while you hold its lane key.

| Lane  | Keys            |
|-------|-----------------|
| left  | `Left` or `D`   |
| down  | `Down` or `F`   |
| up    | `Up` or `J`     |
| right | `Right` or `K`  |

## Installing

```
pip install .
```

This also installs `pygame`.

## Playing

```
hitlanes
hitlanes --resources path/to/resources
```

The game opens a resizable 500×500 window titled "geam". It looks for these
files in the resources directory, which is `resources` unless you pass
`--resources`:

- `game resc/stiched/hit circle-stitched.png` holds the circle sprites. The
  image is split into two cells side by side: the left cell is the lit
  circle and the right cell is the unlit one. The game needs this file.
- `gameData.data` holds the saved state. The game reads it at start-up if it
  exists, and writes it again when the window is closed.

At start-up the game writes an "Init" line. It goes to `logs.txt` in the
current directory, and also to the console. On every frame the game prints
the four lane values to standard output, for example `Inputs: 1, 0, 0, 0`.

## What the game does not do

Notes do not fall down the lanes, nothing is scored, and there is no menu.
`hitlanes.game.Target` can draw one sprite from the atlas, but nothing
spawns targets or moves them. No key toggles full screen. There are no
frame-timing or profiling tools.

## Using the parts on their own

- `hitlanes.input`: keyboard, mouse and gamepad button state. `InputState`
  takes press and release events and advances every `Button` once per frame
  with `update_all_buttons()`. It tracks typed-key repeat: the first repeat
  comes after 0.48 s and then one every 0.07 s. `snapshot()` returns an
  independent `Input` for the frame. Its typed text is cut to 19 characters.
- `hitlanes.logs`: `LogManager` sends each line to a file, to an in-memory
  history of at most 100 entries, and to the console in development mode.
  `log()` and `get_logs_manager()` use a shared manager. `format_log()` and
  `log_to_file()` work without a manager.
- `hitlanes.fileio`: `write_entire_file()`, `append_to_file()`,
  `read_entire_file()`, `read_entire_text()` and `get_file_size()`.
  `get_file_size()` returns 0 for a file that cannot be opened.
- `hitlanes.monitors`: `get_current_monitor()` returns the `Monitor` that
  overlaps a window `Area` the most, or `None`. `overlap_area()` gives the
  area where two rectangles meet.
- `hitlanes.strings`: `split()` drops empty pieces. `strlcpy()` truncates
  text to fit a buffer of a given size. The module also has `find_char()`,
  `to_lower()` and `to_upper()`.
- `hitlanes.game`: `lane_inputs()`, `lane_rects()`, `TextureAtlas`,
  `GameData` and `Game`. A `GameData` saves to and loads from a small binary
  record with `to_bytes()` and `from_bytes()`.
- `hitlanes.app`: `App`, which runs the window and event loop,
  `key_to_button()`, `clamp_delta_time()` (caps a frame at 0.1 s), and
  `main()`.

```python
from hitlanes.input import InputState, Key

state = InputState()
state.set_button_state(Key.D, True)
state.update_all_buttons(1 / 60, None)
assert state.is_button_pressed(Key.D)
```

## Running the tests

```
pip install ".[test]"
pytest
```
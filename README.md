# oilpool

The non-graphical core of a small tic-tac-toe game. It uses only the standard library.

## What it provides

- **Raw input state** (`oilpool.input_state`). `InputState` holds a `MouseState`
  and a `KeyboardState`:
  - The mouse state has window and screen positions, `MouseButtons` and a scroll delta.
  - The keyboard state holds `Modifiers`.
  - `ButtonState` tracks edges (`JUST_PRESSED`, `JUST_RELEASED`). `advance()` and
    `InputState.advance_frame()` turn those into the steady states `PRESSED` and
    `RELEASED`. `advance_frame()` also clears the scroll delta.
- **Event collection** (`oilpool.collector`). `InputCollector.handle_window_event`
  takes plain event values and updates an `InputState`. The events are:
  - `CursorMoved`. The screen position is the window position divided by the scale
    factor set with `set_scale_factor`.
  - `MouseInput`. Buttons other than left, right and middle are ignored.
  - `MouseWheel`, carrying either a `LineDelta` (20 pixels per line) or a `PixelDelta`.
  - `ModifiersChanged`.
  - `KeyboardInput`. This is accepted but not tracked.

  `clone_state()` returns an independent copy. `take_state()` hands the state over
  and starts again from an empty one.
- **Semantic event types** (`oilpool.input_events`). These are frozen data classes:
  `Click`, `Drag`, `Hover`, `Scroll`, `KeyPress` and `KeyRelease`. The module also
  has `MouseButton`, `ViewportId` and `KeyCode`. `KeyCode.from_name` maps physical
  key names such as `"KeyA"`, `"Digit3"`, `"F5"` or `"ArrowUp"` to a key code, and
  maps unknown names to `KeyCode.OTHER`.
- **Board geometry** (`oilpool.geometry`). `BoardLayout.centered` places a 3×3 board
  that spans 60% of the shorter screen side. The layout converts between screen
  coordinates, cells (`cell_center`, `screen_to_cell`) and world units
  (`world_to_screen`, `screen_to_world`). World units are cell sizes, with the origin
  at the board centre. Line segments come from:
  - `generate_board_grid`,
  - `generate_x` and `generate_o`,
  - `generate_digit` and `generate_number`, which draw seven-segment digits.
- **Tessellation** (`oilpool.lines`, `oilpool.ellipses`):
  - `Line.to_vertices()` turns a thick segment into two triangles. A zero-length line
    gives none.
  - `Ellipse.to_vertices(segments)` turns a rotated ellipse into a triangle fan.
  - `LineBatch` and `EllipseBatch` collect the shapes for a frame and return all
    their vertices. `EllipseBatch` uses 16 segments by default.
- **Configuration** (`oilpool.config`). `AppConfig.load(profile)` reads
  `config/<profile>.toml`, or `.json`, and applies overrides from environment
  variables.
  - It looks for the file next to the running program first, then in the current
    directory. The file is optional.
  - An override variable starts with `APP_` and separates nested keys with `__`, as in
    `APP_WINDOW__WIDTH=1920`.
  - `load_from_env()` picks the profile from `APP_PROFILE`, and uses `release` if it
    is not set.
  - `default()` falls back to built-in settings: an 800×600 resizable window titled
    "Oil Pool Game".
  - Missing fields or values of the wrong type raise `ConfigError`.
- **Frame statistics** (`oilpool.debug_ui`). `DebugUIState` holds the debug panel
  toggles and the last 100 frame times. It reports `fps()` and
  `last_frame_time_ms()`. The clock is injectable for testing.

## What it does not do

- It does not route input. Nothing in the package turns an `InputState` into `Click`,
  `Drag`, `Hover` or `Scroll` events, dispatches events to handlers, or hit-tests
  viewports. The event classes are provided as data types only.
- It does not open a window and does not draw. It produces vertex lists that a
  renderer of your choice can consume.
- It contains no game rules, scoring or simulation.
- It has no command-line entry point.

## Installation

```
pip install .
```

## Example

```python
from oilpool.collector import CursorMoved, ElementState, InputCollector, MouseInput
from oilpool.geometry import BoardLayout, generate_board_grid
from oilpool.input_events import MouseButton
from oilpool.lines import LineBatch

collector = InputCollector()
collector.set_scale_factor(2.0)
collector.handle_window_event(CursorMoved((800.0, 600.0)))
collector.handle_window_event(MouseInput(ElementState.PRESSED, MouseButton.LEFT))

state = collector.clone_state()
print(state.mouse.screen_pos)                       # (400.0, 300.0)
print(state.mouse.buttons.left.is_just_pressed())   # True
collector.advance_frame()

layout = BoardLayout.centered(800.0, 600.0)
print(layout.screen_to_cell(*state.mouse.screen_pos))  # (1, 1): the centre cell

batch = LineBatch()
for line in generate_board_grid(layout):
    batch.draw_line(line.start, line.end, line.thickness)
print(len(batch.vertices()))                        # 24: four lines, six vertices each
```

## Running the tests

```
pip install .[test]
pytest
```
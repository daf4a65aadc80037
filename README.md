# quadlite

Building blocks for writing game loops in Python. quadlite keeps the
bookkeeping a game needs around its drawing code (input state, frame timing,
sprite packing, coroutines, a node scene) and leaves the drawing itself to
whatever library you use.

## Modules

- `quadlite.math`: `Vec2` (immutable, with `+`, `-`, `*`, `/`, `length()`),
  `Rect` (`contains`, `overlaps`, `combine_with`, `intersect`, `offset`,
  `move_to`, `scale`, edge helpers), `RectOffset`, `polar_to_cartesian`,
  `cartesian_to_polar` and `clamp`.
- `quadlite.shaders`: `preprocess_shader(source, config)` replaces every
  `#include "name"` directive with text from a `PreprocessorConfig`. Included
  text is scanned again; an unknown name raises `KeyError`, a malformed
  directive raises `ValueError`.
- `quadlite.files`: `load_file(path)` returns bytes, `load_string(path)`
  returns text with invalid UTF-8 replaced. `set_pc_assets_folder(folder)`
  makes later loads read `folder/path`; pass `None` to turn it off. Read
  failures raise `FileError`, which carries `kind` (the `OSError`) and `path`.
- `quadlite.storage`: a global store holding one value per type: `store(value)`,
  `get(kind)` (raises `KeyError` when absent) and `try_get(kind)` (returns
  `None`).
- `quadlite.mouse_camera`: `MouseCamera` with `offset` and `scale`, panned by
  `update(mouse_pos, should_offset)` and zoomed around a point by
  `scale_wheel`, `scale_mul` and `scale_new`.
- `quadlite.image`: `Image`, RGBA bytes in memory. Build one with `empty()`,
  `gen_image_color(width, height, color)` or
  `from_file_with_format(data, fmt)` (decoded with Pillow); read and write
  pixels with `get_pixel`, `set_pixel`, `get_image_data` and `update`; copy
  an area with `sub_image(rect)`; save with `export_png(path)`, which writes
  the rows flipped vertically. `load_image(path)` loads and decodes a file.
  Colors are `(r, g, b, a)` tuples of floats in 0..1.
- `quadlite.atlas`: `Atlas` packs images row by row into a 512x512 image
  that doubles in size when full, re-packing what it already holds. Use
  `new_unique_id()` for keys, `cache_sprite(key, image)` to add,
  `get(key)` for the `Sprite` placement and `get_uv_rect(key)` for
  normalised coordinates.
- `quadlite.input`: `InputState` receives window events
  (`key_down_event`, `mouse_button_down_event`, `touch_event`, ...) and
  answers queries (`is_key_pressed`, `is_key_down`, `mouse_position`,
  `mouse_position_local`, `touches`, `get_char_pressed`, ...).
  `end_frame()` clears the per-frame flags, drops ended or cancelled
  touches and marks the rest stationary. Touches also act as the left mouse
  button while `simulate_mouse_with_touch` is set. Subscribers registered
  with `register_input_subscriber()` get every event recorded, to be
  replayed on a handler object by `repeat_all_input(handler, subscriber)`.
  `MouseButton` and `TouchPhase` are enums; `Touch` and `InputEvent` are
  dataclasses.
- `quadlite.clock`: `Clock` with `tick()`, `get_frame_time()`, `get_fps()`
  and `get_time()`; it accepts a custom time source.
- `quadlite.telemetry`: `Profiler` recording nested `Zone`s per `Frame`
  through `begin_zone`/`end_zone` or the `zone(name)` context manager.
  `enable()` and `disable()` take effect at the next `reset(frame_time)`;
  `next_frame()` hands out the last finished frame.
- `quadlite.animation`: `Animation`, `AnimationFrame` and `AnimatedSprite`
  for sprite sheets laid out as rows of equal tiles.
- `quadlite.state_machine`: `State` (optional `update`, `coroutine` and
  `on_end` callbacks) and `StateMachine` with up to 32 states; a state set
  with `set_state` takes effect on the next `update(owner, dt)`.
- `quadlite.coroutines`: `Coroutines` runs generators one step per
  `update()`; `start` returns a `Coroutine` handle with `is_done()`.
  `wait_seconds`, `linear` and `follow_path` are ready-made generators for
  timers and tweening an attribute.
- `quadlite.scene`: `Scene` of `Node` subclasses addressed by generational
  `Handle`s. `update()` calls `ready` once on new nodes, then `update` and
  `draw` on every node. Nodes can be fetched, deleted, persisted across
  `clear()` and found by type.

## Installing

```
pip install quadlite
```

## Examples

```python
from quadlite.math import Rect, Vec2
from quadlite.shaders import PreprocessorConfig, preprocess_shader

rect = Rect(0.0, 0.0, 10.0, 10.0)
assert rect.contains(Vec2(5.0, 5.0))
assert rect.intersect(Rect(20.0, 20.0, 1.0, 1.0)) is None

config = PreprocessorConfig(includes=[("common.glsl", "float x;")])
print(preprocess_shader('#include "common.glsl"\nvoid main() {}', config))
```

Input state across a frame:

```python
from quadlite.input import InputState

state = InputState()
state.key_down_event("space", None, False)
assert state.is_key_pressed("space") and state.is_key_down("space")
state.end_frame()
assert not state.is_key_pressed("space") and state.is_key_down("space")
```

Coroutines and a scene:

```python
from quadlite.coroutines import Coroutines
from quadlite.scene import Node, Scene


class Counter(Node):
    def __init__(self):
        self.ticks = 0

    def update(self, scene):
        self.ticks += 1


def three_steps():
    for _ in range(3):
        yield


runner = Coroutines()
task = runner.start(three_steps())
scene = Scene(runner)
handle = scene.add_node(Counter())

for _ in range(4):
    runner.update()
    scene.update()

assert task.is_done()
assert scene.get_node(handle).ticks == 4
```

A frame loop usually feeds window events into an `InputState`, runs
`Coroutines.update()` and `Scene.update()`, draws, then calls
`InputState.end_frame()` and `Clock.tick()`.

## What quadlite does not do

quadlite opens no window and draws nothing: it has no renderer, no GPU
textures or materials, no font rasterizing or text drawing, no 3D shapes
and no audio. Events have to come from your windowing library, and images
and atlases stay in memory until you upload them yourself. There is no
command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```
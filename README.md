# piksy

The core of a sprite and animation editor. It provides the data model and
the resource handling that an editor front end builds on.

## Modules

- `piksy.config` has `LogLevel` (TRACE to FATAL), the dataclasses
  `LoggerConfig`, `WindowConfig`, `ImGuiConfig`, `AppConfig` and `Config`,
  and `log_level_to_color`. That function returns an RGBA tuple for a level,
  or white for an unknown value.
- `piksy.logger` has `Logger`. It formats each message as
  `[YYYY-mm-dd HH:MM:SS][LEVEL] text` with `%`-style arguments and prints
  it to stdout, in ANSI colour if `enable_colors` is set. Messages below the
  configured level are dropped. The logger keeps the last 1000 messages,
  which `messages()` returns. After `init(config)` it also appends each
  message to `config.log_file`. `fatal()` logs the message and then raises
  `FatalError`. `get_logger()` returns a shared instance, and that instance
  writes no file until `init` is called on it.
- `piksy.tools` has the `Tool` enumeration and `tool_to_string`.
- `piksy.maths` has a frozen `Vec2` and `lerp`, which works on two numbers
  or on two vectors.
- `piksy.animation` has `Frame` and `Animation`. A `Frame` is a rectangle
  `x, y, w, h` with a `flipped` flag and a `data` dict, which you use through
  `set_data`, `get_data`, `has_data` and `remove_data`. An `Animation` is a
  name and a list of frames.
- `piksy.animation_manager` has `AnimationManager`. It keeps animations
  under unique names. A name that is already taken gets the suffix
  `" <n>"`. `new_default_animation()` adds `New Animation <n>` with the
  lowest free `n`. Each animation you add becomes the current one.
  `update_animation_name(name)` renames the current animation and returns
  `False` if the name is taken or if there is no current animation. The
  `animations` property is a read-only mapping, and `current_animation` is a
  property.
- `piksy.layers` has `Layer` and `LayerStack`. The stack keeps normal
  layers before overlays. It calls `on_attach` when a layer is pushed and
  `on_detach` when a layer is popped. `close()` detaches every layer, last
  first. `Layer.on_event` returns `True` to mark an event as handled. A layer
  or overlay that is missing when you pop it is logged as a warning.
- `piksy.texture` has `Texture2D` and `Font`, both loaded with Pillow.
  `Texture2D` holds an RGBA image from a path or from `from_image(...)`,
  with `width`, `height` and `reload()`. It raises `TextureError` when the
  file is missing or unreadable. If a `Font` cannot be opened, it logs an
  error and its `font` is `None`.
- `piksy.sprite` has `Rect` and `Sprite`. A sprite draws the `frame_rect`
  region of its texture into its `rect`, scaled and offset, onto a Pillow
  image. `render` uses nearest-neighbour resampling. It outlines the sprite
  in yellow when `selected` is set and returns the rectangle it covered.
- `piksy.resource_manager` has `ResourceManager`. It loads textures and
  fonts once per path and caches them. It raises `FileNotFoundError` for a
  path that does not exist. `cleanup()` empties the cache.
- `piksy.state` has the editor state dataclasses: `MouseState`,
  `ZoomState`, `PanState`, `AnimationState`, `ViewportState` and `State`.

## Example

```python
from pathlib import Path

from piksy.animation import Animation, Frame
from piksy.animation_manager import AnimationManager
from piksy.config import LoggerConfig
from piksy.logger import Logger

logger = Logger()
logger.init(LoggerConfig(log_file=Path("piksy.log")))
manager = AnimationManager(logger)

manager.new_default_animation()          # "New Animation 1"
manager.add_animation("Walk", Animation("Walk"))

walk = manager.current_animation         # the "Walk" animation
walk.frames.append(Frame(0, 0, 32, 32))
walk.frames[0].set_data("duration", 0.1)
```

Loading and drawing an image:

```python
from PIL import Image

from piksy.resource_manager import ResourceManager
from piksy.sprite import Sprite

resources = ResourceManager(logger)
texture = resources.get_texture("sheet.png")   # cached on later calls
sprite = Sprite(texture)
sprite.move(10, 5)

canvas = Image.new("RGBA", (256, 256))
sprite.render(canvas, scale=2.0)
```

## What it does not do

piksy is a library only. It has no window, no interactive UI and no
command-line program. It does not save or load project files, extract
frames automatically, swap colours or export textures. The config classes
only describe window and UI settings. Nothing in the package reads those
settings to open a window.

## Tests

The test suite uses pytest, which is listed in the `test` extra.
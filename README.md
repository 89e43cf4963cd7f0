# fehkit

This package is the display-independent core of an image viewer and wallpaper
setter. It works out window sizes, zoom levels, image offsets and wallpaper
layouts. It also builds the shell script that restores a background and the
messages sent to the Enlightenment window manager. Drawing pixels and talking
to the window system are left to the caller.

## Installation

```
pip install fehkit
```

The package has no runtime dependencies and needs Python 3.10 or later.

## Modules

### `fehkit.utils`

- `strjoin(separator, *args)` joins strings. A separator of `None` is treated as
  the empty string.
- `path_is_url(path)` is true for paths that start with `http://`, `https://`,
  `gopher://`, `gophers://`, `ftp://` or `file://`.
- `shell_escape(text)` wraps text in single quotes for a POSIX shell. Each
  embedded `'` becomes `'"'"'`. Very long input is truncated to about 1 KiB.
- `unique_filename(directory, basename)` returns a path of the form
  `<directory>feh_<pid>_<counter>_<basename>` that does not exist yet.
  `directory` must be empty or end with `/`.
- `read_file(path)` reads at most 4095 bytes as text. It drops one trailing
  newline, stops at the first NUL byte, and returns `None` if the file cannot
  be opened.
- `warn(message, stream=None)` writes `feh WARNING: <message>` to standard
  error, or to `stream` if one is given.
- `fatal(message)` raises `FehError`, whose `exit_status` is 2.

For both `warn` and `fatal`, a message that ends in `:` gets the text of the
OS error currently being handled appended to it.

### `fehkit.geometry`

- The enumerations `ViewMode`, `BgMode`, `ZoomMode` and `WinType`.
- Limits and defaults such as `ZOOM_MIN`, `ZOOM_MAX`, `SLIDESHOW_RELOAD_MAX`
  and the default font names.
- `Geometry` describes an X-style geometry. Parts that are absent are `None`,
  and `x_negative` / `y_negative` mark positions measured from the right or
  bottom edge. `format_position()` renders the position part, for example
  `+10+20` or `-5-0`.
- `Rect` has a `contains(x, y)` method, and `xy_in_rect(x, y, rx, ry, rw, rh)`
  does the same test on plain numbers. In both, the right and bottom edges are
  excluded.

### `fehkit.wallpaper`

- `bg_mode_flags(mode)` maps a `BgMode` to `(centered, scaled, filled)`:
  - `filled` is 1 for fill and 2 for max.
  - `NONE` and `CENTER` both count as centred.
- The layout functions below each return a `RenderOp`. A `RenderOp` gives the
  source region of the image, the target region on the screen, and whether to
  smooth.
  - `scaled_layout(image_w, image_h, x, y, w, h)` stretches the image over the
    target.
  - `centered_layout(..., geometry=None)` places the image unscaled, centred
    unless a `Geometry` gives a position.
  - `filled_layout(..., geometry=None)` covers the target and crops the
    overflow. The crop can be shifted along the cut axis with a `Geometry`.
  - `maxed_layout(..., geometry=None)` fits the whole image and keeps its
    aspect ratio.
- `bg_script(executable, mode, files, options=None)` builds the text of a
  restore script. It starts `#!/bin/sh` and runs `<executable> --no-fehbg
  --bg-<mode>`, with `--image-bg`, `--xinerama-index`, `--no-xinerama`,
  `--geometry` and `--force-aliasing` taken from `BgScriptOptions`, and then
  the shell-escaped file paths.
- `write_bg_script(path, content)` writes the script and adds the user and
  group execute bits. Problems are reported as warnings, and it returns
  whether the file was written.

### `fehkit.enl_ipc`

- `bg_ipc_commands(bgname, filename, mode, desktop)` returns the list of
  `background ...` / `use_bg ...` commands that set a background. It returns
  an empty list, with a warning, if the first command would not fit in the
  4096-byte send buffer.
- `encode_ipc_message(window_id, text)` splits a message into 20-byte
  client-message payloads. Each payload is the window id as eight hex digits
  followed by up to twelve message bytes. It raises `ValueError` for an id
  that does not fit.
- `IpcReplyAssembler.feed(chunk)` collects reply payloads. It returns the
  complete message once a payload shorter than twelve bytes arrives. Feeding
  `None` raises `TimeoutError`, and `reset()` drops a half-received message.
- `parse_num_desks(reply)` reads the first number in a reply. A reply of
  `None` gives -1 and a reply without digits gives 0.

### `fehkit.window`

- `ViewOptions` holds the settings that affect a window: default zoom, fixed
  geometry, image offset, screen clipping, scale-down, zoom mode, keeping the
  viewport, forced aliasing, and pause state.
- `calc_needed_zoom(orig_w, orig_h, dest_w, dest_h, zoom_mode=None)` returns
  `(zoom, ratio)`. In `ZoomMode.FILL` the ratio is inverted, so the image
  covers the destination instead of fitting inside it.
- `initial_window_geometry(width, height, screen_w, screen_h, options,
  full_screen=False)` returns the `Rect` of a new window.
- `ImageWindow` holds a window's size, the image dimensions, zoom, offsets and
  name. Its methods are:
  - `reset_image(keep_zoom_vp)` forgets rotation and, unless the viewport is
    kept, zoom and offsets.
  - `center_image(screen_w, screen_h, options)` centres the zoomed image.
  - `sanitise_offsets()` keeps panning within the image edges.
  - `rename(name, paused)` sets the name, adding or removing the ` [Paused]`
    suffix, and returns the new name. The `title` property falls back to
    `feh` when there is no name.
  - `fit_zoom(options)` picks the zoom and offset after a resize.
  - `needs_checks(options, has_alpha)` tells whether the checkerboard
    background would show.
  - `render_region(force_alias)` returns the visible part of the image as a
    `RenderOp`.
  - `free_image()` drops the image and its dimensions.
  - `move(x, y, screen_w, screen_h)` moves the window, clamped to the screen.
  - `clip_size(w, h, screen_w, screen_h, options)` resizes the window, clipped
    to the screen.

### `fehkit.registry`

`WindowRegistry` keeps the open windows in creation order and indexes them by
window id. Its methods are:

- `register` and `unregister`.
- `first_of_type(win_type)` returns the earliest window of that type.
- `find(window_id)` looks a window up by id.
- `destroy_all()` removes every window, newest first, frees its image, and
  returns them in that order.

The registry also supports `len()` and iteration.

## Example

```python
import os

from fehkit.geometry import BgMode, Geometry
from fehkit.wallpaper import BgScriptOptions, bg_script, filled_layout, write_bg_script
from fehkit.window import ImageWindow, ViewOptions, calc_needed_zoom

op = filled_layout(1920, 1200, 0, 0, 1920, 1080, Geometry())
print(op.src_x, op.src_y, op.src_w, op.src_h)

script = bg_script("feh", BgMode.FILL, ["/srv/pictures/sky.png"], BgScriptOptions())
write_bg_script(os.path.expanduser("~/.fehbg"), script)

zoom, ratio = calc_needed_zoom(4000, 3000, 1280, 800)

window = ImageWindow(w=1280, h=800, im_w=4000, im_h=3000)
window.fit_zoom(ViewOptions(scale_down=True))
print(window.zoom, window.im_x, window.im_y, window.render_region())
```

## What this package does not do

- It does not load or decode images.
- It does not draw anything.
- It does not open windows, set the root-window pixmap, or send X events.

The IPC helpers only build and parse message bytes. Sending them is left to
the caller.

There is no command-line program and no interactive viewer: no key or mouse
handling, menus, slideshow or thumbnail modes.

## Running the tests

```
pip install -e .[test]
pytest
```
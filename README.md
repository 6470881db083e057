# fehcore

The display-independent core of an image viewer and wallpaper setter.
It does the arithmetic and text handling that decide where an image
goes and how it is described. The caller draws the image on the screen.

## Modules

- `fehcore.constants` holds the enumerations:
  - `Mode`, `BgMode`, `ZoomMode`, `TextBg` and `SlideChange`
  - `LoadError` and `WinType`
  - the Motif hint flags `MwmHints`, `MwmFunc`, `MwmDecor` and `MwmInput`

  It also has limits such as `ZOOM_MIN` and `ZOOM_MAX`, and two helpers:
  - `xy_in_rect` tests whether a point lies in a rectangle.
  - `clamp_zoom` limits a zoom factor to `ZOOM_MIN`..`ZOOM_MAX`.
- `fehcore.utils` has small helpers:
  - `estrjoin(separator, *args)` joins strings. A `None` separator means
    no separator.
  - `path_is_url` returns true for `http://`, `https://`, `gopher://`,
    `gophers://`, `ftp://` and `file://` paths.
  - `unique_filename(directory, basename)` returns a name of the form
    `feh_<pid>_<number>_<basename>` that does not exist yet.
  - `read_file` reads at most 4095 bytes and drops one trailing newline.
    It returns `None` if the file cannot be opened.
  - `shell_escape` single-quotes text for a POSIX shell. Its output is
    limited to about 1 KiB.
  - `format_message` and `warn` build and print `feh WARNING: ...` lines.
    `FatalError` is an exception that carries exit status 2.
- `fehcore.geometry` lays an image out on a screen `Rect`.
  - `Geometry` holds the `--geometry` offsets. Negative offsets count
    from the right or bottom edge.
  - The result of a layout is a `RenderPart`: which part of the image to
    draw, and where to draw it.
  - `scaled_placement`, `centered_placement`, `filled_placement`,
    `maxed_placement` and `tiled_placement` each compute one layout.
- `fehcore.bgscript`:
  - `BgScript.render()` produces the text of the `.fehbg` shell script
    that restores the last background.
  - `BgScript.write(home)` writes that script into `home` and sets its
    user and group execute bits.
  - `mode_name` and `mode_for_flags` map between the option suffixes and
    the `BgMode` values.
- `fehcore.enlipc` builds and reads Enlightenment IPC messages.
  - `encode_message` splits a message into 20-byte client-message chunks.
  - `ReplyAssembler.feed` rebuilds a reply from its chunks. Feeding
    `None` raises `IpcTimeout`.
  - `parse_ipc_window` reads the IPC window id from a property.
  - `parse_num_desks` reads the desktop count from a reply.
  - `background_commands` and `client_registration` produce the command
    sequences to send.
- `fehcore.viewport`:
  - `Viewport` holds the zoom and pan state of one window. Its methods
    are `reset`, `sanitise_offsets`, `center`, `fit`, `render_area`,
    `needs_checks` and `antialias`.
  - `calc_needed_zoom` returns the zoom that fits an image to a
    destination, or covers the destination with `ZoomMode.FILL`. It
    returns it together with the aspect ratio.
- `fehcore.windows`:
  - `initial_placement` gives the starting position and size of a window.
  - `clip_resize` gives the resized dimensions when windows are clipped
    to the screen.
  - `clamp_move` keeps a moved window's origin on the screen.
  - `paused_title` adds or removes the ` [Paused]` title suffix.
  - `WindowRegistry` keeps the ordered list of `WindowInfo` entries.

## Example

```python
from fehcore.bgscript import BgScript
from fehcore.constants import BgMode
from fehcore.geometry import Geometry, Rect, filled_placement
from fehcore.utils import shell_escape

screen = Rect(0, 0, 1920, 1080)
part = filled_placement(4000, 3000, screen, Geometry())
print(part.source, part.dest)

print(shell_escape("it's here.jpg"))   # 'it'"'"'s here.jpg'

script = BgScript(mode=BgMode.FILL, file="/tmp/wall.jpg")
print(script.render())
```

## What it does not do

This package has no command-line program and opens no windows. It does
not load, decode or draw images. It does not talk to an X server or to a
window manager. The IPC helpers only encode and decode the messages, and
the caller sends and receives them. The geometry and viewport functions
return numbers for the caller's own drawing code to use.

## Tests

```
pip install .[test]
pytest
```
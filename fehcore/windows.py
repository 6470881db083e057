"""Window placement rules, titles and the registry of open viewer windows."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import WinType
from .viewport import calc_needed_zoom

PAUSED_SUFFIX = " [Paused]"


@dataclass(frozen=True)
class WindowPlacement:
    """A window position and size.

    Used both for a computed placement and for a user-requested geometry.
    In a requested geometry a field of None is unset, and a negative
    position is measured from the right or bottom edge of the screen.
    """

    x: int | None = None
    y: int | None = None
    w: int | None = None
    h: int | None = None
    x_negative: bool = False
    y_negative: bool = False

    @property
    def is_set(self):
        """True if any position or size was given."""
        return any(value is not None for value in (self.x, self.y, self.w, self.h))


def initial_placement(w, h, screen_w, screen_h, full_screen=False,
                      geometry=None, screen_clip=False):
    """Position and size of a newly created window.

    A full-screen window covers the screen.  Otherwise a user geometry
    overrides the size and position; failing that, ``screen_clip`` keeps
    the window from growing beyond the screen.
    """
    x = y = 0
    if full_screen:
        return WindowPlacement(0, 0, screen_w, screen_h)
    if geometry is not None and geometry.is_set:
        if geometry.w is not None:
            w = geometry.w
        if geometry.h is not None:
            h = geometry.h
        if geometry.x is not None:
            x = screen_w - geometry.x if geometry.x_negative else geometry.x
        if geometry.y is not None:
            y = screen_h - geometry.y if geometry.y_negative else geometry.y
    elif screen_clip:
        w = min(w, screen_w)
        h = min(h, screen_h)
    return WindowPlacement(x, y, w, h)


def clip_resize(im_w, im_h, zoom, w, h, screen_w, screen_h,
                scale_down=False, keep_zoom_vp=False, zoom_mode=None):
    """Window size for a resize request when windows are clipped to the screen.

    With ``scale_down`` (and no kept viewport) the image is zoomed to fit
    the requested size, itself limited to the screen.  Returns ``(w, h)``.
    """
    required_zoom = zoom
    if scale_down and not keep_zoom_vp:
        max_w = min(w, screen_w)
        max_h = min(h, screen_h)
        required_zoom, _ = calc_needed_zoom(im_w, im_h, max_w, max_h, zoom_mode)
    desired_w = int(im_w * required_zoom)
    desired_h = int(im_h * required_zoom)
    return min(desired_w, screen_w), min(desired_h, screen_h)


def paused_title(name, paused):
    """Add or remove the ``[Paused]`` marker at the end of a window title."""
    name = name or ""
    if paused and not name.endswith(PAUSED_SUFFIX):
        return name + PAUSED_SUFFIX
    if not paused and name.endswith(PAUSED_SUFFIX):
        return name[: -len(PAUSED_SUFFIX)]
    return name


def clamp_move(x, y, screen_w, screen_h):
    """Keep a window's new origin from lying beyond the screen's far edges."""
    return min(x, screen_w), min(y, screen_h)


@dataclass(eq=False)
class WindowInfo:
    """An open viewer window as known to the registry."""

    window_id: int
    win_type: WinType = WinType.UNSET
    name: str | None = None
    visible: bool = False

    @property
    def title(self):
        """The title shown by the window manager."""
        return self.name if self.name else "feh"


class WindowRegistry:
    """The open windows, in the order they were created."""

    def __init__(self):
        self._windows = []

    def register(self, window):
        """Add a window to the end of the list."""
        self._windows.append(window)

    def unregister(self, window):
        """Remove a window; removing an unknown window does nothing."""
        self._windows = [entry for entry in self._windows if entry is not window]

    def first_of_type(self, win_type):
        """The oldest window of the given type, or None."""
        return next((w for w in self._windows if w.win_type == win_type), None)

    def __iter__(self):
        return iter(list(self._windows))

    def __len__(self):
        return len(self._windows)
"""Enumerations, limits and small helpers shared across the viewer core."""

from __future__ import annotations

from enum import IntEnum, IntFlag

SLIDESHOW_RELOAD_MAX = 4096

DEFAULT_FONT = "yudit/11"
DEFAULT_MENU_FONT = "yudit/10"
DEFAULT_FONT_BIG = "yudit/12"
DEFAULT_FONT_TITLE = "yudit/14"

INPLACE_EDIT_FLIP = -1
INPLACE_EDIT_MIRROR = -2

ZOOM_MIN = 0.002
ZOOM_MAX = 2000.0

PROP_MWM_HINTS_ELEMENTS = 5


class Mode(IntEnum):
    """Interactive mode of a window."""

    NORMAL = 0
    PAN = 1
    ZOOM = 2
    ROTATE = 3
    BLUR = 4
    NEXT = 5


class BgMode(IntEnum):
    """How a wallpaper is laid out on the root window."""

    NONE = 0
    TILE = 1
    CENTER = 2
    SCALE = 3
    FILL = 4
    MAX = 5


class ZoomMode(IntEnum):
    """Automatic zoom behaviour."""

    FILL = 1
    MAX = 2


class TextBg(IntEnum):
    """Background drawn behind overlay text."""

    CLEAR = 0
    TINTED = 1


class SlideChange(IntEnum):
    """Ways of moving through a slideshow."""

    NEXT = 0
    PREV = 1
    RAND = 2
    FIRST = 3
    LAST = 4
    JUMP_FWD = 5
    JUMP_BACK = 6
    JUMP_NEXT_DIR = 7
    JUMP_PREV_DIR = 8


class LoadError(IntEnum):
    """Source of an image loading failure."""

    IMLIB = 0
    IMAGEMAGICK = 1
    CURL = 2
    DCRAW = 3
    MAGICBYTES = 4


class WinType(IntEnum):
    """Role of a viewer window."""

    UNSET = 0
    SLIDESHOW = 1
    SINGLE = 2
    THUMBNAIL = 3
    THUMBNAIL_VIEWER = 4


class MwmHints(IntFlag):
    """Fields present in a Motif window-manager hints property."""

    FUNCTIONS = 1 << 0
    DECORATIONS = 1 << 1
    INPUT_MODE = 1 << 2
    STATUS = 1 << 3


class MwmFunc(IntFlag):
    """Window-manager functions allowed by Motif hints."""

    ALL = 1 << 0
    RESIZE = 1 << 1
    MOVE = 1 << 2
    MINIMIZE = 1 << 3
    MAXIMIZE = 1 << 4
    CLOSE = 1 << 5


class MwmDecor(IntFlag):
    """Window decorations requested by Motif hints."""

    ALL = 1 << 0
    BORDER = 1 << 1
    RESIZEH = 1 << 2
    TITLE = 1 << 3
    MENU = 1 << 4
    MINIMIZE = 1 << 5
    MAXIMIZE = 1 << 6


class MwmInput(IntEnum):
    """Input modality values of Motif hints."""

    MODELESS = 0
    PRIMARY_APPLICATION_MODAL = 1
    SYSTEM_MODAL = 2
    FULL_APPLICATION_MODAL = 3


def xy_in_rect(x, y, rx, ry, rw, rh):
    """Return True if the point (x, y) lies inside the rectangle."""
    return rx <= x < rx + rw and ry <= y < ry + rh


def clamp_zoom(zoom):
    """Limit a zoom factor to the supported range."""
    return min(max(zoom, ZOOM_MIN), ZOOM_MAX)
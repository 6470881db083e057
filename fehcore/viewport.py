"""Zoom and pan arithmetic for an image shown inside a window."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .constants import ZoomMode
from .geometry import Geometry, Rect


def _lround(value):
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def calc_needed_zoom(orig_w, orig_h, dest_w, dest_h, zoom_mode=None):
    """Zoom that makes an image of ``orig`` size fit ``dest``.

    Returns ``(zoom, ratio)``.  With ``ZoomMode.FILL`` the zoom covers the
    destination instead of fitting inside it.
    """
    if orig_w <= 0 or orig_h <= 0:
        raise ValueError(f"invalid image size {orig_w}x{orig_h}")
    if dest_w <= 0 or dest_h <= 0:
        raise ValueError(f"invalid destination size {dest_w}x{dest_h}")
    ratio = (orig_w / orig_h) / (dest_w / dest_h)
    if zoom_mode == ZoomMode.FILL:
        ratio = 1.0 / ratio
    zoom = dest_w / orig_w if ratio > 1.0 else dest_h / orig_h
    return zoom, ratio


@dataclass(frozen=True)
class RenderArea:
    """The part of the image to draw (in image pixels) and where (in window pixels)."""

    source: Rect
    dest: Rect


@dataclass
class Viewport:
    """Window size, image size, zoom and the image's offset in the window."""

    w: int
    h: int
    im_w: int
    im_h: int
    im_x: int = 0
    im_y: int = 0
    zoom: float = 1.0
    old_zoom: float = 1.0
    im_angle: float = 0.0
    has_rotated: bool = False

    def reset(self, keep_zoom_vp=False):
        """Forget rotation and, unless the viewport is kept, zoom and panning."""
        if not keep_zoom_vp:
            self.zoom = 1.0
            self.old_zoom = 1.0
            self.im_x = 0
            self.im_y = 0
        self.im_angle = 0.0
        self.has_rotated = False

    def sanitise_offsets(self):
        """Keep the image from being panned beyond its edges."""
        scaled_w = self.im_w * self.zoom
        scaled_h = self.im_h * self.zoom
        far_left = int(self.w - scaled_w)
        far_top = int(self.h - scaled_h)

        min_x, max_x = (far_left, 0) if scaled_w > self.w else (0, far_left)
        min_y, max_y = (far_top, 0) if scaled_h > self.h else (0, far_top)

        self.im_x = max(min(self.im_x, max_x), min_x)
        self.im_y = max(min(self.im_y, max_y), min_y)

    def center(self, screen_w, screen_h, full_screen=False, geom_w=None, geom_h=None):
        """Centre the image on the screen, or in a window of user-given size.

        Without full screen, a dimension with no user-given size gets offset 0.
        """
        scaled_w = _lround(self.im_w * self.zoom)
        scaled_h = _lround(self.im_h * self.zoom)
        if full_screen:
            self.im_x = (screen_w - scaled_w) >> 1
            self.im_y = (screen_h - scaled_h) >> 1
            return
        self.im_x = (int(geom_w) - scaled_w) >> 1 if geom_w is not None else 0
        self.im_y = (int(geom_h) - scaled_h) >> 1 if geom_h is not None else 0

    def fit(self, default_zoom=0, scale_down=False, full_screen=False,
            zoom_mode=None, offset=None):
        """Choose the zoom and offsets used after the window was resized.

        ``default_zoom`` is a percentage (0 for none); ``offset`` is a
        Geometry giving the image position.  Returns the new zoom.
        """
        required_zoom, _ = calc_needed_zoom(self.im_w, self.im_h, self.w, self.h, zoom_mode)
        zoom = 0.01 * default_zoom if default_zoom else 1.0

        if (scale_down or (full_screen and not default_zoom)) and zoom > required_zoom:
            zoom = required_zoom
        elif (zoom_mode and required_zoom > 1) and (not default_zoom or required_zoom < zoom):
            zoom = required_zoom
        self.zoom = zoom

        offset = offset or Geometry()
        if offset.x is not None:
            if offset.x_negative:
                self.im_x = int(self.w - self.im_w * zoom - offset.x)
            else:
                self.im_x = int(-offset.x * zoom)
        else:
            self.im_x = int(self.w - self.im_w * zoom) >> 1
        if offset.y is not None:
            if offset.y_negative:
                self.im_y = int(self.h - self.im_h * zoom - offset.y)
            else:
                self.im_y = int(-offset.y * zoom)
        else:
            self.im_y = int(self.h - self.im_h * zoom) >> 1
        return zoom

    def render_area(self):
        """The visible part of the image and where it lands in the window."""
        dx = max(self.im_x, 0)
        dy = max(self.im_y, 0)
        sx = -_lround(self.im_x / self.zoom) if self.im_x < 0 else 0
        sy = -_lround(self.im_y / self.zoom) if self.im_y < 0 else 0

        calc_w = _lround(self.im_w * self.zoom)
        calc_h = _lround(self.im_h * self.zoom)
        dw = min(self.w - self.im_x, calc_w, self.w)
        dh = min(self.h - self.im_y, calc_h, self.h)

        sw = _lround(dw / self.zoom)
        sh = _lround(dh / self.zoom)
        return RenderArea(Rect(sx, sy, sw, sh), Rect(dx, dy, dw, dh))

    def needs_checks(self, has_alpha=False, geometry_sized=False, has_rotated=None):
        """Whether a checkerboard must be drawn behind the image.

        This applies to windowed mode; full-screen windows use a plain fill.
        """
        rotated = self.has_rotated if has_rotated is None else has_rotated
        return bool(
            has_alpha
            or geometry_sized
            or self.im_x
            or self.im_y
            or self.w > self.im_w * self.zoom
            or self.h > self.im_h * self.zoom
            or rotated
        )

    def antialias(self, has_rotated=None, force_alias=False):
        """Whether the image should be drawn with anti-aliasing."""
        rotated = self.has_rotated if has_rotated is None else has_rotated
        return bool((self.zoom != 1.0 or rotated) and not force_alias)
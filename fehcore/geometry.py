"""Placement arithmetic for drawing a wallpaper image onto a screen area."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Geometry:
    """A user-supplied position such as ``+10-20``.

    ``x`` and ``y`` are None when not given.  A negative offset is measured
    from the right or bottom edge; its value is then negative or zero.
    """

    x: int | None = None
    y: int | None = None
    x_negative: bool = False
    y_negative: bool = False

    @staticmethod
    def _offset(value, negative, free_space):
        if value is None:
            return free_space >> 1
        if negative:
            return free_space + value
        return value

    def offset_x(self, free_space):
        """Horizontal offset given the free space left by the image."""
        return self._offset(self.x, self.x_negative, free_space)

    def offset_y(self, free_space):
        """Vertical offset given the free space left by the image."""
        return self._offset(self.y, self.y_negative, free_space)

    def as_argument(self):
        """Return the ``--geometry`` value, or None if no position is set."""
        if self.x is None:
            return None
        text = f"{'-' if self.x_negative else '+'}{abs(self.x) if self.x_negative else self.x}"
        if self.y is not None:
            text += f"{'-' if self.y_negative else '+'}{abs(self.y) if self.y_negative else self.y}"
        return text


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle."""

    x: int
    y: int
    w: int
    h: int


@dataclass(frozen=True)
class RenderPart:
    """Which part of the image goes where.

    ``source`` is None when the whole image is drawn into ``dest``.
    """

    source: Rect | None
    dest: Rect


def _check_sizes(image_w, image_h, screen):
    if image_w <= 0 or image_h <= 0:
        raise ValueError(f"invalid image size {image_w}x{image_h}")
    if screen.w <= 0 or screen.h <= 0:
        raise ValueError(f"invalid screen size {screen.w}x{screen.h}")


def scaled_placement(screen):
    """Stretch the whole image over the screen area."""
    return RenderPart(None, Rect(screen.x, screen.y, screen.w, screen.h))


def centered_placement(image_w, image_h, screen, geometry=None):
    """Draw the image unscaled, centred or at the given position."""
    geometry = geometry or Geometry()
    offset_x = geometry.offset_x(screen.w - image_w)
    offset_y = geometry.offset_y(screen.h - image_h)
    source = Rect(max(-offset_x, 0), max(-offset_y, 0), screen.w, screen.h)
    dest = Rect(
        screen.x + max(offset_x, 0),
        screen.y + max(offset_y, 0),
        screen.w,
        screen.h,
    )
    return RenderPart(source, dest)


def filled_placement(image_w, image_h, screen, geometry=None):
    """Fill the screen area, cutting off whatever does not fit."""
    _check_sizes(image_w, image_h, screen)
    geometry = geometry or Geometry()
    w, h = screen.w, screen.h
    cut_x = image_w * h > image_h * w

    render_w = (image_h * w) // h if cut_x else image_w
    render_h = image_h if cut_x else (image_w * h) // w
    render_x = (image_w - render_w) >> 1 if cut_x else 0
    render_y = 0 if cut_x else (image_h - render_h) >> 1

    if cut_x and geometry.x is not None:
        if geometry.x_negative:
            render_x = image_w - render_w + geometry.x
        else:
            render_x = geometry.x
        if render_x < 0:
            render_x = 0
        elif render_x + render_w > image_w:
            render_x = image_w - render_w
    elif not cut_x and geometry.y is not None:
        if geometry.y_negative:
            render_y = image_h - render_h + geometry.y
        else:
            render_y = geometry.y
        if render_y < 0:
            render_y = 0
        elif render_y + render_h > image_h:
            render_y = image_h - render_h

    return RenderPart(
        Rect(render_x, render_y, render_w, render_h),
        Rect(screen.x, screen.y, w, h),
    )


def maxed_placement(image_w, image_h, screen, geometry=None):
    """Scale the image as large as fits, keeping its aspect ratio."""
    _check_sizes(image_w, image_h, screen)
    geometry = geometry or Geometry()
    w, h = screen.w, screen.h
    border_x = not (image_w * h > image_h * w)

    render_w = (image_w * h) // image_h if border_x else w
    render_h = h if border_x else (image_h * w) // image_w

    margin_x = geometry.offset_x(w - render_w)
    margin_y = geometry.offset_y(h - render_h)

    render_x = screen.x + (margin_x if border_x else 0)
    render_y = screen.y + (0 if border_x else margin_y)
    return RenderPart(None, Rect(render_x, render_y, render_w, render_h))


def tiled_placement(image_w, image_h):
    """The image at its own size, used as a tile."""
    return RenderPart(None, Rect(0, 0, image_w, image_h))
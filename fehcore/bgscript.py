"""The ``~/.fehbg`` script that restores the last wallpaper."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass, field

from .constants import BgMode
from .geometry import Geometry
from .utils import shell_escape, warn

_MODE_NAMES = {
    BgMode.CENTER: "center",
    BgMode.SCALE: "scale",
    BgMode.FILL: "fill",
    BgMode.MAX: "max",
}


def mode_name(mode):
    """Suffix of the ``--bg-`` option for a background mode."""
    return _MODE_NAMES.get(BgMode(mode), "tile")


def mode_for_flags(centered, scaled, filled):
    """Background mode from the centred, scaled and filled settings."""
    if centered:
        return BgMode.CENTER
    if scaled:
        return BgMode.SCALE
    if filled == 1:
        return BgMode.FILL
    if filled == 2:
        return BgMode.MAX
    return BgMode.TILE


@dataclass
class BgScript:
    """Settings that reproduce a wallpaper when run as a shell script."""

    command: str = "feh"
    mode: BgMode = BgMode.TILE
    file: str | None = None
    filelist: tuple = ()
    image_bg: str | None = None
    xinerama: bool = True
    xinerama_index: int = -1
    geometry: Geometry = field(default_factory=Geometry)
    force_aliasing: bool = False

    def render(self):
        """Return the script text."""
        command = os.path.abspath(self.command) if "/" in self.command else self.command
        parts = ["#!/bin/sh\n", command, " --no-fehbg --bg-", mode_name(self.mode)]
        if self.image_bg:
            parts += [" --image-bg ", shell_escape(self.image_bg)]
        if self.xinerama:
            if self.xinerama_index >= 0:
                parts.append(f" --xinerama-index {self.xinerama_index}")
        else:
            parts.append(" --no-xinerama")
        position = self.geometry.as_argument()
        if position is not None:
            parts.append(f" --geometry {position}")
        if self.force_aliasing:
            parts.append(" --force-aliasing")
        parts.append(" ")
        if self.filelist:
            for path in self.filelist:
                parts += [shell_escape(os.path.abspath(path)), " "]
        elif self.file:
            parts.append(shell_escape(os.path.abspath(self.file)))
        parts.append("\n")
        return "".join(parts)

    def write(self, home):
        """Write ``.fehbg`` into ``home`` and make it executable.

        Returns the path written, or None if there is no home or writing fails.
        """
        if not home:
            return None
        path = os.path.join(home, ".fehbg")
        try:
            with open(path, "w", encoding="utf-8") as handle:
                handle.write(self.render())
        except OSError:
            warn(f"Can't write to {path}")
            return None
        try:
            mode = os.stat(path).st_mode
            os.chmod(path, mode | stat.S_IXUSR | stat.S_IXGRP)
        except OSError:
            warn(f"Can't set {path} as executable")
        return path
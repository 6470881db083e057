"""Message formatting, string helpers and small file utilities."""

from __future__ import annotations

import itertools
import os
import sys

PACKAGE = "feh"

_READ_LIMIT = 4095
_ESCAPE_BUFFER = 1024
_UNIQUE_MAX = 999998

_unique_counter = itertools.count(1)


def format_message(kind, message, error=None):
    """Build a diagnostic line such as ``feh WARNING: text``.

    A message ending in ``:`` gets the description of ``error`` appended.
    """
    line = f"{PACKAGE} {kind}: {message}"
    if message.endswith(":") and error is not None:
        detail = getattr(error, "strerror", None) or str(error)
        line += f" {detail}"
    return line


class FatalError(Exception):
    """An error that ends the program with exit status 2."""

    exit_status = 2

    def __init__(self, message, error=None):
        super().__init__(message)
        self.message = message
        self.error = error

    def __str__(self):
        return format_message("ERROR", self.message, self.error)


def warn(message, error=None):
    """Print a warning to standard error and carry on."""
    sys.stdout.flush()
    print(format_message("WARNING", message, error), file=sys.stderr)


def estrjoin(separator, *args):
    """Join the strings with ``separator``; a None separator means none."""
    return ("" if separator is None else separator).join(args)


_URL_PREFIXES = ("http://", "https://", "gopher://", "gophers://", "ftp://", "file://")


def path_is_url(path):
    """Return True if the path names a remote or file URL."""
    return path.startswith(_URL_PREFIXES)


def unique_filename(directory, basename):
    """Return a name in ``directory`` that does not yet exist.

    ``directory`` must be empty or end with a path separator.
    """
    global _unique_counter
    pid = f"{os.getpid():06d}"
    while True:
        number = next(_unique_counter)
        if number > _UNIQUE_MAX:
            _unique_counter = itertools.count(1)
            number = next(_unique_counter)
        candidate = estrjoin("", directory, "feh_", pid, "_", f"{number:06d}", "_", basename)
        if not os.path.exists(candidate):
            return candidate


def read_file(path):
    """Read at most 4095 bytes of a file as text, without a final newline.

    Returns None when the file cannot be opened.
    """
    try:
        with open(path, "rb") as handle:
            data = handle.read(_READ_LIMIT)
    except OSError:
        return None
    if data.endswith(b"\n"):
        data = data[:-1]
    data = data.partition(b"\0")[0]
    return data.decode("utf-8", errors="replace")


def shell_escape(text):
    """Quote text for a POSIX shell, limited to about 1 KiB of output."""
    parts = ["'"]
    out = 1
    for char in text:
        if out >= _ESCAPE_BUFFER - 7:
            break
        if char == "'":
            parts.append("'\"'\"'")
            out += 5
        else:
            parts.append(char)
            out += 1
    parts.append("'")
    return "".join(parts)
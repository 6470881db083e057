"""Message encoding and reply handling for the Enlightenment IPC protocol.

Messages travel as a series of 20-byte client messages.  Each one starts
with the sender's window id as eight hex digits padded with spaces, and
carries up to twelve bytes of text.  A chunk that holds fewer than twelve
bytes of text ends the message.
"""

from __future__ import annotations

import re

from .constants import BgMode

CHUNK_SIZE = 20
WINDOW_ID_WIDTH = 8
PAYLOAD_SIZE = CHUNK_SIZE - WINDOW_ID_WIDTH
SEND_BUFFER_SIZE = 4096

_IPC_WINDOW_RE = re.compile(r"\s*\S+\s+(?:0[xX])?([0-9a-fA-F]+)")


class IpcTimeout(Exception):
    """No reply arrived from the window manager in time."""


class FakeIpc(Exception):
    """The window manager only pretends to offer IPC."""


def _to_bytes(text):
    data = text if isinstance(text, (bytes, bytearray)) else text.encode("utf-8")
    return bytes(data).partition(b"\0")[0]


def encode_message(window_id, message):
    """Split a message into the 20-byte chunks sent to the window manager.

    The terminating NUL is always sent, so a message whose length is a
    multiple of twelve ends with a chunk that carries only the NUL.
    """
    prefix = f"{window_id & 0xFFFFFFFF:8x}".encode("ascii")
    body = _to_bytes(message) + b"\0"
    return [
        (prefix + body[start:start + PAYLOAD_SIZE]).ljust(CHUNK_SIZE, b"\0")
        for start in range(0, len(body), PAYLOAD_SIZE)
    ]


class ReplyAssembler:
    """Collects the payloads of reply chunks into complete messages."""

    def __init__(self):
        self._parts = []

    def feed(self, data):
        """Add the payload of one chunk (the bytes after the window id).

        Returns the complete reply once its last chunk has arrived, and
        None while more chunks are expected.  ``None`` as data stands for a
        missed reply and raises IpcTimeout.
        """
        if data is None:
            self._parts.clear()
            raise IpcTimeout("no reply from the window manager")
        piece = bytes(data[:PAYLOAD_SIZE]).partition(b"\0")[0]
        self._parts.append(piece)
        if len(piece) < PAYLOAD_SIZE:
            reply = b"".join(self._parts)
            self._parts.clear()
            return reply.decode("utf-8", errors="replace")
        return None


def parse_ipc_window(prop):
    """Window id from an ``ENLIGHTENMENT_COMMS`` property, or None.

    The property holds a word followed by the id in hexadecimal.
    """
    if prop is None:
        return None
    if isinstance(prop, (bytes, bytearray)):
        prop = bytes(prop).partition(b"\0")[0].decode("latin-1")
    match = _IPC_WINDOW_RE.match(prop)
    if match is None:
        return None
    window = int(match.group(1), 16) & 0xFFFFFFFF
    return window or None


def parse_num_desks(reply):
    """Number of desktops from a ``num_desks ?`` reply.

    Leading non-digits are skipped; a missing number counts as 0.  A reply
    of None (no real IPC available) gives -1.
    """
    if reply is None:
        return -1
    match = re.search(r"\d+", reply)
    return int(match.group()) if match else 0


def background_commands(bgname, filename, mode, desktop):
    """IPC commands that set ``filename`` as background on a desktop.

    Raises ValueError if the first command would not fit the send buffer.
    """
    first = f"background {bgname} bg.file {filename}"
    if len(first.encode("utf-8")) >= SEND_BUFFER_SIZE:
        raise ValueError("Writing to IPC send buffer was truncated")
    commands = [first]
    mode = BgMode(mode)
    prefix = f"background {bgname}"
    if mode in (BgMode.SCALE, BgMode.CENTER):
        commands += [
            f"{prefix} bg.solid 0 0 0",
            f"{prefix} bg.tile 0",
            f"{prefix} bg.xjust 512",
            f"{prefix} bg.yjust 512",
        ]
        if mode is BgMode.SCALE:
            commands += [f"{prefix} bg.xperc 1024", f"{prefix} bg.yperc 1024"]
    else:
        commands.append(f"{prefix} bg.tile 1")
    commands.append(f"use_bg {bgname} {desktop}")
    return commands


def client_registration(package, version):
    """Commands that introduce this program as an IPC client."""
    return [
        f"set clientname {package}",
        f"set version {version}",
        "set info Feh - be pr0n or be dead",
    ]
"""Message encoding for the Enlightenment window-manager IPC protocol."""

from __future__ import annotations

from typing import List, Optional

from .geometry import BgMode
from .utils import warn
from .wallpaper import bg_mode_flags

SEND_BUFFER_SIZE = 4096
CHUNK_SIZE = 20
HEADER_SIZE = 8
PAYLOAD_SIZE = CHUNK_SIZE - HEADER_SIZE

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def bg_ipc_commands(bgname: str, filename: str, mode: BgMode, desktop: int) -> List[str]:
    """Return the IPC commands that set ``filename`` as background ``bgname``.

    If the first command would not fit in the send buffer, a warning is
    written and no commands are returned.
    """
    first = f"background {bgname} bg.file {filename}"
    if len(first.encode(_ENCODING, _ERRORS)) >= SEND_BUFFER_SIZE:
        warn("Writing to IPC send buffer was truncated")
        return []

    centered, scaled, _filled = bg_mode_flags(mode)
    commands = [first]
    prefix = f"background {bgname} "
    if scaled:
        settings = [
            "bg.solid 0 0 0",
            "bg.tile 0",
            "bg.xjust 512",
            "bg.yjust 512",
            "bg.xperc 1024",
            "bg.yperc 1024",
        ]
    elif centered:
        settings = ["bg.solid 0 0 0", "bg.tile 0", "bg.xjust 512", "bg.yjust 512"]
    else:
        settings = ["bg.tile 1"]
    commands += [prefix + setting for setting in settings]
    commands.append(f"use_bg {bgname} {desktop}")
    return commands


def encode_ipc_message(window_id: int, text: str) -> List[bytes]:
    """Split ``text`` into the 20-byte client-message payloads sent to the WM.

    Each payload starts with the sender's window id as eight hex digits,
    followed by up to twelve bytes of the NUL-terminated message; unused
    bytes are zero.
    """
    header = f"{window_id:8x}".encode("ascii")
    if window_id < 0 or len(header) != HEADER_SIZE:
        raise ValueError(f"window id {window_id!r} does not fit in eight hex digits")
    data = text.encode(_ENCODING, _ERRORS) + b"\0"
    chunks = []
    for start in range(0, len(data), PAYLOAD_SIZE):
        piece = data[start:start + PAYLOAD_SIZE]
        chunks.append((header + piece).ljust(CHUNK_SIZE, b"\0"))
    return chunks


class IpcReplyAssembler:
    """Collects reply payloads until a complete message has arrived."""

    def __init__(self) -> None:
        self._parts: List[bytes] = []

    def reset(self) -> None:
        """Drop any partly received message."""
        self._parts.clear()

    def feed(self, chunk: bytes) -> Optional[str]:
        """Add the payload of one reply (the bytes after the window-id header).

        Returns the whole message once a payload shorter than twelve bytes
        ends it, otherwise None.
        """
        if chunk is None:
            raise TimeoutError("no reply from the window manager")
        piece = bytes(chunk[:PAYLOAD_SIZE]).split(b"\0", 1)[0]
        self._parts.append(piece)
        if len(piece) < PAYLOAD_SIZE:
            message = b"".join(self._parts)
            self._parts.clear()
            return message.decode(_ENCODING, _ERRORS)
        return None


def parse_num_desks(reply: Optional[str]) -> int:
    """Read the desktop count from a ``num_desks ?`` reply.

    A missing reply (no real IPC available) gives -1; a reply without
    digits gives 0.
    """
    if reply is None:
        return -1
    digits = []
    seen = False
    for ch in reply:
        if ch.isascii() and ch.isdigit():
            digits.append(ch)
            seen = True
        elif seen:
            break
    return int("".join(digits)) if digits else 0
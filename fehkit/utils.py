"""Small helpers shared across the package: messages, strings and files."""

from __future__ import annotations

import itertools
import os
import sys
from typing import IO, Optional

PACKAGE = "feh"

_READ_LIMIT = 4095
_ESCAPE_LIMIT = 1024 - 7
_QUOTED_QUOTE = "'\"'\"'"
_URL_PREFIXES = (
    "http://",
    "https://",
    "gopher://",
    "gophers://",
    "ftp://",
    "file://",
)

_unique_counter = itertools.cycle(range(1, 999999))


class FehError(Exception):
    """A fatal error; the program should stop with ``exit_status``."""

    exit_status = 2

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


def _with_os_error(message: str) -> str:
    """Append the text of the pending OS error when the message ends in ':'."""
    if message.endswith(":"):
        current = sys.exc_info()[1]
        if isinstance(current, OSError) and current.strerror:
            return f"{message} {current.strerror}"
    return message


def fatal(message: str) -> None:
    """Raise a :class:`FehError` carrying ``message``."""
    raise FehError(_with_os_error(message))


def warn(message: str, stream: Optional[IO[str]] = None) -> None:
    """Write a warning line to ``stream`` (standard error by default)."""
    sys.stdout.flush()
    out = sys.stderr if stream is None else stream
    out.write(f"{PACKAGE} WARNING: {_with_os_error(message)}\n")


def strjoin(separator: Optional[str], *args: str) -> str:
    """Join ``args`` with ``separator``; a missing separator means none."""
    return ("" if separator is None else separator).join(args)


def path_is_url(path: str) -> bool:
    """Tell whether ``path`` names a remote or file URL."""
    return path.startswith(_URL_PREFIXES)


def unique_filename(directory: str, basename: str) -> str:
    """Return a path under ``directory`` that does not exist yet.

    ``directory`` must be empty or end with a slash.
    """
    pid = f"{os.getpid():06d}"
    while True:
        candidate = strjoin(
            "", directory, "feh_", pid, "_", f"{next(_unique_counter):06d}", "_", basename
        )
        if not os.path.exists(candidate) and not os.path.islink(candidate):
            return candidate


def read_file(path: str) -> Optional[str]:
    """Read at most 4095 bytes of ``path`` as text, or None if it can't be opened.

    One trailing newline is dropped, and the text stops at the first NUL byte.
    """
    try:
        with open(path, "rb") as handle:
            data = handle.read(_READ_LIMIT)
    except OSError:
        return None
    if data.endswith(b"\n"):
        data = data[:-1]
    data = data.split(b"\0", 1)[0]
    return data.decode("utf-8", errors="surrogateescape")


def shell_escape(text: str) -> str:
    """Quote ``text`` for a POSIX shell, truncating very long input."""
    parts = ["'"]
    length = 1
    for ch in text:
        if length >= _ESCAPE_LIMIT:
            break
        if ch == "'":
            parts.append(_QUOTED_QUOTE)
            length += len(_QUOTED_QUOTE)
        else:
            parts.append(ch)
            length += len(ch.encode("utf-8", errors="surrogateescape"))
    parts.append("'")
    return "".join(parts)
"""Shared enumerations, limits and geometry values."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

SLIDESHOW_RELOAD_MAX = 4096

DEFAULT_FONT = "yudit/11"
DEFAULT_MENU_FONT = "yudit/10"
DEFAULT_FONT_BIG = "yudit/12"
DEFAULT_FONT_TITLE = "yudit/14"

ZOOM_MIN = 0.002
ZOOM_MAX = 2000

INPLACE_EDIT_FLIP = -1
INPLACE_EDIT_MIRROR = -2


class ViewMode(IntEnum):
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


class WinType(IntEnum):
    """Role of an image window."""

    UNSET = 0
    SLIDESHOW = 1
    SINGLE = 2
    THUMBNAIL = 3
    THUMBNAIL_VIEWER = 4


@dataclass
class Geometry:
    """A window geometry; absent parts are None.

    ``x_negative``/``y_negative`` mark positions measured from the
    right/bottom edge.
    """

    x: Optional[int] = None
    y: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    x_negative: bool = False
    y_negative: bool = False

    def __bool__(self) -> bool:
        return any(v is not None for v in (self.x, self.y, self.width, self.height))

    def format_position(self) -> str:
        """Render the position part, e.g. ``+10+20``; empty without an x value."""
        if self.x is None:
            return ""
        text = f"-{abs(self.x)}" if self.x_negative else f"+{self.x}"
        if self.y is not None:
            text += f"-{abs(self.y)}" if self.y_negative else f"+{self.y}"
        return text


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle."""

    x: int
    y: int
    width: int
    height: int

    def contains(self, x: int, y: int) -> bool:
        """Tell whether the point lies inside; right and bottom edges excluded."""
        return xy_in_rect(x, y, self.x, self.y, self.width, self.height)


def xy_in_rect(x: int, y: int, rx: int, ry: int, rw: int, rh: int) -> bool:
    """Tell whether (x, y) lies in the rectangle at (rx, ry) sized rw by rh."""
    return rx <= x < rx + rw and ry <= y < ry + rh
"""State and layout arithmetic of an image window."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

from .geometry import Geometry, Rect, ViewMode, WinType, ZoomMode
from .wallpaper import RenderOp

PAUSED_SUFFIX = " [Paused]"
DEFAULT_NAME = "feh"


def _lround(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    magnitude = math.floor(abs(value) + 0.5)
    return -magnitude if value < 0 else magnitude


@dataclass
class ViewOptions:
    """Display settings that influence window size, zoom and placement."""

    default_zoom: int = 0
    full_screen: bool = False
    geometry: Geometry = field(default_factory=Geometry)
    offset: Geometry = field(default_factory=Geometry)
    screen_clip: bool = True
    scale_down: bool = False
    zoom_mode: Optional[ZoomMode] = None
    keep_zoom_vp: bool = False
    force_aliasing: bool = False
    paused: bool = False


def calc_needed_zoom(
    orig_w: int,
    orig_h: int,
    dest_w: int,
    dest_h: int,
    zoom_mode: Optional[ZoomMode] = None,
) -> Tuple[float, float]:
    """Return ``(zoom, ratio)`` that fits an image into a destination.

    ``ratio`` compares the image aspect ratio with the destination's; in
    fill mode it is inverted so the image covers the destination instead.
    """
    ratio = (orig_w / orig_h) / (dest_w / dest_h)
    if zoom_mode == ZoomMode.FILL:
        ratio = 1.0 / ratio
    if ratio > 1.0:
        zoom = dest_w / orig_w
    else:
        zoom = dest_h / orig_h
    return zoom, ratio


def initial_window_geometry(
    width: int,
    height: int,
    screen_w: int,
    screen_h: int,
    options: ViewOptions,
    full_screen: bool = False,
) -> Rect:
    """Position and size of a new window for content ``width`` by ``height``."""
    x = y = 0
    w, h = width, height
    geom = options.geometry
    if full_screen:
        w, h = screen_w, screen_h
    elif geom:
        if geom.width is not None:
            w = geom.width
        if geom.height is not None:
            h = geom.height
        if geom.x is not None:
            x = screen_w - geom.x if geom.x_negative else geom.x
        if geom.y is not None:
            y = screen_h - geom.y if geom.y_negative else geom.y
    elif options.screen_clip:
        w = min(w, screen_w)
        h = min(h, screen_h)
    return Rect(x, y, w, h)


@dataclass
class ImageWindow:
    """One window showing an image, with its zoom and viewport state."""

    win_id: int = 0
    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0
    im_w: int = 0
    im_h: int = 0
    im_angle: float = 0.0
    type: WinType = WinType.UNSET
    had_resize: bool = False
    full_screen: bool = False
    image: Any = None
    name: Optional[str] = None
    file: Any = None
    visible: bool = False
    errstr: Optional[str] = None
    mode: ViewMode = ViewMode.NORMAL
    caption_entry: bool = False
    im_x: int = 0
    im_y: int = 0
    zoom: float = 1.0
    old_zoom: float = 1.0
    click_offset_x: int = 0
    click_offset_y: int = 0
    has_rotated: bool = False
    force_aliasing: bool = False

    @property
    def title(self) -> str:
        """The title shown by the window manager."""
        return self.name if self.name else DEFAULT_NAME

    def reset_image(self, keep_zoom_vp: bool = False) -> None:
        """Forget rotation and, unless the viewport is kept, zoom and offsets."""
        if not keep_zoom_vp:
            self.zoom = 1.0
            self.old_zoom = 1.0
            self.im_x = 0
            self.im_y = 0
        self.im_angle = 0.0
        self.has_rotated = False

    def center_image(self, screen_w: int, screen_h: int, options: ViewOptions) -> None:
        """Centre the zoomed image on the screen or in the fixed geometry."""
        scaled_w = _lround(self.im_w * self.zoom)
        scaled_h = _lround(self.im_h * self.zoom)
        if self.full_screen:
            self.im_x = (screen_w - scaled_w) >> 1
            self.im_y = (screen_h - scaled_h) >> 1
            return
        geom = options.geometry
        self.im_x = (geom.width - scaled_w) >> 1 if geom.width is not None else 0
        self.im_y = (geom.height - scaled_h) >> 1 if geom.height is not None else 0

    def sanitise_offsets(self) -> None:
        """Keep the image from being panned further than its edges allow."""
        scaled_w = self.im_w * self.zoom
        scaled_h = self.im_h * self.zoom
        far_left = int(self.w - scaled_w)
        far_top = int(self.h - scaled_h)
        min_x, max_x = (far_left, 0) if scaled_w > self.w else (0, far_left)
        min_y, max_y = (far_top, 0) if scaled_h > self.h else (0, far_top)
        self.im_x = max(min(self.im_x, max_x), min_x)
        self.im_y = max(min(self.im_y, max_y), min_y)

    def rename(self, name: Optional[str], paused: bool = False) -> str:
        """Set the window name, keeping the pause marker in step; returns it.

        ``name`` of None re-applies the marker to the current name.
        """
        new_name = name if name is not None else (self.name or "")
        if paused and not new_name.endswith(PAUSED_SUFFIX):
            new_name += PAUSED_SUFFIX
        elif not paused and new_name.endswith(PAUSED_SUFFIX):
            new_name = new_name[: -len(PAUSED_SUFFIX)]
        self.name = new_name
        return new_name

    def fit_zoom(self, options: ViewOptions) -> None:
        """Choose the zoom and image offset after the window changed size."""
        required_zoom, _ratio = calc_needed_zoom(
            self.im_w, self.im_h, self.w, self.h, options.zoom_mode
        )
        self.zoom = 0.01 * options.default_zoom if options.default_zoom else 1.0

        if (
            options.scale_down or (self.full_screen and not options.default_zoom)
        ) and self.zoom > required_zoom:
            self.zoom = required_zoom
        elif (options.zoom_mode and required_zoom > 1) and (
            not options.default_zoom or required_zoom < self.zoom
        ):
            self.zoom = required_zoom

        scaled_w = self.im_w * self.zoom
        scaled_h = self.im_h * self.zoom
        offset = options.offset
        if offset.x is not None:
            if offset.x_negative:
                self.im_x = int(self.w - scaled_w - offset.x)
            else:
                self.im_x = int(-offset.x * self.zoom)
        else:
            self.im_x = int(self.w - scaled_w) >> 1
        if offset.y is not None:
            if offset.y_negative:
                self.im_y = int(self.h - scaled_h - offset.y)
            else:
                self.im_y = int(-offset.y * self.zoom)
        else:
            self.im_y = int(self.h - scaled_h) >> 1

    def needs_checks(self, options: ViewOptions, has_alpha: bool = False) -> bool:
        """Tell whether the checkerboard background shows anywhere."""
        if self.full_screen:
            return False
        geom = options.geometry
        return bool(
            has_alpha
            or geom.width is not None
            or geom.height is not None
            or self.im_x
            or self.im_y
            or self.w > self.im_w * self.zoom
            or self.h > self.im_h * self.zoom
            or self.has_rotated
        )

    def render_region(self, force_alias: bool = False) -> RenderOp:
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

        antialias = (
            (self.zoom != 1.0 or self.has_rotated)
            and not force_alias
            and not self.force_aliasing
        )
        return RenderOp(sx, sy, sw, sh, dx, dy, dw, dh, antialias=bool(antialias))

    def free_image(self) -> None:
        """Drop the image and its dimensions."""
        self.image = None
        self.im_w = 0
        self.im_h = 0

    def move(self, x: int, y: int, screen_w: int, screen_h: int) -> bool:
        """Move the window, not past the screen's far edges; returns whether it moved."""
        if self.x == x and self.y == y:
            return False
        self.x = min(x, screen_w)
        self.y = min(y, screen_h)
        return True

    def clip_size(
        self, w: int, h: int, screen_w: int, screen_h: int, options: ViewOptions
    ) -> bool:
        """Resize towards ``w`` by ``h``, clipped to the screen if asked.

        Returns whether a resize took place; sets ``had_resize`` if so.
        """
        if self.w == w and self.h == h:
            return False
        if options.screen_clip:
            required_zoom = self.zoom
            if options.scale_down and not options.keep_zoom_vp:
                max_w = min(w, screen_w)
                max_h = min(h, screen_h)
                required_zoom, _ratio = calc_needed_zoom(
                    self.im_w, self.im_h, max_w, max_h, options.zoom_mode
                )
            desired_w = int(self.im_w * required_zoom)
            desired_h = int(self.im_h * required_zoom)
            self.w = min(desired_w, screen_w)
            self.h = min(desired_h, screen_h)
        else:
            self.w = w
            self.h = h
        self.had_resize = True
        return True
"""Wallpaper layout arithmetic and the ``.fehbg`` restore script."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple

from .geometry import BgMode, Geometry
from .utils import shell_escape, warn


@dataclass(frozen=True)
class RenderOp:
    """One image-to-drawable copy: a source region scaled onto a target region.

    ``antialias`` is False where the layout never smooths; callers still
    combine it with their own force-aliasing setting.
    """

    src_x: int
    src_y: int
    src_w: int
    src_h: int
    dst_x: int
    dst_y: int
    dst_w: int
    dst_h: int
    antialias: bool = True


@dataclass
class BgScriptOptions:
    """Settings recorded in the restore script besides the mode and files."""

    image_bg: Optional[str] = None
    xinerama: bool = True
    xinerama_index: int = -1
    geometry: Geometry = field(default_factory=Geometry)
    force_aliasing: bool = False
    use_filelist: bool = False
    screens: int = 1


def bg_mode_flags(mode: BgMode) -> Tuple[bool, bool, int]:
    """Map a background mode to ``(centered, scaled, filled)``.

    ``filled`` is 1 for fill and 2 for max; anything unknown is centered.
    """
    mode = BgMode(mode)
    if mode is BgMode.TILE:
        return (False, False, 0)
    if mode is BgMode.SCALE:
        return (False, True, 0)
    if mode is BgMode.FILL:
        return (False, False, 1)
    if mode is BgMode.MAX:
        return (False, False, 2)
    return (True, False, 0)


def _mode_word(mode: BgMode) -> str:
    centered, scaled, filled = bg_mode_flags(mode)
    if centered:
        return "center"
    if scaled:
        return "scale"
    if filled == 1:
        return "fill"
    if filled == 2:
        return "max"
    return "tile"


def _position(size: int, extent: int, value: Optional[int], negative: bool) -> int:
    """Offset of something ``extent`` wide in ``size``, honouring a geometry value."""
    if value is None:
        return (size - extent) >> 1
    if negative:
        return (size - extent) + value
    return value


def scaled_layout(image_w: int, image_h: int, x: int, y: int, w: int, h: int) -> RenderOp:
    """Stretch the whole image over the target rectangle."""
    return RenderOp(0, 0, image_w, image_h, x, y, w, h)


def centered_layout(
    image_w: int,
    image_h: int,
    x: int,
    y: int,
    w: int,
    h: int,
    geometry: Optional[Geometry] = None,
) -> RenderOp:
    """Place the image unscaled in the rectangle, centred unless a geometry says where."""
    geometry = geometry or Geometry()
    offset_x = _position(w, image_w, geometry.x, geometry.x_negative)
    offset_y = _position(h, image_h, geometry.y, geometry.y_negative)
    return RenderOp(
        -offset_x if offset_x < 0 else 0,
        -offset_y if offset_y < 0 else 0,
        w,
        h,
        x + max(offset_x, 0),
        y + max(offset_y, 0),
        w,
        h,
        antialias=False,
    )


def _clamp(value: int, upper: int) -> int:
    if value < 0:
        return 0
    return min(value, upper)


def filled_layout(
    image_w: int,
    image_h: int,
    x: int,
    y: int,
    w: int,
    h: int,
    geometry: Optional[Geometry] = None,
) -> RenderOp:
    """Cover the rectangle, cutting off the part of the image that sticks out."""
    geometry = geometry or Geometry()
    cut_x = image_w * h > image_h * w

    render_w = (image_h * w) // h if cut_x else image_w
    render_h = image_h if cut_x else (image_w * h) // w
    render_x = (image_w - render_w) >> 1 if cut_x else 0
    render_y = 0 if cut_x else (image_h - render_h) >> 1

    if geometry.x is not None and cut_x:
        if geometry.x_negative:
            render_x = image_w - render_w + geometry.x
        else:
            render_x = geometry.x
        render_x = _clamp(render_x, image_w - render_w)
    elif geometry.y is not None and not cut_x:
        if geometry.y_negative:
            render_y = image_h - render_h + geometry.y
        else:
            render_y = geometry.y
        render_y = _clamp(render_y, image_h - render_h)

    return RenderOp(render_x, render_y, render_w, render_h, x, y, w, h)


def maxed_layout(
    image_w: int,
    image_h: int,
    x: int,
    y: int,
    w: int,
    h: int,
    geometry: Optional[Geometry] = None,
) -> RenderOp:
    """Fit the whole image inside the rectangle, keeping its aspect ratio."""
    geometry = geometry or Geometry()
    border_x = not (image_w * h > image_h * w)

    render_w = (image_w * h) // image_h if border_x else w
    render_h = h if border_x else (image_h * w) // image_w

    margin_x = _position(w, render_w, geometry.x, geometry.x_negative)
    margin_y = _position(h, render_h, geometry.y, geometry.y_negative)

    render_x = x + (margin_x if border_x else 0)
    render_y = y + (0 if border_x else margin_y)
    return RenderOp(0, 0, image_w, image_h, render_x, render_y, render_w, render_h)


def bg_script(
    executable: str,
    mode: BgMode,
    files: Iterable[str],
    options: Optional[BgScriptOptions] = None,
) -> str:
    """Build a shell script that sets the same background again.

    ``files`` should be absolute paths. With ``options.use_filelist`` one
    file per screen is written, each followed by a space; otherwise only
    the first file is written.
    """
    options = options or BgScriptOptions()
    parts = ["#!/bin/sh\n", executable, " --no-fehbg --bg-", _mode_word(mode)]

    if options.image_bg:
        parts += [" --image-bg ", shell_escape(options.image_bg)]
    if options.xinerama:
        if options.xinerama_index >= 0:
            parts.append(f" --xinerama-index {options.xinerama_index}")
    else:
        parts.append(" --no-xinerama")
    position = options.geometry.format_position()
    if position:
        parts += [" --geometry ", position]
    if options.force_aliasing:
        parts.append(" --force-aliasing")
    parts.append(" ")

    paths = list(files)
    if options.use_filelist:
        count = max(options.screens, 1) if options.xinerama else 1
        for path in paths[:count]:
            parts += [shell_escape(path), " "]
    elif paths:
        parts.append(shell_escape(paths[0]))

    parts.append("\n")
    return "".join(parts)


def write_bg_script(path: str, content: str) -> bool:
    """Write ``content`` to ``path`` and make it executable.

    Problems are reported as warnings; returns whether the script was written.
    """
    try:
        with open(path, "w", encoding="utf-8", errors="surrogateescape") as handle:
            handle.write(content)
    except OSError:
        warn(f"Can't write to {path}")
        return False
    try:
        mode = os.stat(path).st_mode
        os.chmod(path, mode | stat.S_IXUSR | stat.S_IXGRP)
    except OSError:
        warn(f"Can't set {path} as executable")
    return True
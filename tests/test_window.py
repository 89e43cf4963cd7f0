import pytest

from fehkit.geometry import Geometry, ZoomMode
from fehkit.window import (
    ImageWindow,
    ViewOptions,
    calc_needed_zoom,
    initial_window_geometry,
)


def make_window(**kwargs):
    defaults = dict(w=400, h=300, im_w=400, im_h=300)
    defaults.update(kwargs)
    return ImageWindow(**defaults)


def test_calc_needed_zoom_fits_inside():
    zoom, _ratio = calc_needed_zoom(1600, 600, 800, 600)
    assert 1600 * zoom <= 800 + 1e-9
    assert 600 * zoom <= 600 + 1e-9
    assert 1600 * zoom == pytest.approx(800) or 600 * zoom == pytest.approx(600)


def test_calc_needed_zoom_fill_covers():
    zoom, _ratio = calc_needed_zoom(1600, 600, 800, 600, ZoomMode.FILL)
    assert 1600 * zoom >= 800 - 1e-9
    assert 600 * zoom >= 600 - 1e-9


def test_calc_needed_zoom_same_aspect_ratio():
    zoom, ratio = calc_needed_zoom(200, 100, 400, 200)
    assert ratio == pytest.approx(1.0)
    assert 200 * zoom == pytest.approx(400)


def test_calc_needed_zoom_zero_height():
    with pytest.raises(ZeroDivisionError):
        calc_needed_zoom(100, 0, 100, 100)


def test_initial_geometry_full_screen():
    rect = initial_window_geometry(50, 60, 1024, 768, ViewOptions(), full_screen=True)
    assert (rect.x, rect.y, rect.width, rect.height) == (0, 0, 1024, 768)


def test_initial_geometry_from_options():
    opts = ViewOptions(geometry=Geometry(x=10, y=20, width=300, height=200))
    rect = initial_window_geometry(50, 60, 1024, 768, opts)
    assert (rect.x, rect.y, rect.width, rect.height) == (10, 20, 300, 200)


def test_initial_geometry_negative_position():
    opts = ViewOptions(geometry=Geometry(x=24, y=68, x_negative=True, y_negative=True))
    rect = initial_window_geometry(50, 60, 1024, 768, opts)
    assert (rect.x, rect.y) == (1000, 700)
    assert (rect.width, rect.height) == (50, 60)


def test_initial_geometry_screen_clip():
    rect = initial_window_geometry(5000, 60, 1024, 768, ViewOptions(screen_clip=True))
    assert rect.width == 1024
    assert rect.height == 60


def test_initial_geometry_no_clip():
    rect = initial_window_geometry(5000, 60, 1024, 768, ViewOptions(screen_clip=False))
    assert rect.width == 5000


def test_reset_image():
    win = make_window(zoom=2.0, old_zoom=3.0, im_x=5, im_y=6, im_angle=0.5, has_rotated=True)
    win.reset_image()
    assert (win.zoom, win.old_zoom, win.im_x, win.im_y) == (1.0, 1.0, 0, 0)
    assert win.im_angle == 0.0
    assert win.has_rotated is False


def test_reset_image_keeps_viewport():
    win = make_window(zoom=2.0, im_x=5, has_rotated=True)
    win.reset_image(keep_zoom_vp=True)
    assert win.zoom == 2.0
    assert win.im_x == 5
    assert win.has_rotated is False


def test_center_image_full_screen_same_size():
    win = make_window(full_screen=True, im_w=1024, im_h=768)
    win.center_image(1024, 768, ViewOptions())
    assert (win.im_x, win.im_y) == (0, 0)


def test_center_image_symmetric():
    win = make_window(full_screen=True, im_w=200, im_h=100)
    win.center_image(1000, 700, ViewOptions())
    assert 2 * win.im_x + 200 == 1000
    assert 2 * win.im_y + 100 == 700


def test_center_image_without_geometry():
    win = make_window(im_x=7, im_y=9)
    win.center_image(1000, 700, ViewOptions())
    assert (win.im_x, win.im_y) == (0, 0)


def test_sanitise_small_image():
    win = make_window(w=400, h=300, im_w=100, im_h=100, im_x=-50, im_y=500)
    win.sanitise_offsets()
    assert 0 <= win.im_x <= 300
    assert 0 <= win.im_y <= 200


def test_sanitise_large_image():
    win = make_window(w=400, h=300, im_w=1000, im_h=1000, im_x=50, im_y=-5000)
    win.sanitise_offsets()
    assert win.im_x == 0
    assert win.im_y == 300 - 1000


def test_rename_paused():
    win = make_window()
    assert win.rename("pic.png", paused=True) == "pic.png [Paused]"
    assert win.rename(None, paused=True) == "pic.png [Paused]"
    assert win.rename(None, paused=False) == "pic.png"
    assert win.name == "pic.png"


def test_default_title():
    assert make_window().title == "feh"


def test_fit_zoom_scale_down():
    win = make_window(w=400, h=300, im_w=1600, im_h=600)
    win.fit_zoom(ViewOptions(scale_down=True))
    assert 1600 * win.zoom <= 400 + 1e-9
    assert win.zoom < 1.0


def test_fit_zoom_centers_small_image():
    win = make_window(w=400, h=300, im_w=200, im_h=100)
    win.fit_zoom(ViewOptions())
    assert win.zoom == 1.0
    assert 2 * win.im_x + 200 == 400
    assert 2 * win.im_y + 100 == 300


def test_fit_zoom_zoom_mode_enlarges():
    win = make_window(w=400, h=300, im_w=200, im_h=100)
    win.fit_zoom(ViewOptions(zoom_mode=ZoomMode.MAX))
    assert win.zoom > 1.0
    assert 200 * win.zoom <= 400 + 1e-9


def test_fit_zoom_positive_offset():
    win = make_window(w=400, h=300, im_w=800, im_h=600)
    win.fit_zoom(ViewOptions(offset=Geometry(x=30, y=40)))
    assert (win.im_x, win.im_y) == (-30, -40)


def test_needs_checks():
    opts = ViewOptions()
    assert make_window().needs_checks(opts) is False
    assert make_window().needs_checks(opts, has_alpha=True) is True
    assert make_window(w=500).needs_checks(opts) is True
    assert make_window(full_screen=True, w=500).needs_checks(opts, True) is False


def test_render_region_identity():
    op = make_window().render_region()
    assert (op.src_x, op.src_y, op.src_w, op.src_h) == (0, 0, 400, 300)
    assert (op.dst_x, op.dst_y, op.dst_w, op.dst_h) == (0, 0, 400, 300)
    assert op.antialias is False


def test_render_region_zoomed():
    win = make_window(zoom=2.0, im_x=-100, im_y=-60)
    op = win.render_region()
    assert op.antialias is True
    assert (op.dst_x, op.dst_y) == (0, 0)
    assert (op.dst_w, op.dst_h) == (400, 300)
    assert op.src_x * 2 == 100
    assert op.src_w * 2 == 400
    assert win.render_region(force_alias=True).antialias is False


def test_free_image():
    win = make_window(image=object())
    win.free_image()
    assert (win.image, win.im_w, win.im_h) == (None, 0, 0)


def test_move_clamps():
    win = make_window()
    assert win.move(5000, 10, 1024, 768) is True
    assert (win.x, win.y) == (1024, 10)
    assert win.move(1024, 10, 1024, 768) is False


def test_clip_size_to_screen():
    win = make_window(w=100, h=100, im_w=3000, im_h=2000)
    assert win.clip_size(3000, 2000, 1024, 768, ViewOptions(screen_clip=True)) is True
    assert win.w <= 1024 and win.h <= 768
    assert win.had_resize is True


def test_clip_size_unchanged():
    win = make_window()
    assert win.clip_size(400, 300, 1024, 768, ViewOptions()) is False
    assert win.had_resize is False
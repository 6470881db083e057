import pytest

from fehcore.constants import ZoomMode
from fehcore.geometry import Geometry, Rect
from fehcore.viewport import RenderArea, Viewport, calc_needed_zoom


def test_calc_needed_zoom_wide_image_fits_width():
    zoom, ratio = calc_needed_zoom(400, 100, 200, 200)
    assert ratio > 1.0
    assert zoom * 400 == pytest.approx(200)
    assert zoom * 100 <= 200


def test_calc_needed_zoom_tall_image_fits_height():
    zoom, ratio = calc_needed_zoom(100, 400, 200, 200)
    assert ratio <= 1.0
    assert zoom * 400 == pytest.approx(200)
    assert zoom * 100 <= 200


def test_calc_needed_zoom_fill_covers_destination():
    zoom_max, ratio_max = calc_needed_zoom(400, 100, 200, 200)
    zoom_fill, ratio_fill = calc_needed_zoom(400, 100, 200, 200, ZoomMode.FILL)
    assert ratio_fill == pytest.approx(1 / ratio_max)
    assert 400 * zoom_fill >= 200
    assert 100 * zoom_fill == pytest.approx(200)
    assert zoom_fill > zoom_max


@pytest.mark.parametrize("sizes", [(0, 10, 10, 10), (10, 0, 10, 10), (10, 10, 0, 10), (10, 10, 10, -1)])
def test_calc_needed_zoom_rejects_bad_sizes(sizes):
    with pytest.raises(ValueError):
        calc_needed_zoom(*sizes)


def test_reset_restores_defaults():
    vp = Viewport(w=100, h=100, im_w=50, im_h=50, im_x=5, im_y=7, zoom=3.0,
                  old_zoom=2.0, im_angle=1.5, has_rotated=True)
    vp.reset(False)
    assert (vp.zoom, vp.old_zoom, vp.im_x, vp.im_y) == (1.0, 1.0, 0, 0)
    assert vp.im_angle == 0.0
    assert vp.has_rotated is False


def test_reset_keeps_viewport_when_asked():
    vp = Viewport(w=100, h=100, im_w=50, im_h=50, im_x=5, im_y=7, zoom=3.0,
                  im_angle=1.5, has_rotated=True)
    vp.reset(True)
    assert (vp.zoom, vp.im_x, vp.im_y) == (3.0, 5, 7)
    assert vp.im_angle == 0.0
    assert vp.has_rotated is False


def test_sanitise_large_image_clamps_to_edges():
    vp = Viewport(w=100, h=100, im_w=300, im_h=300, im_x=50, im_y=-1000)
    vp.sanitise_offsets()
    assert vp.im_x == 0
    assert vp.im_y == 100 - 300


def test_sanitise_small_image_stays_inside_window():
    vp = Viewport(w=200, h=200, im_w=50, im_h=50, im_x=-20, im_y=500)
    vp.sanitise_offsets()
    assert vp.im_x == 0
    assert vp.im_y == 200 - 50


def test_sanitise_leaves_valid_offsets_alone():
    vp = Viewport(w=200, h=200, im_w=50, im_h=50, im_x=30, im_y=40)
    vp.sanitise_offsets()
    assert (vp.im_x, vp.im_y) == (30, 40)


def test_center_full_screen():
    vp = Viewport(w=400, h=300, im_w=400, im_h=300)
    vp.center(800, 600, full_screen=True)
    assert vp.im_x == (800 - 400) // 2
    assert vp.im_y == (600 - 300) // 2


def test_center_windowed_without_geometry_is_origin():
    vp = Viewport(w=400, h=300, im_w=100, im_h=100, im_x=9, im_y=9)
    vp.center(800, 600, full_screen=False)
    assert (vp.im_x, vp.im_y) == (0, 0)


def test_center_windowed_with_geometry():
    vp = Viewport(w=400, h=300, im_w=100, im_h=100)
    vp.center(800, 600, full_screen=False, geom_w=300, geom_h=None)
    assert vp.im_x == (300 - 100) // 2
    assert vp.im_y == 0


def test_fit_scale_down_fits_window():
    vp = Viewport(w=200, h=100, im_w=800, im_h=800)
    zoom = vp.fit(scale_down=True)
    assert zoom == vp.zoom
    assert vp.im_w * zoom <= vp.w
    assert vp.im_h * zoom == pytest.approx(vp.h)
    assert vp.im_x >= 0 and vp.im_y == 0


def test_fit_without_scaling_keeps_zoom_one():
    vp = Viewport(w=200, h=100, im_w=800, im_h=800)
    assert vp.fit() == 1.0


def test_fit_default_zoom_percentage():
    vp = Viewport(w=1000, h=1000, im_w=100, im_h=100)
    assert vp.fit(default_zoom=200) == pytest.approx(200 / 100)


def test_fit_zoom_mode_enlarges_small_image():
    vp = Viewport(w=400, h=400, im_w=100, im_h=50)
    zoom = vp.fit(zoom_mode=ZoomMode.MAX)
    assert zoom > 1.0
    assert vp.im_w * zoom == pytest.approx(vp.w)
    assert vp.im_x == 0


def test_fit_positive_offset():
    vp = Viewport(w=100, h=100, im_w=100, im_h=100)
    vp.fit(offset=Geometry(x=10, y=20))
    assert vp.im_x == -10
    assert vp.im_y == -20


def test_render_area_full_image_unzoomed():
    vp = Viewport(w=120, h=80, im_w=120, im_h=80)
    area = vp.render_area()
    assert area == RenderArea(Rect(0, 0, 120, 80), Rect(0, 0, 120, 80))


def test_render_area_panned_image():
    vp = Viewport(w=100, h=100, im_w=300, im_h=300, im_x=-50, im_y=-20)
    area = vp.render_area()
    assert area.dest.x == 0 and area.dest.y == 0
    assert area.source.x == 50 and area.source.y == 20
    assert area.dest.w == vp.w and area.dest.h == vp.h
    assert area.source.w == area.dest.w


def test_render_area_zoom_scales_source():
    vp = Viewport(w=100, h=100, im_w=100, im_h=100, zoom=2.0)
    area = vp.render_area()
    assert area.dest == Rect(0, 0, 100, 100)
    assert area.source.w * 2 == area.dest.w
    assert area.source.h * 2 == area.dest.h


def test_needs_checks():
    exact = Viewport(w=100, h=100, im_w=100, im_h=100)
    assert exact.needs_checks() is False
    assert exact.needs_checks(has_alpha=True) is True
    assert exact.needs_checks(geometry_sized=True) is True
    assert exact.needs_checks(has_rotated=True) is True
    smaller = Viewport(w=200, h=100, im_w=100, im_h=100)
    assert smaller.needs_checks() is True


def test_antialias():
    vp = Viewport(w=100, h=100, im_w=100, im_h=100)
    assert vp.antialias() is False
    assert vp.antialias(has_rotated=True) is True
    vp.zoom = 0.5
    assert vp.antialias() is True
    assert vp.antialias(force_alias=True) is False
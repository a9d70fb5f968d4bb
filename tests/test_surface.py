import math


def test_arc_sweep_wraps_like_a_canvas():
    from pieviz.ve.surface import arc_sweep
    assert arc_sweep(0, 2 * math.pi) == 2 * math.pi
    assert arc_sweep(1.0, 1.0) == 0
    assert math.isclose(arc_sweep(math.pi, math.pi / 2), 1.5 * math.pi)
    assert math.isclose(arc_sweep(0, 1.5 * math.pi, ccw=True), -0.5 * math.pi)


def test_fill_and_read_back_exact_color():
    from pieviz.ve.surface import RGBA, TRANSPARENT, RasterSurface
    s = RasterSurface(100, 100)
    s.begin_path()
    s.move_to(50, 50)
    s.arc(50, 50, 40, 0, math.pi / 2)
    s.fill("red")
    assert s.read_pixel(60, 60) == RGBA(255, 0, 0, 255)   # inside the quarter
    assert s.read_pixel(40, 40) == TRANSPARENT             # opposite quarter
    assert s.read_pixel(95, 95) == TRANSPARENT             # beyond the radius


def test_read_pixel_outside_surface_is_transparent():
    from pieviz.ve.surface import TRANSPARENT, RasterSurface
    s = RasterSurface(10, 10)
    assert s.read_pixel(-1, 5) == TRANSPARENT
    assert s.read_pixel(10, 0) == TRANSPARENT
    assert s.read_pixel(3, 1000) == TRANSPARENT


def test_zero_area_path_paints_nothing():
    from pieviz.ve.surface import RasterSurface
    s = RasterSurface(100, 100)
    s.begin_path()
    s.move_to(50, 50)
    s.arc(50, 50, 40, 1.0, 1.0)
    s.fill("red")
    assert s.image.getbbox() is None


def test_events_bind_dispatch_unbind():
    from pieviz.ve.surface import POINTER_MOVE, PointerEvent, RasterSurface
    s = RasterSurface(10, 10)
    seen = []
    handler = seen.append
    s.bind(POINTER_MOVE, handler)
    s.dispatch(POINTER_MOVE, PointerEvent(1, 2, scroll_x=10, scroll_y=20))
    assert seen[0].page_x == 11 and seen[0].page_y == 22
    s.unbind(POINTER_MOVE, handler)
    s.dispatch(POINTER_MOVE, PointerEvent(1, 2))
    assert len(seen) == 1
    assert s.handlers(POINTER_MOVE) == []


def test_png_export():
    from pieviz.ve.surface import RasterSurface
    assert RasterSurface(8, 8).to_png().startswith(b"\x89PNG")

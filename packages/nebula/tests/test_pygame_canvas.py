"""Tests for the pygame rasterizer on off-screen surfaces."""
from __future__ import annotations

import pytest

pygame = pytest.importorskip("pygame")

from nebula.background import NebulaBackground  # noqa: E402
from nebula.canvas import ADDITIVE, NORMAL  # noqa: E402
from nebula.config import NebulaConfig  # noqa: E402
from nebula.host import Host  # noqa: E402
from nebula.pygame_canvas import PygameCanvas, radial_sprite  # noqa: E402

BG = (10, 10, 20)


class SurfaceHost(Host):
    """Host whose canvas is a plain off-screen surface."""

    def acquire_canvas(self) -> PygameCanvas:
        self.canvas = PygameCanvas(pygame.Surface(self.viewport))
        return self.canvas


def _canvas(w=64, h=48):
    canvas = PygameCanvas(pygame.Surface((w, h)))
    canvas.fill(BG)
    return canvas


def _rgb(canvas, x, y):
    return tuple(canvas.surface.get_at((x, y)))[:3]


def test_fill_paints_every_pixel():
    canvas = _canvas()
    assert _rgb(canvas, 0, 0) == BG
    assert _rgb(canvas, 63, 47) == BG


def test_resize_replaces_surface():
    canvas = _canvas()
    canvas.resize(100, 30)
    assert canvas.size == (100, 30)
    assert canvas.surface.get_size() == (100, 30)


def test_resize_rejects_empty():
    with pytest.raises(ValueError):
        _canvas().resize(0, 10)


def test_unknown_blend_mode_raises():
    with pytest.raises(ValueError):
        _canvas().set_blend("multiply")


def test_opaque_circle_is_white():
    canvas = _canvas()
    canvas.fill_circle((20, 20), 2.0, (255, 255, 255, 1.0))
    assert _rgb(canvas, 20, 20) == (255, 255, 255)


def test_transparent_circle_draws_nothing():
    canvas = _canvas()
    canvas.fill_circle((20, 20), 2.0, (255, 255, 255, 0.0))
    assert _rgb(canvas, 20, 20) == BG


def test_subpixel_circle_draws_single_pixel():
    canvas = _canvas()
    canvas.fill_circle((30, 30), 0.3, (255, 255, 255, 1.0))
    assert _rgb(canvas, 30, 30) == (255, 255, 255)
    assert _rgb(canvas, 32, 30) == BG


def test_cross_extends_both_axes():
    canvas = _canvas()
    canvas.stroke_cross((30, 20), 5, (200, 180, 255, 1.0), 1.0)
    assert _rgb(canvas, 35, 20) != BG
    assert _rgb(canvas, 30, 25) != BG
    assert _rgb(canvas, 35, 25) == BG


def test_additive_nebula_brightens_centre_most():
    canvas = _canvas()
    canvas.set_blend(ADDITIVE)
    stops = [(0.0, (120, 60, 180, 0.5)), (1.0, (0, 0, 0, 0.0))]
    canvas.fill_radial_gradient((32, 24), 40, stops)
    canvas.set_blend(NORMAL)

    centre = _rgb(canvas, 32, 24)
    edge = _rgb(canvas, 0, 0)
    assert sum(centre) > sum(edge) >= sum(BG)
    assert centre[2] > BG[2]


def test_additive_gradients_accumulate():
    stops = [(0.0, (80, 40, 120, 0.4)), (1.0, (0, 0, 0, 0.0))]

    once = _canvas()
    once.set_blend(ADDITIVE)
    once.fill_radial_gradient((32, 24), 40, stops)
    once.set_blend(NORMAL)

    twice = _canvas()
    twice.set_blend(ADDITIVE)
    twice.fill_radial_gradient((32, 24), 40, stops)
    twice.fill_radial_gradient((32, 24), 40, stops)
    twice.set_blend(NORMAL)

    assert sum(_rgb(twice, 32, 24)) > sum(_rgb(once, 32, 24))


def test_normal_gradient_blends_over_surface():
    canvas = _canvas()
    canvas.fill_radial_gradient((10, 10), 6, [(0.0, (255, 255, 255, 1.0)), (1.0, (255, 255, 255, 0.0))])
    assert sum(_rgb(canvas, 10, 10)) > sum(BG)


def test_sprites_are_cached_by_stops():
    stops = ((0.0, (1, 2, 3, 255)), (1.0, (0, 0, 0, 0)))
    assert radial_sprite(5, stops, True) is radial_sprite(5, stops, True)
    assert radial_sprite(5, stops, True).get_size() == (10, 10)


def test_background_renders_on_surface_host():
    host = SurfaceHost(96, 64)
    bg = NebulaBackground(host, NebulaConfig(seed=3, particle_count=50))
    assert bg.mount()
    host.move_pointer(48, 32)
    for _ in range(3):
        host.pump()

    assert bg.frame == 3
    surface = host.canvas.surface
    colors = {tuple(surface.get_at((x, y)))[:3] for x in range(0, 96, 4) for y in range(0, 64, 4)}
    assert len(colors) > 1
    assert all(c != (0, 0, 0) for c in colors)

    host.resize(120, 80)
    host.pump()
    assert host.canvas.surface.get_size() == (120, 80)
    bg.unmount()
    assert host.scheduler.pending == 0

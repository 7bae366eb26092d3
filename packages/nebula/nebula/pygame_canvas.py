"""pygame rasterizer for the Canvas protocol.

Additive gradients (the nebula layer) are drawn on a reduced-resolution
layer that is smooth-scaled up and added onto the surface when the blend
mode returns to normal. Gradient sprites are cached by quantized stops.
"""
from __future__ import annotations

import math
from functools import lru_cache
from typing import Sequence

import pygame
import pygame.gfxdraw

from nebula.canvas import ADDITIVE, BLEND_MODES, NORMAL
from nebula.types import RGBA, Color, GradientStop, Point

LAYER_SCALE = 4
ALPHA_STEPS = 64

_Stops = tuple[tuple[float, tuple[int, int, int, int]], ...]


def _alpha8(alpha: float) -> int:
    return max(0, min(255, int(round(alpha * 255))))


def _quantize(stops: Sequence[GradientStop]) -> _Stops:
    """Snap alphas to ALPHA_STEPS levels so similar gradients share a sprite."""
    out = []
    for offset, (r, g, b, a) in stops:
        level = round(max(0.0, min(1.0, a)) * ALPHA_STEPS)
        out.append((offset, (int(r), int(g), int(b), _alpha8(level / ALPHA_STEPS))))
    return tuple(out)


def _sample(stops: _Stops, t: float) -> tuple[float, float, float, float]:
    if t <= stops[0][0]:
        return stops[0][1]
    for (o0, c0), (o1, c1) in zip(stops, stops[1:]):
        if t <= o1:
            k = 0.0 if o1 == o0 else (t - o0) / (o1 - o0)
            return tuple(a + (b - a) * k for a, b in zip(c0, c1))  # type: ignore[return-value]
    return stops[-1][1]


@lru_cache(maxsize=256)
def radial_sprite(radius: int, stops: _Stops, premultiplied: bool) -> pygame.Surface:
    """Square sprite of side 2*radius holding the gradient.

    premultiplied sprites are opaque RGB (color * alpha over black) for
    additive blits; the others carry per-pixel alpha.
    """
    side = radius * 2
    if premultiplied:
        sprite = pygame.Surface((side, side))
        sprite.fill((0, 0, 0))
    else:
        sprite = pygame.Surface((side, side), pygame.SRCALPHA)
        sprite.fill((0, 0, 0, 0))
    # Outermost ring first; each smaller disc overwrites the centre.
    for ring in range(radius, 0, -1):
        r, g, b, a = _sample(stops, ring / radius)
        if premultiplied:
            k = a / 255.0
            color = (int(r * k), int(g * k), int(b * k))
        else:
            color = (int(r), int(g), int(b), int(a))
        pygame.draw.circle(sprite, color, (radius, radius), ring)
    return sprite


class PygameCanvas:
    def __init__(self, surface: pygame.Surface) -> None:
        self._surface = surface
        self._blend = NORMAL
        self._layer: pygame.Surface | None = None

    @property
    def surface(self) -> pygame.Surface:
        return self._surface

    @property
    def size(self) -> tuple[int, int]:
        return self._surface.get_size()

    @property
    def blend(self) -> str:
        return self._blend

    def _new_surface(self, width: int, height: int) -> pygame.Surface:
        return pygame.Surface((width, height))

    def resize(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid canvas size {width}x{height}")
        if (width, height) != self.size:
            self._surface = self._new_surface(width, height)
        self._layer = None

    def fill(self, color: Color) -> None:
        self._surface.fill(color)

    def set_blend(self, mode: str) -> None:
        if mode not in BLEND_MODES:
            raise ValueError(f"unknown blend mode {mode!r}")
        if mode == self._blend:
            return
        if mode == ADDITIVE:
            self._begin_layer()
        else:
            self._compose_layer()
        self._blend = mode

    def _begin_layer(self) -> None:
        w, h = self.size
        size = (max(1, math.ceil(w / LAYER_SCALE)), max(1, math.ceil(h / LAYER_SCALE)))
        if self._layer is None or self._layer.get_size() != size:
            self._layer = pygame.Surface(size)
        self._layer.fill((0, 0, 0))

    def _compose_layer(self) -> None:
        if self._layer is None:
            return
        scaled = pygame.transform.smoothscale(self._layer, self.size)
        self._surface.blit(scaled, (0, 0), special_flags=pygame.BLEND_RGB_ADD)

    def fill_radial_gradient(
        self, center: Point, radius: float, stops: Sequence[GradientStop]
    ) -> None:
        quantized = _quantize(stops)
        if self._blend == ADDITIVE and self._layer is not None:
            r = max(1, int(round(radius / LAYER_SCALE)))
            sprite = radial_sprite(r, quantized, True)
            pos = (int(center[0] / LAYER_SCALE) - r, int(center[1] / LAYER_SCALE) - r)
            self._layer.blit(sprite, pos, special_flags=pygame.BLEND_RGB_ADD)
            return
        r = max(1, int(round(radius)))
        sprite = radial_sprite(r, quantized, False)
        self._surface.blit(sprite, (int(center[0]) - r, int(center[1]) - r))

    def fill_circle(self, center: Point, radius: float, color: RGBA) -> None:
        r, g, b, a = color
        alpha = _alpha8(a)
        if alpha == 0:
            return
        x, y = int(round(center[0])), int(round(center[1]))
        rr = int(round(radius))
        if rr < 1:
            pygame.gfxdraw.pixel(self._surface, x, y, (r, g, b, alpha))
        else:
            pygame.gfxdraw.filled_circle(self._surface, x, y, rr, (r, g, b, alpha))

    def stroke_cross(
        self, center: Point, half_length: float, color: RGBA, width: float
    ) -> None:
        r, g, b, a = color
        # Sub-pixel widths fade the 1px line instead of thinning it.
        alpha = _alpha8(a * min(1.0, width))
        if alpha == 0:
            return
        x, y = int(round(center[0])), int(round(center[1]))
        reach = int(round(half_length))
        pygame.gfxdraw.hline(self._surface, x - reach, x + reach, y, (r, g, b, alpha))
        pygame.gfxdraw.vline(self._surface, x, y - reach, y + reach, (r, g, b, alpha))


class DisplayCanvas(PygameCanvas):
    """PygameCanvas over the display surface; resizing resets the video mode."""

    def __init__(self, surface: pygame.Surface, flags: int = pygame.RESIZABLE) -> None:
        super().__init__(surface)
        self._flags = flags

    def _new_surface(self, width: int, height: int) -> pygame.Surface:
        return pygame.display.set_mode((width, height), self._flags)

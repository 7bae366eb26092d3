"""Glow blobs: the soft drifting nebula clouds."""

from __future__ import annotations

import math
from dataclasses import dataclass

from nebula.types import Color, GradientStop, Point

DRIFT_X = 80.0
DRIFT_Y = 60.0
BREATH = 0.03


@dataclass(frozen=True, slots=True)
class GlowBlob:
    """Static cloud configuration. Anchor is a fraction of the viewport."""

    anchor: Point
    radius: float
    color: Color
    opacity: float
    speed: float
    offset: float = 0.0


DEFAULT_BLOBS: tuple[GlowBlob, ...] = (
    # Deep indigo
    GlowBlob((0.25, 0.3), 600, (75, 40, 130), 0.25, 0.00015, 0.0),
    GlowBlob((0.7, 0.4), 500, (100, 50, 160), 0.2, -0.0001, math.pi),
    GlowBlob((0.45, 0.6), 550, (120, 60, 180), 0.18, 0.00012, math.pi / 2),
    GlowBlob((0.15, 0.7), 450, (90, 45, 140), 0.22, -0.00008, math.pi * 1.5),
    GlowBlob((0.8, 0.65), 400, (130, 70, 190), 0.15, 0.0001, math.pi / 3),
    GlowBlob((0.5, 0.35), 350, (140, 80, 200), 0.12, -0.00015, math.pi * 0.7),
    # Magenta accents
    GlowBlob((0.6, 0.5), 300, (160, 70, 180), 0.1, 0.00009, math.pi * 1.2),
    GlowBlob((0.35, 0.45), 280, (110, 60, 150), 0.14, -0.00011, math.pi * 0.4),
)


def drift_center(blob: GlowBlob, frame: int, width: int, height: int) -> Point:
    """Anchor scaled to the viewport plus a slow Lissajous orbit."""
    angle = frame * blob.speed + blob.offset
    x = width * blob.anchor[0] + math.sin(angle) * DRIFT_X
    y = height * blob.anchor[1] + math.cos(frame * blob.speed * 0.8 + blob.offset) * DRIFT_Y
    return x, y


def breathing_opacity(blob: GlowBlob, frame: int) -> float:
    return blob.opacity + math.sin(frame * blob.speed * 5) * BREATH


def gradient_stops(blob: GlowBlob, opacity: float) -> list[GradientStop]:
    r, g, b = blob.color
    return [
        (0.0, (r, g, b, opacity)),
        (0.3, (max(r - 10, 0), max(g - 10, 0), max(b - 10, 0), opacity * 0.7)),
        (0.6, (max(r - 20, 0), max(g - 15, 0), max(b - 20, 0), opacity * 0.4)),
        (1.0, (0, 0, 0, 0.0)),
    ]

"""Repulsion field built from the pointer trail."""

from __future__ import annotations

import math
from collections.abc import Iterable

from nebula.trail import TrailPoint
from nebula.types import Point

# Below this distance the push direction is undefined and the entry is ignored.
EPSILON = 1e-6


def repulsion_magnitude(
    distance: float, life: float, cutoff: float, strength: float
) -> float:
    """Linear falloff: life * strength at distance 0, zero from cutoff on."""
    if distance >= cutoff:
        return 0.0
    return (1.0 - distance / cutoff) * life * strength


def displacement(
    target: Point,
    trail: Iterable[TrailPoint],
    cutoff: float,
    strength: float,
) -> Point:
    """Sum of pushes on target away from every live trail entry."""
    tx, ty = target
    dx = 0.0
    dy = 0.0
    for point in trail:
        ox = tx - point.x
        oy = ty - point.y
        dist = math.hypot(ox, oy)
        if dist < EPSILON or dist >= cutoff:
            continue
        push = repulsion_magnitude(dist, point.life, cutoff, strength) / dist
        dx += ox * push
        dy += oy * push
    return dx, dy


def displaced(
    target: Point,
    trail: Iterable[TrailPoint],
    cutoff: float,
    strength: float,
) -> Point:
    dx, dy = displacement(target, trail, cutoff, strength)
    return target[0] + dx, target[1] + dy

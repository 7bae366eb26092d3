"""Star particles: pool creation and per-frame twinkle."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass


@dataclass(slots=True)
class Particle:
    """A star. (x, y) is where it is drawn this frame; (base_x, base_y) is its anchor."""

    x: float
    y: float
    base_x: float
    base_y: float
    size: float
    base_size: float
    brightness: float
    twinkle_speed: float
    phase: float
    is_bright: bool = False


def spawn_particle(
    rng: random.Random, width: int, height: int, bright_chance: float
) -> Particle:
    x = rng.random() * width
    y = rng.random() * height
    size = rng.random() * 1.5 + 0.3
    return Particle(
        x=x,
        y=y,
        base_x=x,
        base_y=y,
        size=size,
        base_size=size,
        brightness=rng.random() * 0.5 + 0.5,
        twinkle_speed=0.005 + rng.random() * 0.015,
        phase=rng.random() * math.tau,
        is_bright=rng.random() > 1.0 - bright_chance,
    )


def spawn_pool(
    count: int,
    width: int,
    height: int,
    rng: random.Random,
    bright_chance: float = 0.07,
) -> list[Particle]:
    return [spawn_particle(rng, width, height, bright_chance) for _ in range(count)]


def brightness_at(frame: int, twinkle_speed: float, phase: float) -> float:
    """Raw sinusoid in [-0.4, 1.0]; negative values mean fully transparent."""
    return 0.3 + 0.7 * math.sin(frame * twinkle_speed + phase)


def pulse_size(base_size: float, frame: int, twinkle_speed: float) -> float:
    return base_size * (0.8 + 0.4 * math.sin(frame * twinkle_speed * 2))


def twinkle(particle: Particle, frame: int) -> None:
    particle.brightness = brightness_at(frame, particle.twinkle_speed, particle.phase)
    if particle.is_bright:
        particle.size = pulse_size(particle.base_size, frame, particle.twinkle_speed)


def to_alpha(brightness: float) -> float:
    return min(1.0, max(0.0, brightness))

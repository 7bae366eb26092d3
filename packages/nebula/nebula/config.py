"""Tunable constants and the NebulaConfig bundle."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

from nebula.blobs import DEFAULT_BLOBS, GlowBlob
from nebula.trail import DEFAULT_CAP, DEFAULT_DECAY
from nebula.types import Color

# Pool
PARTICLE_COUNT = 400
BRIGHT_CHANCE = 0.07

# Pointer field
PARTICLE_CUTOFF = 200.0
PARTICLE_STRENGTH = 8.0
BLOB_CUTOFF = 180.0
BLOB_STRENGTH = 12.0

# Colors
BACKGROUND: Color = (10, 10, 20)  # #0a0a14
STAR_COLOR: Color = (255, 255, 255)
GLINT_COLOR: Color = (200, 180, 255)
HALO_COLOR: Color = (180, 140, 220)

# Particle decorations
GLINT_THRESHOLD = 0.6
GLINT_ALPHA = 0.4
GLINT_REACH = 4.0
GLINT_WIDTH = 0.5
HALO_MIN_SIZE = 0.8
HALO_REACH = 5.0
HALO_ALPHA = 0.1


@dataclass(frozen=True)
class NebulaConfig:
    particle_count: int = PARTICLE_COUNT
    bright_chance: float = BRIGHT_CHANCE
    trail_cap: int = DEFAULT_CAP
    trail_decay: float = DEFAULT_DECAY
    particle_cutoff: float = PARTICLE_CUTOFF
    particle_strength: float = PARTICLE_STRENGTH
    blob_cutoff: float = BLOB_CUTOFF
    blob_strength: float = BLOB_STRENGTH
    background: Color = BACKGROUND
    blobs: tuple[GlowBlob, ...] = DEFAULT_BLOBS
    interactive: bool = True
    reduced_motion: bool = False
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.particle_count < 0:
            raise ValueError("particle_count must be non-negative")
        if not 0.0 <= self.bright_chance <= 1.0:
            raise ValueError("bright_chance must be within [0, 1]")
        if self.trail_cap <= 0:
            raise ValueError("trail_cap must be positive")
        if self.trail_decay <= 0:
            raise ValueError("trail_decay must be positive")
        if self.particle_cutoff <= 0 or self.blob_cutoff <= 0:
            raise ValueError("cutoff radii must be positive")
        if any(not 0 <= c <= 255 for c in self.background):
            raise ValueError(f"background {self.background!r} is not an RGB triple")
        object.__setattr__(self, "blobs", tuple(self.blobs))

    def with_overrides(self, **changes: Any) -> NebulaConfig:
        return dataclasses.replace(self, **changes)

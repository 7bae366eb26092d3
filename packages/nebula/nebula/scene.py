"""Scene - the mutable state a frame loop draws."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from nebula.blobs import GlowBlob
from nebula.particles import Particle
from nebula.trail import PointerTrail

if TYPE_CHECKING:
    from nebula.canvas import Canvas
    from nebula.config import NebulaConfig


@dataclass
class Scene:
    """Everything one background owns between mount and unmount."""

    canvas: Canvas
    config: NebulaConfig
    width: int
    height: int
    particles: list[Particle] = field(default_factory=list)
    blobs: tuple[GlowBlob, ...] = ()
    trail: PointerTrail = field(default_factory=PointerTrail)

    def resize(self, width: int, height: int) -> None:
        self.canvas.resize(width, height)
        self.width, self.height = self.canvas.size

"""FrameLoop - ordered per-frame systems over a scene."""

from __future__ import annotations

from nebula.clock import FrameClock
from nebula.scene import Scene
from nebula.types import System


class FrameLoop:
    def __init__(self, scene: Scene) -> None:
        self._clock = FrameClock()
        self._scene = scene
        self._systems: list[System] = []

    @property
    def scene(self) -> Scene:
        return self._scene

    @property
    def clock(self) -> FrameClock:
        return self._clock

    @property
    def frame(self) -> int:
        return self._clock.frame

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def step(self) -> None:
        self._clock.advance()
        ctx = self._clock.context(self._scene.width, self._scene.height)
        for system in self._systems:
            system(self._scene, ctx)

    def run(self, n: int) -> None:
        for _ in range(n):
            self.step()

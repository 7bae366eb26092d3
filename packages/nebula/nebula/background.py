"""NebulaBackground - mounts the animated backdrop onto a host.

Mounting acquires a canvas, builds the particle pool and frame loop,
subscribes to the host's resize (and pointer) events and requests the
first frame. Every frame re-requests the next one until unmount()
cancels the pending request and drops the listeners it registered.

A host that cannot provide a canvas leaves the background inert: the
failure is logged and mount() returns False.
"""
from __future__ import annotations

import logging
import random
from typing import Any

from nebula.config import NebulaConfig
from nebula.events import POINTER_MOVE, RESIZE, Listener
from nebula.host import Host
from nebula.loop import FrameLoop
from nebula.particles import spawn_pool
from nebula.scene import Scene
from nebula.systems import (
    make_clear_system,
    make_nebula_system,
    make_starfield_system,
    make_trail_system,
)
from nebula.trail import PointerTrail
from nebula.types import LifecycleError, SurfaceUnavailableError

logger = logging.getLogger(__name__)


def build_frame_loop(scene: Scene) -> FrameLoop:
    loop = FrameLoop(scene)
    loop.add_system(make_clear_system())
    loop.add_system(make_nebula_system())
    loop.add_system(make_starfield_system())
    if scene.config.interactive:
        loop.add_system(make_trail_system())
    return loop


class NebulaBackground:
    def __init__(self, host: Host, config: NebulaConfig | None = None) -> None:
        self._host = host
        self._config = config if config is not None else NebulaConfig()
        self._loop: FrameLoop | None = None
        self._listeners: list[Listener] = []
        self._frame_handle: int | None = None
        self._mounted = False

    @property
    def config(self) -> NebulaConfig:
        return self._config

    @property
    def mounted(self) -> bool:
        return self._mounted

    @property
    def loop(self) -> FrameLoop | None:
        return self._loop

    @property
    def scene(self) -> Scene | None:
        return self._loop.scene if self._loop is not None else None

    @property
    def frame(self) -> int:
        return self._loop.frame if self._loop is not None else 0

    def mount(self) -> bool:
        if self._mounted:
            raise LifecycleError("background is already mounted")

        try:
            canvas = self._host.acquire_canvas()
        except SurfaceUnavailableError as exc:
            logger.warning("No drawing surface, background disabled: %s", exc)
            return False

        conf = self._config
        width, height = self._host.viewport
        canvas.resize(width, height)
        width, height = canvas.size
        rng = random.Random(conf.seed)
        scene = Scene(
            canvas=canvas,
            config=conf,
            width=width,
            height=height,
            particles=spawn_pool(conf.particle_count, width, height, rng, conf.bright_chance),
            blobs=conf.blobs,
            trail=PointerTrail(conf.trail_cap, conf.trail_decay),
        )
        self._loop = build_frame_loop(scene)
        self._mounted = True
        logger.debug(
            "Mounted %dx%d with %d particles, %d blobs",
            width, height, len(scene.particles), len(scene.blobs),
        )

        events = self._host.events
        self._listeners.append(events.subscribe(RESIZE, self._on_resize))
        if conf.reduced_motion:
            self._loop.step()
            return True
        if conf.interactive:
            self._listeners.append(events.subscribe(POINTER_MOVE, self._on_pointer_move))
        self._frame_handle = self._host.scheduler.request(self._on_frame)
        return True

    def unmount(self) -> None:
        if not self._mounted:
            return
        self._mounted = False
        self._host.scheduler.cancel(self._frame_handle)
        self._frame_handle = None
        for listener in self._listeners:
            self._host.events.unsubscribe(listener)
        self._listeners.clear()
        logger.debug("Unmounted after %d frames", self.frame)

    def __enter__(self) -> NebulaBackground:
        self.mount()
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.unmount()

    def _on_frame(self) -> None:
        self._frame_handle = None
        if not self._mounted or self._loop is None:
            return
        self._loop.step()
        # A system may have unmounted us mid-frame.
        if self._mounted:
            self._frame_handle = self._host.scheduler.request(self._on_frame)

    def _on_resize(self, event: str, data: dict[str, Any]) -> None:
        if self._loop is None:
            return
        self._loop.scene.resize(data["width"], data["height"])
        logger.debug("Resized to %dx%d", self._loop.scene.width, self._loop.scene.height)
        if self._config.reduced_motion:
            self._loop.step()

    def _on_pointer_move(self, event: str, data: dict[str, Any]) -> None:
        if self._loop is not None:
            self._loop.scene.trail.record(data["x"], data["y"])

"""Hosts: the window-like environment a background mounts into."""
from __future__ import annotations

from nebula.canvas import Canvas, RecordingCanvas
from nebula.events import POINTER_MOVE, RESIZE, EventBus
from nebula.scheduler import FrameScheduler
from nebula.types import SurfaceUnavailableError


class Host:
    """Viewport size, window events, frame scheduling, and canvas access.

    One call to pump() is one display refresh: queued events are
    dispatched first, then the frame callbacks requested so far run.
    """

    def __init__(self, width: int, height: int) -> None:
        _check_size(width, height)
        self._viewport = (int(width), int(height))
        self.events = EventBus()
        self.scheduler = FrameScheduler()

    @property
    def viewport(self) -> tuple[int, int]:
        return self._viewport

    def acquire_canvas(self) -> Canvas:
        raise NotImplementedError

    def resize(self, width: int, height: int) -> None:
        _check_size(width, height)
        self._viewport = (int(width), int(height))
        self.events.publish(RESIZE, width=self._viewport[0], height=self._viewport[1])

    def move_pointer(self, x: float, y: float) -> None:
        self.events.publish(POINTER_MOVE, x=float(x), y=float(y))

    def pump(self) -> int:
        self.events.flush()
        return self.scheduler.run_frame()


class HeadlessHost(Host):
    """In-memory host stepped by hand; hands out RecordingCanvas instances."""

    def __init__(self, width: int = 1280, height: int = 720, *, drawable: bool = True) -> None:
        super().__init__(width, height)
        self._drawable = drawable
        self.canvas: RecordingCanvas | None = None

    def acquire_canvas(self) -> RecordingCanvas:
        if not self._drawable:
            raise SurfaceUnavailableError("headless host has no drawing context")
        self.canvas = RecordingCanvas(*self.viewport)
        return self.canvas

    def advance(self, frames: int = 1) -> None:
        for _ in range(frames):
            self.pump()


def _check_size(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise ValueError(f"viewport must be positive, got {width}x{height}")

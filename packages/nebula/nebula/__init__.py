"""nebula - animated starfield and nebula backdrop with a pointer-reactive field."""

from nebula.background import NebulaBackground
from nebula.blobs import DEFAULT_BLOBS, GlowBlob
from nebula.canvas import Canvas, RecordingCanvas
from nebula.clock import FrameClock
from nebula.config import NebulaConfig
from nebula.events import EventBus, Listener
from nebula.host import HeadlessHost, Host
from nebula.loop import FrameLoop
from nebula.particles import Particle
from nebula.scene import Scene
from nebula.scheduler import FrameScheduler
from nebula.trail import PointerTrail, TrailPoint
from nebula.types import FrameContext, LifecycleError, SurfaceUnavailableError

__all__ = [
    "NebulaBackground",
    "NebulaConfig",
    "Host",
    "HeadlessHost",
    "Canvas",
    "RecordingCanvas",
    "EventBus",
    "Listener",
    "FrameScheduler",
    "FrameLoop",
    "FrameClock",
    "FrameContext",
    "Scene",
    "Particle",
    "GlowBlob",
    "DEFAULT_BLOBS",
    "PointerTrail",
    "TrailPoint",
    "LifecycleError",
    "SurfaceUnavailableError",
]

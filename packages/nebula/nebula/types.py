"""Shared type aliases, frame context, and errors for the nebula backdrop."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

Color = tuple[int, int, int]
RGBA = tuple[int, int, int, float]
Point = tuple[float, float]

# Gradient stop: offset in [0, 1] along the radius, then an RGBA color.
GradientStop = tuple[float, RGBA]


@dataclass(frozen=True, slots=True)
class FrameContext:
    frame: int
    width: int
    height: int


class SurfaceUnavailableError(RuntimeError):
    """Raised when a host cannot provide a drawing context."""


class LifecycleError(RuntimeError):
    """Raised when mounting a background that is already mounted."""


if TYPE_CHECKING:
    from nebula.scene import Scene

System = Callable[["Scene", FrameContext], None]

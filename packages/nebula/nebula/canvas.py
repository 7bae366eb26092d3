"""Drawing-context protocol and an in-memory recording backend."""
from __future__ import annotations

from typing import Any, NamedTuple, Protocol, Sequence

from nebula.types import RGBA, Color, GradientStop, Point

NORMAL = "normal"
ADDITIVE = "additive"
BLEND_MODES = (NORMAL, ADDITIVE)


class Canvas(Protocol):
    @property
    def size(self) -> tuple[int, int]: ...

    def resize(self, width: int, height: int) -> None: ...

    def fill(self, color: Color) -> None: ...

    def set_blend(self, mode: str) -> None: ...

    def fill_radial_gradient(
        self, center: Point, radius: float, stops: Sequence[GradientStop]
    ) -> None: ...

    def fill_circle(self, center: Point, radius: float, color: RGBA) -> None: ...

    def stroke_cross(
        self, center: Point, half_length: float, color: RGBA, width: float
    ) -> None: ...


class DrawCall(NamedTuple):
    op: str
    args: tuple[Any, ...]


class RecordingCanvas:
    """Canvas that keeps a log of draw calls instead of rasterizing."""

    def __init__(self, width: int, height: int) -> None:
        self._width = 0
        self._height = 0
        self._blend = NORMAL
        self.calls: list[DrawCall] = []
        self.resize(width, height)

    @property
    def size(self) -> tuple[int, int]:
        return self._width, self._height

    @property
    def blend(self) -> str:
        return self._blend

    def _record(self, op: str, *args: Any) -> None:
        self.calls.append(DrawCall(op, args))

    def ops(self, op: str) -> list[DrawCall]:
        return [call for call in self.calls if call.op == op]

    def reset(self) -> None:
        self.calls.clear()

    def resize(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid canvas size {width}x{height}")
        self._width = int(width)
        self._height = int(height)
        self._record("resize", self._width, self._height)

    def fill(self, color: Color) -> None:
        self._record("fill", (0, 0, self._width, self._height), color)

    def set_blend(self, mode: str) -> None:
        if mode not in BLEND_MODES:
            raise ValueError(f"unknown blend mode {mode!r}")
        self._blend = mode
        self._record("blend", mode)

    def fill_radial_gradient(
        self, center: Point, radius: float, stops: Sequence[GradientStop]
    ) -> None:
        self._record("gradient", center, radius, tuple(stops), self._blend)

    def fill_circle(self, center: Point, radius: float, color: RGBA) -> None:
        self._record("circle", center, radius, color)

    def stroke_cross(
        self, center: Point, half_length: float, color: RGBA, width: float
    ) -> None:
        self._record("cross", center, half_length, color, width)

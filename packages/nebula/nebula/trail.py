"""Pointer trail: a capped, decaying history of recent pointer positions."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass

DEFAULT_CAP = 40
DEFAULT_DECAY = 0.015


@dataclass(slots=True)
class TrailPoint:
    x: float
    y: float
    life: float = 1.0


class PointerTrail:
    """Oldest entries fall off the front when the cap is reached."""

    def __init__(self, cap: int = DEFAULT_CAP, decay: float = DEFAULT_DECAY) -> None:
        if cap <= 0:
            raise ValueError("cap must be positive")
        if decay <= 0:
            raise ValueError("decay must be positive")
        self._cap = cap
        self._decay = decay
        self._points: deque[TrailPoint] = deque(maxlen=cap)

    @property
    def cap(self) -> int:
        return self._cap

    @property
    def decay(self) -> float:
        return self._decay

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[TrailPoint]:
        return iter(self._points)

    def record(self, x: float, y: float) -> TrailPoint:
        point = TrailPoint(float(x), float(y))
        self._points.append(point)
        return point

    def age(self) -> int:
        """Decay every entry once and drop the expired ones. Returns how many were dropped."""
        for point in self._points:
            point.life -= self._decay
        before = len(self._points)
        self._points = deque(
            (p for p in self._points if p.life > 0), maxlen=self._cap
        )
        return before - len(self._points)

    def clear(self) -> None:
        self._points.clear()

"""Animation-frame scheduler: "call this before the next repaint"."""
from __future__ import annotations

from itertools import count
from typing import Callable

FrameCallback = Callable[[], None]


class FrameScheduler:
    """Requests made while a frame runs are deferred to the following frame."""

    def __init__(self) -> None:
        self._pending: dict[int, FrameCallback] = {}
        self._handles = count(1)

    @property
    def pending(self) -> int:
        return len(self._pending)

    def request(self, callback: FrameCallback) -> int:
        handle = next(self._handles)
        self._pending[handle] = callback
        return handle

    def cancel(self, handle: int | None) -> None:
        if handle is not None:
            self._pending.pop(handle, None)

    def run_frame(self) -> int:
        """Run every callback requested before this call. Returns how many ran."""
        handles = list(self._pending)
        ran = 0
        for handle in handles:
            # A callback earlier in this frame may have cancelled a later one.
            callback = self._pending.pop(handle, None)
            if callback is None:
                continue
            callback()
            ran += 1
        return ran

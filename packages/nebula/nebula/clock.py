"""Frame counter driving every oscillation in the backdrop."""

from nebula.types import FrameContext


class FrameClock:
    def __init__(self) -> None:
        self._frame = 0

    @property
    def frame(self) -> int:
        return self._frame

    def advance(self) -> int:
        self._frame += 1
        return self._frame

    def context(self, width: int, height: int) -> FrameContext:
        return FrameContext(frame=self._frame, width=width, height=height)

    def reset(self, frame: int = 0) -> None:
        if frame < 0:
            raise ValueError("frame must be non-negative")
        self._frame = frame

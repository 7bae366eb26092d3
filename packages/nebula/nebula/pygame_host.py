"""PygameHost - a real window driving the host event bus and frame scheduler."""
from __future__ import annotations

import logging

import pygame

from nebula.host import Host
from nebula.pygame_canvas import DisplayCanvas
from nebula.types import SurfaceUnavailableError

logger = logging.getLogger(__name__)


class PygameHost(Host):
    """Translates pygame events and runs scheduled frames at a target FPS.

    Escape or closing the window stops run().
    """

    def __init__(
        self,
        width: int,
        height: int,
        *,
        fps: int = 60,
        caption: str = "nebula",
    ) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive")
        super().__init__(width, height)
        self._fps = fps
        self._caption = caption
        self._running = False
        self.canvas: DisplayCanvas | None = None

    @property
    def fps(self) -> int:
        return self._fps

    @property
    def running(self) -> bool:
        return self._running

    def acquire_canvas(self) -> DisplayCanvas:
        try:
            pygame.display.init()
            surface = pygame.display.set_mode(self.viewport, pygame.RESIZABLE)
        except pygame.error as exc:
            raise SurfaceUnavailableError(str(exc)) from exc
        pygame.display.set_caption(self._caption)
        logger.debug("Opened %dx%d display (%s)", *self.viewport, pygame.display.get_driver())
        self.canvas = DisplayCanvas(surface)
        return self.canvas

    def handle(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.stop()
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.stop()
        elif event.type == pygame.VIDEORESIZE:
            self.resize(event.w, event.h)
        elif event.type == pygame.MOUSEMOTION:
            self.move_pointer(*event.pos)

    def run(self, frames: int | None = None) -> int:
        """Pump events and frames until stopped or `frames` refreshes ran."""
        clock = pygame.time.Clock()
        self._running = True
        count = 0
        while self._running:
            clock.tick(self._fps)
            for event in pygame.event.get():
                self.handle(event)
            self.pump()
            if pygame.display.get_surface() is not None:
                pygame.display.flip()
            count += 1
            if frames is not None and count >= frames:
                break
        self._running = False
        return count

    def stop(self) -> None:
        self._running = False

    def save(self, path: str) -> None:
        if self.canvas is None:
            raise SurfaceUnavailableError("nothing has been drawn yet")
        pygame.image.save(self.canvas.surface, path)

    def close(self) -> None:
        pygame.display.quit()

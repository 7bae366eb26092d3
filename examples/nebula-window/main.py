"""Nebula Window - the animated backdrop in a resizable pygame window.

Move the mouse to stir the stars and clouds. Resize the window freely.

Controls:
  Mouse   Disturb the field
  Esc     Quit

With --capture FILE the window is replaced by SDL's dummy video driver:
the backdrop runs for --frames refreshes and the last one is saved.
"""
from __future__ import annotations

import argparse
import logging
import os
import sys

from nebula import NebulaBackground, NebulaConfig
from nebula.config import PARTICLE_COUNT

FPS = 60
SCREEN_W = 1280
SCREEN_H = 720


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Nebula Window - animated backdrop demo")
    p.add_argument("--width", type=int, default=SCREEN_W, help=f"Window width (default: {SCREEN_W})")
    p.add_argument("--height", type=int, default=SCREEN_H, help=f"Window height (default: {SCREEN_H})")
    p.add_argument("--fps", type=int, default=FPS, help=f"Target refresh rate (default: {FPS})")
    p.add_argument("--seed", type=int, default=None, help="Random seed for the star pool")
    p.add_argument("--particles", type=int, default=PARTICLE_COUNT,
                   help=f"Star count (default: {PARTICLE_COUNT})")
    p.add_argument("--static", action="store_true", help="Reduced motion: draw a single frame")
    p.add_argument("--no-pointer", action="store_true", help="Ignore mouse movement")
    p.add_argument("--capture", type=str, default=None, metavar="FILE",
                   help="Render headlessly and save the last frame to FILE")
    p.add_argument("--frames", type=int, default=120, help="Frames to render with --capture (default: 120)")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    args = p.parse_args()
    args.width = max(64, args.width)
    args.height = max(64, args.height)
    args.frames = max(1, args.frames)
    return args


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.capture:
        os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

    # Imported late so SDL_VIDEODRIVER is honored.
    import pygame

    from nebula.pygame_host import PygameHost

    config = NebulaConfig(
        particle_count=args.particles,
        interactive=not args.no_pointer,
        reduced_motion=args.static,
        seed=args.seed,
    )
    host = PygameHost(args.width, args.height, fps=args.fps, caption="Nebula Window")
    background = NebulaBackground(host, config)

    pygame.init()
    try:
        with background:
            if not background.mounted:
                print("No display available; nothing to show.", file=sys.stderr)
                sys.exit(1)
            if args.capture:
                host.run(frames=args.frames)
                host.save(args.capture)
                print(f"Saved frame {background.frame} to {args.capture}")
            else:
                host.run()
    finally:
        host.close()
        pygame.quit()


if __name__ == "__main__":
    main()

"""System factories for the per-frame draw pipeline.

Registration order is the draw order: clear, nebula, starfield, trail.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from nebula import config as cfg
from nebula.blobs import breathing_opacity, drift_center, gradient_stops
from nebula.canvas import ADDITIVE, NORMAL
from nebula.forcefield import displaced, displacement
from nebula.particles import Particle, to_alpha, twinkle

if TYPE_CHECKING:
    from nebula.canvas import Canvas
    from nebula.scene import Scene
    from nebula.types import FrameContext


def make_clear_system() -> Callable[[Scene, FrameContext], None]:
    """Return a system that paints the opaque deep-space background."""

    def clear_system(scene: Scene, ctx: FrameContext) -> None:
        scene.canvas.fill(scene.config.background)

    return clear_system


def make_nebula_system() -> Callable[[Scene, FrameContext], None]:
    """Return a system that draws every glow blob with additive blending."""

    def nebula_system(scene: Scene, ctx: FrameContext) -> None:
        conf = scene.config
        canvas = scene.canvas
        canvas.set_blend(ADDITIVE)
        for blob in scene.blobs:
            center = drift_center(blob, ctx.frame, ctx.width, ctx.height)
            if conf.interactive:
                center = displaced(
                    center, scene.trail, conf.blob_cutoff, conf.blob_strength
                )
            stops = gradient_stops(blob, breathing_opacity(blob, ctx.frame))
            canvas.fill_radial_gradient(center, blob.radius, stops)
        canvas.set_blend(NORMAL)

    return nebula_system


def draw_particle(canvas: Canvas, particle: Particle) -> None:
    alpha = to_alpha(particle.brightness)
    center = (particle.x, particle.y)
    canvas.fill_circle(center, particle.size, (*cfg.STAR_COLOR, alpha))

    if particle.is_bright and particle.brightness > cfg.GLINT_THRESHOLD:
        canvas.stroke_cross(
            center,
            particle.size * cfg.GLINT_REACH,
            (*cfg.GLINT_COLOR, alpha * cfg.GLINT_ALPHA),
            cfg.GLINT_WIDTH,
        )

    if particle.size > cfg.HALO_MIN_SIZE:
        canvas.fill_radial_gradient(
            center,
            particle.size * cfg.HALO_REACH,
            [
                (0.0, (*cfg.HALO_COLOR, alpha * cfg.HALO_ALPHA)),
                (1.0, (*cfg.STAR_COLOR, 0.0)),
            ],
        )


def make_starfield_system() -> Callable[[Scene, FrameContext], None]:
    """Return a system that twinkles, displaces, and draws every particle."""

    def starfield_system(scene: Scene, ctx: FrameContext) -> None:
        conf = scene.config
        push = conf.interactive and len(scene.trail) > 0
        for particle in scene.particles:
            twinkle(particle, ctx.frame)
            particle.x = particle.base_x
            particle.y = particle.base_y
            if push:
                dx, dy = displacement(
                    (particle.base_x, particle.base_y),
                    scene.trail,
                    conf.particle_cutoff,
                    conf.particle_strength,
                )
                particle.x += dx
                particle.y += dy
            draw_particle(scene.canvas, particle)

    return starfield_system


def make_trail_system() -> Callable[[Scene, FrameContext], None]:
    """Return a system that ages the pointer trail once per frame."""

    def trail_system(scene: Scene, ctx: FrameContext) -> None:
        scene.trail.age()

    return trail_system

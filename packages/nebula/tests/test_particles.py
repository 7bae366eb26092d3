"""Tests for particle pool creation and twinkle math."""

import math
import random

import pytest
from nebula.particles import (
    Particle,
    brightness_at,
    pulse_size,
    spawn_pool,
    to_alpha,
    twinkle,
)


def _particle(**overrides):
    fields = dict(
        x=10.0, y=20.0, base_x=10.0, base_y=20.0,
        size=1.0, base_size=1.0, brightness=0.5,
        twinkle_speed=0.01, phase=0.0, is_bright=False,
    )
    fields.update(overrides)
    return Particle(**fields)


# --- Pool ---

def test_pool_has_requested_size():
    pool = spawn_pool(400, 800, 600, random.Random(1))
    assert len(pool) == 400


def test_pool_is_seed_deterministic():
    a = spawn_pool(50, 800, 600, random.Random(7))
    b = spawn_pool(50, 800, 600, random.Random(7))
    assert a == b


def test_pool_values_within_ranges():
    pool = spawn_pool(500, 800, 600, random.Random(3))
    for p in pool:
        assert 0 <= p.base_x < 800
        assert 0 <= p.base_y < 600
        assert (p.x, p.y) == (p.base_x, p.base_y)
        assert 0.3 <= p.size < 1.8
        assert p.size == p.base_size
        assert 0.5 <= p.brightness < 1.0
        assert 0.005 <= p.twinkle_speed < 0.02
        assert 0 <= p.phase < math.tau


def test_bright_chance_extremes():
    assert not any(p.is_bright for p in spawn_pool(100, 10, 10, random.Random(0), 0.0))
    assert all(p.is_bright for p in spawn_pool(100, 10, 10, random.Random(0), 1.0))


def test_bright_particles_are_rare_by_default():
    pool = spawn_pool(2000, 10, 10, random.Random(11))
    share = sum(p.is_bright for p in pool) / len(pool)
    assert 0.03 < share < 0.12


# --- Twinkle ---

def test_brightness_range_over_many_frames():
    """Raw brightness stays in [-0.4, 1.0]; alpha stays in [0, 1]."""
    rng = random.Random(5)
    for _ in range(50):
        speed = 0.005 + rng.random() * 0.015
        phase = rng.random() * math.tau
        for frame in range(0, 5000, 7):
            b = brightness_at(frame, speed, phase)
            assert -0.4 - 1e-12 <= b <= 1.0 + 1e-12
            assert 0.0 <= to_alpha(b) <= 1.0


def test_to_alpha_clamps():
    assert to_alpha(-0.4) == 0.0
    assert to_alpha(1.3) == 1.0
    assert to_alpha(0.25) == 0.25


def test_twinkle_recomputes_not_accumulates():
    p = _particle(twinkle_speed=0.01, phase=0.5)
    twinkle(p, 100)
    first = p.brightness
    twinkle(p, 100)
    assert p.brightness == first
    assert first == pytest.approx(0.3 + 0.7 * math.sin(100 * 0.01 + 0.5))


def test_ordinary_particle_keeps_size():
    p = _particle(size=1.2, base_size=1.2)
    twinkle(p, 123)
    assert p.size == 1.2


def test_bright_particle_pulses_size():
    p = _particle(is_bright=True, base_size=1.5, size=1.5, twinkle_speed=0.02)
    twinkle(p, 40)
    assert p.size == pytest.approx(pulse_size(1.5, 40, 0.02))
    assert p.size == pytest.approx(1.5 * (0.8 + 0.4 * math.sin(40 * 0.02 * 2)))


def test_pulse_size_bounds():
    for frame in range(0, 1000, 13):
        s = pulse_size(1.0, frame, 0.013)
        assert 0.4 - 1e-12 <= s <= 1.2 + 1e-12

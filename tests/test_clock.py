"""Tests for the simulation clock."""

import random

import pytest
from tick_ecosystem.clock import Clock
from tick_ecosystem.types import TickContext


def test_clock_initialization():
    clock = Clock()
    assert clock.tick_number == 0
    assert clock.elapsed == 0.0
    assert clock.speed == 1.0
    assert not clock.paused


def test_invalid_bounds_raise():
    with pytest.raises(ValueError):
        Clock(min_speed=0.0)
    with pytest.raises(ValueError):
        Clock(min_speed=2.0, max_speed=1.0)


def test_advance_scales_by_speed():
    clock = Clock()
    clock.set_speed(2.0)
    scaled = clock.advance(0.5)
    assert scaled == 1.0
    assert clock.elapsed == 1.0
    assert clock.tick_number == 1


def test_set_speed_clamps():
    clock = Clock(min_speed=0.5, max_speed=5.0)
    assert clock.set_speed(10.0) == 5.0
    assert clock.set_speed(0.1) == 0.5
    assert clock.set_speed(2.5) == 2.5


def test_pause_and_resume():
    clock = Clock()
    clock.pause()
    assert clock.paused
    clock.resume()
    assert not clock.paused


def test_context_values():
    clock = Clock()
    clock.advance(0.25)
    rng = random.Random(0)
    ctx = clock.context(0.25, rng)
    assert isinstance(ctx, TickContext)
    assert ctx.tick_number == 1
    assert ctx.dt == 0.25
    assert ctx.elapsed == 0.25
    assert ctx.random is rng

    with pytest.raises(AttributeError):
        ctx.dt = 1.0  # type: ignore[misc]


def test_reset_keeps_speed_and_pause():
    clock = Clock()
    clock.set_speed(3.0)
    clock.pause()
    clock.advance(1.0)
    clock.reset()
    assert clock.tick_number == 0
    assert clock.elapsed == 0.0
    assert clock.speed == 3.0
    assert clock.paused

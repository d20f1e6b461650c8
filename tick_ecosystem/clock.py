"""Simulation clock and TickContext for variable-timestep ticks."""

import random

from tick_ecosystem.types import TickContext


class Clock:
    def __init__(self, min_speed: float = 0.5, max_speed: float = 5.0) -> None:
        if min_speed <= 0 or max_speed < min_speed:
            raise ValueError("speed bounds must satisfy 0 < min_speed <= max_speed")
        self._min_speed = min_speed
        self._max_speed = max_speed
        self._speed = 1.0
        self._paused = False
        self._tick_number = 0
        self._elapsed = 0.0

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def speed(self) -> float:
        return self._speed

    @property
    def paused(self) -> bool:
        return self._paused

    def set_speed(self, multiplier: float) -> float:
        self._speed = min(self._max_speed, max(self._min_speed, multiplier))
        return self._speed

    def pause(self) -> None:
        self._paused = True

    def resume(self) -> None:
        self._paused = False

    def advance(self, dt: float) -> float:
        """Advance by *dt* real time units; returns the speed-scaled dt."""
        scaled = dt * self._speed
        self._tick_number += 1
        self._elapsed += scaled
        return scaled

    def context(self, dt: float, rng: random.Random) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt=dt,
            elapsed=self._elapsed,
            random=rng,
        )

    def reset(self) -> None:
        self._tick_number = 0
        self._elapsed = 0.0

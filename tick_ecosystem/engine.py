"""Engine - fixed-timestep driver, pacing, and lifecycle hooks."""

import time
from typing import Callable

from tick_ecosystem.world import World

Hook = Callable[[World], None]


class Engine:
    def __init__(self, world: World, tps: int = 60) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._world = world
        self._tps = tps
        self._dt = 1.0 / tps
        self._start_hooks: list[Hook] = []
        self._stop_hooks: list[Hook] = []
        self._tick_hooks: list[Hook] = []
        self._stop_requested: bool = False

    @property
    def world(self) -> World:
        return self._world

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    def on_start(self, hook: Hook) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Hook) -> None:
        self._stop_hooks.append(hook)

    def on_tick(self, hook: Hook) -> None:
        self._tick_hooks.append(hook)

    def request_stop(self) -> None:
        self._stop_requested = True

    def _tick(self) -> None:
        self._world.tick(self._dt)
        for hook in self._tick_hooks:
            hook(self._world)

    def step(self) -> None:
        self._stop_requested = False
        self._tick()

    def run(self, n: int) -> None:
        self._stop_requested = False
        for hook in self._start_hooks:
            hook(self._world)

        for _ in range(n):
            self._tick()
            if self._stop_requested:
                break

        for hook in self._stop_hooks:
            hook(self._world)

    def run_forever(self) -> None:
        self._stop_requested = False
        for hook in self._start_hooks:
            hook(self._world)

        dt = self._dt
        while not self._stop_requested:
            start = time.monotonic()
            self._tick()
            if self._stop_requested:
                break
            elapsed = time.monotonic() - start
            sleep_time = dt - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)

        for hook in self._stop_hooks:
            hook(self._world)

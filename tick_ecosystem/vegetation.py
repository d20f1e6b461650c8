"""Stationary, regrowing food."""
from __future__ import annotations

import random

from tick_ecosystem.vec import Vec

MAX_ENERGY = 50.0
GROWTH_RATE = 0.05


class Vegetation:
    __slots__ = ("position", "energy")

    def __init__(self, position: Vec, energy: float) -> None:
        self.position = position
        self.energy = min(max(energy, 0.0), MAX_ENERGY)

    @classmethod
    def sprout(cls, position: Vec, rng: random.Random) -> Vegetation:
        """Create a patch with energy drawn from [20, 50)."""
        return cls(position, 20.0 + rng.random() * 30.0)

    @property
    def max_energy(self) -> float:
        return MAX_ENERGY

    @property
    def size(self) -> float:
        return 3.0 + (self.energy / MAX_ENERGY) * 3.0

    def grow(self, dt: float) -> None:
        if self.energy < MAX_ENERGY:
            self.energy = min(MAX_ENERGY, self.energy + GROWTH_RATE * dt)

    def consume(self, amount: float) -> float:
        """Remove up to *amount* energy and return what was actually taken."""
        consumed = min(self.energy, amount)
        self.energy -= consumed
        return consumed

    def is_depleted(self) -> bool:
        return self.energy <= 0.0

    def __repr__(self) -> str:
        return f"Vegetation(position={self.position!r}, energy={self.energy:.2f})"

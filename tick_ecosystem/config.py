"""World configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from tick_ecosystem.species import CATALOG

_DEFAULT_STOCKING = {"rabbit": 20, "deer": 12, "fox": 8, "wolf": 6, "bear": 4}


def _default_stocking() -> Mapping[str, int]:
    return MappingProxyType(dict(_DEFAULT_STOCKING))


@dataclass(frozen=True)
class WorldConfig:
    """Immutable configuration for a World.

    Attributes:
        width: Plane width; x wraps at 0 and width.
        height: Plane height; y wraps at 0 and height.
        initial_vegetation: Patches planted on every (re)initialization.
        initial_animals: Animals stocked per species on (re)initialization.
        vegetation_cap: No spawning at or above this many patches.
        vegetation_spawn_chance: Per-tick probability of one new patch.
        reproduction_chance: Per-animal, per-tick probability of a mating attempt.
        mating_distance: Partners must be strictly closer than this.
        min_speed: Lower bound for the speed multiplier.
        max_speed: Upper bound for the speed multiplier.
    """

    width: float = 800.0
    height: float = 600.0
    initial_vegetation: int = 150
    initial_animals: Mapping[str, int] = field(default_factory=_default_stocking)
    vegetation_cap: int = 200
    vegetation_spawn_chance: float = 0.05
    reproduction_chance: float = 0.001
    mating_distance: float = 20.0
    min_speed: float = 0.5
    max_speed: float = 5.0

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("width and height must be positive")
        if self.initial_vegetation < 0 or self.vegetation_cap < 0:
            raise ValueError("vegetation counts must be non-negative")
        for chance in (self.vegetation_spawn_chance, self.reproduction_chance):
            if not 0.0 <= chance <= 1.0:
                raise ValueError("probabilities must lie in [0, 1]")
        if not 0.0 < self.min_speed <= self.max_speed:
            raise ValueError("speed bounds must satisfy 0 < min_speed <= max_speed")
        for name, count in self.initial_animals.items():
            if name not in CATALOG:
                raise ValueError(f"Unknown species in initial_animals: {name!r}")
            if count < 0:
                raise ValueError(f"Negative initial count for {name!r}")
        # Freeze a caller-supplied dict so the config stays immutable.
        if not isinstance(self.initial_animals, MappingProxyType):
            object.__setattr__(
                self, "initial_animals", MappingProxyType(dict(self.initial_animals))
            )

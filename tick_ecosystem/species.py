"""Static species catalog shared by every animal."""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from tick_ecosystem.types import Diet, UnknownSpeciesError


@dataclass(frozen=True)
class Species:
    """Per-species constants. Shared by reference, never mutated.

    Attributes:
        name: Catalog key.
        emoji: Display glyph.
        color: RGB display color.
        base_speed: Movement speed before per-animal variation.
        base_size: Body size before per-animal variation.
        base_vision: Search radius before per-animal variation.
        base_reproduction_rate: Higher rates mean shorter cooldowns.
        lifespan: Age (time units) used for juvenile/adult/elder bands.
        reproduction_age: Minimum age before an animal may reproduce.
        diet: Food classes this species looks for.
        can_eat: Names of species this species may prey on.
        trophic_level: Informational rank (1 herbivore .. 3 apex).
    """

    name: str
    emoji: str
    color: tuple[int, int, int]
    base_speed: float
    base_size: float
    base_vision: float
    base_reproduction_rate: float
    lifespan: float
    reproduction_age: float
    diet: frozenset[Diet]
    can_eat: frozenset[str] = frozenset()
    trophic_level: int = 1

    def eats_vegetation(self) -> bool:
        return Diet.VEGETATION in self.diet

    def eats_animals(self) -> bool:
        return Diet.ANIMALS in self.diet

    def preys_on(self, other: Species) -> bool:
        return other.name in self.can_eat


RABBIT = Species(
    name="rabbit", emoji="\U0001F430", color=(210, 105, 30),
    base_speed=60, base_size=8, base_vision=100, base_reproduction_rate=1.5,
    lifespan=80, reproduction_age=15,
    diet=frozenset({Diet.VEGETATION}), trophic_level=1,
)
DEER = Species(
    name="deer", emoji="\U0001F98C", color=(139, 69, 19),
    base_speed=50, base_size=14, base_vision=150, base_reproduction_rate=0.8,
    lifespan=120, reproduction_age=25,
    diet=frozenset({Diet.VEGETATION}), trophic_level=1,
)
FOX = Species(
    name="fox", emoji="\U0001F98A", color=(255, 99, 71),
    base_speed=70, base_size=10, base_vision=120, base_reproduction_rate=1.0,
    lifespan=100, reproduction_age=20,
    diet=frozenset({Diet.ANIMALS}), can_eat=frozenset({"rabbit"}),
    trophic_level=2,
)
WOLF = Species(
    name="wolf", emoji="\U0001F43A", color=(112, 128, 144),
    base_speed=65, base_size=13, base_vision=140, base_reproduction_rate=0.7,
    lifespan=110, reproduction_age=25,
    diet=frozenset({Diet.ANIMALS}), can_eat=frozenset({"rabbit", "deer"}),
    trophic_level=2,
)
BEAR = Species(
    name="bear", emoji="\U0001F43B", color=(101, 67, 33),
    base_speed=55, base_size=18, base_vision=130, base_reproduction_rate=0.5,
    lifespan=140, reproduction_age=30,
    diet=frozenset({Diet.ANIMALS}),
    can_eat=frozenset({"rabbit", "deer", "fox", "wolf"}),
    trophic_level=3,
)

CATALOG: Mapping[str, Species] = MappingProxyType(
    {sp.name: sp for sp in (RABBIT, DEER, FOX, WOLF, BEAR)}
)


def get_species(name: str) -> Species:
    try:
        return CATALOG[name]
    except KeyError:
        raise UnknownSpeciesError(name) from None

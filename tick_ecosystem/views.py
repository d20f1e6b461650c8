"""Read-only snapshots of world state for renderers and HUDs."""
from __future__ import annotations

from dataclasses import dataclass

from tick_ecosystem.animal import Animal
from tick_ecosystem.types import Behavior, EntityId, Gender
from tick_ecosystem.vec import Vec
from tick_ecosystem.vegetation import Vegetation


@dataclass(frozen=True, slots=True)
class AnimalView:
    entity_id: EntityId
    species: str
    emoji: str
    color: tuple[int, int, int]
    gender: Gender
    position: Vec
    size: float
    angle: float
    vision: float
    health: float
    max_health: float
    hunger: float
    max_hunger: float
    behavior: Behavior
    has_target: bool
    trail: tuple[Vec, ...]

    @classmethod
    def of(cls, eid: EntityId, animal: Animal) -> AnimalView:
        sp = animal.species
        return cls(
            entity_id=eid,
            species=sp.name,
            emoji=sp.emoji,
            color=sp.color,
            gender=animal.gender,
            position=animal.position,
            size=animal.size,
            angle=animal.angle,
            vision=animal.traits.vision,
            health=animal.health,
            max_health=animal.max_health,
            hunger=animal.hunger,
            max_hunger=animal.max_hunger,
            behavior=animal.behavior,
            has_target=animal.target is not None,
            trail=tuple(animal.trail),
        )


@dataclass(frozen=True, slots=True)
class VegetationView:
    entity_id: EntityId
    position: Vec
    size: float
    energy: float
    max_energy: float

    @classmethod
    def of(cls, eid: EntityId, veg: Vegetation) -> VegetationView:
        return cls(
            entity_id=eid,
            position=veg.position,
            size=veg.size,
            energy=veg.energy,
            max_energy=veg.max_energy,
        )


@dataclass(frozen=True, slots=True)
class SpeciesStats:
    total: int
    males: int
    females: int
    emoji: str
    color: tuple[int, int, int]

"""tick-ecosystem - A predator/prey/vegetation simulation on a toroidal plane."""

from tick_ecosystem import vec
from tick_ecosystem.animal import Animal, Traits
from tick_ecosystem.clock import Clock
from tick_ecosystem.config import WorldConfig
from tick_ecosystem.engine import Engine
from tick_ecosystem.species import CATALOG, Species, get_species
from tick_ecosystem.types import (
    Behavior,
    DeadEntityError,
    Diet,
    EntityId,
    Gender,
    Target,
    TargetKind,
    TickContext,
    UnknownSpeciesError,
)
from tick_ecosystem.vegetation import Vegetation
from tick_ecosystem.views import AnimalView, SpeciesStats, VegetationView
from tick_ecosystem.world import World

__all__ = [
    "Animal",
    "AnimalView",
    "Behavior",
    "CATALOG",
    "Clock",
    "DeadEntityError",
    "Diet",
    "Engine",
    "EntityId",
    "Gender",
    "Species",
    "SpeciesStats",
    "Target",
    "TargetKind",
    "TickContext",
    "Traits",
    "UnknownSpeciesError",
    "Vegetation",
    "VegetationView",
    "World",
    "WorldConfig",
    "get_species",
    "vec",
]

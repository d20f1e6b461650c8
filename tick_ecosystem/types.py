"""Shared type aliases, enums and errors for the ecosystem simulation."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from enum import Enum

EntityId = int


class Gender(Enum):
    MALE = "male"
    FEMALE = "female"


class Behavior(Enum):
    """High-level intent of an animal, used for decisions and display."""

    WANDERING = "wandering"
    HUNTING = "hunting"
    EATING = "eating"
    SEEKING_MATE = "seeking_mate"


class Diet(Enum):
    VEGETATION = "vegetation"
    ANIMALS = "animals"


class TargetKind(Enum):
    ANIMAL = "animal"
    VEGETATION = "vegetation"


@dataclass(frozen=True, slots=True)
class Target:
    """Lookup handle to an entity owned by the world.

    Resolve through ``World.resolve``; a handle to a removed entity
    resolves to ``None``.
    """

    kind: TargetKind
    entity_id: EntityId


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float
    random: _random.Random


class DeadEntityError(KeyError):
    """Raised when operating on an entity that is not alive."""

    def __init__(self, entity_id: int, message: str) -> None:
        self.entity_id = entity_id
        super().__init__(message)


class UnknownSpeciesError(KeyError):
    """Raised when a species name is not in the catalog."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown species {name!r}")

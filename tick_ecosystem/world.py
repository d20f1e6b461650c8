"""World - owns the populations and drives the per-tick update."""

from __future__ import annotations

import logging
import os
import random
from typing import Generator

from tick_ecosystem import vec
from tick_ecosystem.animal import HUNGRY_THRESHOLD, Animal
from tick_ecosystem.clock import Clock
from tick_ecosystem.config import WorldConfig
from tick_ecosystem.species import CATALOG, Species, get_species
from tick_ecosystem.types import (
    Behavior,
    DeadEntityError,
    EntityId,
    Gender,
    Target,
    TargetKind,
    TickContext,
)
from tick_ecosystem.vec import Vec
from tick_ecosystem.vegetation import Vegetation
from tick_ecosystem.views import AnimalView, SpeciesStats, VegetationView

logger = logging.getLogger(__name__)


class World:
    def __init__(
        self,
        config: WorldConfig | None = None,
        seed: int | None = None,
        populate: bool = True,
    ) -> None:
        self._config = config if config is not None else WorldConfig()
        self._clock = Clock(self._config.min_speed, self._config.max_speed)
        self._animals: dict[EntityId, Animal] = {}
        self._vegetation: dict[EntityId, Vegetation] = {}
        self._next_id: int = 0
        self._enabled: dict[str, bool] = {name: True for name in CATALOG}
        self._in_tick = False

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

        if populate:
            self._initialize()

    # -- Properties --

    @property
    def config(self) -> WorldConfig:
        return self._config

    @property
    def width(self) -> float:
        return self._config.width

    @property
    def height(self) -> float:
        return self._config.height

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def time(self) -> float:
        return self._clock.elapsed

    @property
    def speed(self) -> float:
        return self._clock.speed

    @property
    def paused(self) -> bool:
        return self._clock.paused

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def rng(self) -> random.Random:
        return self._rng

    @property
    def animal_count(self) -> int:
        return len(self._animals)

    @property
    def vegetation_count(self) -> int:
        return len(self._vegetation)

    # -- Population management --

    def _new_id(self) -> EntityId:
        eid = self._next_id
        self._next_id += 1
        return eid

    def add_animal(self, animal: Animal) -> EntityId:
        eid = self._new_id()
        self._animals[eid] = animal
        return eid

    def add_vegetation(self, veg: Vegetation) -> EntityId:
        eid = self._new_id()
        self._vegetation[eid] = veg
        return eid

    def remove_animal(self, entity_id: EntityId) -> None:
        self._animals.pop(entity_id, None)

    def remove_vegetation(self, entity_id: EntityId) -> None:
        self._vegetation.pop(entity_id, None)

    def spawn_animal(
        self, species: Species, position: Vec, gender: Gender | None = None
    ) -> EntityId:
        return self.add_animal(Animal(species, position, self._rng, gender))

    def spawn_animals(self, species: Species, count: int) -> list[EntityId]:
        return [self.spawn_animal(species, self._random_position()) for _ in range(count)]

    def spawn_vegetation(self, position: Vec | None = None) -> EntityId:
        if position is None:
            position = self._random_position()
        return self.add_vegetation(Vegetation.sprout(position, self._rng))

    def _random_position(self) -> Vec:
        return (self._rng.random() * self.width, self._rng.random() * self.height)

    # -- Lookup --

    def animals(self) -> Generator[tuple[EntityId, Animal], None, None]:
        yield from self._animals.items()

    def vegetation(self) -> Generator[tuple[EntityId, Vegetation], None, None]:
        yield from self._vegetation.items()

    def alive(self, entity_id: EntityId) -> bool:
        return entity_id in self._animals or entity_id in self._vegetation

    def get_animal(self, entity_id: EntityId) -> Animal:
        try:
            return self._animals[entity_id]
        except KeyError:
            raise DeadEntityError(
                entity_id, f"Animal {entity_id} is not alive"
            ) from None

    def get_vegetation(self, entity_id: EntityId) -> Vegetation:
        try:
            return self._vegetation[entity_id]
        except KeyError:
            raise DeadEntityError(
                entity_id, f"Vegetation {entity_id} is not alive"
            ) from None

    def resolve(self, target: Target) -> Animal | Vegetation | None:
        """Look up the entity behind *target*, or None if it has been removed."""
        if target.kind is TargetKind.ANIMAL:
            return self._animals.get(target.entity_id)
        return self._vegetation.get(target.entity_id)

    # -- Controls --

    def pause(self) -> None:
        self._clock.pause()

    def resume(self) -> None:
        self._clock.resume()

    def toggle_pause(self) -> bool:
        if self._clock.paused:
            self._clock.resume()
        else:
            self._clock.pause()
        return self._clock.paused

    def set_speed(self, multiplier: float) -> float:
        return self._clock.set_speed(multiplier)

    def adjust_speed(self, delta: float) -> float:
        return self._clock.set_speed(self._clock.speed + delta)

    def toggle_species(self, name: str, enabled: bool) -> None:
        """Enable or disable stocking of *name*; applies on the next reset()."""
        get_species(name)
        self._enabled[name] = enabled

    def species_enabled(self, name: str) -> bool:
        get_species(name)
        return self._enabled[name]

    def reset(self) -> None:
        self._animals.clear()
        self._vegetation.clear()
        self._clock.reset()
        self._initialize()
        logger.info(
            "World reset: %d animals, %d vegetation",
            len(self._animals), len(self._vegetation),
        )

    def _initialize(self) -> None:
        for _ in range(self._config.initial_vegetation):
            self.spawn_vegetation()
        for name, count in self._config.initial_animals.items():
            if self._enabled[name]:
                self.spawn_animals(CATALOG[name], count)

    # -- Tick --

    def tick(self, dt: float) -> None:
        if self._clock.paused:
            return
        if self._in_tick:
            raise RuntimeError("World.tick() is not re-entrant")
        self._in_tick = True
        try:
            self._tick(dt)
        finally:
            self._in_tick = False

    def _tick(self, dt: float) -> None:
        scaled = self._clock.advance(dt)
        ctx = self._clock.context(scaled, self._rng)

        # Newest first; ids removed earlier in this sweep are skipped and
        # offspring born during it wait for the next tick.
        for eid in reversed(list(self._animals)):
            animal = self._animals.get(eid)
            if animal is None:
                continue
            animal.update(self, ctx)
            self._resolve_feeding(eid, animal)
            self._resolve_reproduction(eid, animal, ctx)
            if animal.is_dead():
                logger.debug("%s %d died at age %.1f", animal.species.name, eid, animal.age)
                self.remove_animal(eid)

        for veg in self._vegetation.values():
            veg.grow(scaled)

        if (
            len(self._vegetation) < self._config.vegetation_cap
            and self._rng.random() < self._config.vegetation_spawn_chance
        ):
            self.spawn_vegetation()

    def _resolve_feeding(self, eid: EntityId, animal: Animal) -> None:
        target = animal.target
        if target is None or animal.hunger <= HUNGRY_THRESHOLD:
            return
        food = self.resolve(target)
        if food is None:
            animal.target = None
            return
        if target.kind is TargetKind.ANIMAL and not animal.can_eat(food):
            return
        if not animal.try_eat(target, self):
            return

        if target.kind is TargetKind.VEGETATION:
            self.remove_vegetation(target.entity_id)
        else:
            self.remove_animal(target.entity_id)
        logger.debug(
            "%s %d ate %s %d", animal.species.name, eid,
            target.kind.value, target.entity_id,
        )
        animal.behavior = Behavior.WANDERING
        animal.target = None

    def _resolve_reproduction(
        self, eid: EntityId, animal: Animal, ctx: TickContext
    ) -> None:
        rng = ctx.random
        if not (
            animal.can_reproduce(rng)
            and rng.random() < self._config.reproduction_chance
        ):
            return
        found = animal.find_mate(self, rng)
        if found is None:
            return
        mate = self._animals.get(found.entity_id)
        if mate is None or vec.distance(animal.position, mate.position) >= self._config.mating_distance:
            return
        offspring = animal.reproduce(mate, rng)
        if offspring is None:
            return
        offspring.inherit_traits(animal, mate, rng)
        child = self.add_animal(offspring)
        logger.debug(
            "%s %d and %d produced %d", animal.species.name, eid, found.entity_id, child,
        )

    # -- Read-only views --

    def statistics(self) -> dict[str, SpeciesStats]:
        counts = {name: [0, 0] for name in CATALOG}
        for animal in self._animals.values():
            bucket = counts[animal.species.name]
            if animal.gender is Gender.MALE:
                bucket[0] += 1
            else:
                bucket[1] += 1
        return {
            name: SpeciesStats(
                total=males + females,
                males=males,
                females=females,
                emoji=CATALOG[name].emoji,
                color=CATALOG[name].color,
            )
            for name, (males, females) in counts.items()
        }

    def animal_views(self) -> list[AnimalView]:
        return [AnimalView.of(eid, a) for eid, a in self._animals.items()]

    def vegetation_views(self) -> list[VegetationView]:
        return [VegetationView.of(eid, v) for eid, v in self._vegetation.items()]

"""Animal agents: traits, per-tick decisions, feeding and reproduction."""
from __future__ import annotations

import math
import random
from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING

from tick_ecosystem import vec
from tick_ecosystem.species import Species
from tick_ecosystem.types import Behavior, Gender, Target, TargetKind, TickContext
from tick_ecosystem.vec import Vec

if TYPE_CHECKING:
    from tick_ecosystem.world import World

MAX_HEALTH = 100.0
MAX_HUNGER = 100.0
TRAIL_LENGTH = 10

HUNGRY_THRESHOLD = 50.0
STARVING_THRESHOLD = 80.0
BREEDING_HUNGER_LIMIT = 60.0
BREEDING_HEALTH_MIN = 50.0

JUVENILE_AGE = 0.3
ELDER_AGE = 0.7

MATE_SEARCH_CHANCE = 0.3
ELDER_BREEDING_CHANCE = 0.3
WANDER_CHANCE = 0.02

EAT_REACH = 5.0
VEGETATION_BITE = 30.0
PREY_HUNGER_RELIEF = 40.0
PREY_HEAL = 20.0
MUTATION_RATE = 0.1


@dataclass
class Traits:
    """The four inheritable per-animal attributes."""

    speed: float
    size: float
    vision: float
    reproduction_rate: float

    @classmethod
    def around(cls, species: Species, rng: random.Random) -> Traits:
        """Randomize each trait in a band around the species baseline."""
        return cls(
            speed=species.base_speed * (0.8 + rng.random() * 0.4),
            size=species.base_size * (0.9 + rng.random() * 0.2),
            vision=species.base_vision * (0.85 + rng.random() * 0.3),
            reproduction_rate=species.base_reproduction_rate * (0.9 + rng.random() * 0.2),
        )


def mutate(value: float, rate: float, rng: random.Random) -> float:
    """Perturb *value* by up to +/- rate/2 of itself."""
    return value * (1 + (rng.random() - 0.5) * rate)


class Animal:
    def __init__(
        self,
        species: Species,
        position: Vec,
        rng: random.Random,
        gender: Gender | None = None,
    ) -> None:
        self.species = species
        self.position = position
        self.velocity: Vec = vec.ZERO
        if gender is None:
            gender = Gender.MALE if rng.random() > 0.5 else Gender.FEMALE
        self.gender = gender

        self.traits = Traits.around(species, rng)

        self.health = MAX_HEALTH
        self.age = 0.0
        self.hunger = 0.0
        self.reproduction_cooldown = 0.0
        self.reproduction_ready = species.reproduction_age

        self.size = self.traits.size
        self.angle = rng.random() * math.pi * 2
        self.trail: deque[Vec] = deque(maxlen=TRAIL_LENGTH)

        self.behavior = Behavior.WANDERING
        self.target: Target | None = None

    def __repr__(self) -> str:
        return (
            f"Animal({self.species.name}, {self.gender.value}, "
            f"health={self.health:.1f}, hunger={self.hunger:.1f}, "
            f"behavior={self.behavior.value})"
        )

    @property
    def max_health(self) -> float:
        return MAX_HEALTH

    @property
    def max_hunger(self) -> float:
        return MAX_HUNGER

    @property
    def age_ratio(self) -> float:
        return self.age / self.species.lifespan

    def is_juvenile(self) -> bool:
        return self.age_ratio < JUVENILE_AGE

    def is_elder(self) -> bool:
        return self.age_ratio > ELDER_AGE

    # -- Inheritance --

    def inherit_traits(self, parent1: Animal, parent2: Animal, rng: random.Random) -> None:
        p1, p2 = parent1.traits, parent2.traits
        self.traits = Traits(
            speed=mutate((p1.speed + p2.speed) / 2, MUTATION_RATE, rng),
            size=mutate((p1.size + p2.size) / 2, MUTATION_RATE, rng),
            vision=mutate((p1.vision + p2.vision) / 2, MUTATION_RATE, rng),
            reproduction_rate=mutate(
                (p1.reproduction_rate + p2.reproduction_rate) / 2, MUTATION_RATE, rng
            ),
        )
        self.size = self.traits.size

    # -- Per-tick update --

    def update(self, world: World, ctx: TickContext) -> None:
        dt = ctx.dt
        rng = ctx.random
        self._metabolize(dt)

        if self.behavior is Behavior.EATING and self._meal_over(world):
            self.behavior = Behavior.WANDERING
            self.target = None

        if self.behavior is not Behavior.EATING:
            target, behavior = self.find_target(world, rng)
            self.target = target
            destination = world.resolve(target) if target is not None else None
            if destination is not None:
                self.behavior = behavior
                self.move_towards(destination.position)
            else:
                self.target = None
                self.behavior = Behavior.WANDERING
                self.wander(rng)

        self._integrate(world.width, world.height, dt)
        self.angle = vec.heading(self.velocity)

    def _metabolize(self, dt: float) -> None:
        self.age += dt

        # Juveniles get hungry fastest, elders slowest.
        if self.is_juvenile():
            hunger_multiplier = 1.5
        elif self.age_ratio < ELDER_AGE:
            hunger_multiplier = 1.0
        else:
            hunger_multiplier = 0.7
        self.hunger += dt * 0.5 * hunger_multiplier

        self.reproduction_cooldown = max(0.0, self.reproduction_cooldown - dt)

        # Smaller bodies decay faster.
        size_decay = 0.3 / (self.traits.size / 10)
        if self.is_juvenile():
            age_multiplier = 0.5
        elif self.is_elder():
            age_multiplier = 2.0
        else:
            age_multiplier = 1.0
        self.health -= dt * size_decay * age_multiplier

        if self.hunger > STARVING_THRESHOLD:
            self.health -= dt * 2

    def _meal_over(self, world: World) -> bool:
        """An eating animal stops once sated, out of reach, or its food is gone."""
        if self.target is None or self.hunger <= HUNGRY_THRESHOLD:
            return True
        food = world.resolve(self.target)
        if food is None:
            return True
        return not self.in_reach(food.position)

    def _integrate(self, width: float, height: float, dt: float) -> None:
        x, y = vec.add(self.position, vec.scale(self.velocity, dt))

        wrapped = False
        if x < 0:
            x = width
            wrapped = True
        elif x > width:
            x = 0.0
            wrapped = True
        if y < 0:
            y = height
            wrapped = True
        elif y > height:
            y = 0.0
            wrapped = True

        self.position = (x, y)
        if wrapped:
            # No trail segment may span the wrap.
            self.trail.clear()
        self.trail.append(self.position)

    # -- Decisions --

    def find_target(
        self, world: World, rng: random.Random
    ) -> tuple[Target | None, Behavior]:
        if self.hunger > HUNGRY_THRESHOLD:
            return self.find_food(world), Behavior.HUNTING
        if self.can_reproduce(rng) and rng.random() < MATE_SEARCH_CHANCE:
            return self.find_mate(world, rng), Behavior.SEEKING_MATE
        return None, Behavior.WANDERING

    def find_food(self, world: World) -> Target | None:
        closest: Target | None = None
        closest_distance = self.traits.vision

        if self.species.eats_vegetation():
            for eid, veg in world.vegetation():
                d = vec.distance(self.position, veg.position)
                if d < closest_distance:
                    closest_distance = d
                    closest = Target(TargetKind.VEGETATION, eid)

        if self.species.eats_animals():
            for eid, other in world.animals():
                if other is self or not self.can_eat(other):
                    continue
                d = vec.distance(self.position, other.position)
                if d < closest_distance:
                    closest_distance = d
                    closest = Target(TargetKind.ANIMAL, eid)

        return closest

    def can_eat(self, other: Animal) -> bool:
        return self.species.preys_on(other.species)

    def find_mate(self, world: World, rng: random.Random) -> Target | None:
        closest: Target | None = None
        closest_distance = self.traits.vision

        for eid, other in world.animals():
            if (
                other is self
                or other.species.name != self.species.name
                or other.gender is self.gender
                or not other.can_reproduce(rng)
            ):
                continue
            d = vec.distance(self.position, other.position)
            if d < closest_distance:
                closest_distance = d
                closest = Target(TargetKind.ANIMAL, eid)

        return closest

    def move_towards(self, destination: Vec) -> None:
        direction = vec.normalize(vec.sub(destination, self.position))
        self.velocity = vec.scale(direction, self.traits.speed)

    def wander(self, rng: random.Random) -> None:
        if rng.random() < WANDER_CHANCE:
            angle = rng.random() * math.pi * 2
            self.velocity = vec.from_angle(angle, self.traits.speed * 0.5)

    # -- Interactions --

    def in_reach(self, position: Vec) -> bool:
        return vec.distance(self.position, position) < self.size + EAT_REACH

    def try_eat(self, target: Target, world: World) -> bool:
        """Eat *target* if it is alive and within reach.

        Returns True when the target should be removed from the world:
        vegetation that is now depleted, or prey that was killed.
        """
        food = world.resolve(target)
        if food is None or not self.in_reach(food.position):
            return False

        self.behavior = Behavior.EATING
        self.target = target

        if target.kind is TargetKind.VEGETATION:
            energy = food.consume(VEGETATION_BITE)
            self.hunger = max(0.0, self.hunger - energy)
            self.health = min(MAX_HEALTH, self.health + energy * 0.5)
            return food.is_depleted()

        food.health = 0.0
        self.hunger = max(0.0, self.hunger - PREY_HUNGER_RELIEF)
        self.health = min(MAX_HEALTH, self.health + PREY_HEAL)
        return True

    def can_reproduce(self, rng: random.Random) -> bool:
        if (
            self.age <= self.reproduction_ready
            or self.reproduction_cooldown > 0
            or self.health < BREEDING_HEALTH_MIN
            or self.hunger > BREEDING_HUNGER_LIMIT
        ):
            return False
        if self.is_elder():
            return rng.random() < ELDER_BREEDING_CHANCE
        return True

    def reproduce(self, partner: Animal, rng: random.Random) -> Animal | None:
        """Start a pregnancy with *partner*; the caller applies inherit_traits."""
        if not (self.can_reproduce(rng) and partner.can_reproduce(rng)):
            return None
        self.reproduction_cooldown = 100 / self.traits.reproduction_rate
        partner.reproduction_cooldown = 100 / partner.traits.reproduction_rate
        return Animal(self.species, vec.midpoint(self.position, partner.position), rng)

    def is_dead(self) -> bool:
        return self.health <= 0

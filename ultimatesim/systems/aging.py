"""Yearly aging of NPCs and settlement citizens with health decay and sudden death."""

from __future__ import annotations

from ultimatesim.components import (
    GenomeComponent,
    Identity,
    Needs,
    PopulationComponent,
    RuinComponent,
    Village,
)
from ultimatesim.engine.ecs import World
from ultimatesim.engine.rng import get_random_float32

TICKS_PER_YEAR = 360
HEALTH_DECAY_AGE = 50
SUDDEN_DEATH_AGE = 80

_UINT16_MASK = 0xFFFF


def _death_chance(age: int) -> float:
    """5% at the first year past SUDDEN_DEATH_AGE baseline, +1% per year."""
    return (age - SUDDEN_DEATH_AGE) * 0.01 + 0.05


class AgingSystem:
    """Ages entities once per year of TICKS_PER_YEAR ticks.

    Health drops by one per year past 50; past 80 a death roll is made, which
    starves NPCs (food set to 0) or removes citizens from their settlement.
    """

    def __init__(self, world: World) -> None:
        self.tick_counter = 0

    def update(self, world: World) -> None:
        self.tick_counter += 1
        if self.tick_counter % TICKS_PER_YEAR != 0:
            return

        for entity in world.query(Identity, GenomeComponent, Needs, without=(RuinComponent,)):
            identity = world.get(entity, Identity)
            genome = world.get(entity, GenomeComponent)
            identity.age = (identity.age + 1) & _UINT16_MASK

            if identity.age > HEALTH_DECAY_AGE and genome.health > 0:
                genome.health -= 1

            if identity.age > SUDDEN_DEATH_AGE:
                if get_random_float32() < _death_chance(identity.age):
                    world.get(entity, Needs).food = 0

        for entity in world.query(PopulationComponent, Village, without=(RuinComponent,)):
            pop = world.get(entity, PopulationComponent)
            if not pop.citizens:
                continue

            survivors = []
            for citizen in pop.citizens:
                citizen.age = (citizen.age + 1) & _UINT16_MASK
                if citizen.age > HEALTH_DECAY_AGE and citizen.genetics.health > 0:
                    citizen.genetics.health -= 1

                if citizen.age > SUDDEN_DEATH_AGE and get_random_float32() < _death_chance(
                    citizen.age
                ):
                    if pop.count > 0:
                        pop.count -= 1
                    continue
                survivors.append(citizen)

            pop.citizens = survivors
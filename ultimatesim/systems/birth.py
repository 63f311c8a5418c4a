"""Settlements with surplus food produce new citizens with inherited genetics."""

from __future__ import annotations

from ultimatesim.components import (
    CitizenData,
    GenomeComponent,
    Identity,
    PopulationComponent,
    RuinComponent,
    StorageComponent,
)
from ultimatesim.engine.ecs import World
from ultimatesim.engine.rng import get_random_int

BIRTH_FOOD_COST = 50
INBREEDING_BIT_THRESHOLD = 5

_UINT32_MASK = 0xFFFFFFFF


def _trunc_div(value: int, divisor: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(value) // divisor
    return -quotient if value < 0 else quotient


def _trunc_mod(value: int, divisor: int) -> int:
    """Remainder whose sign follows the dividend."""
    remainder = abs(value) % divisor
    return -remainder if value < 0 else remainder


def clamp_genetics(total: int, mutation_roll: int) -> int:
    """Average two parent values, apply a -5..+5 mutation and clamp to 0-255."""
    value = _trunc_div(total, 2) + _trunc_mod(mutation_roll, 11) - 5
    return max(0, min(255, value))


def _mix_bits(first: int, second: int, mask: int) -> int:
    """Take bits of first where mask is set and bits of second elsewhere."""
    return (first & mask) | (second & ~mask & _UINT32_MASK)


class BirthSystem:
    """Converts BIRTH_FOOD_COST stored food into one new citizen per settlement per tick.

    Parents are the settlement's founding genome until two citizens exist, then
    two randomly chosen citizens. Children of near-identical dominant genes
    have their health halved.
    """

    def __init__(self, world: World) -> None:
        pass

    def update(self, world: World) -> None:
        for entity in world.query(
            StorageComponent,
            PopulationComponent,
            GenomeComponent,
            Identity,
            without=(RuinComponent,),
        ):
            storage = world.get(entity, StorageComponent)
            if storage.food < BIRTH_FOOD_COST:
                continue

            pop = world.get(entity, PopulationComponent)
            storage.food -= BIRTH_FOOD_COST
            pop.count += 1

            if len(pop.citizens) < 2:
                genome = world.get(entity, GenomeComponent)
                traits = world.get(entity, Identity).base_traits
                p1_gen, p2_gen = genome, genome
                p1_traits, p2_traits = traits, traits
            else:
                first = pop.citizens[get_random_int() % len(pop.citizens)]
                second = pop.citizens[get_random_int() % len(pop.citizens)]
                p1_gen, p2_gen = first.genetics, second.genetics
                p1_traits, p2_traits = first.base_traits, second.base_traits

            dom_mask = get_random_int() & _UINT32_MASK
            rec_mask = get_random_int() & _UINT32_MASK

            child = GenomeComponent(
                strength=clamp_genetics(p1_gen.strength + p2_gen.strength, get_random_int()),
                beauty=clamp_genetics(p1_gen.beauty + p2_gen.beauty, get_random_int()),
                health=clamp_genetics(p1_gen.health + p2_gen.health, get_random_int()),
                intellect=clamp_genetics(p1_gen.intellect + p2_gen.intellect, get_random_int()),
                dominant=_mix_bits(p1_gen.dominant, p2_gen.dominant, dom_mask),
                recessive=_mix_bits(p1_gen.recessive, p2_gen.recessive, rec_mask),
            )

            differing_bits = bin((p1_gen.dominant ^ p2_gen.dominant) & _UINT32_MASK).count("1")
            if differing_bits < INBREEDING_BIT_THRESHOLD:
                child.health //= 2

            trait_mask = get_random_int() & _UINT32_MASK
            pop.citizens.append(
                CitizenData(
                    genetics=child,
                    base_traits=_mix_bits(p1_traits, p2_traits, trait_mask),
                    age=0,
                )
            )
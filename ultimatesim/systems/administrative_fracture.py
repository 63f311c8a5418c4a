"""Villages too far from their country's capital leave the country."""

from __future__ import annotations

from dataclasses import dataclass

from ultimatesim.components import (
    Affiliation,
    CapitalComponent,
    CountryComponent,
    JurisdictionComponent,
    Position,
    Village,
)
from ultimatesim.engine.ecs import World

ADMINISTRATIVE_FRACTURE_TICK_RATE = 1000
MAX_ADMINISTRATIVE_RANGE = 150.0


@dataclass(slots=True)
class _Capital:
    pos: Position
    corruption: int


class AdministrativeFractureSystem:
    """Periodically clears the country of villages beyond administrative reach.

    Capital corruption inflates the effective distance by 10% per point.
    """

    def __init__(self, world: World) -> None:
        self.world = world
        self.tick_stamp = 0

    def update(self, world: World) -> None:
        self.tick_stamp += 1
        if self.tick_stamp % ADMINISTRATIVE_FRACTURE_TICK_RATE != 0:
            return

        capitals: dict[int, _Capital] = {}
        for entity in world.query(CapitalComponent, CountryComponent, Position, Affiliation):
            corruption = 0
            if world.has(entity, JurisdictionComponent):
                corruption = world.get(entity, JurisdictionComponent).corruption
            capitals[world.get(entity, Affiliation).country_id] = _Capital(
                pos=world.get(entity, Position), corruption=corruption
            )

        max_dist_sq = MAX_ADMINISTRATIVE_RANGE * MAX_ADMINISTRATIVE_RANGE

        for entity in world.query(Village, Affiliation, Position):
            affil = world.get(entity, Affiliation)
            if affil.country_id == 0:
                continue
            capital = capitals.get(affil.country_id)
            if capital is None:
                affil.country_id = 0
                continue
            pos = world.get(entity, Position)
            dx = pos.x - capital.pos.x
            dy = pos.y - capital.pos.y
            effective = (dx * dx + dy * dy) * (1.0 + capital.corruption * 0.1)
            if effective > max_dist_sq:
                affil.country_id = 0
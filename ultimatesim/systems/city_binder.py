"""Binds wandering NPCs to their nearest village."""

from __future__ import annotations

from dataclasses import dataclass

from ultimatesim.components import NPC, Affiliation, Identity, Position, Village
from ultimatesim.engine.ecs import World

BIND_INTERVAL = 10000

_UINT32_MASK = 0xFFFFFFFF


@dataclass(frozen=True, slots=True)
class _VillageSite:
    x: float
    y: float
    id: int


class CityBinderSystem:
    """Every BIND_INTERVAL ticks, sets each NPC's city to the nearest village.

    On equal distances the earliest village wins.
    """

    def __init__(self, ticks_elapsed: int = 0) -> None:
        self.ticks_elapsed = ticks_elapsed

    def update(self, world: World) -> None:
        self.ticks_elapsed = (self.ticks_elapsed + 1) & _UINT32_MASK
        if self.ticks_elapsed % BIND_INTERVAL != 0:
            return

        villages = []
        for entity in world.query(Position, Village, Identity):
            pos = world.get(entity, Position)
            villages.append(
                _VillageSite(pos.x, pos.y, world.get(entity, Identity).id & _UINT32_MASK)
            )
        if not villages:
            return

        for entity in world.query(Position, Affiliation, NPC):
            pos = world.get(entity, Position)
            nearest = min(
                villages,
                key=lambda v: (v.x - pos.x) * (v.x - pos.x) + (v.y - pos.y) * (v.y - pos.y),
            )
            world.get(entity, Affiliation).city_id = nearest.id
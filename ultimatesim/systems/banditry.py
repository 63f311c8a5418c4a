"""Desperate NPCs turn bandit and rob nearby caravans."""

from __future__ import annotations

from dataclasses import dataclass

from ultimatesim.components import (
    INTERACTION_THEFT,
    JOB_BANDIT,
    JOB_GUARD,
    Caravan,
    CrimeMarker,
    DesperationComponent,
    JobComponent,
    Memory,
    MemoryEvent,
    Needs,
    Payload,
    Position,
)
from ultimatesim.engine.ecs import Entity, World

DESPERATION_THRESHOLD = 50
ROBBERY_RANGE_SQ = 2.0
BANDITRY_BOUNTY = 250


@dataclass(slots=True)
class _CaravanData:
    entity: Entity
    x: float
    y: float
    payload: Payload


class BanditrySystem:
    """Converts desperate non-guards to bandits who rob the nearest caravan in range.

    A robbed caravan is destroyed and the bandit receives a crime marker.
    """

    def __init__(self, world: World) -> None:
        pass

    def update(self, world: World) -> None:
        caravans = [
            _CaravanData(
                entity=entity,
                x=world.get(entity, Position).x,
                y=world.get(entity, Position).y,
                payload=world.get(entity, Payload),
            )
            for entity in world.query(Position, Caravan, Payload)
        ]

        robbed: list[Entity] = []
        bandits: list[Entity] = []

        for npc in world.query(Needs, Position, DesperationComponent, Memory, JobComponent):
            job = world.get(npc, JobComponent)
            desperation = world.get(npc, DesperationComponent)

            if desperation.level >= DESPERATION_THRESHOLD and job.job_id != JOB_GUARD:
                job.job_id = JOB_BANDIT
            if job.job_id != JOB_BANDIT:
                continue

            pos = world.get(npc, Position)
            best: _CaravanData | None = None
            best_dist = 9999999.0
            for caravan in caravans:
                dx = pos.x - caravan.x
                dy = pos.y - caravan.y
                dist_sq = dx * dx + dy * dy
                if dist_sq < best_dist:
                    best_dist = dist_sq
                    best = caravan

            if best is None or best_dist >= ROBBERY_RANGE_SQ:
                continue

            needs = world.get(npc, Needs)
            payload = best.payload
            needs.food += float(payload.food)
            needs.wealth += float(payload.iron + payload.stone + payload.wood)
            desperation.level = 0

            world.get(npc, Memory).record(
                MemoryEvent(
                    target_id=0,
                    tick_stamp=0,
                    interaction_type=INTERACTION_THEFT,
                    value=payload.food,
                )
            )

            robbed.append(best.entity)
            bandits.append(npc)
            caravans.remove(best)

        for entity in robbed:
            if world.alive(entity):
                world.remove_entity(entity)

        for entity in bandits:
            if not world.alive(entity):
                continue
            if not world.has(entity, CrimeMarker):
                world.add(entity, CrimeMarker)
            marker = world.get(entity, CrimeMarker)
            marker.crime_level = 1
            marker.bounty = BANDITRY_BOUNTY
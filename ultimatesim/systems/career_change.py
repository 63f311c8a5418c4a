"""Artisans revert to primary production when food or wood prices spike."""

from __future__ import annotations

from ultimatesim.components import (
    JOB_ARTISAN,
    JOB_FARMER,
    JOB_LUMBERJACK,
    Affiliation,
    Identity,
    JobComponent,
    MarketComponent,
    Village,
)
from ultimatesim.engine.ecs import World

SHORTAGE_PRICE = 10.0

_UINT32_MASK = 0xFFFFFFFF


class CareerChangeSystem:
    """Turns artisans into farmers under a food shortage, else lumberjacks under a wood shortage."""

    def update(self, world: World) -> None:
        markets = {
            world.get(entity, Identity).id & _UINT32_MASK: world.get(entity, MarketComponent)
            for entity in world.query(Village, MarketComponent, Identity)
        }

        for entity in world.query(JobComponent, Affiliation):
            job = world.get(entity, JobComponent)
            if job.job_id != JOB_ARTISAN:
                continue
            market = markets.get(world.get(entity, Affiliation).city_id)
            if market is None:
                continue
            if market.food_price > SHORTAGE_PRICE:
                job.job_id = JOB_FARMER
            elif market.wood_price > SHORTAGE_PRICE:
                job.job_id = JOB_LUMBERJACK
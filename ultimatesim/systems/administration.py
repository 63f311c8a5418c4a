"""Cities with large price disparities propose unions through diplomatic hooks."""

from __future__ import annotations

from dataclasses import dataclass

from ultimatesim.components import (
    Affiliation,
    Identity,
    MarketComponent,
    Position,
    Village,
)
from ultimatesim.engine.ecs import World
from ultimatesim.engine.hooks import SparseHookGraph

ADMINISTRATION_TICK_RATE = 1000
MAX_DIPLOMATIC_RANGE = 100
PRICE_DISPARITY_THRESHOLD = 0.15


@dataclass(slots=True)
class _City:
    id: int
    pos: Position
    market: MarketComponent
    affil: Affiliation


def _price_sum(market: MarketComponent) -> float:
    total = market.food_price + market.wood_price + market.stone_price + market.iron_price
    return max(total, 1.0)


class AdministrationSystem:
    """Every ADMINISTRATION_TICK_RATE ticks, hooks nearby cities whose prices differ by >15%."""

    def __init__(self, world: World, hooks: SparseHookGraph) -> None:
        self.world = world
        self.hooks = hooks
        self.tick_stamp = 0

    def update(self, world: World) -> None:
        self.tick_stamp += 1
        if self.tick_stamp % ADMINISTRATION_TICK_RATE != 0:
            return

        cities = [
            _City(
                id=world.get(entity, Identity).id,
                pos=world.get(entity, Position),
                market=world.get(entity, MarketComponent),
                affil=world.get(entity, Affiliation),
            )
            for entity in world.query(Village, Identity, Position, MarketComponent, Affiliation)
        ]

        max_dist_sq = MAX_DIPLOMATIC_RANGE * MAX_DIPLOMATIC_RANGE
        for i, city_a in enumerate(cities):
            for city_b in cities[i + 1:]:
                country = city_a.affil.country_id
                if country != 0 and country == city_b.affil.country_id:
                    continue

                dx = city_a.pos.x - city_b.pos.x
                dy = city_a.pos.y - city_b.pos.y
                if dx * dx + dy * dy > max_dist_sq:
                    continue

                sum_a = _price_sum(city_a.market)
                sum_b = _price_sum(city_b.market)
                if sum_a > sum_b:
                    ratio = (sum_a - sum_b) / sum_b
                else:
                    ratio = (sum_b - sum_a) / sum_a

                if ratio > PRICE_DISPARITY_THRESHOLD:
                    self.hooks.add_hook(city_a.id, city_b.id, 1)
                    self.hooks.add_hook(city_b.id, city_a.id, 1)
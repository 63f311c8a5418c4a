"""Orders in transit fail when travel time exceeds the target city's loyalty."""

from __future__ import annotations

from ultimatesim.components import (
    Identity,
    LoyaltyComponent,
    OrderComponent,
    OrderEntity,
    Position,
    Village,
)
from ultimatesim.engine.ecs import World

_UINT32_MASK = 0xFFFFFFFF


class AdministrativeDecaySystem:
    """Despawns orders whose age exceeds target loyalty or whose target is gone."""

    def __init__(self) -> None:
        self.tick = 0

    def update(self, world: World) -> None:
        self.tick += 1

        loyalty_by_city = {
            world.get(city, Identity).id & _UINT32_MASK: world.get(city, LoyaltyComponent).value
            for city in world.query(Village, Identity, LoyaltyComponent)
        }

        failed = []
        for entity in world.query(OrderEntity, OrderComponent, Position):
            order = world.get(entity, OrderComponent)
            if self.tick <= order.creation_tick:
                continue
            decay = (self.tick - order.creation_tick) & _UINT32_MASK
            loyalty = loyalty_by_city.get(order.target_city_id)
            if loyalty is None or decay > loyalty:
                failed.append(entity)

        for entity in failed:
            world.remove_entity(entity)
"""Villages facing famine prices send out caravans."""

from __future__ import annotations

from dataclasses import replace

from ultimatesim.components import (
    Caravan,
    MarketComponent,
    Path,
    Payload,
    Position,
    StorageComponent,
    Velocity,
    Village,
)
from ultimatesim.engine.ecs import World

FAMINE_FOOD_PRICE = 10.0
CARAVAN_WOOD_LOAD = 50


class CaravanSpawnerSystem:
    """Spawns a caravan at every village whose food price exceeds FAMINE_FOOD_PRICE.

    The caravan carries CARAVAN_WOOD_LOAD wood when the village holds more than that.
    """

    def update(self, world: World) -> None:
        spawning = [
            entity
            for entity in world.query(Village, StorageComponent, MarketComponent, Position)
            if world.get(entity, MarketComponent).food_price > FAMINE_FOOD_PRICE
        ]

        for village in spawning:
            storage = world.get(village, StorageComponent)
            wood = 0
            if storage.wood > CARAVAN_WOOD_LOAD:
                wood = CARAVAN_WOOD_LOAD
                storage.wood -= CARAVAN_WOOD_LOAD

            world.new_entity(
                Caravan(),
                replace(world.get(village, Position)),
                Velocity(0.0, 0.0),
                Payload(wood=wood),
                Path(nodes=[], has_path=False),
            )
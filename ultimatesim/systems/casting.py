"""Casters spend local mana to heat the ground beneath them."""

from __future__ import annotations

from ultimatesim.components import JOB_CASTER, JobComponent, Position
from ultimatesim.engine.ecs import World
from ultimatesim.engine.map_grid import MapGrid

MANA_COST = 50
TEMPERATURE_SPIKE = 100
MAX_TEMPERATURE = 255


class CastingSystem:
    """Every tick, each caster standing on a tile with enough mana casts once.

    A cast consumes MANA_COST mana and raises the tile temperature by
    TEMPERATURE_SPIKE, capped at MAX_TEMPERATURE.
    """

    def __init__(self, world: World, map_grid: MapGrid) -> None:
        self.map_grid = map_grid

    def update(self, world: World) -> None:
        grid = self.map_grid
        for entity in world.query(Position, JobComponent):
            if world.get(entity, JobComponent).job_id != JOB_CASTER:
                continue

            pos = world.get(entity, Position)
            x, y = int(pos.x), int(pos.y)
            if not (0 <= x < grid.width and 0 <= y < grid.height):
                continue

            idx = grid.index(x, y)
            mana = grid.mana[idx]
            if mana.value < MANA_COST:
                continue

            mana.value -= MANA_COST
            tile = grid.tiles[idx]
            tile.temperature = min(tile.temperature + TEMPERATURE_SPIKE, MAX_TEMPERATURE)
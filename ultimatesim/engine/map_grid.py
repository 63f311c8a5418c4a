"""Flat tile arrays describing the physical world map."""

from __future__ import annotations

from dataclasses import dataclass, field, replace


@dataclass(slots=True)
class TileData:
    """Terrain values of one tile, each 0-255."""

    elevation: int = 0
    moisture: int = 0
    temperature: int = 0
    biome_id: int = 0


@dataclass(slots=True)
class ResourceDepot:
    wood_value: int = 0
    stone_value: int = 0
    iron_value: int = 0
    food_value: int = 0


@dataclass(slots=True)
class TileState:
    """Infrastructure state such as desire-path traffic."""

    foot_traffic: int = 0


@dataclass(slots=True)
class ManaData:
    value: int = 0


@dataclass
class MapGrid:
    """Width x height map stored row-major in parallel lists."""

    width: int
    height: int
    tiles: list[TileData] = field(init=False)
    resources: list[ResourceDepot] = field(init=False)
    tile_states: list[TileState] = field(init=False)
    mana: list[ManaData] = field(init=False)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("map dimensions must be non-negative")
        size = self.width * self.height
        self.tiles = [TileData() for _ in range(size)]
        self.resources = [ResourceDepot() for _ in range(size)]
        self.tile_states = [TileState() for _ in range(size)]
        self.mana = [ManaData() for _ in range(size)]

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def index(self, x: int, y: int) -> int:
        """Flat index of (x, y); raises IndexError outside the map."""
        if not self._in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside the map")
        return y * self.width + x

    def get_tile(self, x: int, y: int) -> TileData:
        """A copy of the tile at (x, y), or an empty tile outside the map."""
        if not self._in_bounds(x, y):
            return TileData()
        return replace(self.tiles[y * self.width + x])

    def set_tile(self, x: int, y: int, tile: TileData) -> None:
        """Store a copy of tile at (x, y); ignored outside the map."""
        if self._in_bounds(x, y):
            self.tiles[y * self.width + x] = replace(tile)
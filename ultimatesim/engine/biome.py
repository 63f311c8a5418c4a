"""Biome classification and terrain movement costs."""

from __future__ import annotations

from enum import IntEnum


class Biome(IntEnum):
    OCEAN = 0
    BEACH = 1
    SCORCHED = 2
    BARE = 3
    TUNDRA = 4
    SNOW = 5
    TEMPERATE_DESERT = 6
    SHRUBLAND = 7
    GRASSLAND = 8
    TEMPERATE_DECIDUOUS_FOREST = 9
    TEMPERATE_RAIN_FOREST = 10
    SUBTROPICAL_DESERT = 11
    TROPICAL_SEASONAL_FOREST = 12
    TROPICAL_RAIN_FOREST = 13
    MOUNTAIN = 14


def determine_biome(elevation: int, moisture: int, temperature: int) -> Biome:
    """Classify a tile from elevation, moisture and temperature (0-255)."""
    if elevation < 85:
        return Biome.OCEAN
    if elevation < 95:
        return Biome.BEACH

    if elevation > 210:
        if temperature < 100:
            return Biome.SNOW
        if moisture < 100:
            return Biome.BARE
        return Biome.MOUNTAIN

    if temperature < 85:
        return Biome.TUNDRA if moisture < 128 else Biome.SNOW

    if temperature < 170:
        if moisture < 85:
            return Biome.TEMPERATE_DESERT
        if moisture < 140:
            return Biome.GRASSLAND
        if moisture < 200:
            return Biome.TEMPERATE_DECIDUOUS_FOREST
        return Biome.TEMPERATE_RAIN_FOREST

    if moisture < 85:
        return Biome.SUBTROPICAL_DESERT
    if moisture < 140:
        return Biome.SHRUBLAND
    if moisture < 200:
        return Biome.TROPICAL_SEASONAL_FOREST
    return Biome.TROPICAL_RAIN_FOREST


_BASE_COSTS: dict[int, float] = {
    Biome.OCEAN: 1.0,
    Biome.BEACH: 1.5,
    Biome.SCORCHED: 2.0,
    Biome.BARE: 2.0,
    Biome.TUNDRA: 3.0,
    Biome.SNOW: 3.0,
    Biome.TEMPERATE_DESERT: 2.5,
    Biome.SUBTROPICAL_DESERT: 2.5,
    Biome.SHRUBLAND: 1.8,
    Biome.GRASSLAND: 1.0,
    Biome.TEMPERATE_DECIDUOUS_FOREST: 3.5,
    Biome.TROPICAL_SEASONAL_FOREST: 3.5,
    Biome.TEMPERATE_RAIN_FOREST: 5.0,
    Biome.TROPICAL_RAIN_FOREST: 5.0,
    Biome.MOUNTAIN: 10.0,
}

_WINTER_FACTOR = 1.5


def base_movement_cost(biome_id: int) -> float:
    """Movement cost of a biome before traffic; 1.0 is baseline speed."""
    return _BASE_COSTS.get(biome_id, 1.0)


def effective_movement_cost(biome_id: int, foot_traffic: int, is_winter: bool) -> float:
    """Movement cost reduced by foot traffic and inflated in winter.

    Every 1000 units of traffic halve the cost above 1.0 (asymptotically a road).
    """
    base = base_movement_cost(biome_id)
    if base <= 1.0:
        cost = base
    else:
        cost = 1.0 + (base - 1.0) / (1.0 + foot_traffic / 1000.0)
    if is_winter:
        cost *= _WINTER_FACTOR
    return cost
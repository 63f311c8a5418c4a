"""Engine: entity store, tick loop, map grid, biomes, RNG, hooks, secrets, calendar and paths."""
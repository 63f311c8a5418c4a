# ultimatesim

A deterministic, tick-based world simulation library built on a small
entity-component store. Entities are bags of plain component records
(positions, needs, genomes, markets, affiliations and so on). Systems are
objects with an `update(world)` method; a `TickManager` runs them once per
tick in fixed phases.

The package has no dependencies outside the standard library.

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## What is in the package

- `ultimatesim.components`: component dataclasses (`Identity`, `Position`,
  `Needs`, `GenomeComponent`, `Affiliation`, `Memory`, `MarketComponent`,
  `StorageComponent`, `PopulationComponent`, `Payload`, tag types such as
  `Village`, `NPC` and `Caravan`, and many more), together with the job,
  trait, interaction, item and union constants (`JOB_FARMER`,
  `INTERACTION_THEFT`, ...). `Memory.record(event)` stores a `MemoryEvent`
  in a 50-slot ring buffer.
- `ultimatesim.engine`:
  - `ecs`: `World` and `Entity`. `new_entity`, `add`, `remove`,
    `remove_entity`, `alive`, `has`, `get` and `query(*types, without=...)`.
    Components may be given as classes (a default instance is made) or as
    instances; `query` returns matching entities oldest first.
  - `tick`: `TickManager` (holds a `World` as `world`), `SystemPhase`
    (`INPUT`, `AI`, `MOVEMENT`, `RESOLUTION`, `CLEANUP`) and the `System`
    protocol. `tick()` runs every system once in phase order unless paused;
    `run(n)` runs `n` ticks at the target rate (`-1` runs forever), updates
    `alpha` between ticks, and prints the average tick processing time once
    every `tps` ticks; `toggle_pause()` flips `is_paused`.
  - `map_grid`: `MapGrid(width, height)`, row-major parallel lists of
    `TileData`, `ResourceDepot`, `TileState` and `ManaData`. `get_tile`
    returns a copy (an empty tile outside the map), `set_tile` ignores
    out-of-range writes, `index` raises `IndexError` outside the map.
  - `biome`: the `Biome` enum, `determine_biome(elevation, moisture,
    temperature)`, `base_movement_cost` and `effective_movement_cost`
    (foot traffic lowers the cost toward 1.0; winter multiplies it by 1.5).
  - `rng`: a seeded, process-wide generator: `initialize_rng(seed)` (up to
    32 bytes), `get_random_int`, `get_random_float32`, `get_random_float64`.
    Calling these before seeding raises `RNGNotInitializedError`.
  - `hooks`: `SparseHookGraph`, a thread-safe sparse map of directed
    favour/grudge points (`add_hook`, `spend_hook`, `get_hook`,
    `get_all_hooks`, `get_all_incoming_hooks`, `remove_all_hooks`).
  - `secret_registry`: `SecretRegistry` interns strings to integer ids
    starting at 1 (`register_secret`, `get_secret`, which returns `None`
    for unknown ids); `get_secret_registry()` returns a shared instance.
  - `calendar`: `Calendar` (tick count and `is_winter`) and
    `SEASON_DURATION` (3600 ticks).
  - `path_queue`: `PathRequestQueue(buffer_size, workers)` with
    `start_workers`, `enqueue`, `get_result(timeout)`, `close`, and
    `compute_sync(request, map_grid)`. Paths are straight lines with one node
    per unit of distance; a naval request given a map fails if any node
    leaves ocean tiles.
- `ultimatesim.network`:
  - `server`: `Server(tcp_port, udp_port)`, also usable as a context
    manager. `start()` binds TCP and UDP (port `"0"` picks a free port,
    reported in `bound_tcp_port` / `bound_udp_port`), tracks TCP clients and
    UDP senders, and `broadcast_tcp` / `broadcast_udp` send bytes to them.
  - `payload`: `PositionDelta` (packs to 16 bytes with `bytes()`) and
    `DeltaPayload`.
- `ultimatesim.systems`: `AdministrationSystem`,
  `AdministrativeDecaySystem`, `AdministrativeFractureSystem`,
  `AgingSystem`, `BanditrySystem`, `BirthSystem` (with `clamp_genetics`),
  `BloodFeudSystem`, `CalendarSystem`, `CaravanSpawnerSystem`,
  `CareerChangeSystem`, `CastingSystem` and `CityBinderSystem`.

## Example

```python
from ultimatesim.components import NPC, Affiliation, Identity, Position, Village
from ultimatesim.engine.calendar import Calendar
from ultimatesim.engine.tick import SystemPhase, TickManager
from ultimatesim.systems.calendar_system import CalendarSystem
from ultimatesim.systems.city_binder import CityBinderSystem

manager = TickManager(60)
calendar = Calendar()
manager.add_system(CalendarSystem(calendar), SystemPhase.INPUT)

world = manager.world
world.new_entity(Village, Identity(id=101), Position(10, 10))
world.new_entity(Village, Identity(id=202), Position(100, 100))
npc = world.new_entity(NPC, Position(12, 12), Affiliation)

# City binding runs every 10000 ticks; start just before the boundary.
manager.add_system(CityBinderSystem(ticks_elapsed=9999), SystemPhase.RESOLUTION)

manager.tick()
print(calendar.ticks)                       # 1
print(world.get(npc, Affiliation).city_id)  # 101
```

## What the package does not do

- There is no terrain generator: a new `MapGrid` has all-zero tiles, and
  filling in elevation, moisture, temperature, biomes and resources is up to
  the caller (`determine_biome` classifies a tile once values are set).
- There is no command, window or viewer; it is a library to drive from your
  own code.
- Only the systems listed above exist. There are no movement, wandering,
  metabolism, death, market pricing or spawning systems, so a world only
  changes through what those systems do and what you write yourself.
- `PathRequestQueue` does not search for routes; it returns straight lines.
- `Server` reads and discards incoming data; it does not parse messages.
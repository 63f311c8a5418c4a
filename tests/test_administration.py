from ultimatesim.components import (
    Affiliation,
    Identity,
    MarketComponent,
    Position,
    Village,
)
from ultimatesim.engine.ecs import World
from ultimatesim.engine.hooks import SparseHookGraph
from ultimatesim.systems.administration import (
    ADMINISTRATION_TICK_RATE,
    AdministrationSystem,
)


def _city(world, city_id, x, y, prices, country_id=0):
    food, wood, stone, iron = prices
    return world.new_entity(
        Village(),
        Identity(id=city_id),
        Position(x, y),
        MarketComponent(wood_price=wood, stone_price=stone, iron_price=iron, food_price=food),
        Affiliation(country_id=country_id),
    )


def _setup(world):
    _city(world, 101, 10, 10, (15.0, 10.0, 10.0, 10.0))
    _city(world, 202, 15, 10, (2.0, 2.0, 2.0, 2.0))
    _city(world, 303, 500, 500, (2.0, 2.0, 2.0, 2.0))
    _city(world, 404, 12, 12, (15.0, 10.0, 10.0, 10.0))


def _run_once(world, hooks):
    system = AdministrationSystem(world, hooks)
    system.tick_stamp = ADMINISTRATION_TICK_RATE - 1
    system.update(world)
    return system


def test_hooks_generated_deterministically():
    world1, hooks1 = World(), SparseHookGraph()
    world2, hooks2 = World(), SparseHookGraph()
    _setup(world1)
    _setup(world2)
    _run_once(world1, hooks1)
    _run_once(world2, hooks2)

    assert hooks1.get_hook(101, 202) != 0
    assert hooks1.get_hook(202, 101) != 0
    assert hooks1.get_hook(101, 303) == 0
    assert hooks1.get_hook(101, 404) == 0
    assert hooks1.get_hook(101, 202) == hooks2.get_hook(101, 202)


def test_hook_value_is_one_each_way():
    world, hooks = World(), SparseHookGraph()
    _setup(world)
    _run_once(world, hooks)
    assert hooks.get_hook(101, 202) == 1
    assert hooks.get_hook(202, 101) == 1
    assert hooks.get_hook(404, 202) == 1


def test_no_analysis_before_tick_rate():
    world, hooks = World(), SparseHookGraph()
    _setup(world)
    system = AdministrationSystem(world, hooks)
    for _ in range(ADMINISTRATION_TICK_RATE - 1):
        system.update(world)
    assert hooks.get_hook(101, 202) == 0
    system.update(world)
    assert hooks.get_hook(101, 202) == 1


def test_same_country_is_skipped():
    world, hooks = World(), SparseHookGraph()
    _city(world, 1, 0, 0, (15.0, 10.0, 10.0, 10.0), country_id=7)
    _city(world, 2, 1, 0, (2.0, 2.0, 2.0, 2.0), country_id=7)
    _run_once(world, hooks)
    assert hooks.get_hook(1, 2) == 0
    assert hooks.get_hook(2, 1) == 0


def test_zero_prices_are_clamped_to_one():
    world, hooks = World(), SparseHookGraph()
    _city(world, 1, 0, 0, (0.0, 0.0, 0.0, 0.0))
    _city(world, 2, 1, 0, (0.0, 0.0, 0.0, 0.0))
    _city(world, 3, 2, 0, (2.0, 2.0, 2.0, 2.0))
    _run_once(world, hooks)
    assert hooks.get_hook(1, 2) == 0
    assert hooks.get_hook(1, 3) == 1
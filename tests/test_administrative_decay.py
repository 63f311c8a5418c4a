from ultimatesim.components import (
    Identity,
    LoyaltyComponent,
    OrderComponent,
    OrderEntity,
    Position,
    Village,
)
from ultimatesim.engine.ecs import World
from ultimatesim.engine.tick import SystemPhase, TickManager
from ultimatesim.systems.administrative_decay import AdministrativeDecaySystem


def _order(world, target, created=0):
    return world.new_entity(
        OrderEntity, OrderComponent(creation_tick=created, target_city_id=target), Position
    )


def test_order_decays_past_loyalty():
    world = World()
    tm = TickManager(60)
    sys = AdministrativeDecaySystem()
    tm.add_system(sys, SystemPhase.RESOLUTION)

    world.new_entity(Village, Identity(id=2), LoyaltyComponent(value=5))
    order1 = _order(world, 2)

    for tick in range(1, 6):
        sys.update(world)
        assert world.alive(order1), f"despawned prematurely at tick {tick}"

    sys.update(world)
    assert not world.alive(order1)

    order2 = _order(world, 99, created=sys.tick)
    sys.update(world)
    assert not world.alive(order2)


def test_future_order_is_skipped_even_without_target():
    world = World()
    sys = AdministrativeDecaySystem()
    order = _order(world, 42, created=10)
    sys.update(world)
    assert world.alive(order)
    assert sys.tick == 1


def test_non_order_entities_untouched():
    world = World()
    sys = AdministrativeDecaySystem()
    city = world.new_entity(Village, Identity(id=1), LoyaltyComponent(value=0))
    stray = world.new_entity(OrderComponent(target_city_id=77), Position)
    sys.update(world)
    assert world.alive(city)
    assert world.alive(stray)


def _setup_world(world, sys):
    for i in range(100):
        world.new_entity(Village, Identity(id=i), LoyaltyComponent(value=i % 10))
    for i in range(100):
        _order(world, i)
    for _ in range(5):
        sys.update(world)


def test_deterministic():
    world1, sys1 = World(), AdministrativeDecaySystem()
    world2, sys2 = World(), AdministrativeDecaySystem()
    _setup_world(world1, sys1)
    _setup_world(world2, sys2)

    count1 = len(world1.query(OrderEntity))
    count2 = len(world2.query(OrderEntity))
    assert count1 == count2
    assert count1 == 50
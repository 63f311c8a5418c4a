from ultimatesim.components import (
    Affiliation,
    CapitalComponent,
    CountryComponent,
    JurisdictionComponent,
    Position,
    Village,
)
from ultimatesim.engine.ecs import World
from ultimatesim.systems.administrative_fracture import AdministrativeFractureSystem


def _village(world, x, y, country_id=5):
    affil = Affiliation(country_id=country_id)
    world.new_entity(Village(), affil, Position(x, y))
    return affil


def test_fracture_by_distance_and_missing_capital():
    world = World()
    system = AdministrativeFractureSystem(world)

    capital = world.new_entity(
        CountryComponent(), CapitalComponent(), Affiliation(country_id=5), Position(100.0, 100.0)
    )
    close = _village(world, 150.0, 100.0)
    far = _village(world, 300.0, 100.0)

    for _ in range(999):
        system.update(world)
    assert close.country_id == 5
    assert far.country_id == 5

    system.update(world)
    assert close.country_id == 5
    assert far.country_id == 0

    world.remove_entity(capital)
    orphan = _village(world, 100.0, 100.0)
    for _ in range(1000):
        system.update(world)
    assert orphan.country_id == 0


def test_corruption_extends_effective_distance():
    world = World()
    system = AdministrativeFractureSystem(world)
    world.new_entity(
        CountryComponent(),
        CapitalComponent(),
        Affiliation(country_id=3),
        Position(0.0, 0.0),
        JurisdictionComponent(corruption=5),
    )
    village = _village(world, 140.0, 0.0, country_id=3)
    system.tick_stamp = 999
    system.update(world)
    assert village.country_id == 0


def test_uncorrupted_capital_keeps_village_within_range():
    world = World()
    system = AdministrativeFractureSystem(world)
    world.new_entity(
        CountryComponent(),
        CapitalComponent(),
        Affiliation(country_id=3),
        Position(0.0, 0.0),
        JurisdictionComponent(corruption=0),
    )
    village = _village(world, 140.0, 0.0, country_id=3)
    system.tick_stamp = 999
    system.update(world)
    assert village.country_id == 3


def test_villages_without_country_are_untouched():
    world = World()
    system = AdministrativeFractureSystem(world)
    village = _village(world, 1000.0, 1000.0, country_id=0)
    system.tick_stamp = 999
    system.update(world)
    assert village.country_id == 0
    assert system.tick_stamp == 1000
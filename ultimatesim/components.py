"""Component data types attached to simulation entities."""

from __future__ import annotations

from dataclasses import dataclass, field

# Trait bitmask flags
TRAIT_RISK_TAKER = 1 << 0
TRAIT_CAUTIOUS = 1 << 1
TRAIT_GOSSIP = 1 << 2

# Job identifiers
JOB_NONE = 0
JOB_FARMER = 1
JOB_LUMBERJACK = 2
JOB_ARTISAN = 3
JOB_GUARD = 4
JOB_PREACHER = 5
JOB_CASTER = 6
JOB_BANDIT = 7

EXTREME_PRESTIGE_THRESHOLD = 100

BELIEF_XENOPHOBIA = 100

# Interaction types recorded in memory
INTERACTION_GOSSIP = 1
INTERACTION_LANGUAGE = 2
INTERACTION_ASSAULT = 3
INTERACTION_THEFT = 4
INTERACTION_MURDER = 5

# Item identifiers used by contraband bitmasks
ITEM_WOOD = 1
ITEM_STONE = 2
ITEM_IRON = 3
ITEM_FOOD = 4

# Union types
UNION_DEFENSE_PACT = 0
UNION_CURRENCY = 1
UNION_ECONOMIC_BLOC = 2

MEMORY_CAPACITY = 50


@dataclass(slots=True)
class Identity:
    """Unique identity, name, traits and age of an entity."""

    id: int = 0
    name: str = ""
    base_traits: int = 0
    age: int = 0


@dataclass(slots=True)
class GenomeComponent:
    """Genetic attributes with dominant and recessive trait masks."""

    strength: int = 0
    beauty: int = 0
    health: int = 0
    intellect: int = 0
    dominant: int = 0
    recessive: int = 0


@dataclass(slots=True)
class Legacy:
    prestige: int = 0
    inherited_debt: int = 0


@dataclass(slots=True)
class Needs:
    food: float = 0.0
    rest: float = 0.0
    safety: float = 0.0
    wealth: float = 0.0


@dataclass(slots=True)
class Ledger:
    """Tag marking a physical record on the map."""


@dataclass(slots=True)
class LedgerComponent:
    """Materialized information such as history or propaganda."""

    secrets: list[int] = field(default_factory=list)


@dataclass(slots=True)
class Position:
    x: float = 0.0
    y: float = 0.0


@dataclass(slots=True)
class Affiliation:
    family_id: int = 0
    clan_id: int = 0
    guild_id: int = 0
    city_id: int = 0
    country_id: int = 0


@dataclass(slots=True)
class LoanContractComponent:
    creditor_id: int = 0
    due_tick: int = 0
    asset_id: int = 0


@dataclass(slots=True)
class DiseaseEntity:
    """A plague instance on the map."""

    id: int = 0
    lethality: int = 0


@dataclass(slots=True)
class ImmunityTag:
    """Plague IDs an entity has survived and is immune to."""

    immune_to: list[int] = field(default_factory=list)


@dataclass(slots=True)
class OrderEntity:
    """Tag marking an administrative courier."""


@dataclass(slots=True)
class OrderComponent:
    creation_tick: int = 0
    target_city_id: int = 0


@dataclass(slots=True)
class CapitalComponent:
    """Tag marking a central governing city."""


@dataclass(slots=True)
class LoyaltyComponent:
    value: int = 0


@dataclass(slots=True)
class MemoryEvent:
    target_id: int = 0
    tick_stamp: int = 0
    interaction_type: int = 0
    language_id: int = 0
    value: int = 0


def _empty_events() -> list[MemoryEvent]:
    return [MemoryEvent() for _ in range(MEMORY_CAPACITY)]


@dataclass(slots=True)
class Memory:
    """Fixed-size ring buffer of interaction events."""

    events: list[MemoryEvent] = field(default_factory=_empty_events)
    head: int = 0

    def record(self, event: MemoryEvent) -> None:
        """Store an event at the head, overwriting the oldest once full."""
        self.events[self.head] = event
        self.head = (self.head + 1) % len(self.events)


@dataclass(slots=True)
class NPC:
    """Tag marking a single human actor."""


@dataclass(slots=True)
class SettlementLogic:
    ticks_at_zero_velocity: int = 0


@dataclass(slots=True)
class StorageComponent:
    wood: int = 0
    stone: int = 0
    iron: int = 0
    food: int = 0


@dataclass(slots=True)
class CitizenData:
    """Genetics and traits of an individual living inside a settlement."""

    genetics: GenomeComponent = field(default_factory=GenomeComponent)
    base_traits: int = 0
    age: int = 0


@dataclass(slots=True)
class PopulationComponent:
    count: int = 0
    citizens: list[CitizenData] = field(default_factory=list)


@dataclass(slots=True)
class Village:
    """Tag marking a stationary settlement."""


@dataclass(slots=True)
class ItemEntity:
    """Tag marking a physical legendary item."""


@dataclass(slots=True)
class LegendComponent:
    name_id: int = 0
    prestige: int = 0
    history: list[int] = field(default_factory=list)


@dataclass(slots=True)
class Caravan:
    """Tag marking a mobile logistics unit."""


@dataclass(slots=True)
class Payload:
    wood: int = 0
    stone: int = 0
    iron: int = 0
    food: int = 0


@dataclass(slots=True)
class RuinComponent:
    """Marks a dead settlement."""

    decay: int = 0
    former_name: str = ""


@dataclass(slots=True)
class Secret:
    origin_id: int = 0
    secret_id: int = 0
    virality: int = 0
    belief_id: int = 0


@dataclass(slots=True)
class SecretComponent:
    secrets: list[Secret] = field(default_factory=list)


@dataclass(slots=True)
class Belief:
    belief_id: int = 0
    weight: int = 0


@dataclass(slots=True)
class BeliefComponent:
    beliefs: list[Belief] = field(default_factory=list)


@dataclass(slots=True)
class Path:
    """Node positions an entity travels along."""

    nodes: list[Position] = field(default_factory=list)
    has_path: bool = False
    target_x: float = 0.0
    target_y: float = 0.0


@dataclass(slots=True)
class Velocity:
    x: float = 0.0
    y: float = 0.0


@dataclass(slots=True)
class Possessed:
    """Tag marking the entity controlled by the player."""


@dataclass(slots=True)
class MarketComponent:
    wood_price: float = 0.0
    stone_price: float = 0.0
    iron_price: float = 0.0
    food_price: float = 0.0
    wage_rate: float = 0.0


@dataclass(slots=True)
class ContrabandComponent:
    """Bitmask of illegal item IDs."""

    contraband: int = 0


@dataclass(slots=True)
class StrikeMarker:
    target_employer_id: int = 0


@dataclass(slots=True)
class DesperationComponent:
    level: int = 0


@dataclass(slots=True)
class JobComponent:
    job_id: int = JOB_NONE
    employer_id: int = 0


@dataclass(slots=True)
class BusinessEntity:
    """Tag marking a business."""


@dataclass(slots=True)
class BusinessComponent:
    owner_id: int = 0


@dataclass(slots=True)
class TreasuryComponent:
    wealth: float = 0.0


@dataclass(slots=True)
class WorkplaceComponent:
    x: float = 0.0
    y: float = 0.0


@dataclass(slots=True)
class CultureComponent:
    dialect_tick_stamp: int = 0
    foreign_interaction_ticks: int = 0
    language_id: int = 0
    foreign_language_id: int = 0


@dataclass(slots=True)
class CoinEntity:
    """Tag marking a physical coin."""


@dataclass(slots=True)
class CurrencyComponent:
    issuer_id: int = 0
    value: float = 0.0
    debasement: float = 0.0


@dataclass(slots=True)
class CountryComponent:
    standard_currency_id: int = 0
    debasement: float = 0.0


@dataclass(slots=True)
class UnionEntity:
    """Tag marking a treaty between countries or cities."""


@dataclass(slots=True)
class UnionComponent:
    union_type: int = UNION_DEFENSE_PACT
    shared_currency_id: int = 0
    member_ids: list[int] = field(default_factory=list)


@dataclass(slots=True)
class MilitaryForce:
    """Tag marking armed forces."""


@dataclass(slots=True)
class PortComponent:
    """Tag marking a settlement adjacent to ocean."""


@dataclass(slots=True)
class ShipComponent:
    hull: int = 0


@dataclass(slots=True)
class Passenger:
    entity_id: int = 0


@dataclass(slots=True)
class PassengerComponent:
    passengers: list[Passenger] = field(default_factory=list)


@dataclass(slots=True)
class JurisdictionComponent:
    """Legal bounds and parameters around an entity's position."""

    radius_squared: float = 0.0
    illegal_action_ids: int = 0
    corruption: int = 0
    banned_secret_id: int = 0
    trauma: int = 0


@dataclass(slots=True)
class CrimeMarker:
    crime_level: int = 0
    bounty: int = 0


@dataclass(slots=True)
class CrusaderEntity:
    """Tag marking an aggressive holy-war spawn."""


@dataclass(slots=True)
class CrusadeComponent:
    target_city_id: int = 0


@dataclass(slots=True)
class VitalsComponent:
    stamina: float = 0.0
    blood: float = 0.0
    pain: float = 0.0
    consciousness: float = 0.0
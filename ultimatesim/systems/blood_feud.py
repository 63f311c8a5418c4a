"""Deep grudges lead to murder, and murder spreads hatred across clans."""

from __future__ import annotations

from dataclasses import dataclass

from ultimatesim.components import (
    INTERACTION_MURDER,
    Affiliation,
    Identity,
    Memory,
    MemoryEvent,
    Needs,
    Position,
)
from ultimatesim.engine.ecs import Entity, World
from ultimatesim.engine.hooks import SparseHookGraph

MURDER_RANGE_SQ = 2.0
MURDER_GRUDGE_THRESHOLD = -50
KILLER_HATRED = -100
KILLER_CLAN_HATRED = -50


@dataclass(slots=True)
class _FeudNode:
    entity: Entity
    id: int
    clan_id: int
    x: float
    y: float
    memory: Memory


class BloodFeudSystem:
    """Each tick, an NPC next to someone it holds a grudge of -50 or worse murders them.

    The victim's clan then hates the killer (-100) and the killer's clan (-50).
    """

    def __init__(self, world: World, hooks: SparseHookGraph) -> None:
        self.hooks = hooks
        self.tick_counter = 0

    def update(self, world: World) -> None:
        self.tick_counter += 1

        nodes = []
        for entity in world.query(Position, Identity, Affiliation, Memory, Needs):
            pos = world.get(entity, Position)
            nodes.append(
                _FeudNode(
                    entity=entity,
                    id=world.get(entity, Identity).id,
                    clan_id=world.get(entity, Affiliation).clan_id,
                    x=pos.x,
                    y=pos.y,
                    memory=world.get(entity, Memory),
                )
            )

        dead: set[int] = set()
        for i, killer in enumerate(nodes):
            if killer.id in dead:
                continue
            for j, victim in enumerate(nodes):
                if i == j or victim.id in dead:
                    continue
                dx = killer.x - victim.x
                dy = killer.y - victim.y
                if dx * dx + dy * dy >= MURDER_RANGE_SQ:
                    continue
                if self.hooks.get_hook(killer.id, victim.id) > MURDER_GRUDGE_THRESHOLD:
                    continue

                killer.memory.record(
                    MemoryEvent(
                        target_id=victim.id,
                        tick_stamp=self.tick_counter,
                        interaction_type=INTERACTION_MURDER,
                    )
                )
                world.get(victim.entity, Needs).food = 0
                dead.add(victim.id)
                self._propagate_feud(nodes, killer, victim)
                break

    def _propagate_feud(self, nodes: list[_FeudNode], killer: _FeudNode, victim: _FeudNode) -> None:
        killer_kin = [
            node.id for node in nodes if node.clan_id == killer.clan_id and node.id != killer.id
        ] if killer.clan_id != 0 else []

        for bystander in nodes:
            if bystander.clan_id != victim.clan_id or bystander.id == victim.id:
                continue
            self.hooks.add_hook(bystander.id, killer.id, KILLER_HATRED)
            for kin_id in killer_kin:
                self.hooks.add_hook(bystander.id, kin_id, KILLER_CLAN_HATRED)
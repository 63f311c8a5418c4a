"""Minimal entity-component store used by the simulation systems."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable


@dataclass(frozen=True, slots=True)
class Entity:
    """Handle to an entity stored in a World."""

    id: int


class World:
    """Entities and their components, keyed by component type.

    Components are passed either as classes (a default instance is created)
    or as ready-made instances.
    """

    def __init__(self) -> None:
        self._entities: dict[int, dict[type, Any]] = {}
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._entities)

    def _components(self, entity: Entity) -> dict[type, Any]:
        try:
            return self._entities[entity.id]
        except KeyError:
            raise ValueError(f"entity {entity.id} is not alive") from None

    @staticmethod
    def _resolve(existing: dict[type, Any], specs: Iterable[Any]) -> dict[type, Any]:
        resolved: dict[type, Any] = {}
        for spec in specs:
            instance = spec() if isinstance(spec, type) else spec
            key = type(instance)
            if key in existing or key in resolved:
                raise ValueError(f"component {key.__name__} is already present")
            resolved[key] = instance
        return resolved

    def new_entity(self, *args: Any) -> Entity:
        """Create an entity holding the given components."""
        components = self._resolve({}, args)
        entity = Entity(self._next_id)
        self._next_id += 1
        self._entities[entity.id] = components
        return entity

    def add(self, entity: Entity, *args: Any) -> None:
        """Attach components to a living entity; each type may appear once."""
        components = self._components(entity)
        components.update(self._resolve(components, args))

    def remove(self, entity: Entity, *args: type) -> None:
        """Detach components of the given types from a living entity."""
        components = self._components(entity)
        missing = [t.__name__ for t in args if t not in components]
        if missing:
            raise KeyError(f"entity {entity.id} lacks {', '.join(missing)}")
        for component_type in args:
            del components[component_type]

    def remove_entity(self, entity: Entity) -> None:
        """Delete an entity and all of its components."""
        self._components(entity)
        del self._entities[entity.id]

    def alive(self, entity: Entity) -> bool:
        return entity.id in self._entities

    def has(self, entity: Entity, component: type) -> bool:
        return component in self._components(entity)

    def get(self, entity: Entity, component: type) -> Any:
        """Return the stored component instance of the given type."""
        components = self._components(entity)
        try:
            return components[component]
        except KeyError:
            raise KeyError(f"entity {entity.id} lacks {component.__name__}") from None

    def query(self, *args: type, without: Iterable[type] = ()) -> list[Entity]:
        """Entities holding every type in args and none in without, oldest first."""
        excluded = tuple(without)
        return [
            Entity(entity_id)
            for entity_id, components in self._entities.items()
            if all(t in components for t in args)
            and not any(t in components for t in excluded)
        ]
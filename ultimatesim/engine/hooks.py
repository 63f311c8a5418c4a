"""Sparse directed graph of favour/grudge points between entities."""

from __future__ import annotations

import threading


class SparseHookGraph:
    """Thread-safe mapping entity -> target -> hook points."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._graph: dict[int, dict[int, int]] = {}

    def add_hook(self, entity_a: int, entity_b: int, points: int) -> None:
        with self._lock:
            targets = self._graph.setdefault(entity_a, {})
            targets[entity_b] = targets.get(entity_b, 0) + points

    def spend_hook(self, entity_a: int, entity_b: int, points: int) -> None:
        """Subtract points; does nothing if entity_a holds no hooks at all."""
        with self._lock:
            targets = self._graph.get(entity_a)
            if targets is None:
                return
            targets[entity_b] = targets.get(entity_b, 0) - points

    def get_hook(self, entity_a: int, entity_b: int) -> int:
        with self._lock:
            return self._graph.get(entity_a, {}).get(entity_b, 0)

    def get_all_hooks(self, entity_a: int) -> dict[int, int]:
        """A copy of all outgoing hooks of entity_a."""
        with self._lock:
            return dict(self._graph.get(entity_a, {}))

    def get_all_incoming_hooks(self, entity_a: int) -> dict[int, int]:
        """Hooks other entities hold on entity_a, keyed by holder."""
        with self._lock:
            return {
                holder: targets[entity_a]
                for holder, targets in self._graph.items()
                if entity_a in targets
            }

    def remove_all_hooks(self, entity_a: int) -> None:
        """Drop every hook from and to entity_a."""
        with self._lock:
            self._graph.pop(entity_a, None)
            for targets in self._graph.values():
                targets.pop(entity_a, None)
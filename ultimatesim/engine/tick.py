"""Fixed-rate tick loop running systems in ordered phases."""

from __future__ import annotations

import time
from enum import IntEnum
from typing import Protocol

from ultimatesim.engine.ecs import World


class System(Protocol):
    """Anything with an update step over the world."""

    def update(self, world: World) -> None: ...


class SystemPhase(IntEnum):
    INPUT = 0
    AI = 1
    MOVEMENT = 2
    RESOLUTION = 3
    CLEANUP = 4


class TickManager:
    """Owns the world and runs registered systems at a target ticks-per-second."""

    def __init__(self, tps: int) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self.world = World()
        self.systems: list[list[System]] = [[] for _ in SystemPhase]
        self.tps = tps
        self.alpha = 0.0
        self.is_paused = False
        self._tick_time = 1.0 / tps
        self._last_tick = time.perf_counter()

    def add_system(self, system: System, phase: SystemPhase | int) -> None:
        """Register a system under a phase; unknown phases are ignored."""
        try:
            phase = SystemPhase(phase)
        except ValueError:
            return
        self.systems[phase].append(system)

    def tick(self) -> None:
        """Run every system once, phase by phase, unless paused."""
        if self.is_paused:
            return
        for phase_systems in self.systems:
            for system in phase_systems:
                system.update(self.world)

    def run(self, max_ticks: int = -1) -> None:
        """Block running ticks at the target rate; -1 runs forever.

        Prints the average tick processing time once every tps ticks.
        """
        ticks = 0
        self._last_tick = time.perf_counter()
        accumulated = 0.0
        logged = 0

        while max_ticks == -1 or ticks < max_ticks:
            elapsed = time.perf_counter() - self._last_tick
            if elapsed >= self._tick_time:
                start = time.perf_counter()
                self.tick()
                accumulated += time.perf_counter() - start
                logged += 1
                if logged >= self.tps:
                    avg_ms = accumulated * 1000.0 / logged
                    print(f"Ticks Processing Time (ms): {avg_ms:.4f}")
                    accumulated = 0.0
                    logged = 0
                self._last_tick += self._tick_time
                ticks += 1
            else:
                self.alpha = elapsed / self._tick_time
                sleep_time = self._tick_time - elapsed
                if sleep_time > 0.001:
                    time.sleep(sleep_time - 0.001)

    def toggle_pause(self) -> None:
        self.is_paused = not self.is_paused
"""Worker pool computing straight-line travel paths for entities."""

from __future__ import annotations

import math
import queue
import threading
from dataclasses import dataclass

from ultimatesim.engine.biome import Biome
from ultimatesim.engine.map_grid import MapGrid


@dataclass(frozen=True, slots=True)
class Vec2:
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True, slots=True)
class PathRequest:
    """A request from an entity to travel from a start point to a target."""

    entity_id: int
    start_x: float = 0.0
    start_y: float = 0.0
    target_x: float = 0.0
    target_y: float = 0.0
    is_naval: bool = False


@dataclass(frozen=True, slots=True)
class PathResult:
    """Computed path nodes for an entity; empty when unsuccessful."""

    entity_id: int
    path: tuple[Vec2, ...] = ()
    success: bool = False


_STOP = object()


def _line_nodes(request: PathRequest) -> list[Vec2]:
    """Evenly spaced nodes from start to target, one per unit of distance.

    Returns an empty list when start and target coincide.
    """
    dx = request.target_x - request.start_x
    dy = request.target_y - request.start_y
    dist = math.hypot(dx, dy)
    if dist <= 0:
        return []
    steps = math.ceil(dist)
    step_x = dx / steps
    step_y = dy / steps
    return [
        Vec2(request.start_x + step_x * i, request.start_y + step_y * i)
        for i in range(steps + 1)
    ]


def _is_ocean(map_grid: MapGrid, node: Vec2) -> bool:
    grid_x = min(max(int(node.x), 0), map_grid.width - 1)
    grid_y = min(max(int(node.y), 0), map_grid.height - 1)
    return map_grid.tiles[grid_y * map_grid.width + grid_x].biome_id == Biome.OCEAN


class PathRequestQueue:
    """Bounded request and result queues served by persistent worker threads."""

    def __init__(self, buffer_size: int, workers: int) -> None:
        if workers < 0:
            raise ValueError("workers must be non-negative")
        self.workers = workers
        self._requests: queue.Queue = queue.Queue(maxsize=buffer_size)
        self._results: queue.Queue = queue.Queue(maxsize=buffer_size)
        self._threads: list[threading.Thread] = []
        self._closed = False
        self._lock = threading.Lock()

    def start_workers(self) -> None:
        """Launch the worker threads that process queued requests."""
        with self._lock:
            if self._closed:
                raise RuntimeError("queue is closed")
            for _ in range(self.workers):
                thread = threading.Thread(target=self._work, daemon=True)
                thread.start()
                self._threads.append(thread)

    def enqueue(self, request: PathRequest) -> None:
        """Queue a request, blocking while the buffer is full."""
        if self._closed:
            raise RuntimeError("queue is closed")
        self._requests.put(request)

    def get_result(self, timeout: float | None = None) -> PathResult:
        """Next completed result; raises TimeoutError if none arrives in time."""
        try:
            return self._results.get(timeout=timeout)
        except queue.Empty:
            raise TimeoutError("no path result available") from None

    def _work(self) -> None:
        while True:
            request = self._requests.get()
            if request is _STOP:
                return
            self._results.put(self.compute_sync(request, None))

    def compute_sync(self, request: PathRequest, map_grid: MapGrid | None = None) -> PathResult:
        """Compute a path immediately on the calling thread.

        Naval requests with a map fail if any node along the line lies off
        ocean tiles; everything else follows the straight line.
        """
        nodes = _line_nodes(request)
        if not nodes:
            return PathResult(request.entity_id)

        if request.is_naval and map_grid is not None:
            if not all(_is_ocean(map_grid, node) for node in nodes):
                return PathResult(request.entity_id)

        nodes[-1] = Vec2(request.target_x, request.target_y)
        return PathResult(request.entity_id, tuple(nodes), True)

    def close(self) -> None:
        """Stop accepting requests; workers exit after draining the queue."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            for _ in self._threads:
                self._requests.put(_STOP)
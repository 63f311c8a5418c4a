"""Positional delta records sent to clients."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

_DELTA_FORMAT = struct.Struct("<Qff")


@dataclass(slots=True)
class PositionDelta:
    """Position update of one entity; packs to exactly 16 bytes."""

    entity_id: int = 0
    x: float = 0.0
    y: float = 0.0

    def __bytes__(self) -> bytes:
        return _DELTA_FORMAT.pack(self.entity_id, self.x, self.y)


@dataclass(slots=True)
class DeltaPayload:
    """Batch of position deltas for a single tick."""

    tick: int = 0
    deltas: list[PositionDelta] = field(default_factory=list)
"""Process-wide deterministic random number generator."""

from __future__ import annotations

import random
import threading
from typing import Iterable

SEED_SIZE = 32

_lock = threading.Lock()
_generator: random.Random | None = None


class RNGNotInitializedError(RuntimeError):
    """Raised when random values are requested before initialize_rng."""


def initialize_rng(seed: bytes | Iterable[int]) -> None:
    """Seed the global generator with up to 32 bytes, zero-padded."""
    global _generator
    raw = bytes(seed)
    if len(raw) > SEED_SIZE:
        raise ValueError(f"seed must be at most {SEED_SIZE} bytes")
    padded = raw.ljust(SEED_SIZE, b"\x00")
    with _lock:
        _generator = random.Random(padded)


def _require() -> random.Random:
    if _generator is None:
        raise RNGNotInitializedError("RNG not initialized")
    return _generator


def get_random_int() -> int:
    """A non-negative 63-bit pseudo-random integer."""
    with _lock:
        return _require().getrandbits(63)


def get_random_float32() -> float:
    """A pseudo-random float in [0.0, 1.0) with single-precision resolution."""
    with _lock:
        return _require().getrandbits(24) / (1 << 24)


def get_random_float64() -> float:
    """A pseudo-random float in [0.0, 1.0)."""
    with _lock:
        return _require().getrandbits(53) / (1 << 53)
"""Deterministic tick-based entity-component world simulation."""

__version__ = "0.1.0"
"""Global seasonal calendar shared by systems."""

from __future__ import annotations

from dataclasses import dataclass

SEASON_DURATION = 3600
"""Ticks per season; 60 seconds of simulation at 60 TPS."""


@dataclass
class Calendar:
    """Tick count and current season; starts outside winter."""

    ticks: int = 0
    is_winter: bool = False
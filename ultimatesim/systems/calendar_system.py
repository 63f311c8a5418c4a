"""Advances the shared calendar and flips the season on boundaries."""

from __future__ import annotations

from ultimatesim.engine.calendar import SEASON_DURATION, Calendar
from ultimatesim.engine.ecs import World


class CalendarSystem:
    """Counts ticks on a shared Calendar and toggles winter every SEASON_DURATION ticks."""

    def __init__(self, calendar: Calendar | None) -> None:
        self.calendar = calendar

    def update(self, world: World) -> None:
        calendar = self.calendar
        if calendar is None:
            return
        calendar.ticks += 1
        if calendar.ticks % SEASON_DURATION == 0:
            calendar.is_winter = not calendar.is_winter
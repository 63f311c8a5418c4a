from ultimatesim.engine.calendar import SEASON_DURATION, Calendar


def test_new_calendar_starts_at_zero_outside_winter():
    calendar = Calendar()
    assert calendar.ticks == 0
    assert calendar.is_winter is False


def test_calendars_are_independent():
    first = Calendar()
    second = Calendar()
    first.ticks = SEASON_DURATION
    first.is_winter = True
    assert second == Calendar()
    assert first.ticks == 3600
"""Tests for month view helpers."""

from datetime import datetime

import pytz

from ram.services.calendar_grid import (
    events_on_day,
    month_grid,
    move_to_day,
    shift_month,
    sort_events,
)
from ram.storage.schemas import ScheduleEvent


def event(title, instant):
    return ScheduleEvent(title=title, time_label="All Day", instant=instant)


class TestMonthGrid:
    def test_leading_blanks(self):
        grid = month_grid(2026, 10)
        assert grid.leading_blanks == 4
        assert len(grid.days) == 31
        assert grid.weeks[0] == [None, None, None, None, 1, 2, 3]
        assert len(grid.weeks) == 5
        assert grid.weeks[-1] == [25, 26, 27, 28, 29, 30, 31]

    def test_month_starting_on_sunday(self):
        grid = month_grid(2026, 2)
        assert grid.leading_blanks == 0
        assert len(grid.weeks) == 4

    def test_leap_february(self):
        assert len(month_grid(2028, 2).days) == 29

    def test_shift_month(self):
        assert shift_month(2026, 1, -1) == (2025, 12)
        assert shift_month(2026, 12, 1) == (2027, 1)
        assert shift_month(2026, 10, 0) == (2026, 10)


class TestEventsOnDay:
    def setup_method(self):
        self.tz = pytz.timezone("America/New_York")

    def test_filters_by_local_date_and_sorts(self):
        late = event("Late", self.tz.localize(datetime(2026, 10, 19, 22, 0)))
        early = event("Early", self.tz.localize(datetime(2026, 10, 19, 8, 0)))
        other = event("Other", self.tz.localize(datetime(2026, 10, 20, 8, 0)))

        found = events_on_day([late, other, early], 2026, 10, 19, "America/New_York")
        assert [e.title for e in found] == ["Early", "Late"]

    def test_late_evening_is_not_next_day_in_utc(self):
        late = event("Late", self.tz.localize(datetime(2026, 10, 19, 22, 0)))
        assert events_on_day([late], 2026, 10, 20, "UTC") == [late]
        assert events_on_day([late], 2026, 10, 20, "America/New_York") == []

    def test_sort_events(self):
        a = event("A", pytz.utc.localize(datetime(2026, 10, 19, 9, 0)))
        b = event("B", pytz.utc.localize(datetime(2026, 10, 18, 9, 0)))
        assert sort_events([a, b]) == [b, a]


class TestMoveToDay:
    def test_keeps_time_of_day(self):
        instant = pytz.utc.localize(datetime(2026, 10, 19, 15, 30))
        moved = move_to_day(instant, 2026, 11, 2, "UTC")
        assert moved == pytz.utc.localize(datetime(2026, 11, 2, 15, 30))

    def test_keeps_local_time_across_dst(self):
        tz = pytz.timezone("America/New_York")
        instant = tz.localize(datetime(2026, 10, 30, 9, 0))
        moved = move_to_day(instant, 2026, 11, 6, "America/New_York")
        assert moved.astimezone(tz).hour == 9
        assert moved.utcoffset().total_seconds() == -5 * 3600

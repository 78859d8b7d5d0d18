"""Month-view helpers: grid layout, per-day filtering and drag-to-reschedule."""

import calendar
from dataclasses import dataclass, field
from datetime import date, datetime, time

import pytz

from ram.config import settings
from ram.services.formatting import sunday_weekday
from ram.storage.schemas import ScheduleEvent


@dataclass
class MonthGrid:
    """Sunday-first month layout: blank cells before day 1, then the days."""

    year: int
    month: int
    leading_blanks: int
    days: list[int] = field(default_factory=list)

    @property
    def weeks(self) -> list[list[int | None]]:
        cells: list[int | None] = [None] * self.leading_blanks + list(self.days)
        cells += [None] * (-len(cells) % 7)
        return [cells[i : i + 7] for i in range(0, len(cells), 7)]


def month_grid(year: int, month: int) -> MonthGrid:
    days_in_month = calendar.monthrange(year, month)[1]
    return MonthGrid(
        year=year,
        month=month,
        leading_blanks=sunday_weekday(date(year, month, 1)),
        days=list(range(1, days_in_month + 1)),
    )


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Previous/next month navigation."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def _local(instant: datetime, timezone: str | None) -> datetime:
    tz = pytz.timezone(timezone or settings.user_timezone)
    return instant.astimezone(tz)


def sort_events(events: list[ScheduleEvent]) -> list[ScheduleEvent]:
    return sorted(events, key=lambda event: event.instant)


def events_on_day(
    events: list[ScheduleEvent],
    year: int,
    month: int,
    day: int,
    timezone: str | None = None,
) -> list[ScheduleEvent]:
    """Events whose local calendar date is year-month-day, in time order."""
    target = date(year, month, day)
    return sort_events([e for e in events if _local(e.instant, timezone).date() == target])


def move_to_day(
    instant: datetime,
    year: int,
    month: int,
    day: int,
    timezone: str | None = None,
) -> datetime:
    """Move an instant to another day, keeping its local time of day."""
    tz = pytz.timezone(timezone or settings.user_timezone)
    local = instant.astimezone(tz)
    return tz.localize(datetime.combine(date(year, month, day), time(local.hour, local.minute)))

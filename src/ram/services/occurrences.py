"""Turns a scheduling intent into the events to write."""

from datetime import datetime, time, timedelta

import pytz

from ram.config import settings
from ram.services.formatting import sunday_weekday
from ram.services.intent import ScheduledActivity
from ram.storage.schemas import ScheduleEvent


def expand_occurrences(
    scheduling: ScheduledActivity,
    weeks: int | None = None,
    timezone: str | None = None,
) -> list[ScheduleEvent]:
    """Build the events for one scheduling request.

    A one-off request yields a single event at ``scheduling.instant``. A
    recurring request yields one event per weekday per week over the horizon,
    starting from the week of the resolved date, at the requested time of day.

    Args:
        scheduling: Parsed scheduling request.
        weeks: Number of weeks to materialize. Defaults to settings.recurrence_weeks.
        timezone: IANA name used to keep the wall-clock time stable across DST.
    """
    if not scheduling.is_recurring:
        return [
            ScheduleEvent(
                title=scheduling.activity,
                time_label=scheduling.time_label,
                instant=scheduling.instant,
            )
        ]

    tz = pytz.timezone(timezone or settings.user_timezone)
    local = scheduling.instant.astimezone(tz)
    start_date = local.date()
    time_of_day = time(local.hour, local.minute)
    horizon = settings.recurrence_weeks if weeks is None else weeks

    events = []
    for week in range(horizon):
        base = start_date + timedelta(days=7 * week)
        for weekday in scheduling.recurring_weekdays:
            distance = (weekday - sunday_weekday(base)) % 7
            target = base + timedelta(days=distance)
            events.append(
                ScheduleEvent(
                    title=scheduling.activity,
                    time_label=scheduling.time_label,
                    instant=tz.localize(datetime.combine(target, time_of_day)),
                    is_recurring_instance=True,
                )
            )
    return events

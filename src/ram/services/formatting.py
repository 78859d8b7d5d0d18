"""Display formatting for dates, times and durations."""

import re
from datetime import date, datetime

from ram.services import lexicon
from ram.services.intent import ALL_DAY

_CLOCK_LABEL = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*$")


def sunday_weekday(value: date) -> int:
    """Weekday index with 0=Sunday ... 6=Saturday."""
    return (value.weekday() + 1) % 7


def format_date(value: date | datetime | None, language: str = "en-US") -> str:
    """Short date such as "Mon, Oct 19" or "lun, 19 oct"."""
    if value is None:
        return ""
    locale = lexicon.locale_for(language)
    weekday = lexicon.WEEKDAY_NAMES_SHORT[locale][sunday_weekday(value)]
    month = lexicon.MONTH_NAMES_SHORT[locale][value.month - 1]
    if locale == "es":
        return f"{weekday}, {value.day} {month}"
    return f"{weekday}, {month} {value.day}"


def format_clock(hour: int, minute: int, language: str = "en-US", two_digit: bool = False) -> str:
    """Render a time of day: "3:30 PM" / "03:30 PM" in English, "15:30" in Spanish."""
    if lexicon.locale_for(language) == "es":
        return f"{hour:02d}:{minute:02d}"

    meridiem = "AM" if hour < 12 else "PM"
    display_hour = hour % 12 or 12
    hour_text = f"{display_hour:02d}" if two_digit else str(display_hour)
    return f"{hour_text}:{minute:02d} {meridiem}"


def format_time(label: str | None, language: str = "en-US") -> str:
    """Format a stored time label for display.

    Ranges and free-form labels ("3pm", "All Day") are shown as stored;
    "HH:MM" labels are rendered in the user's locale.
    """
    if not label:
        return ""
    if "-" in label or "to" in label or label == ALL_DAY:
        return label

    match = _CLOCK_LABEL.match(label)
    if match:
        hour, minute = int(match.group(1)), int(match.group(2))
        if hour < 24 and minute < 60:
            return format_clock(hour, minute, language)
    return label


def format_minutes(minutes: int) -> str:
    """Focus duration such as "1h 5m" or "25m"."""
    hours, remainder = divmod(int(minutes), 60)
    if hours > 0:
        return f"{hours}h {remainder}m"
    return f"{remainder}m"


def format_countdown(seconds: int) -> str:
    """Timer display "MM:SS"."""
    minutes, remainder = divmod(max(0, int(seconds)), 60)
    return f"{minutes:02d}:{remainder:02d}"

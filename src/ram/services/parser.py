import logging
import unicodedata
from datetime import date, datetime, time

import pytz

from ram.config import settings
from ram.services import lexicon
from ram.services.activity import ActivityExtractor
from ram.services.classifier import Classifier
from ram.services.formatting import format_clock
from ram.services.intent import ALL_DAY, ParsedIntent, ScheduledActivity
from ram.services.recurrence import RecurrenceExtractor
from ram.services.temporal import TemporalExtractor

logger = logging.getLogger(__name__)


class InvalidOverrideError(ValueError):
    """Raised when a manual date override is not an ISO-8601 date or date-time."""


class Parser:
    """Turns an English or Spanish chat message into a ParsedIntent.

    Date resolution depends on (text, manual_override, now); pass ``now`` to
    make results reproducible.
    """

    def __init__(
        self,
        timezone: str | None = None,
        language: str | None = None,
        default_activity: str | None = None,
    ):
        self.timezone = pytz.timezone(timezone or settings.user_timezone)
        self.language = language or settings.language
        self.default_activity = default_activity or settings.default_activity
        self.classifier = Classifier()
        self.temporal = TemporalExtractor()
        self.recurrence = RecurrenceExtractor()
        self.activity = ActivityExtractor(placeholder=self.default_activity)

    def parse(
        self,
        text: str,
        manual_override: str | None = None,
        now: datetime | None = None,
    ) -> ParsedIntent:
        original = unicodedata.normalize("NFC", text)

        classified = self.classifier.classify(original)
        if classified is not None:
            return classified

        folded = lexicon.fold(original)
        reference = self._reference_now(now)
        today = reference.date()

        time_match = self.temporal.extract_time(original, folded)
        recurrence = self.recurrence.extract(original, folded)

        consumed: list[tuple[int, int]] = []
        override_at: datetime | None = None
        override_has_time = False

        if manual_override:
            override_at, override_has_time = self._parse_override(manual_override)
            resolved_date: date = override_at.date()
            date_found = True
        else:
            date_match = self.temporal.extract_date(folded, today)
            date_found = date_match is not None
            resolved_date = date_match.value if date_match else today
            if date_match and date_match.has_span:
                consumed.append((date_match.start, date_match.end))

        if override_at is not None and override_has_time:
            hour, minute = override_at.hour, override_at.minute
            time_label = format_clock(hour, minute, self.language, two_digit=True)
        elif time_match is not None:
            hour, minute = time_match.hour, time_match.minute
            time_label = time_match.text
        else:
            hour, minute = 0, 0
            time_label = ALL_DAY

        if time_match is not None:
            consumed.append((time_match.start, time_match.end))
        if recurrence is not None:
            consumed.append((recurrence.start, recurrence.end))

        is_valid = time_match is not None or date_found or recurrence is not None
        if is_valid:
            activity = self.activity.extract(original, consumed)
        else:
            activity = self.default_activity

        instant = self.timezone.localize(datetime.combine(resolved_date, time(hour, minute)))

        scheduling = ScheduledActivity(
            activity=activity,
            time_label=time_label,
            instant=instant,
            is_recurring=recurrence is not None,
            recurring_weekdays=list(recurrence.weekdays) if recurrence else [],
            is_valid=is_valid,
        )
        logger.debug(f"Parsed scheduling intent: {scheduling.to_dict()}")
        return ParsedIntent.for_scheduling(scheduling, original)

    def _reference_now(self, now: datetime | None) -> datetime:
        if now is None:
            return datetime.now(self.timezone)
        if now.tzinfo is None:
            return self.timezone.localize(now)
        return now.astimezone(self.timezone)

    def _parse_override(self, value: str) -> tuple[datetime, bool]:
        """Parse a picker value such as "2026-03-05" or "2026-03-05T15:30"."""
        cleaned = value.strip()
        try:
            parsed = datetime.fromisoformat(cleaned)
        except ValueError as e:
            raise InvalidOverrideError(f"Invalid manual date override: {value!r}") from e

        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(self.timezone).replace(tzinfo=None)
        has_time = "T" in cleaned.upper() or " " in cleaned
        return parsed, has_time

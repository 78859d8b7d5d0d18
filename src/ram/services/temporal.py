"""Time-of-day and calendar-date extraction.

Both extractors work on the folded text (lowercase, accents stripped), whose
offsets match the NFC original, so matched spans can be cut out of the
original text later on.

Date rules are evaluated in order and the first rule that resolves wins:

1. tomorrow / mañana
2. today / hoy
3. day then month ("the 2nd of March", "2 de marzo")
4. month then day ("March 2nd")
5. numeric day/month ("2/3", "2-3"), always day first
6. preposition + month ("in March", "desde abril"), first of that month

Dates from rules 3-6 that fall before today are moved to next year.
"""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, timedelta

from ram.services import lexicon

logger = logging.getLogger(__name__)

_WORD = r"[^\W\d_]{3,}"
_CLOCK = r"(?<![\d:])\d{1,2}(?::\d{2})?\s?(?:am|pm)\b"

_ARTICLES = lexicon.alternation(lexicon.words(lexicon.DATE_ARTICLES))
_OF = lexicon.alternation(lexicon.words(lexicon.DATE_OF))
_ORDINALS = lexicon.alternation(lexicon.words(lexicon.ORDINAL_SUFFIXES))
_PREPOSITIONS = lexicon.alternation(lexicon.words(lexicon.MONTH_PREPOSITIONS))
_NOT_CLOCK = r"(?!\s?(?:am|pm)\b)(?!:\d)"

_NOT_MONTHS = frozenset(lexicon.words(lexicon.PLURAL_WEEKDAYS))


@dataclass
class TimeMatch:
    """A clock time found in the text."""

    text: str  # substring of the original text
    start: int
    end: int
    hour: int
    minute: int
    is_range: bool = False


@dataclass
class DateMatch:
    """A calendar date found in the text."""

    rule: str
    value: date
    start: int | None = None  # set only when the matched text is stripped
    end: int | None = None

    @property
    def has_span(self) -> bool:
        return self.start is not None and self.end is not None


@dataclass(frozen=True)
class DateRule:
    """One entry of the ordered date rule table."""

    name: str
    pattern: re.Pattern[str]
    resolve: Callable[[re.Match[str], date], date | None]
    strips_match: bool = True
    rolls_forward: bool = True


def parse_time_of_day(text: str) -> tuple[int, int] | None:
    """Convert a clock expression to (hour, minute) on a 24-hour clock.

    Handles "3pm", "12am", "10:30", "a las 5". Without an am/pm marker,
    hours 1-7 are read as afternoon/evening ("a las 3" is 15:00).
    Returns None for values that are not valid times.
    """
    cleaned = lexicon.fold(text).strip()
    cleaned = re.sub(r"\b(?:a las|las)\b", "", cleaned, count=1).strip()
    match = re.fullmatch(r"(\d{1,2})(?::(\d{2}))?\s*(am|pm)?", cleaned)
    if not match:
        return None

    hour = int(match.group(1))
    minute = int(match.group(2)) if match.group(2) else 0
    meridiem = match.group(3)

    if meridiem == "pm" and hour < 12:
        hour += 12
    elif meridiem == "am" and hour == 12:
        hour = 0
    elif meridiem is None and 0 < hour < 8:
        hour += 12

    if hour > 23 or minute > 59:
        return None
    return hour, minute


def _safe_date(year: int, month: int, day: int) -> date | None:
    try:
        return date(year, month, day)
    except ValueError:
        return None


def _month_of(word: str) -> int | None:
    if lexicon.fold(word) in _NOT_MONTHS:
        return None
    return lexicon.lookup(lexicon.MONTHS, word)


def _roll_forward(value: date, today: date) -> date:
    if value >= today:
        return value
    try:
        return value.replace(year=value.year + 1)
    except ValueError:
        # 29 February of a leap year rolls to the 28th
        return value.replace(year=value.year + 1, day=28)


def _relative(offset: int) -> Callable[[re.Match[str], date], date | None]:
    def resolve(match: re.Match[str], today: date) -> date | None:
        return today + timedelta(days=offset)

    return resolve


def _day_and_month(match: re.Match[str], today: date) -> date | None:
    month = _month_of(match.group("month"))
    if month is None:
        return None
    return _safe_date(today.year, month, int(match.group("day")))


def _numeric_day_month(match: re.Match[str], today: date) -> date | None:
    return _safe_date(today.year, int(match.group("month")), int(match.group("day")))


def _first_of_month(match: re.Match[str], today: date) -> date | None:
    month = _month_of(match.group("month"))
    if month is None:
        return None
    return date(today.year, month, 1)


def _relative_pattern(offset: int) -> re.Pattern[str]:
    entries = [
        lexicon.fold(word)
        for locale in lexicon.LOCALES
        for word, days in lexicon.RELATIVE_DAYS[locale].items()
        if days == offset
    ]
    return re.compile(r"\b" + lexicon.alternation(entries) + r"\b")


DATE_RULES: list[DateRule] = [
    DateRule(
        "tomorrow", _relative_pattern(1), _relative(1), strips_match=False, rolls_forward=False
    ),
    DateRule(
        "today", _relative_pattern(0), _relative(0), strips_match=False, rolls_forward=False
    ),
    DateRule(
        "day_month",
        re.compile(
            rf"(?:\b{_ARTICLES}\s*)?(?<![\d:])(?P<day>\d{{1,2}}){_NOT_CLOCK}"
            rf"(?:{_ORDINALS})?\s+(?:{_OF}\s+)?\b(?P<month>{_WORD})"
        ),
        _day_and_month,
    ),
    DateRule(
        "month_day",
        re.compile(
            rf"\b(?P<month>{_WORD})\s+(?:{_ARTICLES}\s*)?"
            rf"(?P<day>\d{{1,2}})(?!\d){_NOT_CLOCK}(?:{_ORDINALS}\b)?"
        ),
        _day_and_month,
    ),
    DateRule(
        "numeric",
        re.compile(r"(?<![\d/:-])(?P<day>\d{1,2})[/-](?P<month>\d{1,2})(?![\d/])"),
        _numeric_day_month,
    ),
    DateRule(
        "month_mention",
        re.compile(rf"\b{_PREPOSITIONS}\s+(?P<month>{_WORD})"),
        _first_of_month,
        strips_match=False,
    ),
]


class TemporalExtractor:
    """Finds the clock time and the calendar date mentioned in a message."""

    RANGE_PATTERN = re.compile(
        rf"(?P<start>{_CLOCK})\s*"
        + lexicon.alternation(lexicon.words(lexicon.TIME_RANGE_CONNECTORS))
        + rf"\s*(?P<end>{_CLOCK})"
    )
    TIME_PATTERN = re.compile(
        rf"{_CLOCK}"
        r"|(?<![\d:])\d{1,2}:\d{2}(?!\d)"
        rf"|\b{re.escape(lexicon.SPANISH_CLOCK_PREFIX)}\s+\d{{1,2}}(?::\d{{2}})?"
        r"(?:\s?(?:am|pm)\b)?(?![\d:])"
    )

    def __init__(self, rules: list[DateRule] | None = None):
        self.rules = rules if rules is not None else DATE_RULES

    def extract_time(self, original: str, folded: str) -> TimeMatch | None:
        """Find a time range first, then a single time."""
        for found in self.RANGE_PATTERN.finditer(folded):
            parsed = parse_time_of_day(found.group("start"))
            if parsed is not None:
                logger.debug(f"Time range matched: {found.group(0)!r}")
                return TimeMatch(
                    text=original[found.start() : found.end()],
                    start=found.start(),
                    end=found.end(),
                    hour=parsed[0],
                    minute=parsed[1],
                    is_range=True,
                )

        for found in self.TIME_PATTERN.finditer(folded):
            parsed = parse_time_of_day(found.group(0))
            if parsed is not None:
                logger.debug(f"Time matched: {found.group(0)!r}")
                return TimeMatch(
                    text=original[found.start() : found.end()],
                    start=found.start(),
                    end=found.end(),
                    hour=parsed[0],
                    minute=parsed[1],
                )
        return None

    def extract_date(self, folded: str, today: date) -> DateMatch | None:
        """Apply the date rules in order; the first resolvable match wins."""
        for rule in self.rules:
            for found in rule.pattern.finditer(folded):
                value = rule.resolve(found, today)
                if value is None:
                    continue
                if rule.rolls_forward:
                    value = _roll_forward(value, today)
                logger.debug(f"Date rule '{rule.name}' resolved {found.group(0)!r} to {value}")
                if rule.strips_match:
                    return DateMatch(rule.name, value, found.start(), found.end())
                return DateMatch(rule.name, value)
        return None

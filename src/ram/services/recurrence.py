"""Recurring weekday detection ("every Monday", "cada lunes a viernes", "Saturdays")."""

import logging
import re
from dataclasses import dataclass

from ram.services import lexicon

logger = logging.getLogger(__name__)

_WORD = r"[^\W\d_]{3,}"


def expand_weekday_range(start: int, end: int) -> list[int]:
    """Inclusive weekday sequence from start to end, wrapping past Saturday.

    >>> expand_weekday_range(5, 1)
    [5, 6, 0, 1]
    """
    days = [start]
    current = start
    while current != end:
        current = (current + 1) % 7
        days.append(current)
    return days


_WEEKDAY_SPELLINGS = frozenset(
    lexicon.words(lexicon.WEEKDAY_NAMES)
    + lexicon.words(lexicon.PLURAL_WEEKDAYS)
    + [lexicon.fold(key) for locale in lexicon.LOCALES for key in lexicon.WEEKDAYS[locale]]
)


def weekday_of(word: str) -> int | None:
    """Weekday index (0=Sunday) for word, or None.

    Month words that share a prefix with a weekday ("march" and "marzo" vs
    "martes") are not weekdays.
    """
    weekday = lexicon.lookup(lexicon.WEEKDAYS, word)
    if weekday is None:
        return None
    if lexicon.fold(word) not in _WEEKDAY_SPELLINGS and lexicon.lookup(lexicon.MONTHS, word):
        return None
    return weekday


@dataclass
class RecurrenceMatch:
    """Weekdays (0=Sunday) an event repeats on, plus the matched span."""

    weekdays: list[int]
    text: str
    start: int
    end: int
    is_range: bool = False


class RecurrenceExtractor:
    """Detects a weekday range first, then a single recurring weekday."""

    _MARKERS = lexicon.alternation(lexicon.words(lexicon.RECURRENCE_MARKERS))
    _WORD_CONNECTORS = lexicon.alternation(
        [c for c in lexicon.words(lexicon.RECURRENCE_RANGE_CONNECTORS) if c.isalpha()]
    )

    RANGE_PATTERN = re.compile(
        rf"\b{_MARKERS}\s+(?P<first>{_WORD})"
        rf"(?:\s*-\s*|\s+{_WORD_CONNECTORS}\s+)(?P<last>{_WORD})"
    )
    SINGLE_PATTERN = re.compile(
        rf"\b(?:{_MARKERS}\s+(?P<day>{_WORD})"
        rf"|(?P<plural>{lexicon.alternation(lexicon.words(lexicon.PLURAL_WEEKDAYS))})\b)"
    )

    def extract(self, original: str, folded: str) -> RecurrenceMatch | None:
        for found in self.RANGE_PATTERN.finditer(folded):
            first = weekday_of(found.group("first"))
            last = weekday_of(found.group("last"))
            if first is None or last is None:
                continue
            logger.debug(f"Recurring range matched: {found.group(0)!r}")
            return RecurrenceMatch(
                weekdays=expand_weekday_range(first, last),
                text=original[found.start() : found.end()],
                start=found.start(),
                end=found.end(),
                is_range=True,
            )

        for found in self.SINGLE_PATTERN.finditer(folded):
            weekday = weekday_of(found.group("day") or found.group("plural"))
            if weekday is None:
                continue
            logger.debug(f"Recurring weekday matched: {found.group(0)!r}")
            return RecurrenceMatch(
                weekdays=[weekday],
                text=original[found.start() : found.end()],
                start=found.start(),
                end=found.end(),
            )
        return None

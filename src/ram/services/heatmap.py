"""Yearly focus heatmap: minutes studied per day bucketed into intensity levels."""

import math
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum

from ram.services import lexicon
from ram.services.formatting import sunday_weekday
from ram.storage.schemas import FocusLog


class HeatLevel(Enum):
    """Intensity buckets; values are the colour tokens used by the UI."""

    NONE = "slate-800"
    LOW = "emerald-900"
    MEDIUM = "emerald-700"
    HIGH = "emerald-500"
    PEAK = "emerald-400"

    @property
    def color(self) -> str:
        return self.value


# (exclusive upper bound in minutes, level), checked in order
HEAT_THRESHOLDS = (
    (30, HeatLevel.LOW),
    (60, HeatLevel.MEDIUM),
    (120, HeatLevel.HIGH),
)


def heat_level(minutes: int | None) -> HeatLevel:
    if not minutes or minutes <= 0:
        return HeatLevel.NONE
    for bound, level in HEAT_THRESHOLDS:
        if minutes < bound:
            return level
    return HeatLevel.PEAK


def aggregate_focus_logs(entries: Iterable[FocusLog]) -> dict[str, int]:
    """Total focus minutes per date key."""
    totals: dict[str, int] = defaultdict(int)
    for entry in entries:
        totals[entry.date_key] += entry.minutes
    return dict(totals)


@dataclass
class HeatCell:
    date: date
    date_key: str
    minutes: int
    is_future: bool

    @property
    def level(self) -> HeatLevel:
        return heat_level(self.minutes)


def build_year_grid(logs: dict[str, int], year: int, today: date) -> list[list[HeatCell | None]]:
    """Week columns (Sunday first) covering ``year``.

    Cells outside the year are None. Trailing weeks that hold only blanks or
    future days are dropped, so the current year ends at the current week.
    """
    first = date(year, 1, 1)
    last = date(year, 12, 31)
    week_count = math.ceil((last - first).days / 7)
    start = first - timedelta(days=sunday_weekday(first))

    grid: list[list[HeatCell | None]] = []
    for week in range(week_count + 1):
        cells: list[HeatCell | None] = []
        for offset in range(7):
            current = start + timedelta(days=week * 7 + offset)
            if current.year != year:
                cells.append(None)
                continue
            key = current.isoformat()
            cells.append(
                HeatCell(
                    date=current,
                    date_key=key,
                    minutes=logs.get(key, 0),
                    is_future=current > today and current.year == today.year,
                )
            )
        grid.append(cells)

    while grid and all(cell is None or cell.is_future for cell in grid[-1]):
        grid.pop()
    return grid


def month_labels(grid: list[list[HeatCell | None]], language: str = "en-US") -> list[tuple[int, str]]:
    """(week index, short month name) wherever a week's first cell starts a new month."""
    names = lexicon.MONTH_NAMES_SHORT[lexicon.locale_for(language)]
    labels = []
    current_month = None
    for index, week in enumerate(grid):
        first_cell = week[0] if week else None
        if first_cell is not None and first_cell.date.month != current_month:
            current_month = first_cell.date.month
            labels.append((index, names[current_month - 1]))
    return labels

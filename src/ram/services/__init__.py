"""Ram services module.

Provides the command parser and the helpers built on its output: occurrence
expansion, replies, message processing, the focus timer and calendar/heatmap
views. Imports are lazy so importing one service doesn't load the rest.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any

_EXPORTS: dict[str, tuple[str, str]] = {
    # Intent
    "ParsedIntent": ("ram.services.intent", "ParsedIntent"),
    "ScheduledActivity": ("ram.services.intent", "ScheduledActivity"),
    "IntentKind": ("ram.services.intent", "IntentKind"),
    "Command": ("ram.services.intent", "Command"),
    "ConversationType": ("ram.services.intent", "ConversationType"),
    # Parser
    "Parser": ("ram.services.parser", "Parser"),
    "InvalidOverrideError": ("ram.services.parser", "InvalidOverrideError"),
    "Classifier": ("ram.services.classifier", "Classifier"),
    "TemporalExtractor": ("ram.services.temporal", "TemporalExtractor"),
    "parse_time_of_day": ("ram.services.temporal", "parse_time_of_day"),
    "RecurrenceExtractor": ("ram.services.recurrence", "RecurrenceExtractor"),
    "expand_weekday_range": ("ram.services.recurrence", "expand_weekday_range"),
    "ActivityExtractor": ("ram.services.activity", "ActivityExtractor"),
    # Scheduling
    "expand_occurrences": ("ram.services.occurrences", "expand_occurrences"),
    "MessageProcessor": ("ram.services.processor", "MessageProcessor"),
    "ProcessResult": ("ram.services.processor", "ProcessResult"),
    # Formatting
    "format_date": ("ram.services.formatting", "format_date"),
    "format_time": ("ram.services.formatting", "format_time"),
    "format_minutes": ("ram.services.formatting", "format_minutes"),
    "format_countdown": ("ram.services.formatting", "format_countdown"),
    # Focus timer and heatmap
    "FocusTimer": ("ram.services.focus_timer", "FocusTimer"),
    "TimerMode": ("ram.services.focus_timer", "TimerMode"),
    "HeatLevel": ("ram.services.heatmap", "HeatLevel"),
    "heat_level": ("ram.services.heatmap", "heat_level"),
    "build_year_grid": ("ram.services.heatmap", "build_year_grid"),
    "aggregate_focus_logs": ("ram.services.heatmap", "aggregate_focus_logs"),
    # Calendar
    "month_grid": ("ram.services.calendar_grid", "month_grid"),
    "events_on_day": ("ram.services.calendar_grid", "events_on_day"),
    "move_to_day": ("ram.services.calendar_grid", "move_to_day"),
}

__all__ = sorted(_EXPORTS)


def __getattr__(name: str) -> Any:
    if name not in _EXPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    module_name, attr_name = _EXPORTS[name]
    module = import_module(module_name)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value


def __dir__() -> list[str]:
    return sorted(list(globals()) + __all__)

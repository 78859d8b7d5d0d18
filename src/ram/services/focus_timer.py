"""Pomodoro study timer.

Alternates a focus phase (25 minutes by default) with a break (5 minutes).
The timer is driven by ``tick``; whoever owns the clock calls it once per
second while the timer runs.
"""

import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum

from ram.config import settings
from ram.services.formatting import format_countdown
from ram.storage.schemas import FocusLog

logger = logging.getLogger(__name__)


class TimerMode(str, Enum):
    FOCUS = "focus"
    BREAK = "break"


@dataclass
class PhaseCompleted:
    """Emitted when a phase reaches zero."""

    finished: TimerMode
    next_mode: TimerMode
    focus_log: FocusLog | None = None  # set when a focus phase finished


class FocusTimer:
    def __init__(self, focus_minutes: int | None = None, break_minutes: int | None = None):
        self.focus_minutes = focus_minutes or settings.focus_minutes
        self.break_minutes = break_minutes or settings.break_minutes
        self.mode = TimerMode.FOCUS
        self.seconds_left = self.focus_minutes * 60
        self.is_running = False
        self.sessions_completed = 0

    def _duration(self, mode: TimerMode) -> int:
        minutes = self.focus_minutes if mode is TimerMode.FOCUS else self.break_minutes
        return minutes * 60

    @property
    def remaining_label(self) -> str:
        return format_countdown(self.seconds_left)

    def start(self) -> None:
        if self.seconds_left > 0:
            self.is_running = True

    def pause(self) -> None:
        self.is_running = False

    def toggle(self) -> None:
        if self.is_running:
            self.pause()
        else:
            self.start()

    def reset(self, mode: TimerMode | None = None) -> None:
        """Stop and rewind the current phase, or switch to ``mode``."""
        self.is_running = False
        if mode is not None:
            self.mode = mode
        self.seconds_left = self._duration(self.mode)

    def tick(self, seconds: int = 1, today: date | None = None) -> PhaseCompleted | None:
        """Advance a running timer. Returns the completion when a phase ends."""
        if not self.is_running:
            return None

        self.seconds_left = max(0, self.seconds_left - seconds)
        if self.seconds_left > 0:
            return None

        self.is_running = False
        finished = self.mode
        if finished is TimerMode.FOCUS:
            self.sessions_completed += 1
            focus_log = FocusLog(
                date_key=(today or date.today()).isoformat(),
                minutes=self.focus_minutes,
            )
            self.reset(TimerMode.BREAK)
            logger.info(f"Focus session {self.sessions_completed} complete")
            return PhaseCompleted(finished, TimerMode.BREAK, focus_log)

        self.reset(TimerMode.FOCUS)
        logger.info("Break complete")
        return PhaseCompleted(finished, TimerMode.FOCUS)

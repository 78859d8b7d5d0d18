"""Persistence interface the assistant writes through.

The real backend (a hosted document database with live subscriptions) lives
outside this package; anything implementing ``EventStore`` can be plugged into
``MessageProcessor``.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from ram.storage.schemas import FocusLog, ScheduleEvent


class StoreError(Exception):
    """Raised by stores when a read or write fails."""


class EventNotFoundError(StoreError):
    """Raised when an event id does not exist."""


class EventStore(ABC):
    """Per-user collections of schedule events and focus logs, plus the profile."""

    @abstractmethod
    async def add_events(self, events: list[ScheduleEvent]) -> list[str]:
        """Write events in one batch and return their ids."""

    @abstractmethod
    async def list_events(self) -> list[ScheduleEvent]:
        """Return all events ordered by instant."""

    @abstractmethod
    async def update_instant(self, event_id: str, instant: datetime) -> ScheduleEvent:
        """Move an event and return the updated record."""

    @abstractmethod
    async def delete_event(self, event_id: str) -> None: ...

    @abstractmethod
    async def delete_all(self) -> int:
        """Delete every event and return how many were removed."""

    @abstractmethod
    async def save_nickname(self, nickname: str) -> None: ...

    @abstractmethod
    async def load_nickname(self) -> str | None: ...

    @abstractmethod
    async def add_focus_log(self, entry: FocusLog) -> str: ...

    @abstractmethod
    async def list_focus_logs(self) -> list[FocusLog]: ...

import logging
from datetime import datetime

from ram.storage.base import EventNotFoundError, EventStore
from ram.storage.schemas import FocusLog, ScheduleEvent, UserProfile

logger = logging.getLogger(__name__)


class InMemoryEventStore(EventStore):
    """Process-local store used by the CLI and tests."""

    def __init__(self) -> None:
        self._events: dict[str, ScheduleEvent] = {}
        self._focus_logs: list[FocusLog] = []
        self._profile = UserProfile()

    async def add_events(self, events: list[ScheduleEvent]) -> list[str]:
        for event in events:
            self._events[event.id] = event
        logger.debug(f"Stored {len(events)} events")
        return [event.id for event in events]

    async def list_events(self) -> list[ScheduleEvent]:
        return sorted(self._events.values(), key=lambda event: event.instant)

    async def update_instant(self, event_id: str, instant: datetime) -> ScheduleEvent:
        event = self._events.get(event_id)
        if event is None:
            raise EventNotFoundError(f"Event not found: {event_id}")
        updated = event.model_copy(update={"instant": instant})
        self._events[event_id] = updated
        return updated

    async def delete_event(self, event_id: str) -> None:
        if self._events.pop(event_id, None) is None:
            raise EventNotFoundError(f"Event not found: {event_id}")

    async def delete_all(self) -> int:
        count = len(self._events)
        self._events.clear()
        return count

    async def save_nickname(self, nickname: str) -> None:
        self._profile = self._profile.model_copy(update={"nickname": nickname})

    async def load_nickname(self) -> str | None:
        return self._profile.nickname

    async def add_focus_log(self, entry: FocusLog) -> str:
        self._focus_logs.append(entry)
        return entry.id

    async def list_focus_logs(self) -> list[FocusLog]:
        return list(self._focus_logs)

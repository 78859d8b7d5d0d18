from ram.storage.base import EventNotFoundError, EventStore, StoreError
from ram.storage.memory import InMemoryEventStore
from ram.storage.schemas import FocusLog, ScheduleEvent, UserProfile

__all__ = [
    "EventStore",
    "EventNotFoundError",
    "StoreError",
    "InMemoryEventStore",
    "ScheduleEvent",
    "FocusLog",
    "UserProfile",
]

import uuid
from datetime import UTC, datetime

from pydantic import BaseModel, Field, field_validator


def generate_id() -> str:
    return str(uuid.uuid4())


class ScheduleEvent(BaseModel):
    """One calendar entry. Recurring requests are stored as one event per occurrence."""

    id: str = Field(default_factory=generate_id)
    title: str
    time_label: str
    instant: datetime
    has_asked_follow_up: bool = False
    is_recurring_instance: bool = False
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class FocusLog(BaseModel):
    """A completed focus session, keyed by local calendar day."""

    id: str = Field(default_factory=generate_id)
    date_key: str  # YYYY-MM-DD
    minutes: int
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @field_validator("date_key")
    @classmethod
    def _check_date_key(cls, value: str) -> str:
        datetime.strptime(value, "%Y-%m-%d")
        return value

    @field_validator("minutes")
    @classmethod
    def _check_minutes(cls, value: int) -> int:
        if value < 0:
            raise ValueError("minutes must not be negative")
        return value


class UserProfile(BaseModel):
    nickname: str | None = None

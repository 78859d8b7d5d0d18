"""Structured intent produced by the command parser."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class IntentKind(Enum):
    """Top-level classification of an utterance."""

    COMMAND = "command"
    CONVERSATION = "conversation"
    SCHEDULING = "scheduling"


class Command(Enum):
    """Administrative commands. Acting on NUKE_DATABASE requires admin mode."""

    ACTIVATE_ADMIN = "activate_admin"
    DEACTIVATE_ADMIN = "deactivate_admin"
    NUKE_DATABASE = "nuke_database"


class ConversationType(Enum):
    """Small-talk categories handled without touching the calendar."""

    SET_NICKNAME = "set_nickname"
    GREETING = "greeting"
    HELP = "help"
    STATUS = "status"
    GRATITUDE = "gratitude"


ALL_DAY = "All Day"


@dataclass
class ScheduledActivity:
    """Scheduling request extracted from free text.

    recurring_weekdays uses 0=Sunday ... 6=Saturday and is non-empty
    exactly when is_recurring is set.
    """

    activity: str
    time_label: str
    instant: datetime
    is_recurring: bool = False
    recurring_weekdays: list[int] = field(default_factory=list)
    is_valid: bool = False

    @property
    def is_all_day(self) -> bool:
        return self.time_label == ALL_DAY

    def to_dict(self) -> dict[str, Any]:
        return {
            "activity": self.activity,
            "time_label": self.time_label,
            "instant": self.instant.isoformat(),
            "is_recurring": self.is_recurring,
            "recurring_weekdays": list(self.recurring_weekdays),
            "is_valid": self.is_valid,
        }


@dataclass
class ParsedIntent:
    """Result of parsing one utterance. Exactly one payload is populated."""

    kind: IntentKind
    raw_text: str = ""
    command: Command | None = None
    conversation: ConversationType | None = None
    nickname: str | None = None
    scheduling: ScheduledActivity | None = None

    @classmethod
    def for_command(cls, command: Command, raw_text: str) -> "ParsedIntent":
        return cls(kind=IntentKind.COMMAND, command=command, raw_text=raw_text)

    @classmethod
    def for_conversation(
        cls,
        conversation: ConversationType,
        raw_text: str,
        nickname: str | None = None,
    ) -> "ParsedIntent":
        return cls(
            kind=IntentKind.CONVERSATION,
            conversation=conversation,
            nickname=nickname,
            raw_text=raw_text,
        )

    @classmethod
    def for_scheduling(cls, scheduling: ScheduledActivity, raw_text: str) -> "ParsedIntent":
        return cls(kind=IntentKind.SCHEDULING, scheduling=scheduling, raw_text=raw_text)

    @property
    def is_command(self) -> bool:
        return self.kind is IntentKind.COMMAND

    @property
    def is_conversation(self) -> bool:
        return self.kind is IntentKind.CONVERSATION

    @property
    def is_scheduling(self) -> bool:
        return self.kind is IntentKind.SCHEDULING

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable view of the intent."""
        data: dict[str, Any] = {"kind": self.kind.value, "raw_text": self.raw_text}
        if self.command is not None:
            data["command"] = self.command.value
        if self.conversation is not None:
            data["conversation"] = self.conversation.value
        if self.nickname is not None:
            data["nickname"] = self.nickname
        if self.scheduling is not None:
            data["scheduling"] = self.scheduling.to_dict()
        return data

"""Message processor for Ram.

Handles one chat message end to end:
1. Parse the text (plus an optional date picker value) into an intent
2. Apply admin commands and nickname changes to session state
3. Expand scheduling requests into events and write them to the store
4. Build the chat reply in the user's language
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime

from ram.config import settings
from ram.sentry import add_breadcrumb, capture_exception
from ram.services.calendar_grid import move_to_day
from ram.services.focus_timer import PhaseCompleted
from ram.services.formatting import format_date
from ram.services.intent import Command, ConversationType, ParsedIntent
from ram.services.occurrences import expand_occurrences
from ram.services.parser import Parser
from ram.services.replies import (
    capitalize_name,
    conversation_reply,
    reply,
    scheduled_reply,
    welcome_reply,
)
from ram.storage import EventStore, InMemoryEventStore, StoreError

logger = logging.getLogger(__name__)


@dataclass
class ProcessResult:
    response: str
    intent: ParsedIntent | None = None
    event_ids: list[str] = field(default_factory=list)
    understood: bool = True


class MessageProcessor:
    def __init__(
        self,
        store: EventStore | None = None,
        parser: Parser | None = None,
        language: str | None = None,
        timezone: str | None = None,
    ) -> None:
        self.language = language or settings.language
        self.timezone = timezone or settings.user_timezone
        self.store = store if store is not None else InMemoryEventStore()
        self.parser = parser or Parser(timezone=self.timezone, language=self.language)
        self.is_admin = False
        self.nickname: str | None = None

    async def start_session(self) -> str:
        """Load the stored nickname and return the welcome message."""
        self.nickname = await self.store.load_nickname()
        return welcome_reply(self.nickname, self.language)

    async def process(
        self,
        text: str,
        manual_override: str | None = None,
        now: datetime | None = None,
    ) -> ProcessResult | None:
        """Process an incoming message.

        Args:
            text: Message text (typed or transcribed)
            manual_override: Date picker value, "YYYY-MM-DD" or "YYYY-MM-DDTHH:MM"
            now: Reference time for relative dates. Defaults to the current time.

        Returns:
            ProcessResult with the reply, or None for blank input
        """
        if not text or not text.strip():
            return None

        parsed = self.parser.parse(text.strip(), manual_override=manual_override, now=now)
        add_breadcrumb(f"Parsed message as {parsed.kind.value}", category="parser")

        if parsed.is_command:
            return await self._handle_command(parsed)
        if parsed.is_conversation:
            return await self._handle_conversation(parsed)
        return await self._handle_scheduling(parsed)

    async def _handle_command(self, parsed: ParsedIntent) -> ProcessResult:
        if parsed.command is Command.ACTIVATE_ADMIN:
            self.is_admin = True
            logger.info("Admin mode enabled")
            return ProcessResult(reply("admin_on", self.language), intent=parsed)

        if parsed.command is Command.DEACTIVATE_ADMIN:
            self.is_admin = False
            logger.info("Admin mode disabled")
            return ProcessResult(reply("admin_off", self.language), intent=parsed)

        if not self.is_admin:
            logger.warning("Database wipe requested outside admin mode")
            return ProcessResult(
                reply("admin_required", self.language), intent=parsed, understood=False
            )

        try:
            count = await self.store.delete_all()
        except StoreError as e:
            logger.exception("Failed to delete events")
            capture_exception(e)
            raise
        logger.info(f"Deleted {count} events")
        return ProcessResult(reply("database_wiped", self.language, count=count), intent=parsed)

    async def _handle_conversation(self, parsed: ParsedIntent) -> ProcessResult:
        if parsed.conversation is ConversationType.SET_NICKNAME:
            name = capitalize_name(parsed.nickname or "")
            try:
                await self.store.save_nickname(name)
            except StoreError as e:
                logger.exception("Failed to save nickname")
                capture_exception(e)
                raise
            self.nickname = name
            return ProcessResult(
                conversation_reply(parsed.conversation, self.language, nickname=name),
                intent=parsed,
            )

        conversation = parsed.conversation or ConversationType.HELP
        return ProcessResult(
            conversation_reply(conversation, self.language, nickname=self.nickname),
            intent=parsed,
        )

    async def _handle_scheduling(self, parsed: ParsedIntent) -> ProcessResult:
        scheduling = parsed.scheduling
        if scheduling is None or not scheduling.is_valid:
            return ProcessResult(
                reply("not_understood", self.language), intent=parsed, understood=False
            )

        events = expand_occurrences(scheduling, timezone=self.timezone)
        try:
            event_ids = await self.store.add_events(events)
        except StoreError as e:
            logger.exception("Failed to save scheduled events")
            capture_exception(e)
            raise

        logger.info(f"Scheduled {scheduling.activity!r} ({len(event_ids)} events)")
        if scheduling.is_recurring:
            response = reply("scheduled_recurring", self.language)
        else:
            response = scheduled_reply(
                scheduling.activity, scheduling.instant, scheduling.time_label, self.language
            )
        return ProcessResult(response, intent=parsed, event_ids=event_ids)

    async def reschedule(self, event_id: str, year: int, month: int, day: int) -> ProcessResult:
        """Move an event to another day (drag and drop), keeping its time."""
        events = {event.id: event for event in await self.store.list_events()}
        event = events.get(event_id)
        if event is None:
            return ProcessResult(reply("not_understood", self.language), understood=False)

        new_instant = move_to_day(event.instant, year, month, day, self.timezone)
        try:
            updated = await self.store.update_instant(event_id, new_instant)
        except StoreError as e:
            logger.exception("Reschedule failed")
            capture_exception(e)
            raise

        return ProcessResult(
            reply(
                "moved",
                self.language,
                title=updated.title,
                date=format_date(updated.instant, self.language),
            ),
            event_ids=[updated.id],
        )

    async def record_phase(self, completed: PhaseCompleted) -> str:
        """Persist a finished focus session and return the notification text."""
        if completed.focus_log is None:
            return reply("break_done", self.language)

        try:
            await self.store.add_focus_log(completed.focus_log)
        except StoreError as e:
            logger.exception("Failed to save focus log")
            capture_exception(e)
            raise
        return reply("focus_done", self.language)

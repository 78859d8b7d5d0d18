"""Command and small-talk classification.

Runs before any scheduling extraction. Checks are evaluated in a fixed order
and the first hit wins:

1. Admin phrases ("ram sudo mode", "ram exit sudo", "ram nuke database")
2. Nickname requests ("call me ...", "mi nombre es ...")
3. Greetings, unless the message carries a digit or mentions meet/gym
4. Help, status and gratitude phrases
"""

import logging
import re
import unicodedata
from collections.abc import Callable
from dataclasses import dataclass

from ram.services import lexicon
from ram.services.intent import Command, ConversationType, ParsedIntent

logger = logging.getLogger(__name__)


def _phrase_pattern(entries: list[str]) -> re.Pattern[str]:
    return re.compile(r"\b" + lexicon.alternation(entries) + r"\b")


@dataclass(frozen=True)
class ClassifierRule:
    """A named check that either classifies the text or passes."""

    name: str
    match: Callable[[str, str], ParsedIntent | None]


class Classifier:
    """Classifies commands and conversation before date extraction."""

    NICKNAME_TRIGGERS = lexicon.words(lexicon.NICKNAME_TRIGGERS)
    NICKNAME_TRIGGER_PATTERN = re.compile(lexicon.alternation(NICKNAME_TRIGGERS))
    GREETING_PATTERN = _phrase_pattern(lexicon.words(lexicon.GREETINGS))
    HELP_PATTERN = _phrase_pattern(lexicon.words(lexicon.HELP_REQUESTS))
    STATUS_PATTERN = _phrase_pattern(lexicon.words(lexicon.STATUS_CHECKS))
    GRATITUDE_PATTERN = _phrase_pattern(lexicon.words(lexicon.GRATITUDE))
    TRAILING_PUNCTUATION = ".,!"

    def __init__(self) -> None:
        self.rules: list[ClassifierRule] = [
            ClassifierRule("activate_admin", self._admin(Command.ACTIVATE_ADMIN)),
            ClassifierRule("deactivate_admin", self._admin(Command.DEACTIVATE_ADMIN)),
            ClassifierRule("nuke_database", self._admin(Command.NUKE_DATABASE)),
            ClassifierRule("set_nickname", self._nickname),
            ClassifierRule("greeting", self._greeting),
            ClassifierRule(
                "help", self._conversation(self.HELP_PATTERN, ConversationType.HELP)
            ),
            ClassifierRule(
                "status", self._conversation(self.STATUS_PATTERN, ConversationType.STATUS)
            ),
            ClassifierRule(
                "gratitude",
                self._conversation(self.GRATITUDE_PATTERN, ConversationType.GRATITUDE),
            ),
        ]

    def classify(self, text: str) -> ParsedIntent | None:
        """Return a command/conversation intent, or None to continue parsing."""
        original = unicodedata.normalize("NFC", text)
        folded = lexicon.fold(original)
        for rule in self.rules:
            intent = rule.match(original, folded)
            if intent is not None:
                logger.debug(f"Classifier rule '{rule.name}' matched")
                return intent
        return None

    def _admin(self, command: Command) -> Callable[[str, str], ParsedIntent | None]:
        phrase = lexicon.ADMIN_PHRASES[command.value]

        def match(original: str, folded: str) -> ParsedIntent | None:
            if phrase in folded:
                return ParsedIntent.for_command(command, original)
            return None

        return match

    def _nickname(self, original: str, folded: str) -> ParsedIntent | None:
        stripped = folded.lstrip()
        if not any(stripped.startswith(trigger) for trigger in self.NICKNAME_TRIGGERS):
            return None

        # Offsets in the folded text line up with the NFC original
        pieces = []
        position = 0
        for found in self.NICKNAME_TRIGGER_PATTERN.finditer(folded):
            pieces.append(original[position : found.start()])
            position = found.end()
        pieces.append(original[position:])

        name = "".join(pieces).strip().rstrip(self.TRAILING_PUNCTUATION).strip()
        if not name:
            return None
        return ParsedIntent.for_conversation(
            ConversationType.SET_NICKNAME, original, nickname=name
        )

    def _greeting(self, original: str, folded: str) -> ParsedIntent | None:
        if not self.GREETING_PATTERN.search(folded):
            return None
        if any(ch.isdigit() for ch in folded):
            return None
        if any(blocker in folded for blocker in lexicon.GREETING_BLOCKERS):
            return None
        return ParsedIntent.for_conversation(ConversationType.GREETING, original)

    @staticmethod
    def _conversation(
        pattern: re.Pattern[str], conversation: ConversationType
    ) -> Callable[[str, str], ParsedIntent | None]:
        def match(original: str, folded: str) -> ParsedIntent | None:
            if pattern.search(folded):
                return ParsedIntent.for_conversation(conversation, original)
            return None

        return match

"""Activity title extraction.

The title is whatever is left of the message once the recognised time, date
and recurrence text is cut out and the filler words are stripped. Cleanup is
an ordered list of (pattern, replacement) steps; later steps see the output of
earlier ones, so the order below is significant.
"""

import logging
import re
import unicodedata
from dataclasses import dataclass

from ram.services import lexicon

logger = logging.getLogger(__name__)

DEFAULT_ACTIVITY = "Meeting"


@dataclass(frozen=True)
class CleanupStep:
    """A single substitution in the cleanup pipeline."""

    name: str
    pattern: re.Pattern[str]
    replacement: str = ""

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


def _word_step(name: str, fragments: list[str], replacement: str = "") -> CleanupStep:
    body = "|".join(lexicon.accent_insensitive(lexicon.fold(f)) for f in fragments)
    return CleanupStep(name, re.compile(rf"\b(?:{body})\b", re.IGNORECASE), replacement)


def build_cleanup_steps() -> list[CleanupStep]:
    """Relative-day keywords and leftover recurrence markers, then each locale's filler
    categories, then punctuation.
    """
    relative_words = [
        word for locale in lexicon.LOCALES for word in lexicon.RELATIVE_DAYS[locale]
    ]
    steps = [
        _word_step("relative_days", relative_words),
        _word_step("recurrence_markers", lexicon.words(lexicon.RECURRENCE_MARKERS)),
    ]

    for locale in lexicon.LOCALES:
        categories = lexicon.CLEANUP_LEXICON[locale]
        for category, replacement in lexicon.CLEANUP_ORDER:
            steps.append(
                _word_step(f"{locale}:{category}", list(categories[category]), replacement)
            )

    steps.append(CleanupStep("punctuation", re.compile(r"[;,.?!]")))
    steps.append(CleanupStep("whitespace", re.compile(r"\s+"), " "))
    return steps


CLEANUP_STEPS = build_cleanup_steps()


def cut_spans(text: str, spans: list[tuple[int, int]]) -> str:
    """Remove the given [start, end) spans from text; overlapping spans merge."""
    merged: list[tuple[int, int]] = []
    for start, end in sorted(spans):
        if merged and start <= merged[-1][1]:
            merged[-1] = (merged[-1][0], max(end, merged[-1][1]))
        else:
            merged.append((start, end))

    pieces = []
    position = 0
    for start, end in merged:
        pieces.append(text[position:start])
        position = end
    pieces.append(text[position:])
    return " ".join(pieces)


class ActivityExtractor:
    """Derives an event title from the leftover words of a message."""

    def __init__(
        self,
        placeholder: str = DEFAULT_ACTIVITY,
        steps: list[CleanupStep] | None = None,
    ):
        self.placeholder = placeholder
        self.steps = steps if steps is not None else CLEANUP_STEPS

    def clean(self, text: str) -> str:
        """Run the cleanup pipeline without the placeholder/capitalization."""
        for step in self.steps:
            text = step.apply(text)
        return text.strip()

    def extract(self, text: str, consumed: list[tuple[int, int]] | None = None) -> str:
        """Return the activity title for text.

        Args:
            text: The message as typed (any case).
            consumed: Spans of the NFC-normalized text already recognised as
                time, date or recurrence.
        """
        original = unicodedata.normalize("NFC", text)
        remaining = cut_spans(original, consumed or [])
        activity = self.clean(remaining)

        if not activity:
            activity = self.placeholder
        activity = activity[0].upper() + activity[1:]
        logger.debug(f"Activity extracted: {activity!r}")
        return activity

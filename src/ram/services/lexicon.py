"""Bilingual keyword tables used by the command parser.

Every table maps a locale tag to its words so a new language only needs new
rows here. Entries are written naturally (with accents); patterns are built
from their folded form, see ``fold``.
"""

import re
import unicodedata
from collections.abc import Iterable

LOCALES = ("en", "es")
DEFAULT_LOCALE = "en"

# Classifier
ADMIN_PHRASES = {
    "activate_admin": "ram sudo mode",
    "deactivate_admin": "ram exit sudo",
    "nuke_database": "ram nuke database",
}

NICKNAME_TRIGGERS: dict[str, tuple[str, ...]] = {
    "en": ("call me", "my name is"),
    "es": ("llámame", "mi nombre es"),
}

GREETINGS: dict[str, tuple[str, ...]] = {
    "en": ("hi", "hello", "hey", "yo", "sup", "greetings"),
    "es": ("hola", "buenas"),
}

# Words that mean the "greeting" is really a scheduling request
GREETING_BLOCKERS = ("meet", "gym")

HELP_REQUESTS: dict[str, tuple[str, ...]] = {
    "en": ("help", "what can you do", "guide"),
    "es": ("ayuda", "qué puedes hacer"),
}

STATUS_CHECKS: dict[str, tuple[str, ...]] = {
    "en": ("how are you", "what's up"),
    "es": ("cómo estás", "qué tal"),
}

GRATITUDE: dict[str, tuple[str, ...]] = {
    "en": ("thanks", "thank you", "thx"),
    "es": ("gracias",),
}

# Temporal
RELATIVE_DAYS: dict[str, dict[str, int]] = {
    "en": {"tomorrow": 1, "today": 0},
    "es": {"mañana": 1, "hoy": 0},
}

MONTHS: dict[str, dict[str, int]] = {
    "en": {
        "jan": 1, "feb": 2, "mar": 3, "apr": 4, "may": 5, "jun": 6,
        "jul": 7, "aug": 8, "sep": 9, "oct": 10, "nov": 11, "dec": 12,
    },
    "es": {"ene": 1, "abr": 4, "ago": 8, "dic": 12},
}

DATE_ARTICLES: dict[str, tuple[str, ...]] = {"en": ("the",), "es": ("el",)}
DATE_OF: dict[str, tuple[str, ...]] = {"en": ("of",), "es": ("de",)}
ORDINAL_SUFFIXES: dict[str, tuple[str, ...]] = {
    "en": ("st", "nd", "rd", "th"),
    "es": ("er", "o"),
}
MONTH_PREPOSITIONS: dict[str, tuple[str, ...]] = {
    "en": ("in", "for", "starting", "from"),
    "es": ("en", "para", "desde"),
}

TIME_RANGE_CONNECTORS: dict[str, tuple[str, ...]] = {"en": ("-", "to"), "es": ("a",)}
SPANISH_CLOCK_PREFIX = "a las"

# Recurrence
WEEKDAYS: dict[str, dict[str, int]] = {
    "en": {"sun": 0, "mon": 1, "tue": 2, "wed": 3, "thu": 4, "fri": 5, "sat": 6},
    "es": {"dom": 0, "lun": 1, "mar": 2, "mié": 3, "jue": 4, "vie": 5, "sáb": 6},
}

# Full names; a word sharing a prefix with a month ("march", "marzo") is only a
# weekday when spelled out here or listed in WEEKDAYS/PLURAL_WEEKDAYS
WEEKDAY_NAMES: dict[str, tuple[str, ...]] = {
    "en": (
        "sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday",
    ),
    "es": ("domingo", "lunes", "martes", "miércoles", "jueves", "viernes", "sábado"),
}

RECURRENCE_MARKERS: dict[str, tuple[str, ...]] = {
    "en": ("every",),
    "es": ("cada", "todos los"),
}
RECURRENCE_RANGE_CONNECTORS: dict[str, tuple[str, ...]] = {
    "en": ("to", "through", "-"),
    "es": ("a", "hasta"),
}

# Bare plural forms that read as "every <weekday>" on their own
PLURAL_WEEKDAYS: dict[str, tuple[str, ...]] = {
    "en": (
        "sundays", "mondays", "tuesdays", "wednesdays",
        "thursdays", "fridays", "saturdays",
    ),
    "es": (
        "domingos", "lunes", "martes", "miércoles",
        "jueves", "viernes", "sábados",
    ),
}

# Activity cleanup. Entries are regex fragments, matched as whole words.
CLEANUP_LEXICON: dict[str, dict[str, tuple[str, ...]]] = {
    "en": {
        "scheduling_verbs": (
            "schedule", "add", "create", "remind", "put", "book", "set", "make",
        ),
        "greeting_fillers": (
            "ey+", "hello", "hi", "yo", "how are you", "how is it going",
            "how you doing", "hope you are good",
        ),
        "politeness": (
            "can you", "could you", "would you", "please", "plz",
            "thanks", "thank you", "kindly",
        ),
        "address_terms": (
            "man", "bro", "dude", "mate", "buddy", "pal", "miss", "sir", "madam", "boss",
        ),
        "generic_verbs": ("do", "doing", "have", "get", "take", "perform", "arrange"),
        "connectives": (
            "at", "in", "on", "of", "from", "starting", "for", "the", "a", "an",
        ),
    },
    "es": {
        "scheduling_verbs": (
            "agendar", "agenda", "crear", "recordar", "pon", "poner", "hacer", "reservar",
        ),
        "greeting_fillers": ("hola", "ey", "buenas", "qué tal", "cómo estás"),
        "politeness": ("por favor", "gracias", "puedes", "podrías"),
        "address_terms": ("tío", "amigo", "jefe", "colega", "hombre", "mujer"),
        "generic_verbs": ("tengo", "hay", "hacer", "tener", "ir"),
        "connectives": (
            "en", "el", "la", "los", "las", "de", "del", "para", "por", "un", "una",
        ),
    },
}

# (category, replacement); connectives become a space so neighbours don't glue
CLEANUP_ORDER: tuple[tuple[str, str], ...] = (
    ("scheduling_verbs", ""),
    ("greeting_fillers", ""),
    ("politeness", ""),
    ("address_terms", ""),
    ("generic_verbs", ""),
    ("connectives", " "),
)

# Display names, index 0 = Sunday / January
WEEKDAY_NAMES_SHORT: dict[str, tuple[str, ...]] = {
    "en": ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"),
    "es": ("dom", "lun", "mar", "mié", "jue", "vie", "sáb"),
}
MONTH_NAMES_SHORT: dict[str, tuple[str, ...]] = {
    "en": (
        "Jan", "Feb", "Mar", "Apr", "May", "Jun",
        "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
    ),
    "es": (
        "ene", "feb", "mar", "abr", "may", "jun",
        "jul", "ago", "sept", "oct", "nov", "dic",
    ),
}

_ACCENT_CLASSES = {
    "a": "[aáà]",
    "e": "[eéè]",
    "i": "[iíï]",
    "o": "[oóò]",
    "u": "[uúü]",
    "n": "[nñ]",
}


def fold(text: str) -> str:
    """Lowercase and strip diacritics, one output character per input character.

    The input is NFC-normalized first, so offsets into ``fold(text)`` line up
    with offsets into ``unicodedata.normalize("NFC", text)``.
    """
    return "".join(
        unicodedata.normalize("NFD", ch.lower())[0]
        for ch in unicodedata.normalize("NFC", text)
    )


def locale_for(language: str | None) -> str:
    """Map a BCP-47 tag such as "es-ES" or "en-US" to a lexicon locale."""
    if language:
        prefix = language.split("-")[0].split("_")[0].lower()
        if prefix in LOCALES:
            return prefix
    return DEFAULT_LOCALE


def words(table: dict[str, tuple[str, ...]], locales: Iterable[str] = LOCALES) -> list[str]:
    """Flatten a locale table into folded entries, keeping table order."""
    result: list[str] = []
    for locale in locales:
        for entry in table.get(locale, ()):
            folded = fold(entry)
            if folded not in result:
                result.append(folded)
    return result


def lookup(table: dict[str, dict[str, int]], word: str) -> int | None:
    """Resolve a word by its folded three-letter prefix."""
    key = fold(word)[:3]
    for locale in LOCALES:
        for prefix, value in table.get(locale, {}).items():
            if fold(prefix) == key:
                return value
    return None


def alternation(entries: Iterable[str]) -> str:
    """Build a non-capturing alternation of escaped literal entries."""
    return "(?:" + "|".join(re.escape(entry) for entry in entries) + ")"


def accent_insensitive(fragment: str) -> str:
    """Widen plain vowels (and n) in a folded regex fragment to accept accents."""
    return "".join(_ACCENT_CLASSES.get(ch, ch) for ch in fragment)

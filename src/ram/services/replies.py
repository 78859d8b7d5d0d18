"""Chat replies in English and Spanish."""

from datetime import datetime

from ram.services import lexicon
from ram.services.formatting import format_date, format_time
from ram.services.intent import ConversationType

REPLIES: dict[str, dict[str, str]] = {
    "en": {
        "welcome": "Hello! I'm Ram. Tell me what to schedule.",
        "welcome_back": "Welcome back, {name}!",
        "nickname_set": "Got it! I'll call you {name}.",
        "greeting": "Hey{name}! Good to see you. What's on the agenda?",
        "help": "I'm Ram. I can book meetings or help you study.",
        "status": "I'm feeling productive! How about you?",
        "gratitude": "Anytime!",
        "scheduled": 'Scheduled "{activity}" for {date} at {time}.',
        "scheduled_recurring": "Got it. Recurring schedule set.",
        "not_understood": "I didn't catch that. Use the 📅 icon.",
        "admin_on": "Admin mode enabled.",
        "admin_off": "Admin mode disabled.",
        "admin_required": "That command needs admin mode.",
        "database_wiped": "Deleted {count} events.",
        "moved": 'I moved "{title}" to {date}.',
        "focus_done": "Great job! Time for a break.",
        "break_done": "Break over! Back to work.",
    },
    "es": {
        "welcome": "¡Hola! Soy Ram. Dime qué quieres agendar.",
        "welcome_back": "¡Bienvenido de nuevo, {name}!",
        "nickname_set": "¡Entendido! Te llamaré {name}.",
        "greeting": "¡Hola{name}! ¿Qué tal? ¿En qué te ayudo?",
        "help": "Soy Ram. Puedo agendar eventos y ayudarte a estudiar.",
        "status": "Todo perfecto por aquí. ¿Y tú?",
        "gratitude": "¡Un placer!",
        "scheduled": 'Agendado "{activity}" para el {date} ({time}).',
        "scheduled_recurring": "Listo. Evento recurrente creado.",
        "not_understood": "No entendí. Usa el icono 📅.",
        "admin_on": "Modo administrador activado.",
        "admin_off": "Modo administrador desactivado.",
        "admin_required": "Ese comando requiere modo administrador.",
        "database_wiped": "Eliminados {count} eventos.",
        "moved": 'He movido "{title}" al {date}.',
        "focus_done": "¡Buen trabajo! Hora de un descanso.",
        "break_done": "¡Se acabó el descanso! A trabajar.",
    },
}

_CONVERSATION_KEYS = {
    ConversationType.HELP: "help",
    ConversationType.STATUS: "status",
    ConversationType.GRATITUDE: "gratitude",
}


def reply(key: str, language: str = "en-US", **values: object) -> str:
    """Render reply ``key`` in the user's language."""
    template = REPLIES[lexicon.locale_for(language)][key]
    return template.format(**values)


def capitalize_name(name: str) -> str:
    return name[:1].upper() + name[1:]


def conversation_reply(
    conversation: ConversationType,
    language: str = "en-US",
    nickname: str | None = None,
) -> str:
    """Reply to small talk. SET_NICKNAME expects ``nickname`` to be the new name."""
    if conversation is ConversationType.SET_NICKNAME:
        return reply("nickname_set", language, name=capitalize_name(nickname or ""))
    if conversation is ConversationType.GREETING:
        return reply("greeting", language, name=f" {nickname}" if nickname else "")
    return reply(_CONVERSATION_KEYS[conversation], language)


def scheduled_reply(activity: str, instant: datetime, time_label: str, language: str = "en-US") -> str:
    return reply(
        "scheduled",
        language,
        activity=activity,
        date=format_date(instant, language),
        time=format_time(time_label, language),
    )


def welcome_reply(nickname: str | None, language: str = "en-US") -> str:
    if nickname:
        return reply("welcome_back", language, name=nickname)
    return reply("welcome", language)

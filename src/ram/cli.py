import argparse
import asyncio
import json
import logging
import sys
from datetime import date
from pathlib import Path

from ram.config import settings
from ram.sentry import flush as sentry_flush
from ram.sentry import init_sentry, set_tag

HEAT_SYMBOLS = {
    "NONE": ".",
    "LOW": "-",
    "MEDIUM": "+",
    "HIGH": "*",
    "PEAK": "#",
}


def setup_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def parse_text(text: str, override: str | None, language: str | None) -> int:
    from ram.services.parser import InvalidOverrideError, Parser

    parser = Parser(language=language)
    try:
        intent = parser.parse(text, manual_override=override)
    except InvalidOverrideError as e:
        print(f"Error: {e}")
        return 2

    print(json.dumps(intent.to_dict(), ensure_ascii=False, indent=2))
    return 0


async def run_chat(language: str | None) -> None:
    """Interactive session against an in-memory store.

    Lines starting with "/date " set the date picker value for the next message.
    """
    from ram.services.parser import InvalidOverrideError
    from ram.services.processor import MessageProcessor

    processor = MessageProcessor(language=language)
    print(await processor.start_session())

    override: str | None = None
    while True:
        try:
            line = input("> ")
        except EOFError:
            break

        if line.strip() in ("/quit", "/exit"):
            break
        if line.startswith("/date "):
            override = line[len("/date ") :].strip() or None
            print(f"Date set to {override}")
            continue
        if line.strip() == "/events":
            for event in await processor.store.list_events():
                print(f"  {event.instant.isoformat()}  {event.time_label:<12} {event.title}")
            continue

        try:
            result = await processor.process(line, manual_override=override)
        except InvalidOverrideError as e:
            print(f"Error: {e}")
            override = None
            continue
        override = None
        if result is not None:
            print(result.response)


def show_heatmap(year: int, logs_path: str | None) -> int:
    from ram.services.formatting import format_minutes
    from ram.services.heatmap import aggregate_focus_logs, build_year_grid, month_labels
    from ram.storage.schemas import FocusLog

    entries: list[FocusLog] = []
    if logs_path:
        path = Path(logs_path)
        if not path.exists():
            print(f"Error: {logs_path} not found")
            return 1
        entries = [FocusLog(**item) for item in json.loads(path.read_text())]

    logs = aggregate_focus_logs(entries)
    grid = build_year_grid(logs, year, date.today())

    labels = dict(month_labels(grid, settings.language))
    print("".join(labels.get(i, " ")[:1] for i in range(len(grid))))
    for row in range(7):
        line = ""
        for week in grid:
            cell = week[row]
            line += " " if cell is None or cell.is_future else HEAT_SYMBOLS[cell.level.name]
        print(line)

    total = sum(minutes for key, minutes in logs.items() if key.startswith(f"{year}-"))
    print(f"\nTotal focus in {year}: {format_minutes(total)}")
    return 0


def check_config() -> None:
    print("Ram Configuration Check\n")
    print(f"  Timezone: {settings.user_timezone}")
    print(f"  Language: {settings.language}")
    print(f"  Recurring horizon: {settings.recurrence_weeks} weeks")
    print(f"  Focus/break: {settings.focus_minutes}/{settings.break_minutes} min")
    status = "OK" if settings.has_sentry else "MISSING (optional)"
    print(f"  Sentry DSN: {status}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Ram scheduling assistant")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    parse_cmd = subparsers.add_parser("parse", help="Parse one message and print the intent")
    parse_cmd.add_argument("text", help="Message text")
    parse_cmd.add_argument("--override", help="Date picker value (YYYY-MM-DD[THH:MM])")
    parse_cmd.add_argument("--language", help="Language tag, e.g. en-US or es-ES")

    chat_cmd = subparsers.add_parser("chat", help="Interactive chat with an in-memory calendar")
    chat_cmd.add_argument("--language", help="Language tag, e.g. en-US or es-ES")

    heatmap_cmd = subparsers.add_parser("heatmap", help="Print the yearly focus heatmap")
    heatmap_cmd.add_argument("--year", type=int, default=date.today().year)
    heatmap_cmd.add_argument("--logs", help="JSON file with [{date_key, minutes}, ...]")

    subparsers.add_parser("check", help="Check configuration")

    args = parser.parse_args(argv)

    setup_logging()

    init_sentry(
        dsn=settings.sentry_dsn if settings.has_sentry else None,
        environment=settings.sentry_environment,
    )
    set_tag("language", getattr(args, "language", None) or settings.language)

    try:
        if args.command == "parse":
            return parse_text(args.text, args.override, args.language)
        elif args.command == "chat":
            asyncio.run(run_chat(args.language))
        elif args.command == "heatmap":
            return show_heatmap(args.year, args.logs)
        elif args.command == "check":
            check_config()
        else:
            parser.print_help()
        return 0
    finally:
        sentry_flush(timeout=2.0)


if __name__ == "__main__":
    sys.exit(main())

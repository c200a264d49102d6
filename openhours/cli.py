"""openhours CLI: evaluate hours text at now or at a given instant."""

from __future__ import annotations

import argparse
import json
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from openhours.clock.provider import ZoneClock
from openhours.config.settings import resolve_hours_settings
from openhours.domain.exceptions import ClockUnavailableError
from openhours.domain.models import CivilTime, OpenStatus, Unrecognized
from openhours.evaluation.comparator import open_status_key
from openhours.evaluation.evaluator import evaluate_parse_result
from openhours.infrastructure.logging import get_logger
from openhours.parsing.hours_parser import parse_hours

_EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="openhours",
        description="Report whether free-text opening hours are open right now.",
    )
    parser.add_argument("hours", nargs="*", help="hours text, e.g. 'Mon-Fri 9am-5pm'")
    parser.add_argument("--file", type=Path, default=None, help="read one hours text per line")
    parser.add_argument("--at", default=None, help="ISO-8601 instant to evaluate at (naive = UTC)")
    parser.add_argument("--timezone", default=None, help="IANA timezone, overrides OPENHOURS_TIMEZONE")
    parser.add_argument("--sort", action="store_true", help="order output open first, unknown last")
    parser.add_argument("--json", action="store_true", help="emit JSON instead of text lines")
    return parser


def _read_inputs(args: argparse.Namespace) -> list[str]:
    texts = list(args.hours)
    if args.file is not None:
        lines = args.file.read_text(encoding="utf-8").splitlines()
        texts.extend(line.strip() for line in lines if line.strip())
    return texts


def _resolve_now(args: argparse.Namespace, timezone_name: str) -> CivilTime:
    clock = ZoneClock(timezone_name)
    if args.at:
        return clock.at(datetime.fromisoformat(args.at))
    return clock.now()


def format_line(hours: str, status: Optional[OpenStatus]) -> str:
    if status is None:
        return f"UNKNOWN  {hours}"
    label = "OPEN   " if status.is_open else "CLOSED "
    detail = status.status
    if not status.is_open and status.next_open_time and status.next_open_time not in detail:
        detail = f"{detail} ({status.next_open_time})"
    return f"{label} {hours} - {detail}"


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    logger = get_logger()
    settings = resolve_hours_settings(timezone=args.timezone)
    logger.start("cli", timezone=settings.timezone)

    try:
        now = _resolve_now(args, settings.timezone)
    except ClockUnavailableError as exc:
        logger.error("clock", str(exc))
        print(f"error: {exc}", file=sys.stderr)
        return _EXIT_USAGE
    except ValueError as exc:
        logger.error("at", str(exc), value=args.at)
        print(f"error: invalid --at value {args.at!r}", file=sys.stderr)
        return _EXIT_USAGE

    try:
        texts = _read_inputs(args)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("file", str(exc))
        print(f"error: cannot read {args.file}: {exc}", file=sys.stderr)
        return _EXIT_USAGE

    rows: list[tuple[str, Optional[OpenStatus]]] = []
    for text in texts:
        result = parse_hours(text)
        if settings.log_unrecognized and isinstance(result, Unrecognized) and text.strip():
            logger.warning("parser", "unrecognized hours text", hours=text)
        status = evaluate_parse_result(result, now)
        logger.evaluation(text, kind=result.kind.value, is_open=None if status is None else status.is_open)
        rows.append((text, status))

    if args.sort:
        rows.sort(key=lambda row: open_status_key(row[1]))

    if args.json:
        payload = [
            {"hours": text, "status": status.to_payload() if status is not None else None}
            for text, status in rows
        ]
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        for text, status in rows:
            print(format_line(text, status))

    logger.summary(
        "cli",
        total=len(rows),
        open=sum(1 for _, status in rows if status is not None and status.is_open),
        unknown=sum(1 for _, status in rows if status is None),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())

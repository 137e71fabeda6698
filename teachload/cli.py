"""
CLI (Command Line Interface).

This module provides the terminal commands of the teaching-load importer, e.g.:

    teachload parse <document> [--out drafts.json]
    teachload confirm <drafts.json>
    teachload today [--date YYYY-MM-DD] [--instructor ID]
    teachload next [--instructor ID]
    teachload sections
    teachload instructors

Note:
- parse never stores anything; review the drafts, edit the JSON if needed,
  then run confirm on it
- diagnostics (skipped slots, missing semester) are logged to stderr
"""

from __future__ import annotations

import argparse
import json
from datetime import date, datetime
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.table import Table
from rich import box
from rich.markup import escape

from teachload.agenda import next_schedule, schedules_on
from teachload.commit import confirm
from teachload.config import get_settings
from teachload.errors import TeachLoadError
from teachload.extract import extract_text
from teachload.logging import setup_logging
from teachload.model import DAY_KEYS, ParseResult
from teachload.parse import parse_document
from teachload.storage import (
    INSTRUCTORS_FILE,
    SCHEDULES_FILE,
    SECTIONS_FILE,
    InstructorDirectory,
    ScheduleStore,
    SectionDirectory,
)

console = Console()


def _data_dir(args: argparse.Namespace) -> Path:
    return Path(args.data_dir) if args.data_dir else Path(get_settings().data_dir)


def _days_text(days: Any) -> str:
    if not isinstance(days, dict):
        return ""
    return " ".join(key.capitalize() for key in DAY_KEYS if days.get(key) is True)


def _print_preview(result: ParseResult) -> None:
    console.print(f"Instructor   : {result.instructor_display_name}")
    console.print(f"Academic year: {result.academic_year}  ({result.semester.ordinal} semester)")
    console.print(f"Semester     : {result.semester.start_text} to {result.semester.end_text}")

    table = Table(box=box.SIMPLE_HEAVY)
    table.add_column("#", justify="right")
    table.add_column("Code")
    table.add_column("Title")
    table.add_column("Section")
    table.add_column("Time")
    table.add_column("Days")
    table.add_column("Room")
    for i, draft in enumerate(result.drafts, start=1):
        days = _days_text(draft.days.to_dict()) or "[red](none)[/red]"
        table.add_row(
            str(i),
            draft.course_code,
            escape(draft.course_title),
            draft.display_section,
            f"{draft.start_time}-{draft.end_time}",
            days,
            draft.room,
        )
    console.print(table)

    if result.skipped:
        console.print(f"[yellow]Skipped {len(result.skipped)} time slot(s) with unknown section:[/yellow]")
        for s in result.skipped:
            console.print(f"  - {escape(s.section_label)}: {s.slot.start_time}-{s.slot.end_time} {s.slot.day_token}")


def _cmd_parse(args: argparse.Namespace) -> int:
    """
    Parse one document and show the drafts for review.
    """
    data_dir = _data_dir(args)
    text = extract_text(args.document, delete_after=args.delete)

    result = parse_document(
        text,
        InstructorDirectory.load(data_dir / INSTRUCTORS_FILE),
        SectionDirectory.load(data_dir / SECTIONS_FILE),
        prefixes=get_settings().course_prefixes,
    )
    _print_preview(result)

    if args.out:
        out = Path(args.out)
        out.parent.mkdir(parents=True, exist_ok=True)
        payload = {
            "instructor": result.instructor_display_name,
            "academic_year": result.academic_year,
            "semester": result.semester.ordinal,
            "drafts": [d.to_record() for d in result.drafts],
        }
        out.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        print(f"Wrote {len(result.drafts)} drafts to: {out}")

    return 0


def _load_drafts(path: Path) -> list[Any]:
    data = json.loads(path.read_text(encoding="utf-8"))
    # accept both the file written by `parse --out` and a bare list
    if isinstance(data, dict):
        data = data.get("drafts", [])
    if not isinstance(data, list):
        raise TeachLoadError(f"{path} does not contain a list of drafts")
    return data


def _cmd_confirm(args: argparse.Namespace) -> int:
    """
    Store all drafts of a reviewed drafts file in one batch.
    """
    path = Path(args.drafts)
    try:
        drafts = _load_drafts(path)
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        print(f"Cannot read drafts file: {exc}")
        return 1

    saved = confirm(drafts, ScheduleStore(_data_dir(args) / SCHEDULES_FILE))
    print(f"Saved {len(saved)} schedules.")
    return 0


def _print_schedules(records: list[dict[str, Any]]) -> None:
    for r in records:
        print(
            f"{r.get('start_time', '')}-{r.get('end_time', '')} | "
            f"{r.get('course_code', '')} {r.get('course_title', '')} | "
            f"{r.get('display_section', '')} | {r.get('room', '')}"
        )


def _cmd_today(args: argparse.Namespace) -> int:
    """
    Print the schedules meeting on one day (default: today).
    """
    try:
        day = date.fromisoformat(args.date) if args.date else date.today()
    except ValueError:
        print(f"Invalid date: {args.date!r} (expected YYYY-MM-DD)")
        return 1
    records = ScheduleStore(_data_dir(args) / SCHEDULES_FILE).all()
    found = schedules_on(records, day, args.instructor)
    if not found:
        print(f"No schedules on {day.isoformat()}.")
        return 0
    _print_schedules(found)
    return 0


def _cmd_next(args: argparse.Namespace) -> int:
    records = ScheduleStore(_data_dir(args) / SCHEDULES_FILE).all()
    found = next_schedule(records, datetime.now(), args.instructor)
    if found is None:
        print("No upcoming schedule today.")
        return 0
    print(f"Next: {found.get('start_time', '')} at {found.get('room', '')}")
    return 0


def _cmd_sections(args: argparse.Namespace) -> int:
    for s in SectionDirectory.load(_data_dir(args) / SECTIONS_FILE).all():
        print(f"{s.id} | {s.display}")
    return 0


def _cmd_instructors(args: argparse.Namespace) -> int:
    for i in InstructorDirectory.load(_data_dir(args) / INSTRUCTORS_FILE).all():
        print(f"{i.id} | {i.display_name}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="teachload", description="Teaching-load document importer")
    parser.add_argument("--data-dir", type=str, default=None, help="Directory with the JSON data files")
    parser.add_argument("--log-level", type=str, default=None, help="DEBUG, INFO, WARNING, ...")
    sub = parser.add_subparsers(dest="command", required=True)

    p_parse = sub.add_parser("parse", help="Parse a teaching-load document into drafts")
    p_parse.add_argument("document", type=str, help="Document path (.docx, .html or .txt)")
    p_parse.add_argument("--out", type=str, default=None, help="Write drafts to this JSON file")
    p_parse.add_argument("--delete", action="store_true", help="Delete the document after extraction")

    p_confirm = sub.add_parser("confirm", help="Store the drafts of a reviewed drafts file")
    p_confirm.add_argument("drafts", type=str, help="Drafts JSON file (from parse --out)")

    p_today = sub.add_parser("today", help="Show schedules of a day")
    p_today.add_argument("--date", type=str, default=None, help="Day (YYYY-MM-DD), default today")
    p_today.add_argument("--instructor", type=str, default=None, help="Instructor id")

    p_next = sub.add_parser("next", help="Show the next schedule today")
    p_next.add_argument("--instructor", type=str, default=None, help="Instructor id")

    sub.add_parser("sections", help="List known sections")
    sub.add_parser("instructors", help="List known instructors")

    return parser


COMMANDS = {
    "parse": _cmd_parse,
    "confirm": _cmd_confirm,
    "today": _cmd_today,
    "next": _cmd_next,
    "sections": _cmd_sections,
    "instructors": _cmd_instructors,
}


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(json_output=settings.log_json, log_level=args.log_level or settings.log_level)

    handler = COMMANDS.get(args.command)
    if handler is None:
        raise SystemExit(2)

    try:
        raise SystemExit(handler(args))
    except TeachLoadError as exc:
        print(f"Error: {exc}")
        raise SystemExit(1)

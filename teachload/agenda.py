"""
Agenda views over confirmed schedules.

A stored schedule meets on a given day when:
- the day falls inside its semester window (TBD windows never match)
- the weekday flag of that day is set (there are no Sunday classes)
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional

from teachload.model import DAY_KEYS


def _time_to_minutes(hhmm: str) -> int:
    """
    Convert 'HH:MM' to minutes since midnight.
    Raises ValueError for invalid formats.
    """
    parts = hhmm.strip().split(":")
    if len(parts) != 2:
        raise ValueError(f"Invalid time format: {hhmm!r}")
    h = int(parts[0])
    m = int(parts[1])
    if not (0 <= h <= 23 and 0 <= m <= 59):
        raise ValueError(f"Invalid time value: {hhmm!r}")
    return h * 60 + m


def _parse_date(value: Any) -> Optional[date]:
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError:
        return None


def meets_on(record: dict[str, Any], day: date) -> bool:
    weekday = day.weekday()
    if weekday >= len(DAY_KEYS):
        return False

    start = _parse_date(record.get("semester_start_date"))
    end = _parse_date(record.get("semester_end_date"))
    if start is None or end is None or not (start <= day <= end):
        return False

    days = record.get("days")
    if not isinstance(days, dict):
        return False
    return days.get(DAY_KEYS[weekday]) is True


def schedules_on(
    records: list[dict[str, Any]],
    day: date,
    instructor_id: Optional[str] = None,
) -> list[dict[str, Any]]:
    """
    Return the schedules meeting on ``day``, ordered by start time.
    Records with unreadable times are left out.
    """
    out: list[tuple[int, dict[str, Any]]] = []
    for record in records:
        if instructor_id is not None and str(record.get("instructor_id", "")) != instructor_id:
            continue
        if not meets_on(record, day):
            continue
        try:
            start = _time_to_minutes(str(record.get("start_time", "")))
        except ValueError:
            continue
        out.append((start, record))

    out.sort(key=lambda pair: pair[0])
    return [record for _, record in out]


def next_schedule(
    records: list[dict[str, Any]],
    now: datetime,
    instructor_id: Optional[str] = None,
) -> Optional[dict[str, Any]]:
    """
    Return the first schedule later today than ``now``, or None.
    """
    current = now.hour * 60 + now.minute
    for record in schedules_on(records, now.date(), instructor_id):
        if _time_to_minutes(str(record["start_time"])) > current:
            return record
    return None

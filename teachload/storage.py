"""
File-backed reference data and schedule storage.

This module manages three files inside the data directory:

    instructors.json   instructor directory (read-only here)
    sections.json      section directory (read-only here)
    schedules.json     confirmed class schedules

Design rationale:
- reference data is maintained elsewhere; reading it is deliberately
  forgiving (missing file -> empty directory, malformed entries skipped)
- schedules.json is the persistence sink of the confirmation step; writing
  it is strict: a batch is validated completely before anything is written
  and the file is replaced atomically, so a batch is stored fully or not at all
"""

from __future__ import annotations

import json
import os
import tempfile
import uuid
from pathlib import Path
from typing import Any, Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, ValidationError

from teachload.config import get_settings
from teachload.errors import PersistenceError
from teachload.logging import get_logger
from teachload.matching import NamePattern
from teachload.model import InstructorRecord, SectionRecord

logger = get_logger(__name__)

INSTRUCTORS_FILE = "instructors.json"
SECTIONS_FILE = "sections.json"
SCHEDULES_FILE = "schedules.json"

TIME_PATTERN = r"^\d{2}:\d{2}$"


def _default_path(filename: str) -> Path:
    """
    Return the path of a data file inside the configured data directory.

    Using a function instead of a constant makes testing easier,
    because tests can override the path.
    """
    return Path(get_settings().data_dir) / filename


def _load_list(path: Path) -> list[Any]:
    """
    Load a JSON list. Returns [] if the file does not exist or is invalid.
    """
    if not path.exists():
        return []
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError, UnicodeDecodeError):
        logger.warning("data_file_unreadable", path=str(path))
        return []
    return data if isinstance(data, list) else []


def _text(entry: dict[str, Any], key: str) -> str:
    value = entry.get(key)
    return "" if value is None else str(value).strip()


# ---------------------------------------------------------------------------
# Reference data
# ---------------------------------------------------------------------------


class InstructorDirectory:
    """
    Instructor records, queried by token-gap name pattern.
    """

    def __init__(self, records: Iterable[InstructorRecord]) -> None:
        self._records = list(records)

    @classmethod
    def load(cls, path: str | Path | None = None) -> "InstructorDirectory":
        p = Path(path) if path is not None else _default_path(INSTRUCTORS_FILE)
        records: list[InstructorRecord] = []
        for entry in _load_list(p):
            if not isinstance(entry, dict) or not _text(entry, "id"):
                continue
            records.append(
                InstructorRecord(
                    id=_text(entry, "id"),
                    first_name=_text(entry, "first_name"),
                    middle_name=_text(entry, "middle_name"),
                    last_name=_text(entry, "last_name"),
                )
            )
        return cls(records)

    @classmethod
    def from_records(cls, entries: Iterable[dict[str, Any]]) -> "InstructorDirectory":
        return cls(InstructorRecord(**entry) for entry in entries)

    def all(self) -> list[InstructorRecord]:
        return list(self._records)

    def find_by_name(self, pattern: NamePattern) -> Optional[InstructorRecord]:
        # first match in directory order wins
        for record in self._records:
            if pattern.matches(record.full_name):
                return record
        return None


class SectionDirectory:
    """
    Section records, queried by course prefix, level and block letter.
    """

    def __init__(self, records: Iterable[SectionRecord]) -> None:
        self._records = list(records)

    @classmethod
    def load(cls, path: str | Path | None = None) -> "SectionDirectory":
        p = Path(path) if path is not None else _default_path(SECTIONS_FILE)
        records: list[SectionRecord] = []
        for entry in _load_list(p):
            if not isinstance(entry, dict) or not _text(entry, "id"):
                continue
            records.append(
                SectionRecord(
                    id=_text(entry, "id"),
                    course=_text(entry, "course"),
                    section=_text(entry, "section"),
                    block=_text(entry, "block"),
                )
            )
        return cls(records)

    @classmethod
    def from_records(cls, entries: Iterable[dict[str, Any]]) -> "SectionDirectory":
        return cls(SectionRecord(**{k: str(v) for k, v in entry.items()}) for entry in entries)

    def all(self) -> list[SectionRecord]:
        return list(self._records)

    def find(self, course_prefix: str, level: str, block: str) -> Optional[SectionRecord]:
        """
        Course matches when it contains the prefix (case-insensitive);
        section and block must be equal.
        """
        pattern = NamePattern.from_text(course_prefix)
        for record in self._records:
            if record.section == level and record.block == block and pattern.matches(record.course):
                return record
        return None


# ---------------------------------------------------------------------------
# Schedule persistence
# ---------------------------------------------------------------------------


class DaysModel(BaseModel):
    mon: StrictBool
    tue: StrictBool
    wed: StrictBool
    thu: StrictBool
    fri: StrictBool
    sat: StrictBool


class ScheduleModel(BaseModel):
    """
    Stored shape of a confirmed schedule. Every field is required.
    """

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    course_code: str = Field(min_length=1)
    course_title: str = Field(min_length=1)
    section_id: str = Field(min_length=1)
    instructor_id: str = Field(min_length=1)
    room: str = Field(min_length=1)
    start_time: str = Field(pattern=TIME_PATTERN)
    end_time: str = Field(pattern=TIME_PATTERN)
    days: DaysModel
    semester_start_date: str = Field(min_length=1)
    semester_end_date: str = Field(min_length=1)
    display_section: str = ""


class ScheduleStore:
    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else _default_path(SCHEDULES_FILE)

    def all(self) -> list[dict[str, Any]]:
        return [r for r in _load_list(self.path) if isinstance(r, dict)]

    def _load_for_update(self) -> list[Any]:
        # unlike all(), a broken file must not be silently replaced
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise PersistenceError(f"Cannot read {self.path}: {exc}") from exc
        if not isinstance(data, list):
            raise PersistenceError(f"Unexpected content in {self.path}: expected a list")
        return data

    def _write(self, records: list[Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=".schedules-", suffix=".json", dir=self.path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(records, fh, indent=2, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except OSError as exc:
            Path(tmp_name).unlink(missing_ok=True)
            raise PersistenceError(f"Cannot write {self.path}: {exc}") from exc

    def insert_many(self, records: Iterable[Any]) -> list[dict[str, Any]]:
        """
        Validate and store a batch of draft-shaped records.

        Returns the stored records with their assigned ids. Raises
        PersistenceError (and writes nothing) if any record is invalid or
        the file cannot be written.
        """
        try:
            validated = [ScheduleModel.model_validate(r) for r in records]
        except ValidationError as exc:
            raise PersistenceError(f"Invalid schedule record ({exc.error_count()} error(s))") from exc

        existing = self._load_for_update()
        saved = [{"id": uuid.uuid4().hex, **m.model_dump()} for m in validated]
        self._write(existing + saved)
        return saved

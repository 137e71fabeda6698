"""
Central data model definitions used across the project.

This module defines the canonical structure of the objects that flow through
the teaching-load pipeline so that:
- the scanner, resolvers and assembler share the same field names
- drafts have exactly one record shape (see ScheduleDraft.to_record)
- scan state is a plain value that can be passed around, never a global
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Optional, List

TBD = "TBD"
DAY_KEYS = ("mon", "tue", "wed", "thu", "fri", "sat")


class Term(str, Enum):
    FIRST = "FIRST"
    SECOND = "SECOND"
    UNKNOWN = "UNKNOWN"


class SlotKind(str, Enum):
    LEC = "LEC"
    LAB = "LAB"


@dataclass(frozen=True)
class SemesterWindow:
    """
    Academic term of a document and its canonical calendar window.

    Dates are None when they could not be derived; they render as "TBD".
    """

    term: Term
    ordinal: str = TBD
    start_year: Optional[int] = None
    end_year: Optional[int] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @property
    def start_text(self) -> str:
        return self.start_date.isoformat() if self.start_date else TBD

    @property
    def end_text(self) -> str:
        return self.end_date.isoformat() if self.end_date else TBD

    @property
    def academic_year(self) -> str:
        if self.start_year is None or self.end_year is None:
            return TBD
        return f"{self.start_year}-{self.end_year}"


@dataclass(frozen=True)
class DayMask:
    """
    Weekly occurrence pattern, Monday to Saturday.
    """

    mon: bool = False
    tue: bool = False
    wed: bool = False
    thu: bool = False
    fri: bool = False
    sat: bool = False

    @property
    def is_valid(self) -> bool:
        return any(self.to_dict().values())

    def to_dict(self) -> dict[str, bool]:
        return {key: getattr(self, key) for key in DAY_KEYS}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DayMask":
        return cls(**{key: bool(data.get(key, False)) for key in DAY_KEYS})


@dataclass(frozen=True)
class CourseContext:
    code: str
    title: str
    section_label: str


@dataclass(frozen=True)
class TimeSlotCandidate:
    start_time: str
    end_time: str
    kind: SlotKind
    day_token: str


@dataclass(frozen=True)
class HeaderFound:
    """Emitted when a course header line replaces the current context."""

    index: int
    context: CourseContext


@dataclass(frozen=True)
class SlotFound:
    """Emitted for a time line recognized while a course context is active."""

    index: int
    context: CourseContext
    slot: TimeSlotCandidate


@dataclass(frozen=True)
class SectionRecord:
    id: str
    course: str
    section: str
    block: str

    @property
    def display(self) -> str:
        return f"{self.course} {self.section}{self.block}"


@dataclass(frozen=True)
class InstructorRecord:
    id: str
    first_name: str
    middle_name: str
    last_name: str

    @property
    def full_name(self) -> str:
        # middle name may be empty, the double space is harmless for matching
        return f"{self.first_name} {self.middle_name} {self.last_name}"

    @property
    def display_name(self) -> str:
        return f"{self.last_name}, {self.first_name} {self.middle_name}".strip()


@dataclass(frozen=True)
class ScheduleDraft:
    """
    One unpersisted class schedule awaiting operator confirmation.

    Each draft corresponds to exactly one time line of the document whose
    section could be resolved.
    """

    course_code: str
    course_title: str
    section_id: str
    instructor_id: str
    start_time: str
    end_time: str
    days: DayMask
    semester_start_date: str
    semester_end_date: str
    display_section: str
    room: str = TBD

    def to_record(self) -> dict[str, Any]:
        """
        Return the draft-shaped dict accepted by the schedule store.
        """
        return {
            "course_code": self.course_code,
            "course_title": self.course_title,
            "section_id": self.section_id,
            "instructor_id": self.instructor_id,
            "room": self.room,
            "start_time": self.start_time,
            "end_time": self.end_time,
            "days": self.days.to_dict(),
            "semester_start_date": self.semester_start_date,
            "semester_end_date": self.semester_end_date,
            "display_section": self.display_section,
        }


@dataclass(frozen=True)
class SkippedSlot:
    index: int
    section_label: str
    slot: TimeSlotCandidate
    reason: str


@dataclass
class ParseResult:
    """
    Everything returned to the operator for review after parsing a document.
    """

    drafts: List[ScheduleDraft]
    instructor_display_name: str
    academic_year: str
    term: Term
    semester: SemesterWindow
    skipped: List[SkippedSlot] = field(default_factory=list)

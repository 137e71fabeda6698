"""
Course-block scanning (normalized lines -> HeaderFound / SlotFound events).

The teaching-load template lists each course as

    IS101                              <- header line
    Data Structures (IT 2A)            <- title + section label
    08:00 – 09:30 (lec)                <- time line
    MWF                                <- day code of the time line above
    10:00 – 12:00 (lab)
    TTh
    IS102
    ...

The scan is a two-state machine (SEEK_HEADER, IN_COURSE) with a lookahead of
exactly one line. The current course context is part of the fold state that
step() takes and returns, so every line can be tested in isolation and two
documents never share scan state.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional, Sequence, Union

from teachload.logging import get_logger
from teachload.model import CourseContext, HeaderFound, SlotFound, SlotKind, TimeSlotCandidate

logger = get_logger(__name__)

DEFAULT_PREFIXES = ("IS", "IT")
UNKNOWN_SECTION = "Unknown"

# en dash is what the template uses; hyphen and em dash show up after copy/paste
TIME_RE = re.compile(r"(\d{2}:\d{2})\s*[–—-]\s*(\d{2}:\d{2})\s*\((lec|lab)\)", re.IGNORECASE)
SECTION_LABEL_RE = re.compile(r"\(([^)]+)\)")

ScanEvent = Union[HeaderFound, SlotFound]


class ScanState(str, Enum):
    SEEK_HEADER = "SEEK_HEADER"
    IN_COURSE = "IN_COURSE"


@dataclass(frozen=True)
class ScanFold:
    state: ScanState = ScanState.SEEK_HEADER
    context: Optional[CourseContext] = None


def header_pattern(prefixes: Iterable[str] = DEFAULT_PREFIXES) -> re.Pattern[str]:
    """
    Build the course header regex: a program prefix plus three digits at line start.
    """
    alternatives = "|".join(re.escape(p.strip()) for p in prefixes if p.strip())
    return re.compile(rf"^(?:{alternatives})\s*\d{{3}}")


def read_course_context(code: str, title_line: str) -> CourseContext:
    """
    Build the context of a header from the line that follows it.
    """
    title = title_line.split("(", 1)[0].strip()
    label_match = SECTION_LABEL_RE.search(title_line)
    label = label_match.group(1).strip() if label_match else UNKNOWN_SECTION
    return CourseContext(code=code, title=title, section_label=label or UNKNOWN_SECTION)


def match_time_slot(line: str, day_line: str = "") -> Optional[TimeSlotCandidate]:
    """
    Parse a time line; the day token is taken from the line after it.
    """
    match = TIME_RE.search(line)
    if not match:
        return None
    start, end, kind = match.groups()
    return TimeSlotCandidate(
        start_time=start,
        end_time=end,
        kind=SlotKind(kind.upper()),
        day_token=day_line.strip(),
    )


class Scanner:
    """
    Single-pass line scanner for one document dialect (a set of course prefixes).
    """

    def __init__(self, prefixes: Iterable[str] = DEFAULT_PREFIXES) -> None:
        self.header_re = header_pattern(prefixes)

    def step(
        self,
        fold: ScanFold,
        index: int,
        line: str,
        next_line: str = "",
    ) -> tuple[ScanFold, Optional[ScanEvent]]:
        """
        Consume one line and return the new fold state plus the event it produced, if any.
        """
        header = self.header_re.match(line)
        if header:
            context = read_course_context(header.group(0), next_line)
            logger.debug(
                "course_found",
                line=index,
                code=context.code,
                title=context.title,
                section=context.section_label,
            )
            return ScanFold(ScanState.IN_COURSE, context), HeaderFound(index, context)

        slot = match_time_slot(line, next_line)
        if slot is None:
            return fold, None

        if fold.state is ScanState.SEEK_HEADER or fold.context is None:
            logger.warning("slot_without_course", line=index, text=line)
            return fold, None

        logger.debug(
            "slot_found",
            line=index,
            code=fold.context.code,
            start=slot.start_time,
            end=slot.end_time,
            kind=slot.kind.value,
            days=slot.day_token,
        )
        return fold, SlotFound(index, fold.context, slot)

    def scan(self, lines: Sequence[str]) -> Iterator[ScanEvent]:
        fold = ScanFold()
        for i, line in enumerate(lines):
            next_line = lines[i + 1] if i + 1 < len(lines) else ""
            fold, event = self.step(fold, i, line, next_line)
            if event is not None:
                yield event


def scan_lines(lines: Sequence[str], prefixes: Iterable[str] = DEFAULT_PREFIXES) -> list[ScanEvent]:
    return list(Scanner(prefixes).scan(lines))

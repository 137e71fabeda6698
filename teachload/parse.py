"""
Parsing (teaching-load text -> reviewable schedule drafts).

- Reads the semester marker and the declared instructor from the raw text
- Scans the normalized lines for course headers and time lines
- Resolves the section of every time line against the section directory
- Returns one ScheduleDraft per resolved time line, nothing is persisted

Important rules:
- 1 time line = 1 draft (no merging of lecture and lab lines)
- an unknown instructor aborts the whole document
- an unknown section drops only that time line
- room is never inferred, it is always "TBD"
"""

from __future__ import annotations

from typing import Iterable, Optional

from teachload.days import decode_days
from teachload.instructor import resolve_instructor
from teachload.logging import get_logger
from teachload.model import ParseResult, ScheduleDraft, SkippedSlot, SlotFound, TBD
from teachload.normalize import normalize_lines
from teachload.scan import DEFAULT_PREFIXES, Scanner
from teachload.sections import resolve_section
from teachload.semester import extract_semester

logger = get_logger(__name__)


def parse_document(
    raw_text: str,
    instructors,
    sections,
    prefixes: Optional[Iterable[str]] = None,
) -> ParseResult:
    """
    Turn the extracted text of one teaching-load document into drafts.

    ``instructors`` needs ``find_by_name(pattern)`` and ``sections`` needs
    ``find(course_prefix, level, block)``; see teachload.storage.
    Raises InstructorNotFound before any line is scanned.
    """
    semester = extract_semester(raw_text)
    instructor = resolve_instructor(raw_text, instructors)

    lines = normalize_lines(raw_text)
    logger.debug("lines_normalized", count=len(lines))

    drafts: list[ScheduleDraft] = []
    skipped: list[SkippedSlot] = []

    scanner = Scanner(prefixes if prefixes is not None else DEFAULT_PREFIXES)
    for event in scanner.scan(lines):
        if not isinstance(event, SlotFound):
            continue

        context, slot = event.context, event.slot
        section = resolve_section(context.section_label, sections)
        if section is None:
            logger.warning(
                "section_not_found",
                line=event.index,
                code=context.code,
                section=context.section_label,
                start=slot.start_time,
                end=slot.end_time,
            )
            skipped.append(SkippedSlot(event.index, context.section_label, slot, "section not found"))
            continue

        drafts.append(
            ScheduleDraft(
                course_code=context.code,
                course_title=context.title,
                section_id=section.id,
                instructor_id=instructor.id,
                room=TBD,
                start_time=slot.start_time,
                end_time=slot.end_time,
                days=decode_days(slot.day_token),
                semester_start_date=semester.start_text,
                semester_end_date=semester.end_text,
                display_section=section.display,
            )
        )
        logger.info(
            "slot_added",
            kind=slot.kind.value,
            code=context.code,
            start=slot.start_time,
            end=slot.end_time,
            days=slot.day_token,
        )

    logger.info("document_parsed", drafts=len(drafts), skipped=len(skipped))
    return ParseResult(
        drafts=drafts,
        instructor_display_name=instructor.display_name,
        academic_year=semester.academic_year,
        term=semester.term,
        semester=semester,
        skipped=skipped,
    )

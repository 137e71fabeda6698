"""
Instructor resolution.

The document declares its instructor once, e.g.

    Name of Instructor: Juan Dela Cruz

The name is matched against the instructor directory with a token-gap
pattern. Failing to resolve it aborts the whole document.
"""

from __future__ import annotations

import re

from teachload.errors import InstructorNotFound
from teachload.logging import get_logger
from teachload.matching import NamePattern
from teachload.model import InstructorRecord

logger = get_logger(__name__)

INSTRUCTOR_RE = re.compile(r"Name of Instructor:[ \t]*(.*)", re.IGNORECASE)


def extract_instructor_name(raw: str) -> str:
    """
    Return the declared instructor name (trimmed, uppercase), or "" if absent.
    """
    match = INSTRUCTOR_RE.search(raw)
    if not match:
        return ""
    return match.group(1).strip().upper()


def resolve_instructor(raw: str, directory) -> InstructorRecord:
    """
    Find the instructor declared in the document.

    ``directory`` is anything with ``find_by_name(pattern)`` returning an
    InstructorRecord or None (see teachload.storage.InstructorDirectory).
    Raises InstructorNotFound if the name is missing or unknown.
    """
    name = extract_instructor_name(raw)
    pattern = NamePattern.from_text(name)
    if pattern.is_empty:
        logger.warning("instructor_name_missing")
        raise InstructorNotFound(name)

    instructor = directory.find_by_name(pattern)
    if instructor is None:
        logger.warning("instructor_not_found", name=name)
        raise InstructorNotFound(name)

    logger.info("instructor_resolved", name=name, instructor_id=instructor.id, full_name=instructor.full_name)
    return instructor

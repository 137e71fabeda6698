"""
Semester extraction.

Searches the raw document text (not the split lines) for a marker like

    1ST Semester, AY 2024-2025

and derives the canonical calendar window of that term:

    1ST -> Aug 1 .. Dec 15 of the start year
    2ND -> Jan 10 .. May 30 of the end year
    any other ordinal -> TBD

A missing marker degrades to a TBD window instead of failing the document.
"""

from __future__ import annotations

import re
from datetime import date

from teachload.logging import get_logger
from teachload.model import SemesterWindow, Term

logger = get_logger(__name__)

SEMESTER_RE = re.compile(r"(\d(?:ST|ND|RD|TH))\s+Semester,\s*AY\s*(\d{4})-(\d{4})", re.IGNORECASE)


def semester_window(ordinal: str, start_year: int, end_year: int) -> SemesterWindow:
    """
    Apply the term policy table to an already parsed marker.
    """
    ordinal = ordinal.upper()
    if ordinal == "1ST":
        return SemesterWindow(
            term=Term.FIRST,
            ordinal=ordinal,
            start_year=start_year,
            end_year=end_year,
            start_date=date(start_year, 8, 1),
            end_date=date(start_year, 12, 15),
        )
    if ordinal == "2ND":
        return SemesterWindow(
            term=Term.SECOND,
            ordinal=ordinal,
            start_year=start_year,
            end_year=end_year,
            start_date=date(end_year, 1, 10),
            end_date=date(end_year, 5, 30),
        )
    return SemesterWindow(term=Term.UNKNOWN, ordinal=ordinal, start_year=start_year, end_year=end_year)


def extract_semester(raw: str) -> SemesterWindow:
    """
    Find the first semester marker in the raw text and return its window.
    """
    match = SEMESTER_RE.search(raw)
    if not match:
        logger.warning("semester_not_found", fallback="TBD")
        return SemesterWindow(term=Term.UNKNOWN)

    ordinal, start_year, end_year = match.group(1).upper(), int(match.group(2)), int(match.group(3))
    try:
        window = semester_window(ordinal, start_year, end_year)
    except ValueError as exc:
        # e.g. AY 0000-0001: the marker is there but has no calendar dates
        logger.warning(
            "semester_invalid",
            ordinal=ordinal,
            start_year=start_year,
            end_year=end_year,
            error=str(exc),
            fallback="TBD",
        )
        return SemesterWindow(term=Term.UNKNOWN, ordinal=ordinal, start_year=start_year, end_year=end_year)

    logger.info(
        "semester_parsed",
        ordinal=window.ordinal,
        academic_year=window.academic_year,
        start=window.start_text,
        end=window.end_text,
    )
    return window

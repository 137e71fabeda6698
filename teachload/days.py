"""
Day-letter decoding ("MWF", "TTh", "S" -> DayMask).

The tests are case-sensitive and order-independent. Tuesday must not fire on
the "T" of "Th", so it uses a negative lookahead.
"""

from __future__ import annotations

import re

from teachload.model import DayMask

_DAY_TESTS = {
    "mon": re.compile(r"M"),
    "tue": re.compile(r"T(?!h)"),
    "wed": re.compile(r"W"),
    "thu": re.compile(r"Th|H"),
    "fri": re.compile(r"F"),
    "sat": re.compile(r"S"),
}


def decode_days(token: str) -> DayMask:
    """
    Convert a day-letter token into a weekly mask. An unrecognized token
    yields an empty (invalid) mask instead of an error.
    """
    return DayMask(**{day: bool(rx.search(token)) for day, rx in _DAY_TESTS.items()})

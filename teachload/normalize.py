"""
Text normalization (raw document text -> clean ordered lines).

Positional lookahead in the scanner ("the next line is the title", "the next
line is the day code") only works if every kept line carries content, so
blank and whitespace-only lines are always dropped here.
"""

from __future__ import annotations

import re
import unicodedata

_SPACES_RE = re.compile(r"[\t\u00a0\u2007\u202f]")


def _clean_line(line: str) -> str:
    line = _SPACES_RE.sub(" ", line)
    # remove control characters left behind by document conversion
    line = "".join(ch for ch in line if unicodedata.category(ch) != "Cc")
    return line.strip()


def normalize_lines(raw: str) -> list[str]:
    """
    Split raw text into trimmed, non-empty lines in their original order.
    """
    lines: list[str] = []
    for line in raw.splitlines():
        cleaned = _clean_line(line)
        if cleaned:
            lines.append(cleaned)
    return lines

"""
Section resolution ("IT 2A" -> SectionRecord).

A section label is "<course prefix> <level><block>". The block token is cut
into its first character (the section/level) and second character (the block
letter); the prefix only has to occur inside the record's course name.
"""

from __future__ import annotations

from typing import NamedTuple, Optional

from teachload.logging import get_logger
from teachload.model import SectionRecord

logger = get_logger(__name__)


class SectionKey(NamedTuple):
    course_prefix: str
    level: str
    block: str


def split_section_label(label: str) -> Optional[SectionKey]:
    """
    Decompose a section label, or return None when it has no usable block token.
    """
    parts = label.split()
    if len(parts) < 2 or len(parts[1]) < 2:
        return None
    prefix, block_token = parts[0], parts[1]
    return SectionKey(course_prefix=prefix, level=block_token[0], block=block_token[1])


def resolve_section(label: str, directory) -> Optional[SectionRecord]:
    """
    Look up the section a label refers to.

    ``directory`` is anything with ``find(course_prefix, level, block)``
    (see teachload.storage.SectionDirectory). Each call is one lookup; results
    are not cached between slots.
    """
    key = split_section_label(label)
    if key is None:
        logger.debug("section_label_unusable", label=label)
        return None
    return directory.find(key.course_prefix, key.level, key.block)

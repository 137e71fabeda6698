"""
Document text extraction (uploaded file -> plain text).

Supported formats:
- .docx  paragraphs and table cells in document order (python-docx)
- .html  visible text, one line per block (BeautifulSoup)
- .txt   read as UTF-8

With delete_after=True the file is removed once extraction is over, whether
it succeeded or not (uploads are temporary files).
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import docx
from bs4 import BeautifulSoup
from docx.oxml.ns import qn
from docx.table import Table
from docx.text.paragraph import Paragraph

from teachload.errors import DocumentError
from teachload.logging import get_logger

logger = get_logger(__name__)

SUPPORTED_SUFFIXES = {".docx", ".html", ".htm", ".txt"}


def _table_lines(table: Table) -> Iterator[str]:
    for row in table.rows:
        # merged cells are returned once per grid column, each time as a new
        # _Cell around the same <w:tc> element; python-docx has no public
        # accessor for that element, so this relies on the private _tc
        seen: list = []
        for cell in row.cells:
            if any(cell._tc is tc for tc in seen):
                continue
            seen.append(cell._tc)
            for paragraph in cell.paragraphs:
                yield paragraph.text
            for inner in cell.tables:
                yield from _table_lines(inner)


def _docx_lines(path: Path) -> Iterator[str]:
    document = docx.Document(str(path))
    for child in document.element.body.iterchildren():
        if child.tag == qn("w:p"):
            yield Paragraph(child, document).text
        elif child.tag == qn("w:tbl"):
            yield from _table_lines(Table(child, document))


def _read(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix == ".docx":
        return "\n".join(_docx_lines(path))
    if suffix in (".html", ".htm"):
        soup = BeautifulSoup(path.read_text(encoding="utf-8"), "html.parser")
        return soup.get_text("\n")
    return path.read_text(encoding="utf-8")


def extract_text(path: str | Path, delete_after: bool = False) -> str:
    """
    Return the plain text of a teaching-load document.

    Raises DocumentError for unsupported or unreadable files.
    """
    p = Path(path)
    try:
        if p.suffix.lower() not in SUPPORTED_SUFFIXES:
            raise DocumentError(f"Unsupported document type: {p.suffix or '(none)'}")
        try:
            text = _read(p)
        except Exception as exc:
            raise DocumentError(f"Cannot read {p.name}: {exc}") from exc
        logger.info("document_text_extracted", file=p.name, chars=len(text))
        return text
    finally:
        if delete_after:
            p.unlink(missing_ok=True)
            logger.debug("document_removed", file=p.name)

"""Error hierarchy for teaching-load parsing and schedule confirmation.

Only failures that stop a whole operation are raised. Per-slot drops and the
semester fallback are logged instead (see teachload.parse).
"""

from __future__ import annotations


class TeachLoadError(Exception):
    """Base exception for all teachload errors."""

    pass


class DocumentError(TeachLoadError):
    """The uploaded document could not be read or has an unsupported format."""

    pass


class InstructorNotFound(TeachLoadError):
    """No instructor record matches the name declared in the document.

    Fatal for the whole document: there is no per-slot instructor, so no
    draft can be attributed.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        shown = name if name else "(no name found)"
        super().__init__(f"Instructor not found in directory: {shown}")


class PersistenceError(TeachLoadError):
    """A confirmation batch could not be stored. Nothing from the batch was written."""

    pass

import unittest

from teachload.errors import InstructorNotFound
from teachload.instructor import extract_instructor_name, resolve_instructor
from teachload.storage import InstructorDirectory


INSTRUCTORS = [
    {"id": "u1", "first_name": "Maria", "middle_name": "Santos", "last_name": "Reyes"},
    {"id": "u2", "first_name": "Juan", "middle_name": "", "last_name": "Dela Cruz"},
]


class TestInstructor(unittest.TestCase):
    def setUp(self) -> None:
        self.directory = InstructorDirectory.from_records(INSTRUCTORS)

    def test_extract_name_uppercases_rest_of_line(self) -> None:
        raw = "header\nname of instructor:   Juan Dela Cruz  \nnext line"
        self.assertEqual(extract_instructor_name(raw), "JUAN DELA CRUZ")

    def test_missing_label(self) -> None:
        self.assertEqual(extract_instructor_name("no label here"), "")

    def test_resolves_with_empty_middle_name(self) -> None:
        rec = resolve_instructor("Name of Instructor: Juan Dela Cruz", self.directory)
        self.assertEqual(rec.id, "u2")

    def test_resolves_when_middle_name_not_written(self) -> None:
        rec = resolve_instructor("Name of Instructor: MARIA REYES", self.directory)
        self.assertEqual(rec.id, "u1")
        self.assertEqual(rec.display_name, "Reyes, Maria Santos")

    def test_unknown_name_raises(self) -> None:
        with self.assertRaises(InstructorNotFound) as ctx:
            resolve_instructor("Name of Instructor: Pedro Penduko", self.directory)
        self.assertEqual(ctx.exception.name, "PEDRO PENDUKO")

    def test_missing_name_raises(self) -> None:
        with self.assertRaises(InstructorNotFound):
            resolve_instructor("Name of Instructor:\n", self.directory)


if __name__ == "__main__":
    unittest.main()

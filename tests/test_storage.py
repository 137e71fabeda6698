"""
Unit tests for file-backed reference data and schedule storage.

Storage contract:
- Missing/invalid reference files -> empty directory
- schedules.json: a batch is validated completely before anything is written
- Stored records get an "id"
"""

import json
import tempfile
import unittest
from pathlib import Path

from teachload.errors import PersistenceError
from teachload.matching import NamePattern
from teachload.storage import InstructorDirectory, ScheduleStore, SectionDirectory


def make_record(**overrides):
    record = {
        "course_code": "IS101",
        "course_title": "Data Structures",
        "section_id": "s1",
        "instructor_id": "u1",
        "room": "TBD",
        "start_time": "08:00",
        "end_time": "09:30",
        "days": {"mon": True, "tue": False, "wed": True, "thu": False, "fri": True, "sat": False},
        "semester_start_date": "2024-08-01",
        "semester_end_date": "2024-12-15",
        "display_section": "BSIT 2A",
    }
    record.update(overrides)
    return record


class TestDirectories(unittest.TestCase):
    def test_load_missing_file_returns_empty(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            self.assertEqual(InstructorDirectory.load(Path(d) / "missing.json").all(), [])
            self.assertEqual(SectionDirectory.load(Path(d) / "missing.json").all(), [])

    def test_load_skips_malformed_entries(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "sections.json"
            p.write_text(
                json.dumps([
                    {"id": "s1", "course": "BSIT", "section": 2, "block": "A"},
                    {"course": "no id"},
                    "garbage",
                ]),
                encoding="utf-8",
            )
            sections = SectionDirectory.load(p).all()
            self.assertEqual(len(sections), 1)
            self.assertEqual(sections[0].section, "2")

    def test_broken_json_is_empty(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "instructors.json"
            p.write_text("{not json", encoding="utf-8")
            self.assertEqual(InstructorDirectory.load(p).all(), [])

    def test_first_match_wins(self) -> None:
        directory = InstructorDirectory.from_records([
            {"id": "u1", "first_name": "Ana", "middle_name": "", "last_name": "Cruz"},
            {"id": "u2", "first_name": "Ana", "middle_name": "B", "last_name": "Cruz"},
        ])
        found = directory.find_by_name(NamePattern.from_text("ANA CRUZ"))
        assert found is not None
        self.assertEqual(found.id, "u1")


class TestScheduleStore(unittest.TestCase):
    def test_insert_assigns_ids_and_appends(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            store = ScheduleStore(Path(d) / "schedules.json")
            first = store.insert_many([make_record()])
            second = store.insert_many([make_record(start_time="10:00", end_time="11:00")])
            self.assertEqual(len(first), 1)
            self.assertTrue(first[0]["id"])
            self.assertNotEqual(first[0]["id"], second[0]["id"])
            self.assertEqual([r["start_time"] for r in store.all()], ["08:00", "10:00"])

    def test_malformed_record_fails_whole_batch(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "schedules.json"
            store = ScheduleStore(p)
            bad = make_record(days={"mon": "yes"})
            with self.assertRaises(PersistenceError):
                store.insert_many([make_record(), bad])
            self.assertFalse(p.exists())
            self.assertEqual(store.all(), [])

    def test_missing_required_field(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            store = ScheduleStore(Path(d) / "schedules.json")
            record = make_record()
            del record["section_id"]
            with self.assertRaises(PersistenceError):
                store.insert_many([record])
            with self.assertRaises(PersistenceError):
                store.insert_many([make_record(room="  ")])
            with self.assertRaises(PersistenceError):
                store.insert_many([make_record(start_time="8am")])

    def test_existing_data_kept_when_batch_fails(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            store = ScheduleStore(Path(d) / "schedules.json")
            store.insert_many([make_record()])
            with self.assertRaises(PersistenceError):
                store.insert_many([make_record(), "not a record"])
            self.assertEqual(len(store.all()), 1)

    def test_corrupt_file_is_not_overwritten(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "schedules.json"
            p.write_text("{broken", encoding="utf-8")
            with self.assertRaises(PersistenceError):
                ScheduleStore(p).insert_many([make_record()])
            self.assertEqual(p.read_text(encoding="utf-8"), "{broken")


if __name__ == "__main__":
    unittest.main()

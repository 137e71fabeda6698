import tempfile
import unittest
from pathlib import Path

from teachload.commit import confirm
from teachload.errors import PersistenceError
from teachload.model import DayMask, ScheduleDraft
from teachload.storage import ScheduleStore


def make_draft(**overrides) -> ScheduleDraft:
    fields = dict(
        course_code="IS101",
        course_title="Data Structures",
        section_id="s1",
        instructor_id="u1",
        start_time="08:00",
        end_time="09:30",
        days=DayMask(mon=True, wed=True, fri=True),
        semester_start_date="2024-08-01",
        semester_end_date="2024-12-15",
        display_section="BSIT 2A",
    )
    fields.update(overrides)
    return ScheduleDraft(**fields)


class ExplodingStore:
    def insert_many(self, records):
        raise RuntimeError("disk on fire")


class TestConfirm(unittest.TestCase):
    def test_empty_batch_is_noop(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "schedules.json"
            self.assertEqual(confirm([], ScheduleStore(p)), [])
            self.assertFalse(p.exists())

    def test_drafts_and_edited_dicts(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            store = ScheduleStore(Path(d) / "schedules.json")
            edited = make_draft().to_record()
            edited["room"] = "Lab 3"
            saved = confirm([make_draft(), edited], store)
            self.assertEqual(len(saved), 2)
            self.assertEqual(saved[1]["room"], "Lab 3")
            self.assertEqual(len(store.all()), 2)

    def test_malformed_record_fails_batch(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            store = ScheduleStore(Path(d) / "schedules.json")
            bad = make_draft().to_record()
            bad["course_code"] = ""
            with self.assertRaises(PersistenceError):
                confirm([make_draft(), bad], store)
            self.assertEqual(store.all(), [])

    def test_unexpected_store_error_is_wrapped(self) -> None:
        with self.assertRaises(PersistenceError):
            confirm([make_draft()], ExplodingStore())


if __name__ == "__main__":
    unittest.main()

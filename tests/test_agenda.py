"""
Unit tests for the agenda views.

A schedule meets on a day if the day is inside its semester window and its
weekday flag is set.
"""

import unittest
from datetime import date, datetime

from teachload.agenda import meets_on, next_schedule, schedules_on

DAYS_MWF = {"mon": True, "tue": False, "wed": True, "thu": False, "fri": True, "sat": False}
DAYS_TTH = {"mon": False, "tue": True, "wed": False, "thu": True, "fri": False, "sat": False}


def rec(start, end, days, instructor="u1", sem_start="2024-08-01", sem_end="2024-12-15"):
    return {
        "instructor_id": instructor,
        "start_time": start,
        "end_time": end,
        "days": days,
        "room": "TBD",
        "semester_start_date": sem_start,
        "semester_end_date": sem_end,
    }


class TestAgenda(unittest.TestCase):
    # 2024-09-02 is a Monday, 2024-09-03 a Tuesday, 2024-09-08 a Sunday
    def test_weekday_and_window(self) -> None:
        r = rec("08:00", "09:30", DAYS_MWF)
        self.assertTrue(meets_on(r, date(2024, 9, 2)))
        self.assertFalse(meets_on(r, date(2024, 9, 3)))
        self.assertFalse(meets_on(r, date(2024, 9, 8)))
        self.assertFalse(meets_on(r, date(2025, 1, 6)))

    def test_tbd_window_never_matches(self) -> None:
        r = rec("08:00", "09:30", DAYS_MWF, sem_start="TBD", sem_end="TBD")
        self.assertFalse(meets_on(r, date(2024, 9, 2)))

    def test_schedules_on_sorted_and_filtered(self) -> None:
        records = [
            rec("13:00", "14:00", DAYS_MWF),
            rec("08:00", "09:30", DAYS_MWF),
            rec("10:00", "11:00", DAYS_TTH),
            rec("07:00", "08:00", DAYS_MWF, instructor="u2"),
        ]
        found = schedules_on(records, date(2024, 9, 2), "u1")
        self.assertEqual([r["start_time"] for r in found], ["08:00", "13:00"])
        self.assertEqual(len(schedules_on(records, date(2024, 9, 2))), 3)

    def test_next_schedule(self) -> None:
        records = [rec("08:00", "09:30", DAYS_MWF), rec("13:00", "14:00", DAYS_MWF)]
        nxt = next_schedule(records, datetime(2024, 9, 2, 9, 0))
        assert nxt is not None
        self.assertEqual(nxt["start_time"], "13:00")
        self.assertIsNone(next_schedule(records, datetime(2024, 9, 2, 13, 0)))


if __name__ == "__main__":
    unittest.main()

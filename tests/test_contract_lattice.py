import datetime as dt
import unittest

from daysheet.lattice import (
    add_minutes,
    build_lattice,
    compare_slots,
    format_clock,
    format_day_header,
    format_hour_label,
    format_time,
    hour_labels,
)
from daysheet.model import InvariantViolation, TimeSlot


class TestLatticeContract(unittest.TestCase):
    def test_lattice_has_45_quarter_hour_slots(self) -> None:
        lat = build_lattice()
        self.assertEqual(len(lat), 45)
        self.assertEqual(lat[0], TimeSlot(7, 0))
        self.assertEqual(lat[-1], TimeSlot(18, 0))

        for a, b in zip(lat, lat[1:]):
            self.assertLess(a, b)
            self.assertEqual(b.minutes - a.minutes, 15)

    def test_lattice_is_rebuilt_identically(self) -> None:
        self.assertEqual(build_lattice(), build_lattice())

    def test_slot_ordering_and_equality(self) -> None:
        self.assertLess(TimeSlot(9, 45), TimeSlot(10, 0))
        self.assertEqual(TimeSlot(9, 15), TimeSlot(9, 15))
        self.assertLess(compare_slots(TimeSlot(9, 0), TimeSlot(9, 15)), 0)
        self.assertGreater(compare_slots(TimeSlot(11, 0), TimeSlot(10, 45)), 0)
        self.assertEqual(compare_slots(TimeSlot(12, 30), TimeSlot(12, 30)), 0)

    def test_slot_rejects_off_lattice_values(self) -> None:
        with self.assertRaises(InvariantViolation):
            TimeSlot(6, 45)
        with self.assertRaises(InvariantViolation):
            TimeSlot(19, 0)
        with self.assertRaises(InvariantViolation):
            TimeSlot(9, 10)

    def test_add_minutes_carries_into_next_hour(self) -> None:
        self.assertEqual(add_minutes(TimeSlot(9, 45), 15), TimeSlot(10, 0))
        self.assertEqual(add_minutes(TimeSlot(9, 0), 15), TimeSlot(9, 15))
        with self.assertRaises(InvariantViolation):
            add_minutes(TimeSlot(18, 45), 15)

    def test_format_time_twelve_hour_clock(self) -> None:
        self.assertEqual(format_time(TimeSlot(7, 0)), "7:00 AM")
        self.assertEqual(format_time(TimeSlot(12, 15)), "12:15 PM")
        self.assertEqual(format_time(TimeSlot(13, 15)), "1:15 PM")
        self.assertEqual(format_time(TimeSlot(18, 0)), "6:00 PM")
        self.assertEqual(format_clock(0, 5), "12:05 AM")
        self.assertEqual(format_hour_label(11), "11:00 AM")
        self.assertEqual(format_hour_label(17), "5:00 PM")

    def test_format_clock_rejects_out_of_range(self) -> None:
        with self.assertRaises(InvariantViolation):
            format_clock(24, 0)
        with self.assertRaises(InvariantViolation):
            format_clock(10, 60)
        with self.assertRaises(InvariantViolation):
            format_hour_label(-1)

    def test_day_header(self) -> None:
        self.assertEqual(format_day_header(dt.date(2024, 7, 9)), "9 TUE")
        self.assertEqual(format_day_header(dt.date(2024, 7, 14)), "14 SUN")

    def test_hour_labels_cover_every_whole_hour(self) -> None:
        lat = build_lattice()
        labels = hour_labels(lat)
        self.assertEqual([h["hour"] for h in labels], list(range(7, 19)))
        self.assertEqual(labels[0]["label"], "7:00 AM")
        self.assertEqual(labels[0]["top_pct"], 0.0)
        self.assertAlmostEqual(labels[1]["top_pct"], 100.0 * 4 / 45)


if __name__ == "__main__":
    unittest.main(verbosity=2)

from __future__ import annotations

import unittest

import daysheet
import daysheet.api as api

# Grid engine operations callers build on; removing any of these is a breaking change.
CORE_OPERATIONS = (
    "build_lattice",
    "compare_slots",
    "add_minutes",
    "format_time",
    "format_hour_label",
    "format_day_header",
    "slot_from_pointer_y",
    "slot_index",
    "entry_geometry",
    "grid_lines",
    "start_drag",
    "update_drag",
    "commit_drag",
    "drag_preview",
    "normalize_endpoints",
    "apply_minimum_duration",
    "day_total_minutes",
    "format_day_total",
    "render",
)

CORE_TYPES = (
    "TimeSlot",
    "NewEntry",
    "CalendarEntry",
    "DragPreview",
    "ViewportGeometry",
    "DragIdle",
    "DragActive",
    "TimeGrid",
    "InvariantViolation",
)


class TestPublicApiContract(unittest.TestCase):
    def test_core_operations_are_exported_and_callable(self) -> None:
        for name in CORE_OPERATIONS:
            self.assertIn(name, api.__all__)
            self.assertTrue(callable(getattr(api, name)), f"daysheet.api.{name} is not callable")

    def test_core_types_are_exported(self) -> None:
        for name in CORE_TYPES:
            self.assertIn(name, api.__all__)
            self.assertIsInstance(getattr(api, name), type, f"daysheet.api.{name} is not a class")

    def test_host_side_names_are_exported(self) -> None:
        for name in ("DaySheetSession", "build_html", "parse_new_entry", "parse_entry", "EntryValidationError"):
            self.assertIn(name, api.__all__)

    def test_exports_are_sorted_unique_and_all_defined(self) -> None:
        exports = api._PUBLIC_EXPORTS
        self.assertEqual(list(exports), sorted(set(exports)))
        self.assertEqual(api.__all__, list(exports), "every listed export must be defined in daysheet.api")

    def test_package_root_reexports_the_same_objects(self) -> None:
        self.assertEqual(daysheet.__all__, api.__all__)
        for name in api.__all__:
            self.assertIs(getattr(daysheet, name), getattr(api, name), name)

    def test_lattice_bounds_through_public_api(self) -> None:
        lattice = daysheet.build_lattice()
        self.assertEqual(len(lattice), 45)
        self.assertEqual(daysheet.format_time(lattice[0]), "07:00")
        self.assertEqual(daysheet.format_time(lattice[-1]), "18:00")
        self.assertEqual(daysheet.slot_index(daysheet.TimeSlot(18, 0), lattice), 44)


if __name__ == "__main__":
    unittest.main(verbosity=2)

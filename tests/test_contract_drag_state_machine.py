import unittest

from daysheet.drag import (
    IDLE,
    DragActive,
    DragIdle,
    TimeGrid,
    commit_drag,
    drag_preview,
    start_drag,
    update_drag,
)
from daysheet.lattice import build_lattice
from daysheet.model import DEFAULT_COLOR, DEFAULT_TITLE, NewEntry, TimeSlot, ViewportGeometry

VP = ViewportGeometry(top=100.0, height=450.0)


def y_of(hour: int, minute: int) -> float:
    # Middle of the slot's 10px row.
    index = (hour - 7) * 4 + minute // 15
    return 100.0 + index * 10 + 5


class TestDragTransitionsContract(unittest.TestCase):
    def setUp(self) -> None:
        self.lat = build_lattice()

    def test_start_only_from_idle_with_primary_button(self) -> None:
        s = start_drag(IDLE, y_of(9, 0), VP, self.lat)
        self.assertEqual(s, DragActive(anchor=TimeSlot(9, 0), pointer_slot=TimeSlot(9, 0)))

        self.assertIs(start_drag(IDLE, y_of(9, 0), VP, self.lat, button=2), IDLE)

        again = start_drag(s, y_of(11, 0), VP, self.lat)
        self.assertIs(again, s)

    def test_update_moves_pointer_slot_only(self) -> None:
        s = start_drag(IDLE, y_of(9, 0), VP, self.lat)
        s = update_drag(s, y_of(10, 15), VP, self.lat)
        self.assertEqual(s, DragActive(anchor=TimeSlot(9, 0), pointer_slot=TimeSlot(10, 15)))

    def test_update_and_commit_are_noops_when_idle(self) -> None:
        self.assertIs(update_drag(IDLE, y_of(10, 0), VP, self.lat), IDLE)
        state, entry = commit_drag(IDLE, self.lat)
        self.assertIsInstance(state, DragIdle)
        self.assertIsNone(entry)

    def test_click_yields_minimum_duration(self) -> None:
        s = start_drag(IDLE, y_of(9, 0), VP, self.lat)
        state, entry = commit_drag(s, self.lat)
        self.assertIs(state, IDLE)
        self.assertEqual(
            entry,
            NewEntry(TimeSlot(9, 0), TimeSlot(9, 15), DEFAULT_TITLE, DEFAULT_COLOR),
        )

    def test_click_at_quarter_to_carries_hour(self) -> None:
        s = start_drag(IDLE, y_of(9, 45), VP, self.lat)
        _, entry = commit_drag(s, self.lat)
        self.assertEqual((entry.start_time, entry.end_time), (TimeSlot(9, 45), TimeSlot(10, 0)))

    def test_reversed_drag_is_normalized(self) -> None:
        s = start_drag(IDLE, y_of(10, 30), VP, self.lat)
        s = update_drag(s, y_of(9, 15), VP, self.lat)
        _, entry = commit_drag(s, self.lat)
        self.assertEqual((entry.start_time, entry.end_time), (TimeSlot(9, 15), TimeSlot(10, 30)))

    def test_commit_normalization_for_every_pair(self) -> None:
        for a in self.lat[::3]:
            for p in self.lat[::5]:
                _, entry = commit_drag(DragActive(anchor=a, pointer_slot=p), self.lat)
                self.assertLess(entry.start_time, entry.end_time)
                self.assertGreaterEqual(entry.end_time.minutes - entry.start_time.minutes, 15)
                self.assertIn(entry.start_time, self.lat)
                self.assertIn(entry.end_time, self.lat)

    def test_click_on_closing_slot_stays_inside_the_day(self) -> None:
        s = start_drag(IDLE, 10_000, VP, self.lat)
        self.assertEqual(s.anchor, TimeSlot(18, 0))
        _, entry = commit_drag(s, self.lat)
        self.assertEqual((entry.start_time, entry.end_time), (TimeSlot(17, 45), TimeSlot(18, 0)))

    def test_preview_is_ordered(self) -> None:
        self.assertIsNone(drag_preview(IDLE))
        pv = drag_preview(DragActive(anchor=TimeSlot(12, 0), pointer_slot=TimeSlot(11, 0)))
        self.assertEqual((pv.start, pv.end), (TimeSlot(11, 0), TimeSlot(12, 0)))


class TestTimeGridComponentContract(unittest.TestCase):
    def setUp(self) -> None:
        self.created = []
        self.grid = TimeGrid(on_entry_create=self.created.append)

    def test_click_scenario(self) -> None:
        self.grid.pointer_down(y_of(9, 0), VP)
        self.assertTrue(self.grid.dragging)
        self.grid.pointer_up()
        self.assertFalse(self.grid.dragging)
        self.assertEqual(len(self.created), 1)
        self.assertEqual(self.created[0].start_time, TimeSlot(9, 0))
        self.assertEqual(self.created[0].end_time, TimeSlot(9, 15))

    def test_leave_auto_commits(self) -> None:
        self.grid.pointer_down(y_of(14, 0), VP)
        self.grid.pointer_move(y_of(14, 30), VP)
        self.grid.pointer_move(y_of(15, 0), VP)
        entry = self.grid.pointer_leave()
        self.assertEqual(self.created, [entry])
        self.assertEqual((entry.start_time, entry.end_time), (TimeSlot(14, 0), TimeSlot(15, 0)))
        self.assertIsNone(self.grid.preview)

    def test_callback_runs_before_reset_to_idle(self) -> None:
        seen = []

        def on_create(entry: NewEntry) -> None:
            seen.append(grid.dragging)

        grid = TimeGrid(on_entry_create=on_create)
        grid.pointer_down(y_of(8, 0), VP)
        grid.pointer_up()
        self.assertEqual(seen, [True])
        self.assertFalse(grid.dragging)

    def test_failing_callback_still_ends_the_drag(self) -> None:
        calls = []

        def on_create(entry: NewEntry) -> None:
            calls.append(entry)
            raise RuntimeError("host rejected entry")

        grid = TimeGrid(on_entry_create=on_create)
        grid.pointer_down(y_of(11, 0), VP)
        with self.assertRaises(RuntimeError):
            grid.pointer_up()
        self.assertFalse(grid.dragging)

        self.assertIsNone(grid.pointer_leave())
        self.assertIsNone(grid.pointer_up())
        self.assertEqual(len(calls), 1)

    def test_stray_events_when_idle_do_nothing(self) -> None:
        self.grid.pointer_move(y_of(10, 0), VP)
        self.assertIsNone(self.grid.pointer_up())
        self.assertIsNone(self.grid.pointer_leave())
        self.assertEqual(self.created, [])

    def test_non_primary_button_ignored(self) -> None:
        self.grid.pointer_down(y_of(10, 0), VP, button=1)
        self.assertFalse(self.grid.dragging)
        self.grid.pointer_up()
        self.assertEqual(self.created, [])

    def test_exactly_one_entry_per_drag(self) -> None:
        self.grid.pointer_down(y_of(10, 0), VP)
        self.grid.pointer_up()
        self.grid.pointer_leave()
        self.grid.pointer_up()
        self.assertEqual(len(self.created), 1)

    def test_reset_drops_active_drag(self) -> None:
        self.grid.pointer_down(y_of(10, 0), VP)
        self.grid.reset()
        self.grid.pointer_up()
        self.assertEqual(self.created, [])


if __name__ == "__main__":
    unittest.main(verbosity=2)

# daysheet/interval.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

from .lattice import add_minutes, compare_slots
from .model import SLOT_MINUTES, CalendarEntry, TimeSlot

MIN_DURATION_MIN = SLOT_MINUTES


@dataclass(frozen=True)
class IntervalComputed:
    start: TimeSlot
    end: TimeSlot
    duration_min: int

    end_src: str        # "drag" | "min_duration" | "shifted_to_day_end"


def normalize_endpoints(a: TimeSlot, b: TimeSlot) -> Tuple[TimeSlot, TimeSlot]:
    """Order two drag endpoints so the first is never after the second."""
    if compare_slots(a, b) <= 0:
        return a, b
    return b, a


def apply_minimum_duration(
    start: TimeSlot,
    end: TimeSlot,
    lattice: Sequence[TimeSlot],
) -> IntervalComputed:
    """
    Floor an ordered interval at MIN_DURATION_MIN:
      - min_end = start + MIN_DURATION_MIN (hour carry)
      - end = max(end, min_end)
      - if min_end would leave the lattice (start is the closing slot),
        the interval becomes the last MIN_DURATION_MIN of the day instead
    """
    last = lattice[-1]
    if compare_slots(start, last) >= 0:
        shifted_start = lattice[-1 - MIN_DURATION_MIN // SLOT_MINUTES]
        return IntervalComputed(
            start=shifted_start,
            end=last,
            duration_min=MIN_DURATION_MIN,
            end_src="shifted_to_day_end",
        )

    min_end = add_minutes(start, MIN_DURATION_MIN)
    if compare_slots(end, min_end) < 0:
        end = min_end
        src = "min_duration"
    else:
        src = "drag"
    return IntervalComputed(
        start=start,
        end=end,
        duration_min=end.minutes - start.minutes,
        end_src=src,
    )


def entry_minutes(entry: CalendarEntry) -> int:
    return entry.end_time.minutes - entry.start_time.minutes


def day_total_minutes(entries: Iterable[CalendarEntry]) -> int:
    return sum(entry_minutes(e) for e in entries)


def format_day_total(total_minutes: int) -> str:
    # Seconds are always zero; entries live on a quarter-hour lattice.
    hours, minutes = divmod(int(total_minutes), 60)
    return f"{hours}:{minutes:02d}:00"


__all__ = [
    "MIN_DURATION_MIN",
    "IntervalComputed",
    "normalize_endpoints",
    "apply_minimum_duration",
    "entry_minutes",
    "day_total_minutes",
    "format_day_total",
]

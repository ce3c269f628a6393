# daysheet/lattice.py
from __future__ import annotations

import datetime as dt
from typing import Any, Dict, List, Sequence, Tuple

from .model import (
    DAY_END_HOUR,
    DAY_START_HOUR,
    SLOT_MINUTES,
    InvariantViolation,
    TimeSlot,
)

Lattice = Tuple[TimeSlot, ...]

_WEEKDAYS = ("MON", "TUE", "WED", "THU", "FRI", "SAT", "SUN")


def build_lattice() -> Lattice:
    """Every quarter-hour boundary from DAY_START_HOUR:00 to DAY_END_HOUR:00.

    The closing boundary is included, so the lattice has
    (DAY_END_HOUR - DAY_START_HOUR) * 4 + 1 slots.
    """
    out: List[TimeSlot] = []
    for hour in range(DAY_START_HOUR, DAY_END_HOUR + 1):
        for minute in range(0, 60, SLOT_MINUTES):
            if hour == DAY_END_HOUR and minute > 0:
                break
            out.append(TimeSlot(hour, minute))
    return tuple(out)


def compare_slots(a: TimeSlot, b: TimeSlot) -> int:
    if a.hour != b.hour:
        return a.hour - b.hour
    return a.minute - b.minute


def add_minutes(slot: TimeSlot, minutes: int) -> TimeSlot:
    # TimeSlot() rejects anything that falls off the end of the day.
    total = slot.hour * 60 + slot.minute + int(minutes)
    return TimeSlot(total // 60, total % 60)


def format_clock(hour: int, minute: int) -> str:
    if not (0 <= hour <= 23):
        raise InvariantViolation(f"hour out of range: {hour}")
    if not (0 <= minute <= 59):
        raise InvariantViolation(f"minute out of range: {minute}")
    period = "PM" if hour >= 12 else "AM"
    if hour == 0:
        display = 12
    elif hour > 12:
        display = hour - 12
    else:
        display = hour
    return f"{display}:{minute:02d} {period}"


def format_time(slot: TimeSlot) -> str:
    return format_clock(slot.hour, slot.minute)


def format_hour_label(hour: int) -> str:
    return format_clock(hour, 0)


def format_day_header(day: dt.date) -> str:
    """Day-of-month followed by the uppercase weekday, e.g. ``9 TUE``."""
    return f"{day.day} {_WEEKDAYS[day.weekday()]}"


def hour_labels(lattice: Sequence[TimeSlot]) -> List[Dict[str, Any]]:
    """Ruler labels for each whole hour that starts a row in the grid."""
    n = len(lattice)
    out: List[Dict[str, Any]] = []
    for i, slot in enumerate(lattice):
        if slot.minute != 0:
            continue
        out.append({
            "hour": slot.hour,
            "label": format_hour_label(slot.hour),
            "top_pct": 100.0 * i / n,
        })
    return out


__all__ = [
    "Lattice",
    "build_lattice",
    "compare_slots",
    "add_minutes",
    "format_clock",
    "format_time",
    "format_hour_label",
    "format_day_header",
    "hour_labels",
]

"""Wire-format validation helpers (entries and pointer events)."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .lattice import build_lattice, compare_slots
from .model import (
    DEFAULT_COLOR,
    DEFAULT_TITLE,
    CalendarEntry,
    InvariantViolation,
    NewEntry,
    TimeSlot,
    ViewportGeometry,
)

_COLOR_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")
_HHMM_RE = re.compile(r"^(\d{1,2}):(\d{2})$")

POINTER_EVENT_TYPES = ("down", "move", "up", "leave")
MAX_TITLE_LEN = 200


class EntryValidationError(ValueError):
    """Raised when an entry or pointer event dict fails validation."""

    def __init__(self, errors: List[str]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) if self.errors else "invalid")


def _require(cond: bool, msg: str, errs: List[str]) -> None:
    if not cond:
        errs.append(msg)


_MAX_EXACT_INT = 2 ** 53


def _is_number(v: Any) -> bool:
    # JSON ints are unbounded; past 2**53 they no longer convert to float exactly.
    if isinstance(v, bool):
        return False
    if isinstance(v, int):
        return abs(v) <= _MAX_EXACT_INT
    return isinstance(v, float) and math.isfinite(v)


def parse_slot(obj: Any) -> TimeSlot:
    """Accept ``{"hour": 9, "minute": 15}`` or ``"09:15"``."""
    if isinstance(obj, str):
        m = _HHMM_RE.match(obj.strip())
        if not m:
            raise InvariantViolation(f"Invalid HH:MM: {obj!r}")
        return TimeSlot(int(m.group(1)), int(m.group(2)))
    if isinstance(obj, dict):
        hour = obj.get("hour")
        minute = obj.get("minute")
        if isinstance(hour, bool) or isinstance(minute, bool):
            raise InvariantViolation(f"Invalid slot: {obj!r}")
        return TimeSlot(hour, minute)  # type: ignore[arg-type]
    raise InvariantViolation(f"Invalid slot: {obj!r}")


def _slot_field(d: Dict[str, Any], key: str, errs: List[str]) -> Optional[TimeSlot]:
    if key not in d:
        errs.append(f"{key} is required")
        return None
    try:
        return parse_slot(d[key])
    except InvariantViolation as e:
        errs.append(f"{key}: {e}")
        return None


def validate_entry_dict(d: Any, *, require_id: bool) -> List[str]:
    errs: List[str] = []
    if not isinstance(d, dict):
        return [f"entry must be dict, got {type(d).__name__}"]

    if require_id:
        eid = d.get("id")
        _require(isinstance(eid, str) and bool(eid.strip()), "id must be non-empty string", errs)

    start = _slot_field(d, "start_time", errs)
    end = _slot_field(d, "end_time", errs)

    if start is not None and end is not None:
        lattice = build_lattice()
        _require(compare_slots(start, end) < 0, "start_time must precede end_time", errs)
        _require(
            compare_slots(lattice[0], start) <= 0 and compare_slots(end, lattice[-1]) <= 0,
            f"entry must lie within {lattice[0].hhmm()}-{lattice[-1].hhmm()}",
            errs,
        )

    title = d.get("title", DEFAULT_TITLE)
    _require(isinstance(title, str) and bool(title.strip()), "title must be non-empty string", errs)
    if isinstance(title, str):
        _require(len(title) <= MAX_TITLE_LEN, f"title longer than {MAX_TITLE_LEN} chars", errs)

    color = d.get("color", DEFAULT_COLOR)
    _require(isinstance(color, str) and bool(_COLOR_RE.match(color)), "color must be #RRGGBB", errs)
    return errs


def parse_new_entry(d: Any) -> NewEntry:
    errs = validate_entry_dict(d, require_id=False)
    if errs:
        raise EntryValidationError(errs)
    return NewEntry(
        start_time=parse_slot(d["start_time"]),
        end_time=parse_slot(d["end_time"]),
        title=str(d.get("title", DEFAULT_TITLE)).strip(),
        color=str(d.get("color", DEFAULT_COLOR)),
    )


def parse_entry(d: Any) -> CalendarEntry:
    errs = validate_entry_dict(d, require_id=True)
    if errs:
        raise EntryValidationError(errs)
    return parse_new_entry({k: v for k, v in d.items() if k != "id"}).with_id(d["id"].strip())


@dataclass(frozen=True)
class PointerEvent:
    type: str
    y: float
    button: int
    viewport: Optional[ViewportGeometry]


def parse_pointer_event(d: Any) -> PointerEvent:
    errs: List[str] = []
    if not isinstance(d, dict):
        raise EntryValidationError([f"pointer event must be dict, got {type(d).__name__}"])

    kind = d.get("type")
    _require(kind in POINTER_EVENT_TYPES, f"type must be one of {', '.join(POINTER_EVENT_TYPES)}", errs)

    y = d.get("y", 0)
    _require(_is_number(y), "y must be a finite number", errs)

    button = d.get("button", 0)
    _require(isinstance(button, int) and not isinstance(button, bool), "button must be int", errs)

    viewport = None
    grid = d.get("grid")
    if grid is not None:
        if not isinstance(grid, dict):
            errs.append("grid must be dict or null")
        else:
            top = grid.get("top")
            height = grid.get("height")
            _require(_is_number(top), "grid.top must be a finite number", errs)
            _require(_is_number(height), "grid.height must be a finite number", errs)
            if _is_number(top) and _is_number(height):
                viewport = ViewportGeometry(top=float(top), height=float(height))

    if errs:
        raise EntryValidationError(errs)
    return PointerEvent(type=str(kind), y=float(y), button=int(button), viewport=viewport)


__all__ = [
    "POINTER_EVENT_TYPES",
    "MAX_TITLE_LEN",
    "EntryValidationError",
    "InvariantViolation",
    "PointerEvent",
    "parse_slot",
    "validate_entry_dict",
    "parse_new_entry",
    "parse_entry",
    "parse_pointer_event",
]

# daysheet/model.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

DAY_START_HOUR = 7
DAY_END_HOUR = 18
SLOT_MINUTES = 15
QUARTERS = (0, 15, 30, 45)

DEFAULT_TITLE = "New Task"
DEFAULT_COLOR = "#3B82F6"


class InvariantViolation(ValueError):
    """Raised when a caller breaks a value-type or lattice contract."""


@dataclass(frozen=True, order=True)
class TimeSlot:
    # Field order drives ordering: hour first, then minute.
    hour: int
    minute: int

    def __post_init__(self) -> None:
        if not isinstance(self.hour, int) or not isinstance(self.minute, int):
            raise InvariantViolation(f"TimeSlot fields must be int: {self.hour!r}:{self.minute!r}")
        if not (DAY_START_HOUR <= self.hour <= DAY_END_HOUR):
            raise InvariantViolation(f"TimeSlot hour out of range: {self.hour}")
        if self.minute not in QUARTERS:
            raise InvariantViolation(f"TimeSlot minute must be a quarter hour: {self.minute}")

    @property
    def minutes(self) -> int:
        """Minutes since midnight."""
        return self.hour * 60 + self.minute

    def hhmm(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"

    def to_dict(self) -> Dict[str, int]:
        return {"hour": self.hour, "minute": self.minute}


@dataclass(frozen=True)
class NewEntry:
    """An entry minted by a drag commit; the host assigns its id."""

    start_time: TimeSlot
    end_time: TimeSlot
    title: str = DEFAULT_TITLE
    color: str = DEFAULT_COLOR

    def with_id(self, entry_id: str) -> "CalendarEntry":
        return CalendarEntry(
            id=entry_id,
            start_time=self.start_time,
            end_time=self.end_time,
            title=self.title,
            color=self.color,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "start_time": self.start_time.to_dict(),
            "end_time": self.end_time.to_dict(),
            "title": self.title,
            "color": self.color,
        }


@dataclass(frozen=True)
class CalendarEntry:
    id: str
    start_time: TimeSlot
    end_time: TimeSlot
    title: str
    color: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "start_time": self.start_time.to_dict(),
            "end_time": self.end_time.to_dict(),
            "title": self.title,
            "color": self.color,
        }


@dataclass(frozen=True)
class DragPreview:
    start: TimeSlot
    end: TimeSlot


@dataclass(frozen=True)
class ViewportGeometry:
    top: float
    height: float


@dataclass(frozen=True)
class SlotGeometry:
    top_pct: float
    height_pct: float


# Host-supplied pointer box; None until the grid has been laid out.
Viewport = Optional[ViewportGeometry]


__all__ = [
    "DAY_START_HOUR",
    "DAY_END_HOUR",
    "SLOT_MINUTES",
    "QUARTERS",
    "DEFAULT_TITLE",
    "DEFAULT_COLOR",
    "InvariantViolation",
    "TimeSlot",
    "NewEntry",
    "CalendarEntry",
    "DragPreview",
    "ViewportGeometry",
    "SlotGeometry",
    "Viewport",
]

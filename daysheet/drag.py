# daysheet/drag.py
"""Drag state machine for the day grid.

Transitions are pure functions over an immutable ``DragState``:

    Idle --start--> Active --update*--> Active --commit--> Idle

``TimeGrid`` wraps them for a host that wants callback-style output and keeps
the single mutable state slot. Stray move/up/leave events while Idle are
no-ops, since the host can reset the grid between events.
"""

from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple, Union

from .geometry import slot_from_pointer_y
from .interval import apply_minimum_duration, normalize_endpoints
from .lattice import build_lattice
from .model import (
    DEFAULT_COLOR,
    DEFAULT_TITLE,
    CalendarEntry,
    DragPreview,
    NewEntry,
    TimeSlot,
    Viewport,
)

logger = logging.getLogger(__name__)

PRIMARY_BUTTON = 0


@dataclass(frozen=True)
class DragIdle:
    pass


@dataclass(frozen=True)
class DragActive:
    anchor: TimeSlot
    pointer_slot: TimeSlot


DragState = Union[DragIdle, DragActive]
IDLE = DragIdle()

EntryCallback = Callable[[NewEntry], None]


def start_drag(
    state: DragState,
    y: float,
    viewport: Viewport,
    lattice: Sequence[TimeSlot],
    *,
    button: int = PRIMARY_BUTTON,
) -> DragState:
    if button != PRIMARY_BUTTON or isinstance(state, DragActive):
        return state
    anchor = slot_from_pointer_y(y, viewport, lattice)
    return DragActive(anchor=anchor, pointer_slot=anchor)


def update_drag(
    state: DragState,
    y: float,
    viewport: Viewport,
    lattice: Sequence[TimeSlot],
) -> DragState:
    if not isinstance(state, DragActive):
        return state
    slot = slot_from_pointer_y(y, viewport, lattice)
    if slot == state.pointer_slot:
        return state
    return DragActive(anchor=state.anchor, pointer_slot=slot)


def commit_drag(
    state: DragState,
    lattice: Sequence[TimeSlot],
    *,
    title: str = DEFAULT_TITLE,
    color: str = DEFAULT_COLOR,
) -> Tuple[DragState, Optional[NewEntry]]:
    """Finish a drag; returns (IDLE, entry), or (state, None) when Idle."""
    if not isinstance(state, DragActive):
        return state, None
    start, end = normalize_endpoints(state.anchor, state.pointer_slot)
    # A click on the closing slot yields the last quarter hour (17:45-18:00).
    iv = apply_minimum_duration(start, end, lattice)
    entry = NewEntry(start_time=iv.start, end_time=iv.end, title=title, color=color)
    return IDLE, entry


def drag_preview(state: DragState) -> Optional[DragPreview]:
    if not isinstance(state, DragActive):
        return None
    start, end = normalize_endpoints(state.anchor, state.pointer_slot)
    return DragPreview(start=start, end=end)


class TimeGrid:
    """The day grid component: one drag at a time, entries go to the host."""

    def __init__(self, on_entry_create: EntryCallback) -> None:
        self.on_entry_create = on_entry_create
        self.state: DragState = IDLE

    @property
    def lattice(self) -> Tuple[TimeSlot, ...]:
        # Re-derived from constants; never stored.
        return build_lattice()

    @property
    def dragging(self) -> bool:
        return isinstance(self.state, DragActive)

    @property
    def preview(self) -> Optional[DragPreview]:
        return drag_preview(self.state)

    def pointer_down(self, y: float, viewport: Viewport, button: int = PRIMARY_BUTTON) -> None:
        self.state = start_drag(self.state, y, viewport, self.lattice, button=button)

    def pointer_move(self, y: float, viewport: Viewport) -> None:
        self.state = update_drag(self.state, y, viewport, self.lattice)

    def pointer_up(self) -> Optional[NewEntry]:
        state, entry = commit_drag(self.state, self.lattice)
        if entry is not None:
            logger.debug(
                "drag committed %s-%s",
                entry.start_time.hhmm(),
                entry.end_time.hhmm(),
            )
            try:
                self.on_entry_create(entry)
            finally:
                self.state = state
        return entry

    def pointer_leave(self) -> Optional[NewEntry]:
        # Leaving the grid mid-drag commits rather than discarding.
        return self.pointer_up()

    def reset(self) -> None:
        self.state = IDLE

    def view(self, entries: Sequence[CalendarEntry], day: dt.date, *, live: bool = False) -> dict:
        from .view import render

        return render(self.state, entries, day, live=live)


__all__ = [
    "PRIMARY_BUTTON",
    "DragIdle",
    "DragActive",
    "DragState",
    "IDLE",
    "EntryCallback",
    "start_drag",
    "update_drag",
    "commit_drag",
    "drag_preview",
    "TimeGrid",
]

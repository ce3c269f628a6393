# daysheet/view.py
from __future__ import annotations

import datetime as dt
from typing import Any, Dict, List, Optional, Sequence

from .drag import DragState, drag_preview
from .geometry import entry_geometry, grid_lines
from .interval import day_total_minutes, format_day_total
from .lattice import build_lattice, format_day_header, format_time, hour_labels
from .model import (
    DAY_END_HOUR,
    DAY_START_HOUR,
    DEFAULT_COLOR,
    DEFAULT_TITLE,
    SLOT_MINUTES,
    CalendarEntry,
    TimeSlot,
)

VIEW_SCHEMA_VERSION = 1

Payload = Dict[str, Any]


def _block(start: TimeSlot, end: TimeSlot, lattice: Sequence[TimeSlot]) -> Payload:
    geo = entry_geometry(start, end, lattice)
    return {
        "start": start.hhmm(),
        "end": end.hhmm(),
        "label": f"{format_time(start)} - {format_time(end)}",
        "top_pct": geo.top_pct,
        "height_pct": geo.height_pct,
    }


def render(
    state: DragState,
    entries: Sequence[CalendarEntry],
    day: dt.date,
    *,
    live: bool = False,
) -> Payload:
    """Build the grid's view model from drag state, host entries and date.

    Pure: the lattice is rebuilt from constants on every call and entries are
    only read.
    """
    lattice = build_lattice()

    items: List[Payload] = []
    for e in entries:
        block = _block(e.start_time, e.end_time, lattice)
        block.update({"id": e.id, "title": e.title, "color": e.color})
        items.append(block)

    preview: Optional[Payload] = None
    pv = drag_preview(state)
    if pv is not None:
        preview = _block(pv.start, pv.end, lattice)
        preview["title"] = DEFAULT_TITLE

    return {
        "schema_version": VIEW_SCHEMA_VERSION,
        "cfg": {
            "slot_minutes": SLOT_MINUTES,
            "day_start": f"{DAY_START_HOUR:02d}:00",
            "day_end": f"{DAY_END_HOUR:02d}:00",
            "slot_count": len(lattice),
            "default_title": DEFAULT_TITLE,
            "default_color": DEFAULT_COLOR,
            "live": bool(live),
        },
        "header": {
            "date": day.isoformat(),
            "date_label": format_day_header(day),
            "day_total": format_day_total(day_total_minutes(entries)),
        },
        "hour_labels": hour_labels(lattice),
        "grid_lines": grid_lines(lattice),
        "entries": items,
        "preview": preview,
        "dragging": pv is not None,
    }


__all__ = ["VIEW_SCHEMA_VERSION", "render"]

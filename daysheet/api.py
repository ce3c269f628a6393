"""daysheet.api

Stable *library* entrypoint for DAYSHEET.

Policy:
  - Only names listed in __all__ are considered public API.
  - Everything else is internal and may change without notice.
"""

from __future__ import annotations

from daysheet.drag import (
    DragActive,
    DragIdle,
    TimeGrid,
    commit_drag,
    drag_preview,
    start_drag,
    update_drag,
)
from daysheet.geometry import entry_geometry, grid_lines, slot_from_pointer_y, slot_index
from daysheet.host import DaySheetSession
from daysheet.interval import (
    apply_minimum_duration,
    day_total_minutes,
    format_day_total,
    normalize_endpoints,
)
from daysheet.lattice import (
    add_minutes,
    build_lattice,
    compare_slots,
    format_day_header,
    format_hour_label,
    format_time,
)
from daysheet.model import (
    CalendarEntry,
    DragPreview,
    InvariantViolation,
    NewEntry,
    TimeSlot,
    ViewportGeometry,
)
from daysheet.render.inline import build_html
from daysheet.validate import EntryValidationError, parse_entry, parse_new_entry
from daysheet.view import render


# --- Public API exports (locked by contract tests) ------------------------
# Keep changes intentional and reviewable.
# Prefer append-only unless you are intentionally reshaping the public surface.
_PUBLIC_EXPORTS = (
    "CalendarEntry",
    "DaySheetSession",
    "DragActive",
    "DragIdle",
    "DragPreview",
    "EntryValidationError",
    "InvariantViolation",
    "NewEntry",
    "TimeGrid",
    "TimeSlot",
    "ViewportGeometry",
    "add_minutes",
    "apply_minimum_duration",
    "build_html",
    "build_lattice",
    "commit_drag",
    "compare_slots",
    "day_total_minutes",
    "drag_preview",
    "entry_geometry",
    "format_day_header",
    "format_day_total",
    "format_hour_label",
    "format_time",
    "grid_lines",
    "normalize_endpoints",
    "parse_entry",
    "parse_new_entry",
    "render",
    "slot_from_pointer_y",
    "slot_index",
    "start_drag",
    "update_drag",
)

__all__ = [n for n in _PUBLIC_EXPORTS if n in globals()]
# --- /Public API exports --------------------------------------------------

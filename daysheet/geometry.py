# daysheet/geometry.py
from __future__ import annotations

import logging
import math
from typing import Any, Dict, List, Sequence

from .model import InvariantViolation, SlotGeometry, TimeSlot, Viewport

logger = logging.getLogger(__name__)


def slot_from_pointer_y(y: float, viewport: Viewport, lattice: Sequence[TimeSlot]) -> TimeSlot:
    """Map a vertical pointer coordinate to the lattice slot under it.

    Coordinates above or below the grid clamp to the first/last slot so a drag
    that leaves the grid still resolves. Without a laid-out grid the first slot
    is returned.
    """
    if viewport is None or not viewport.height or viewport.height <= 0:
        return lattice[0]

    relative_y = float(y) - float(viewport.top)
    slot_height = float(viewport.height) / len(lattice)
    raw = relative_y / slot_height
    if math.isnan(raw):
        return lattice[0]
    if math.isinf(raw):
        return lattice[0] if raw < 0 else lattice[-1]

    index = int(math.floor(raw))
    index = max(0, min(index, len(lattice) - 1))
    return lattice[index]


def slot_index(slot: TimeSlot, lattice: Sequence[TimeSlot], *, strict: bool = False) -> int:
    for i, s in enumerate(lattice):
        if s.hour == slot.hour and s.minute == slot.minute:
            return i
    if strict:
        raise InvariantViolation(f"slot {slot.hhmm()} is not on the lattice")
    logger.warning("slot %s is not on the lattice; placing it at the top", slot.hhmm())
    return 0


def entry_geometry(
    start: TimeSlot,
    end: TimeSlot,
    lattice: Sequence[TimeSlot],
    *,
    strict: bool = False,
) -> SlotGeometry:
    # The end slot's own row is part of the block, hence the +1.
    n = len(lattice)
    i = slot_index(start, lattice, strict=strict)
    j = slot_index(end, lattice, strict=strict)
    return SlotGeometry(
        top_pct=100.0 * i / n,
        height_pct=100.0 * (j - i + 1) / n,
    )


def grid_lines(lattice: Sequence[TimeSlot]) -> List[Dict[str, Any]]:
    n = len(lattice)
    return [
        {
            "key": f"{s.hour}-{s.minute}",
            "top_pct": 100.0 * i / n,
            "height_pct": 100.0 / n,
            "style": "solid" if s.minute == 0 else "dashed",
        }
        for i, s in enumerate(lattice)
    ]


__all__ = [
    "slot_from_pointer_y",
    "slot_index",
    "entry_geometry",
    "grid_lines",
]

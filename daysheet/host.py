# daysheet/host.py
"""Host side of the page: owns entries and the chat transcript.

The grid core never assigns ids or stores anything; ``DaySheetSession`` does
both and is the only writer of ``entries``.
"""

from __future__ import annotations

import datetime as dt
import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from .drag import TimeGrid
from .model import CalendarEntry, NewEntry
from .validate import PointerEvent, parse_new_entry, parse_pointer_event
from .view import render

logger = logging.getLogger(__name__)

APP_TITLE = "AI Timesheet Assistant"

OPENING_MESSAGES = (
    ("user", "I want to fill in a timesheet for yesterday"),
    (
        "assistant",
        "Did you want to tell me which hours were used for which task? "
        "Most commonly used are coding and meetings tasks.",
    ),
)

REPLY_TEXT = "I'll help you organize your timesheet. What specific tasks did you work on yesterday?"


@dataclass(frozen=True)
class Message:
    id: str
    role: str       # "user" | "assistant"
    content: str
    timestamp: dt.datetime

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "role": self.role,
            "content": self.content,
            "timestamp": self.timestamp.isoformat(timespec="seconds"),
            "time_label": self.timestamp.strftime("%H:%M:%S"),
        }


def _now_ms() -> int:
    return int(time.time() * 1000)


class DaySheetSession:
    def __init__(
        self,
        day: dt.date,
        *,
        reply_delay: float = 1.0,
        reply_text: str = REPLY_TEXT,
        clock: Callable[[], int] = _now_ms,
    ) -> None:
        self.day = day
        self.reply_delay = float(reply_delay)
        self.reply_text = reply_text
        self._clock = clock
        self._lock = threading.Lock()

        self.entries: List[CalendarEntry] = []
        self.messages: List[Message] = []
        self.grid = TimeGrid(on_entry_create=self._on_entry_create)

        now = dt.datetime.now()
        for i, (role, content) in enumerate(OPENING_MESSAGES, start=1):
            self.messages.append(Message(id=str(i), role=role, content=content, timestamp=now))

    # --- ids -----------------------------------------------------------------
    def _next_id(self, taken: set[str]) -> str:
        n = int(self._clock())
        while str(n) in taken:
            n += 1
        return str(n)

    # --- calendar --------------------------------------------------------------
    def _on_entry_create(self, new: NewEntry) -> CalendarEntry:
        # Called with the lock held (from pointer() or add_entry()).
        entry = new.with_id(self._next_id({e.id for e in self.entries}))
        self.entries.append(entry)
        logger.info(
            "entry %s created %s-%s (%s)",
            entry.id,
            entry.start_time.hhmm(),
            entry.end_time.hhmm(),
            entry.title,
        )
        return entry

    def pointer(self, event: Dict[str, Any]) -> Dict[str, Any]:
        """Apply one browser pointer event and return the new snapshot."""
        ev = parse_pointer_event(event)
        with self._lock:
            self._dispatch(ev)
            return self._snapshot_locked()

    def _dispatch(self, ev: PointerEvent) -> None:
        if ev.type == "down":
            self.grid.pointer_down(ev.y, ev.viewport, button=ev.button)
        elif ev.type == "move":
            self.grid.pointer_move(ev.y, ev.viewport)
        elif ev.type == "up":
            self.grid.pointer_up()
        elif ev.type == "leave":
            self.grid.pointer_leave()

    def add_entry(self, payload: Dict[str, Any]) -> CalendarEntry:
        new = parse_new_entry(payload)
        with self._lock:
            return self._on_entry_create(new)

    # --- chat ----------------------------------------------------------------
    def send_message(self, text: str) -> Optional[Message]:
        content = (text or "").strip()
        if not content:
            return None
        with self._lock:
            msg = Message(
                id=self._next_id({m.id for m in self.messages}),
                role="user",
                content=content,
                timestamp=dt.datetime.now(),
            )
            self.messages.append(msg)
        logger.debug("chat message %s (%d chars)", msg.id, len(content))

        # Fire-and-forget; nothing cancels a pending reply.
        timer = threading.Timer(self.reply_delay, self._reply)
        timer.daemon = True
        timer.start()
        return msg

    def _reply(self) -> None:
        with self._lock:
            msg = Message(
                id=self._next_id({m.id for m in self.messages}),
                role="assistant",
                content=self.reply_text,
                timestamp=dt.datetime.now(),
            )
            self.messages.append(msg)

    # --- snapshot ------------------------------------------------------------
    def _snapshot_locked(self, *, live: bool = True) -> Dict[str, Any]:
        data = render(self.grid.state, list(self.entries), self.day, live=live)
        data["title"] = APP_TITLE
        data["messages"] = [m.to_dict() for m in self.messages]
        return data

    def snapshot(self, *, live: bool = True) -> Dict[str, Any]:
        with self._lock:
            return self._snapshot_locked(live=live)


__all__ = [
    "APP_TITLE",
    "OPENING_MESSAGES",
    "REPLY_TEXT",
    "Message",
    "DaySheetSession",
]

# daysheet/render/html_markup.py
from __future__ import annotations

from .markup.header import MARKUP as HEADER
from .markup.chat_panel import MARKUP as CHAT_PANEL
from .markup.calendar_panel import MARKUP as CALENDAR_PANEL
from .markup.layout_close import MARKUP as LAYOUT_CLOSE

# Exact concatenation; no separators inserted here.
BODY_MARKUP = (
    HEADER
    + CHAT_PANEL
    + CALENDAR_PANEL
    + LAYOUT_CLOSE
)

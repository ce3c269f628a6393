# daysheet/render/css/part03_calendar.py
from __future__ import annotations

CSS_PART = r'''  .calendar {
    flex: 1;
    max-width: 520px;
    height: 600px;
    margin: auto;
  }
  #dayTotal { color: var(--muted); font-variant-numeric: tabular-nums; }

  .cal-wrap {
    display: flex;
    height: 100%;
    background: var(--cal-surface);
  }
  .time-col {
    position: relative;
    width: var(--ruler-w);
    flex: none;
    background: var(--panel2);
    border-right: 1px solid var(--line);
  }
  .time-col .lbl {
    position: absolute;
    right: 8px;
    margin-top: 2px;
    font-size: 12px;
    color: var(--muted);
  }

  .grid {
    position: relative;
    flex: 1;
    user-select: none;
    cursor: crosshair;
  }
  .grid.dragging { cursor: grabbing; }

  .gl {
    position: absolute;
    left: 0;
    right: 0;
    border-top: 1px solid var(--line);
  }
  .gl.dashed { border-top-style: dashed; }

  .evt, .evt-preview {
    position: absolute;
    left: 4px;
    right: 4px;
    overflow: hidden;
    padding: 2px 8px;
    border-radius: 6px;
    border-left: 4px solid var(--accent);
    font-size: 12px;
  }
  .evt { box-shadow: 0 1px 2px var(--shadow); }
  .evt .t, .evt-preview .t {
    font-weight: 500;
    white-space: nowrap;
    overflow: hidden;
    text-overflow: ellipsis;
  }
  .evt .r { color: var(--muted); }
  .evt-preview {
    pointer-events: none;
    background: rgba(var(--accent-rgb), 0.30);
    color: #1e40af;
  }
'''

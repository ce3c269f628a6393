# daysheet/render/markup/calendar_panel.py
from __future__ import annotations

MARKUP = r"""<section class="card calendar">
    <div class="card-h">
      <div id="dateLabel"></div>
      <small id="dayTotal" title="Tracked today"></small>
    </div>
    <div class="card-b" style="padding:0">
      <div class="cal-wrap">
        <div class="time-col" id="ruler"></div>
        <div class="grid" id="grid"></div>
      </div>
    </div>
  </section>"""

# daysheet/render/js/part03_grid_drag.py
from __future__ import annotations

JS_PART = r'''// Grid rendering
  // -----------------------------
  function pct(v) { return String(v) + "%"; }

  function renderRuler(labels) {
    const ruler = byId("ruler");
    if (!ruler) return;
    ruler.replaceChildren();
    for (const h of (labels || [])) {
      const n = el("div", "lbl", h.label);
      n.style.top = pct(h.top_pct);
      ruler.appendChild(n);
    }
  }

  function renderGrid(view) {
    const grid = byId("grid");
    if (!grid) return;
    grid.replaceChildren();
    grid.classList.toggle("dragging", !!view.dragging);

    for (const g of (view.grid_lines || [])) {
      const n = el("div", "gl" + (g.style === "dashed" ? " dashed" : ""));
      n.style.top = pct(g.top_pct);
      n.style.height = pct(g.height_pct);
      grid.appendChild(n);
    }

    for (const e of (view.entries || [])) {
      const n = el("div", "evt");
      n.dataset.id = e.id;
      n.style.top = pct(e.top_pct);
      n.style.height = pct(e.height_pct);
      n.style.backgroundColor = e.color + "20";
      n.style.borderLeftColor = e.color;
      n.appendChild(el("div", "t", e.title));
      n.appendChild(el("div", "r", e.label));
      grid.appendChild(n);
    }

    const pv = view.preview;
    if (pv) {
      const n = el("div", "evt-preview");
      n.style.top = pct(pv.top_pct);
      n.style.height = pct(pv.height_pct);
      n.appendChild(el("div", "t", pv.title));
      n.appendChild(el("div", "", pv.label));
      grid.appendChild(n);
    }
  }

  // Drag: pointer events are forwarded; the server owns the slot math.
  // -----------------------------
  let dragging = false;
  let lastRow = null;

  function gridBox() {
    const grid = byId("grid");
    if (!grid) return null;
    const r = grid.getBoundingClientRect();
    return r.height > 0 ? { top: r.top, height: r.height } : null;
  }

  function rowOf(y, box) {
    // Only used to skip moves that stay inside one row.
    if (!box) return 0;
    const n = (DATA.cfg && DATA.cfg.slot_count) || 1;
    return Math.floor((y - box.top) / (box.height / n));
  }

  function sendPointer(type, ev) {
    const box = gridBox();
    const body = { type, y: ev ? ev.clientY : 0, button: ev ? ev.button : 0, grid: box };
    return post("/pointer", body).then(draw).catch((e) => setStatus(e.message));
  }

  function onMouseDown(ev) {
    if (ev.button !== 0) return;
    dragging = true;
    lastRow = rowOf(ev.clientY, gridBox());
    sendPointer("down", ev);
  }

  function onMouseMove(ev) {
    if (!dragging) return;
    const row = rowOf(ev.clientY, gridBox());
    if (row === lastRow) return;
    lastRow = row;
    sendPointer("move", ev);
  }

  function onMouseUp(ev) {
    if (!dragging) return;
    dragging = false;
    sendPointer("up", ev);
  }

  function onMouseLeave(ev) {
    if (!dragging) return;
    dragging = false;
    sendPointer("leave", ev);
  }
'''

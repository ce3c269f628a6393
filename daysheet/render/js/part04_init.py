# daysheet/render/js/part04_init.py
from __future__ import annotations

JS_PART = r'''// Init / redraw
  // -----------------------------
  function draw(view) {
    if (!view || typeof view !== "object") return;
    DATA = view;
    const title = byId("appTitle");
    if (title && view.title) title.textContent = view.title;
    const header = view.header || {};
    byId("dateLabel").textContent = header.date_label || "";
    byId("dayTotal").textContent = header.day_total || "";
    renderRuler(view.hour_labels);
    renderGrid(view);
    renderMessages(view.messages);
  }

  draw(DATA);

  if (LIVE) {
    const grid = byId("grid");
    grid.addEventListener("mousedown", onMouseDown);
    grid.addEventListener("mousemove", onMouseMove);
    grid.addEventListener("mouseup", onMouseUp);
    grid.addEventListener("mouseleave", onMouseLeave);

    byId("chatSend").addEventListener("click", sendChat);
    byId("chatText").addEventListener("keydown", (ev) => {
      if (ev.key === "Enter") sendChat();
    });

    // Assistant replies arrive on a server-side timer; poll for them.
    setInterval(() => {
      if (dragging) return;
      fetch("/state").then((r) => r.json()).then((v) => { if (!dragging) draw(v); }).catch(() => {});
    }, 1500);
  } else {
    const input = byId("chatText");
    if (input) input.disabled = true;
    setStatus("Static page: run `daysheet --serve` to add entries.");
  }
})();
'''

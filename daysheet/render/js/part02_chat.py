# daysheet/render/js/part02_chat.py
from __future__ import annotations

JS_PART = r'''// Chat panel
  // -----------------------------
  function renderMessages(messages) {
    const log = byId("chatLog");
    if (!log) return;
    log.replaceChildren();
    for (const m of (messages || [])) {
      const row = el("div", "msg " + (m.role === "user" ? "user" : "assistant"));
      row.appendChild(el("div", "avatar", m.role === "user" ? "You" : "AI"));
      const bubble = el("div", "bubble");
      bubble.appendChild(el("p", "", m.content));
      bubble.appendChild(el("p", "ts", m.time_label || ""));
      row.appendChild(bubble);
      log.appendChild(row);
    }
    log.scrollTop = log.scrollHeight;
  }

  function sendChat() {
    const input = byId("chatText");
    if (!input || !LIVE) return;
    const text = input.value;
    if (!text.trim()) return;
    input.value = "";
    post("/chat", { text }).then(draw).catch((e) => setStatus(e.message));
  }
'''

# daysheet/render/js/part01_core.py
from __future__ import annotations

JS_PART = r'''
(() => {
  "use strict";

  // Boot data
  // -----------------------------
  let DATA = {};
  try {
    DATA = JSON.parse(document.getElementById("ds-data").textContent || "{}");
  } catch (e) {
    console.error("Failed to parse page data", e);
  }
  const LIVE = !!(DATA.cfg && DATA.cfg.live);

  function byId(id) { return document.getElementById(id); }

  function el(tag, cls, text) {
    const n = document.createElement(tag);
    if (cls) n.className = cls;
    if (text != null) n.textContent = String(text);
    return n;
  }

  function setStatus(msg) {
    const s = byId("status");
    if (s) s.textContent = msg || "";
  }

  // Requests are chained so the server sees events in the order they fired.
  let inflight = Promise.resolve();

  function post(path, body) {
    const run = () => fetch(path, {
      method: "POST",
      headers: { "Content-Type": "application/json" },
      body: JSON.stringify(body),
    }).then(async (r) => {
      const obj = await r.json().catch(() => ({}));
      if (!r.ok) {
        const err = (obj && obj.error && obj.error.message) || ("HTTP " + r.status);
        throw new Error(err);
      }
      setStatus("");
      return obj;
    });
    const p = inflight.then(run, run);
    inflight = p.catch(() => {});
    return p;
  }
'''

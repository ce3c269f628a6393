# daysheet/render/css/part01_tokens_theme.py
from __future__ import annotations

CSS_PART = r'''
:root {
    /* Core surfaces */
    --bg: #f1f5f9;
    --panel: #ffffff;
    --panel2: #f9fafb;
    --cal-surface: #ffffff;

    /* Text */
    --text: #1f2937;
    --muted: #6b7280;

    /* Lines / shadows */
    --line: #e5e7eb;
    --shadow: rgba(15,23,42,0.12);
    --radius: 10px;

    /* Accents */
    --accent: #3b82f6;
    --accent-rgb: 59,130,246;
    --assistant: #a855f7;
    --bad: #ef4444;

    --ruler-w: 80px;
}

* { box-sizing: border-box; }

html, body {
    margin: 0;
    height: 100%;
    font-family: system-ui, -apple-system, "Segoe UI", Roboto, sans-serif;
    color: var(--text);
    background: linear-gradient(135deg, #f8fafc, #f1f5f9);
}

.page { height: 100vh; padding: 16px; }
.layout {
    max-width: 1600px;
    height: calc(100vh - 32px);
    margin: 0 auto;
    display: flex;
    gap: 24px;
}

.card {
    background: var(--panel);
    border-radius: var(--radius);
    box-shadow: 0 10px 30px var(--shadow);
    overflow: hidden;
    display: flex;
    flex-direction: column;
}
.card-h {
    display: flex;
    align-items: center;
    justify-content: space-between;
    padding: 16px;
    background: var(--panel2);
    border-bottom: 1px solid var(--line);
    font-weight: 500;
}
.card-b { flex: 1; min-height: 0; }

.btn-primary {
    border: 0;
    border-radius: 12px;
    padding: 8px 20px;
    color: #fff;
    background: var(--accent);
    cursor: pointer;
}
.btn-primary:hover { filter: brightness(0.92); }

.status {
    position: fixed;
    right: 16px;
    bottom: 12px;
    font-size: 12px;
    color: var(--bad);
}
'''

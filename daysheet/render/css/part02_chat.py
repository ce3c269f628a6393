# daysheet/render/css/part02_chat.py
from __future__ import annotations

CSS_PART = r'''  .chat { width: 400px; }
  .chat-h {
    justify-content: flex-start;
    gap: 8px;
    padding: 24px;
    color: #fff;
    font-size: 20px;
    font-weight: 600;
    background: linear-gradient(90deg, #2563eb, #9333ea);
  }
  .bot-ico {
    font-size: 12px;
    padding: 2px 6px;
    border: 1px solid rgba(255,255,255,0.7);
    border-radius: 6px;
  }

  .chat-log {
    flex: 1;
    overflow-y: auto;
    padding: 24px;
    display: flex;
    flex-direction: column;
    gap: 16px;
  }
  .msg { display: flex; align-items: flex-start; gap: 12px; max-width: 85%; }
  .msg.user { align-self: flex-end; flex-direction: row-reverse; }
  .msg.assistant { align-self: flex-start; }
  .msg .avatar {
    flex: none;
    width: 32px;
    height: 32px;
    border-radius: 50%;
    display: flex;
    align-items: center;
    justify-content: center;
    color: #fff;
    font-size: 11px;
    font-weight: 600;
  }
  .msg.user .avatar { background: var(--accent); }
  .msg.assistant .avatar { background: var(--assistant); }
  .msg .bubble { border-radius: 16px; padding: 12px 16px; font-size: 14px; line-height: 1.5; }
  .msg.user .bubble { background: var(--accent); color: #fff; }
  .msg.assistant .bubble { background: #f3f4f6; color: #111827; }
  .msg .ts { margin-top: 8px; font-size: 12px; opacity: 0.7; }

  .chat-input {
    display: flex;
    gap: 12px;
    padding: 24px;
    border-top: 1px solid var(--line);
  }
  .chat-input input {
    flex: 1;
    padding: 8px 12px;
    border: 2px solid var(--line);
    border-radius: 12px;
    font-size: 14px;
    outline: none;
  }
  .chat-input input:focus { border-color: var(--accent); }
'''

# daysheet/render/markup/chat_panel.py
from __future__ import annotations

MARKUP = r"""<section class="card chat" aria-label="Chat">
    <div class="card-h chat-h">
      <span class="bot-ico" aria-hidden="true">AI</span>
      <div id="appTitle">AI Timesheet Assistant</div>
    </div>
    <div class="chat-log" id="chatLog"></div>
    <div class="chat-input">
      <input id="chatText" type="text" placeholder="Ask about your timesheet..." autocomplete="off" />
      <button id="chatSend" class="btn-primary" type="button" title="Send">Send</button>
    </div>
  </section>"""

# daysheet/render/inline_js.py
from __future__ import annotations

from .js.part01_core import JS_PART as JS_01
from .js.part02_chat import JS_PART as JS_02
from .js.part03_grid_drag import JS_PART as JS_03
from .js.part04_init import JS_PART as JS_04

JS_BLOCK = "\n".join([
  JS_01, JS_02, JS_03, JS_04
])

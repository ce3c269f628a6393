# daysheet/render/inline_css.py
from __future__ import annotations

from .css.part01_tokens_theme import CSS_PART as CSS_01
from .css.part02_chat import CSS_PART as CSS_02
from .css.part03_calendar import CSS_PART as CSS_03

CSS_BLOCK = "\n".join([
  CSS_01, CSS_02, CSS_03
])

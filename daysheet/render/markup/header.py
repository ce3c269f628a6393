# daysheet/render/markup/header.py
from __future__ import annotations

MARKUP = r"""<div class="page">
<div class="layout">
"""

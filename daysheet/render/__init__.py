"""HTML page assembly for the day sheet."""

from __future__ import annotations

from .inline import build_html

__all__ = ["build_html"]

# daysheet/render/inline.py
from __future__ import annotations

import json
from .template import HTML_TEMPLATE

try:
    import orjson  # type: ignore
except Exception:  # pragma: no cover
    orjson = None  # type: ignore

_DATA_MARKER = "__DATA_JSON__"
_DATA_MARKER_COUNT = HTML_TEMPLATE.count(_DATA_MARKER)


def dumps_payload(payload: dict) -> str:
    if orjson is not None:
        return orjson.dumps(payload).decode("utf-8")
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))


def build_html(payload: dict) -> str:
    # The template must hold __DATA_JSON__ exactly once, and the page must not
    # hold it after injection.
    if not isinstance(payload, dict):
        raise TypeError(f"payload must be dict, got {type(payload).__name__}")

    if _DATA_MARKER_COUNT != 1:
        raise RuntimeError(f"HTML_TEMPLATE must contain {_DATA_MARKER} exactly once (found {_DATA_MARKER_COUNT})")

    data_json = dumps_payload(payload)
    data_json = data_json.replace("</", r"<\/")  # script-safe injection
    html = HTML_TEMPLATE.replace(_DATA_MARKER, data_json)

    if _DATA_MARKER in html:
        raise RuntimeError("HTML generation failed: marker still present after injection")

    return html

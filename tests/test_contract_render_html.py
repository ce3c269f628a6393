import json
import re
import unittest

from daysheet.host import DaySheetSession
from daysheet.render import build_html
from daysheet.render.inline import dumps_payload
from daysheet.render.template import HTML_TEMPLATE
from daysheet.config import DEFAULT_DATE


def _embedded_payload(html: str) -> dict:
    m = re.search(
        r'<script\s+id="ds-data"\s+type="application/json">\s*(.*?)\s*</script>',
        html,
        flags=re.IGNORECASE | re.DOTALL,
    )
    assert m is not None, "missing ds-data JSON script block"
    return json.loads(m.group(1))


class TestRenderHtmlContract(unittest.TestCase):
    def setUp(self) -> None:
        self.session = DaySheetSession(DEFAULT_DATE, reply_delay=0.0, clock=lambda: 1720512000000)

    def test_template_holds_each_marker_once(self) -> None:
        for marker in ("__DATA_JSON__", "__CSS_BLOCK__", "__JS_BLOCK__", "__BODY_MARKUP__"):
            expected = 1 if marker == "__DATA_JSON__" else 0
            self.assertEqual(HTML_TEMPLATE.count(marker), expected, marker)

    def test_page_has_shell_and_required_ids(self) -> None:
        html = build_html(self.session.snapshot(live=False))

        self.assertIn("<!doctype html>", html.lower())
        self.assertIn("<title>AI Timesheet Assistant</title>", html)
        self.assertNotIn("__DATA_JSON__", html)

        for id_ in ("ds-data", "appTitle", "chatLog", "chatText", "chatSend", "dateLabel", "dayTotal", "ruler", "grid", "status"):
            n = html.count(f'id="{id_}"')
            self.assertEqual(n, 1, f"expected id={id_!r} once, found {n}")

    def test_embedded_payload_matches_snapshot(self) -> None:
        snap = self.session.snapshot(live=False)
        data = _embedded_payload(build_html(snap))

        self.assertEqual(data["header"]["date_label"], "9 TUE")
        self.assertEqual(data["header"]["day_total"], "0:00:00")
        self.assertFalse(data["cfg"]["live"])
        self.assertEqual(len(data["messages"]), 2)
        self.assertEqual(data, json.loads(dumps_payload(snap)))

    def test_closing_tags_in_data_are_escaped(self) -> None:
        self.session.add_entry({"start_time": "09:00", "end_time": "10:00", "title": "</script><b>x"})
        html = build_html(self.session.snapshot(live=False))

        self.assertNotIn("</script><b>x", html)
        data = _embedded_payload(html)
        self.assertEqual(data["entries"][0]["title"], "</script><b>x")

    def test_non_dict_payload_is_rejected(self) -> None:
        with self.assertRaises(TypeError):
            build_html(["not", "a", "dict"])  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main(verbosity=2)

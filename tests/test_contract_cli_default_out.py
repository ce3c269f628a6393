from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from daysheet import cli


class TestCliDefaultOutContract(unittest.TestCase):
    def test_default_out_is_build_relative_to_cwd(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            tmp = Path(td)
            old_cwd = Path.cwd()
            try:
                os.chdir(tmp)
                with patch("daysheet.cli.build_html", return_value="<!doctype html><html><body>ok</body></html>"):
                    cli.main(["--no-open", "--date", "2024-07-09"])
            finally:
                os.chdir(old_cwd)

            self.assertTrue((tmp / "build" / "daysheet.html").exists())

    def test_invalid_date_reports_user_error(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            cli.main(["--no-open", "--date", "2024-13-40"])
        self.assertIn("Invalid --date value", str(ctx.exception))

    def test_invalid_log_level_reports_user_error(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            cli.main(["--no-open", "--log-level", "CHATTY"])
        self.assertIn("Invalid --log-level value", str(ctx.exception))

    def test_negative_reply_delay_is_rejected(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            cli.main(["--no-open", "--reply-delay", "-1"])
        self.assertIn("--reply-delay", str(ctx.exception))

    def test_invalid_environment_is_reported(self) -> None:
        with patch.dict(os.environ, {"DAYSHEET_PORT": "eighty"}):
            with self.assertRaises(SystemExit) as ctx:
                cli.main(["--no-open"])
        self.assertIn("DAYSHEET_PORT", str(ctx.exception))

    def test_default_out_falls_back_when_unwritable(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            home = Path(td) / "home"
            home.mkdir(parents=True, exist_ok=True)

            blocked_dir = Path("/home/build")
            blocked_out = str(blocked_dir / "daysheet.html")

            orig_mkdir = Path.mkdir

            def fake_mkdir(self, *args, **kwargs):  # type: ignore[no-untyped-def]
                if self == blocked_dir:
                    raise PermissionError(13, "Permission denied", str(self))
                return orig_mkdir(self, *args, **kwargs)

            with patch.dict(os.environ, {"HOME": str(home)}), patch(
                "daysheet.cli.os.path.abspath", return_value=blocked_out
            ), patch("pathlib.Path.mkdir", new=fake_mkdir), patch(
                "daysheet.cli.build_html", return_value="<!doctype html><html><body>ok</body></html>"
            ):
                cli.main(["--no-open"])

            self.assertTrue((home / ".daysheet" / "build" / "daysheet.html").exists())


if __name__ == "__main__":
    unittest.main(verbosity=2)

from __future__ import annotations

import argparse
import logging
import os
import sys
import webbrowser
from pathlib import Path

from .config import configure_logging, load_settings, parse_date_yyyy_mm_dd, parse_log_level
from .host import DaySheetSession
from .render.inline import build_html

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    default_out = os.path.join("build", "daysheet.html")

    try:
        settings = load_settings()
    except ValueError as e:
        raise SystemExit(f"Invalid environment: {e}")

    ap = argparse.ArgumentParser(
        prog="daysheet",
        description="Timesheet day grid with a chat panel (static page or local server).",
    )
    ap.add_argument("--date", default=None, help="Day shown in the grid, YYYY-MM-DD (default: env DAYSHEET_DATE or 2024-07-09)")
    ap.add_argument("--out", default=default_out, help="Output HTML path for the static page (default: ./build/daysheet.html)")
    ap.add_argument("--serve", action="store_true", help="Run the interactive page on a local HTTP server")
    ap.add_argument("--host", default=settings.host, help="Bind address for --serve (default: env DAYSHEET_HOST or 127.0.0.1)")
    ap.add_argument("--port", type=int, default=settings.port, help="Port for --serve (default: env DAYSHEET_PORT or 8765)")
    ap.add_argument(
        "--reply-delay",
        type=float,
        default=settings.reply_delay,
        help="Seconds before the assistant answers a chat message (default: env DAYSHEET_REPLY_DELAY or 1.0)",
    )
    ap.add_argument("--log-level", default=settings.log_level, help="Logging level (default: env DAYSHEET_LOG_LEVEL or INFO)")
    ap.add_argument("--no-open", action="store_true", help="Do not open the page in a browser")

    args = ap.parse_args(argv)

    try:
        configure_logging(parse_log_level(args.log_level))
    except ValueError as e:
        raise SystemExit(f"Invalid --log-level value: {e}")

    day = settings.date
    if args.date:
        try:
            day = parse_date_yyyy_mm_dd(args.date)
        except ValueError:
            raise SystemExit(f"Invalid --date value: {args.date!r} (expected YYYY-MM-DD)")

    if args.reply_delay < 0:
        raise SystemExit("--reply-delay must be >= 0")

    session = DaySheetSession(day, reply_delay=args.reply_delay)

    if args.serve:
        from .server import make_server, serve, server_url

        try:
            server = make_server(session, args.host, int(args.port))
        except OSError as e:
            raise SystemExit(f"Cannot bind {args.host}:{args.port}: {e}")
        if not args.no_open:
            try:
                webbrowser.open(server_url(server))
            except Exception as e:
                logger.warning("Could not open browser: %s", e)
        serve(server)
        return

    html = build_html(session.snapshot(live=False))

    out_path = os.path.abspath(args.out)
    try:
        Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        # Default relative path from an unwritable CWD falls back to the home dir.
        if args.out == default_out:
            fallback = Path.home() / ".daysheet" / "build" / "daysheet.html"
            fallback.parent.mkdir(parents=True, exist_ok=True)
            out_path = str(fallback)
            print(
                f"[daysheet] WARN: default output directory is not writable; using {out_path}",
                file=sys.stderr,
            )
        else:
            raise SystemExit(f"Cannot create output directory '{Path(out_path).parent}': {e}")
    with open(out_path, "w", encoding="utf-8") as f:
        f.write(html)

    print(out_path)

    if not args.no_open:
        try:
            webbrowser.open("file://" + out_path)
        except Exception as e:
            logger.warning("Could not open browser: %s", e)


if __name__ == "__main__":
    main()

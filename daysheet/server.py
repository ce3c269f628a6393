# daysheet/server.py
from __future__ import annotations

import json
import logging
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any, Dict, Tuple

from .host import DaySheetSession
from .model import InvariantViolation
from .render.inline import build_html, dumps_payload
from .validate import EntryValidationError

MAX_PAYLOAD_SIZE = 64 * 1024

logger = logging.getLogger(__name__)


def _json_response(handler: BaseHTTPRequestHandler, payload: Dict[str, Any], status: int = 200) -> None:
    """Send JSON response with proper headers."""
    data = dumps_payload(payload).encode("utf-8")
    handler.send_response(status)
    handler.send_header("Content-Type", "application/json")
    handler.send_header("Content-Length", str(len(data)))
    handler.send_header("Cache-Control", "no-store")
    handler.end_headers()
    handler.wfile.write(data)


def _error_response(handler: BaseHTTPRequestHandler, message: str, code: str, status: int) -> None:
    """Send standardized error response."""
    _json_response(handler, {
        "error": {
            "message": message,
            "code": code
        }
    }, status)


def _html_response(handler: BaseHTTPRequestHandler, html: str) -> None:
    data = html.encode("utf-8")
    handler.send_response(200)
    handler.send_header("Content-Type", "text/html; charset=utf-8")
    handler.send_header("Content-Length", str(len(data)))
    handler.end_headers()
    handler.wfile.write(data)


class DaySheetHandler(BaseHTTPRequestHandler):
    # Set on the subclass made by make_server().
    session: DaySheetSession

    def _read_json(self) -> Tuple[bool, Any]:
        """Read the request body as JSON; on failure respond and return (False, None)."""
        try:
            length = int(self.headers.get("Content-Length", "0"))
        except ValueError:
            length = -1
        if length < 0:
            _error_response(self, "Invalid Content-Length", "INVALID_LENGTH", 400)
            return False, None
        if length > MAX_PAYLOAD_SIZE:
            _error_response(self, "Payload too large", "PAYLOAD_TOO_LARGE", 413)
            return False, None

        raw = self.rfile.read(length).decode("utf-8", errors="replace")
        try:
            return True, json.loads(raw)
        except ValueError as e:
            logger.warning("Invalid JSON in %s: %s", self.path, e)
            _error_response(self, "Invalid JSON", "INVALID_JSON", 400)
            return False, None

    def do_GET(self) -> None:
        path = self.path.split("?", 1)[0]
        if path in ("/", "/index.html"):
            _html_response(self, build_html(self.session.snapshot(live=True)))
            return
        if path == "/state":
            _json_response(self, self.session.snapshot(live=True))
            return
        _error_response(self, "Not found", "NOT_FOUND", 404)

    def do_POST(self) -> None:
        path = self.path.split("?", 1)[0]

        # Body is consumed before routing so the connection closes cleanly.
        ok, body = self._read_json()
        if not ok:
            return

        if path not in ("/pointer", "/chat", "/entries"):
            _error_response(self, "Not found", "NOT_FOUND", 404)
            return

        try:
            if path == "/pointer":
                _json_response(self, self.session.pointer(body))
                return

            if path == "/chat":
                text = body.get("text") if isinstance(body, dict) else None
                if not isinstance(text, str):
                    _error_response(self, "text must be string", "INVALID_TEXT", 400)
                    return
                self.session.send_message(text)
                _json_response(self, self.session.snapshot(live=True))
                return

            entry = self.session.add_entry(body)
            _json_response(self, {"entry": entry.to_dict()}, status=201)
        except (EntryValidationError, InvariantViolation) as e:
            logger.warning("Rejected %s: %s", path, e)
            _error_response(self, str(e), "INVALID_REQUEST", 400)
        except Exception as e:
            logger.exception(f"Unexpected error handling {path}: {e}")
            _error_response(self, "Internal error", "INTERNAL_ERROR", 500)

    def log_message(self, fmt: str, *args: Any) -> None:
        # Route http.server access lines through the module logger.
        logger.debug("%s - %s", self.address_string(), fmt % args)


def make_server(session: DaySheetSession, host: str, port: int) -> ThreadingHTTPServer:
    handler = type("BoundDaySheetHandler", (DaySheetHandler,), {"session": session})
    server = ThreadingHTTPServer((host, port), handler)
    server.daemon_threads = True
    return server


def server_url(server: ThreadingHTTPServer) -> str:
    host, port = server.server_address[:2]
    return f"http://{host}:{port}/"


def serve(server: ThreadingHTTPServer) -> None:
    """Serve until interrupted, then close the socket."""
    session = server.RequestHandlerClass.session  # type: ignore[attr-defined]
    logger.info(f"Server listening on {server_url(server)}")
    logger.info(f"Day: {session.day.isoformat()}, reply delay: {session.reply_delay}s")
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("Server interrupted")
    finally:
        server.server_close()
        logger.info("Shutdown complete")


__all__ = ["MAX_PAYLOAD_SIZE", "DaySheetHandler", "make_server", "server_url", "serve"]

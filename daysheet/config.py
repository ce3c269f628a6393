# daysheet/config.py
from __future__ import annotations

import datetime as dt
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8765
DEFAULT_DATE = dt.date(2024, 7, 9)
DEFAULT_REPLY_DELAY = 1.0
DEFAULT_LOG_LEVEL = "INFO"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class Settings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    date: dt.date = DEFAULT_DATE
    reply_delay: float = DEFAULT_REPLY_DELAY
    log_level: str = DEFAULT_LOG_LEVEL


def parse_date_yyyy_mm_dd(s: str) -> dt.date:
    return dt.datetime.strptime(s.strip(), "%Y-%m-%d").date()


def parse_log_level(s: str) -> str:
    level = s.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown log level: {s!r}")
    return level


def _get(env: Mapping[str, str], name: str) -> Optional[str]:
    v = env.get(name)
    if v is None or not v.strip():
        return None
    return v


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Resolve settings from DAYSHEET_* environment variables.

    Unset or blank variables keep their defaults; malformed ones raise
    ValueError naming the variable.
    """
    env = os.environ if env is None else env
    kw = {}

    host = _get(env, "DAYSHEET_HOST")
    if host is not None:
        kw["host"] = host.strip()

    port = _get(env, "DAYSHEET_PORT")
    if port is not None:
        try:
            p = int(port)
        except ValueError:
            raise ValueError(f"DAYSHEET_PORT must be an integer, got {port!r}")
        if not (0 <= p <= 65535):
            raise ValueError(f"DAYSHEET_PORT out of range: {p}")
        kw["port"] = p

    day = _get(env, "DAYSHEET_DATE")
    if day is not None:
        try:
            kw["date"] = parse_date_yyyy_mm_dd(day)
        except ValueError:
            raise ValueError(f"DAYSHEET_DATE must be YYYY-MM-DD, got {day!r}")

    delay = _get(env, "DAYSHEET_REPLY_DELAY")
    if delay is not None:
        try:
            d = float(delay)
        except ValueError:
            raise ValueError(f"DAYSHEET_REPLY_DELAY must be a number, got {delay!r}")
        if d < 0:
            raise ValueError(f"DAYSHEET_REPLY_DELAY must be >= 0, got {d}")
        kw["reply_delay"] = d

    level = _get(env, "DAYSHEET_LOG_LEVEL")
    if level is not None:
        try:
            kw["log_level"] = parse_log_level(level)
        except ValueError:
            raise ValueError(f"DAYSHEET_LOG_LEVEL is not a logging level: {level!r}")

    return Settings(**kw)


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    logging.basicConfig(level=parse_log_level(level), format=LOG_FORMAT, datefmt=LOG_DATEFMT)


__all__ = [
    "Settings",
    "load_settings",
    "configure_logging",
    "parse_date_yyyy_mm_dd",
    "parse_log_level",
]

"""Central logging setup for the xG Stats pipeline.

One call configures the root logger for the CLI, the API server and scripts:
- console output (plain, or colored on a TTY) or one JSON object per line;
- level and format come from the arguments, falling back to LOG_LEVEL / LOG_FORMAT;
- calling configure_logging() again is a no-op unless ``force=True``.

Usage:
    from xgstats.common.logging_utils import configure_logging, get_logger
    configure_logging(level="DEBUG")
    logger = get_logger(__name__)
"""
from __future__ import annotations

import json
import logging
import os
import sys
import threading
from datetime import datetime, timezone
from typing import Any, Dict, Optional

_CONFIG_LOCK = threading.Lock()
_ALREADY_CONFIGURED = False

# LogRecord attributes that are never copied into the JSON payload
_RESERVED = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


class ColorFormatter(logging.Formatter):
    COLORS = {
        "DEBUG": "\x1b[38;5;245m",
        "INFO": "\x1b[38;5;39m",
        "WARNING": "\x1b[38;5;214m",
        "ERROR": "\x1b[38;5;196m",
        "CRITICAL": "\x1b[48;5;196m\x1b[38;5;231m",
    }
    RESET = "\x1b[0m"

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        ts = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")
        line = f"{ts} | {record.levelname:<8} | {record.name} | {record.getMessage()}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        color = self.COLORS.get(record.levelname)
        return f"{color}{line}{self.RESET}" if color else line


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        payload: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        for key, value in record.__dict__.items():
            if key in _RESERVED or key in payload or key.startswith("_"):
                continue
            try:
                json.dumps(value)
                payload[key] = value
            except (TypeError, ValueError):
                payload[key] = repr(value)
        return json.dumps(payload, ensure_ascii=False)


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None, *, force: bool = False) -> None:
    """Configure the root logger once.

    Parameters
    ----------
    level: log level name; defaults to LOG_LEVEL or INFO
    fmt: "console" or "json"; defaults to LOG_FORMAT or console
    force: reconfigure even if already configured
    """
    global _ALREADY_CONFIGURED
    with _CONFIG_LOCK:
        if _ALREADY_CONFIGURED and not force:
            return

        level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
        log_format = (fmt or os.getenv("LOG_FORMAT", "console")).lower()

        root = logging.getLogger()
        for handler in list(root.handlers):
            root.removeHandler(handler)

        if log_format == "json":
            formatter: logging.Formatter = JsonFormatter()
        elif sys.stderr.isatty() and os.getenv("LOG_NO_COLOR") != "1":
            formatter = ColorFormatter()
        else:
            formatter = logging.Formatter(
                fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )

        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root.addHandler(handler)
        root.setLevel(getattr(logging, level_name, logging.INFO))

        _ALREADY_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


__all__ = [
    "configure_logging",
    "get_logger",
]

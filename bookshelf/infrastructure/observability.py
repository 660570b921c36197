"""Structured Logging — one log line per event, JSON or plain text.

Invariants:
    - Every line carries timestamp, level, logger name, and message
    - Catalog context (book_id, operation, error_code, path, status_code)
      is surfaced in both formats when a call site passes it via extra=
    - setup_logging owns exactly one root handler; calling it again swaps it

Design Decisions:
    - Formatters over a logging library: the stdlib handler chain is enough
      for a single-process app
    - SQL echo and per-request access lines stay at WARNING unless the root
      level is DEBUG
"""

import json
import logging
from datetime import datetime, timezone

CONTEXT_KEYS = ("book_id", "operation", "error_code", "path", "status_code")

_NOISY_LOGGERS = ("sqlalchemy.engine", "uvicorn.access")


def _context(record: logging.LogRecord) -> dict:
    return {
        key: record.__dict__[key]
        for key in CONTEXT_KEYS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """Render a record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_context(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """Human-readable lines for local runs: context appended as key=value."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = _context(record)
        if context:
            pairs = " ".join(f"{k}={v}" for k, v in context.items())
            line = f"{line} [{pairs}]"
        return line


_handler: logging.Handler | None = None


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the root handler for the configured format and level."""
    global _handler
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    if _handler is not None:
        logging.root.removeHandler(_handler)
    _handler = handler
    logging.root.addHandler(handler)

    root_level = getattr(logging, level.upper(), logging.INFO)
    logging.root.setLevel(root_level)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(
            root_level if root_level <= logging.DEBUG else logging.WARNING,
        )
    return handler

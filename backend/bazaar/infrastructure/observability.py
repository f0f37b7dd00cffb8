"""Structured Logging — moderation log records as JSON (production) or text (dev).

Invariants:
    - Every record carries timestamp, level, logger name and message
    - Moderation extras (subject, field, error_key, ...) appear in both formats
    - setup_logging is idempotent: calling it twice does not duplicate handlers

Design Decisions:
    - Formatters on stdlib logging: no extra dependency, log shippers parse the JSON
    - Our handler is tagged so re-configuration (tests, reload) replaces it
      without touching handlers installed by uvicorn
"""

import logging
import json
from datetime import datetime, timezone

MODERATION_FIELDS = (
    "subject", "field", "error_key", "error_code", "path", "client_key",
)
_HANDLER_TAG = "_bazaar_handler"


def _moderation_extras(record: logging.LogRecord) -> dict:
    return {
        key: record.__dict__[key]
        for key in MODERATION_FIELDS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line, extras flattened into the top level."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_moderation_extras(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """Human-readable line with extras appended as key=value pairs."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = _moderation_extras(record)
        if not extras:
            return line
        pairs = " ".join(f"{k}={v}" for k, v in extras.items())
        return f"{line} [{pairs}]"


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install (or replace) the service's root handler."""
    for existing in list(logging.root.handlers):
        if getattr(existing, _HANDLER_TAG, False):
            logging.root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    setattr(handler, _HANDLER_TAG, True)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler

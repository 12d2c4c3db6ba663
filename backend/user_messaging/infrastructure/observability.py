"""Request Logging — one-line JSON records for the messaging service.

Invariants:
    - Every record carries timestamp, level, logger and message
    - Store-failure context (error_code, path, operation) and the ids touched
      (userid, message_id) are copied from `extra` when set
    - setup_logging() installs exactly one app handler, however often the
      lifespan runs in a process

Design Decisions:
    - Built on the standard logging module: uvicorn and SQLAlchemy already log
      through it, so one root handler formats all three
"""

import logging
import json
from datetime import datetime, timezone

EXTRA_FIELDS = ("error_code", "path", "operation", "userid", "message_id")


class JSONFormatter(logging.Formatter):
    """Render a LogRecord as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (key, record.__dict__[key])
            for key in EXTRA_FIELDS
            if record.__dict__.get(key) is not None
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


class _AppHandler(logging.StreamHandler):
    """Marker type so setup_logging() can find its own handler again."""


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the app handler on the root logger, replacing a previous one."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if isinstance(h, _AppHandler)]:
        root.removeHandler(existing)

    handler = _AppHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler

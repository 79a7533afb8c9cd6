"""Structured Logging — JSON formatter and one-shot logging setup.

Invariants:
    - Every record carries timestamp (from the record itself), level, logger, message
    - Catalog extras (author_id, recipe_id, ingredient_id, outcome, ...) surfaced
      when present; UUIDs and enums rendered as strings
    - setup_logging is idempotent: calling it twice never doubles output

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - SQLAlchemy engine chatter capped at WARNING unless the app runs at DEBUG
"""

import logging
import json
from datetime import datetime, timezone

_EXTRA_FIELDS = (
    "author_id", "recipe_id", "ingredient_id", "error_code",
    "keyword_count", "result_count", "outcome", "path",
)

_QUIET_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "uvicorn.access")

_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s — %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update(
            (key, record.__dict__[key]) for key in _EXTRA_FIELDS
            if record.__dict__.get(key) is not None
        )
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Install a single stream handler on the root logger."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if getattr(h, "_catalog", False)]:
        root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler._catalog = True
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(_TEXT_FORMAT),
    )
    root.addHandler(handler)

    numeric = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(numeric)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric, logging.WARNING))

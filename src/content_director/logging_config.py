"""Structured JSON logging for the content director validators.

``validators.py`` logs a warning for every rejected director or content-plan
reply, carrying ``entity`` and ``violation_count`` as ``extra=`` fields, and a
debug record for every accepted one. ``configure_logging()`` (called by the
CLI) turns those records into one JSON object per line on stderr so a caller
retrying a model can grep rejection counts per entity.
"""

import json
import logging

# ── JSON log formatter ────────────────────────────────────────────────────────

# Attributes every LogRecord carries; anything else on a record came from extra=
_RECORD_ATTRS = frozenset(logging.LogRecord("", 0, "", 0, "", (), None).__dict__) | {"message"}


class _JsonFormatter(logging.Formatter):
    """Render a record as ``{"timestamp", "level", "logger", "message", ...extra}``.

    Chinese report text is written as-is rather than ``\\u`` escaped.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        payload.update(
            (key, value)
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        )

        return json.dumps(payload, default=str, ensure_ascii=False)


# ── Public configuration entry-point ─────────────────────────────────────────


def configure_logging(level: str = "INFO") -> None:
    """Send all records through a single JSON handler on stderr.

    Args:
        level: Level name such as ``settings.log_level``; unknown names fall back to INFO.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(_JsonFormatter())

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    root.setLevel(numeric_level)

    logging.getLogger(__name__).debug("JSON logging enabled", extra={"log_level": level.upper()})

"""Logging setup: JSON lines to a file, plus plain console output outside production."""
import json
import logging
from datetime import UTC, datetime

from core.config import Settings

# Attributes present on every LogRecord; anything else came in via `extra=`
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__.keys(),
) | {"message", "asctime", "taskName"}

# Marker so reconfiguring only replaces handlers installed here
_HANDLER_FLAG = "_bookmarks_handler"


class JsonFormatter(logging.Formatter):
    """Render each record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        """Serialize the record, including any `extra` fields."""
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(settings: Settings) -> None:
    """
    Install file and console handlers on the root logger.

    Safe to call more than once: handlers from a previous call are closed and
    replaced, handlers installed by anything else are left alone.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_FLAG, False):
            root.removeHandler(handler)
            handler.close()

    file_handler = logging.FileHandler(settings.log_file, encoding="utf-8")
    file_handler.setFormatter(JsonFormatter())
    setattr(file_handler, _HANDLER_FLAG, True)
    root.addHandler(file_handler)

    if not settings.is_production:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        setattr(console_handler, _HANDLER_FLAG, True)
        root.addHandler(console_handler)

    root.setLevel(settings.log_level.upper())

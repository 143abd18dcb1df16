"""Logging setup for applications that publish feeds with rsspod.

The library only emits records on the "rsspod" logger hierarchy. Publisher
records carry the channel title, item count, byte size and failing field
path as extra attributes, which JsonFormatter writes out as keys.
"""

import json
import logging
import sys
from datetime import datetime, timezone

from rsspod.config import get_settings

LOGGER_NAME = "rsspod"

# Extra attributes set by rsspod.publisher
FEED_FIELDS = ("channel", "items", "bytes", "path")


class JsonFormatter(logging.Formatter):
    """JSON formatter for production logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON, including any feed attributes."""
        base = {
            "time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for field in FEED_FIELDS:
            if hasattr(record, field):
                base[field] = getattr(record, field)
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(base)


def configure_logging(
    level: str | None = None, json_format: bool | None = None
) -> logging.Logger:
    """Attach a stdout handler to the rsspod logger.

    Only the library's own logger is touched; root handlers are left alone
    and rsspod records stop propagating to them. Calling this again replaces
    the handler installed by the previous call.

    Args:
        level: Log level name, defaults to the RSSPOD_LOG_LEVEL setting
        json_format: Use JsonFormatter, defaults to True when RSSPOD_ENV=prod

    Returns:
        The configured rsspod logger
    """
    settings = get_settings()
    if json_format is None:
        json_format = settings.env == "prod"

    handler = logging.StreamHandler(sys.stdout)
    handler._rsspod = True  # type: ignore[attr-defined]
    if json_format:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    logger = logging.getLogger(LOGGER_NAME)
    for existing in [h for h in logger.handlers if getattr(h, "_rsspod", False)]:
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level or settings.log_level)
    logger.propagate = False
    return logger

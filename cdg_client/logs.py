import json
import logging
from datetime import UTC, datetime

from .config import Settings, settings

logger = logging.getLogger("cdg_client")

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class JsonFormatter(logging.Formatter):
    """
    One JSON object per record.

    Request context passed as ``extra={"props": {...}}`` (the client sends
    ``endpoint`` and ``model``) is merged into the object without replacing
    the standard keys.
    """

    def format(self, record):
        log_record = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "function": record.funcName,
            "lineno": record.lineno,
        }
        for key, value in getattr(record, "props", {}).items():
            log_record.setdefault(key, value)
        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_record, ensure_ascii=False, default=str)


def configure_logging(config: Settings | None = None, level: str | None = None):
    """
    Install a single stream handler on the cdg_client logger.

    Raises:
        ValueError: If the level is not one of ``LEVELS``. The logger is left untouched.
    """
    config = config or settings
    level = (level or config.log_level).upper()
    if level not in LEVELS:
        raise ValueError(f"Unknown log level '{level}', expected one of {', '.join(LEVELS)}")

    handler = logging.StreamHandler()
    if config.log_json:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))

    # Reset handlers to avoid duplication if called multiple times
    logger.handlers = []
    logger.addHandler(handler)
    logger.setLevel(level)

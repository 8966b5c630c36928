# src/erfpacht/adapters/logging_utils.py
import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from .config import config


def log_context(**fields: Any) -> dict[str, Any]:
    """Build the ``extra`` mapping for a structured log call.

    logger.warning("rate fallback", extra=log_context(regime="AB1986", year=2031))
    """
    return {"context": fields}


class JsonLogFormatter(logging.Formatter):
    """One JSON object per line: time, level, logger, env, message, context."""

    def __init__(self, env: str | None = None) -> None:
        super().__init__()
        self.env = env if env is not None else config.ENV

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "env": self.env,
            "message": record.getMessage(),
        }
        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            payload["context"] = ctx
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        # amounts are logged in euros; keep the sign readable
        return json.dumps(payload, default=str, ensure_ascii=False)


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(JsonLogFormatter())
        logger.addHandler(handler)
        logger.setLevel(config.LOG_LEVEL.upper())
        logger.propagate = False
    return logger

"""
Central logging configuration for the intel feed service.

- JSON lines when LOG_JSON=1, or when running on a hosted platform
  (NETLIFY, K_SERVICE, RAILWAY_ENVIRONMENT); plain text otherwise.
- LOG_LEVEL from env (default INFO).
- Provider credentials travel in headers and query strings: never log
  request URLs from the provider clients, only provider name and status.
"""
import json
import logging
import os
import sys
from typing import Any

HOSTED_ENV_MARKERS = ("NETLIFY", "K_SERVICE", "RAILWAY_ENVIRONMENT")

# Attributes every LogRecord has; anything else was passed via ``extra=``.
_RESERVED_ATTRS = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


def _json_serial(obj: Any):
    if hasattr(obj, "isoformat"):
        return obj.isoformat()
    return str(obj)


class JsonFormatter(logging.Formatter):
    """Single-line JSON records for log aggregators."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": self.formatTime(record, "%Y-%m-%dT%H:%M:%S") + "Z",
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[0]:
            payload["exception"] = self.formatException(record.exc_info)
        for key, value in vars(record).items():
            if key in _RESERVED_ATTRS or key in payload or value is None:
                continue
            payload[key] = value
        return json.dumps(payload, default=_json_serial, ensure_ascii=False)


def _use_json() -> bool:
    if os.getenv("LOG_JSON", "").lower() in ("1", "true", "yes"):
        return True
    return any(os.getenv(marker) for marker in HOSTED_ENV_MARKERS)


def configure_logging() -> None:
    """Configure the root logger once at startup."""
    level_name = (os.getenv("LOG_LEVEL") or "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)
    # Avoid duplicate handlers when uvicorn reloads the app
    for h in root.handlers[:]:
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    if _use_json():
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
    root.addHandler(handler)

    # httpx logs full request URLs at INFO, and GNews puts its token in the query string.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

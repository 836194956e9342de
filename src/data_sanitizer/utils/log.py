from __future__ import annotations
import json, logging, sys
from typing import Any, Dict, TextIO

# LogRecord attributes that are plumbing, not caller-supplied `extra=` fields
_RECORD_ATTRS = frozenset({
    "name", "msg", "args", "levelname", "levelno", "pathname", "filename",
    "module", "exc_info", "exc_text", "stack_info", "lineno", "funcName",
    "created", "msecs", "relativeCreated", "thread", "threadName",
    "processName", "process", "taskName", "message", "asctime",
})

PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        for k, v in record.__dict__.items():
            if k not in _RECORD_ATTRS:
                payload[k] = v
        return json.dumps(payload, separators=(",", ":"), default=str)


def get_logger(
    name: str = "data_sanitizer",
    level: str = "INFO",
    structured_json: bool = True,
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Return a logger with a single stream handler (stdout unless `stream` is given).

    Idempotent: a logger that already has handlers is returned untouched, so
    the first caller decides level and format.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    handler = logging.StreamHandler(stream or sys.stdout)
    if structured_json:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def logger_from_cfg(
    cfg: Any,
    name: str = "data_sanitizer",
    stream: TextIO | None = None,
    level: str | None = None,
) -> logging.Logger:
    """get_logger() driven by a config object with a `.logging` section; `level` overrides it."""
    log_cfg = getattr(cfg, "logging", None)
    level = level or str(getattr(log_cfg, "level", "INFO"))
    structured = bool(getattr(log_cfg, "structured_json", True))
    return get_logger(name, level=level, structured_json=structured, stream=stream)

"""JSON-lines logging with a fixed field set."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from dascraper.common.constants import JSON_LOG_FIELDS
from dascraper.common.fs import ensure_dir
from dascraper.common.time_utils import utc_timestamp_iso


class JsonLineFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {field: getattr(record, field, None) for field in JSON_LOG_FIELDS}
        payload["timestamp"] = utc_timestamp_iso()
        payload["message"] = record.getMessage()
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        if payload["status"] is None and record.levelno >= logging.ERROR:
            payload["status"] = "error"
        return json.dumps(payload, ensure_ascii=False)


def build_logger(run_id: str, data_dir: Path, level: str = "INFO") -> logging.Logger:
    logger = logging.getLogger(f"dascraper.{run_id}")
    logger.setLevel(level.upper())
    logger.handlers.clear()
    logger.propagate = False

    # StreamHandler writes to stderr.
    stream = logging.StreamHandler()
    stream.setFormatter(JsonLineFormatter())
    logger.addHandler(stream)

    log_path = data_dir / "run_meta" / f"{run_id}.log.jsonl"
    ensure_dir(log_path.parent)
    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setFormatter(JsonLineFormatter())
    logger.addHandler(file_handler)

    return logger


def close_logger(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def log_event(logger: logging.Logger, message: str, *, level: int = logging.INFO, **event_fields: Any) -> None:
    logger.log(level, message, extra=event_fields)

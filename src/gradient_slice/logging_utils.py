"""Structured logging helpers."""

from __future__ import annotations

import json
import logging
import os
from typing import Any

PACKAGE_LOGGER = "gradient_slice"
DEFAULT_LOG_LEVEL = "WARNING"
JSON_LOGS_ENV = "GRADIENT_SLICE_JSON_LOGS"


def _json_logs_enabled() -> bool:
    return os.getenv(JSON_LOGS_ENV, "false").lower() == "true"


def configure_logging(level: str = DEFAULT_LOG_LEVEL, json_logs: bool | None = None) -> logging.Logger:
    """Configure global logging and return the package logger set to ``level``.

    Respects GRADIENT_SLICE_JSON_LOGS env override. Enumerators log only at
    DEBUG, so the WARNING default keeps per-window bookkeeping quiet.
    """

    if json_logs is None:
        json_logs = _json_logs_enabled()

    resolved = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        level=resolved,
        format="%(message)s" if json_logs else "%(levelname)s:%(name)s:%(message)s",
    )
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(resolved)
    return package_logger


def log_event(logger: logging.Logger | None, event: str, *, json_logs: bool | None = None, **fields: Any) -> None:
    """Emit a structured log event; ``None`` logs through the package logger."""

    if logger is None:
        logger = logging.getLogger(PACKAGE_LOGGER)
    if json_logs is None:
        json_logs = _json_logs_enabled()

    payload = {"event": event, **fields}
    if json_logs:
        logger.info(json.dumps(payload, default=str))
    else:
        logger.info(payload)

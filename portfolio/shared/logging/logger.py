# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Loguru setup shared by the API process and the client helpers.

Every line carries the service name and the correlation id of the request
being served (``-`` outside a request).
"""

from __future__ import annotations

import logging
import os
import sys
from contextvars import ContextVar
from pathlib import Path

from loguru import logger as _logger

from portfolio.shared.config import load_config

from .sensitive_filter import sanitize_record

_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<lvl>{level:<8}</lvl> | "
    "{extra[service]} | "
    "<magenta>{extra[correlation_id]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<lvl>{message}</lvl>"
)

_QUIET_LOGGERS = {
    "werkzeug": logging.INFO,
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
    "sqlalchemy.engine": logging.WARNING,
}

_CORRELATION_ID: ContextVar[str] = ContextVar("correlation_id", default="-")

_logger.configure(extra={"correlation_id": "-", "service": "portfolio-api"})


def _log_file() -> Path:
    configured = os.getenv("LOG_FILE")
    if configured:
        return Path(configured)
    return Path(__file__).resolve().parents[2] / "instance" / "portfolio.log"


class _StdlibBridge(logging.Handler):
    """Sends records from stdlib loggers (werkzeug, sqlalchemy) through loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = _logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        _logger.opt(depth=6, exception=record.exc_info).bind(
            correlation_id=_CORRELATION_ID.get()
        ).log(level, record.getMessage())


class ContextualLogger:
    """Looks like loguru's logger but binds the current correlation id on every call."""

    def __getattr__(self, name: str):
        return getattr(_logger.bind(correlation_id=_CORRELATION_ID.get()), name)


def set_correlation_id(value: str | None) -> None:
    _CORRELATION_ID.set(value or "-")


def clear_correlation_id() -> None:
    _CORRELATION_ID.set("-")


def setup_logging(level: str | None = None, *, debug_mode: bool = False) -> None:
    level = (level or os.getenv("LOG_LEVEL") or ("DEBUG" if debug_mode else "INFO")).upper()
    service = load_config().observability.service_name
    log_file = _log_file()
    log_file.parent.mkdir(parents=True, exist_ok=True)

    _logger.remove()
    _logger.configure(extra={"correlation_id": "-", "service": service})
    sink_options = {
        "level": level,
        "format": _FORMAT,
        "filter": sanitize_record,
        "backtrace": False,
        "diagnose": False,
    }
    _logger.add(sys.stderr, colorize=True, **sink_options)
    _logger.add(
        str(log_file),
        colorize=False,
        enqueue=True,
        rotation="10 MB",
        retention=5,
        encoding="utf-8",
        **sink_options,
    )

    logging.basicConfig(handlers=[_StdlibBridge()], level=0, force=True)
    for name, stdlib_level in _QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(stdlib_level)


logger = ContextualLogger()

__all__ = [
    "clear_correlation_id",
    "logger",
    "set_correlation_id",
    "setup_logging",
]

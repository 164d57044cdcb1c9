# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from time import perf_counter

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from portfolio.infrastructure.db import ENGINE
from portfolio.shared.config import load_config
from portfolio.shared.logging import logger


def check_database() -> float:
    """Run a trivial query and return the round trip in milliseconds."""

    started = perf_counter()
    with ENGINE.connect() as connection:
        connection.execute(text("SELECT 1"))
    return (perf_counter() - started) * 1000


def health_report() -> dict[str, object]:
    report: dict[str, object] = {"ok": True}
    try:
        latency_ms = check_database()
    except SQLAlchemyError as exc:
        logger.warning(f"health: database check failed ({type(exc).__name__})")
        report["ok"] = False
        report["database"] = f"error: {type(exc).__name__}"
    else:
        report["database"] = "ok"
        report["databaseLatencyMs"] = round(latency_ms, 1)
    report["ai"] = "configured" if load_config().ai.gemini_api_key else "missing"
    return report


__all__ = ["check_database", "health_report"]

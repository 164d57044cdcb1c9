# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Engine, session factory and schema helpers for the portfolio database."""

from __future__ import annotations

from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import DeclarativeBase, scoped_session, sessionmaker

from portfolio.shared.config import DatabaseConfig, load_config
from portfolio.shared.logging import logger

# largest primary key a signed 64-bit INTEGER column can hold
MAX_ROW_ID = 2**63 - 1

_UNIQUE_MARKERS = ("unique constraint", "duplicate key", "duplicate entry")


class Base(DeclarativeBase):
    pass


def _engine_options(database: DatabaseConfig) -> dict[str, Any]:
    if database.url.startswith("sqlite"):
        return {
            "connect_args": {
                "check_same_thread": False,
                "timeout": int(database.pool_timeout),
            },
        }
    return {
        "pool_size": database.pool_size,
        "max_overflow": database.max_overflow,
        "pool_timeout": database.pool_timeout,
    }


def _build_engine(database: DatabaseConfig) -> Engine:
    engine = create_engine(
        database.url,
        echo=False,
        pool_pre_ping=True,
        **_engine_options(database),
    )
    if engine.dialect.name == "sqlite":
        # view rows rely on ON DELETE CASCADE
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, _record) -> None:
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    logger.debug(f"db.engine: {engine.dialect.name} engine ready")
    return engine


ENGINE: Engine = _build_engine(load_config().database)

SessionLocal = scoped_session(
    sessionmaker(bind=ENGINE, autoflush=False, autocommit=False, expire_on_commit=False)
)


def fits_row_id(value: int) -> bool:
    """True when ``value`` can be a primary key at all; larger ids overflow the driver."""

    return 0 < value <= MAX_ROW_ID


def is_unique_violation(exc: IntegrityError) -> bool:
    message = str(exc.orig).lower()
    return any(marker in message for marker in _UNIQUE_MARKERS)


def init_db() -> None:
    # importing models registers every table on Base.metadata
    from portfolio.infrastructure.db import models  # noqa: F401

    Base.metadata.create_all(bind=ENGINE)
    logger.info("Database schema ensured")


def drop_db() -> None:
    from portfolio.infrastructure.db import models  # noqa: F401

    Base.metadata.drop_all(bind=ENGINE)
    logger.warning("Database schema dropped")

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Transaction boundary shared by every SQLAlchemy repository."""

from __future__ import annotations

from collections.abc import Callable
from types import TracebackType

from sqlalchemy.orm import Session

from portfolio.shared.errors import AppError
from portfolio.shared.logging import logger


class SqlAlchemyUnitOfWork:
    """One session per block: commit when the block exits cleanly, roll back otherwise."""

    __slots__ = ("_factory", "_session")

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._factory = session_factory
        self._session: Session | None = None

    def __enter__(self) -> Session:
        self._session = self._factory()
        return self._session

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        session = self._session
        if session is None:
            raise RuntimeError("unit of work exited without being entered")
        self._session = None
        try:
            if exc is None:
                session.commit()
                return
            if isinstance(exc, AppError):
                logger.debug(f"uow: rollback ({exc.code})")
            else:
                logger.warning(f"uow: rollback due to {exc_type.__name__ if exc_type else exc}")
            session.rollback()
        except Exception:
            logger.exception("uow: failed to finalise transaction")
            session.rollback()
            raise
        finally:
            session.close()


def unit_of_work_scope(factory: Callable[[], Session]) -> SqlAlchemyUnitOfWork:
    return SqlAlchemyUnitOfWork(factory)


__all__ = ["SqlAlchemyUnitOfWork", "unit_of_work_scope"]

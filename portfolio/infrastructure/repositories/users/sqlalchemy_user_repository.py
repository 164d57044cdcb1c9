# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from portfolio.domain.users.entities import User as DomainUser
from portfolio.domain.users.entities import normalize_email
from portfolio.domain.users.exceptions import DuplicateUserError
from portfolio.domain.users.repositories import UserRepository
from portfolio.infrastructure.db import SessionLocal, fits_row_id, is_unique_violation
from portfolio.infrastructure.db.models import User
from portfolio.infrastructure.unit_of_work import unit_of_work_scope
from portfolio.shared.logging import logger


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        username=row.username,
        email=row.email,
        password_hash=row.password_hash,
        created_at=row.created_at,
        last_login_at=row.last_login_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: Callable[[], Session] = SessionLocal) -> None:
        self._session_factory = session_factory

    def find_by_email(self, email: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.query(User).filter(User.email == normalize_email(email)).first()
            return _to_domain(row) if row else None

    def find_by_username(self, username: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.query(User).filter(User.username == username).first()
            return _to_domain(row) if row else None

    def find_by_id(self, user_id: int) -> DomainUser | None:
        if not fits_row_id(user_id):
            return None
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(User, user_id)
            return _to_domain(row) if row else None

    def add(self, user: DomainUser) -> DomainUser:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = User(
                    username=user.username,
                    email=normalize_email(user.email),
                    password_hash=user.password_hash,
                )
                session.add(row)
                session.flush()
                session.refresh(row)
                return _to_domain(row)
        except IntegrityError as exc:
            if not is_unique_violation(exc):
                raise
            # concurrent registration slipped past the pre-insert lookup
            logger.info(f"users.add: unique constraint hit for {user.username}")
            raise DuplicateUserError() from exc

    def touch_last_login(self, user_id: int) -> None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(User, user_id)
            if row is not None:
                row.last_login_at = datetime.now(UTC)

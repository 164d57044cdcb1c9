# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from portfolio.domain.users.entities import User, normalize_email
from portfolio.domain.users.exceptions import DuplicateUserError
from portfolio.domain.users.repositories import PasswordHasher, UserRepository
from portfolio.shared.logging import logger


class CredentialStore:
    """Admin credential records: lookup, creation and password checks.

    Plaintext passwords never leave this class; only the salted hash is
    handed to the repository.
    """

    def __init__(self, *, users: UserRepository, password_hasher: PasswordHasher) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def find_by_email(self, email: str) -> User | None:
        return self._users.find_by_email(normalize_email(email))

    def find_by_id(self, user_id: int) -> User | None:
        return self._users.find_by_id(user_id)

    def create(self, username: str, email: str, plaintext_password: str) -> User:
        email = normalize_email(email)
        if self._users.find_by_email(email) or self._users.find_by_username(username):
            logger.info(f"credentials.create: duplicate (username={username})")
            raise DuplicateUserError()
        user = User(
            id=0,
            username=username,
            email=email,
            password_hash=self._password_hasher.hash(plaintext_password),
            created_at=datetime.now(UTC),
        )
        return self._users.add(user)

    def verify_password(self, user: User, plaintext_password: str) -> bool:
        return self._password_hasher.verify(plaintext_password, user.password_hash)

    def touch_last_login(self, user_id: int) -> None:
        self._users.touch_last_login(user_id)


__all__ = ["CredentialStore"]

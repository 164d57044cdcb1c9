# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from portfolio.application.services.credentials import CredentialStore
from portfolio.domain.users.entities import PublicIdentity
from portfolio.domain.users.exceptions import InvalidCredentialsError
from portfolio.domain.users.repositories import TokenCodec
from portfolio.shared.logging import logger


class LoginUserUseCase:
    def __init__(self, *, credentials: CredentialStore, tokens: TokenCodec) -> None:
        self._credentials = credentials
        self._tokens = tokens

    def execute(self, email: str, password: str) -> tuple[PublicIdentity, str]:
        user = self._credentials.find_by_email(email) if email else None
        password_valid = user is not None and self._credentials.verify_password(user, password)

        if not password_valid:
            logger.info("auth.login: rejected")
            raise InvalidCredentialsError()

        self._credentials.touch_last_login(user.id)
        token = self._tokens.issue(user.id)
        logger.info(f"auth.login: ok user_id={user.id}")
        return PublicIdentity.of(user), token

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from portfolio.application.services.credentials import CredentialStore
from portfolio.domain.users.entities import PublicIdentity
from portfolio.domain.users.repositories import TokenCodec
from portfolio.shared.errors import ValidationError
from portfolio.shared.logging import logger


class RegisterUserUseCase:
    def __init__(self, *, credentials: CredentialStore, tokens: TokenCodec) -> None:
        self._credentials = credentials
        self._tokens = tokens

    def execute(self, username: str, email: str, password: str) -> tuple[PublicIdentity, str]:
        username = (username or "").strip()
        email = (email or "").strip()
        missing = [
            name
            for name, value in (("username", username), ("email", email), ("password", password))
            if not value
        ]
        if missing:
            raise ValidationError(
                "Please include all fields",
                context={"fields": missing},
            )

        user = self._credentials.create(username, email, password)
        token = self._tokens.issue(user.id)
        logger.info(f"auth.register: ok user_id={user.id}")
        return PublicIdentity.of(user), token

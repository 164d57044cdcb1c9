# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Turn a bearer token into the identity it names."""

from __future__ import annotations

from portfolio.application.services.credentials import CredentialStore
from portfolio.domain.users.entities import PublicIdentity
from portfolio.domain.users.exceptions import UserNotFoundError
from portfolio.domain.users.repositories import TokenCodec


class ResolveIdentityUseCase:
    def __init__(self, *, credentials: CredentialStore, tokens: TokenCodec) -> None:
        self._credentials = credentials
        self._tokens = tokens

    def execute(self, token: str) -> PublicIdentity:
        user_id = self._tokens.verify(token)
        user = self._credentials.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(context={"user_id": user_id})
        return PublicIdentity.of(user)

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed bearer tokens (HS256 JWT) naming a credential record id."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt

from portfolio.domain.users.exceptions import ExpiredTokenError, InvalidTokenError
from portfolio.domain.users.repositories import TokenCodec

_JWT_ALG = "HS256"


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtTokenCodec(TokenCodec):
    """Issues and verifies tokens of the form ``{"sub": "<id>", "iat", "exp"}``.

    ``clock`` is consulted for both issuing and expiry checks so tests can
    move time without sleeping.
    """

    def __init__(
        self,
        secret: str,
        *,
        ttl: timedelta = timedelta(days=30),
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if not secret:
            raise ValueError("jwt_secret_blank")
        self._secret = secret
        self._ttl = ttl
        self._clock = clock

    def issue(self, subject_id: int) -> str:
        now = self._clock()
        payload: dict[str, Any] = {
            "sub": str(subject_id),
            "iat": int(now.timestamp()),
            "exp": int((now + self._ttl).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=_JWT_ALG)

    def verify(self, token: str) -> int:
        if not token:
            raise InvalidTokenError()
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[_JWT_ALG],
                options={"require": ["sub", "exp"], "verify_exp": False, "verify_iat": False},
            )
        except jwt.InvalidTokenError as exc:
            raise InvalidTokenError() from exc

        try:
            expires_at = int(payload["exp"])
            subject_id = int(payload["sub"])
        except (TypeError, ValueError) as exc:
            raise InvalidTokenError() from exc

        if expires_at <= int(self._clock().timestamp()):
            raise ExpiredTokenError()
        return subject_id


__all__ = ["JwtTokenCodec"]

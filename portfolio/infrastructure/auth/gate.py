# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Bearer-token gate in front of the admin endpoints.

Every protected view goes through the same three steps: pull the token out of
``Authorization: Bearer <token>``, resolve it to an identity and attach that
identity to ``flask.g``. Whatever goes wrong, the caller sees the same 401.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar, cast

from flask import Flask, current_app, g, request

from portfolio.application.use_cases.users.resolve_identity import ResolveIdentityUseCase
from portfolio.domain.users.entities import PublicIdentity
from portfolio.domain.users.exceptions import IdentityResolutionError
from portfolio.infrastructure.observability import record_auth_rejection
from portfolio.shared.errors import UnauthenticatedError
from portfolio.shared.logging import logger

F = TypeVar("F", bound=Callable[..., Any])

_EXTENSION_KEY = "request_gate"
_BEARER_PREFIX = "bearer "


def extract_bearer_token(header: str | None) -> str | None:
    if not header or not header.lower().startswith(_BEARER_PREFIX):
        return None
    token = header[len(_BEARER_PREFIX):].strip()
    return token or None


class RequestGate:
    def __init__(self, resolver: ResolveIdentityUseCase) -> None:
        self._resolver = resolver

    def init_app(self, app: Flask) -> None:
        app.extensions[_EXTENSION_KEY] = self

    def authenticate(self) -> PublicIdentity:
        token = extract_bearer_token(request.headers.get("Authorization"))
        if token is None:
            logger.warning(
                f"auth.gate: missing bearer token on {request.method} {request.path}"
            )
            record_auth_rejection()
            raise UnauthenticatedError()

        try:
            identity = self._resolver.execute(token)
        except IdentityResolutionError as exc:
            logger.warning(
                f"auth.gate: rejected ({exc.code}) on {request.method} {request.path}"
            )
            record_auth_rejection()
            raise UnauthenticatedError() from exc

        g.identity = identity
        g.user_id = identity.id
        logger.debug(f"auth.gate: ok user_id={identity.id} {request.method} {request.path}")
        return identity


def _installed_gate() -> RequestGate:
    gate = current_app.extensions.get(_EXTENSION_KEY)
    if gate is None:
        raise RuntimeError("RequestGate is not installed on this application")
    return cast(RequestGate, gate)


def auth_required(f: F) -> F:
    @wraps(f)
    def inner(*args: Any, **kwargs: Any) -> Any:
        _installed_gate().authenticate()
        return f(*args, **kwargs)

    return cast(F, inner)


def current_identity() -> PublicIdentity:
    identity = g.get("identity")
    if identity is None:
        raise UnauthenticatedError()
    return cast(PublicIdentity, identity)


__all__ = ["RequestGate", "auth_required", "current_identity", "extract_bearer_token"]

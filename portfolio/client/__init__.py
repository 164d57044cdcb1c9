# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import httpx

from portfolio.shared.config import load_config

from .api import ApiFailure, ApiResult, ApiSuccess, FailureKind, PortfolioApiClient
from .route_gate import GateStatus, Redirect, Render, RouteGate, SessionGuard, Waiting
from .session import (
    AuthState,
    FileTokenStorage,
    Identity,
    MemoryTokenStorage,
    SessionStore,
    TokenStorage,
)


def create_session(
    storage: TokenStorage,
    *,
    base_url: str | None = None,
    timeout: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> tuple[SessionStore, PortfolioApiClient]:
    """Wire an API client whose bearer token always comes from the returned session."""

    client_config = load_config().client
    session: SessionStore | None = None

    def _token() -> str | None:
        return session.token if session is not None else storage.load()

    api = PortfolioApiClient(
        base_url or client_config.api_base_url,
        _token,
        timeout=timeout or client_config.timeout,
        transport=transport,
    )
    session = SessionStore(storage, api)
    return session, api


__all__ = [
    "ApiFailure",
    "ApiResult",
    "ApiSuccess",
    "AuthState",
    "FailureKind",
    "FileTokenStorage",
    "GateStatus",
    "Identity",
    "MemoryTokenStorage",
    "PortfolioApiClient",
    "Redirect",
    "Render",
    "RouteGate",
    "SessionGuard",
    "SessionStore",
    "TokenStorage",
    "Waiting",
    "create_session",
]

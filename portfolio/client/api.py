# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Async HTTP client for the portfolio API.

Calls never raise for HTTP or network problems; they return an
:data:`ApiResult` that callers branch on explicitly.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from http import HTTPStatus
from typing import Any

import httpx

from portfolio.shared.logging import logger

TokenProvider = Callable[[], str | None]


class FailureKind(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    REJECTED = "rejected"
    SERVER = "server"
    TRANSIENT = "transient"


@dataclass(slots=True, frozen=True)
class ApiSuccess:
    status: int
    data: Any

    @property
    def ok(self) -> bool:
        return True


@dataclass(slots=True, frozen=True)
class ApiFailure:
    kind: FailureKind
    message: str
    status: int | None = None
    data: Any = None

    @property
    def ok(self) -> bool:
        return False


ApiResult = ApiSuccess | ApiFailure


def _no_token() -> str | None:
    return None


def _classify(status: int) -> FailureKind:
    if status == HTTPStatus.UNAUTHORIZED:
        return FailureKind.UNAUTHENTICATED
    if status >= HTTPStatus.INTERNAL_SERVER_ERROR:
        return FailureKind.SERVER
    return FailureKind.REJECTED


def _decode(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


class PortfolioApiClient:
    def __init__(
        self,
        base_url: str,
        token_provider: TokenProvider = _no_token,
        *,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._token_provider = token_provider
        self._http = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            transport=transport,
            headers={"Content-Type": "application/json"},
        )

    async def __aenter__(self) -> PortfolioApiClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        token: str | None = None,
    ) -> ApiResult:
        headers: dict[str, str] = {}
        bearer = token if token is not None else self._token_provider()
        if bearer:
            headers["Authorization"] = f"Bearer {bearer}"

        url = path if path.startswith("/") else f"/{path}"
        try:
            response = await self._http.request(method, url, json=json, headers=headers)
        except httpx.TimeoutException as exc:
            logger.warning(f"client.request: timeout {method} {url}")
            return ApiFailure(FailureKind.TRANSIENT, f"Request timed out: {exc}")
        except httpx.TransportError as exc:
            logger.warning(f"client.request: transport error {method} {url} ({type(exc).__name__})")
            return ApiFailure(FailureKind.TRANSIENT, f"Network error: {exc}")

        data = _decode(response)
        if response.is_success:
            return ApiSuccess(status=response.status_code, data=data)

        message = data.get("message") if isinstance(data, dict) else None
        failure = ApiFailure(
            kind=_classify(response.status_code),
            message=message or response.reason_phrase,
            status=response.status_code,
            data=data,
        )
        logger.debug(f"client.request: {method} {url} -> {response.status_code} ({failure.kind.value})")
        return failure

    async def get(self, path: str) -> ApiResult:
        return await self.request("GET", path)

    async def post(self, path: str, json: Any = None) -> ApiResult:
        return await self.request("POST", path, json=json)

    async def put(self, path: str, json: Any = None) -> ApiResult:
        return await self.request("PUT", path, json=json)

    async def delete(self, path: str) -> ApiResult:
        return await self.request("DELETE", path)

    async def login(self, email: str, password: str) -> ApiResult:
        return await self.post("/auth/login", {"email": email, "password": password})

    async def register(self, username: str, email: str, password: str) -> ApiResult:
        return await self.post(
            "/auth/register", {"username": username, "email": email, "password": password}
        )

    async def me(self, token: str | None = None) -> ApiResult:
        return await self.request("GET", "/auth/me", token=token)


__all__ = [
    "ApiFailure",
    "ApiResult",
    "ApiSuccess",
    "FailureKind",
    "PortfolioApiClient",
]

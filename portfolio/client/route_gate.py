# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Protocol, TypeVar

from portfolio.client.api import ApiFailure, ApiResult, FailureKind
from portfolio.client.session import SessionStore
from portfolio.shared.config import load_config
from portfolio.shared.logging import logger

T = TypeVar("T")


class GateStatus(str, Enum):
    LOADING = "loading"
    AUTHENTICATED = "authenticated"
    UNAUTHENTICATED = "unauthenticated"


@dataclass(slots=True, frozen=True)
class Waiting:
    pass


@dataclass(slots=True, frozen=True)
class Render(Generic[T]):
    value: T


@dataclass(slots=True, frozen=True)
class Redirect:
    to: str
    replace: bool = True


GateOutcome = Waiting | Render | Redirect


class RouteGate:
    """Decides what a protected view shows for the current session state."""

    def __init__(self, session: SessionStore, login_path: str | None = None) -> None:
        self._session = session
        self._login_path = login_path or load_config().client.login_path

    def status(self) -> GateStatus:
        state = self._session.state
        if state.is_loading:
            return GateStatus.LOADING
        if state.is_authenticated:
            return GateStatus.AUTHENTICATED
        return GateStatus.UNAUTHENTICATED

    def resolve(self, render: Callable[[], T]) -> Waiting | Render[T] | Redirect:
        status = self.status()
        if status is GateStatus.LOADING:
            return Waiting()
        if status is GateStatus.AUTHENTICATED:
            return Render(render())
        return Redirect(to=self._login_path, replace=True)


class Navigator(Protocol):
    def navigate(self, path: str, *, replace: bool = False) -> None: ...


class SessionGuard:
    """Ends the session and sends the user to the login page on any 401."""

    def __init__(
        self,
        session: SessionStore,
        navigator: Navigator,
        login_path: str | None = None,
    ) -> None:
        self._session = session
        self._navigator = navigator
        self._login_path = login_path or load_config().client.login_path

    async def call(self, request: Awaitable[ApiResult]) -> ApiResult:
        result = await request
        if isinstance(result, ApiFailure) and result.kind is FailureKind.UNAUTHENTICATED:
            logger.info("session.guard: 401 received, logging out")
            self._session.logout()
            self._navigator.navigate(self._login_path, replace=True)
        return result


__all__ = [
    "GateOutcome",
    "GateStatus",
    "Navigator",
    "Redirect",
    "Render",
    "RouteGate",
    "SessionGuard",
    "Waiting",
]

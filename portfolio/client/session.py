# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Client-side authentication session.

The only thing persisted between runs is the bearer token. Everything else
(:class:`AuthState`) lives in memory and is rebuilt by :meth:`SessionStore.bootstrap`.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Protocol

from portfolio.client.api import ApiResult, ApiSuccess
from portfolio.shared.logging import logger


class TokenStorage(Protocol):
    def load(self) -> str | None: ...
    def save(self, token: str) -> None: ...
    def clear(self) -> None: ...


class MemoryTokenStorage(TokenStorage):
    def __init__(self, token: str | None = None) -> None:
        self._token = token

    def load(self) -> str | None:
        return self._token

    def save(self, token: str) -> None:
        self._token = token

    def clear(self) -> None:
        self._token = None


class FileTokenStorage(TokenStorage):
    """Keeps the token in a single file readable only by its owner."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = Path(path)

    def load(self) -> str | None:
        try:
            token = self._path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return None
        return token or None

    def save(self, token: str) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(token, encoding="utf-8")
        self._path.chmod(0o600)

    def clear(self) -> None:
        self._path.unlink(missing_ok=True)


class IdentityApi(Protocol):
    async def me(self, token: str | None = None) -> ApiResult: ...


@dataclass(slots=True, frozen=True)
class Identity:
    id: int
    username: str
    email: str

    @classmethod
    def from_payload(cls, payload: Any) -> Identity:
        # accepts a {"user": {...}} envelope as well
        if isinstance(payload, dict) and isinstance(payload.get("user"), dict):
            payload = payload["user"]
        return cls(id=int(payload["id"]), username=payload["username"], email=payload["email"])


@dataclass(slots=True, frozen=True)
class AuthState:
    token: str | None = None
    is_authenticated: bool = False
    is_loading: bool = False
    user: Identity | None = None


Listener = Callable[[AuthState], None]


class Subscription:
    def __init__(self, store: SessionStore, listener: Listener) -> None:
        self._store = store
        self._listener = listener

    def cancel(self) -> None:
        self._store._unsubscribe(self._listener)


class SessionStore:
    def __init__(self, storage: TokenStorage, api: IdentityApi) -> None:
        self._storage = storage
        self._api = api
        self._listeners: list[Listener] = []
        self._generation = 0
        self._closed = False
        token = storage.load()
        self._state = AuthState(token=token, is_loading=token is not None)

    @property
    def state(self) -> AuthState:
        return self._state

    @property
    def token(self) -> str | None:
        return self._state.token

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(self, listener: Listener) -> Subscription:
        self._listeners.append(listener)
        return Subscription(self, listener)

    def _unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _set_state(self, state: AuthState) -> None:
        if self._closed:
            return
        self._state = state
        for listener in list(self._listeners):
            listener(state)

    async def bootstrap(self) -> AuthState:
        """Check a persisted token against the server and settle the loading state."""

        token = self._storage.load()
        if not token:
            self._set_state(replace(self._state, token=None, is_authenticated=False, is_loading=False))
            return self._state

        generation = self._generation
        self._set_state(replace(self._state, token=token, is_loading=True))
        result = await self._api.me(token=token)

        if self._closed or generation != self._generation:
            logger.debug("session.bootstrap: result discarded (session changed meanwhile)")
            return self._state

        if isinstance(result, ApiSuccess):
            try:
                identity = Identity.from_payload(result.data)
            except (KeyError, TypeError, ValueError):
                logger.warning("session.bootstrap: malformed identity payload")
            else:
                logger.info(f"session.bootstrap: ok user_id={identity.id}")
                self._set_state(
                    AuthState(token=token, is_authenticated=True, is_loading=False, user=identity)
                )
                return self._state
        else:
            logger.info(f"session.bootstrap: token rejected ({result.kind.value})")

        self._storage.clear()
        self._set_state(AuthState())
        return self._state

    def login(self, token: str) -> None:
        self._generation += 1
        self._storage.save(token)
        self._set_state(replace(self._state, token=token, is_authenticated=True, is_loading=False))
        logger.info("session.login: token stored")

    def logout(self) -> None:
        self._generation += 1
        self._storage.clear()
        self._set_state(AuthState())
        logger.info("session.logout: token cleared")

    def close(self) -> None:
        self._closed = True
        self._listeners.clear()


__all__ = [
    "AuthState",
    "FileTokenStorage",
    "Identity",
    "IdentityApi",
    "MemoryTokenStorage",
    "SessionStore",
    "Subscription",
    "TokenStorage",
]

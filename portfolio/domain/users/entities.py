# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


@dataclass(slots=True, frozen=True)
class User:

    id: int
    username: str
    email: str
    password_hash: str
    created_at: datetime
    last_login_at: datetime | None = None


@dataclass(slots=True, frozen=True)
class PublicIdentity:
    """What the API is allowed to reveal about a credential record."""

    id: int
    username: str
    email: str

    @classmethod
    def of(cls, user: User) -> PublicIdentity:
        return cls(id=user.id, username=user.username, email=user.email)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "username": self.username, "email": self.email}

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from portfolio.domain.users.entities import PublicIdentity


class RegisterRequestDTO(BaseModel):
    # blanks are rejected by the use case with a single "include all fields" error
    username: str = Field("", max_length=64)
    email: str = Field("", max_length=254)
    password: str = Field("", max_length=128)

    model_config = ConfigDict(extra="ignore")


class LoginRequestDTO(BaseModel):
    email: str = Field("", max_length=254)
    password: str = Field("", max_length=128)

    model_config = ConfigDict(extra="ignore")


class IdentityDTO(BaseModel):
    id: int
    username: str
    email: str

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_identity(cls, identity: PublicIdentity) -> IdentityDTO:
        return cls.model_validate(identity)


class AuthSuccessDTO(IdentityDTO):
    token: str
    message: str | None = None

    @classmethod
    def build(
        cls, identity: PublicIdentity, token: str, message: str | None = None
    ) -> AuthSuccessDTO:
        return cls(
            id=identity.id,
            username=identity.username,
            email=identity.email,
            token=token,
            message=message,
        )

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from portfolio.shared.errors.base import DomainError


class DuplicateUserError(DomainError):
    default_code = "duplicate_user"
    default_message = "User with this username or email already exists"


class InvalidCredentialsError(DomainError):
    default_code = "invalid_credentials"
    default_status = HTTPStatus.UNAUTHORIZED
    default_message = "Invalid email or password"


class IdentityResolutionError(DomainError):
    """Base for every reason a bearer token cannot be turned into an identity."""

    default_code = "identity_unresolved"
    default_status = HTTPStatus.UNAUTHORIZED


class InvalidTokenError(IdentityResolutionError):
    default_code = "invalid_token"
    default_message = "Token signature or format is invalid"


class ExpiredTokenError(IdentityResolutionError):
    default_code = "expired_token"
    default_message = "Token has expired"


class UserNotFoundError(IdentityResolutionError):
    default_code = "user_not_found"
    default_status = HTTPStatus.NOT_FOUND
    default_message = "User not found"

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import PublicIdentity, User, normalize_email
from .exceptions import (
    DuplicateUserError,
    ExpiredTokenError,
    IdentityResolutionError,
    InvalidCredentialsError,
    InvalidTokenError,
    UserNotFoundError,
)

__all__ = [
    "DuplicateUserError",
    "ExpiredTokenError",
    "IdentityResolutionError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "PublicIdentity",
    "User",
    "UserNotFoundError",
    "normalize_email",
]

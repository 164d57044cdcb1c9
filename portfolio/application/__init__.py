# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.users import LoginUserUseCase, RegisterUserUseCase, ResolveIdentityUseCase

__all__ = [
    "LoginUserUseCase",
    "RegisterUserUseCase",
    "ResolveIdentityUseCase",
]

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from portfolio.application.use_cases.users import LoginUserUseCase, RegisterUserUseCase
from portfolio.infrastructure.auth.gate import auth_required, current_identity
from portfolio.interfaces.http.dto.auth import (
    AuthSuccessDTO,
    IdentityDTO,
    LoginRequestDTO,
    RegisterRequestDTO,
)
from portfolio.shared.errors.validation import raise_validation_error
from portfolio.shared.logging import logger


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        identity, token = self._register_use_case.execute(dto.username, dto.email, dto.password)
        payload = AuthSuccessDTO.build(identity, token).model_dump(exclude_none=True)
        return jsonify(payload), 201

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        identity, token = self._login_use_case.execute(dto.email, dto.password)
        payload = AuthSuccessDTO.build(identity, token, message="Login successful").model_dump()
        return jsonify(payload), 200

    @auth_required
    def me(self) -> tuple[Response, int]:
        identity = current_identity()
        logger.debug(f"auth.me: ok user_id={identity.id}")
        return jsonify(IdentityDTO.from_identity(identity).model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/auth")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/me", view_func=self.me, methods=["GET"])
        return bp

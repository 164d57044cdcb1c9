# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, cast


@dataclass(slots=True, eq=False)
class AppError(Exception):
    code: str
    status: HTTPStatus
    context: Mapping[str, Any] | None = None
    message: str | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message or self.code)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "message": self.message or self.code.replace("_", " ").capitalize(),
            "error": self.code,
        }
        if self.context:
            payload["context"] = dict(self.context)
        return payload


class DomainError(AppError):
    def __init__(
        self,
        message: str | None = None,
        *,
        code: str | None = None,
        status: HTTPStatus | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        resolved_code = code or cast(str, getattr(type(self), "default_code", "domain_error"))
        resolved_status = status or cast(
            HTTPStatus, getattr(type(self), "default_status", HTTPStatus.BAD_REQUEST)
        )
        resolved_message = message or cast(str | None, getattr(type(self), "default_message", None))
        super().__init__(
            code=resolved_code,
            status=resolved_status,
            context=context,
            message=resolved_message,
        )


class InfrastructureError(AppError):
    def __init__(
        self,
        code: str = "internal_error",
        *,
        message: str | None = None,
        status: HTTPStatus | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        resolved_status = status or HTTPStatus.INTERNAL_SERVER_ERROR
        super().__init__(code=code, status=resolved_status, context=context, message=message)


class ValidationError(AppError):
    def __init__(
        self,
        message: str = "Validation failed",
        *,
        code: str = "validation_error",
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code=code,
            status=HTTPStatus.BAD_REQUEST,
            context=context,
            message=message,
        )


class UnauthenticatedError(AppError):
    def __init__(self) -> None:
        super().__init__(
            code="unauthenticated",
            status=HTTPStatus.UNAUTHORIZED,
            message="Not authorized",
        )


class NotFoundError(AppError):
    def __init__(self, resource: str, key: int | str | None = None) -> None:
        super().__init__(
            code="not_found",
            status=HTTPStatus.NOT_FOUND,
            context={"resource": resource, "key": key} if key is not None else None,
            message=f"{resource} not found",
        )


class DuplicateResourceError(AppError):
    def __init__(self, resource: str, field: str, value: str) -> None:
        super().__init__(
            code="duplicate_resource",
            status=HTTPStatus.BAD_REQUEST,
            context={"resource": resource, "field": field},
            message=f"{resource} with {field} '{value}' already exists.",
        )


class UpstreamServiceError(AppError):
    def __init__(self, message: str, *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(
            code="upstream_service_error",
            status=HTTPStatus.INTERNAL_SERVER_ERROR,
            context=context,
            message=message,
        )

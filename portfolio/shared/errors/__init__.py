from .base import (
    AppError,
    DomainError,
    DuplicateResourceError,
    InfrastructureError,
    NotFoundError,
    UnauthenticatedError,
    UpstreamServiceError,
    ValidationError,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "DomainError",
    "DuplicateResourceError",
    "InfrastructureError",
    "NotFoundError",
    "UnauthenticatedError",
    "UpstreamServiceError",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
]

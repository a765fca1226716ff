from .base import (
    AppError,
    AuthenticationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "AuthenticationError",
    "ConflictError",
    "DomainError",
    "NotFoundError",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
]

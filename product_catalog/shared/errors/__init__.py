from .base import (
    AppError,
    DomainError,
    ForbiddenError,
    InfrastructureError,
    StorageUnavailableError,
    UnauthenticatedError,
    ValidationError,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "DomainError",
    "ForbiddenError",
    "InfrastructureError",
    "StorageUnavailableError",
    "UnauthenticatedError",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
]

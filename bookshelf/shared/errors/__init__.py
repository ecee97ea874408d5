from .base import (
    AppError,
    BadRequestError,
    BookNotFoundError,
    DomainError,
    NotFoundError,
    RateLimitedError,
    UnauthorizedError,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "BadRequestError",
    "BookNotFoundError",
    "DomainError",
    "NotFoundError",
    "RateLimitedError",
    "UnauthorizedError",
    "handle_app_error",
    "register_error_handler",
]

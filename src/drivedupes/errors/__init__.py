"""Public error exports for drivedupes."""

from __future__ import annotations

from .exceptions import (
    ApiError,
    AuthError,
    BackendError,
    DataIntegrityError,
    DriveDupesError,
    HttpErrorInfo,
    InvalidArgumentError,
    NetworkError,
    NotFoundError,
    PermissionError,
    QuotaExceededError,
    RateLimitError,
    map_http_error,
)

__all__ = [
    "DriveDupesError",
    "InvalidArgumentError",
    "DataIntegrityError",
    "BackendError",
    "AuthError",
    "PermissionError",
    "NotFoundError",
    "RateLimitError",
    "QuotaExceededError",
    "NetworkError",
    "ApiError",
    "HttpErrorInfo",
    "map_http_error",
]

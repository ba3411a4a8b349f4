"""Exception hierarchy and HTTP error mapping for drivedupes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


class DriveDupesError(Exception):
    """
    Base exception for drivedupes.

    Attributes:
        details: Optional structured information (folder_id, container_id,
            status_code, ...).
        cause: Optional original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class InvalidArgumentError(DriveDupesError):
    """Raised when caller or configuration input is invalid."""


class DataIntegrityError(DriveDupesError):
    """Raised when a listing entry lacks a required attribute (size, folder id)."""


class BackendError(DriveDupesError):
    """Raised when a resolve/listing call against the storage backend fails."""


class AuthError(BackendError):
    """Raised when OAuth authentication/refresh fails (HTTP 401)."""


class PermissionError(BackendError):
    """Raised when access is denied (HTTP 403 non-quota)."""


class NotFoundError(BackendError):
    """Raised when a folder or drive is not found (HTTP 404)."""


class RateLimitError(BackendError):
    """Raised when rate-limited (HTTP 429)."""


class QuotaExceededError(BackendError):
    """Raised when quota is exceeded (HTTP 403 with quota-related reason)."""


class NetworkError(BackendError):
    """Raised when network/timeout issues prevent the request."""


class ApiError(BackendError):
    """Raised for unclassified API errors (5xx, unknown 4xx, malformed responses)."""


@dataclass(frozen=True)
class HttpErrorInfo:
    """Lightweight HTTP error information for mapping to drivedupes exceptions."""

    status_code: int
    reason: str | None = None
    message: str | None = None
    details: dict[str, Any] | None = None


_QUOTA_REASON_KEYWORDS: tuple[str, ...] = (
    "quota",
    "dailyLimitExceeded",
    "usageLimits",
    "storageQuotaExceeded",
)

_RATE_LIMIT_REASONS: tuple[str, ...] = (
    "rateLimitExceeded",
    "userRateLimitExceeded",
)


def _is_quota_reason(reason: str | None) -> bool:
    if not reason:
        return False
    return any(key.lower() in reason.lower() for key in _QUOTA_REASON_KEYWORDS)


def _is_rate_limit_reason(reason: str | None) -> bool:
    return reason in _RATE_LIMIT_REASONS


def map_http_error(
    info: HttpErrorInfo,
    *,
    cause: Optional[BaseException] = None,
) -> BackendError:
    """
    Map an HTTP error from the Drive API to a BackendError subclass.

    Policy:
        - 401 -> AuthError
        - 403 -> RateLimitError for (user)rateLimitExceeded reasons,
                 QuotaExceededError for quota reasons,
                 PermissionError otherwise
        - 404 -> NotFoundError
        - 429 -> RateLimitError
        - 5xx and everything else -> ApiError
    """
    details: dict[str, Any] = {
        "status_code": info.status_code,
        "reason": info.reason,
    }
    if info.details:
        details.update(info.details)

    message = info.message or f"HTTP error {info.status_code}"

    if info.status_code == 401:
        return AuthError(message, details=details, cause=cause)
    if info.status_code == 403:
        # Drive reports per-user throttling as 403, not 429.
        if _is_rate_limit_reason(info.reason):
            return RateLimitError(message, details=details, cause=cause)
        if _is_quota_reason(info.reason):
            return QuotaExceededError(message, details=details, cause=cause)
        return PermissionError(message, details=details, cause=cause)
    if info.status_code == 404:
        return NotFoundError(message, details=details, cause=cause)
    if info.status_code == 429:
        return RateLimitError(message, details=details, cause=cause)

    return ApiError(message, details=details, cause=cause)

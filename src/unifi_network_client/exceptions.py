"""Custom exception hierarchy for the UniFi Network client."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any


class UniFiError(RuntimeError):
    """Base error for UniFi Network failures."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        details: Any | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class ValidationError(UniFiError, ValueError):
    """Raised for malformed or out-of-range input before any request is sent."""


class AuthenticationError(UniFiError):
    """Raised when the client cannot be given usable credentials."""


class NotFoundError(UniFiError):
    """Raised when a lookup by identifier returns no records."""

    def __init__(self, message: str, *, resource_id: str) -> None:
        super().__init__(message, status_code=None, details=resource_id)
        self.resource_id = resource_id


class RequestError(UniFiError):
    """Raised when an HTTP request cannot be fulfilled."""


class UnexpectedResponseError(UniFiError):
    """Raised when the API returns an unexpected payload structure."""


class ApiError(UniFiError):
    """Structured error document returned by the controller."""

    def __init__(
        self,
        *,
        status_code: int,
        status_name: str = "",
        message: str = "",
        timestamp: str = "",
        request_path: str = "",
        request_id: str = "",
    ) -> None:
        self.status_name = status_name
        self.message = message
        self.timestamp = timestamp
        self.request_path = request_path
        self.request_id = request_id
        super().__init__(
            f"{status_name}: {message} "
            f"(status: {status_code}, request: {request_path}, id: {request_id})",
            status_code=status_code,
            details=message,
        )

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any], *, status_code: int) -> ApiError:
        """Build an error from a decoded body, falling back to the HTTP status."""

        raw_status = payload.get("statusCode")
        return cls(
            status_code=raw_status if isinstance(raw_status, int) else status_code,
            status_name=str(payload.get("statusName") or ""),
            message=str(payload.get("message") or ""),
            timestamp=str(payload.get("timestamp") or ""),
            request_path=str(payload.get("requestPath") or ""),
            request_id=str(payload.get("requestId") or ""),
        )

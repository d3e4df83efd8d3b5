"""High-level UniFi Network client entrypoints."""
from .client import UniFiClient
from .config import ClientConfig
from .exceptions import (
    ApiError,
    NotFoundError,
    RequestError,
    UniFiError,
    ValidationError,
)

__all__ = [
    "UniFiClient",
    "ClientConfig",
    "UniFiError",
    "ApiError",
    "NotFoundError",
    "RequestError",
    "ValidationError",
]

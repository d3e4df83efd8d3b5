"""Configuration helpers for the UniFi Network client."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from urllib.parse import urlsplit, urlunsplit

from .exceptions import ValidationError

API_PREFIX = "/proxy/network/integration"


def strip_api_prefix(path: str) -> str:
    """Remove a leading integration prefix (with or without the slash)."""

    for prefix in (API_PREFIX, API_PREFIX.lstrip("/")):
        if path.startswith(prefix):
            return path[len(prefix):]
    return path


def normalize_base_url(base_url: str) -> str:
    """Return ``base_url`` with the integration prefix present exactly once."""

    parsed = urlsplit(base_url.strip())
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise ValidationError(f"invalid base URL: {base_url!r}")
    path = strip_api_prefix(parsed.path).strip("/")
    joined = f"{API_PREFIX}/{path}" if path else API_PREFIX
    return urlunsplit((parsed.scheme, parsed.netloc, joined, "", ""))


@dataclass(slots=True)
class ClientConfig:
    """Typed configuration for `UniFiClient`."""

    base_url: str
    verify_ssl: bool | str = True
    timeout: float = 30.0
    default_headers: Mapping[str, str] | None = None
    log_payloads: bool = False

    def resolved_headers(self) -> dict[str, str]:
        headers: dict[str, str] = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        if self.default_headers:
            headers.update(self.default_headers)
        return headers

"""API-key authentication for the UniFi Network integration API."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass

API_KEY_HEADER = "X-API-KEY"


class AuthStrategy(ABC):
    """Interface each authentication mechanism must implement."""

    @abstractmethod
    def apply(self, headers: MutableMapping[str, str]) -> None:
        """Mutate headers in-place with the necessary credentials."""

    def redacted(self, headers: Mapping[str, str]) -> dict[str, str]:
        """Return a copy of ``headers`` that is safe to log."""
        return dict(headers)


@dataclass(slots=True)
class ApiKeyAuth(AuthStrategy):
    """Send a static API key with every request."""

    api_key: str

    def apply(self, headers: MutableMapping[str, str]) -> None:
        headers[API_KEY_HEADER] = self.api_key

    def redacted(self, headers: Mapping[str, str]) -> dict[str, str]:
        masked = dict(headers)
        if API_KEY_HEADER in masked:
            masked[API_KEY_HEADER] = "***"
        return masked

"""High-level UniFi Network integration API client."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, MutableMapping
from typing import Any
from urllib.parse import urljoin, urlparse

import requests
import urllib3
from urllib3.exceptions import InsecureRequestWarning

from .auth import ApiKeyAuth, AuthStrategy
from .config import ClientConfig, normalize_base_url, strip_api_prefix
from .exceptions import AuthenticationError, RequestError
from .http import HttpResponse
from .http import request as http_request
from .models.info import ApplicationInfo
from .resources import (
    DevicesResource,
    HotspotVouchersResource,
    NetworkClientsResource,
    SitesResource,
)
from .resources.base import API_VERSION


class UniFiClient:
    """Wrap UniFi Network integration endpoints with typed helper methods.

    Calls never mutate client state; the underlying ``requests.Session`` is
    not guaranteed thread-safe, so give each thread its own client (or its own
    ``session=``). Each call issues at most one request and gives up after
    ``timeout`` seconds unless the call passes its own ``timeout``.
    """

    def __init__(
        self,
        *,
        base_url: str,
        api_key: str | None,
        verify_ssl: bool | str = True,
        timeout: float = 30.0,
        default_headers: Mapping[str, str] | None = None,
        session: requests.Session | None = None,
        logger: logging.Logger | None = None,
        log_payloads: bool = False,
    ) -> None:
        self.config = ClientConfig(
            base_url=normalize_base_url(base_url),
            verify_ssl=verify_ssl,
            timeout=timeout,
            default_headers=default_headers,
            log_payloads=log_payloads,
        )
        if not api_key:
            raise AuthenticationError("API key is required")
        self._auth: AuthStrategy = ApiKeyAuth(api_key)
        self._logger = logger or logging.getLogger(__name__)
        self._suppress_insecure_warning_if_needed()
        self._session = session or requests.Session()
        self.sites = SitesResource(self)
        self.devices = DevicesResource(self)
        self.clients = NetworkClientsResource(self)
        self.vouchers = HotspotVouchersResource(self)
        self._logger.debug(
            "Created UniFi Network client (base_url=%s, verify_ssl=%s)",
            self.config.base_url,
            self.config.verify_ssl,
        )

    # Context manager helpers -------------------------------------------------
    def __enter__(self) -> UniFiClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # pragma: no cover - passthrough
        self.close()

    # Public API --------------------------------------------------------------
    def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, str] | None = None,
        json_payload: Any | None = None,
        expect_json: bool = True,
        timeout: float | None = None,
    ) -> Any:
        url = self._resolve_url(path)
        headers = self._prepare_headers()
        self._log_request(method, url, params, headers, json_payload)
        response = self._perform_request(
            method,
            url,
            params=params,
            headers=headers,
            json_payload=json_payload,
            expect_json=expect_json,
            timeout=self.config.timeout if timeout is None else timeout,
        )
        return response.data

    def application_info(self) -> ApplicationInfo:
        """Return generic information about the Network application."""

        return ApplicationInfo.from_api(self.request("GET", f"{API_VERSION}/info"))

    def close(self) -> None:
        self._session.close()

    # Internal helpers -------------------------------------------------------
    def _resolve_url(self, path: str) -> str:
        parsed = urlparse(path)
        if parsed.scheme and parsed.netloc:
            return path
        relative_path = strip_api_prefix(path.lstrip("/")).lstrip("/")
        return urljoin(f"{self.config.base_url}/", relative_path)

    def _prepare_headers(self) -> MutableMapping[str, str]:
        headers = self.config.resolved_headers()
        self._auth.apply(headers)
        return headers

    def _perform_request(
        self,
        method: str,
        url: str,
        *,
        params: Mapping[str, str] | None,
        headers: MutableMapping[str, str],
        json_payload: Any | None,
        expect_json: bool,
        timeout: float,
    ) -> HttpResponse:
        try:
            return http_request(
                self._session,
                method,
                url,
                params=params,
                headers=headers,
                json_payload=json_payload,
                expect_json=expect_json,
                timeout=timeout,
                verify=self.config.verify_ssl,
                on_response=self._log_response,
            )
        except requests.Timeout as exc:
            raise RequestError(
                f"Request to UniFi Network API timed out after {timeout}s",
                details=str(exc),
            ) from exc
        except requests.RequestException as exc:
            reason = str(exc).strip() or exc.__class__.__name__
            raise RequestError(
                f"Failed to communicate with UniFi Network API: {reason}", details=reason
            ) from exc

    def _log_request(
        self,
        method: str,
        url: str,
        params: Mapping[str, str] | None,
        headers: Mapping[str, str],
        json_payload: Any | None,
    ) -> None:
        self._logger.info("UniFi request %s %s", method.upper(), url)
        if not self.config.log_payloads:
            return
        self._logger.debug(
            "Request details: params=%s headers=%s",
            dict(params or {}),
            self._auth.redacted(headers),
        )
        if json_payload is not None:
            self._logger.debug("Request body: %s", json.dumps(json_payload))

    def _log_response(self, response: requests.Response) -> None:
        if not self.config.log_payloads:
            return
        self._logger.debug(
            "Received response: status=%s body_length=%d body=%s",
            response.status_code,
            len(response.text),
            response.text,
        )

    def _suppress_insecure_warning_if_needed(self) -> None:
        if isinstance(self.config.verify_ssl, bool) and not self.config.verify_ssl:
            urllib3.disable_warnings(InsecureRequestWarning)

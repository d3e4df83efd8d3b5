"""HTTP utilities for UniFi Network API access."""

from __future__ import annotations

from collections.abc import Callable, Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any

from requests import Response, Session

from .exceptions import ApiError, RequestError, UnexpectedResponseError


@dataclass(slots=True)
class HttpResponse:
    """Typed response wrapper with helper accessors."""

    status_code: int
    data: Any
    headers: Mapping[str, str]
    text: str = ""


def ensure_success(response: Response) -> None:
    """Raise `ApiError` (or `RequestError` for undecodable bodies) on failures."""

    if 200 <= response.status_code < 400:
        return
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, Mapping):
        raise ApiError.from_payload(payload, status_code=response.status_code)
    raise RequestError(
        f"API error (status {response.status_code}): {response.text}",
        status_code=response.status_code,
        details=response.text,
    )


def parse_json(response: Response) -> Any:
    """Parse JSON with helpful error context."""

    try:
        return response.json()
    except ValueError as exc:
        raise UnexpectedResponseError(
            f"failed to decode response: {exc}",
            status_code=response.status_code,
            details=response.text,
        ) from exc


def request(
    session: Session,
    method: str,
    url: str,
    *,
    params: Mapping[str, str] | None = None,
    headers: MutableMapping[str, str] | None = None,
    json_payload: Any | None = None,
    expect_json: bool = True,
    timeout: float | tuple[float, float] | None = None,
    verify: bool | str = True,
    on_response: Callable[[Response], None] | None = None,
) -> HttpResponse:
    """Make a request and return a parsed response envelope.

    ``on_response`` sees every response, failed ones included, before the
    status is checked.
    """

    response = session.request(
        method=method,
        url=url,
        params=params,
        headers=headers,
        json=json_payload,
        timeout=timeout,
        verify=verify,
    )
    if on_response is not None:
        on_response(response)
    ensure_success(response)

    data: Any = None
    if expect_json:
        if not response.content:
            raise UnexpectedResponseError(
                "empty response body where JSON was expected",
                status_code=response.status_code,
            )
        data = parse_json(response)

    return HttpResponse(
        status_code=response.status_code,
        data=data,
        headers=response.headers,
        text=response.text,
    )

"""Common helpers for resource wrappers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from ..exceptions import NotFoundError, UnexpectedResponseError
from ..models.base import ApiModel, ModelT, PaginatedResponse

if TYPE_CHECKING:  # pragma: no cover - import-time guard
    from ..client import UniFiClient

API_VERSION = "/v1"


class ResourceBase:
    """Provide shared helpers for resource modules."""

    def __init__(self, client: UniFiClient) -> None:
        self._client = client

    @staticmethod
    def _path(*segments: str) -> str:
        # Each caller id stays a single segment, even with "/", "?" or "#" in it.
        return API_VERSION + "".join(f"/{quote(segment, safe='')}" for segment in segments)

    def _get(self, path: str, *, params: Mapping[str, str] | None = None) -> Any:
        return self._client.request("GET", path, params=params)

    def _post(
        self,
        path: str,
        payload: ApiModel | Mapping[str, Any] | None = None,
        *,
        expect_json: bool = True,
    ) -> Any:
        body = payload.to_api() if isinstance(payload, ApiModel) else payload
        return self._client.request("POST", path, json_payload=body, expect_json=expect_json)

    def _delete(self, path: str) -> Any:
        return self._client.request("DELETE", path, expect_json=False)

    def _list(
        self,
        path: str,
        item_type: type[ModelT],
        *,
        params: Mapping[str, str] | None = None,
    ) -> PaginatedResponse[ModelT]:
        return PaginatedResponse.from_api(self._get(path, params=params), item_type)

    def _get_one(self, path: str, item_type: type[ModelT], *, not_found: str, resource_id: str) -> ModelT:
        """Fetch a ``{"data": [...]}`` document and unwrap its first record."""

        records = self._records(self._get(path), item_type)
        if not records:
            raise NotFoundError(f"{not_found}: {resource_id}", resource_id=resource_id)
        return records[0]

    def _records(self, payload: Any, item_type: type[ModelT]) -> list[ModelT]:
        if not isinstance(payload, Mapping):
            raise UnexpectedResponseError("response did not contain a JSON object")
        items = payload.get("data") or []
        if not isinstance(items, list):
            raise UnexpectedResponseError("response 'data' is not an array")
        return [item_type.from_api(item) for item in items]

"""Decoding helpers shared by the typed API models."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import MISSING, Field, dataclass, field, fields
from typing import Any, Generic, TypeVar

from ..exceptions import UnexpectedResponseError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound="ApiModel")


def api_field(
    name: str,
    default: Any = MISSING,
    *,
    default_factory: Any = MISSING,
    omitempty: bool = False,
    model: type[ApiModel] | None = None,
) -> Any:
    """Declare a dataclass field together with its wire name.

    Args:
        name: Key used by the controller JSON payload.
        default: Zero value used when the key is absent or null.
        default_factory: Factory for mutable zero values.
        omitempty: Drop the key from `to_api` output when the value is falsy.
        model: Nested model used to decode object values.
    """
    metadata = {"api": name, "omitempty": omitempty, "model": model}
    if default_factory is not MISSING:
        return field(default_factory=default_factory, metadata=metadata)
    return field(default=default, metadata=metadata)


def _wire_name(f: Field) -> str:
    return f.metadata.get("api", f.name)


class ApiModel:
    """Mixin giving dataclasses a JSON mapping in both directions."""

    __slots__ = ()

    @classmethod
    def from_api(cls: type[ModelT], payload: Mapping[str, Any]) -> ModelT:
        if not isinstance(payload, Mapping):
            raise UnexpectedResponseError(
                f"expected an object for {cls.__name__}, got {type(payload).__name__}"
            )
        kwargs: dict[str, Any] = {}
        for f in fields(cls):  # type: ignore[arg-type]
            if "api" not in f.metadata:
                continue
            value = payload.get(_wire_name(f))
            if value is None:
                continue
            nested = f.metadata.get("model")
            if nested is not None and isinstance(value, Mapping):
                value = nested.from_api(value)
            kwargs[f.name] = value
        return cls(**kwargs)._normalized()

    def _normalized(self: ModelT) -> ModelT:
        """Hook for derived fields computed after decoding."""
        return self

    def to_api(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        for f in fields(self):  # type: ignore[arg-type]
            if "api" not in f.metadata:
                continue
            value = getattr(self, f.name)
            if f.metadata.get("omitempty") and not value:
                continue
            if isinstance(value, ApiModel):
                value = value.to_api()
            body[_wire_name(f)] = value
        return body


@dataclass(frozen=True, slots=True)
class PaginatedResponse(Generic[ModelT]):
    """One page of a list endpoint together with its envelope."""

    offset: int = 0
    limit: int = 0
    count: int = 0
    total_count: int = 0
    data: list[ModelT] = field(default_factory=list)

    @classmethod
    def from_api(
        cls, payload: Any, item_type: type[ModelT]
    ) -> PaginatedResponse[ModelT]:
        if not isinstance(payload, Mapping):
            raise UnexpectedResponseError("list response did not contain a JSON object")
        raw_items = payload.get("data") or []
        if not isinstance(raw_items, list):
            raise UnexpectedResponseError("list response 'data' is not an array")
        page = cls(
            offset=int(payload.get("offset") or 0),
            limit=int(payload.get("limit") or 0),
            count=int(payload.get("count") or 0),
            total_count=int(payload.get("totalCount") or 0),
            data=[item_type.from_api(item) for item in raw_items],
        )
        if page.count != len(page.data):
            logger.warning(
                "Page count %d does not match %d returned %s records",
                page.count,
                len(page.data),
                item_type.__name__,
            )
        return page

    def to_api(self) -> dict[str, Any]:
        return {
            "offset": self.offset,
            "limit": self.limit,
            "count": self.count,
            "totalCount": self.total_count,
            "data": [item.to_api() for item in self.data],
        }

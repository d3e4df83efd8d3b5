"""Model for UniFi sites."""

from __future__ import annotations

from dataclasses import dataclass

from .base import ApiModel, api_field


@dataclass(frozen=True, slots=True)
class Site(ApiModel):
    """A logical grouping of devices and clients under one controller."""

    id: str = api_field("_id", "")
    name: str = api_field("name", "")
    description: str = api_field("desc", "")
    role: str = api_field("role", "")
    hidden: bool = api_field("attr_hidden", False)
    no_delete: bool = api_field("attr_no_delete", False)

    @property
    def deletable(self) -> bool:
        return not self.no_delete


@dataclass(frozen=True, slots=True)
class ListSitesParams:
    offset: int = 0
    limit: int = 0

"""Application metadata model."""

from __future__ import annotations

from dataclasses import dataclass

from .base import ApiModel, api_field


@dataclass(frozen=True, slots=True)
class ApplicationInfo(ApiModel):
    application_version: str = api_field("applicationVersion", "")

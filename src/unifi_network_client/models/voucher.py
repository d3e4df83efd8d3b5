"""Models for captive-portal (hotspot) vouchers."""

from __future__ import annotations

from dataclasses import dataclass

from .base import ApiModel, api_field


@dataclass(frozen=True, slots=True)
class HotspotVoucher(ApiModel):
    """A time, guest or data limited access code for the hotspot portal."""

    id: str = api_field("_id", "")
    created_at: str = api_field("createdAt", "")
    # Voucher note; may repeat across vouchers.
    name: str = api_field("name", "")
    code: str = api_field("code", "")
    authorized_guest_limit: int = api_field("authorizedGuestLimit", 0, omitempty=True)
    authorized_guest_count: int = api_field("authorizedGuestCount", 0)
    activated_at: str = api_field("activatedAt", "", omitempty=True)
    expires_at: str = api_field("expiresAt", "", omitempty=True)
    expired: bool = api_field("expired", False)
    time_limit_minutes: int = api_field("timeLimitMinutes", 0)
    data_usage_limit_mb: int = api_field("dataUsageLimitMBytes", 0, omitempty=True)
    rx_rate_limit_kbps: int = api_field("rxRateLimitKbps", 0, omitempty=True)
    tx_rate_limit_kbps: int = api_field("txRateLimitKbps", 0, omitempty=True)


@dataclass(frozen=True, slots=True)
class CreateHotspotVoucherRequest(ApiModel):
    """Body for ``POST /sites/{siteId}/hotspot/vouchers``."""

    name: str = api_field("name", "")
    time_limit_minutes: int = api_field("timeLimitMinutes", 0)
    authorized_guest_limit: int = api_field("authorizedGuestLimit", 0, omitempty=True)
    data_usage_limit_mb: int = api_field("dataUsageLimitMBytes", 0, omitempty=True)
    rx_rate_limit_kbps: int = api_field("rxRateLimitKbps", 0, omitempty=True)
    tx_rate_limit_kbps: int = api_field("txRateLimitKbps", 0, omitempty=True)
    count: int = api_field("count", 0, omitempty=True)


@dataclass(frozen=True, slots=True)
class GenerateHotspotVouchersRequest(ApiModel):
    """Body for ``POST /sites/{siteId}/hotspot/vouchers/create``.

    Bounds enforced before sending:
        count: 1..10000
        time_limit_minutes: 1..1000000
        authorized_guest_limit: >= 0 (0 means unlimited)
        data_usage_limit_mb: 1..1046576 when set
        rx_rate_limit_kbps / tx_rate_limit_kbps: 2..100000 when set
    """

    count: int = api_field("count", 1)
    name: str = api_field("name", "")
    authorized_guest_limit: int = api_field("authorizedGuestLimit", 0, omitempty=True)
    time_limit_minutes: int = api_field("timeLimitMinutes", 0)
    data_usage_limit_mb: int = api_field("dataUsageLimitMBytes", 0, omitempty=True)
    rx_rate_limit_kbps: int = api_field("rxRateLimitKbps", 0, omitempty=True)
    tx_rate_limit_kbps: int = api_field("txRateLimitKbps", 0, omitempty=True)


@dataclass(frozen=True, slots=True)
class ListHotspotVouchersParams:
    offset: int = 0
    limit: int = 0

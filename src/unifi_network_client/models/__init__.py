"""Typed request and response models for the UniFi Network API."""
from .base import ApiModel, PaginatedResponse, api_field
from .client import CLIENT_TYPES, ListNetworkClientsParams, NetworkClient
from .device import (
    Device,
    DeviceAction,
    DevicePortAction,
    DeviceStatistics,
    ListDevicesParams,
    SystemStats,
)
from .info import ApplicationInfo
from .site import ListSitesParams, Site
from .voucher import (
    CreateHotspotVoucherRequest,
    GenerateHotspotVouchersRequest,
    HotspotVoucher,
    ListHotspotVouchersParams,
)

__all__ = [
    "ApiModel",
    "api_field",
    "PaginatedResponse",
    "ApplicationInfo",
    "CLIENT_TYPES",
    "NetworkClient",
    "ListNetworkClientsParams",
    "Device",
    "DeviceAction",
    "DevicePortAction",
    "DeviceStatistics",
    "SystemStats",
    "ListDevicesParams",
    "Site",
    "ListSitesParams",
    "HotspotVoucher",
    "CreateHotspotVoucherRequest",
    "GenerateHotspotVouchersRequest",
    "ListHotspotVouchersParams",
]

"""Models for UniFi network devices, their actions and statistics."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from .base import ApiModel, api_field


@dataclass(frozen=True, slots=True)
class Device(ApiModel):
    """An adopted (or pending) UniFi network device.

    ``type`` is not sent by the controller; it is derived from the first
    entry of ``features`` after decoding.
    """

    id: str = api_field("id", "")
    mac: str = api_field("macAddress", "")
    model: str = api_field("model", "")
    type: str = ""
    features: list[str] = api_field("features", default_factory=list)
    name: str = api_field("name", "")
    site_id: str = api_field("siteId", "")
    ip: str = api_field("ipAddress", "")
    version: str = api_field("version", "")
    adopted: bool = api_field("adopted", False)
    disabled: bool = api_field("disabled", False)
    uptime: int = api_field("uptime", 0)
    last_seen: int = api_field("lastSeen", 0)
    upgradable: bool = api_field("upgradable", False)
    state: Any = api_field("state", "")
    last_uplink: str = api_field("lastUplink", "")
    uplink_mac: str = api_field("uplinkMac", "")

    def _normalized(self) -> Device:
        # Only the first feature decides the type.
        if self.features:
            return replace(self, type=self.features[0])
        return self


@dataclass(frozen=True, slots=True)
class DeviceAction(ApiModel):
    """Device-level command such as ``restart``, ``adopt`` or ``forget``."""

    action: str = api_field("cmd", "")


@dataclass(frozen=True, slots=True)
class DevicePortAction(ApiModel):
    """Port-level command such as ``reset``, ``enable`` or ``disable``."""

    port_idx: int = api_field("portIdx", 0)
    port_id: str = api_field("portId", "")
    action: str = api_field("action", "")


@dataclass(frozen=True, slots=True)
class SystemStats(ApiModel):
    temperature: float = api_field("temperature", 0.0)
    fan_level: int = api_field("fan_level", 0)


@dataclass(frozen=True, slots=True)
class DeviceStatistics(ApiModel):
    """Latest counters reported by a device."""

    id: str = api_field("_id", "")
    mac: str = api_field("mac", "")
    rx_bytes: int = api_field("rx_bytes", 0)
    tx_bytes: int = api_field("tx_bytes", 0)
    rx_rate: float = api_field("rx_rate", 0.0)
    tx_rate: float = api_field("tx_rate", 0.0)
    rx_packets: int = api_field("rx_packets", 0)
    tx_packets: int = api_field("tx_packets", 0)
    rx_errors: int = api_field("rx_errors", 0)
    tx_errors: int = api_field("tx_errors", 0)
    rx_dropped: int = api_field("rx_dropped", 0)
    tx_dropped: int = api_field("tx_dropped", 0)
    rx_multicast: int = api_field("rx_multicast", 0)
    tx_multicast: int = api_field("tx_multicast", 0)
    rx_broadcast: int = api_field("rx_broadcast", 0)
    tx_broadcast: int = api_field("tx_broadcast", 0)
    bytes_r: int = api_field("bytes-r", 0)
    rx_bytes_r: int = api_field("rx_bytes-r", 0)
    tx_bytes_r: int = api_field("tx_bytes-r", 0)
    cpu: float = api_field("cpu", 0.0)
    memory: float = api_field("mem", 0.0)
    system_stats: SystemStats = api_field("system-stats", default_factory=SystemStats, model=SystemStats)
    uptime: int = api_field("uptime", 0)


@dataclass(frozen=True, slots=True)
class ListDevicesParams:
    offset: int = 0
    limit: int = 0
    type: str = ""

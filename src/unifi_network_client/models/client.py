"""Model for clients connected to a UniFi network."""

from __future__ import annotations

from dataclasses import dataclass

from .base import ApiModel, api_field

CLIENT_TYPES = ("all", "wired", "wireless")


@dataclass(frozen=True, slots=True)
class NetworkClient(ApiModel):
    """A wired, wireless or VPN client seen by the controller.

    Radio metrics (signal, noise, SNR, channel, band, SSID/BSSID) are only
    populated for wireless clients and stay at their zero value otherwise.
    """

    id: str = api_field("_id", "")
    name: str = api_field("name", "")
    connected_at: str = api_field("connectedAt", "")
    ip_address: str = api_field("ipAddress", "")
    type: str = api_field("type", "")
    mac_address: str = api_field("macAddress", "")
    uplink_device_id: str = api_field("uplinkDeviceId", "")
    site_id: str = api_field("site_id", "")
    network: str = api_field("network", "")
    network_name: str = api_field("network_name", "")
    oui: str = api_field("oui", "")
    last_seen: int = api_field("last_seen", 0)
    uptime: int = api_field("uptime", 0)
    is_wired: bool = api_field("is_wired", False)
    is_guest: bool = api_field("is_guest", False)
    device_id: str = api_field("device_id", "")
    device_name: str = api_field("device_name", "")
    device_mac: str = api_field("device_mac", "")

    # traffic
    rx_bytes: int = api_field("rx_bytes", 0)
    tx_bytes: int = api_field("tx_bytes", 0)
    rx_rate: float = api_field("rx_rate", 0.0)
    tx_rate: float = api_field("tx_rate", 0.0)

    # radio
    signal: int = api_field("signal", 0)
    noise: int = api_field("noise", 0)
    snr: int = api_field("snr", 0)
    channel: int = api_field("channel", 0)
    radio_protocol: str = api_field("radio_proto", "")
    radio_band: str = api_field("radio", "")
    ssid: str = api_field("essid", "")
    bssid: str = api_field("bssid", "")

    use_fixed_ip: bool = api_field("use_fixedip", False)
    fixed_ip: str = api_field("fixed_ip", "")
    network_id: str = api_field("network_id", "")
    blocked: bool = api_field("blocked", False)
    authorized: bool = api_field("authorized", False)


@dataclass(frozen=True, slots=True)
class ListNetworkClientsParams:
    offset: int = 0
    limit: int = 0
    type: str = ""
    within_hours: int = 0

"""Resource-specific convenience wrappers."""
from .clients import NetworkClientsResource
from .devices import DevicesResource
from .sites import SitesResource
from .vouchers import HotspotVouchersResource

__all__ = [
    "SitesResource",
    "DevicesResource",
    "NetworkClientsResource",
    "HotspotVouchersResource",
]

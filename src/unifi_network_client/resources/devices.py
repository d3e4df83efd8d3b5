"""Device inventory, statistics and actions."""

from __future__ import annotations

from ..models.base import PaginatedResponse
from ..models.device import (
    Device,
    DeviceAction,
    DevicePortAction,
    DeviceStatistics,
    ListDevicesParams,
)
from ..validation import pagination_params, require, require_payload
from .base import ResourceBase


class DevicesResource(ResourceBase):
    """Interact with the network devices of a site."""

    def list(self, site_id: str, params: ListDevicesParams | None = None) -> PaginatedResponse[Device]:
        require(site_id, "siteId")
        params = params or ListDevicesParams()
        query = pagination_params(params.offset, params.limit)
        if params.type:
            query["type"] = params.type
        return self._list(self._path("sites", site_id, "devices"), Device, params=query)

    def get(self, site_id: str, device_id: str) -> Device:
        require(site_id, "siteId")
        require(device_id, "deviceId")
        return self._get_one(
            self._path("sites", site_id, "devices", device_id),
            Device,
            not_found="device not found",
            resource_id=device_id,
        )

    def statistics(self, site_id: str, device_id: str) -> DeviceStatistics:
        """Return the latest counters reported by a device."""

        require(site_id, "siteId")
        require(device_id, "deviceId")
        return self._get_one(
            self._path("sites", site_id, "devices", device_id, "stats"),
            DeviceStatistics,
            not_found="no statistics found for device",
            resource_id=device_id,
        )

    def execute_action(self, site_id: str, device_id: str, action: DeviceAction | None) -> None:
        """Run a device command (``restart``, ``adopt``, ``forget``...)."""

        require_payload(action, "action")
        require(site_id, "siteId")
        require(device_id, "deviceId")
        self._post(self._path("sites", site_id, "devices", device_id), action, expect_json=False)

    def execute_port_action(
        self, site_id: str, device_id: str, action: DevicePortAction | None
    ) -> None:
        """Run a command (``reset``, ``enable``, ``disable``...) on one port."""

        require_payload(action, "action")
        require(site_id, "siteId")
        require(device_id, "deviceId")
        require(action.port_id, "portId")
        self._post(
            self._path("sites", site_id, "devices", device_id, "port", action.port_id),
            action,
            expect_json=False,
        )

    # Aliases
    get_statistics = statistics

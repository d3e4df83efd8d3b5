"""Network client inventory and access control."""

from __future__ import annotations

from ..exceptions import ValidationError
from ..models.base import PaginatedResponse
from ..models.client import CLIENT_TYPES, ListNetworkClientsParams, NetworkClient
from ..validation import pagination_params, require, require_choice
from .base import ResourceBase


class NetworkClientsResource(ResourceBase):
    """List, inspect, block and unblock clients of a site."""

    def list(
        self, site_id: str, params: ListNetworkClientsParams | None = None
    ) -> PaginatedResponse[NetworkClient]:
        """Return one page of clients.

        Args:
            site_id: The site identifier.
            params: Optional paging and filters. ``type`` must be one of
                ``all``, ``wired`` or ``wireless``; ``within_hours`` limits
                the result to clients seen in the last N hours.
        """
        require(site_id, "siteId")
        params = params or ListNetworkClientsParams()
        query = pagination_params(params.offset, params.limit)
        if params.type:
            query["type"] = require_choice(params.type, "type", CLIENT_TYPES)
        if params.within_hours < 0:
            raise ValidationError("within must be non-negative")
        if params.within_hours:
            query["within"] = str(params.within_hours)
        return self._list(self._path("sites", site_id, "clients"), NetworkClient, params=query)

    def get(self, site_id: str, client_id: str) -> NetworkClient:
        require(site_id, "siteId")
        require(client_id, "clientId")
        return self._get_one(
            self._path("sites", site_id, "clients", client_id),
            NetworkClient,
            not_found="network client not found",
            resource_id=client_id,
        )

    def block(self, site_id: str, client_id: str) -> None:
        self._set_blocked(site_id, client_id, "block")

    def unblock(self, site_id: str, client_id: str) -> None:
        self._set_blocked(site_id, client_id, "unblock")

    def _set_blocked(self, site_id: str, client_id: str, verb: str) -> None:
        require(site_id, "siteId")
        require(client_id, "clientId")
        self._post(self._path("sites", site_id, "clients", client_id, verb), expect_json=False)

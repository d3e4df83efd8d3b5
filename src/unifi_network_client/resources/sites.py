"""Site listing."""

from __future__ import annotations

from ..models.base import PaginatedResponse
from ..models.site import ListSitesParams, Site
from ..validation import pagination_params, require
from .base import ResourceBase


class SitesResource(ResourceBase):
    """Enumerate the sites visible to the API key."""

    def list(self, params: ListSitesParams | None = None) -> PaginatedResponse[Site]:
        """Return one page of sites.

        With Multi-Site enabled every created site is returned; otherwise only
        the default site.
        """
        params = params or ListSitesParams()
        query = pagination_params(params.offset, params.limit)
        return self._list(self._path("sites"), Site, params=query)

    def get(self, site_id: str) -> Site:
        require(site_id, "siteId")
        return self._get_one(
            self._path("sites", site_id),
            Site,
            not_found="site not found",
            resource_id=site_id,
        )

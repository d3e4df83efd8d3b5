"""Hotspot voucher issuance."""

from __future__ import annotations

from ..models.base import PaginatedResponse
from ..models.voucher import (
    CreateHotspotVoucherRequest,
    GenerateHotspotVouchersRequest,
    HotspotVoucher,
    ListHotspotVouchersParams,
)
from ..validation import pagination_params, require, validate_voucher_request
from .base import ResourceBase


class HotspotVouchersResource(ResourceBase):
    """Create, inspect and revoke captive-portal vouchers."""

    def list(
        self, site_id: str, params: ListHotspotVouchersParams | None = None
    ) -> PaginatedResponse[HotspotVoucher]:
        require(site_id, "siteId")
        params = params or ListHotspotVouchersParams()
        query = pagination_params(params.offset, params.limit)
        return self._list(self._vouchers_path(site_id), HotspotVoucher, params=query)

    def create(
        self, site_id: str, request: CreateHotspotVoucherRequest | None
    ) -> list[HotspotVoucher]:
        """Create one or more vouchers sharing the same note and limits."""

        validate_voucher_request(request, count_required=False)
        require(site_id, "siteId")
        return self._records(self._post(self._vouchers_path(site_id), request), HotspotVoucher)

    def generate(
        self, site_id: str, request: GenerateHotspotVouchersRequest | None
    ) -> list[HotspotVoucher]:
        """Generate a batch of vouchers.

        The request is validated before anything is sent; the first violated
        rule is reported.

        Args:
            site_id: The site identifier.
            request: Voucher settings, see `GenerateHotspotVouchersRequest`.

        Returns:
            The created vouchers, in the order returned by the controller.
        """
        validate_voucher_request(request, count_required=True)
        require(site_id, "siteId")
        return self._records(
            self._post(self._vouchers_path(site_id, "create"), request), HotspotVoucher
        )

    def get(self, site_id: str, voucher_id: str) -> HotspotVoucher:
        require(site_id, "siteId")
        require(voucher_id, "voucherId")
        return self._get_one(
            self._vouchers_path(site_id, voucher_id),
            HotspotVoucher,
            not_found="voucher not found",
            resource_id=voucher_id,
        )

    def delete(self, site_id: str, voucher_id: str) -> None:
        require(site_id, "siteId")
        require(voucher_id, "voucherId")
        self._delete(self._vouchers_path(site_id, voucher_id))

    def _vouchers_path(self, site_id: str, *extra: str) -> str:
        return self._path("sites", site_id, "hotspot", "vouchers", *extra)

    # Aliases
    details = get

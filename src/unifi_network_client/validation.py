"""Client-side input checks shared by the resource modules.

Every check raises `ValidationError` with a fixed message before any request
leaves the process. The voucher bounds mirror the controller's documented
limits.
"""

from __future__ import annotations

from collections.abc import Iterable

from .exceptions import ValidationError
from .models.voucher import CreateHotspotVoucherRequest, GenerateHotspotVouchersRequest

VoucherRequest = CreateHotspotVoucherRequest | GenerateHotspotVouchersRequest

MAX_LIMIT = 200

VOUCHER_COUNT_RANGE = (1, 10_000)
VOUCHER_TIME_LIMIT_RANGE = (1, 1_000_000)
VOUCHER_DATA_LIMIT_RANGE = (1, 1_046_576)
VOUCHER_RATE_RANGE = (2, 100_000)


def require(value: str | None, name: str) -> str:
    if not value:
        raise ValidationError(f"{name} is required")
    return value


def require_payload(value: object | None, name: str) -> None:
    if value is None:
        raise ValidationError(f"{name} cannot be None")


def require_choice(value: str, name: str, allowed: Iterable[str]) -> str:
    options = tuple(allowed)
    if value not in options:
        raise ValidationError(f"{name} must be one of: {', '.join(options)}")
    return value


def require_range(value: int, name: str, bounds: tuple[int, int]) -> int:
    low, high = bounds
    if value < low or value > high:
        raise ValidationError(f"{name} must be between {low} and {high}")
    return value


def pagination_params(offset: int = 0, limit: int = 0) -> dict[str, str]:
    """Validate offset/limit and return only the values worth sending."""

    if limit < 0 or limit > MAX_LIMIT:
        raise ValidationError(f"limit must be between 0 and {MAX_LIMIT}")
    if offset < 0:
        raise ValidationError("offset must be non-negative")
    params: dict[str, str] = {}
    if offset:
        params["offset"] = str(offset)
    if limit:
        params["limit"] = str(limit)
    return params


def validate_voucher_request(request: VoucherRequest | None, *, count_required: bool) -> None:
    """Check a voucher create/generate body in a fixed order.

    The first violated rule wins: presence of the request, name, count,
    time limit, guest limit, then the optional data and rate limits.
    """
    if request is None:
        raise ValidationError("request cannot be None")
    require(request.name, "name")
    if count_required or request.count:
        require_range(request.count, "count", VOUCHER_COUNT_RANGE)
    require_range(request.time_limit_minutes, "timeLimitMinutes", VOUCHER_TIME_LIMIT_RANGE)
    if request.authorized_guest_limit < 0:
        raise ValidationError("authorizedGuestLimit must be greater than 0")
    if request.data_usage_limit_mb:
        require_range(request.data_usage_limit_mb, "dataUsageLimitMBytes", VOUCHER_DATA_LIMIT_RANGE)
    if request.rx_rate_limit_kbps:
        require_range(request.rx_rate_limit_kbps, "rxRateLimitKbps", VOUCHER_RATE_RANGE)
    if request.tx_rate_limit_kbps:
        require_range(request.tx_rate_limit_kbps, "txRateLimitKbps", VOUCHER_RATE_RANGE)

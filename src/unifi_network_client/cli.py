"""Command-line interface for the UniFi Network integration API."""
from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from typing import Any

import typer

try:  # pragma: no cover - exercised in runtime environments
    from rich import box
    from rich.console import Console
    from rich.table import Table
except ImportError as exc:  # pragma: no cover - optional dependency guard
    raise RuntimeError(
        "The CLI requires Rich for table rendering. Install the CLI extras via "
        "'pip install unifi-network-client[cli]' to enable this command."
    ) from exc

from . import UniFiClient
from .cli_schema import CLI_TABLE_VIEWS, TableView
from .exceptions import ApiError, RequestError, UniFiError
from .models import (
    CreateHotspotVoucherRequest,
    DeviceAction,
    DevicePortAction,
    GenerateHotspotVouchersRequest,
    ListDevicesParams,
    ListHotspotVouchersParams,
    ListNetworkClientsParams,
    ListSitesParams,
    PaginatedResponse,
)

app = typer.Typer(help="UniFi Network API CLI.", no_args_is_help=True)

sites_app = typer.Typer(help="Manage UniFi sites.")
devices_app = typer.Typer(help="Manage UniFi network devices.")
clients_app = typer.Typer(help="Manage UniFi network clients.")
vouchers_app = typer.Typer(help="Manage UniFi hotspot vouchers.")
app.add_typer(sites_app, name="sites")
app.add_typer(devices_app, name="devices")
app.add_typer(clients_app, name="clients")
app.add_typer(vouchers_app, name="vouchers")


def _build_client(
    url: str,
    api_key: str,
    insecure: bool,
    timeout: float,
    debug: bool,
) -> UniFiClient:
    if debug:
        logging.basicConfig(level=logging.DEBUG)
    try:
        return UniFiClient(
            base_url=url,
            api_key=api_key,
            verify_ssl=not insecure,
            timeout=timeout,
            log_payloads=debug,
        )
    except UniFiError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2))


console = Console(force_terminal=False, color_system=None)


def _render_rich_table(view: TableView, rows: Sequence[Mapping[str, Any]]) -> None:
    table = Table(
        title=view.title,
        box=box.SIMPLE,
        show_lines=False,
        header_style="bold cyan",
    )
    for column in view.columns:
        table.add_column(column.header, justify=column.justify)
    ordered_rows = list(rows)
    if view.sort_key:
        ordered_rows.sort(key=view.sort_key)
    for row in ordered_rows:
        table.add_row(*(column.render(row) for column in view.columns))
    console.print(table)


def _present_page(
    page: PaginatedResponse[Any], *, view_id: str, noun: str, json_output: bool
) -> None:
    if json_output:
        _echo_json(page.to_api())
        return
    rows = [item.to_api() for item in page.data]
    _render_rich_table(CLI_TABLE_VIEWS[view_id], rows)
    typer.echo(
        f"Showing {page.count} of {page.total_count} {noun} (offset: {page.offset})"
    )


def _handle_error(exc: UniFiError) -> None:
    message = str(exc)
    # ApiError and status-bearing RequestError messages already name the status.
    if exc.status_code is not None and not isinstance(exc, (ApiError, RequestError)):
        message = f"Request failed (status {exc.status_code}): {exc}"
    typer.secho(message, err=True, fg=typer.colors.RED)
    raise typer.Exit(code=1)


def _shared_options() -> dict[str, Any]:  # pragma: no cover - helper indirection
    return {
        "url": typer.Option(
            ..., "--url", envvar="UNIFI_URL", help="UniFi Network controller URL."
        ),
        "api_key": typer.Option(
            ...,
            "--api-key",
            envvar="UNIFI_API_KEY",
            help="UniFi Network API key.",
            hide_input=True,
        ),
        "insecure": typer.Option(
            False,
            "--insecure",
            envvar="UNIFI_INSECURE",
            help="Skip TLS certificate verification.",
        ),
        "timeout": typer.Option(30.0, help="Request timeout (seconds).", show_default=True),
        "debug": typer.Option(
            False,
            "--debug",
            envvar="UNIFI_DEBUG",
            help="Log requests, headers and bodies at debug level.",
        ),
        "output_json": typer.Option(
            False,
            "--json",
            "-j",
            help="Return raw JSON instead of rendering a table.",
        ),
        "site": typer.Option("default", "--site", "-s", help="Site ID."),
        "limit": typer.Option(
            25, "--limit", help="Maximum number of records to return (0-200)."
        ),
        "offset": typer.Option(0, "--offset", help="Starting offset for pagination."),
    }


_SHARED_OPTIONS = _shared_options()


@app.command("info")
def app_info(
    url: str = _SHARED_OPTIONS["url"],
    api_key: str = _SHARED_OPTIONS["api_key"],
    insecure: bool = _SHARED_OPTIONS["insecure"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    debug: bool = _SHARED_OPTIONS["debug"],
    output_json: bool = _SHARED_OPTIONS["output_json"],
) -> None:
    """Display the UniFi Network application version."""

    with _build_client(url, api_key, insecure, timeout, debug) as client:
        try:
            info = client.application_info()
        except UniFiError as exc:
            _handle_error(exc)
            return

    if output_json:
        _echo_json(info.to_api())
        return
    typer.echo(f"UniFi Network Version: {info.application_version}")


@sites_app.command("list")
def sites_list(
    url: str = _SHARED_OPTIONS["url"],
    api_key: str = _SHARED_OPTIONS["api_key"],
    insecure: bool = _SHARED_OPTIONS["insecure"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    debug: bool = _SHARED_OPTIONS["debug"],
    output_json: bool = _SHARED_OPTIONS["output_json"],
    limit: int = _SHARED_OPTIONS["limit"],
    offset: int = _SHARED_OPTIONS["offset"],
) -> None:
    """List all sites."""

    with _build_client(url, api_key, insecure, timeout, debug) as client:
        try:
            page = client.sites.list(ListSitesParams(offset=offset, limit=limit))
        except UniFiError as exc:
            _handle_error(exc)
            return
    _present_page(page, view_id="sites.list", noun="sites", json_output=output_json)


@sites_app.command("get")
def sites_get(
    site_id: str = typer.Option(..., "--id", help="Site ID."),
    url: str = _SHARED_OPTIONS["url"],
    api_key: str = _SHARED_OPTIONS["api_key"],
    insecure: bool = _SHARED_OPTIONS["insecure"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    debug: bool = _SHARED_OPTIONS["debug"],
) -> None:
    """Get site details."""

    with _build_client(url, api_key, insecure, timeout, debug) as client:
        try:
            site = client.sites.get(site_id)
        except UniFiError as exc:
            _handle_error(exc)
            return
    _echo_json(site.to_api())


@devices_app.command("list")
def devices_list(
    url: str = _SHARED_OPTIONS["url"],
    api_key: str = _SHARED_OPTIONS["api_key"],
    insecure: bool = _SHARED_OPTIONS["insecure"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    debug: bool = _SHARED_OPTIONS["debug"],
    output_json: bool = _SHARED_OPTIONS["output_json"],
    site: str = _SHARED_OPTIONS["site"],
    limit: int = _SHARED_OPTIONS["limit"],
    offset: int = _SHARED_OPTIONS["offset"],
    device_type: str = typer.Option("", "--type", help="Filter by device type."),
) -> None:
    """List all network devices."""

    params = ListDevicesParams(offset=offset, limit=limit, type=device_type)
    with _build_client(url, api_key, insecure, timeout, debug) as client:
        try:
            page = client.devices.list(site, params)
        except UniFiError as exc:
            _handle_error(exc)
            return
    _present_page(page, view_id="devices.list", noun="devices", json_output=output_json)


@devices_app.command("get")
def devices_get(
    device_id: str = typer.Option(..., "--id", help="Device ID."),
    url: str = _SHARED_OPTIONS["url"],
    api_key: str = _SHARED_OPTIONS["api_key"],
    insecure: bool = _SHARED_OPTIONS["insecure"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    debug: bool = _SHARED_OPTIONS["debug"],
    site: str = _SHARED_OPTIONS["site"],
) -> None:
    """Get device details."""

    with _build_client(url, api_key, insecure, timeout, debug) as client:
        try:
            device = client.devices.get(site, device_id)
        except UniFiError as exc:
            _handle_error(exc)
            return
    payload = device.to_api()
    payload["type"] = device.type
    _echo_json(payload)


@devices_app.command("stats")
def devices_stats(
    device_id: str = typer.Option(..., "--id", help="Device ID."),
    url: str = _SHARED_OPTIONS["url"],
    api_key: str = _SHARED_OPTIONS["api_key"],
    insecure: bool = _SHARED_OPTIONS["insecure"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    debug: bool = _SHARED_OPTIONS["debug"],
    site: str = _SHARED_OPTIONS["site"],
) -> None:
    """Get device statistics."""

    with _build_client(url, api_key, insecure, timeout, debug) as client:
        try:
            stats = client.devices.statistics(site, device_id)
        except UniFiError as exc:
            _handle_error(exc)
            return
    _echo_json(stats.to_api())


@devices_app.command("action")
def devices_action(
    device_id: str = typer.Option(..., "--id", help="Device ID."),
    action: str = typer.Option(
        ..., "--action", help="Action to perform (restart, adopt, forget)."
    ),
    url: str = _SHARED_OPTIONS["url"],
    api_key: str = _SHARED_OPTIONS["api_key"],
    insecure: bool = _SHARED_OPTIONS["insecure"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    debug: bool = _SHARED_OPTIONS["debug"],
    site: str = _SHARED_OPTIONS["site"],
) -> None:
    """Execute a device action."""

    with _build_client(url, api_key, insecure, timeout, debug) as client:
        try:
            client.devices.execute_action(site, device_id, DeviceAction(action=action))
        except UniFiError as exc:
            _handle_error(exc)
            return
    typer.secho(
        f"Successfully executed {action} action on device {device_id}",
        fg=typer.colors.GREEN,
    )


@devices_app.command("port")
def devices_port(
    device_id: str = typer.Option(..., "--id", help="Device ID."),
    action: str = typer.Option(
        ..., "--action", help="Action to perform (reset, enable, disable)."
    ),
    port_idx: int = typer.Option(..., "--port-idx", help="Port index number."),
    port_id: str = typer.Option(..., "--port-id", help="Port identifier."),
    url: str = _SHARED_OPTIONS["url"],
    api_key: str = _SHARED_OPTIONS["api_key"],
    insecure: bool = _SHARED_OPTIONS["insecure"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    debug: bool = _SHARED_OPTIONS["debug"],
    site: str = _SHARED_OPTIONS["site"],
) -> None:
    """Execute an action on one port of a device."""

    port_action = DevicePortAction(port_idx=port_idx, port_id=port_id, action=action)
    with _build_client(url, api_key, insecure, timeout, debug) as client:
        try:
            client.devices.execute_port_action(site, device_id, port_action)
        except UniFiError as exc:
            _handle_error(exc)
            return
    typer.secho(
        f"Successfully executed {action} action on port {port_idx} of device {device_id}",
        fg=typer.colors.GREEN,
    )


@clients_app.command("list")
def clients_list(
    url: str = _SHARED_OPTIONS["url"],
    api_key: str = _SHARED_OPTIONS["api_key"],
    insecure: bool = _SHARED_OPTIONS["insecure"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    debug: bool = _SHARED_OPTIONS["debug"],
    output_json: bool = _SHARED_OPTIONS["output_json"],
    site: str = _SHARED_OPTIONS["site"],
    limit: int = _SHARED_OPTIONS["limit"],
    offset: int = _SHARED_OPTIONS["offset"],
    client_type: str = typer.Option(
        "", "--type", help="Filter by connection type (all, wired, wireless)."
    ),
    within: int = typer.Option(
        0, "--within", help="Only clients seen within the last N hours."
    ),
) -> None:
    """List all network clients."""

    params = ListNetworkClientsParams(
        offset=offset, limit=limit, type=client_type, within_hours=within
    )
    with _build_client(url, api_key, insecure, timeout, debug) as client:
        try:
            page = client.clients.list(site, params)
        except UniFiError as exc:
            _handle_error(exc)
            return
    _present_page(page, view_id="clients.list", noun="clients", json_output=output_json)


@clients_app.command("get")
def clients_get(
    client_id: str = typer.Option(..., "--id", help="Client ID."),
    url: str = _SHARED_OPTIONS["url"],
    api_key: str = _SHARED_OPTIONS["api_key"],
    insecure: bool = _SHARED_OPTIONS["insecure"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    debug: bool = _SHARED_OPTIONS["debug"],
    site: str = _SHARED_OPTIONS["site"],
) -> None:
    """Get network client details."""

    with _build_client(url, api_key, insecure, timeout, debug) as client:
        try:
            network_client = client.clients.get(site, client_id)
        except UniFiError as exc:
            _handle_error(exc)
            return
    _echo_json(network_client.to_api())


@clients_app.command("block")
def clients_block(
    client_id: str = typer.Option(..., "--id", help="Client ID."),
    url: str = _SHARED_OPTIONS["url"],
    api_key: str = _SHARED_OPTIONS["api_key"],
    insecure: bool = _SHARED_OPTIONS["insecure"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    debug: bool = _SHARED_OPTIONS["debug"],
    site: str = _SHARED_OPTIONS["site"],
) -> None:
    """Block a network client."""

    with _build_client(url, api_key, insecure, timeout, debug) as client:
        try:
            client.clients.block(site, client_id)
        except UniFiError as exc:
            _handle_error(exc)
            return
    typer.secho(f"Blocked client {client_id}", fg=typer.colors.GREEN)


@clients_app.command("unblock")
def clients_unblock(
    client_id: str = typer.Option(..., "--id", help="Client ID."),
    url: str = _SHARED_OPTIONS["url"],
    api_key: str = _SHARED_OPTIONS["api_key"],
    insecure: bool = _SHARED_OPTIONS["insecure"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    debug: bool = _SHARED_OPTIONS["debug"],
    site: str = _SHARED_OPTIONS["site"],
) -> None:
    """Unblock a network client."""

    with _build_client(url, api_key, insecure, timeout, debug) as client:
        try:
            client.clients.unblock(site, client_id)
        except UniFiError as exc:
            _handle_error(exc)
            return
    typer.secho(f"Unblocked client {client_id}", fg=typer.colors.GREEN)


@vouchers_app.command("list")
def vouchers_list(
    url: str = _SHARED_OPTIONS["url"],
    api_key: str = _SHARED_OPTIONS["api_key"],
    insecure: bool = _SHARED_OPTIONS["insecure"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    debug: bool = _SHARED_OPTIONS["debug"],
    output_json: bool = _SHARED_OPTIONS["output_json"],
    site: str = _SHARED_OPTIONS["site"],
    limit: int = _SHARED_OPTIONS["limit"],
    offset: int = _SHARED_OPTIONS["offset"],
) -> None:
    """List all hotspot vouchers."""

    params = ListHotspotVouchersParams(offset=offset, limit=limit)
    with _build_client(url, api_key, insecure, timeout, debug) as client:
        try:
            page = client.vouchers.list(site, params)
        except UniFiError as exc:
            _handle_error(exc)
            return
    _present_page(page, view_id="vouchers.list", noun="vouchers", json_output=output_json)


@vouchers_app.command("create")
def vouchers_create(
    note: str = typer.Option(..., "--note", help="Voucher note."),
    duration: int = typer.Option(..., "--duration", help="Duration in minutes."),
    count: int = typer.Option(1, "--count", help="Number of vouchers to create."),
    guest_limit: int = typer.Option(0, "--guest-limit", help="Maximum guests per voucher."),
    data_limit: int = typer.Option(0, "--data-limit", help="Data usage limit in MB."),
    down_limit: int = typer.Option(0, "--down-limit", help="Download rate limit in Kbps."),
    up_limit: int = typer.Option(0, "--up-limit", help="Upload rate limit in Kbps."),
    url: str = _SHARED_OPTIONS["url"],
    api_key: str = _SHARED_OPTIONS["api_key"],
    insecure: bool = _SHARED_OPTIONS["insecure"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    debug: bool = _SHARED_OPTIONS["debug"],
    site: str = _SHARED_OPTIONS["site"],
) -> None:
    """Create a new hotspot voucher."""

    request = CreateHotspotVoucherRequest(
        name=note,
        time_limit_minutes=duration,
        authorized_guest_limit=guest_limit,
        data_usage_limit_mb=data_limit,
        rx_rate_limit_kbps=down_limit,
        tx_rate_limit_kbps=up_limit,
        count=count,
    )
    with _build_client(url, api_key, insecure, timeout, debug) as client:
        try:
            vouchers = client.vouchers.create(site, request)
        except UniFiError as exc:
            _handle_error(exc)
            return
    _echo_json([voucher.to_api() for voucher in vouchers])


@vouchers_app.command("generate")
def vouchers_generate(
    name: str = typer.Option(
        ..., "--name", help="Voucher note (applied to all generated vouchers)."
    ),
    time_limit: int = typer.Option(
        ..., "--time-limit", help="Time limit in minutes (1-1000000)."
    ),
    count: int = typer.Option(1, "--count", help="Number of vouchers to generate (1-10000)."),
    guest_limit: int = typer.Option(0, "--guest-limit", help="Maximum guests per voucher."),
    data_limit: int = typer.Option(
        0, "--data-limit", help="Data usage limit in MB (1-1046576)."
    ),
    down_limit: int = typer.Option(
        0, "--down-limit", help="Download rate limit in Kbps (2-100000)."
    ),
    up_limit: int = typer.Option(0, "--up-limit", help="Upload rate limit in Kbps (2-100000)."),
    url: str = _SHARED_OPTIONS["url"],
    api_key: str = _SHARED_OPTIONS["api_key"],
    insecure: bool = _SHARED_OPTIONS["insecure"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    debug: bool = _SHARED_OPTIONS["debug"],
    site: str = _SHARED_OPTIONS["site"],
) -> None:
    """Generate multiple hotspot vouchers."""

    request = GenerateHotspotVouchersRequest(
        count=count,
        name=name,
        authorized_guest_limit=guest_limit,
        time_limit_minutes=time_limit,
        data_usage_limit_mb=data_limit,
        rx_rate_limit_kbps=down_limit,
        tx_rate_limit_kbps=up_limit,
    )
    with _build_client(url, api_key, insecure, timeout, debug) as client:
        try:
            vouchers = client.vouchers.generate(site, request)
        except UniFiError as exc:
            _handle_error(exc)
            return
    _echo_json([voucher.to_api() for voucher in vouchers])


@vouchers_app.command("get")
def vouchers_get(
    voucher_id: str = typer.Option(..., "--id", help="Voucher ID."),
    url: str = _SHARED_OPTIONS["url"],
    api_key: str = _SHARED_OPTIONS["api_key"],
    insecure: bool = _SHARED_OPTIONS["insecure"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    debug: bool = _SHARED_OPTIONS["debug"],
    site: str = _SHARED_OPTIONS["site"],
) -> None:
    """Get voucher details."""

    with _build_client(url, api_key, insecure, timeout, debug) as client:
        try:
            voucher = client.vouchers.details(site, voucher_id)
        except UniFiError as exc:
            _handle_error(exc)
            return
    _echo_json(voucher.to_api())


@vouchers_app.command("delete")
def vouchers_delete(
    voucher_id: str = typer.Option(..., "--id", help="Voucher ID."),
    url: str = _SHARED_OPTIONS["url"],
    api_key: str = _SHARED_OPTIONS["api_key"],
    insecure: bool = _SHARED_OPTIONS["insecure"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    debug: bool = _SHARED_OPTIONS["debug"],
    site: str = _SHARED_OPTIONS["site"],
) -> None:
    """Delete a voucher."""

    with _build_client(url, api_key, insecure, timeout, debug) as client:
        try:
            client.vouchers.delete(site, voucher_id)
        except UniFiError as exc:
            _handle_error(exc)
            return
    typer.secho(f"Successfully deleted voucher {voucher_id}", fg=typer.colors.GREEN)

"""Schema describing important fields for CLI table rendering."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

Row = Mapping[str, Any]
ValueExtractor = Callable[[Row], Any]
ValueFormatter = Callable[[Any], str]
SortKey = Callable[[Row], Any]


@dataclass(frozen=True)
class Column:
    """Describe how to pull and format a column for Rich tables."""

    header: str
    keys: tuple[str, ...] = ()
    extractor: ValueExtractor | None = None
    formatter: ValueFormatter | None = None
    justify: str = "left"

    def render(self, row: Row) -> str:
        value: Any | None = None
        if self.keys:
            for key in self.keys:
                if key in row:
                    value = row.get(key)
                    if value is not None:
                        break
        if value is None and self.extractor:
            value = self.extractor(row)
        if value is None:
            return ""
        if self.formatter:
            formatted = self.formatter(value)
            return "" if formatted is None else str(formatted)
        return str(value)


@dataclass(frozen=True)
class TableView:
    """Describe a Rich table for a CLI command."""

    title: str
    columns: tuple[Column, ...]
    sort_key: SortKey | None = None


def _truncate(length: int) -> ValueFormatter:
    def _formatter(value: Any) -> str:
        s = str(value)
        return s if len(s) <= length else s[: length - 3] + "..."

    return _formatter


def _device_status(row: Row) -> str:
    if row.get("disabled"):
        return "Disabled"
    state = row.get("state")
    if state in (1, "1") or str(state).upper() == "ONLINE":
        return "Online"
    return "Offline"


def _device_type(row: Row) -> str:
    features = row.get("features") or []
    return str(features[0]) if features else ""


def _voucher_expires(row: Row) -> str:
    return str(row.get("expiresAt") or "Never")


def _voucher_status(row: Row) -> str:
    return "Expired" if row.get("expired") else "Active"


def _sort_name(row: Row) -> str:
    return str(row.get("name") or "").lower()


CLI_TABLE_VIEWS: dict[str, TableView] = {
    "sites.list": TableView(
        title="Sites",
        columns=(
            Column("ID", keys=("_id",)),
            Column("Name", keys=("name",), formatter=_truncate(23)),
            Column("Description", keys=("desc",)),
            Column("Role", keys=("role",)),
        ),
        sort_key=_sort_name,
    ),
    "devices.list": TableView(
        title="Devices",
        columns=(
            Column("Name", keys=("name",), formatter=_truncate(23)),
            Column("MAC", keys=("macAddress",)),
            Column("IP", keys=("ipAddress",)),
            Column("Model", keys=("model",)),
            Column("Type", extractor=_device_type),
            Column("Status", extractor=_device_status, justify="center"),
        ),
        sort_key=_sort_name,
    ),
    "clients.list": TableView(
        title="Network Clients",
        columns=(
            Column("Name", keys=("name",), formatter=_truncate(23)),
            Column("MAC", keys=("macAddress",)),
            Column("IP", keys=("ipAddress",)),
            Column("Type", keys=("type",)),
        ),
        sort_key=_sort_name,
    ),
    "vouchers.list": TableView(
        title="Hotspot Vouchers",
        columns=(
            Column("Note", keys=("name",), formatter=_truncate(23)),
            Column("Code", keys=("code",)),
            Column("Expires", extractor=_voucher_expires),
            Column("Limit (min)", keys=("timeLimitMinutes",), justify="right"),
            Column("Status", extractor=_voucher_status, justify="center"),
        ),
    ),
}

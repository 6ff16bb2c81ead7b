"""Rich table and JSON renderers for CLI output."""

from __future__ import annotations

import json
from typing import Any, Sequence

from pydantic import BaseModel
from rich.console import Console
from rich.table import Table

error_console = Console(stderr=True)

STATE_STYLES = {
    "started": "green",
    "online": "green",
    "stopped": "yellow",
    "maintenance": "cyan",
    "error": "red",
}


def _state(value: str) -> str:
    style = STATE_STYLES.get(value)
    return f"[{style}]{value}[/{style}]" if style else value


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    error_console.print(
        f"✗ {message}", style="red", markup=False, highlight=False, soft_wrap=True
    )


def render_json(console: Console, value: BaseModel | Sequence[BaseModel]) -> None:
    if isinstance(value, BaseModel):
        payload: Any = value.model_dump(mode="json")
    else:
        payload = [item.model_dump(mode="json") for item in value]
    console.print_json(json.dumps(payload))


def servers_table(servers: Sequence[Any]) -> Table:
    table = Table(title="Servers")
    table.add_column("UUID", style="dim")
    table.add_column("Title")
    table.add_column("Hostname")
    table.add_column("Zone")
    table.add_column("Plan")
    table.add_column("CPU", justify="right")
    table.add_column("Memory (MB)", justify="right")
    table.add_column("State")
    for server in servers:
        table.add_row(
            server.uuid,
            server.title,
            server.hostname,
            server.zone,
            server.plan,
            str(server.core_number),
            str(server.memory_amount),
            _state(server.state),
        )
    return table


def server_details_table(server: Any) -> Table:
    table = Table(title=f"Server {server.uuid}", show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Title", server.title)
    table.add_row("Hostname", server.hostname)
    table.add_row("State", _state(server.state))
    table.add_row("Zone", server.zone)
    table.add_row("Plan", server.plan)
    table.add_row("CPU", str(server.core_number))
    table.add_row("Memory (MB)", str(server.memory_amount))
    table.add_row("Tags", ", ".join(server.tags) or "-")
    table.add_row(
        "IP addresses",
        "\n".join(f"{ip.address} ({ip.access} {ip.family})" for ip in server.ip_addresses) or "-",
    )
    table.add_row(
        "Storage",
        "\n".join(
            f"{device.address} {device.title} {device.size} GB" for device in server.storage_devices
        )
        or "-",
    )
    return table


def storages_table(storages: Sequence[Any]) -> Table:
    table = Table(title="Storages")
    table.add_column("UUID", style="dim")
    table.add_column("Title")
    table.add_column("Type")
    table.add_column("Access")
    table.add_column("Tier")
    table.add_column("Size (GB)", justify="right")
    table.add_column("Zone")
    table.add_column("State")
    for storage in storages:
        table.add_row(
            storage.uuid,
            storage.title,
            storage.type,
            storage.access,
            storage.tier,
            str(storage.size),
            storage.zone,
            _state(storage.state),
        )
    return table


def zones_table(zones: Sequence[Any]) -> Table:
    table = Table(title="Zones")
    table.add_column("ID")
    table.add_column("Description")
    table.add_column("Public")
    for zone in zones:
        table.add_row(zone.id, zone.description, "yes" if zone.public else "no")
    return table


def plans_table(plans: Sequence[Any]) -> Table:
    table = Table(title="Plans")
    table.add_column("Name")
    table.add_column("CPU", justify="right")
    table.add_column("Memory (MB)", justify="right")
    table.add_column("Storage (GB)", justify="right")
    table.add_column("Tier")
    table.add_column("Traffic out (GB)", justify="right")
    for plan in plans:
        table.add_row(
            plan.name,
            str(plan.core_number),
            str(plan.memory_amount),
            str(plan.storage_size),
            plan.storage_tier,
            str(plan.public_traffic_out),
        )
    return table


def account_table(account: Any) -> Table:
    table = Table(title="Account", show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Username", account.username)
    table.add_row("Credits", f"{account.credits:.2f}")
    return table

"""
UpCloud command line client.

Usage:
    upcloud-client <command> [args]

Credentials come from UPCLOUD_USERNAME / UPCLOUD_PASSWORD (or a .env file).
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Sequence

from rich.console import Console

from upcloud_client.cli import formatters
from upcloud_client.config import Settings, load_settings
from upcloud_client.core.errors import ExitCode, main_with_error_handling
from upcloud_client.logging import bind_context, configure_logging
from upcloud_client.request import (
    GetServerDetailsRequest,
    GetStoragesRequest,
    WaitForServerStateRequest,
    WaitForStorageStateRequest,
)
from upcloud_client.service import Service

console = Console()

ServiceFactory = Callable[[Settings], Service]


def _add_wait_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("uuid", help="Resource UUID")
    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument(
        "--state", dest="desired_state", help="Wait until the resource reaches this state"
    )
    target.add_argument(
        "--leave", dest="undesired_state", help="Wait until the resource leaves this state"
    )
    parser.add_argument(
        "--timeout", type=float, default=300.0, help="Seconds to wait (default: 300)"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="upcloud-client", description="UpCloud API client")
    parser.add_argument(
        "--output", choices=["table", "json"], default="table", help="Output format"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("account", help="Show account details")
    subparsers.add_parser("zones", help="List zones")
    subparsers.add_parser("plans", help="List server plans")
    subparsers.add_parser("servers", help="List servers")

    server_parser = subparsers.add_parser("server", help="Show server details")
    server_parser.add_argument("uuid", help="Server UUID")

    storages_parser = subparsers.add_parser("storages", help="List storages")
    storage_filter = storages_parser.add_mutually_exclusive_group()
    storage_filter.add_argument("--access", choices=["public", "private"], help="Filter by access")
    storage_filter.add_argument(
        "--type", choices=["disk", "cdrom", "template", "backup"], help="Filter by type"
    )

    wait_server_parser = subparsers.add_parser("wait-server", help="Wait for a server state change")
    _add_wait_arguments(wait_server_parser)

    wait_storage_parser = subparsers.add_parser(
        "wait-storage", help="Wait for a storage state change"
    )
    _add_wait_arguments(wait_storage_parser)

    return parser


@main_with_error_handling(on_error=formatters.print_error)
def run_command(
    args: argparse.Namespace,
    settings: Settings,
    service_factory: ServiceFactory = Service.from_settings,
) -> int:
    """Execute a parsed command and return its exit code."""
    log = bind_context(command=args.command)
    service = service_factory(settings)
    as_json = args.output == "json"

    try:
        if args.command == "account":
            account = service.get_account()
            if as_json:
                formatters.render_json(console, account)
            else:
                console.print(formatters.account_table(account))
        elif args.command == "zones":
            zones = service.get_zones()
            if as_json:
                formatters.render_json(console, zones)
            else:
                console.print(formatters.zones_table(zones))
        elif args.command == "plans":
            plans = service.get_plans()
            if as_json:
                formatters.render_json(console, plans)
            else:
                console.print(formatters.plans_table(plans))
        elif args.command == "servers":
            servers = service.get_servers()
            if as_json:
                formatters.render_json(console, servers)
            else:
                console.print(formatters.servers_table(servers))
        elif args.command == "server":
            server = service.get_server_details(GetServerDetailsRequest(uuid=args.uuid))
            if as_json:
                formatters.render_json(console, server)
            else:
                console.print(formatters.server_details_table(server))
        elif args.command == "storages":
            storages = service.get_storages(
                GetStoragesRequest(access=args.access or "", type=args.type or "")
            )
            if as_json:
                formatters.render_json(console, storages)
            else:
                console.print(formatters.storages_table(storages))
        elif args.command == "wait-server":
            server = service.wait_for_server_state(
                WaitForServerStateRequest(
                    uuid=args.uuid,
                    desired_state=args.desired_state,
                    undesired_state=args.undesired_state,
                    timeout=args.timeout,
                )
            )
            log.info("wait_complete", uuid=args.uuid, state=server.state)
            console.print(f"Server {server.uuid} is {server.state}")
        elif args.command == "wait-storage":
            storage = service.wait_for_storage_state(
                WaitForStorageStateRequest(
                    uuid=args.uuid,
                    desired_state=args.desired_state,
                    undesired_state=args.undesired_state,
                    timeout=args.timeout,
                )
            )
            log.info("wait_complete", uuid=args.uuid, state=storage.state)
            console.print(f"Storage {storage.uuid} is {storage.state}")
        else:
            raise ValueError(f"Unknown command: {args.command}")
    finally:
        service.client.close()

    return ExitCode.SUCCESS


def main(
    argv: Sequence[str] | None = None,
    *,
    service_factory: ServiceFactory = Service.from_settings,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return ExitCode.SUCCESS

    settings = load_settings()
    level = logging.DEBUG if args.verbose else settings.log_level
    configure_logging(level, json_format=settings.log_json)

    return run_command(args, settings, service_factory)


if __name__ == "__main__":
    sys.exit(main())

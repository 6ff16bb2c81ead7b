"""
High-level UpCloud API operations.

Each method sends one request through the Client transport and normalizes
the response envelope into typed models. The wait_for_* helpers block until
a server or storage reaches (or leaves) a lifecycle state.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any, Callable

from upcloud_client.client import Client
from upcloud_client.core.errors import DecodeError
from upcloud_client.envelope import Collection, Single, decode_json, normalize, unwrap_collection
from upcloud_client.models import (
    ACCOUNT,
    FIREWALL_RULE_DETAILS,
    FIREWALL_RULES,
    IP_ADDRESS_DETAILS,
    IP_ADDRESSES,
    PLANS,
    SERVER_CONFIGURATIONS,
    SERVER_DETAILS,
    SERVERS,
    STORAGE_DETAILS,
    STORAGES,
    ZONES,
    Account,
    FirewallRule,
    IPAddress,
    Plan,
    Server,
    ServerConfiguration,
    ServerDetails,
    Storage,
    StorageDetails,
    Zone,
)
from upcloud_client.poller import DEFAULT_POLL_INTERVAL, StatePoller
from upcloud_client.request import (
    AssignIPAddressRequest,
    AttachStorageRequest,
    CloneStorageRequest,
    CreateBackupRequest,
    CreateFirewallRuleRequest,
    CreateServerRequest,
    CreateStorageRequest,
    DeleteFirewallRuleRequest,
    DeleteServerRequest,
    DeleteStorageRequest,
    DetachStorageRequest,
    EjectCDROMRequest,
    GetFirewallRuleDetailsRequest,
    GetFirewallRulesRequest,
    GetIPAddressDetailsRequest,
    GetServerDetailsRequest,
    GetStorageDetailsRequest,
    GetStoragesRequest,
    LoadCDROMRequest,
    ModifyIPAddressRequest,
    ModifyServerRequest,
    ModifyStorageRequest,
    ReleaseIPAddressRequest,
    RestartServerRequest,
    RestoreBackupRequest,
    StartServerRequest,
    StopServerRequest,
    TemplatizeStorageRequest,
    WaitForServerStateRequest,
    WaitForStorageStateRequest,
)

if TYPE_CHECKING:
    from upcloud_client.config.settings import Settings


class Service:
    """
    Typed access to the UpCloud API.

    Args:
        client: Transport used for every request
        poll_interval: Seconds between reads in wait_for_* helpers
        retry_transport_errors: Keep polling through failed reads until the
            timeout instead of aborting the wait
        sleep: Wait primitive for polling, injectable for tests
        clock: Monotonic time source for polling, injectable for tests
    """

    def __init__(
        self,
        client: Client,
        *,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        retry_transport_errors: bool = False,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.client = client
        self._poll_interval = poll_interval
        self._retry_transport_errors = retry_transport_errors
        self._sleep = sleep
        self._clock = clock

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> Service:
        kwargs.setdefault("poll_interval", settings.poll_interval)
        kwargs.setdefault("retry_transport_errors", settings.poll_retry_transport_errors)
        return cls(Client.from_settings(settings), **kwargs)

    # Account and catalog

    def get_account(self) -> Account:
        return self._get("/account", ACCOUNT)

    def get_zones(self) -> list[Zone]:
        return self._get("/zone", ZONES)

    def get_plans(self) -> list[Plan]:
        return self._get("/plan", PLANS)

    def get_server_configurations(self) -> list[ServerConfiguration]:
        return self._get("/server_size", SERVER_CONFIGURATIONS)

    def get_timezones(self) -> list[str]:
        timezones = unwrap_collection(
            decode_json(self.client.get("/timezone")), "timezones", "timezone"
        )
        for timezone in timezones:
            if not isinstance(timezone, str):
                raise DecodeError(
                    f"Expected timezone names, got {type(timezone).__name__}",
                    details={"key": "timezone"},
                )
        return timezones

    # Servers

    def get_servers(self) -> list[Server]:
        return self._get("/server", SERVERS)

    def get_server_details(self, request: GetServerDetailsRequest) -> ServerDetails:
        return self._get(request.request_url(), SERVER_DETAILS)

    def create_server(self, request: CreateServerRequest) -> ServerDetails:
        return self._post(request.request_url(), request.to_body(), SERVER_DETAILS)

    def modify_server(self, request: ModifyServerRequest) -> ServerDetails:
        return self._put(request.request_url(), request.to_body(), SERVER_DETAILS)

    def start_server(self, request: StartServerRequest) -> ServerDetails:
        return self._post(
            request.request_url(), request.to_body(), SERVER_DETAILS, timeout=request.timeout
        )

    def stop_server(self, request: StopServerRequest) -> ServerDetails:
        return self._post(request.request_url(), request.to_body(), SERVER_DETAILS)

    def restart_server(self, request: RestartServerRequest) -> ServerDetails:
        return self._post(request.request_url(), request.to_body(), SERVER_DETAILS)

    def delete_server(self, request: DeleteServerRequest) -> None:
        self.client.delete(request.request_url())

    def wait_for_server_state(self, request: WaitForServerStateRequest) -> ServerDetails:
        poller = self._poller(
            lambda uuid: self.get_server_details(GetServerDetailsRequest(uuid=uuid)),
            "server",
        )
        return poller.wait(
            request.uuid,
            desired_state=request.desired_state,
            undesired_state=request.undesired_state,
            timeout=request.timeout,
        )

    # Storage

    def get_storages(self, request: GetStoragesRequest | None = None) -> list[Storage]:
        request = request or GetStoragesRequest()
        return self._get(request.request_url(), STORAGES)

    def get_storage_details(self, request: GetStorageDetailsRequest) -> StorageDetails:
        return self._get(request.request_url(), STORAGE_DETAILS)

    def create_storage(self, request: CreateStorageRequest) -> StorageDetails:
        return self._post(request.request_url(), request.to_body(), STORAGE_DETAILS)

    def modify_storage(self, request: ModifyStorageRequest) -> StorageDetails:
        return self._put(request.request_url(), request.to_body(), STORAGE_DETAILS)

    def attach_storage(self, request: AttachStorageRequest) -> ServerDetails:
        return self._post(request.request_url(), request.to_body(), SERVER_DETAILS)

    def detach_storage(self, request: DetachStorageRequest) -> ServerDetails:
        return self._post(request.request_url(), request.to_body(), SERVER_DETAILS)

    def delete_storage(self, request: DeleteStorageRequest) -> None:
        self.client.delete(request.request_url())

    def clone_storage(self, request: CloneStorageRequest) -> StorageDetails:
        return self._post(request.request_url(), request.to_body(), STORAGE_DETAILS)

    def templatize_storage(self, request: TemplatizeStorageRequest) -> StorageDetails:
        return self._post(request.request_url(), request.to_body(), STORAGE_DETAILS)

    def load_cdrom(self, request: LoadCDROMRequest) -> ServerDetails:
        return self._post(request.request_url(), request.to_body(), SERVER_DETAILS)

    def eject_cdrom(self, request: EjectCDROMRequest) -> ServerDetails:
        return self._post(request.request_url(), None, SERVER_DETAILS)

    def create_backup(self, request: CreateBackupRequest) -> StorageDetails:
        return self._post(request.request_url(), request.to_body(), STORAGE_DETAILS)

    def restore_backup(self, request: RestoreBackupRequest) -> None:
        self.client.post(request.request_url())

    def wait_for_storage_state(self, request: WaitForStorageStateRequest) -> StorageDetails:
        poller = self._poller(
            lambda uuid: self.get_storage_details(GetStorageDetailsRequest(uuid=uuid)),
            "storage",
        )
        return poller.wait(
            request.uuid,
            desired_state=request.desired_state,
            undesired_state=request.undesired_state,
            timeout=request.timeout,
        )

    # IP addresses

    def get_ip_addresses(self) -> list[IPAddress]:
        return self._get("/ip_address", IP_ADDRESSES)

    def get_ip_address_details(self, request: GetIPAddressDetailsRequest) -> IPAddress:
        return self._get(request.request_url(), IP_ADDRESS_DETAILS)

    def assign_ip_address(self, request: AssignIPAddressRequest) -> IPAddress:
        return self._post(request.request_url(), request.to_body(), IP_ADDRESS_DETAILS)

    def modify_ip_address(self, request: ModifyIPAddressRequest) -> IPAddress:
        return self._put(request.request_url(), request.to_body(), IP_ADDRESS_DETAILS)

    def release_ip_address(self, request: ReleaseIPAddressRequest) -> None:
        self.client.delete(request.request_url())

    # Firewall

    def get_firewall_rules(self, request: GetFirewallRulesRequest) -> list[FirewallRule]:
        return self._get(request.request_url(), FIREWALL_RULES)

    def get_firewall_rule_details(self, request: GetFirewallRuleDetailsRequest) -> FirewallRule:
        return self._get(request.request_url(), FIREWALL_RULE_DETAILS)

    def create_firewall_rule(self, request: CreateFirewallRuleRequest) -> FirewallRule:
        return self._post(request.request_url(), request.to_body(), FIREWALL_RULE_DETAILS)

    def delete_firewall_rule(self, request: DeleteFirewallRuleRequest) -> None:
        self.client.delete(request.request_url())

    def _poller(self, fetch: Callable[[str], Any], resource_kind: str) -> StatePoller[Any]:
        return StatePoller(
            fetch,
            interval=self._poll_interval,
            sleep=self._sleep,
            clock=self._clock,
            retry_transport_errors=self._retry_transport_errors,
            resource_kind=resource_kind,
        )

    def _get(self, path: str, shape: Single[Any] | Collection[Any]) -> Any:
        return normalize(self.client.get(path), shape)

    def _post(
        self,
        path: str,
        body: dict[str, Any] | None,
        shape: Single[Any],
        *,
        timeout: float | None = None,
    ) -> Any:
        return normalize(self.client.post(path, body, timeout=timeout), shape)

    def _put(self, path: str, body: dict[str, Any], shape: Single[Any]) -> Any:
        return normalize(self.client.put(path, body), shape)

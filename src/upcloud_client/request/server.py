"""Requests for the /server endpoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from upcloud_client.models.base import Label
from upcloud_client.request.base import as_string, compact, require, yes_no


class PasswordDelivery(StrEnum):
    NONE = "none"
    EMAIL = "email"
    SMS = "sms"


class CreateServerStorageDeviceAction(StrEnum):
    CREATE = "create"
    CLONE = "clone"
    ATTACH = "attach"


@dataclass
class GetServerDetailsRequest:
    uuid: str

    def request_url(self) -> str:
        return f"/server/{require(self.uuid, 'uuid')}"


@dataclass
class CreateServerStorageDevice:
    action: str
    storage: str = ""
    title: str = ""
    size: int | None = None
    tier: str = ""
    address: str = ""
    type: str = ""

    def to_dict(self) -> dict[str, Any]:
        return compact(
            {
                "action": self.action,
                "address": self.address,
                "size": self.size,
                "storage": self.storage,
                "tier": self.tier,
                "title": self.title,
                "type": self.type,
            }
        )


@dataclass
class CreateServerIPAddress:
    access: str
    family: str = ""

    def to_dict(self) -> dict[str, Any]:
        return compact({"access": self.access, "family": self.family})


@dataclass
class CreateServerRequest:
    zone: str
    title: str
    hostname: str
    storage_devices: list[CreateServerStorageDevice] = field(default_factory=list)
    ip_addresses: list[CreateServerIPAddress] = field(default_factory=list)
    plan: str = ""
    core_number: int | None = None
    memory_amount: int | None = None
    password_delivery: str = ""
    avoid_host: int | None = None
    boot_order: str = ""
    firewall: str = ""
    labels: list[Label] = field(default_factory=list)
    login_user: str = ""
    metadata: bool | None = None
    nic_model: str = ""
    timezone: str = ""
    user_data: str = ""
    video_model: str = ""

    def request_url(self) -> str:
        return "/server"

    def to_body(self) -> dict[str, Any]:
        server = compact(
            {
                "avoid_host": self.avoid_host,
                "boot_order": self.boot_order,
                "core_number": as_string(self.core_number),
                "firewall": self.firewall,
                "hostname": self.hostname,
                "login_user": {"username": self.login_user} if self.login_user else None,
                "memory_amount": as_string(self.memory_amount),
                "metadata": yes_no(self.metadata),
                "nic_model": self.nic_model,
                "password_delivery": self.password_delivery,
                "plan": self.plan,
                "timezone": self.timezone,
                "title": self.title,
                "user_data": self.user_data,
                "video_model": self.video_model,
                "zone": self.zone,
            }
        )
        if self.storage_devices:
            server["storage_devices"] = {
                "storage_device": [device.to_dict() for device in self.storage_devices]
            }
        if self.ip_addresses:
            server["ip_addresses"] = {
                "ip_address": [address.to_dict() for address in self.ip_addresses]
            }
        if self.labels:
            server["labels"] = {
                "label": [{"key": label.key, "value": label.value} for label in self.labels]
            }
        return {"server": server}


@dataclass
class ModifyServerRequest:
    uuid: str
    title: str = ""
    hostname: str = ""
    plan: str = ""
    core_number: int | None = None
    memory_amount: int | None = None
    boot_order: str = ""
    firewall: str = ""
    metadata: bool | None = None
    nic_model: str = ""
    timezone: str = ""
    video_model: str = ""
    remote_access_enabled: bool | None = None
    remote_access_type: str = ""
    remote_access_password: str = ""

    def request_url(self) -> str:
        return f"/server/{require(self.uuid, 'uuid')}"

    def to_body(self) -> dict[str, Any]:
        return {
            "server": compact(
                {
                    "boot_order": self.boot_order,
                    "core_number": as_string(self.core_number),
                    "firewall": self.firewall,
                    "hostname": self.hostname,
                    "memory_amount": as_string(self.memory_amount),
                    "metadata": yes_no(self.metadata),
                    "nic_model": self.nic_model,
                    "plan": self.plan,
                    "remote_access_enabled": yes_no(self.remote_access_enabled),
                    "remote_access_password": self.remote_access_password,
                    "remote_access_type": self.remote_access_type,
                    "timezone": self.timezone,
                    "title": self.title,
                    "video_model": self.video_model,
                }
            )
        }


@dataclass
class StartServerRequest:
    """Start a server. ``timeout`` (seconds) bounds the HTTP call itself."""

    uuid: str
    timeout: float | None = None
    avoid_host: int | None = None

    def request_url(self) -> str:
        return f"/server/{require(self.uuid, 'uuid')}/start"

    def to_body(self) -> dict[str, Any] | None:
        if self.avoid_host is None:
            return None
        return {"server": {"avoid_host": self.avoid_host}}


@dataclass
class StopServerRequest:
    uuid: str
    stop_type: str = ""
    timeout: float | None = None

    def request_url(self) -> str:
        return f"/server/{require(self.uuid, 'uuid')}/stop"

    def to_body(self) -> dict[str, Any]:
        return {
            "stop_server": compact(
                {"stop_type": self.stop_type, "timeout": as_string(self.timeout)}
            )
        }


@dataclass
class RestartServerRequest:
    uuid: str
    stop_type: str = ""
    timeout: float | None = None
    timeout_action: str = ""

    def request_url(self) -> str:
        return f"/server/{require(self.uuid, 'uuid')}/restart"

    def to_body(self) -> dict[str, Any]:
        return {
            "restart_server": compact(
                {
                    "stop_type": self.stop_type,
                    "timeout": as_string(self.timeout),
                    "timeout_action": self.timeout_action,
                }
            )
        }


@dataclass
class DeleteServerRequest:
    uuid: str

    def request_url(self) -> str:
        return f"/server/{require(self.uuid, 'uuid')}"


@dataclass
class WaitForServerStateRequest:
    """Block until a server reaches ``desired_state`` or leaves ``undesired_state``."""

    uuid: str
    desired_state: str | None = None
    undesired_state: str | None = None
    timeout: float = 300.0

"""Requests for the /storage endpoints and server storage attachment."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from upcloud_client.core.errors import InvalidRequestError
from upcloud_client.models.storage import BackupRule
from upcloud_client.request.base import as_string, compact, require


def _backup_rule(rule: BackupRule | None) -> dict[str, str] | None:
    if rule is None:
        return None
    return {"interval": rule.interval, "retention": str(rule.retention), "time": rule.time}


@dataclass
class GetStoragesRequest:
    """List storages, optionally filtered by access, type or favorite flag.

    At most one filter may be set.
    """

    access: str = ""
    type: str = ""
    favorite: bool = False

    def request_url(self) -> str:
        filters = [f for f in (self.access, self.type, "favorite" if self.favorite else "") if f]
        if len(filters) > 1:
            raise InvalidRequestError(
                "Only one storage filter may be set",
                details={"filters": ",".join(filters)},
            )
        if filters:
            return f"/storage/{filters[0]}"
        return "/storage"


@dataclass
class GetStorageDetailsRequest:
    uuid: str

    def request_url(self) -> str:
        return f"/storage/{require(self.uuid, 'uuid')}"


@dataclass
class CreateStorageRequest:
    zone: str
    size: int
    title: str
    tier: str = ""
    backup_rule: BackupRule | None = None

    def request_url(self) -> str:
        return "/storage"

    def to_body(self) -> dict[str, Any]:
        return {
            "storage": compact(
                {
                    "backup_rule": _backup_rule(self.backup_rule),
                    "size": as_string(self.size),
                    "tier": self.tier,
                    "title": self.title,
                    "zone": self.zone,
                }
            )
        }


@dataclass
class ModifyStorageRequest:
    uuid: str
    title: str = ""
    size: int | None = None
    backup_rule: BackupRule | None = None

    def request_url(self) -> str:
        return f"/storage/{require(self.uuid, 'uuid')}"

    def to_body(self) -> dict[str, Any]:
        return {
            "storage": compact(
                {
                    "backup_rule": _backup_rule(self.backup_rule),
                    "size": as_string(self.size),
                    "title": self.title,
                }
            )
        }


@dataclass
class AttachStorageRequest:
    server_uuid: str
    type: str = ""
    address: str = ""
    storage_uuid: str = ""

    def request_url(self) -> str:
        return f"/server/{require(self.server_uuid, 'server_uuid')}/storage/attach"

    def to_body(self) -> dict[str, Any]:
        return {
            "storage_device": compact(
                {"address": self.address, "storage": self.storage_uuid, "type": self.type}
            )
        }


@dataclass
class DetachStorageRequest:
    server_uuid: str
    address: str

    def request_url(self) -> str:
        return f"/server/{require(self.server_uuid, 'server_uuid')}/storage/detach"

    def to_body(self) -> dict[str, Any]:
        return {"storage_device": {"address": require(self.address, "address")}}


@dataclass
class DeleteStorageRequest:
    uuid: str

    def request_url(self) -> str:
        return f"/storage/{require(self.uuid, 'uuid')}"


@dataclass
class CloneStorageRequest:
    uuid: str
    zone: str
    title: str
    tier: str = ""

    def request_url(self) -> str:
        return f"/storage/{require(self.uuid, 'uuid')}/clone"

    def to_body(self) -> dict[str, Any]:
        return {"storage": compact({"tier": self.tier, "title": self.title, "zone": self.zone})}


@dataclass
class TemplatizeStorageRequest:
    uuid: str
    title: str

    def request_url(self) -> str:
        return f"/storage/{require(self.uuid, 'uuid')}/templatize"

    def to_body(self) -> dict[str, Any]:
        return {"storage": {"title": self.title}}


@dataclass
class LoadCDROMRequest:
    server_uuid: str
    storage_uuid: str

    def request_url(self) -> str:
        return f"/server/{require(self.server_uuid, 'server_uuid')}/cdrom/load"

    def to_body(self) -> dict[str, Any]:
        return {"storage_device": {"storage": require(self.storage_uuid, "storage_uuid")}}


@dataclass
class EjectCDROMRequest:
    server_uuid: str

    def request_url(self) -> str:
        return f"/server/{require(self.server_uuid, 'server_uuid')}/cdrom/eject"


@dataclass
class CreateBackupRequest:
    uuid: str
    title: str

    def request_url(self) -> str:
        return f"/storage/{require(self.uuid, 'uuid')}/backup"

    def to_body(self) -> dict[str, Any]:
        return {"storage": {"title": self.title}}


@dataclass
class RestoreBackupRequest:
    uuid: str

    def request_url(self) -> str:
        return f"/storage/{require(self.uuid, 'uuid')}/restore"


@dataclass
class WaitForStorageStateRequest:
    """Block until a storage reaches ``desired_state`` or leaves ``undesired_state``."""

    uuid: str
    desired_state: str | None = None
    undesired_state: str | None = None
    timeout: float = 300.0

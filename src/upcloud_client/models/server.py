from __future__ import annotations

from enum import StrEnum

from pydantic import Field

from upcloud_client.envelope import (
    Collection,
    Count,
    Number,
    Single,
    StringInt,
    YesNo,
    wrapped_list,
)
from upcloud_client.models.base import LabelList, TagList, UpCloudModel
from upcloud_client.models.ip_address import IPAddressList


class ServerState(StrEnum):
    """Lifecycle states reported for a server."""

    STARTED = "started"
    STOPPED = "stopped"
    MAINTENANCE = "maintenance"
    ERROR = "error"


class VideoModel(StrEnum):
    VGA = "vga"
    CIRRUS = "cirrus"


class NICModel(StrEnum):
    E1000 = "e1000"
    VIRTIO = "virtio"
    RTL8139 = "rtl8139"


class StopType(StrEnum):
    SOFT = "soft"
    HARD = "hard"


class RemoteAccessType(StrEnum):
    VNC = "vnc"
    SPICE = "spice"


class Server(UpCloudModel):
    """A server as listed by ``GET /server``."""

    core_number: StringInt = 0
    hostname: str = ""
    license: Number = 0.0
    memory_amount: StringInt = 0
    plan: str = ""
    progress: str = ""
    state: str = ""
    tags: TagList = Field(default_factory=list)
    title: str = ""
    uuid: str = ""
    zone: str = ""


class ServerStorageDevice(UpCloudModel):
    address: str = ""
    boot_disk: str = ""
    part_of_plan: YesNo = False
    size: Count = Field(default=0, alias="storage_size")
    title: str = Field(default="", alias="storage_title")
    type: str = ""
    uuid: str = Field(default="", alias="storage")


class Interface(UpCloudModel):
    bootable: YesNo = False
    index: Count = 0
    ip_addresses: IPAddressList = Field(default_factory=list)
    mac: str = ""
    network: str = ""
    type: str = ""


InterfaceList = wrapped_list("interface", Interface)


class Networking(UpCloudModel):
    interfaces: InterfaceList = Field(default_factory=list)


StorageDeviceList = wrapped_list("storage_device", ServerStorageDevice)


class ServerDetails(Server):
    """A server as returned by the single-server endpoints."""

    boot_order: str = ""
    firewall: str = ""
    host: Count = 0
    ip_addresses: IPAddressList = Field(default_factory=list)
    labels: LabelList = Field(default_factory=list)
    metadata: YesNo = False
    networking: Networking = Field(default_factory=Networking)
    nic_model: str = ""
    remote_access_enabled: YesNo = False
    remote_access_host: str = ""
    remote_access_password: str = ""
    remote_access_port: str = ""
    remote_access_type: str = ""
    server_group: str = ""
    simple_backup: str = ""
    storage_devices: StorageDeviceList = Field(default_factory=list)
    timezone: str = ""
    video_model: str = ""

    def storage_device(self, storage_uuid: str) -> ServerStorageDevice | None:
        """Return the attached storage device with the given UUID, if any."""
        for device in self.storage_devices:
            if device.uuid == storage_uuid:
                return device
        return None


class ServerConfiguration(UpCloudModel):
    """A valid core/memory combination from ``GET /server_size``."""

    core_number: StringInt = 0
    memory_amount: StringInt = 0


SERVERS = Collection(Server, "servers", "server")
SERVER_DETAILS = Single(ServerDetails, "server")
SERVER_CONFIGURATIONS = Collection(ServerConfiguration, "server_sizes", "server_size")

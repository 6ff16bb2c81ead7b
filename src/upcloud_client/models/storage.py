from __future__ import annotations

from enum import StrEnum
from typing import Annotated

from pydantic import Field

from upcloud_client.envelope import (
    Collection,
    Count,
    EmptyAsNone,
    Number,
    Single,
    StringInt,
    YesNo,
    wrapped_list,
)
from upcloud_client.models.base import LabelList, UpCloudModel


class StorageState(StrEnum):
    """Lifecycle states reported for a storage device."""

    ONLINE = "online"
    MAINTENANCE = "maintenance"
    CLONING = "cloning"
    BACKUPING = "backuping"
    SYNCING = "syncing"
    ERROR = "error"


class StorageType(StrEnum):
    DISK = "disk"
    CDROM = "cdrom"
    TEMPLATE = "template"
    BACKUP = "backup"


class StorageTier(StrEnum):
    HDD = "hdd"
    MAXIOPS = "maxiops"


class StorageAccess(StrEnum):
    PUBLIC = "public"
    PRIVATE = "private"


class BackupRuleInterval(StrEnum):
    DAILY = "daily"
    MONDAYS = "mon"
    TUESDAYS = "tue"
    WEDNESDAYS = "wed"
    THURSDAYS = "thu"
    FRIDAYS = "fri"
    SATURDAYS = "sat"
    SUNDAYS = "sun"


class BackupRule(UpCloudModel):
    interval: str = ""
    retention: StringInt = 0
    time: str = ""


class Storage(UpCloudModel):
    """A storage device as listed by ``GET /storage``."""

    access: str = ""
    labels: LabelList = Field(default_factory=list)
    license: Number = 0.0
    part_of_plan: YesNo = False
    size: Count = 0
    state: str = ""
    tier: str = ""
    title: str = ""
    type: str = ""
    uuid: str = ""
    zone: str = ""


BackupUUIDList = wrapped_list("backup", str)
ServerUUIDList = wrapped_list("server", str)


class StorageDetails(Storage):
    """A storage device as returned by the single-storage endpoints."""

    backup_rule: Annotated[BackupRule | None, EmptyAsNone] = None
    backups: BackupUUIDList = Field(default_factory=list)
    created: str = ""
    origin: str = ""
    servers: ServerUUIDList = Field(default_factory=list)


STORAGES = Collection(Storage, "storages", "storage")
STORAGE_DETAILS = Single(StorageDetails, "storage")

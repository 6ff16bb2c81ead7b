"""Typed UpCloud resources and the response shapes they are decoded from."""

from upcloud_client.models.account import ACCOUNT, Account
from upcloud_client.models.base import Label, UpCloudModel
from upcloud_client.models.catalog import PLANS, ZONES, Plan, Zone
from upcloud_client.models.error import ERROR, ErrorBody
from upcloud_client.models.firewall import (
    FIREWALL_RULE_DETAILS,
    FIREWALL_RULES,
    FirewallRule,
    FirewallRuleAction,
    FirewallRuleDirection,
    FirewallRuleProtocol,
)
from upcloud_client.models.ip_address import (
    IP_ADDRESS_DETAILS,
    IP_ADDRESSES,
    IPAddress,
    IPAddressAccess,
    IPAddressFamily,
)
from upcloud_client.models.server import (
    SERVER_CONFIGURATIONS,
    SERVER_DETAILS,
    SERVERS,
    Interface,
    Networking,
    NICModel,
    RemoteAccessType,
    Server,
    ServerConfiguration,
    ServerDetails,
    ServerState,
    ServerStorageDevice,
    StopType,
    VideoModel,
)
from upcloud_client.models.storage import (
    STORAGE_DETAILS,
    STORAGES,
    BackupRule,
    BackupRuleInterval,
    Storage,
    StorageAccess,
    StorageDetails,
    StorageState,
    StorageTier,
    StorageType,
)

__all__ = [
    "UpCloudModel",
    "Label",
    # Account
    "Account",
    "ACCOUNT",
    # Catalog
    "Zone",
    "Plan",
    "ZONES",
    "PLANS",
    # Errors
    "ErrorBody",
    "ERROR",
    # Firewall
    "FirewallRule",
    "FirewallRuleAction",
    "FirewallRuleDirection",
    "FirewallRuleProtocol",
    "FIREWALL_RULES",
    "FIREWALL_RULE_DETAILS",
    # IP addresses
    "IPAddress",
    "IPAddressAccess",
    "IPAddressFamily",
    "IP_ADDRESSES",
    "IP_ADDRESS_DETAILS",
    # Servers
    "Server",
    "ServerDetails",
    "ServerState",
    "ServerStorageDevice",
    "ServerConfiguration",
    "Interface",
    "Networking",
    "NICModel",
    "RemoteAccessType",
    "StopType",
    "VideoModel",
    "SERVERS",
    "SERVER_DETAILS",
    "SERVER_CONFIGURATIONS",
    # Storage
    "Storage",
    "StorageDetails",
    "StorageState",
    "StorageType",
    "StorageTier",
    "StorageAccess",
    "BackupRule",
    "BackupRuleInterval",
    "STORAGES",
    "STORAGE_DETAILS",
]

"""Request objects: each knows its URL and, for mutations, its wrapped JSON body."""

from upcloud_client.request.firewall import (
    CreateFirewallRuleRequest,
    DeleteFirewallRuleRequest,
    GetFirewallRuleDetailsRequest,
    GetFirewallRulesRequest,
)
from upcloud_client.request.ip_address import (
    AssignIPAddressRequest,
    GetIPAddressDetailsRequest,
    ModifyIPAddressRequest,
    ReleaseIPAddressRequest,
)
from upcloud_client.request.server import (
    CreateServerIPAddress,
    CreateServerRequest,
    CreateServerStorageDevice,
    CreateServerStorageDeviceAction,
    DeleteServerRequest,
    GetServerDetailsRequest,
    ModifyServerRequest,
    PasswordDelivery,
    RestartServerRequest,
    StartServerRequest,
    StopServerRequest,
    WaitForServerStateRequest,
)
from upcloud_client.request.storage import (
    AttachStorageRequest,
    CloneStorageRequest,
    CreateBackupRequest,
    CreateStorageRequest,
    DeleteStorageRequest,
    DetachStorageRequest,
    EjectCDROMRequest,
    GetStorageDetailsRequest,
    GetStoragesRequest,
    LoadCDROMRequest,
    ModifyStorageRequest,
    RestoreBackupRequest,
    TemplatizeStorageRequest,
    WaitForStorageStateRequest,
)

__all__ = [
    # Servers
    "GetServerDetailsRequest",
    "CreateServerRequest",
    "CreateServerStorageDevice",
    "CreateServerStorageDeviceAction",
    "CreateServerIPAddress",
    "PasswordDelivery",
    "ModifyServerRequest",
    "StartServerRequest",
    "StopServerRequest",
    "RestartServerRequest",
    "DeleteServerRequest",
    "WaitForServerStateRequest",
    # Storage
    "GetStoragesRequest",
    "GetStorageDetailsRequest",
    "CreateStorageRequest",
    "ModifyStorageRequest",
    "AttachStorageRequest",
    "DetachStorageRequest",
    "DeleteStorageRequest",
    "CloneStorageRequest",
    "TemplatizeStorageRequest",
    "LoadCDROMRequest",
    "EjectCDROMRequest",
    "CreateBackupRequest",
    "RestoreBackupRequest",
    "WaitForStorageStateRequest",
    # IP addresses
    "GetIPAddressDetailsRequest",
    "AssignIPAddressRequest",
    "ModifyIPAddressRequest",
    "ReleaseIPAddressRequest",
    # Firewall
    "GetFirewallRulesRequest",
    "GetFirewallRuleDetailsRequest",
    "CreateFirewallRuleRequest",
    "DeleteFirewallRuleRequest",
]

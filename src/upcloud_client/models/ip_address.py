from __future__ import annotations

from enum import StrEnum

from upcloud_client.envelope import Collection, Single, YesNo, wrapped_list
from upcloud_client.models.base import UpCloudModel


class IPAddressAccess(StrEnum):
    PRIVATE = "private"
    PUBLIC = "public"
    UTILITY = "utility"


class IPAddressFamily(StrEnum):
    IPV4 = "IPv4"
    IPV6 = "IPv6"


class IPAddress(UpCloudModel):
    access: str = ""
    address: str = ""
    family: str = ""
    floating: YesNo = False
    mac: str = ""
    part_of_plan: YesNo = False
    ptr_record: str = ""
    server: str = ""
    zone: str = ""


IPAddressList = wrapped_list("ip_address", IPAddress)

IP_ADDRESSES = Collection(IPAddress, "ip_addresses", "ip_address")
IP_ADDRESS_DETAILS = Single(IPAddress, "ip_address")

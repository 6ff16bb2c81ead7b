from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from upcloud_client.request.base import compact, require


@dataclass
class GetIPAddressDetailsRequest:
    address: str

    def request_url(self) -> str:
        return f"/ip_address/{require(self.address, 'address')}"


@dataclass
class AssignIPAddressRequest:
    server_uuid: str
    access: str = ""
    family: str = ""

    def request_url(self) -> str:
        return "/ip_address"

    def to_body(self) -> dict[str, Any]:
        return {
            "ip_address": compact(
                {
                    "access": self.access,
                    "family": self.family,
                    "server": require(self.server_uuid, "server_uuid"),
                }
            )
        }


@dataclass
class ModifyIPAddressRequest:
    address: str
    ptr_record: str

    def request_url(self) -> str:
        return f"/ip_address/{require(self.address, 'address')}"

    def to_body(self) -> dict[str, Any]:
        return {"ip_address": {"ptr_record": self.ptr_record}}


@dataclass
class ReleaseIPAddressRequest:
    address: str

    def request_url(self) -> str:
        return f"/ip_address/{require(self.address, 'address')}"

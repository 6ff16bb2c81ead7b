from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from upcloud_client.core.errors import InvalidRequestError
from upcloud_client.models.firewall import FirewallRule
from upcloud_client.request.base import compact, require


def _position(position: int) -> int:
    if position < 1:
        raise InvalidRequestError(
            "Firewall rule position starts at 1", details={"position": position}
        )
    return position


@dataclass
class GetFirewallRulesRequest:
    server_uuid: str

    def request_url(self) -> str:
        return f"/server/{require(self.server_uuid, 'server_uuid')}/firewall_rule"


@dataclass
class GetFirewallRuleDetailsRequest:
    server_uuid: str
    position: int

    def request_url(self) -> str:
        server = require(self.server_uuid, "server_uuid")
        return f"/server/{server}/firewall_rule/{_position(self.position)}"


@dataclass
class CreateFirewallRuleRequest:
    server_uuid: str
    firewall_rule: FirewallRule

    def request_url(self) -> str:
        return f"/server/{require(self.server_uuid, 'server_uuid')}/firewall_rule"

    def to_body(self) -> dict[str, Any]:
        rule = self.firewall_rule.model_dump(mode="json", by_alias=True)
        if not self.firewall_rule.position:
            # Position 0 means "append"; the API picks the next free slot.
            rule.pop("position")
        return {"firewall_rule": compact(rule)}


@dataclass
class DeleteFirewallRuleRequest:
    server_uuid: str
    position: int

    def request_url(self) -> str:
        server = require(self.server_uuid, "server_uuid")
        return f"/server/{server}/firewall_rule/{_position(self.position)}"

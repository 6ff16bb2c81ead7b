from __future__ import annotations

from enum import StrEnum

from upcloud_client.envelope import Collection, Single, StringInt
from upcloud_client.models.base import UpCloudModel


class FirewallRuleDirection(StrEnum):
    IN = "in"
    OUT = "out"


class FirewallRuleAction(StrEnum):
    ACCEPT = "accept"
    REJECT = "reject"
    DROP = "drop"


class FirewallRuleProtocol(StrEnum):
    TCP = "tcp"
    UDP = "udp"
    ICMP = "icmp"


class FirewallRule(UpCloudModel):
    """A firewall rule; identified by the owning server and its position."""

    action: str = ""
    comment: str = ""
    destination_address_end: str = ""
    destination_address_start: str = ""
    destination_port_end: str = ""
    destination_port_start: str = ""
    direction: str = ""
    family: str = ""
    icmp_type: str = ""
    position: StringInt = 0
    protocol: str = ""
    source_address_end: str = ""
    source_address_start: str = ""
    source_port_end: str = ""
    source_port_start: str = ""


FIREWALL_RULES = Collection(FirewallRule, "firewall_rules", "firewall_rule")
FIREWALL_RULE_DETAILS = Single(FirewallRule, "firewall_rule")

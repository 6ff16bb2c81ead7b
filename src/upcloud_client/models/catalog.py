"""Read-only catalog resources: zones, plans and timezones."""

from __future__ import annotations

from upcloud_client.envelope import Collection, Count, YesNo
from upcloud_client.models.base import UpCloudModel


class Zone(UpCloudModel):
    id: str = ""
    description: str = ""
    public: YesNo = False


class Plan(UpCloudModel):
    core_number: Count = 0
    memory_amount: Count = 0
    name: str = ""
    public_traffic_out: Count = 0
    storage_size: Count = 0
    storage_tier: str = ""


ZONES = Collection(Zone, "zones", "zone")
PLANS = Collection(Plan, "plans", "plan")

from __future__ import annotations

from upcloud_client.envelope import Number, Single
from upcloud_client.models.base import UpCloudModel


class Account(UpCloudModel):
    credits: Number = 0.0
    username: str = ""


ACCOUNT = Single(Account, "account")

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from upcloud_client.envelope import wrapped_list


class UpCloudModel(BaseModel):
    """Base for provider resources; unknown provider fields are ignored."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class Label(UpCloudModel):
    key: str = ""
    value: str = ""


TagList = wrapped_list("tag", str)
LabelList = wrapped_list("label", Label)

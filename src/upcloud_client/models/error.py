from __future__ import annotations

from upcloud_client.envelope import Single
from upcloud_client.models.base import UpCloudModel


class ErrorBody(UpCloudModel):
    """The ``{"error": {...}}`` body the API sends with error statuses."""

    error_code: str = ""
    error_message: str = ""


ERROR = Single(ErrorBody, "error")

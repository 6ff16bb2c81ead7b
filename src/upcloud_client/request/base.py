from __future__ import annotations

from typing import Any

from upcloud_client.core.errors import InvalidRequestError


def compact(fields: dict[str, Any]) -> dict[str, Any]:
    """Drop unset fields so partial updates never overwrite provider values."""
    return {k: v for k, v in fields.items() if v is not None and v != "" and v != [] and v != {}}


def yes_no(value: bool | None) -> str | None:
    if value is None:
        return None
    return "yes" if value else "no"


def as_string(value: int | float | None) -> str | None:
    """Render numbers the API expects as JSON strings."""
    if value is None:
        return None
    return str(int(value))


def require(value: str, name: str) -> str:
    if not value:
        raise InvalidRequestError(f"{name} is required", details={"field": name})
    return value

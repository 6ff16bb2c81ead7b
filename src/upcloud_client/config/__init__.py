"""Client configuration: environment variables (UPCLOUD_*) and .env files."""

from upcloud_client.config.settings import Settings, load_settings

__all__ = [
    "Settings",
    "load_settings",
]

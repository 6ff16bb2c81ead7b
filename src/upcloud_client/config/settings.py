"""
Client settings using Pydantic.

Provides environment-based configuration loading with UPCLOUD_ prefix.
"""

from __future__ import annotations

from typing import Any

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from upcloud_client.core.errors import ConfigurationError


class Settings(BaseSettings):
    """Client settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="UPCLOUD_",
        extra="ignore",
    )

    # Credentials
    username: str | None = None
    password: SecretStr | None = None

    # API
    api_url: str = "https://api.upcloud.com/1.2"

    # HTTP client settings
    http_timeout: float = 30.0
    http_max_retries: int = 3
    http_retry_backoff_factor: float = 2.0

    # State polling
    poll_interval: float = 5.0
    poll_retry_transport_errors: bool = False

    # Logging
    log_level: str = "WARNING"
    log_json: bool = False

    def require_credentials(self) -> tuple[str, str]:
        """Return (username, password) or raise ConfigurationError."""
        password = self.password.get_secret_value() if self.password else ""
        if not self.username or not password:
            raise ConfigurationError(
                "UpCloud credentials are not configured; "
                "set UPCLOUD_USERNAME and UPCLOUD_PASSWORD",
            )
        return self.username, password


def load_settings(**overrides: Any) -> Settings:
    """Build a fresh Settings from the environment, .env file and overrides."""
    return Settings(**overrides)

"""Core modules for the UpCloud client - centralized definitions and utilities."""

from upcloud_client.core.errors import (
    APIError,
    ConfigurationError,
    DecodeError,
    ExitCode,
    InvalidRequestError,
    StateTimeoutError,
    TransportError,
    UpCloudError,
    format_error_message,
    main_with_error_handling,
)

__all__ = [
    "ExitCode",
    "UpCloudError",
    "ConfigurationError",
    "InvalidRequestError",
    "DecodeError",
    "TransportError",
    "APIError",
    "StateTimeoutError",
    "main_with_error_handling",
    "format_error_message",
]

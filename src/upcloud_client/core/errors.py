"""
Typed error taxonomy for the UpCloud client.

Every failure raised by the library derives from UpCloudError and is
classified by class, never by type name. Each class carries the exit code
used by the CLI wrapper.

Exit Codes:
- 0: Success
- 2: Timed out waiting for a state transition
- 10: Configuration error
- 11: Transport or provider API error
- 12: Payload could not be decoded
- 13: Invalid request (caller contract violation)
- 127: Unknown/internal error
"""

from __future__ import annotations

import functools
import sys
import traceback
from enum import IntEnum
from typing import Any, Callable, TypeVar

import structlog

logger = structlog.get_logger()


class ExitCode(IntEnum):
    """Standardized exit codes for CLI commands."""

    SUCCESS = 0
    TIMEOUT = 2
    CONFIG_ERROR = 10
    TRANSPORT_ERROR = 11
    DECODE_ERROR = 12
    INVALID_REQUEST = 13
    UNKNOWN_ERROR = 127


class UpCloudError(Exception):
    """Base exception for UpCloud client errors with exit code support."""

    exit_code: ExitCode = ExitCode.UNKNOWN_ERROR
    show_traceback: bool = False

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(UpCloudError):
    """Raised for missing credentials or invalid settings."""

    exit_code = ExitCode.CONFIG_ERROR


class InvalidRequestError(UpCloudError):
    """Raised when a caller breaks a request contract before anything is sent."""

    exit_code = ExitCode.INVALID_REQUEST


class DecodeError(UpCloudError, ValueError):
    """
    Raised when a response payload is malformed or type-incompatible.

    The underlying parse failure (json.JSONDecodeError or pydantic
    ValidationError) is kept as ``cause`` and chained as ``__cause__``.
    Being a ValueError lets pydantic report it as a field error when it is
    raised from inside a field validator.
    """

    exit_code = ExitCode.DECODE_ERROR

    def __init__(
        self,
        message: str,
        *,
        cause: BaseException | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, details)
        self.cause = cause


class TransportError(UpCloudError):
    """Raised when the HTTP exchange with the provider fails."""

    exit_code = ExitCode.TRANSPORT_ERROR

    def __init__(
        self,
        message: str,
        *,
        method: str | None = None,
        path: str | None = None,
        retryable: bool = False,
        cause: BaseException | None = None,
    ):
        details: dict[str, Any] = {}
        if method:
            details["method"] = method
        if path:
            details["path"] = path
        super().__init__(message, details)
        self.method = method
        self.path = path
        self.retryable = retryable
        self.cause = cause


class APIError(TransportError):
    """Raised when the provider answers with an error status."""

    def __init__(
        self,
        status_code: int,
        error_code: str,
        error_message: str,
        *,
        method: str | None = None,
        path: str | None = None,
        retryable: bool = False,
    ):
        message = f"HTTP {status_code}"
        if error_code:
            message = f"{message} {error_code}"
        if error_message:
            message = f"{message}: {error_message}"
        super().__init__(message, method=method, path=path, retryable=retryable)
        self.status_code = status_code
        self.error_code = error_code
        self.error_message = error_message
        self.details.update(status=status_code, error_code=error_code)


class StateTimeoutError(UpCloudError):
    """Raised when a resource never reached (or never left) a lifecycle state in time."""

    exit_code = ExitCode.TIMEOUT

    def __init__(
        self,
        resource_id: str,
        expected_state: str,
        *,
        mode: str,
        last_state: str | None,
        timeout: float,
        resource_kind: str = "resource",
    ):
        if mode == "leave":
            message = (
                f"{resource_kind} {resource_id} did not leave state '{expected_state}' "
                f"within {timeout:g}s"
            )
        else:
            message = (
                f"{resource_kind} {resource_id} did not reach state '{expected_state}' "
                f"within {timeout:g}s (last state: {last_state!r})"
            )
        super().__init__(
            message,
            details={
                "resource_id": resource_id,
                "expected_state": expected_state,
                "mode": mode,
                "last_state": last_state,
            },
        )
        self.resource_id = resource_id
        self.expected_state = expected_state
        self.mode = mode
        self.last_state = last_state
        self.timeout = timeout


# Type variable for decorated functions
F = TypeVar("F", bound=Callable[..., int])


def main_with_error_handling(
    *,
    show_traceback: bool = False,
    log_errors: bool = True,
    on_error: Callable[[str], None] | None = None,
) -> Callable[[F], F]:
    """
    Decorator for CLI command functions that provides unified error handling.

    Catches exceptions and converts them to appropriate exit codes with
    consistent error reporting.

    UpCloudError messages are passed through format_error_message to
    ``on_error`` (e.g. a stderr printer) so users see them without logs.

    Exit codes:
        - UpCloudError subclasses: Uses the error's exit_code
        - KeyboardInterrupt: Returns 130 (standard for SIGINT)
        - Other exceptions: Returns 127 (unknown error)
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> int:
            try:
                return func(*args, **kwargs)
            except UpCloudError as e:
                if log_errors:
                    logger.error(
                        "command_error",
                        error_type=type(e).__name__,
                        message=e.message,
                        exit_code=e.exit_code,
                        **e.details,
                    )
                if on_error is not None:
                    on_error(format_error_message(e))
                if e.show_traceback or show_traceback:
                    traceback.print_exc(file=sys.stderr)
                return e.exit_code
            except KeyboardInterrupt:
                if log_errors:
                    logger.info("command_interrupted")
                return 130  # Standard exit code for SIGINT
            except Exception as e:
                if log_errors:
                    logger.error(
                        "unexpected_error",
                        error_type=type(e).__name__,
                        message=str(e),
                        exit_code=ExitCode.UNKNOWN_ERROR,
                    )
                if show_traceback:
                    traceback.print_exc(file=sys.stderr)
                return ExitCode.UNKNOWN_ERROR

        return wrapper  # type: ignore[return-value]

    return decorator


def format_error_message(error: UpCloudError) -> str:
    """Format an error message for display to users."""
    msg = error.message
    if error.details:
        detail_str = ", ".join(f"{k}={v}" for k, v in error.details.items() if v is not None)
        if detail_str:
            msg = f"{msg} ({detail_str})"
    return msg

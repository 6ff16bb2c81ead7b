"""
Bounded-time polling for provider-side state transitions.

Servers and storages change state asynchronously after a mutating call;
StatePoller re-reads the resource until its ``state`` matches what the caller
is waiting for, or the timeout passes.
"""

from __future__ import annotations

import time
from typing import Callable, Generic, Protocol, TypeVar

import structlog

from upcloud_client.core.errors import InvalidRequestError, StateTimeoutError, TransportError

logger = structlog.get_logger()

DEFAULT_POLL_INTERVAL = 5.0


class Stateful(Protocol):
    state: str


T = TypeVar("T", bound=Stateful)


class StatePoller(Generic[T]):
    """
    Wait for a resource to reach a desired state or leave an undesired one.

    Args:
        fetch: Reads the current resource for an identifier (read-only)
        interval: Seconds to sleep between polls
        sleep: Wait primitive, injectable for tests
        clock: Monotonic time source, injectable for tests
        retry_transport_errors: Treat a failed read as transient and keep
            polling until the deadline instead of aborting
        resource_kind: Label used in logs and error messages
    """

    def __init__(
        self,
        fetch: Callable[[str], T],
        *,
        interval: float = DEFAULT_POLL_INTERVAL,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
        retry_transport_errors: bool = False,
        resource_kind: str = "resource",
    ) -> None:
        if interval <= 0:
            raise ValueError("Poll interval must be positive")
        self._fetch = fetch
        self._interval = interval
        self._sleep = sleep
        self._clock = clock
        self._retry_transport_errors = retry_transport_errors
        self._resource_kind = resource_kind

    def wait(
        self,
        resource_id: str,
        *,
        desired_state: str | None = None,
        undesired_state: str | None = None,
        timeout: float,
    ) -> T:
        """
        Poll until the state condition holds and return the latest resource.

        Exactly one of ``desired_state`` / ``undesired_state`` must be given.
        The deadline may be overshot by at most one request's latency.

        Raises:
            InvalidRequestError: Neither or both states were given
            StateTimeoutError: The condition did not hold before the deadline
            TransportError: A read failed and transport errors are not retried
        """
        if (desired_state is None) == (undesired_state is None):
            raise InvalidRequestError(
                "Exactly one of desired_state or undesired_state must be set",
                details={"resource_id": resource_id},
            )
        if timeout < 0:
            raise InvalidRequestError("Timeout must not be negative", details={"timeout": timeout})

        if desired_state is not None:
            expected, mode = desired_state, "reach"
        else:
            expected, mode = undesired_state, "leave"

        log = logger.bind(
            resource_kind=self._resource_kind,
            resource_id=resource_id,
            mode=mode,
            state=expected,
        )
        deadline = self._clock() + timeout
        last_state: str | None = None
        last_error: TransportError | None = None
        attempts = 0

        while True:
            attempts += 1
            try:
                current = self._fetch(resource_id)
            except TransportError as exc:
                if not self._retry_transport_errors:
                    raise
                last_error = exc
                log.warning("poll_transport_error", attempt=attempts, error=exc.message)
            else:
                last_error = None
                last_state = current.state
                log.debug("poll_attempt", attempt=attempts, current_state=last_state)
                if (mode == "reach" and last_state == expected) or (
                    mode == "leave" and last_state != expected
                ):
                    log.info("poll_succeeded", attempts=attempts, current_state=last_state)
                    return current

            remaining = deadline - self._clock()
            if remaining <= 0:
                log.warning("poll_timeout", attempts=attempts, last_state=last_state)
                error = StateTimeoutError(
                    resource_id,
                    expected,
                    mode=mode,
                    last_state=last_state,
                    timeout=timeout,
                    resource_kind=self._resource_kind,
                )
                if last_error is not None:
                    raise error from last_error
                raise error

            self._sleep(min(self._interval, remaining))

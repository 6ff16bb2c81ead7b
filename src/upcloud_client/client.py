from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx
import structlog
from tenacity import Retrying, retry_if_exception, stop_after_attempt, wait_exponential

from upcloud_client.core.errors import APIError, DecodeError, TransportError
from upcloud_client.envelope import normalize
from upcloud_client.models.error import ERROR

if TYPE_CHECKING:
    from upcloud_client.config.settings import Settings

logger = structlog.get_logger()

DEFAULT_API_URL = "https://api.upcloud.com/1.2"
DEFAULT_USER_AGENT = "upcloud-client/0.1.0"

IDEMPOTENT_METHODS = frozenset({"GET", "HEAD"})


def is_retryable_status(status_code: int) -> bool:
    """Determine if HTTP status code is retryable."""
    return status_code in (408, 429, 500, 502, 503, 504)


def _is_retryable(exc: BaseException) -> bool:
    return isinstance(exc, TransportError) and exc.retryable


class Client:
    """
    Authenticated HTTP transport for the UpCloud API.

    Returns raw response bytes; decoding is left to the caller. Idempotent
    requests are retried on retryable statuses and network errors, mutating
    requests are sent exactly once.
    """

    def __init__(
        self,
        username: str,
        password: str,
        *,
        base_url: str = DEFAULT_API_URL,
        timeout: float = 30.0,
        max_retries: int = 3,
        backoff_factor: float = 2.0,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._username = username
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._max_retries = max_retries
        self._user_agent = user_agent
        self._http = httpx.Client(
            auth=(username, password),
            timeout=timeout,
            transport=transport,
            headers={
                "Accept": "application/json",
                "User-Agent": user_agent,
            },
        )
        self._retrying = Retrying(
            retry=retry_if_exception(_is_retryable),
            stop=stop_after_attempt(max(1, max_retries)),
            wait=wait_exponential(multiplier=backoff_factor, min=0, max=30),
            reraise=True,
        )

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> Client:
        username, password = settings.require_credentials()
        return cls(
            username,
            password,
            base_url=settings.api_url,
            timeout=settings.http_timeout,
            max_retries=settings.http_max_retries,
            backoff_factor=settings.http_retry_backoff_factor,
            **kwargs,
        )

    @property
    def username(self) -> str:
        return self._username

    @property
    def base_url(self) -> str:
        return self._base_url

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def send(
        self,
        method: str,
        path: str,
        body: dict[str, Any] | None = None,
        *,
        timeout: float | None = None,
    ) -> bytes:
        """Perform a request and return the raw response body."""
        method = method.upper()
        if method in IDEMPOTENT_METHODS:
            return self._retrying(self._send_once, method, path, body, timeout)
        return self._send_once(method, path, body, timeout)

    def get(self, path: str, *, timeout: float | None = None) -> bytes:
        return self.send("GET", path, timeout=timeout)

    def post(
        self, path: str, body: dict[str, Any] | None = None, *, timeout: float | None = None
    ) -> bytes:
        return self.send("POST", path, body, timeout=timeout)

    def put(
        self, path: str, body: dict[str, Any] | None = None, *, timeout: float | None = None
    ) -> bytes:
        return self.send("PUT", path, body, timeout=timeout)

    def delete(self, path: str, *, timeout: float | None = None) -> bytes:
        return self.send("DELETE", path, timeout=timeout)

    def _send_once(
        self,
        method: str,
        path: str,
        body: dict[str, Any] | None,
        timeout: float | None,
    ) -> bytes:
        url = f"{self._base_url}{path}"
        logger.debug("http_request", method=method, path=path)

        try:
            response = self._http.request(
                method,
                url,
                json=body,
                timeout=timeout if timeout is not None else self._timeout,
            )
        except (httpx.TimeoutException, httpx.ConnectError, httpx.ReadError) as exc:
            logger.warning("http_network_error", method=method, path=path, error=str(exc))
            raise TransportError(
                f"Network error: {exc}", method=method, path=path, retryable=True, cause=exc
            ) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.error("http_request_failed", method=method, path=path, error=str(exc))
            raise TransportError(
                f"Request failed: {exc}", method=method, path=path, cause=exc
            ) from exc

        if response.is_error:
            raise self._api_error(response, method, path)

        return response.content

    def _api_error(self, response: httpx.Response, method: str, path: str) -> APIError:
        error_code = ""
        error_message = ""
        if response.content:
            try:
                error = normalize(response.content, ERROR)
                error_code = error.error_code
                error_message = error.error_message
            except DecodeError:
                error_message = response.text[:200]

        retryable = is_retryable_status(response.status_code)
        log = logger.warning if retryable else logger.error
        log(
            "http_retryable_error" if retryable else "http_permanent_error",
            status=response.status_code,
            method=method,
            path=path,
            error_code=error_code,
        )
        return APIError(
            response.status_code,
            error_code,
            error_message,
            method=method,
            path=path,
            retryable=retryable,
        )

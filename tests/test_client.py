"""
Tests for the HTTP transport.
"""

import base64
import json

import httpx
import pytest
import respx
from httpx import Response
from upcloud_client.client import DEFAULT_USER_AGENT, Client, is_retryable_status
from upcloud_client.config import Settings
from upcloud_client.core.errors import APIError, ConfigurationError, TransportError

API = "https://api.upcloud.com/1.2"


def test_client_sends_basic_auth_and_headers(client):
    with respx.mock:
        route = respx.get(f"{API}/account").mock(
            return_value=Response(200, json={"account": {"username": "test-user"}})
        )

        body = client.get("/account")

        request = route.calls.last.request
        expected = base64.b64encode(b"test-user:test-password").decode()
        assert request.headers["Authorization"] == f"Basic {expected}"
        assert request.headers["Accept"] == "application/json"
        assert request.headers["User-Agent"] == DEFAULT_USER_AGENT
        assert b"test-user" in body


def test_client_posts_json_body(client):
    with respx.mock:
        route = respx.post(f"{API}/server/u-1/stop").mock(return_value=Response(200, json={}))

        client.post("/server/u-1/stop", {"stop_server": {"stop_type": "soft"}})

        request = route.calls.last.request
        assert request.headers["Content-Type"] == "application/json"
        assert json.loads(request.content) == {"stop_server": {"stop_type": "soft"}}


def test_client_empty_response(client):
    with respx.mock:
        respx.delete(f"{API}/server/u-1").mock(return_value=Response(204))

        assert client.delete("/server/u-1") == b""


def test_client_strips_trailing_slash():
    client = Client("u", "p", base_url="https://api.example.com/1.2/")
    assert client.base_url == "https://api.example.com/1.2"
    client.close()


def test_api_error_is_decoded(client):
    with respx.mock:
        respx.post(f"{API}/server/invalid/start").mock(
            return_value=Response(
                404,
                json={
                    "error": {
                        "error_code": "SERVER_NOT_FOUND",
                        "error_message": "The server invalid does not exist.",
                    }
                },
            )
        )

        with pytest.raises(APIError) as exc_info:
            client.post("/server/invalid/start")

    error = exc_info.value
    assert error.status_code == 404
    assert error.error_code == "SERVER_NOT_FOUND"
    assert error.error_message == "The server invalid does not exist."
    assert error.retryable is False
    assert isinstance(error, TransportError)


def test_api_error_with_unparseable_body(client):
    with respx.mock:
        respx.get(f"{API}/account").mock(return_value=Response(401, text="Unauthorized"))

        with pytest.raises(APIError) as exc_info:
            client.get("/account")

    assert exc_info.value.status_code == 401
    assert exc_info.value.error_code == ""
    assert exc_info.value.error_message == "Unauthorized"


def test_get_retried_on_503(client):
    with respx.mock:
        route = respx.get(f"{API}/server")
        route.side_effect = [
            Response(503),
            Response(200, json={"servers": {"server": []}}),
        ]

        client.get("/server")

        assert route.call_count == 2


def test_get_gives_up_after_max_retries():
    client = Client("u", "p", max_retries=2, backoff_factor=0)

    with respx.mock:
        route = respx.get(f"{API}/server").mock(return_value=Response(502))

        with pytest.raises(APIError) as exc_info:
            client.get("/server")

        assert route.call_count == 2
    assert exc_info.value.retryable is True
    client.close()


def test_post_is_not_retried(client):
    with respx.mock:
        route = respx.post(f"{API}/server").mock(return_value=Response(503))

        with pytest.raises(APIError):
            client.post("/server", {"server": {}})

        assert route.call_count == 1


def test_permanent_error_not_retried(client):
    with respx.mock:
        route = respx.get(f"{API}/server/u-1").mock(return_value=Response(404))

        with pytest.raises(APIError):
            client.get("/server/u-1")

        assert route.call_count == 1


def test_network_error_is_transport_error(client):
    with respx.mock:
        route = respx.get(f"{API}/account").mock(side_effect=httpx.ConnectError("refused"))

        with pytest.raises(TransportError) as exc_info:
            client.get("/account")

        assert route.call_count == 3
    assert not isinstance(exc_info.value, APIError)
    assert isinstance(exc_info.value.cause, httpx.ConnectError)


def test_misconfigured_base_url_is_transport_error():
    client = Client("foo", "bar", base_url="???¤#Whttp://example.com", max_retries=1)

    with pytest.raises(TransportError) as exc_info:
        client.get("/account")

    assert not isinstance(exc_info.value, APIError)
    client.close()


def test_per_request_timeout_overrides_default(client):
    with respx.mock:
        route = respx.post(f"{API}/server/u-1/start").mock(return_value=Response(200, json={}))

        client.post("/server/u-1/start", timeout=300)

        timeout = route.calls.last.request.extensions["timeout"]
        assert timeout["read"] == 300


def test_from_settings_requires_credentials():
    settings = Settings(_env_file=None, username=None, password=None)

    with pytest.raises(ConfigurationError):
        Client.from_settings(settings)


def test_from_settings():
    settings = Settings(
        _env_file=None,
        username="alice",
        password="secret",
        api_url="https://api.example.com/1.2",
    )

    client = Client.from_settings(settings)

    assert client.username == "alice"
    assert client.base_url == "https://api.example.com/1.2"
    client.close()


@pytest.mark.parametrize("status", [408, 429, 500, 502, 503, 504])
def test_retryable_statuses(status):
    assert is_retryable_status(status)


@pytest.mark.parametrize("status", [400, 401, 403, 404, 409])
def test_permanent_statuses(status):
    assert not is_retryable_status(status)

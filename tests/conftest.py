"""Root test configuration."""

import logging
from pathlib import Path

import pytest
import structlog
from upcloud_client.client import Client
from upcloud_client.service import Service

FIXTURES = Path(__file__).parent / "fixtures"


def pytest_configure(config):
    """Configure structlog for tests to suppress debug/info output."""
    logging.basicConfig(level=logging.WARNING, force=True)
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


class FakeClock:
    """Deterministic clock whose sleep advances time instead of blocking."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


def load_fixture(name: str) -> bytes:
    return (FIXTURES / name).read_bytes()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def client():
    c = Client("test-user", "test-password", backoff_factor=0)
    yield c
    c.close()


@pytest.fixture
def service(client, clock):
    return Service(client, poll_interval=5.0, sleep=clock.sleep, clock=clock)


@pytest.fixture
def fixture_bytes():
    """Return a loader for raw API payloads stored under tests/fixtures."""
    return load_fixture

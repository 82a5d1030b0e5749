"""Shared test configuration and fixtures for all tests."""

import threading
from typing import Callable, List, Optional

import httpx
import pytest

from src.shared.config import Config
from src.shared.httpx_util import HTTPXUtil
from tests.test_const import TEST_BASE_URL, TEST_POOL_SIZE, TEST_REQUESTS_PER_CLIENT, HTTP_SUCCESS, TILE_BODY


class FakeTileServer:
    """Thread-safe request handler for httpx.MockTransport.

    Each received request gets a 1-based sequence number. The behavior callable
    maps (sequence, request) to a response, or raises an httpx transport error.
    """

    def __init__(self, behavior: Optional[Callable[[int, httpx.Request], httpx.Response]] = None):
        self.behavior = behavior or (lambda sequence, request: httpx.Response(HTTP_SUCCESS, content=TILE_BODY))
        self.requests: List[httpx.Request] = []
        self._lock = threading.Lock()

    @property
    def request_count(self) -> int:
        with self._lock:
            return len(self.requests)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        with self._lock:
            self.requests.append(request)
            sequence = len(self.requests)
        return self.behavior(sequence, request)

    def client_factory(self) -> httpx.Client:
        return HTTPXUtil.create_client(transport=httpx.MockTransport(self))


@pytest.fixture
def tile_server():
    """Tile server answering 200 to every request."""
    return FakeTileServer()


@pytest.fixture
def make_config():
    """Build a Config with fast retries and no client cooldown."""
    def _make_config(**overrides) -> Config:
        values = {
            "base_url": TEST_BASE_URL,
            "pool_size": TEST_POOL_SIZE,
            "requests_per_client": TEST_REQUESTS_PER_CLIENT,
            "max_failures_per_client": 0,
            "retry_delay": 0.0,
            "geo_client_cooldown": 0.0,
            "image_client_cooldown": 0.0,
        }
        values.update(overrides)
        return Config(**values)
    return _make_config


@pytest.fixture
def make_tile_server():
    """Build a FakeTileServer with a custom behavior."""
    return FakeTileServer

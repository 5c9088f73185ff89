"""
Unit test configuration.

Patches dotenv so pydantic-settings never reads a real .env file during unit
tests; tests control config exclusively through monkeypatch.setenv().

HTTP never leaves the process: clients are built on an httpx.MockTransport
that records every request it sees.
"""

import json
import logging
import threading

import httpx
import pytest

from tly.client import TlyClient
from tly.infrastructure.http_client import HttpClient
from tly.shared.logging import ROOT_LOGGER_NAME

API_KEY = "test-token"
BASE_URL = "https://api.t.ly"


@pytest.fixture(autouse=True)
def disable_dotenv_loading(monkeypatch):
    """Prevent pydantic-settings from loading .env files in all unit tests."""
    import pydantic_settings.sources.providers.dotenv as ps_dotenv

    monkeypatch.setattr(ps_dotenv, "dotenv_values", lambda *a, **kw: {})


@pytest.fixture(autouse=True)
def clear_tly_env(monkeypatch):
    for name in ("TLY_API_KEY", "TLY_BASE_URL", "TLY_TIMEOUT", "TLY_LOG_LEVEL", "TLY_LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it handled."""

    def __init__(self, handler):
        self.requests: list[httpx.Request] = []
        self._lock = threading.Lock()

        def _record(request: httpx.Request) -> httpx.Response:
            with self._lock:
                self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


def _respond(status_code: int = 200, body=None, text=None):
    """Handler returning a fixed response; ``body`` is JSON-encoded."""

    def _handler(request: httpx.Request) -> httpx.Response:
        if text is not None:
            return httpx.Response(status_code, text=text)
        if body is None:
            return httpx.Response(status_code)
        return httpx.Response(status_code, content=json.dumps(body).encode())

    return _handler


def _request_json(request: httpx.Request):
    return json.loads(request.content)


@pytest.fixture
def respond():
    return _respond


@pytest.fixture
def request_json():
    return _request_json


@pytest.fixture
def make_client():
    """Factory: ``make_client(handler)`` -> (TlyClient, RecordingTransport)."""
    clients = []

    def _make(handler=None, base_url=BASE_URL):
        transport = RecordingTransport(handler or _respond())
        client = TlyClient(
            API_KEY,
            base_url=base_url,
            http_client=HttpClient(transport=transport),
        )
        clients.append(client)
        return client, transport

    yield _make

    for client in clients:
        client.dispatcher.http_client.close()


@pytest.fixture
def tly_logger():
    """The ``tly`` stdlib logger, with its level and handlers restored afterwards."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    level, handlers = logger.level, list(logger.handlers)
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)

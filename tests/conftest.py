import os
from typing import Callable, List

import httpx
import pytest
from fastapi.testclient import TestClient

from custom_fetch.client import ApiClient
from custom_fetch.core.diagnostics import FetchDiagnostics
from custom_fetch.mock_server.auth import issue_token
from custom_fetch.mock_server.main import app as mock_app

TEST_BASE_URL = "http://api.test"

# Environment variables read by Settings; cleared so the developer's shell or .env cannot leak into tests.
SETTINGS_ENV_VARS = [
    "API_BASE_URL",
    "LOG_LEVEL",
    "RUN_MODE",
    "MOCK_SERVER_HOST",
    "MOCK_SERVER_PORT",
    "MOCK_SERVER_RELOAD",
]


@pytest.fixture(autouse=True)
def isolated_environment():
    """AUTOUSE: clears Settings variables for the test and restores the original environment after."""
    original_environ = os.environ.copy()
    for name in SETTINGS_ENV_VARS:
        os.environ.pop(name, None)

    yield

    os.environ.clear()
    os.environ.update(original_environ)


class RecordingHandler:
    """httpx.MockTransport handler that records every request it receives."""

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response]):
        self.responder = responder
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        return self.responder(request)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]


@pytest.fixture
def recording_handler() -> RecordingHandler:
    """Handler answering every request with ``{"ok": true}``; swap ``responder`` to change that."""
    return RecordingHandler(lambda request: httpx.Response(200, json={"ok": True}))


@pytest.fixture
def mock_transport(recording_handler: RecordingHandler) -> httpx.MockTransport:
    return httpx.MockTransport(recording_handler)


@pytest.fixture
def api_client(mock_transport: httpx.MockTransport) -> ApiClient:
    """ApiClient whose requests go to ``recording_handler`` instead of the network."""
    return ApiClient(base_url=TEST_BASE_URL, transport=mock_transport, diagnostics=FetchDiagnostics(verbose=True))


@pytest.fixture
def mock_server_client():
    """Pytest fixture for the FastAPI TestClient of the mock server."""
    with TestClient(mock_app) as test_client:
        yield test_client


@pytest.fixture
def mock_server_api() -> ApiClient:
    """ApiClient wired to the in-process mock server through httpx.ASGITransport."""
    return ApiClient(
        base_url="http://testserver",
        transport=httpx.ASGITransport(app=mock_app),
        diagnostics=FetchDiagnostics(verbose=True),
    )


@pytest.fixture
def bearer_token() -> str:
    token, _ = issue_token()
    return token

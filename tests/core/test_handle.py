from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from pydantic import BaseModel

from custom_fetch.core.diagnostics import FetchDiagnostics
from custom_fetch.core.handle import FetchHandle
from custom_fetch.core.options import FetchOptions
from custom_fetch.core.transport import FetchTransport
from custom_fetch.exceptions import FetchNotExecutedError, FetchStatusError, ResponseSchemaError
from custom_fetch.hooks.registry import build_pipeline

TEST_BASE_URL = "http://api.test"


class Post(BaseModel):
    name: str


def _handle(mock_transport, method="GET", url="/posts", options=None, response_type="json") -> FetchHandle:
    pipeline = build_pipeline(options or FetchOptions(), diagnostics=FetchDiagnostics())
    transport = FetchTransport(base_url=TEST_BASE_URL, transport=mock_transport)
    return FetchHandle(method, url, pipeline, transport, response_type=response_type)


def test_creating_a_handle_sends_nothing(recording_handler, mock_transport):
    handle = _handle(mock_transport)

    assert recording_handler.requests == []
    assert handle.is_finished is False
    assert handle.data is None
    assert handle.method == "GET"


def test_method_is_upper_cased(mock_transport):
    assert _handle(mock_transport, method="patch").method == "PATCH"


@pytest.mark.asyncio
async def test_execute_populates_handle(recording_handler, mock_transport):
    recording_handler.responder = lambda request: httpx.Response(200, json={"name": "a"})
    handle = _handle(mock_transport, options=FetchOptions(response_schema=Post))

    result = await handle.execute()

    assert result is handle
    assert handle.status_code == 200
    assert handle.ok is True
    assert handle.data == {"name": "a"}
    assert handle.validated == Post(name="a")
    assert handle.error is None
    assert handle.is_fetching is False
    assert handle.is_finished is True
    assert handle.is_cancelled is False


@pytest.mark.asyncio
async def test_execute_cancelled_sends_nothing(recording_handler, mock_transport):
    handle = _handle(mock_transport, options=FetchOptions(bearer_token_required=True, token=None))

    await handle.execute()

    assert recording_handler.requests == []
    assert handle.is_cancelled is True
    assert handle.cancel_reason == "bearer token required but missing"
    assert handle.status_code is None
    assert handle.data is None
    assert handle.is_finished is True


@pytest.mark.asyncio
async def test_schema_failure_sets_error_and_clears_data(recording_handler, mock_transport):
    recording_handler.responder = lambda request: httpx.Response(200, json={"title": "no name"})
    handle = _handle(mock_transport, options=FetchOptions(response_schema=Post))

    with pytest.raises(ResponseSchemaError) as exc_info:
        await handle.execute()

    assert handle.error is exc_info.value
    assert handle.data is None
    assert handle.validated is None
    assert handle.status_code == 200
    assert handle.is_finished is True
    assert handle.is_fetching is False


@pytest.mark.asyncio
async def test_transport_error_is_recorded_and_reraised(mock_transport):
    handle = _handle(mock_transport)
    handle.transport = MagicMock(spec=FetchTransport)
    handle.transport.send = AsyncMock(side_effect=httpx.ConnectError("refused"))

    with pytest.raises(httpx.ConnectError):
        await handle.execute()

    assert isinstance(handle.error, httpx.ConnectError)
    assert handle.is_finished is True


@pytest.mark.asyncio
async def test_execute_twice_sends_twice_and_resets_state(recording_handler, mock_transport):
    statuses = iter([500, 200])
    recording_handler.responder = lambda request: httpx.Response(next(statuses), json={"n": 1})
    handle = _handle(mock_transport)

    await handle.execute()
    assert handle.status_code == 500
    await handle.execute()

    assert handle.status_code == 200
    assert len(recording_handler.requests) == 2


@pytest.mark.asyncio
async def test_each_execute_builds_a_fresh_request(recording_handler, mock_transport):
    handle = _handle(mock_transport, options=FetchOptions(query={"name": "a"}))

    await handle.execute()
    await handle.execute()

    assert [str(r.url) for r in recording_handler.requests] == ["http://api.test/posts?name=a"] * 2


def test_raise_for_status_before_execute(mock_transport):
    with pytest.raises(FetchNotExecutedError):
        _handle(mock_transport).raise_for_status()


@pytest.mark.asyncio
async def test_raise_for_status_on_error_status(recording_handler, mock_transport):
    recording_handler.responder = lambda request: httpx.Response(404, json={"detail": "missing"})
    handle = await _handle(mock_transport).execute()

    with pytest.raises(FetchStatusError) as exc_info:
        handle.raise_for_status()

    assert exc_info.value.status_code == 404


@pytest.mark.asyncio
async def test_raise_for_status_on_success(mock_transport):
    handle = await _handle(mock_transport).execute()
    handle.raise_for_status()


@pytest.mark.asyncio
async def test_raise_for_status_after_cancel(mock_transport):
    handle = await _handle(mock_transport, options=FetchOptions(bearer_token_required=True)).execute()

    with pytest.raises(FetchNotExecutedError):
        handle.raise_for_status()

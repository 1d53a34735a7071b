"""
Unit tests for the HTTP client configuration module.
"""

from types import SimpleNamespace

import aiohttp
import pytest

from uptime_reporter.config.http_config import (
    ConnectionTrace,
    _on_connection_ready,
    get_http_session,
    get_trace_config,
)


def test_get_trace_config_should_hook_connection_events() -> None:
    # Act
    trace_config = get_trace_config()

    # Assert
    assert isinstance(trace_config, aiohttp.TraceConfig)
    assert _on_connection_ready in trace_config.on_connection_create_end
    assert _on_connection_ready in trace_config.on_connection_reuseconn


@pytest.mark.asyncio
async def test_on_connection_ready_should_stamp_the_first_event_only() -> None:
    # Arrange
    trace = ConnectionTrace()
    ctx = SimpleNamespace(trace_request_ctx=trace)

    # Act
    await _on_connection_ready(None, ctx, None)
    first = trace.connected_at
    await _on_connection_ready(None, ctx, None)

    # Assert
    assert first is not None
    assert trace.connected_at == first


@pytest.mark.asyncio
async def test_on_connection_ready_should_ignore_foreign_contexts() -> None:
    ctx = SimpleNamespace(trace_request_ctx=None)

    await _on_connection_ready(None, ctx, None)

    assert ctx.trace_request_ctx is None


@pytest.mark.asyncio
async def test_get_http_session_should_return_open_session() -> None:
    # Act
    session = get_http_session()

    # Assert
    try:
        assert isinstance(session, aiohttp.ClientSession)
        assert not session.closed
    finally:
        await session.close()

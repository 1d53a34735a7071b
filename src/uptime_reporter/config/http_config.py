"""
HTTP client configuration module for the uptime reporter.

This module provides functionality to create and configure the HTTP client
session used by the prober. The session carries a trace configuration that
records when the connection for a request has been established, which the
prober uses for its connect-time measurement.
"""

import time
from types import SimpleNamespace
from typing import Any, Optional

import aiohttp


class ConnectionTrace:
    """
    Per-request holder for the instant the connection became usable.

    An instance is passed to aiohttp as ``trace_request_ctx`` and filled in by
    the trace callbacks below.
    """

    def __init__(self) -> None:
        self.connected_at: Optional[float] = None


async def _on_connection_ready(
    session: aiohttp.ClientSession, trace_config_ctx: SimpleNamespace, params: Any
) -> None:
    trace: Any = trace_config_ctx.trace_request_ctx
    if isinstance(trace, ConnectionTrace) and trace.connected_at is None:
        trace.connected_at = time.perf_counter()


def get_trace_config() -> aiohttp.TraceConfig:
    """
    Create a trace configuration recording connection establishment.

    Both a freshly created connection and a reused pooled connection count as
    the end of the connection phase.

    Returns:
        aiohttp.TraceConfig: The configured trace config.
    """
    trace_config = aiohttp.TraceConfig()
    trace_config.on_connection_create_end.append(_on_connection_ready)
    trace_config.on_connection_reuseconn.append(_on_connection_ready)
    return trace_config


def get_http_session() -> aiohttp.ClientSession:
    """
    Create and configure the HTTP client session shared by all probes.

    Using a shared session is recommended for performance reasons. Timeouts and
    headers are set per request by the prober.

    Returns:
        aiohttp.ClientSession: A configured HTTP client session.
    """
    return aiohttp.ClientSession(trace_configs=[get_trace_config()])

"""
Shared fixtures for the uptime reporter test suite.
"""

from typing import AsyncIterator

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from uptime_reporter.config.app_config import AppConfig


@pytest.fixture
def app_config(tmp_path) -> AppConfig:
    """
    Creates an AppConfig pointing at a temporary state directory.

    Returns:
        AppConfig: A configuration with test values.
    """
    return AppConfig(
        app_name="test_reporter",
        version="0.0.0",
        debug_mode=False,
        settings_file=str(tmp_path / "Config.yaml"),
        state_dir=str(tmp_path / "state"),
        logging_type="default",
        logging_config_file="",
        smtp_host="smtp.example.com",
        smtp_port=587,
        smtp_security="starttls",
        smtp_username="reporter",
        smtp_password="secret",
        smtp_ca_file=None,
        mail_from="monitor@example.com",
        mail_to=("ops@example.com",),
    )


async def _ok(request: web.Request) -> web.Response:
    return web.Response(text="ok")


async def _server_error(request: web.Request) -> web.Response:
    return web.Response(status=500, text="internal error")


async def _not_found(request: web.Request) -> web.Response:
    return web.Response(status=404, text="not here")


@pytest_asyncio.fixture
async def http_server() -> AsyncIterator[TestServer]:
    """
    Runs a local HTTP server answering on /ok, /error and /missing.

    Yields:
        TestServer: The running server, use make_url() to build target URLs.
    """
    app = web.Application()
    app.add_routes(
        [
            web.get("/ok", _ok),
            web.get("/error", _server_error),
            web.get("/missing", _not_found),
        ]
    )
    server = TestServer(app)
    await server.start_server()
    yield server
    await server.close()

# tests/conftest.py
#
# The GitHub double is a real HTTP server on 127.0.0.1 so requests go through
# the same transport code as production calls.
import os
import pathlib

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from gh_api_service.utils.logger import init_logging

FIXTURES = pathlib.Path(__file__).parent / "fixtures"

init_logging()


@pytest.fixture
def api_key():
    return os.environ.get("GITHUB_TOKEN", "test-token")


@pytest.fixture
def mock_repo_body():
    return (FIXTURES / "mock_repo_details_body.json").read_text()


@pytest.fixture
async def github_server():
    """Returns a coroutine that starts a GitHub double serving the given GET routes."""
    servers = []

    async def _start(routes):
        app = web.Application()
        for path, handler in routes.items():
            app.router.add_get(path, handler)
        server = TestServer(app)
        await server.start_server()
        servers.append(server)
        return server

    yield _start

    for server in servers:
        await server.close()


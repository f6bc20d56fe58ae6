"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import httpx
import pytest
import pytest_asyncio

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

TRACER_SERVER = "tracer.test:8081"
BASE_URL = f"http://{TRACER_SERVER}"


class RecordingHandler:
    """httpx.MockTransport handler that records requests and replies from a route table.

    Routes map (method, path) to either an httpx.Response or an exception
    instance to raise. Unrouted requests get an empty 200 response.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.routes: dict[tuple[str, str], httpx.Response | Exception] = {}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        reply = self.routes.get((request.method, request.url.path))
        if isinstance(reply, Exception):
            raise reply
        if reply is None:
            return httpx.Response(200)
        return reply

    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]


@pytest.fixture
def config():
    """Config provider pointing at the fake tracer server."""
    from tracer_client.config import EnvConfig

    return EnvConfig(overrides={"tracer-server": TRACER_SERVER})


@pytest.fixture
def missing_config(monkeypatch):
    """Config provider with no tracer server configured."""
    from tracer_client.config import EnvConfig

    monkeypatch.delenv("TRACER_SERVER", raising=False)
    return EnvConfig()


@pytest.fixture
def handler():
    """Create recording request handler."""
    return RecordingHandler()


@pytest_asyncio.fixture
async def transport(handler):
    """httpx client mounted on the recording handler."""
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    yield client
    await client.aclose()


@pytest.fixture
def client(config, transport):
    """Create TracerClient against the mock transport."""
    from tracer_client.client import TracerClient

    return TracerClient(config=config, transport=transport)


@pytest.fixture
def store():
    """Create empty in-memory tracer store."""
    from tracer_client.api import TracerStore

    return TracerStore()


@pytest.fixture
def server_app(store):
    """Create the reference FastAPI app backed by the store."""
    from tracer_client.api import create_fastapi_app

    return create_fastapi_app(store)


@pytest_asyncio.fixture
async def server_http(server_app):
    """Raw httpx client talking to the reference app in-process."""
    client = httpx.AsyncClient(
        transport=httpx.ASGITransport(app=server_app), base_url=BASE_URL
    )
    yield client
    await client.aclose()


@pytest.fixture
def server_client(config, server_http):
    """TracerClient wired to the reference app in-process."""
    from tracer_client.client import TracerClient

    return TracerClient(config=config, transport=server_http)

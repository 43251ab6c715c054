import pytest
import pytest_asyncio
from aiohttp.test_utils import TestServer

from kagi_mcp.app.client import KagiAPI, KagiConfig

from .backend import META, TEST_API_KEY, FakeKagiBackend


@pytest_asyncio.fixture
async def kagi_backend():
    backend = FakeKagiBackend()
    server = TestServer(backend.app())
    await server.start_server()
    backend.server = server
    yield backend
    await server.close()


@pytest_asyncio.fixture
async def kagi_api(kagi_backend):
    api = KagiAPI(KagiConfig(api_key=TEST_API_KEY, base_url=kagi_backend.base_url))
    yield api
    await api.close()


@pytest.fixture
def search_payload():
    return {
        "meta": dict(META, api_balance=4.2),
        "data": [
            {
                "t": 0,
                "rank": 1,
                "url": "https://docs.python.org/3/library/asyncio.html",
                "title": "asyncio — Asynchronous I/O",
                "snippet": "asyncio is a library to write concurrent code",
            },
            {"t": 1, "list": ["python asyncio tutorial", "asyncio gather"]},
        ],
    }

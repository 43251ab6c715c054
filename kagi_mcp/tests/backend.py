import asyncio
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from aiohttp import web
from aiohttp.test_utils import TestServer

API_PREFIX = "/api/v0"
TEST_API_KEY = "test-api-key"

META = {"id": "123", "node": "test", "ms": 100}


@dataclass
class RecordedRequest:
    method: str
    path: str
    query: Dict[str, str]
    headers: Dict[str, str]
    body: Any


class FakeKagiBackend:
    """Local aiohttp app answering like the Kagi API, recording every request."""

    def __init__(self):
        self.requests: List[RecordedRequest] = []
        self._replies: Dict[Tuple[str, str], Tuple[int, Any, Optional[str], float]] = {}
        self.server: Optional[TestServer] = None

    @property
    def base_url(self) -> str:
        return f"http://{self.server.host}:{self.server.port}{API_PREFIX}"

    def reply(
        self,
        method: str,
        path: str,
        status: int = 200,
        json: Any = None,
        text: Optional[str] = None,
        delay: float = 0.0,
    ) -> None:
        self._replies[(method, path)] = (status, json, text, delay)

    async def _handle(self, request: web.Request) -> web.StreamResponse:
        path = request.path[len(API_PREFIX):]
        body = await request.json() if request.can_read_body else None
        self.requests.append(
            RecordedRequest(
                method=request.method,
                path=path,
                query=dict(request.query),
                headers=dict(request.headers),
                body=body,
            )
        )
        status, payload, text, delay = self._replies.get(
            (request.method, path), (404, {"message": "Not found"}, None, 0.0)
        )
        if delay:
            await asyncio.sleep(delay)
        if text is not None:
            return web.Response(status=status, text=text)
        return web.json_response(payload, status=status)

    def app(self) -> web.Application:
        app = web.Application()
        app.router.add_route("*", API_PREFIX + "/{tail:.*}", self._handle)
        return app

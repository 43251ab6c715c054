import asyncio
from typing import Any, Dict, Optional, Tuple, Type

import aiohttp
from pydantic import BaseModel, ValidationError

from kagi_mcp.app.client.errors import KagiError
from kagi_mcp.config.logger import logging

logger = logging.getLogger(__name__)


class BackendStatusError(aiohttp.ClientResponseError):
    """Non-2xx reply, carrying whatever JSON the backend sent along with it."""

    def __init__(self, response: aiohttp.ClientResponse, payload: Any):
        super().__init__(
            response.request_info,
            response.history,
            status=response.status,
            message=response.reason or "",
            headers=response.headers,
        )
        self.payload = payload


class MalformedResponseError(ValueError):
    def __init__(self, status: int, reason: str):
        super().__init__(reason)
        self.status = status


def _backend_message(payload: Any) -> Optional[str]:
    if not isinstance(payload, dict):
        return None
    message = payload.get("message")
    if isinstance(message, str) and message:
        return message
    errors = payload.get("error")
    if isinstance(errors, list) and errors and isinstance(errors[0], dict):
        msg = errors[0].get("msg")
        if isinstance(msg, str) and msg:
            return msg
    return None


class KagiConnection:
    """
    Shared connection context for one Kagi backend: base URL, timeout and the
    fixed request headers. Nothing here changes after construction, so
    concurrent calls can share a single instance.

    Every call goes through `request()`, which is the only place transport and
    backend failures are rewritten into `KagiError`.
    """

    def __init__(self, base_url: str, headers: Dict[str, str], timeout: float):
        self._base_url = base_url.rstrip("/")
        self._headers = dict(headers)
        self._timeout = timeout
        self._session: Optional[aiohttp.ClientSession] = None

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def headers(self) -> Dict[str, str]:
        return dict(self._headers)

    @property
    def timeout(self) -> float:
        return self._timeout

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                headers=self._headers,
                timeout=aiohttp.ClientTimeout(total=self._timeout),
            )
        return self._session

    async def close(self) -> None:
        if self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None

    async def get(
        self,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        model: Optional[Type[BaseModel]] = None,
    ) -> Any:
        return await self.request("GET", path, params=params, model=model)

    async def post(
        self,
        path: str,
        *,
        body: Optional[Dict[str, Any]] = None,
        model: Optional[Type[BaseModel]] = None,
    ) -> Any:
        return await self.request("POST", path, body=body, model=model)

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        body: Optional[Dict[str, Any]] = None,
        model: Optional[Type[BaseModel]] = None,
    ) -> Any:
        try:
            status, payload = await self._send(method, path, params, body)
            if model is None:
                return payload
            try:
                return model.model_validate(payload)
            except ValidationError as e:
                raise MalformedResponseError(status, str(e)) from e
        except (aiohttp.ClientError, asyncio.TimeoutError, MalformedResponseError) as exc:
            error = self._normalize(exc)
            logger.error(
                "Kagi %s %s failed: %s (status=%s)", method, path, error.message, error.code
            )
            raise error from exc

    async def _send(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]],
        body: Optional[Dict[str, Any]],
    ) -> Tuple[int, Any]:
        session = self._get_session()
        logger.debug("Kagi %s %s params=%s", method, path, params)
        async with session.request(
            method, f"{self._base_url}{path}", params=params, json=body
        ) as resp:
            try:
                payload = await resp.json(content_type=None)
            except ValueError:
                payload = None
            if not 200 <= resp.status < 300:
                raise BackendStatusError(resp, payload)
            if payload is None:
                raise MalformedResponseError(resp.status, "response body is not JSON")
            return resp.status, payload

    def _normalize(self, exc: BaseException) -> KagiError:
        if isinstance(exc, BackendStatusError):
            message = _backend_message(exc.payload) or (
                f"Request failed with status code {exc.status}"
            )
            return KagiError(message, code=exc.status, details=exc.payload)
        if isinstance(exc, MalformedResponseError):
            return KagiError(f"Malformed response from Kagi API: {exc}", code=exc.status)
        if isinstance(exc, asyncio.TimeoutError):
            return KagiError(f"timeout of {self._timeout}s exceeded")
        return KagiError(str(exc) or exc.__class__.__name__)

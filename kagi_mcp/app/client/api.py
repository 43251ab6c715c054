from typing import Optional

from kagi_mcp.app.client.http import KagiConnection
from kagi_mcp.app.client.schema import (
    EnrichParams,
    EnrichResponse,
    FastGPTParams,
    FastGPTResponse,
    KagiConfig,
    SearchParams,
    SearchResponse,
    SummarizationResponse,
    SummarizeParams,
)
from kagi_mcp.config.logger import logging

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://kagi.com/api/v0"
DEFAULT_TIMEOUT = 30.0
DEFAULT_SEARCH_LIMIT = 10


class KagiAPI:
    """
    Client for the Kagi HTTP API.

    Usage:
        async with KagiAPI(KagiConfig(api_key="...")) as kagi:
            results = await kagi.search("python asyncio", limit=5)

    Backend and transport failures raise `KagiError`; calling an operation
    with bad arguments raises `ValueError` before anything is sent.
    """

    def __init__(self, config: KagiConfig):
        if not config.api_key:
            raise ValueError("API key is required")

        self.connection = KagiConnection(
            base_url=config.base_url or DEFAULT_BASE_URL,
            timeout=config.timeout or DEFAULT_TIMEOUT,
            headers={
                "Authorization": f"Bot {config.api_key}",
                "Content-Type": "application/json",
            },
        )

    @classmethod
    def from_settings(cls, settings) -> "KagiAPI":
        return cls(
            KagiConfig(
                api_key=settings.kagi_api_key,
                base_url=settings.kagi_base_url,
                timeout=settings.kagi_timeout,
            )
        )

    async def __aenter__(self) -> "KagiAPI":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        await self.connection.close()

    async def search(self, q: str, limit: Optional[int] = None) -> SearchResponse:
        """Web search. `limit` falls back to 10 results when not given."""
        params = SearchParams(q=q, limit=limit or DEFAULT_SEARCH_LIMIT)
        response = await self.connection.get(
            "/search", params=params.to_wire(), model=SearchResponse
        )
        if response.meta.api_balance is not None:
            logger.debug("Kagi api_balance=%s", response.meta.api_balance)
        return response

    async def summarize(
        self,
        url: Optional[str] = None,
        text: Optional[str] = None,
        engine: Optional[str] = None,
        summary_type: Optional[str] = None,
        target_language: Optional[str] = None,
        cache: Optional[bool] = None,
    ) -> SummarizationResponse:
        """
        Summarize a URL or a piece of text, exactly one of the two.

        Args:
            url: document to summarize
            text: raw text to summarize
            engine: "cecil", "agnes", "daphne" or "muriel"
            summary_type: "summary" (prose) or "takeaway" (bullet points)
            target_language: language code for the output
            cache: whether the backend may serve a cached summary
        """
        if not url and not text:
            raise ValueError("Either url or text parameter is required")
        if url and text:
            raise ValueError("Cannot provide both url and text parameters")

        params = SummarizeParams(
            url=url,
            text=text,
            engine=engine,
            summary_type=summary_type,
            target_language=target_language,
            cache=cache,
        )
        return await self.connection.get(
            "/summarize", params=params.to_wire(), model=SummarizationResponse
        )

    async def fastgpt(self, query: str, cache: Optional[bool] = None) -> FastGPTResponse:
        params = FastGPTParams(query=query, cache=cache)
        return await self.connection.post(
            "/fastgpt", body=params.to_wire(), model=FastGPTResponse
        )

    async def enrich(self, q: str) -> EnrichResponse:
        """News enrichment results for `q`."""
        params = EnrichParams(q=q)
        return await self.connection.get(
            "/enrich/news", params=params.to_wire(), model=EnrichResponse
        )

    async def test_connection(self) -> bool:
        """True if a one-result search goes through, False on any failure."""
        try:
            await self.search("test", limit=1)
            return True
        except Exception as e:
            logger.warning("Kagi connection test failed: %s", e)
            return False

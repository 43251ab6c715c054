from numbers import Real
from typing import Any, Dict, Mapping

from mcp.shared.exceptions import McpError
from mcp.types import INVALID_PARAMS, ErrorData
from pydantic import BaseModel

from kagi_mcp.app.client import KagiAPI, KagiError
from kagi_mcp.app.client.api import DEFAULT_SEARCH_LIMIT
from kagi_mcp.base.adapter_base import AdapterBase
from kagi_mcp.base.models import ToolFailure, ToolOutcome, ToolSuccess
from kagi_mcp.config.logger import logging
from kagi_mcp.enum.tools import Tools

logger = logging.getLogger(__name__)

MIN_LIMIT = 1
MAX_LIMIT = 100

SEARCH_INPUT_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "query": {"type": "string"},
        "limit": {
            "type": "integer",
            "default": DEFAULT_SEARCH_LIMIT,
            "minimum": MIN_LIMIT,
            "maximum": MAX_LIMIT,
        },
    },
    "required": ["query"],
}


def invalid_params(message: str) -> McpError:
    return McpError(ErrorData(code=INVALID_PARAMS, message=message))


class KagiSearchTool(AdapterBase):
    """
    Exposes KagiAPI.search as the `kagi_search` tool.

    Arguments arrive untyped from the host and are checked here. Kagi failures
    come back as a ToolFailure; bad arguments raise McpError(INVALID_PARAMS);
    anything else propagates.
    """

    def __init__(self, client: KagiAPI, check_on_startup: bool = False):
        super().__init__(client)
        self._check_on_startup = check_on_startup

    @property
    def name(self) -> str:
        return Tools.KAGI_SEARCH.value

    @property
    def description(self) -> str:
        return "Perform web search using Kagi"

    @property
    def input_schema(self) -> Dict[str, Any]:
        return SEARCH_INPUT_SCHEMA

    async def initialize(self) -> None:
        if not self._check_on_startup:
            self._ready = True
            return
        self._ready = await self._client.test_connection()
        if self._ready:
            logger.info("KagiSearchTool %s connected", self.name)
        else:
            logger.warning(
                "KagiSearchTool %s could not reach the Kagi API, calls will report errors",
                self.name,
            )

    async def run(self, args: Any) -> ToolOutcome:
        params = self._parse_args(args)
        logger.info("%s called with q=%r limit=%s", self.name, params["q"], params["limit"])
        try:
            results = await self._client.search(**params)
        except KagiError as e:
            logger.warning("%s failed: %s", self.name, e.message)
            return ToolFailure.from_message(f"Kagi API error: {e.message}")

        if isinstance(results, BaseModel):
            results = results.model_dump(mode="json", exclude_unset=True)
        return ToolSuccess(tool_result=results)

    def _parse_args(self, args: Any) -> Dict[str, Any]:
        if args is None or not isinstance(args, Mapping):
            raise invalid_params(f"Invalid arguments for {self.name}")

        query = args.get("query")
        if not isinstance(query, str):
            raise invalid_params("Query must be a string")

        limit = DEFAULT_SEARCH_LIMIT
        if "limit" in args:
            limit = self._parse_limit(args["limit"])
        return {"q": query, "limit": limit}

    @staticmethod
    def _parse_limit(limit: Any) -> int:
        # bool is an int subclass, JSON true/false is not a number
        if isinstance(limit, bool) or not isinstance(limit, Real):
            raise invalid_params("Limit must be a number between 1 and 100")
        if not MIN_LIMIT <= limit <= MAX_LIMIT or int(limit) != limit:
            raise invalid_params("Limit must be a number between 1 and 100")
        return int(limit)

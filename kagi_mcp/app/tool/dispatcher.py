from typing import Any

from mcp.shared.exceptions import McpError
from mcp.types import METHOD_NOT_FOUND, ErrorData

from kagi_mcp.app.tool.registry import Registry
from kagi_mcp.base.models import ToolOutcome
from kagi_mcp.config.logger import logging

logger = logging.getLogger(__name__)


async def dispatch_tool(reg: Registry, tool_name: str, args: Any) -> ToolOutcome:
    """
    Route a host tool call to the registered instance.
    `args` is passed on untouched, the tool validates it.
    """
    impl = reg.get(tool_name)
    if impl is None:
        logger.warning("Unknown tool requested: %s", tool_name)
        raise McpError(ErrorData(code=METHOD_NOT_FOUND, message="Unknown tool"))

    return await impl.run(args)

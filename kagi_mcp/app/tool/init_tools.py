from mcp import types

from kagi_mcp.app.client import KagiAPI
from kagi_mcp.app.tool.dispatcher import dispatch_tool
from kagi_mcp.app.tool.registry import Registry
from kagi_mcp.app.tool.search import KagiSearchTool
from kagi_mcp.config.logger import logging

logger = logging.getLogger(__name__)


def create_client(settings) -> KagiAPI:
    if not settings.kagi_api_key:
        raise ValueError("KAGI_API_KEY environment variable is required")
    return KagiAPI.from_settings(settings)


def install_tool_handlers(reg: Registry) -> None:
    """
    Serve tools/list and tools/call straight from the registry.

    Arguments reach the tool untouched, so its own checks decide what is
    invalid. An McpError raised by dispatch goes back to the host as a
    JSON-RPC error (invalid params, method not found); a ToolFailure goes
    back as an isError result.
    """
    server = reg.mcp._mcp_server

    async def list_tools(req: types.ListToolsRequest) -> types.ServerResult:
        return types.ServerResult(types.ListToolsResult(tools=reg.list_tools()))

    async def call_tool(req: types.CallToolRequest) -> types.ServerResult:
        outcome = await dispatch_tool(reg, req.params.name, req.params.arguments)
        return types.ServerResult(outcome.to_call_tool_result())

    server.request_handlers[types.ListToolsRequest] = list_tools
    server.request_handlers[types.CallToolRequest] = call_tool


async def init_tools(
    reg: Registry, client: KagiAPI, check_on_startup: bool = False
) -> KagiSearchTool:
    search_tool = KagiSearchTool(client, check_on_startup=check_on_startup)
    reg.register_instance(search_tool)
    install_tool_handlers(reg)

    await reg.initialize_instances([search_tool])
    return search_tool

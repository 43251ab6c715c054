import pytest
from mcp.shared.exceptions import McpError
from mcp.types import INVALID_PARAMS, METHOD_NOT_FOUND

from kagi_mcp.app.tool.dispatcher import dispatch_tool
from kagi_mcp.app.tool.registry import Registry
from kagi_mcp.app.tool.search import KagiSearchTool
from kagi_mcp.base.models import ToolFailure, ToolSuccess

from .stubs import StubKagiClient, kagi_error


@pytest.fixture
def client():
    return StubKagiClient()


@pytest.fixture
def registry(client):
    reg = Registry(name="kagi-test")
    reg.register_instance(KagiSearchTool(client))
    return reg


def test_list_tools(registry):
    [tool] = registry.list_tools()

    assert tool.name == "kagi_search"
    assert tool.description == "Perform web search using Kagi"
    assert tool.inputSchema["properties"]["query"] == {"type": "string"}


def test_duplicate_registration(registry, client):
    with pytest.raises(ValueError, match="already registered"):
        registry.register_instance(KagiSearchTool(client))


@pytest.mark.asyncio
async def test_dispatch_search(registry, client):
    outcome = await dispatch_tool(registry, "kagi_search", {"query": "x"})

    assert isinstance(outcome, ToolSuccess)
    assert client.calls == [{"q": "x", "limit": 10}]


@pytest.mark.asyncio
async def test_dispatch_unknown_tool(registry, client):
    with pytest.raises(McpError) as exc_info:
        await dispatch_tool(registry, "kagi_summarize", {"query": "x"})

    assert exc_info.value.error.code == METHOD_NOT_FOUND
    assert exc_info.value.error.message == "Unknown tool"
    assert client.calls == []


@pytest.mark.asyncio
async def test_dispatch_invalid_params(registry):
    with pytest.raises(McpError) as exc_info:
        await dispatch_tool(registry, "kagi_search", {"query": "x", "limit": 101})

    assert exc_info.value.error.code == INVALID_PARAMS


@pytest.mark.asyncio
async def test_dispatch_soft_failure(client):
    client.error = kagi_error("Rate limited", code=429)
    reg = Registry(name="kagi-test")
    reg.register_instance(KagiSearchTool(client))

    outcome = await dispatch_tool(reg, "kagi_search", {"query": "x"})

    assert isinstance(outcome, ToolFailure)
    assert outcome.text == "Kagi API error: Rate limited"


@pytest.mark.asyncio
async def test_shutdown_instances(registry, client):
    await registry.shutdown_instances()

    assert client.closed is True

import asyncio

from kagi_mcp.config.logger import logging
from kagi_mcp.config.settings import settings
from kagi_mcp.app.tool.registry import Registry
from kagi_mcp.app.tool.init_tools import create_client, init_tools

logger = logging.getLogger(__name__)


async def async_init() -> Registry:
    """Build the Kagi client and register tools before starting the server."""
    reg = Registry(name=settings.mcp_server_name, version=settings.mcp_server_version)
    client = create_client(settings)
    await init_tools(reg, client, check_on_startup=settings.kagi_check_on_startup)
    return reg


async def main() -> None:
    reg = await async_init()
    try:
        await reg.run_async(
            transport=settings.mcp_transport, host=settings.host, port=int(settings.port)
        )
    finally:
        await reg.shutdown_instances()
        logger.info("Kagi MCP server shut down")


def run() -> None:
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Server stopped by user")


if __name__ == "__main__":
    run()

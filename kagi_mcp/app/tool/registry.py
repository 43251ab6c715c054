from __future__ import annotations
import inspect
import asyncio
from typing import Any, Dict, Iterable, List, Optional
from kagi_mcp.base.base_tool import BaseTool
from kagi_mcp.config.logger import logging

from fastmcp import FastMCP
from mcp.types import Tool

logger = logging.getLogger(__name__)


class Registry:
    def __init__(self, name: str = "kagi-server", version: Optional[str] = None):
        self.name = name
        self.version = version
        self.mcp = FastMCP(name=name)
        self.instances: Dict[str, BaseTool] = {}

    def get(self, name: str) -> Optional[BaseTool]:
        return self.instances.get(name)

    def register_instance(self, instance: BaseTool) -> BaseTool:
        """
        Keep a tool instance so dispatch_tool can find it by name.
        tools/list and tools/call are served from here (see install_tool_handlers).
        """
        tool_name = instance.name
        if tool_name in self.instances:
            raise ValueError(f"Tool already registered: {tool_name}")
        self.instances[tool_name] = instance
        logger.info("Registered tool %s", tool_name)
        return instance

    def list_tools(self) -> List[Tool]:
        return [
            Tool(
                name=inst.name,
                description=inst.description,
                inputSchema=inst.input_schema,
            )
            for inst in self.instances.values()
        ]

    async def initialize_instances(self, instances: Iterable[Any]) -> None:
        tasks = []
        for inst in instances:
            init = getattr(inst, "initialize", None)
            if callable(init):
                ret = init()
                if inspect.isawaitable(ret):
                    tasks.append(ret)
        if tasks:
            await asyncio.gather(*tasks)

    async def shutdown_instances(self) -> None:
        for tool_name, inst in self.instances.items():
            try:
                await inst.shutdown()
            except Exception:
                logger.exception("Failed to shut down tool %s", tool_name)

    async def run_async(
        self, transport: str = "stdio", host: str = "0.0.0.0", port: int = 8000
    ) -> None:
        logger.info(
            "Starting %s %s with %s transport", self.name, self.version or "", transport
        )
        if transport == "stdio":
            await self.mcp.run_async(transport="stdio")
        else:
            await self.mcp.run_async(transport=transport, host=host, port=port)

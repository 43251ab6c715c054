import json
from typing import Any, List, Literal, Union

from mcp.types import CallToolResult, TextContent
from pydantic import BaseModel, ConfigDict


class ToolSuccess(BaseModel):
    model_config = ConfigDict(frozen=True)

    tool_result: Any
    is_error: Literal[False] = False

    def to_call_tool_result(self) -> CallToolResult:
        structured = self.tool_result if isinstance(self.tool_result, dict) else None
        return CallToolResult(
            content=[TextContent(type="text", text=json.dumps(self.tool_result))],
            structuredContent=structured,
            isError=False,
        )


class ToolFailure(BaseModel):
    """
    Soft failure: reported to the host as content with the error flag set,
    so the session keeps going.
    """

    model_config = ConfigDict(frozen=True)

    content: List[TextContent]
    is_error: Literal[True] = True

    @classmethod
    def from_message(cls, message: str) -> "ToolFailure":
        return cls(content=[TextContent(type="text", text=message)])

    @property
    def text(self) -> str:
        return "\n".join(block.text for block in self.content)

    def to_call_tool_result(self) -> CallToolResult:
        return CallToolResult(content=list(self.content), isError=True)


ToolOutcome = Union[ToolSuccess, ToolFailure]

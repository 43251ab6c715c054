import inspect
from abc import ABC
from typing import Any, Dict

from .base_tool import BaseTool


class AdapterBase(BaseTool, ABC):
    """
    Base class for tool adapters.
    Adapters *look like tools* but only check the host's arguments and
    delegate the work to a client they own (usually remote).
    Adapters MUST NOT implement business logic.
    """

    def __init__(self, client: Any, config: Dict[str, Any] | None = None):
        super().__init__(config)
        self._client = client

    @property
    def client(self) -> Any:
        return self._client

    async def shutdown(self) -> None:
        close = getattr(self._client, "close", None)
        if callable(close):
            ret = close()
            if inspect.isawaitable(ret):
                await ret

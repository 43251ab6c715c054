from abc import ABC, abstractmethod
from typing import Any, Dict

from .models import ToolOutcome


class BaseTool(ABC):
    """
    Abstract base class for all tools.
    Every tool must implement `name`, `description`, `input_schema` and `run`.
    """

    def __init__(self, config: Dict[str, Any] | None = None):
        self.config = config or {}
        self._ready = False

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique name of the tool (what the host calls it by)."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of what this tool does."""
        pass

    @property
    @abstractmethod
    def input_schema(self) -> Dict[str, Any]:
        """JSON schema of the arguments object."""
        pass

    @abstractmethod
    async def run(self, args: Any) -> ToolOutcome:
        pass

    @property
    def ready(self) -> bool:
        return bool(self._ready)

    async def initialize(self) -> None:
        """
        Optional startup hook. Called by the server before serving requests.
        Should set self._ready = True on success.
        """
        self._ready = True

    async def shutdown(self) -> None:
        """Optional cleanup hook."""
        return

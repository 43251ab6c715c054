from typing import Any, Optional


class KagiError(Exception):
    """
    The one error shape for failures on the backend call path.
    `code` is the HTTP status when a response was received,
    `details` is the raw backend payload when there was one.
    """

    def __init__(
        self, message: str, code: Optional[int] = None, details: Optional[Any] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details

    def __repr__(self) -> str:
        return f"KagiError(message={self.message!r}, code={self.code!r})"

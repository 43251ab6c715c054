from .api import KagiAPI
from .errors import KagiError
from .http import KagiConnection
from .schema import KagiConfig

__all__ = ["KagiAPI", "KagiError", "KagiConnection", "KagiConfig"]

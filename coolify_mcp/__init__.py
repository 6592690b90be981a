from .client import CoolifyClient
from .constants import SERVER_VERSION as __version__
from .errors import (
    CoolifyAPIError,
    CoolifyConfigError,
    CoolifyConnectionError,
    CoolifyError,
    CoolifyResponseError,
)
from .server import CoolifyMcpServer

__all__ = [
    "CoolifyClient",
    "CoolifyMcpServer",
    "CoolifyError",
    "CoolifyConfigError",
    "CoolifyConnectionError",
    "CoolifyAPIError",
    "CoolifyResponseError",
    "__version__",
]

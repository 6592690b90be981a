from __future__ import annotations


class CoolifyError(RuntimeError):
    pass


class CoolifyConfigError(ValueError):
    """Missing or invalid configuration, raised before any network activity."""


class CoolifyConnectionError(CoolifyError):
    """The Coolify server could not be reached at the configured base URL."""


class CoolifyAPIError(CoolifyError):
    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class CoolifyResponseError(CoolifyAPIError):
    """A success status came back with a body that is not JSON."""

"""
Centralized configuration loaded from environment variables.
The server entry point reads from here; library consumers may pass values directly.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .constants import DEFAULT_TIMEOUT, DEFAULT_TRANSPORT, TRANSPORTS
from .errors import CoolifyConfigError


@dataclass(frozen=True)
class Settings:
    base_url: str
    access_token: str
    timeout: float = DEFAULT_TIMEOUT
    transport: str = DEFAULT_TRANSPORT
    log_level: str = "INFO"


def load_settings(
    base_url: str | None = None,
    access_token: str | None = None,
    transport: str | None = None,
) -> Settings:
    load_dotenv()

    resolved_transport = transport or os.getenv("MCP_TRANSPORT", DEFAULT_TRANSPORT)
    if resolved_transport not in TRANSPORTS:
        raise CoolifyConfigError(
            f"Unknown MCP transport '{resolved_transport}'. Expected one of: {', '.join(TRANSPORTS)}"
        )

    raw_timeout = os.getenv("COOLIFY_TIMEOUT", str(DEFAULT_TIMEOUT))
    try:
        timeout = float(raw_timeout)
    except ValueError as exc:
        raise CoolifyConfigError(f"COOLIFY_TIMEOUT must be a number, got '{raw_timeout}'") from exc

    return Settings(
        base_url=base_url or os.getenv("COOLIFY_BASE_URL", ""),
        access_token=access_token or os.getenv("COOLIFY_ACCESS_TOKEN", ""),
        timeout=timeout,
        transport=resolved_transport,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )

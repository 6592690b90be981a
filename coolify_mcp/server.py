"""
Coolify MCP Server
==================
Exposes the Coolify platform API as MCP tools.

Start manually:
    python -m coolify_mcp.server

Environment:
    COOLIFY_BASE_URL, COOLIFY_ACCESS_TOKEN   required
    MCP_TRANSPORT                            stdio (default) | sse | streamable-http
"""

from __future__ import annotations

import asyncio
import enum
import logging
import sys
from typing import Any

import httpx
from mcp.server.fastmcp import FastMCP

from .client import CoolifyClient
from .config import load_settings
from .constants import DEFAULT_TIMEOUT, DEFAULT_TRANSPORT, SERVER_NAME, TRANSPORTS
from .errors import CoolifyConfigError
from .resources import ApplicationResources, register_resources
from .tools import register_tools
from .types import (
    Application,
    CreateServiceResponse,
    Database,
    Deployment,
    Environment,
    MessageResponse,
    Project,
    Resource,
    ServerDomain,
    ServerInfo,
    ServerResources,
    Service,
    ServiceInspection,
    UuidResponse,
    ValidationResponse,
)

logger = logging.getLogger("coolify-mcp")


class ServerState(str, enum.Enum):
    CONSTRUCTED = "constructed"
    INITIALIZED = "initialized"
    CONNECTED = "connected"


class CoolifyMcpServer:
    """
    Wires a ``CoolifyClient`` into a ``FastMCP`` instance.

    Lifecycle: constructed -> initialized -> connected, never backwards.
    ``initialize`` registers every tool once; ``connect`` validates that the
    Coolify server is reachable before registering anything and then runs the
    chosen transport. A connected server cannot be reconnected; build a new one.
    """

    def __init__(
        self,
        base_url: str,
        access_token: str,
        timeout: float = DEFAULT_TIMEOUT,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ):
        logger.debug("Initializing server for %s", base_url)
        self.client = CoolifyClient(base_url, access_token, timeout=timeout, transport=http_transport)
        self.mcp = FastMCP(SERVER_NAME)
        self.resources = ApplicationResources(self.client)
        self.state = ServerState.CONSTRUCTED

    def initialize(self) -> None:
        if self.state is not ServerState.CONSTRUCTED:
            raise RuntimeError(f"Cannot initialize a server in state '{self.state.value}'")
        register_tools(self.mcp, self.client)
        register_resources(self.mcp, self.resources)
        self.state = ServerState.INITIALIZED
        logger.info("Registered Coolify tools and resources")

    async def connect(self, transport: str = DEFAULT_TRANSPORT) -> None:
        if self.state is ServerState.CONNECTED:
            raise RuntimeError("Server is already connected; create a new instance to reconnect")
        runners = {
            "stdio": self.mcp.run_stdio_async,
            "sse": self.mcp.run_sse_async,
            "streamable-http": self.mcp.run_streamable_http_async,
        }
        if transport not in runners:
            raise CoolifyConfigError(
                f"Unknown MCP transport '{transport}'. Expected one of: {', '.join(TRANSPORTS)}"
            )

        logger.info("Starting server...")
        logger.info("Validating connection to %s", self.client.base_url)
        await self.client.validate_connection()

        if self.state is ServerState.CONSTRUCTED:
            self.initialize()
        self.state = ServerState.CONNECTED
        logger.info("Server started successfully (transport=%s)", transport)
        await runners[transport]()

    # ── Direct passthroughs for library use ─────────────────

    async def list_servers(self) -> list[ServerInfo]:
        return await self.client.list_servers()

    async def get_server(self, uuid: str) -> ServerInfo:
        return await self.client.get_server(uuid)

    async def get_server_resources(self, uuid: str) -> ServerResources:
        return await self.client.get_server_resources(uuid)

    async def get_server_domains(self, uuid: str) -> list[ServerDomain]:
        return await self.client.get_server_domains(uuid)

    async def validate_server(self, uuid: str) -> ValidationResponse:
        return await self.client.validate_server(uuid)

    async def list_projects(self) -> list[Project]:
        return await self.client.list_projects()

    async def get_project(self, uuid: str) -> Project:
        return await self.client.get_project(uuid)

    async def create_project(self, project: dict[str, Any]) -> UuidResponse:
        return await self.client.create_project(project)

    async def update_project(self, uuid: str, project: dict[str, Any]) -> Project:
        return await self.client.update_project(uuid, project)

    async def delete_project(self, uuid: str) -> MessageResponse:
        return await self.client.delete_project(uuid)

    async def get_project_environment(self, project_uuid: str, environment_name_or_uuid: str) -> Environment:
        return await self.client.get_project_environment(project_uuid, environment_name_or_uuid)

    async def list_environments(self) -> list[Environment]:
        return await self.client.list_environments()

    async def deploy_application(self, uuid: str) -> Deployment:
        return await self.client.deploy_application(uuid)

    async def list_databases(self) -> list[Database]:
        return await self.client.list_databases()

    async def get_database(self, uuid: str) -> Database:
        return await self.client.get_database(uuid)

    async def update_database(self, uuid: str, data: dict[str, Any]) -> Database:
        return await self.client.update_database(uuid, data)

    async def delete_database(self, uuid: str, **flags: bool) -> MessageResponse:
        return await self.client.delete_database(uuid, **flags)

    async def list_services(self) -> list[Service]:
        return await self.client.list_services()

    async def get_service(self, uuid: str) -> Service:
        return await self.client.get_service(uuid)

    async def create_service(self, data: dict[str, Any]) -> CreateServiceResponse:
        return await self.client.create_service(data)

    async def delete_service(self, uuid: str, **flags: bool) -> MessageResponse:
        return await self.client.delete_service(uuid, **flags)

    async def inspect_service(self, uuid: str) -> ServiceInspection:
        return await self.client.inspect_service(uuid)

    async def list_resources(self) -> list[Resource]:
        return await self.client.list_resources()

    async def list_applications(self) -> list[Application]:
        return await self.client.list_applications()

    async def get_application(self, uuid: str) -> Application:
        return await self.client.get_application(uuid)

    async def create_application(self, data: dict[str, Any]) -> UuidResponse:
        return await self.client.create_application(data)

    async def delete_application(self, uuid: str) -> MessageResponse:
        return await self.client.delete_application(uuid)


def main() -> None:
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stderr,
    )
    server = CoolifyMcpServer(settings.base_url, settings.access_token, timeout=settings.timeout)
    asyncio.run(server.connect(settings.transport))


if __name__ == "__main__":
    main()

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from mcp.server.fastmcp import FastMCP

from .client import CoolifyClient
from .tools import to_text
from .types import Application, MessageResponse, UuidResponse

logger = logging.getLogger("coolify-mcp")

Handler = Callable[..., Awaitable[Any]]


class ApplicationResources:
    """Route table for application resources.

    Maps a route key such as ``coolify/applications/{id}`` to a
    ``(description, handler)`` pair. Routes are added by ``_register`` calls in
    ``__init__``; ``dispatch`` looks one up and awaits its handler.
    """

    def __init__(self, client: CoolifyClient):
        self.client = client
        self.routes: dict[str, tuple[str, Handler]] = {}

        self._register("coolify/applications/list", "List all Coolify applications", self.list_applications)
        self._register("coolify/applications/{id}", "Get a Coolify application", self.get_application)
        self._register("coolify/applications/create", "Create a Coolify application", self.create_application)
        self._register("coolify/applications/{id}/delete", "Delete a Coolify application", self.delete_application)

    def _register(self, route: str, description: str, handler: Handler) -> None:
        if route in self.routes:
            raise ValueError(f"Route already registered: {route}")
        self.routes[route] = (description, handler)

    async def dispatch(self, route: str, *args: Any) -> Any:
        try:
            _, handler = self.routes[route]
        except KeyError:
            raise KeyError(f"Unknown application route: {route}") from None
        logger.debug("resource_dispatch route=%s", route)
        return await handler(*args)

    async def list_applications(self) -> list[Application]:
        return await self.client.list_applications()

    async def get_application(self, id: str) -> Application:
        return await self.client.get_application(id)

    async def create_application(self, data: dict[str, Any]) -> UuidResponse:
        return await self.client.create_application(data)

    async def delete_application(self, id: str) -> MessageResponse:
        return await self.client.delete_application(id)


def register_resources(mcp: FastMCP, resources: ApplicationResources) -> None:
    """Publish the read-only application routes as MCP resources."""

    list_description, _ = resources.routes["coolify/applications/list"]
    get_description, _ = resources.routes["coolify/applications/{id}"]

    @mcp.resource(
        "coolify://applications",
        name="applications",
        description=list_description,
        mime_type="application/json",
    )
    async def applications() -> str:
        return to_text(await resources.dispatch("coolify/applications/list"))

    @mcp.resource(
        "coolify://applications/{uuid}",
        name="application",
        description=get_description,
        mime_type="application/json",
    )
    async def application(uuid: str) -> str:
        return to_text(await resources.dispatch("coolify/applications/{id}", uuid))

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote, urlencode

import httpx

from .constants import API_PREFIX, CONNECTION_FAILED_MESSAGE, DEFAULT_TIMEOUT
from .errors import (
    CoolifyAPIError,
    CoolifyConfigError,
    CoolifyConnectionError,
    CoolifyResponseError,
)
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

logger = logging.getLogger("coolify-client")


def _segment(value: str, field: str) -> str:
    if not value:
        raise ValueError(f"{field} is required")
    return quote(value, safe="")


def cleanup_query(
    delete_configurations: bool | None = None,
    delete_volumes: bool | None = None,
    docker_cleanup: bool | None = None,
    delete_connected_networks: bool | None = None,
) -> str:
    """Render the deletion flags that were explicitly set as ``?key=true&...``.

    Unset (``None``) flags are left out entirely; with no flags set the result
    is an empty string so no ``?`` is appended.
    """
    flags = {
        "delete_configurations": delete_configurations,
        "delete_volumes": delete_volumes,
        "docker_cleanup": docker_cleanup,
        "delete_connected_networks": delete_connected_networks,
    }
    params = {key: str(value).lower() for key, value in flags.items() if value is not None}
    return f"?{urlencode(params)}" if params else ""


class CoolifyClient:
    """
    Async HTTP client for the Coolify REST API.

    The instance only holds its base URL, token and timeout, none of which
    change after construction, so one client is shared by every tool handler
    without locking. Each call opens its own ``httpx.AsyncClient``.
    """

    def __init__(
        self,
        base_url: str,
        access_token: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        if not (base_url or "").strip():
            raise CoolifyConfigError("Coolify base URL is required")
        if not (access_token or "").strip():
            raise CoolifyConfigError("Coolify access token is required")
        self.base_url = base_url.strip().rstrip("/")
        self.access_token = access_token
        self.timeout = timeout
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.access_token}",
        }

    async def request(self, method: str, path: str, json_body: Any = None) -> Any:
        url = f"{self.base_url}{API_PREFIX}{path}"
        logger.debug("%s %s", method, path)

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.request(method, url, headers=self._headers(), json=json_body)
        except httpx.TransportError as exc:
            logger.warning("transport failure %s %s: %s", method, path, exc)
            raise CoolifyConnectionError(CONNECTION_FAILED_MESSAGE.format(base_url=self.base_url)) from exc

        data = self._parse_body(resp)

        if not resp.is_success:
            message = data.get("message") if isinstance(data, dict) else None
            if not message:
                message = f"HTTP {resp.status_code}: {resp.reason_phrase}"
            logger.warning("coolify error %s %s -> %s: %s", method, path, resp.status_code, message)
            raise CoolifyAPIError(message, status_code=resp.status_code)

        return data

    @staticmethod
    def _parse_body(resp: httpx.Response) -> Any:
        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as exc:
            if resp.is_success:
                raise CoolifyResponseError(
                    f"Invalid JSON in Coolify response (HTTP {resp.status_code})",
                    status_code=resp.status_code,
                ) from exc
            return None

    # ── Servers ─────────────────────────────────────────────

    async def list_servers(self) -> list[ServerInfo]:
        return await self.request("GET", "/servers")

    async def get_server(self, uuid: str) -> ServerInfo:
        return await self.request("GET", f"/servers/{_segment(uuid, 'uuid')}")

    async def get_server_resources(self, uuid: str) -> ServerResources:
        return await self.request("GET", f"/servers/{_segment(uuid, 'uuid')}/resources")

    async def get_server_domains(self, uuid: str) -> list[ServerDomain]:
        return await self.request("GET", f"/servers/{_segment(uuid, 'uuid')}/domains")

    async def validate_server(self, uuid: str) -> ValidationResponse:
        return await self.request("GET", f"/servers/{_segment(uuid, 'uuid')}/validate")

    async def validate_connection(self) -> None:
        """Check the platform is reachable with a server listing.

        Any failure is rewrapped as CoolifyConnectionError with a
        "Failed to connect to Coolify server: " prefix, even when the inner
        message already says the same thing; callers match on that prefix.
        """
        try:
            await self.list_servers()
        except Exception as exc:
            raise CoolifyConnectionError(f"Failed to connect to Coolify server: {exc}") from exc

    # ── Projects & environments ─────────────────────────────

    async def list_projects(self) -> list[Project]:
        return await self.request("GET", "/projects")

    async def get_project(self, uuid: str) -> Project:
        return await self.request("GET", f"/projects/{_segment(uuid, 'uuid')}")

    async def create_project(self, project: dict[str, Any]) -> UuidResponse:
        return await self.request("POST", "/projects", json_body=project)

    async def update_project(self, uuid: str, project: dict[str, Any]) -> Project:
        return await self.request("PATCH", f"/projects/{_segment(uuid, 'uuid')}", json_body=project)

    async def delete_project(self, uuid: str) -> MessageResponse:
        return await self.request("DELETE", f"/projects/{_segment(uuid, 'uuid')}")

    async def get_project_environment(self, project_uuid: str, environment_name_or_uuid: str) -> Environment:
        project = _segment(project_uuid, "project_uuid")
        environment = _segment(environment_name_or_uuid, "environment_name_or_uuid")
        return await self.request("GET", f"/projects/{project}/{environment}")

    async def list_environments(self) -> list[Environment]:
        return await self.request("GET", "/environments")

    # ── Databases ───────────────────────────────────────────

    async def list_databases(self) -> list[Database]:
        return await self.request("GET", "/databases")

    async def get_database(self, uuid: str) -> Database:
        return await self.request("GET", f"/databases/{_segment(uuid, 'uuid')}")

    async def update_database(self, uuid: str, data: dict[str, Any]) -> Database:
        return await self.request("PATCH", f"/databases/{_segment(uuid, 'uuid')}", json_body=data)

    async def delete_database(
        self,
        uuid: str,
        delete_configurations: bool | None = None,
        delete_volumes: bool | None = None,
        docker_cleanup: bool | None = None,
        delete_connected_networks: bool | None = None,
    ) -> MessageResponse:
        query = cleanup_query(
            delete_configurations=delete_configurations,
            delete_volumes=delete_volumes,
            docker_cleanup=docker_cleanup,
            delete_connected_networks=delete_connected_networks,
        )
        return await self.request("DELETE", f"/databases/{_segment(uuid, 'uuid')}{query}")

    # ── Services ────────────────────────────────────────────

    async def list_services(self) -> list[Service]:
        return await self.request("GET", "/services")

    async def get_service(self, uuid: str) -> Service:
        return await self.request("GET", f"/services/{_segment(uuid, 'uuid')}")

    async def create_service(self, data: dict[str, Any]) -> CreateServiceResponse:
        return await self.request("POST", "/services", json_body=data)

    async def delete_service(
        self,
        uuid: str,
        delete_configurations: bool | None = None,
        delete_volumes: bool | None = None,
        docker_cleanup: bool | None = None,
        delete_connected_networks: bool | None = None,
    ) -> MessageResponse:
        query = cleanup_query(
            delete_configurations=delete_configurations,
            delete_volumes=delete_volumes,
            docker_cleanup=docker_cleanup,
            delete_connected_networks=delete_connected_networks,
        )
        return await self.request("DELETE", f"/services/{_segment(uuid, 'uuid')}{query}")

    async def inspect_service(self, uuid: str) -> ServiceInspection:
        return await self.request("GET", f"/services/{_segment(uuid, 'uuid')}/inspect")

    # ── Resources ───────────────────────────────────────────

    async def list_resources(self) -> list[Resource]:
        return await self.request("GET", "/resources")

    # ── Applications ────────────────────────────────────────

    async def list_applications(self) -> list[Application]:
        return await self.request("GET", "/applications")

    async def get_application(self, uuid: str) -> Application:
        return await self.request("GET", f"/applications/{_segment(uuid, 'uuid')}")

    async def create_application(self, data: dict[str, Any]) -> UuidResponse:
        return await self.request("POST", "/applications", json_body=data)

    async def delete_application(self, uuid: str) -> MessageResponse:
        return await self.request("DELETE", f"/applications/{_segment(uuid, 'uuid')}")

    async def deploy_application(self, uuid: str) -> Deployment:
        return await self.request("POST", f"/applications/{_segment(uuid, 'uuid')}/deploy")

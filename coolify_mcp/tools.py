"""Tool registrations for the Coolify MCP server."""

import json
import logging
from typing import Any, Dict, Optional

from mcp.server.fastmcp import FastMCP

from .client import CoolifyClient
from .constants import ServiceType
from .models import (
    CreateApplicationRequest,
    CreateProjectRequest,
    CreateServiceRequest,
    DeleteOptions,
    DeleteResourceRequest,
    ProjectEnvironmentRequest,
    UpdateDatabaseRequest,
    UpdateProjectRequest,
    UuidRequest,
)

logger = logging.getLogger("coolify-mcp")


def to_text(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def register_tools(mcp: FastMCP, client: CoolifyClient) -> None:
    """Register one tool per Coolify API operation on ``mcp``.

    Handlers never catch client errors; FastMCP turns them into failed tool
    calls carrying the error message.
    """

    # ── Servers ─────────────────────────────────────────────

    @mcp.tool(description="List all Coolify servers", structured_output=False)
    async def list_servers() -> str:
        logger.info("tool_call list_servers")
        return to_text(await client.list_servers())

    @mcp.tool(description="Get details about a specific Coolify server", structured_output=False)
    async def get_server(uuid: str) -> str:
        payload = UuidRequest(uuid=uuid)
        logger.info("tool_call get_server uuid=%s", payload.uuid)
        return to_text(await client.get_server(payload.uuid))

    @mcp.tool(
        description="Get the current resources running on a specific Coolify server",
        structured_output=False,
    )
    async def get_server_resources(uuid: str) -> str:
        payload = UuidRequest(uuid=uuid)
        logger.info("tool_call get_server_resources uuid=%s", payload.uuid)
        return to_text(await client.get_server_resources(payload.uuid))

    @mcp.tool(description="Get domains for a specific Coolify server", structured_output=False)
    async def get_server_domains(uuid: str) -> str:
        payload = UuidRequest(uuid=uuid)
        logger.info("tool_call get_server_domains uuid=%s", payload.uuid)
        return to_text(await client.get_server_domains(payload.uuid))

    @mcp.tool(description="Validate a specific Coolify server", structured_output=False)
    async def validate_server(uuid: str) -> str:
        payload = UuidRequest(uuid=uuid)
        logger.info("tool_call validate_server uuid=%s", payload.uuid)
        return to_text(await client.validate_server(payload.uuid))

    # ── Projects & environments ─────────────────────────────

    @mcp.tool(description="List all Coolify projects", structured_output=False)
    async def list_projects() -> str:
        logger.info("tool_call list_projects")
        return to_text(await client.list_projects())

    @mcp.tool(description="Get details about a specific Coolify project", structured_output=False)
    async def get_project(uuid: str) -> str:
        payload = UuidRequest(uuid=uuid)
        logger.info("tool_call get_project uuid=%s", payload.uuid)
        return to_text(await client.get_project(payload.uuid))

    @mcp.tool(description="Create a new Coolify project", structured_output=False)
    async def create_project(name: str, description: Optional[str] = None) -> str:
        payload = CreateProjectRequest(name=name, description=description)
        logger.info("tool_call create_project name=%s", payload.name)
        return to_text(await client.create_project(payload.model_dump(exclude_none=True)))

    @mcp.tool(description="Update an existing Coolify project", structured_output=False)
    async def update_project(uuid: str, name: str, description: Optional[str] = None) -> str:
        payload = UpdateProjectRequest(uuid=uuid, name=name, description=description)
        logger.info("tool_call update_project uuid=%s", payload.uuid)
        body = payload.model_dump(exclude={"uuid"}, exclude_none=True)
        return to_text(await client.update_project(payload.uuid, body))

    @mcp.tool(description="Delete a Coolify project", structured_output=False)
    async def delete_project(uuid: str) -> str:
        payload = UuidRequest(uuid=uuid)
        logger.info("tool_call delete_project uuid=%s", payload.uuid)
        return to_text(await client.delete_project(payload.uuid))

    @mcp.tool(description="Get environment details for a Coolify project", structured_output=False)
    async def get_project_environment(project_uuid: str, environment_name_or_uuid: str) -> str:
        payload = ProjectEnvironmentRequest(
            project_uuid=project_uuid,
            environment_name_or_uuid=environment_name_or_uuid,
        )
        logger.info(
            "tool_call get_project_environment project_uuid=%s environment=%s",
            payload.project_uuid,
            payload.environment_name_or_uuid,
        )
        return to_text(
            await client.get_project_environment(payload.project_uuid, payload.environment_name_or_uuid)
        )

    @mcp.tool(description="List all Coolify environments", structured_output=False)
    async def list_environments() -> str:
        logger.info("tool_call list_environments")
        return to_text(await client.list_environments())

    # ── Databases ───────────────────────────────────────────

    @mcp.tool(description="List all Coolify databases", structured_output=False)
    async def list_databases() -> str:
        logger.info("tool_call list_databases")
        return to_text(await client.list_databases())

    @mcp.tool(description="Get details about a specific Coolify database", structured_output=False)
    async def get_database(uuid: str) -> str:
        payload = UuidRequest(uuid=uuid)
        logger.info("tool_call get_database uuid=%s", payload.uuid)
        return to_text(await client.get_database(payload.uuid))

    @mcp.tool(description="Update a Coolify database", structured_output=False)
    async def update_database(uuid: str, data: Dict[str, Any]) -> str:
        payload = UpdateDatabaseRequest(uuid=uuid, data=data)
        logger.info("tool_call update_database uuid=%s fields=%s", payload.uuid, sorted(payload.data))
        return to_text(await client.update_database(payload.uuid, payload.data))

    @mcp.tool(description="Delete a Coolify database", structured_output=False)
    async def delete_database(uuid: str, options: Optional[DeleteOptions] = None) -> str:
        payload = DeleteResourceRequest(uuid=uuid, options=options)
        flags = payload.flags()
        logger.info("tool_call delete_database uuid=%s flags=%s", payload.uuid, flags)
        return to_text(await client.delete_database(payload.uuid, **flags))

    # ── Applications ────────────────────────────────────────

    @mcp.tool(description="Deploy a Coolify application", structured_output=False)
    async def deploy_application(uuid: str) -> str:
        payload = UuidRequest(uuid=uuid)
        logger.info("tool_call deploy_application uuid=%s", payload.uuid)
        return to_text(await client.deploy_application(payload.uuid))

    @mcp.tool(description="List all Coolify applications", structured_output=False)
    async def list_applications() -> str:
        logger.info("tool_call list_applications")
        return to_text(await client.list_applications())

    @mcp.tool(description="Get details about a specific Coolify application", structured_output=False)
    async def get_application(uuid: str) -> str:
        payload = UuidRequest(uuid=uuid)
        logger.info("tool_call get_application uuid=%s", payload.uuid)
        return to_text(await client.get_application(payload.uuid))

    @mcp.tool(description="Create a new Coolify application", structured_output=False)
    async def create_application(
        name: str,
        description: Optional[str] = None,
        project_uuid: Optional[str] = None,
        environment_uuid: Optional[str] = None,
        server_uuid: Optional[str] = None,
        repository: Optional[str] = None,
        branch: Optional[str] = None,
    ) -> str:
        payload = CreateApplicationRequest(
            name=name,
            description=description,
            project_uuid=project_uuid,
            environment_uuid=environment_uuid,
            server_uuid=server_uuid,
            repository=repository,
            branch=branch,
        )
        logger.info("tool_call create_application name=%s", payload.name)
        return to_text(await client.create_application(payload.model_dump(exclude_none=True)))

    @mcp.tool(description="Delete a Coolify application", structured_output=False)
    async def delete_application(uuid: str) -> str:
        payload = UuidRequest(uuid=uuid)
        logger.info("tool_call delete_application uuid=%s", payload.uuid)
        return to_text(await client.delete_application(payload.uuid))

    # ── Services ────────────────────────────────────────────

    @mcp.tool(description="List all Coolify services", structured_output=False)
    async def list_services() -> str:
        logger.info("tool_call list_services")
        return to_text(await client.list_services())

    @mcp.tool(description="Get details about a specific Coolify service", structured_output=False)
    async def get_service(uuid: str) -> str:
        payload = UuidRequest(uuid=uuid)
        logger.info("tool_call get_service uuid=%s", payload.uuid)
        return to_text(await client.get_service(payload.uuid))

    @mcp.tool(description="Inspect a specific Coolify service", structured_output=False)
    async def inspect_service(uuid: str) -> str:
        payload = UuidRequest(uuid=uuid)
        logger.info("tool_call inspect_service uuid=%s", payload.uuid)
        return to_text(await client.inspect_service(payload.uuid))

    @mcp.tool(description="Create a new Coolify service", structured_output=False)
    async def create_service(
        type: ServiceType,
        project_uuid: str,
        server_uuid: str,
        name: Optional[str] = None,
        description: Optional[str] = None,
        environment_name: Optional[str] = None,
        environment_uuid: Optional[str] = None,
        destination_uuid: Optional[str] = None,
        instant_deploy: Optional[bool] = None,
    ) -> str:
        payload = CreateServiceRequest(
            type=type,
            project_uuid=project_uuid,
            server_uuid=server_uuid,
            name=name,
            description=description,
            environment_name=environment_name,
            environment_uuid=environment_uuid,
            destination_uuid=destination_uuid,
            instant_deploy=instant_deploy,
        )
        logger.info(
            "tool_call create_service type=%s project_uuid=%s server_uuid=%s",
            payload.type,
            payload.project_uuid,
            payload.server_uuid,
        )
        return to_text(await client.create_service(payload.model_dump(exclude_none=True)))

    @mcp.tool(description="Delete a Coolify service", structured_output=False)
    async def delete_service(uuid: str, options: Optional[DeleteOptions] = None) -> str:
        payload = DeleteResourceRequest(uuid=uuid, options=options)
        flags = payload.flags()
        logger.info("tool_call delete_service uuid=%s flags=%s", payload.uuid, flags)
        return to_text(await client.delete_service(payload.uuid, **flags))

    # ── Resources ───────────────────────────────────────────

    @mcp.tool(description="List all Coolify resources", structured_output=False)
    async def list_resources() -> str:
        logger.info("tool_call list_resources")
        return to_text(await client.list_resources())

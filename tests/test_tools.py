"""Tests for the MCP tool registrations."""

from __future__ import annotations

import pytest
from mcp.server.fastmcp.exceptions import ToolError

from coolify_mcp.constants import SERVICE_TYPES
from coolify_mcp.errors import CoolifyAPIError, CoolifyConnectionError

from conftest import BASE_URL, content_json, content_text

TOOL_NAMES = {
    "list_servers",
    "get_server",
    "get_server_resources",
    "get_server_domains",
    "validate_server",
    "list_projects",
    "get_project",
    "create_project",
    "update_project",
    "delete_project",
    "get_project_environment",
    "list_environments",
    "list_databases",
    "get_database",
    "update_database",
    "delete_database",
    "deploy_application",
    "list_services",
    "get_service",
    "inspect_service",
    "create_service",
    "delete_service",
    "list_resources",
    "list_applications",
    "get_application",
    "create_application",
    "delete_application",
}

UUID_TOOLS = [
    "get_server",
    "get_server_resources",
    "get_server_domains",
    "validate_server",
    "get_project",
    "delete_project",
    "get_database",
    "delete_database",
    "deploy_application",
    "get_service",
    "inspect_service",
    "delete_service",
    "get_application",
    "delete_application",
]


# ---------------------------------------------------------------------------
# Registration & schemas
# ---------------------------------------------------------------------------

class TestRegistration:
    @pytest.mark.asyncio
    async def test_every_operation_is_a_tool(self, tool_server):
        tools = await tool_server.list_tools()
        assert {tool.name for tool in tools} == TOOL_NAMES
        assert all(tool.description for tool in tools)

    @pytest.mark.asyncio
    async def test_create_service_type_is_closed_enum(self, tool_server):
        tools = {tool.name: tool for tool in await tool_server.list_tools()}
        schema = tools["create_service"].inputSchema

        assert set(schema["properties"]["type"]["enum"]) == set(SERVICE_TYPES)
        assert set(schema["required"]) == {"type", "project_uuid", "server_uuid"}

    @pytest.mark.asyncio
    async def test_optional_fields_are_not_required(self, tool_server):
        tools = {tool.name: tool for tool in await tool_server.list_tools()}

        assert tools["create_project"].inputSchema["required"] == ["name"]
        assert tools["create_application"].inputSchema["required"] == ["name"]
        assert set(tools["delete_database"].inputSchema["required"]) == {"uuid"}
        assert "required" not in tools["list_servers"].inputSchema or not tools["list_servers"].inputSchema["required"]


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

class TestResults:
    @pytest.mark.asyncio
    async def test_list_applications_round_trip(self, tool_server, mock_client):
        applications = [{"uuid": "app-1", "name": "App 1"}]
        mock_client.list_applications.return_value = applications

        result = await tool_server.call_tool("list_applications", {})

        assert content_json(result) == applications
        mock_client.list_applications.assert_awaited_once_with()

    @pytest.mark.asyncio
    async def test_result_is_pretty_printed(self, tool_server, mock_client):
        mock_client.get_server.return_value = {"uuid": "srv-1", "name": "main"}

        result = await tool_server.call_tool("get_server", {"uuid": "srv-1"})

        assert content_text(result) == '{\n  "uuid": "srv-1",\n  "name": "main"\n}'
        mock_client.get_server.assert_awaited_once_with("srv-1")

    @pytest.mark.asyncio
    async def test_create_application_passes_arguments_through(self, tool_server, mock_client):
        mock_client.create_application.return_value = {"uuid": "created-app"}

        result = await tool_server.call_tool("create_application", {"name": "test-app"})

        assert content_json(result) == {"uuid": "created-app"}
        mock_client.create_application.assert_awaited_once_with({"name": "test-app"})

    @pytest.mark.asyncio
    async def test_create_project_drops_unset_description(self, tool_server, mock_client):
        mock_client.create_project.return_value = {"uuid": "proj-1"}

        await tool_server.call_tool("create_project", {"name": "demo"})

        mock_client.create_project.assert_awaited_once_with({"name": "demo"})

    @pytest.mark.asyncio
    async def test_update_project_splits_uuid_from_body(self, tool_server, mock_client):
        mock_client.update_project.return_value = {"uuid": "proj-1", "name": "renamed"}

        await tool_server.call_tool(
            "update_project", {"uuid": "proj-1", "name": "renamed", "description": "new"}
        )

        mock_client.update_project.assert_awaited_once_with("proj-1", {"name": "renamed", "description": "new"})

    @pytest.mark.asyncio
    async def test_get_project_environment(self, tool_server, mock_client):
        mock_client.get_project_environment.return_value = {"name": "production"}

        await tool_server.call_tool(
            "get_project_environment", {"project_uuid": "proj-1", "environment_name_or_uuid": "production"}
        )

        mock_client.get_project_environment.assert_awaited_once_with("proj-1", "production")

    @pytest.mark.asyncio
    async def test_update_database_forwards_data(self, tool_server, mock_client):
        mock_client.update_database.return_value = {"uuid": "db-1"}

        await tool_server.call_tool("update_database", {"uuid": "db-1", "data": {"is_public": True}})

        mock_client.update_database.assert_awaited_once_with("db-1", {"is_public": True})

    @pytest.mark.asyncio
    @pytest.mark.parametrize("tool_name", ["delete_database", "delete_service"])
    async def test_delete_forwards_only_given_flags(self, tool_server, mock_client, tool_name):
        getattr(mock_client, tool_name).return_value = {"message": "deleted"}

        await tool_server.call_tool(
            tool_name, {"uuid": "res-1", "options": {"delete_volumes": True, "docker_cleanup": False}}
        )

        getattr(mock_client, tool_name).assert_awaited_once_with(
            "res-1", delete_volumes=True, docker_cleanup=False
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize("tool_name", ["delete_database", "delete_service"])
    async def test_delete_without_options(self, tool_server, mock_client, tool_name):
        getattr(mock_client, tool_name).return_value = {"message": "deleted"}

        await tool_server.call_tool(tool_name, {"uuid": "res-1"})

        getattr(mock_client, tool_name).assert_awaited_once_with("res-1")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("tool_name", ["delete_database", "delete_service"])
    async def test_delete_accepts_camel_case_flags(self, tool_server, mock_client, tool_name):
        getattr(mock_client, tool_name).return_value = {"message": "deleted"}

        await tool_server.call_tool(
            tool_name,
            {
                "uuid": "res-1",
                "options": {
                    "deleteConfigurations": True,
                    "deleteVolumes": True,
                    "dockerCleanup": False,
                    "deleteConnectedNetworks": False,
                },
            },
        )

        getattr(mock_client, tool_name).assert_awaited_once_with(
            "res-1",
            delete_configurations=True,
            delete_volumes=True,
            docker_cleanup=False,
            delete_connected_networks=False,
        )

    @pytest.mark.asyncio
    async def test_create_service(self, tool_server, mock_client):
        mock_client.create_service.return_value = {"uuid": "svc-1", "domains": ["ghost.example.com"]}

        result = await tool_server.call_tool(
            "create_service",
            {"type": "ghost", "project_uuid": "proj-1", "server_uuid": "srv-1", "instant_deploy": True},
        )

        assert content_json(result) == {"uuid": "svc-1", "domains": ["ghost.example.com"]}
        mock_client.create_service.assert_awaited_once_with(
            {"type": "ghost", "project_uuid": "proj-1", "server_uuid": "srv-1", "instant_deploy": True}
        )


# ---------------------------------------------------------------------------
# Validation & errors
# ---------------------------------------------------------------------------

class TestValidation:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("tool_name", UUID_TOOLS)
    async def test_missing_uuid_makes_no_call(self, tool_server, mock_client, tool_name):
        with pytest.raises(ToolError):
            await tool_server.call_tool(tool_name, {})
        getattr(mock_client, tool_name).assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("tool_name", UUID_TOOLS)
    async def test_empty_uuid_makes_no_call(self, tool_server, mock_client, tool_name):
        with pytest.raises(ToolError):
            await tool_server.call_tool(tool_name, {"uuid": ""})
        getattr(mock_client, tool_name).assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_environment_makes_no_call(self, tool_server, mock_client):
        with pytest.raises(ToolError):
            await tool_server.call_tool("get_project_environment", {"project_uuid": "proj-1"})
        mock_client.get_project_environment.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_service_type_makes_no_call(self, tool_server, mock_client):
        with pytest.raises(ToolError):
            await tool_server.call_tool(
                "create_service",
                {"type": "not-a-template", "project_uuid": "proj-1", "server_uuid": "srv-1"},
            )
        mock_client.create_service.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("tool_name", ["delete_database", "delete_service"])
    async def test_unknown_delete_option_makes_no_call(self, tool_server, mock_client, tool_name):
        with pytest.raises(ToolError):
            await tool_server.call_tool(tool_name, {"uuid": "res-1", "options": {"delete_volume": True}})
        getattr(mock_client, tool_name).assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_service_requires_server(self, tool_server, mock_client):
        with pytest.raises(ToolError):
            await tool_server.call_tool("create_service", {"type": "ghost", "project_uuid": "proj-1"})
        mock_client.create_service.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_upstream_message_surfaces(self, tool_server, mock_client):
        mock_client.get_application.side_effect = CoolifyAPIError("Not found", status_code=404)

        with pytest.raises(ToolError, match="Not found"):
            await tool_server.call_tool("get_application", {"uuid": "missing-id"})

    @pytest.mark.asyncio
    async def test_connection_error_surfaces(self, tool_server, mock_client):
        mock_client.list_servers.side_effect = CoolifyConnectionError(
            f"Failed to connect to Coolify server at {BASE_URL}."
        )

        with pytest.raises(ToolError, match="coolify.example.com"):
            await tool_server.call_tool("list_servers", {})

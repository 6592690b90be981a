"""Per-operation input models, validated before any call reaches the client."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from .constants import ServiceType


class UuidRequest(BaseModel):
    uuid: str = Field(..., min_length=1, description="UUID of the Coolify resource")


class ProjectEnvironmentRequest(BaseModel):
    project_uuid: str = Field(..., min_length=1)
    environment_name_or_uuid: str = Field(..., min_length=1)


class CreateProjectRequest(BaseModel):
    name: str
    description: Optional[str] = None


class UpdateProjectRequest(BaseModel):
    uuid: str = Field(..., min_length=1)
    name: str
    description: Optional[str] = None


class UpdateDatabaseRequest(BaseModel):
    uuid: str = Field(..., min_length=1)
    data: Dict[str, Any]


class DeleteOptions(BaseModel):
    """Cleanup flags for database and service deletion. Unset flags are not sent.

    Accepts the camelCase keys or the snake_case query names. Unknown keys are
    rejected so a misspelled flag never turns into a bare delete.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    delete_configurations: Optional[bool] = Field(None, alias="deleteConfigurations")
    delete_volumes: Optional[bool] = Field(None, alias="deleteVolumes")
    docker_cleanup: Optional[bool] = Field(None, alias="dockerCleanup")
    delete_connected_networks: Optional[bool] = Field(None, alias="deleteConnectedNetworks")


class DeleteResourceRequest(BaseModel):
    uuid: str = Field(..., min_length=1)
    options: Optional[DeleteOptions] = None

    def flags(self) -> Dict[str, bool]:
        if self.options is None:
            return {}
        return self.options.model_dump(exclude_none=True, by_alias=False)


class CreateServiceRequest(BaseModel):
    type: ServiceType
    project_uuid: str = Field(..., min_length=1)
    server_uuid: str = Field(..., min_length=1)
    name: Optional[str] = None
    description: Optional[str] = None
    environment_name: Optional[str] = None
    environment_uuid: Optional[str] = None
    destination_uuid: Optional[str] = None
    instant_deploy: Optional[bool] = None


class CreateApplicationRequest(BaseModel):
    name: str
    description: Optional[str] = None
    project_uuid: Optional[str] = None
    environment_uuid: Optional[str] = None
    server_uuid: Optional[str] = None
    repository: Optional[str] = None
    branch: Optional[str] = None

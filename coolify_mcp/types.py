"""Shapes of the records returned by the Coolify API.

These are annotations only. The client hands back parsed JSON untouched, so
fields the platform adds or drops simply pass through.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, TypedDict


class ServerInfo(TypedDict, total=False):
    uuid: str
    name: str
    description: Optional[str]
    ip: str
    port: int
    user: str
    is_reachable: bool
    is_usable: bool
    settings: Dict[str, Any]


class ServerResource(TypedDict, total=False):
    uuid: str
    name: str
    type: str
    status: str
    created_at: str
    updated_at: str


ServerResources = List[ServerResource]


class ServerDomain(TypedDict, total=False):
    ip: str
    domains: List[str]


class ValidationResponse(TypedDict, total=False):
    message: str


class Environment(TypedDict, total=False):
    id: int
    uuid: str
    name: str
    project_id: int
    description: Optional[str]
    created_at: str
    updated_at: str


class Project(TypedDict, total=False):
    id: int
    uuid: str
    name: str
    description: Optional[str]
    environments: List[Environment]


class Resource(TypedDict, total=False):
    id: int
    uuid: str
    name: str
    type: str
    status: str


class Deployment(TypedDict, total=False):
    id: int
    uuid: str
    deployment_uuid: str
    application_uuid: str
    status: str
    message: str
    created_at: str


class Database(TypedDict, total=False):
    id: int
    uuid: str
    name: str
    description: Optional[str]
    type: str
    status: str
    image: str
    is_public: bool
    public_port: Optional[int]


class Service(TypedDict, total=False):
    id: int
    uuid: str
    name: str
    description: Optional[str]
    type: str
    status: str
    domains: List[str]


class ServiceInspection(TypedDict, total=False):
    uuid: str
    name: str
    status: str
    containers: List[Dict[str, Any]]


class Application(TypedDict, total=False):
    id: int
    uuid: str
    name: str
    description: Optional[str]
    fqdn: Optional[str]
    git_repository: Optional[str]
    git_branch: Optional[str]
    status: str


class UuidResponse(TypedDict):
    uuid: str


class CreateServiceResponse(TypedDict, total=False):
    uuid: str
    domains: List[str]


class MessageResponse(TypedDict):
    message: str

"""
MEL Resources - Public API
==========================
"""

from core.resources.base import CreatedResource, Resource
from core.resources.clients import ClientsResource
from core.resources.deliverables import DeliverableListResource, DeliverableResource
from core.resources.errors import (
    InvalidBody,
    InvalidMethod,
    InvalidResource,
    ResourceError,
)
from core.resources.flag import FlagResource
from core.resources.login import LoginResource
from core.resources.projects import ProjectListResource, ProjectResource, remove_owner
from core.resources.resolver import LOGIN_PATH, RESOURCE_ROUTES, resolve_resource

__all__ = [
    "Resource",
    "CreatedResource",
    "ResourceError",
    "InvalidResource",
    "InvalidBody",
    "InvalidMethod",
    "LoginResource",
    "ProjectListResource",
    "ProjectResource",
    "FlagResource",
    "ClientsResource",
    "DeliverableListResource",
    "DeliverableResource",
    "LOGIN_PATH",
    "RESOURCE_ROUTES",
    "resolve_resource",
    "remove_owner",
]

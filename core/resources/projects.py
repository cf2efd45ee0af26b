"""
MEL Resources - Project List and Project
========================================
"""

from __future__ import annotations

import logging
from typing import Any

from core.permissions.capabilities import project_capabilities, project_list_capabilities
from core.permissions.constants import Capability
from core.resources.base import CreatedResource, Resource
from core.resources.contracts import decode_project_body, encode_project
from core.resources.errors import InvalidBody, InvalidResource
from core.store.models import PROJECT_TABLE, ProjectRecord
from core.store.provider import allocate_unused_id

logger = logging.getLogger("mel.resources")


def project_location(pid: int) -> str:
    return f"/projects/{pid}"


def remove_owner(store, username: str, pid: int) -> bool:
    """
    Drop one owner from a project and garbage-collect the project when no
    owner is left: viewers, then deliverables, then the project row.

    Each step is committed on its own. A failure part way through leaves the
    project partially cleaned up; nothing is rolled back.
    Returns True when the project was deleted.
    """
    store.delete_owns(username, pid)
    if store.count_owners(pid) > 0:
        return False
    store.delete_views_for_project(pid)
    store.delete_deliverables_for_project(pid)
    store.delete_project(pid)
    logger.info("Deleted project %s after its last owner '%s' left.", pid, username)
    return True


class ProjectListResource(Resource):
    def __init__(self, *, username: str, is_manager: bool, dependencies):
        self.username = username
        self._mask = project_list_capabilities(is_manager=is_manager)
        self._dependencies = dependencies

    def permissions(self) -> Capability:
        return self._mask

    def get(self) -> list[int]:
        store = self._dependencies.store
        owned = store.owned_project_ids(self.username)
        viewed = store.viewed_project_ids(self.username)
        return list(owned) + list(viewed)

    def create(self, payload: Any) -> CreatedResource:
        body = decode_project_body(payload)
        store = self._dependencies.store
        pid = allocate_unused_id(
            store,
            self._dependencies.id_allocator,
            table=PROJECT_TABLE,
        )
        project = ProjectRecord(
            id=pid,
            name=body.name,
            percentage=body.percentage,
            description=body.description,
            updated=body.updated or self._dependencies.clock.today(),
        )
        store.insert_project(project)
        store.insert_owns(self.username, pid)
        return CreatedResource(
            location=project_location(pid),
            representation=encode_project(project, owns=True),
        )


class ProjectResource(Resource):
    def __init__(
        self,
        *,
        username: str,
        pid: int,
        owns: bool,
        views: bool,
        dependencies,
    ):
        self.username = username
        self.pid = pid
        self._mask = project_capabilities(owns=owns, views=views)
        self._dependencies = dependencies

    def permissions(self) -> Capability:
        return self._mask

    def _load(self) -> ProjectRecord:
        project = self._dependencies.store.get_project(self.pid)
        if project is None:
            raise InvalidResource(f"Project {self.pid} does not exist.")
        return project

    def get(self) -> dict[str, Any]:
        return encode_project(self._load(), owns=bool(self._mask & Capability.SET))

    def set(self, payload: Any) -> None:
        # Last writer wins: Version is informational and never compared.
        body = decode_project_body(payload)
        if body.id != self.pid:
            raise InvalidBody("Body Id does not match the project.")
        current = self._load()
        self._dependencies.store.update_project(
            self.pid,
            name=body.name,
            percentage=body.percentage,
            description=body.description,
            updated=body.updated or self._dependencies.clock.today(),
            version=current.version + 1,
        )

    def delete(self) -> None:
        store = self._dependencies.store
        if not self._mask & Capability.SET:
            store.delete_views(self.username, self.pid)
            return
        remove_owner(store, self.username, self.pid)

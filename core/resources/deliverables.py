"""
MEL Resources - Deliverable List and Deliverable
================================================
"""

from __future__ import annotations

from typing import Any

from core.permissions.capabilities import (
    deliverable_capabilities,
    deliverable_list_capabilities,
)
from core.permissions.constants import Capability
from core.resources.base import CreatedResource, Resource
from core.resources.contracts import decode_deliverable_body, encode_deliverable
from core.resources.errors import InvalidBody, InvalidResource
from core.store.models import DELIVERABLE_TABLE, DeliverableRecord
from core.store.provider import allocate_unused_id


def deliverable_location(pid: int, did: int) -> str:
    return f"/projects/{pid}/deliverables/{did}"


class DeliverableListResource(Resource):
    def __init__(self, *, project, dependencies):
        self.project = project
        self._dependencies = dependencies

    @property
    def pid(self) -> int:
        return self.project.pid

    def permissions(self) -> Capability:
        return deliverable_list_capabilities(self.project.permissions())

    def get(self) -> list[int]:
        return list(self._dependencies.store.list_deliverable_ids(self.pid))

    def create(self, payload: Any) -> CreatedResource:
        body = decode_deliverable_body(payload)
        store = self._dependencies.store
        did = allocate_unused_id(
            store,
            self._dependencies.id_allocator,
            table=DELIVERABLE_TABLE,
            scope=self.pid,
        )
        deliverable = DeliverableRecord(
            id=did,
            project_id=self.pid,
            name=body.name,
            due=body.due,
            percentage=body.percentage,
            description=body.description,
        )
        store.insert_deliverable(deliverable)
        return CreatedResource(
            location=deliverable_location(self.pid, did),
            representation=encode_deliverable(deliverable),
        )


class DeliverableResource(Resource):
    def __init__(self, *, project, did: int, dependencies):
        self.project = project
        self.did = did
        self._dependencies = dependencies

    @property
    def pid(self) -> int:
        return self.project.pid

    def permissions(self) -> Capability:
        return deliverable_capabilities(self.project.permissions())

    def _load(self) -> DeliverableRecord:
        deliverable = self._dependencies.store.get_deliverable(self.pid, self.did)
        if deliverable is None:
            raise InvalidResource(
                f"Deliverable {self.did} of project {self.pid} does not exist."
            )
        return deliverable

    def get(self) -> dict[str, Any]:
        return encode_deliverable(self._load())

    def set(self, payload: Any) -> None:
        body = decode_deliverable_body(payload)
        if body.id is not None and body.id != self.did:
            raise InvalidBody("Body Id does not match the deliverable.")
        self._load()
        self._dependencies.store.update_deliverable(
            DeliverableRecord(
                id=self.did,
                project_id=self.pid,
                name=body.name,
                due=body.due,
                percentage=body.percentage,
                description=body.description,
            )
        )

    def delete(self) -> None:
        self._dependencies.store.delete_deliverable(self.pid, self.did)

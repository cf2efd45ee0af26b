"""
MEL Resources - Project Clients
===============================
The viewer list of a project, managed by its owners.
"""

from __future__ import annotations

import logging
from typing import Any

from core.permissions.capabilities import clients_capabilities
from core.permissions.constants import Capability
from core.resources.base import Resource
from core.resources.contracts import decode_clients_body
from core.resources.errors import InvalidBody

logger = logging.getLogger("mel.resources")


class ClientsResource(Resource):
    def __init__(self, *, project, dependencies):
        self.project = project
        self._dependencies = dependencies

    @property
    def pid(self) -> int:
        return self.project.pid

    def permissions(self) -> Capability:
        return clients_capabilities(self.project.permissions())

    def get(self) -> list[str]:
        return list(self._dependencies.store.viewer_names(self.pid))

    def set(self, payload: Any) -> None:
        """
        Reconcile the stored viewers with the requested set.

        Additions run before removals, one statement each. An unknown user
        aborts with InvalidBody, keeping whatever was already applied.
        """
        wanted = decode_clients_body(payload)
        store = self._dependencies.store
        current = set(store.viewer_names(self.pid))

        for name in sorted(wanted - current):
            if store.find_user(name) is None:
                raise InvalidBody(f"Unknown user '{name}'.")
            store.insert_views(name, self.pid)

        for name in sorted(current - wanted):
            store.delete_views(name, self.pid)

        logger.debug(
            "Reconciled clients of project %s: +%d -%d.",
            self.pid,
            len(wanted - current),
            len(current - wanted),
        )

"""
MEL Resources - Project Flag
============================
Shared boolean per project, merged with a version counter.

Set follows these rules against the stored ``(version, value)``:

- a client version ahead of the server is a protocol violation (InvalidBody);
- an equal version with a different value is written with version + 1;
- anything else (stale version, or same value) is accepted without a write.

The read and the write are separate statements with no lock between them.
Two writers racing on the same version can both pass the check; the later
write wins and the other client sees the bumped version on its next GET.
"""

from __future__ import annotations

from typing import Any

from core.permissions.capabilities import flag_capabilities
from core.permissions.constants import Capability
from core.resources.base import Resource
from core.resources.contracts import decode_flag_body, encode_flag
from core.resources.errors import InvalidBody, InvalidResource
from core.store.models import FlagState


class FlagResource(Resource):
    def __init__(self, *, project, dependencies):
        self.project = project
        self._dependencies = dependencies

    @property
    def pid(self) -> int:
        return self.project.pid

    def permissions(self) -> Capability:
        return flag_capabilities(self.project.permissions())

    def _load(self) -> FlagState:
        flag = self._dependencies.store.get_flag(self.pid)
        if flag is None:
            raise InvalidResource(f"Project {self.pid} does not exist.")
        return flag

    def get(self) -> dict[str, Any]:
        return encode_flag(self._load())

    def set(self, payload: Any) -> None:
        update = decode_flag_body(payload)
        current = self._load()

        if update.version > current.version:
            raise InvalidBody(
                f"Flag version {update.version} is ahead of the server "
                f"version {current.version}."
            )

        if update.version == current.version and update.value != current.value:
            self._dependencies.store.set_flag(
                self.pid,
                update.value,
                current.version + 1,
            )

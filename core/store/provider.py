"""
MEL Store - Provider Protocol and In-Memory Provider
====================================================
Transactional key/attribute lookups the resource layer runs against.

Every method is a single statement from the caller's point of view. Nothing
here groups statements into a transaction; multi-step operations built on
top of a provider can be observed half-done.
"""

from __future__ import annotations

import dataclasses
import threading
from datetime import date
from typing import Callable, Iterable, Protocol

from core.store.models import (
    DELIVERABLE_TABLE,
    PROJECT_TABLE,
    DeliverableRecord,
    FlagState,
    ProjectRecord,
    UserRecord,
)


class StoreProvider(Protocol):
    # ── Users ─────────────────────────────────────────────────
    def find_user(self, name: str) -> UserRecord | None:
        ...

    def insert_user(self, user: UserRecord) -> None:
        ...

    def update_password(self, name: str, salt: bytes, password_hash: bytes) -> bool:
        ...

    def set_manager(self, name: str, is_manager: bool) -> bool:
        ...

    def delete_user(self, name: str) -> None:
        ...

    # ── Relations ─────────────────────────────────────────────
    def find_ownership(self, user: str, pid: int) -> bool:
        ...

    def find_viewing(self, user: str, pid: int) -> bool:
        ...

    def insert_owns(self, user: str, pid: int) -> None:
        ...

    def delete_owns(self, user: str, pid: int) -> None:
        ...

    def insert_views(self, user: str, pid: int) -> None:
        ...

    def delete_views(self, user: str, pid: int) -> None:
        ...

    def count_owners(self, pid: int) -> int:
        ...

    def owner_names(self, pid: int) -> tuple[str, ...]:
        ...

    def viewer_names(self, pid: int) -> tuple[str, ...]:
        ...

    def owned_project_ids(self, user: str) -> tuple[int, ...]:
        ...

    def viewed_project_ids(self, user: str) -> tuple[int, ...]:
        ...

    def delete_views_for_project(self, pid: int) -> None:
        ...

    # ── Projects ──────────────────────────────────────────────
    def get_project(self, pid: int) -> ProjectRecord | None:
        ...

    def insert_project(self, project: ProjectRecord) -> None:
        ...

    def update_project(
        self,
        pid: int,
        *,
        name: str,
        percentage: int,
        description: str,
        updated: date,
        version: int,
    ) -> None:
        ...

    def delete_project(self, pid: int) -> None:
        ...

    def project_id_in_use(self, pid: int) -> bool:
        ...

    def get_flag(self, pid: int) -> FlagState | None:
        ...

    def set_flag(self, pid: int, value: bool, version: int) -> None:
        ...

    # ── Deliverables ──────────────────────────────────────────
    def list_deliverable_ids(self, pid: int) -> tuple[int, ...]:
        ...

    def get_deliverable(self, pid: int, did: int) -> DeliverableRecord | None:
        ...

    def insert_deliverable(self, deliverable: DeliverableRecord) -> None:
        ...

    def update_deliverable(self, deliverable: DeliverableRecord) -> None:
        ...

    def delete_deliverable(self, pid: int, did: int) -> None:
        ...

    def delete_deliverables_for_project(self, pid: int) -> None:
        ...

    def deliverable_id_in_use(self, pid: int, did: int) -> bool:
        ...


def allocate_unused_id(
    store: StoreProvider,
    allocator,
    *,
    table: str,
    scope: int | None = None,
) -> int:
    """
    Probe the store through the allocator for an id that is currently unused.

    Nothing reserves the id between the probe and the insert that follows,
    so two concurrent allocators can pick the same value; the loser's insert
    then fails at the store.
    """
    if table == PROJECT_TABLE:
        in_use: Callable[[int], bool] = store.project_id_in_use
    elif table == DELIVERABLE_TABLE:
        if scope is None:
            raise ValueError("Deliverable ids are allocated within a project scope.")
        in_use = lambda candidate: store.deliverable_id_in_use(scope, candidate)
    else:
        raise ValueError(f"Unknown table '{table}'.")
    return allocator.allocate(in_use)


class InMemoryStore:
    """
    Deterministic in-memory store used for bootstrap/tests.
    """

    def __init__(
        self,
        users: Iterable[UserRecord] | None = None,
        projects: Iterable[ProjectRecord] | None = None,
        owns: Iterable[tuple[str, int]] | None = None,
        views: Iterable[tuple[str, int]] | None = None,
        deliverables: Iterable[DeliverableRecord] | None = None,
    ):
        self._lock = threading.Lock()
        self._users: dict[str, UserRecord] = {}
        self._projects: dict[int, ProjectRecord] = {}
        self._deliverables: dict[tuple[int, int], DeliverableRecord] = {}
        self._owns: set[tuple[str, int]] = set()
        self._views: set[tuple[str, int]] = set()

        for user in users or ():
            self.insert_user(user)
        for project in projects or ():
            self.insert_project(project)
        for user, pid in owns or ():
            self.insert_owns(user, pid)
        for user, pid in views or ():
            self.insert_views(user, pid)
        for deliverable in deliverables or ():
            self.insert_deliverable(deliverable)

    # ── Users ─────────────────────────────────────────────────
    def find_user(self, name: str) -> UserRecord | None:
        with self._lock:
            return self._users.get(name)

    def insert_user(self, user: UserRecord) -> None:
        with self._lock:
            if user.name in self._users:
                raise ValueError(f"User '{user.name}' already exists.")
            self._users[user.name] = user

    def update_password(self, name: str, salt: bytes, password_hash: bytes) -> bool:
        with self._lock:
            user = self._users.get(name)
            if user is None:
                return False
            self._users[name] = dataclasses.replace(
                user, salt=salt, password_hash=password_hash
            )
            return True

    def set_manager(self, name: str, is_manager: bool) -> bool:
        with self._lock:
            user = self._users.get(name)
            if user is None:
                return False
            self._users[name] = dataclasses.replace(user, is_manager=bool(is_manager))
            return True

    def delete_user(self, name: str) -> None:
        with self._lock:
            if any(user == name for user, _ in self._owns | self._views):
                raise ValueError(f"User '{name}' is still referenced by a project.")
            self._users.pop(name, None)

    # ── Relations ─────────────────────────────────────────────
    def find_ownership(self, user: str, pid: int) -> bool:
        with self._lock:
            return (user, pid) in self._owns

    def find_viewing(self, user: str, pid: int) -> bool:
        with self._lock:
            return (user, pid) in self._views

    def _check_relation(self, user: str, pid: int) -> None:
        if user not in self._users:
            raise ValueError(f"Unknown user '{user}'.")
        if pid not in self._projects:
            raise ValueError(f"Unknown project {pid}.")

    def insert_owns(self, user: str, pid: int) -> None:
        with self._lock:
            self._check_relation(user, pid)
            if (user, pid) in self._owns:
                raise ValueError(f"'{user}' already owns project {pid}.")
            self._owns.add((user, pid))

    def delete_owns(self, user: str, pid: int) -> None:
        with self._lock:
            self._owns.discard((user, pid))

    def insert_views(self, user: str, pid: int) -> None:
        with self._lock:
            self._check_relation(user, pid)
            if (user, pid) in self._views:
                raise ValueError(f"'{user}' already views project {pid}.")
            self._views.add((user, pid))

    def delete_views(self, user: str, pid: int) -> None:
        with self._lock:
            self._views.discard((user, pid))

    def count_owners(self, pid: int) -> int:
        with self._lock:
            return sum(1 for _, owned in self._owns if owned == pid)

    def owner_names(self, pid: int) -> tuple[str, ...]:
        with self._lock:
            return tuple(sorted(user for user, owned in self._owns if owned == pid))

    def viewer_names(self, pid: int) -> tuple[str, ...]:
        with self._lock:
            return tuple(sorted(user for user, viewed in self._views if viewed == pid))

    def owned_project_ids(self, user: str) -> tuple[int, ...]:
        with self._lock:
            return tuple(sorted(pid for name, pid in self._owns if name == user))

    def viewed_project_ids(self, user: str) -> tuple[int, ...]:
        with self._lock:
            return tuple(sorted(pid for name, pid in self._views if name == user))

    def delete_views_for_project(self, pid: int) -> None:
        with self._lock:
            self._views = {row for row in self._views if row[1] != pid}

    # ── Projects ──────────────────────────────────────────────
    def get_project(self, pid: int) -> ProjectRecord | None:
        with self._lock:
            return self._projects.get(pid)

    def insert_project(self, project: ProjectRecord) -> None:
        with self._lock:
            if project.id in self._projects:
                raise ValueError(f"Project {project.id} already exists.")
            self._projects[project.id] = project

    def update_project(
        self,
        pid: int,
        *,
        name: str,
        percentage: int,
        description: str,
        updated: date,
        version: int,
    ) -> None:
        with self._lock:
            current = self._projects.get(pid)
            if current is None:
                return
            self._projects[pid] = dataclasses.replace(
                current,
                name=name,
                percentage=percentage,
                description=description,
                updated=updated,
                version=version,
            )

    def delete_project(self, pid: int) -> None:
        with self._lock:
            referenced = any(owned == pid for _, owned in self._owns | self._views)
            if referenced or any(key[0] == pid for key in self._deliverables):
                raise ValueError(f"Project {pid} is still referenced.")
            self._projects.pop(pid, None)

    def project_id_in_use(self, pid: int) -> bool:
        with self._lock:
            return pid in self._projects

    def get_flag(self, pid: int) -> FlagState | None:
        with self._lock:
            project = self._projects.get(pid)
            if project is None:
                return None
            return FlagState(version=project.flag_version, value=project.flag_value)

    def set_flag(self, pid: int, value: bool, version: int) -> None:
        with self._lock:
            current = self._projects.get(pid)
            if current is None:
                return
            self._projects[pid] = dataclasses.replace(
                current, flag_value=bool(value), flag_version=version
            )

    # ── Deliverables ──────────────────────────────────────────
    def list_deliverable_ids(self, pid: int) -> tuple[int, ...]:
        with self._lock:
            return tuple(sorted(did for owner_pid, did in self._deliverables if owner_pid == pid))

    def get_deliverable(self, pid: int, did: int) -> DeliverableRecord | None:
        with self._lock:
            return self._deliverables.get((pid, did))

    def insert_deliverable(self, deliverable: DeliverableRecord) -> None:
        with self._lock:
            key = (deliverable.project_id, deliverable.id)
            if deliverable.project_id not in self._projects:
                raise ValueError(f"Unknown project {deliverable.project_id}.")
            if key in self._deliverables:
                raise ValueError(f"Deliverable {key} already exists.")
            self._deliverables[key] = deliverable

    def update_deliverable(self, deliverable: DeliverableRecord) -> None:
        with self._lock:
            key = (deliverable.project_id, deliverable.id)
            if key in self._deliverables:
                self._deliverables[key] = deliverable

    def delete_deliverable(self, pid: int, did: int) -> None:
        with self._lock:
            self._deliverables.pop((pid, did), None)

    def delete_deliverables_for_project(self, pid: int) -> None:
        with self._lock:
            for key in [key for key in self._deliverables if key[0] == pid]:
                del self._deliverables[key]

    def deliverable_id_in_use(self, pid: int, did: int) -> bool:
        with self._lock:
            return (pid, did) in self._deliverables

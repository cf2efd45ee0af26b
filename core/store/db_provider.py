"""
MEL Store - DB-backed Provider
==============================
StoreProvider over the relational user/project tables via the Django ORM.

Each call runs in Django's autocommit mode, so every method is one committed
statement (or a read). No method opens a transaction spanning several calls.
"""

from __future__ import annotations

from datetime import date

from core.store.models import DeliverableRecord, FlagState, ProjectRecord, UserRecord


def _to_bytes(value) -> bytes:
    if value is None:
        return b""
    return bytes(value)


def _project_record(row) -> ProjectRecord:
    return ProjectRecord(
        id=int(row.id),
        name=row.name,
        percentage=int(row.percentage),
        description=row.description,
        updated=row.updated,
        version=int(row.version),
        flag_value=bool(row.flag),
        flag_version=int(row.flag_version),
    )


def _deliverable_record(row) -> DeliverableRecord:
    return DeliverableRecord(
        id=int(row.deliverable_id),
        project_id=int(row.project_id),
        name=row.name,
        due=row.due,
        percentage=int(row.percentage),
        description=row.description,
    )


class DbStore:
    # ── Users ─────────────────────────────────────────────────
    def find_user(self, name: str) -> UserRecord | None:
        from core.auth.models import UserAccount

        row = UserAccount.objects.filter(name=name).first()
        if row is None:
            return None
        return UserRecord(
            name=row.name,
            salt=_to_bytes(row.salt),
            password_hash=_to_bytes(row.password),
            is_manager=bool(row.is_manager),
        )

    def insert_user(self, user: UserRecord) -> None:
        from core.auth.models import UserAccount

        UserAccount.objects.create(
            name=user.name,
            salt=user.salt,
            password=user.password_hash,
            is_manager=user.is_manager,
        )

    def update_password(self, name: str, salt: bytes, password_hash: bytes) -> bool:
        from core.auth.models import UserAccount

        updated = UserAccount.objects.filter(name=name).update(
            salt=salt,
            password=password_hash,
        )
        return updated > 0

    def set_manager(self, name: str, is_manager: bool) -> bool:
        from core.auth.models import UserAccount

        updated = UserAccount.objects.filter(name=name).update(
            is_manager=bool(is_manager)
        )
        return updated > 0

    def delete_user(self, name: str) -> None:
        from core.auth.models import UserAccount

        UserAccount.objects.filter(name=name).delete()

    # ── Relations ─────────────────────────────────────────────
    def find_ownership(self, user: str, pid: int) -> bool:
        from core.projects_store.models import Ownership

        return Ownership.objects.filter(user_id=user, project_id=pid).exists()

    def find_viewing(self, user: str, pid: int) -> bool:
        from core.projects_store.models import Viewing

        return Viewing.objects.filter(user_id=user, project_id=pid).exists()

    def insert_owns(self, user: str, pid: int) -> None:
        from core.projects_store.models import Ownership

        Ownership.objects.create(user_id=user, project_id=pid)

    def delete_owns(self, user: str, pid: int) -> None:
        from core.projects_store.models import Ownership

        Ownership.objects.filter(user_id=user, project_id=pid).delete()

    def insert_views(self, user: str, pid: int) -> None:
        from core.projects_store.models import Viewing

        Viewing.objects.create(user_id=user, project_id=pid)

    def delete_views(self, user: str, pid: int) -> None:
        from core.projects_store.models import Viewing

        Viewing.objects.filter(user_id=user, project_id=pid).delete()

    def count_owners(self, pid: int) -> int:
        from core.projects_store.models import Ownership

        return Ownership.objects.filter(project_id=pid).count()

    def owner_names(self, pid: int) -> tuple[str, ...]:
        from core.projects_store.models import Ownership

        return tuple(
            Ownership.objects.filter(project_id=pid)
            .order_by("user_id")
            .values_list("user_id", flat=True)
        )

    def viewer_names(self, pid: int) -> tuple[str, ...]:
        from core.projects_store.models import Viewing

        return tuple(
            Viewing.objects.filter(project_id=pid)
            .order_by("user_id")
            .values_list("user_id", flat=True)
        )

    def owned_project_ids(self, user: str) -> tuple[int, ...]:
        from core.projects_store.models import Ownership

        return tuple(
            int(pid)
            for pid in Ownership.objects.filter(user_id=user)
            .order_by("project_id")
            .values_list("project_id", flat=True)
        )

    def viewed_project_ids(self, user: str) -> tuple[int, ...]:
        from core.projects_store.models import Viewing

        return tuple(
            int(pid)
            for pid in Viewing.objects.filter(user_id=user)
            .order_by("project_id")
            .values_list("project_id", flat=True)
        )

    def delete_views_for_project(self, pid: int) -> None:
        from core.projects_store.models import Viewing

        Viewing.objects.filter(project_id=pid).delete()

    # ── Projects ──────────────────────────────────────────────
    def get_project(self, pid: int) -> ProjectRecord | None:
        from core.projects_store.models import Project

        row = Project.objects.filter(id=pid).first()
        if row is None:
            return None
        return _project_record(row)

    def insert_project(self, project: ProjectRecord) -> None:
        from core.projects_store.models import Project

        Project.objects.create(
            id=project.id,
            name=project.name,
            percentage=project.percentage,
            description=project.description,
            updated=project.updated,
            version=project.version,
            flag=project.flag_value,
            flag_version=project.flag_version,
        )

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
        from core.projects_store.models import Project

        Project.objects.filter(id=pid).update(
            name=name,
            percentage=percentage,
            description=description,
            updated=updated,
            version=version,
        )

    def delete_project(self, pid: int) -> None:
        from core.projects_store.models import Project

        Project.objects.filter(id=pid).delete()

    def project_id_in_use(self, pid: int) -> bool:
        from core.projects_store.models import Project

        return Project.objects.filter(id=pid).exists()

    def get_flag(self, pid: int) -> FlagState | None:
        from core.projects_store.models import Project

        row = Project.objects.filter(id=pid).values("flag", "flag_version").first()
        if row is None:
            return None
        return FlagState(version=int(row["flag_version"]), value=bool(row["flag"]))

    def set_flag(self, pid: int, value: bool, version: int) -> None:
        from core.projects_store.models import Project

        Project.objects.filter(id=pid).update(flag=bool(value), flag_version=version)

    # ── Deliverables ──────────────────────────────────────────
    def list_deliverable_ids(self, pid: int) -> tuple[int, ...]:
        from core.projects_store.models import Deliverable

        return tuple(
            int(did)
            for did in Deliverable.objects.filter(project_id=pid)
            .order_by("deliverable_id")
            .values_list("deliverable_id", flat=True)
        )

    def get_deliverable(self, pid: int, did: int) -> DeliverableRecord | None:
        from core.projects_store.models import Deliverable

        row = Deliverable.objects.filter(project_id=pid, deliverable_id=did).first()
        if row is None:
            return None
        return _deliverable_record(row)

    def insert_deliverable(self, deliverable: DeliverableRecord) -> None:
        from core.projects_store.models import Deliverable

        Deliverable.objects.create(
            project_id=deliverable.project_id,
            deliverable_id=deliverable.id,
            name=deliverable.name,
            due=deliverable.due,
            percentage=deliverable.percentage,
            description=deliverable.description,
        )

    def update_deliverable(self, deliverable: DeliverableRecord) -> None:
        from core.projects_store.models import Deliverable

        Deliverable.objects.filter(
            project_id=deliverable.project_id,
            deliverable_id=deliverable.id,
        ).update(
            name=deliverable.name,
            due=deliverable.due,
            percentage=deliverable.percentage,
            description=deliverable.description,
        )

    def delete_deliverable(self, pid: int, did: int) -> None:
        from core.projects_store.models import Deliverable

        Deliverable.objects.filter(project_id=pid, deliverable_id=did).delete()

    def delete_deliverables_for_project(self, pid: int) -> None:
        from core.projects_store.models import Deliverable

        Deliverable.objects.filter(project_id=pid).delete()

    def deliverable_id_in_use(self, pid: int, did: int) -> bool:
        from core.projects_store.models import Deliverable

        return Deliverable.objects.filter(project_id=pid, deliverable_id=did).exists()

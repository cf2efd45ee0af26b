from __future__ import annotations

from datetime import date

import pytest

from core.http_api.dependencies import ProbingIdAllocator
from core.store import InMemoryStore, ProjectRecord, UserRecord, allocate_unused_id


def _store() -> InMemoryStore:
    return InMemoryStore(
        users=(UserRecord(name="alice", salt=b"", password_hash=b"x"),),
        projects=(
            ProjectRecord(
                id=0, name="P0", percentage=0, description="d", updated=date(2026, 1, 1)
            ),
        ),
        owns=(("alice", 0),),
    )


def test_relations_require_existing_rows() -> None:
    store = _store()

    with pytest.raises(ValueError):
        store.insert_owns("ghost", 0)
    with pytest.raises(ValueError):
        store.insert_views("alice", 9)


def test_referenced_rows_cannot_be_deleted() -> None:
    store = _store()

    with pytest.raises(ValueError):
        store.delete_project(0)
    with pytest.raises(ValueError):
        store.delete_user("alice")


def test_records_validate_ranges() -> None:
    with pytest.raises(ValueError):
        ProjectRecord(id=-1, name="x", percentage=0, description="d", updated=date.today())
    with pytest.raises(ValueError):
        UserRecord(name="", salt=b"", password_hash=b"")


def test_allocation_requires_known_table_and_scope() -> None:
    store = _store()

    assert allocate_unused_id(store, ProbingIdAllocator(), table="projects") == 1
    with pytest.raises(ValueError):
        allocate_unused_id(store, ProbingIdAllocator(), table="deliverables")
    with pytest.raises(ValueError):
        allocate_unused_id(store, ProbingIdAllocator(), table="users")

from __future__ import annotations

from datetime import date

import pytest

from core.auth.service import ScryptPasswordHasher
from core.http_api.dependencies import HttpApiDependencies, ProbingIdAllocator
from core.resources import ClientsResource, InvalidBody, ProjectResource
from core.store import InMemoryStore, ProjectRecord, UserRecord


class FixedClock:
    def today(self) -> date:
        return date(2026, 3, 1)


def _clients(*viewers: str) -> tuple[ClientsResource, InMemoryStore]:
    store = InMemoryStore(
        users=tuple(
            UserRecord(name=name, salt=b"", password_hash=b"x")
            for name in ("alice", "bob", "carol", "dave")
        ),
        projects=(
            ProjectRecord(
                id=1, name="Shared", percentage=0, description="d", updated=date(2026, 1, 1)
            ),
        ),
        owns=(("alice", 1),),
        views=tuple((name, 1) for name in viewers),
    )
    dependencies = HttpApiDependencies(
        store=store,
        password_hasher=ScryptPasswordHasher(work_factor=16),
        id_allocator=ProbingIdAllocator(),
        clock=FixedClock(),
    )
    project = ProjectResource(
        username="alice", pid=1, owns=True, views=False, dependencies=dependencies
    )
    return ClientsResource(project=project, dependencies=dependencies), store


def test_get_lists_viewers() -> None:
    clients, _ = _clients("carol", "bob")

    assert clients.get() == ["bob", "carol"]


def test_set_adds_and_removes_to_match() -> None:
    clients, store = _clients("bob", "carol")

    clients.set(["carol", "dave"])

    assert store.viewer_names(1) == ("carol", "dave")


def test_set_is_idempotent() -> None:
    clients, store = _clients("bob")

    clients.set(["carol", "dave"])
    once = store.viewer_names(1)
    clients.set(["carol", "dave"])

    assert store.viewer_names(1) == once


def test_duplicates_in_body_collapse() -> None:
    clients, store = _clients()

    clients.set(["bob", "bob"])

    assert store.viewer_names(1) == ("bob",)


def test_unknown_user_aborts_after_earlier_additions() -> None:
    clients, store = _clients("dave")

    with pytest.raises(InvalidBody):
        clients.set(["bob", "zed"])

    # Additions are applied in name order and not rolled back; removals never ran.
    assert store.viewer_names(1) == ("bob", "dave")


@pytest.mark.parametrize("payload", [{"bob": True}, "bob", ["bob", 3], [""], None])
def test_body_must_be_array_of_names(payload) -> None:
    clients, _ = _clients()

    with pytest.raises(InvalidBody):
        clients.set(payload)

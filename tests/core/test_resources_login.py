from __future__ import annotations

from datetime import date

import pytest

from core.auth.service import ScryptPasswordHasher, new_salt, passwords_match
from core.http_api.dependencies import HttpApiDependencies, ProbingIdAllocator
from core.resources import InvalidBody, LoginResource
from core.store import InMemoryStore, ProjectRecord, UserRecord

HASHER = ScryptPasswordHasher(work_factor=16)


class FixedClock:
    def today(self) -> date:
        return date(2026, 3, 1)


def _project(pid: int) -> ProjectRecord:
    return ProjectRecord(
        id=pid, name=f"P{pid}", percentage=0, description="d", updated=date(2026, 1, 1)
    )


def _user(name: str, password: str = "pw", *, is_manager: bool = False) -> UserRecord:
    salt = new_salt()
    return UserRecord(
        name=name,
        salt=salt,
        password_hash=HASHER.hash(password, salt),
        is_manager=is_manager,
    )


def _login(store: InMemoryStore, username: str, *, created: bool = False) -> LoginResource:
    dependencies = HttpApiDependencies(
        store=store,
        password_hasher=HASHER,
        id_allocator=ProbingIdAllocator(),
        clock=FixedClock(),
    )
    return LoginResource(username=username, created=created, dependencies=dependencies)


def test_get_reports_user_and_manager_flag() -> None:
    store = InMemoryStore(users=(_user("boss", is_manager=True),))

    assert _login(store, "boss").get() == {"User": "boss", "Manager": True}


def test_create_echoes_fresh_account() -> None:
    store = InMemoryStore(users=(_user("new"),))

    created = _login(store, "new", created=True).create(None)

    assert created.location == "/login"
    assert created.representation == {"User": "new", "Manager": False}


def test_set_changes_password_and_ignores_manager() -> None:
    store = InMemoryStore(users=(_user("alice", "old"),))

    _login(store, "alice").set({"Password": "new", "Manager": True})

    stored = store.find_user("alice")
    assert passwords_match(stored, "new", HASHER)
    assert not passwords_match(stored, "old", HASHER)
    assert stored.is_manager is False


@pytest.mark.parametrize("payload", [{}, {"Password": ""}, {"Password": 5}, "pw"])
def test_set_rejects_bad_password_bodies(payload) -> None:
    store = InMemoryStore(users=(_user("alice"),))

    with pytest.raises(InvalidBody):
        _login(store, "alice").set(payload)


def test_delete_cascades_through_relations() -> None:
    store = InMemoryStore(
        users=(_user("alice"), _user("bob")),
        projects=(_project(0), _project(1), _project(2)),
        owns=(("alice", 0), ("alice", 1), ("bob", 1)),
        views=(("alice", 2), ("bob", 0)),
    )

    _login(store, "alice").delete()

    assert store.find_user("alice") is None
    assert store.get_project(0) is None
    assert store.owner_names(1) == ("bob",)
    assert store.get_project(2) is not None
    assert store.viewed_project_ids("bob") == ()

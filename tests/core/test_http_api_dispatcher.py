from __future__ import annotations

import json
from datetime import date

from core.auth.service import ScryptPasswordHasher, new_salt
from core.http_api import (
    ApiRequest,
    BasicCredentials,
    HttpApiDependencies,
    ProbingIdAllocator,
    handle_request,
)
from core.rejection import ReasonCode
from core.store import DeliverableRecord, InMemoryStore, ProjectRecord, UserRecord

HASHER = ScryptPasswordHasher(work_factor=16)
TODAY = date(2026, 3, 1)


class FixedClock:
    def today(self) -> date:
        return TODAY


class FailingStore(InMemoryStore):
    def find_ownership(self, user: str, pid: int) -> bool:
        raise RuntimeError("connection reset by peer")


def _user(name: str, password: str = "pw", *, is_manager: bool = False) -> UserRecord:
    salt = new_salt()
    return UserRecord(
        name=name,
        salt=salt,
        password_hash=HASHER.hash(password, salt),
        is_manager=is_manager,
    )


def _dependencies(store: InMemoryStore) -> HttpApiDependencies:
    return HttpApiDependencies(
        store=store,
        password_hasher=HASHER,
        id_allocator=ProbingIdAllocator(),
        clock=FixedClock(),
    )


def _call(
    store: InMemoryStore,
    verb: str,
    path: str,
    *,
    user: str | None = "alice",
    password: str = "pw",
    body=None,
    raw: bytes | None = None,
):
    credentials = None
    if user is not None:
        credentials = BasicCredentials(username=user, password=password)
    if body is not None:
        raw = json.dumps(body).encode("utf-8")
    return handle_request(
        ApiRequest(verb=verb, path=path, credentials=credentials, body=raw),
        _dependencies(store),
    )


def _seeded_store() -> InMemoryStore:
    return InMemoryStore(
        users=(_user("alice"), _user("boss", is_manager=True), _user("bob")),
        projects=(
            ProjectRecord(
                id=0, name="P0", percentage=30, description="d", updated=date(2026, 1, 1)
            ),
        ),
        owns=(("alice", 0),),
        views=(("bob", 0),),
        deliverables=(
            DeliverableRecord(
                id=0, project_id=0, name="D0", due="", percentage=0, description="d"
            ),
        ),
    )


# ── Authentication ────────────────────────────────────────────


def test_unauthenticated_login_get_is_401_with_challenge() -> None:
    response = _call(InMemoryStore(), "GET", "/login", user=None)

    assert response.status == 401
    assert response.body["ok"] is False
    assert response.body["error"]["code"] == ReasonCode.NO_CREDENTIALS
    assert response.header("WWW-Authenticate") == 'Basic realm=""'


def test_unknown_credentials_on_login_get_are_403() -> None:
    response = _call(InMemoryStore(), "GET", "/login", user="nobody")

    assert response.status == 403
    assert response.body["error"]["code"] == ReasonCode.INVALID_CREDENTIALS


def test_login_post_provisions_non_manager() -> None:
    store = InMemoryStore()

    response = _call(store, "POST", "/login", user="new@example.com", password="s3cret")

    assert response.status == 201
    assert response.header("Location") == "/login"
    assert response.body == {"User": "new@example.com", "Manager": False}
    assert store.find_user("new@example.com").is_manager is False

    again = _call(store, "GET", "/login", user="new@example.com", password="s3cret")
    assert again.status == 200


def test_login_post_for_existing_account_is_forbidden() -> None:
    response = _call(_seeded_store(), "POST", "/login")

    assert response.status == 403
    assert response.body["error"]["code"] == ReasonCode.FORBIDDEN


# ── Projects ──────────────────────────────────────────────────


def test_fresh_user_sees_empty_project_list() -> None:
    store = InMemoryStore()
    _call(store, "POST", "/login", user="fresh")

    response = _call(store, "GET", "/projects", user="fresh")

    assert response.status == 200
    assert response.body == []


def test_non_manager_cannot_create_projects() -> None:
    response = _call(
        _seeded_store(),
        "POST",
        "/projects",
        body={"Name": "x", "Description": "y"},
    )

    assert response.status == 403
    assert response.body["error"]["code"] == ReasonCode.FORBIDDEN


def test_manager_creates_project_with_location() -> None:
    store = _seeded_store()

    response = _call(
        store,
        "POST",
        "/projects",
        user="boss",
        body={"Name": "Launch", "Percentage": 0, "Description": "Go live"},
    )

    assert response.status == 201
    assert response.header("Location") == "/projects/1"
    assert response.body["Name"] == "Launch"
    listed = _call(store, "GET", "/projects", user="boss")
    assert listed.body == [1]


def test_stranger_is_forbidden_from_project() -> None:
    response = _call(_seeded_store(), "GET", "/projects/0", user="boss")

    assert response.status == 403


def test_put_success_has_empty_body_and_get_round_trips() -> None:
    store = _seeded_store()

    response = _call(
        store,
        "PUT",
        "/projects/0",
        body={"Id": 0, "Name": "Renamed", "Percentage": 45, "Description": "d"},
    )
    assert response.status == 200
    assert response.body is None

    read = _call(store, "GET", "/projects/0")
    assert read.body["Name"] == "Renamed"
    assert read.body["Percentage"] == 45


def test_flag_put_flips_and_increments_version_once() -> None:
    store = _seeded_store()
    before = _call(store, "GET", "/projects/0/flag").body

    response = _call(
        store,
        "PUT",
        "/projects/0/flag",
        body={"Version": before["Version"], "Value": not before["Value"]},
    )

    assert response.status == 200
    after = _call(store, "GET", "/projects/0/flag").body
    assert after == {"Version": before["Version"] + 1, "Value": not before["Value"]}


def test_viewer_cannot_set_flag() -> None:
    response = _call(
        _seeded_store(),
        "PUT",
        "/projects/0/flag",
        user="bob",
        body={"Version": 0, "Value": True},
    )

    assert response.status == 403


def test_last_owner_delete_removes_project_for_viewers() -> None:
    store = _seeded_store()

    assert _call(store, "DELETE", "/projects/0").status == 200

    assert _call(store, "GET", "/projects", user="bob").body == []
    assert _call(store, "GET", "/projects/0", user="bob").status == 403


# ── Error mapping ─────────────────────────────────────────────


def test_unknown_path_is_404() -> None:
    response = _call(_seeded_store(), "GET", "/nothing/here")

    assert response.status == 404
    assert response.body["error"]["code"] == ReasonCode.INVALID_RESOURCE


def test_unknown_verb_is_405() -> None:
    response = _call(_seeded_store(), "PATCH", "/projects/0")

    assert response.status == 405
    assert response.body["error"]["code"] == ReasonCode.INVALID_METHOD


def test_unsupported_operation_on_variant_is_405() -> None:
    # The owner holds the Create bit on a deliverable, which has no create.
    response = _call(_seeded_store(), "POST", "/projects/0/deliverables/0", body={})

    assert response.status == 405


def test_trailing_slash_is_not_a_resource() -> None:
    response = _call(_seeded_store(), "GET", "/projects/")

    assert response.status == 404


def test_malformed_json_is_400() -> None:
    response = _call(_seeded_store(), "PUT", "/projects/0/flag", raw=b"{not json")

    assert response.status == 400
    assert response.body["error"]["code"] == ReasonCode.INVALID_BODY


def test_missing_body_is_400() -> None:
    response = _call(_seeded_store(), "PUT", "/projects/0/flag")

    assert response.status == 400


def test_store_failure_is_500_without_leaking_detail() -> None:
    store = FailingStore(users=(_user("alice"),))

    response = _call(store, "GET", "/projects/0")

    assert response.status == 500
    assert response.body["error"]["code"] == ReasonCode.STORE_FAILURE
    assert "connection reset" not in json.dumps(response.body)


def test_untyped_resource_error_is_generic_500(monkeypatch) -> None:
    from core.http_api import dispatcher
    from core.resources.errors import ResourceError

    def _raise(*args, **kwargs):
        raise ResourceError("internal row detail")

    monkeypatch.setattr(dispatcher, "resolve_resource", _raise)

    response = _call(_seeded_store(), "GET", "/projects")

    assert response.status == 500
    assert response.body["error"]["code"] == ReasonCode.STORE_FAILURE
    assert "internal row detail" not in json.dumps(response.body)


# ── Public demo account ───────────────────────────────────────


def _public_store() -> InMemoryStore:
    return InMemoryStore(
        users=(UserRecord(name="test", salt=b"", password_hash=b"", is_manager=True),),
        projects=(
            ProjectRecord(
                id=0, name="P0", percentage=0, description="d", updated=date(2026, 1, 1)
            ),
        ),
        owns=(("test", 0),),
    )


def test_public_account_reads_login_with_any_password() -> None:
    response = _call(_public_store(), "GET", "/login", user="test", password="anything")

    assert response.status == 200
    assert response.body == {"User": "test", "Manager": True}


def test_public_account_password_cannot_be_changed() -> None:
    store = _public_store()

    response = _call(
        store,
        "PUT",
        "/login",
        user="test",
        password="guess",
        body={"Password": "mine"},
    )

    assert response.status == 403
    assert response.body["error"]["code"] == ReasonCode.FORBIDDEN
    assert store.find_user("test").is_public
    assert _call(store, "GET", "/login", user="test", password="other").status == 200


def test_public_account_cannot_be_deleted() -> None:
    store = _public_store()

    response = _call(store, "DELETE", "/login", user="test", password="whatever")

    assert response.status == 403
    assert store.find_user("test") is not None
    assert store.get_project(0) is not None
    assert store.owner_names(0) == ("test",)

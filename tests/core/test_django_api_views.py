from __future__ import annotations

import json

import pytest
from django.test import Client

from adapters.django_api import wiring
from core.auth.service import ScryptPasswordHasher
from core.http_api.auth import encode_basic_credentials
from core.http_api.dependencies import HttpApiDependencies, ProbingIdAllocator, UtcClock
from core.store.db_provider import DbStore

pytestmark = pytest.mark.django_db(transaction=True)


@pytest.fixture(autouse=True)
def fast_dependencies(monkeypatch):
    dependencies = HttpApiDependencies(
        store=DbStore(),
        password_hasher=ScryptPasswordHasher(work_factor=16),
        id_allocator=ProbingIdAllocator(),
        clock=UtcClock(),
    )
    monkeypatch.setattr(wiring, "_DEPENDENCIES", dependencies)
    yield dependencies
    wiring.reset_dependencies()


def _auth(username: str, password: str) -> dict[str, str]:
    return {"HTTP_AUTHORIZATION": encode_basic_credentials(username, password)}


def test_missing_credentials_return_challenge() -> None:
    response = Client().get("/login")

    assert response.status_code == 401
    assert response["WWW-Authenticate"] == 'Basic realm=""'
    assert response.json()["error"]["code"] == "NO_CREDENTIALS"


def test_login_then_project_flow_over_http() -> None:
    client = Client()

    created = client.post("/login", content_type="application/json", **_auth("carol", "pw"))
    assert created.status_code == 201
    assert created["Location"] == "/login"
    assert created.json() == {"User": "carol", "Manager": False}

    listed = client.get("/projects", **_auth("carol", "pw"))
    assert listed.status_code == 200
    assert listed.json() == []

    denied = client.post(
        "/projects",
        data=json.dumps({"Name": "x", "Description": "y"}),
        content_type="application/json",
        **_auth("carol", "pw"),
    )
    assert denied.status_code == 403


def test_put_returns_empty_body() -> None:
    client = Client()
    client.post("/login", content_type="application/json", **_auth("dave", "old"))

    response = client.put(
        "/login",
        data=json.dumps({"Password": "new"}),
        content_type="application/json",
        **_auth("dave", "old"),
    )

    assert response.status_code == 200
    assert response.content == b""
    assert client.get("/login", **_auth("dave", "new")).status_code == 200
    assert client.get("/login", **_auth("dave", "old")).status_code == 403


def test_credentials_are_checked_before_routing() -> None:
    response = Client().get("/projects/x", **_auth("nobody", "pw"))

    assert response.status_code == 403


def test_unknown_path_is_404() -> None:
    client = Client()
    client.post("/login", content_type="application/json", **_auth("erin", "pw"))

    response = client.get("/projects/x", **_auth("erin", "pw"))

    assert response.status_code == 404
    assert response.json()["ok"] is False

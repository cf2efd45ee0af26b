from __future__ import annotations

import pytest

from core.http_api.contracts import ApiRequest, ApiResponse, BasicCredentials
from core.http_api.dependencies import ProbingIdAllocator
from core.http_api.errors import error_response, rejection_response, success_response
from core.rejection import ReasonCode, RejectionReason


def test_request_rejects_non_bytes_body() -> None:
    with pytest.raises(ValueError):
        ApiRequest(verb="PUT", path="/login", body="text")


def test_request_requires_verb() -> None:
    with pytest.raises(ValueError):
        ApiRequest(verb="", path="/login")


def test_credentials_allow_empty_password() -> None:
    assert BasicCredentials(username="test", password="").password == ""


def test_response_header_lookup_is_case_insensitive() -> None:
    response = ApiResponse(status=201, headers=(("Location", "/projects/3"),))

    assert response.header("location") == "/projects/3"
    assert response.header("etag") is None


@pytest.mark.parametrize(
    ("code", "status"),
    [
        (ReasonCode.NO_CREDENTIALS, 401),
        (ReasonCode.INVALID_CREDENTIALS, 403),
        (ReasonCode.INVALID_RESOURCE, 404),
        (ReasonCode.FORBIDDEN, 403),
        (ReasonCode.INVALID_BODY, 400),
        (ReasonCode.INVALID_METHOD, 405),
        (ReasonCode.STORE_FAILURE, 500),
        ("SOMETHING_NEW", 500),
    ],
)
def test_error_codes_map_to_status(code: str, status: int) -> None:
    response = error_response(code=code, message="m")

    assert response.status == status
    assert response.body == {
        "ok": False,
        "error": {"code": code, "message": "m", "details": {}},
    }


def test_rejection_carries_stage() -> None:
    response = rejection_response(
        RejectionReason(code=ReasonCode.FORBIDDEN, message="no", stage="permission_gate")
    )

    assert response.body["error"]["details"] == {"stage": "permission_gate"}


def test_success_sets_location_only_when_given() -> None:
    assert success_response([1, 2]).headers == ()
    created = success_response({"Id": 1}, status=201, location="/projects/1")
    assert created.header("Location") == "/projects/1"


def test_allocator_reuses_lowest_gap() -> None:
    taken = {0, 1, 3}

    assert ProbingIdAllocator().allocate(taken.__contains__) == 2
    assert ProbingIdAllocator(start=5).allocate(taken.__contains__) == 5
    with pytest.raises(ValueError):
        ProbingIdAllocator(start=-1)

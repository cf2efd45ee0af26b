"""
MEL HTTP API - Error Mapping
============================
Stable transport error mapping for rejections and resource failures.
"""

from __future__ import annotations

from typing import Any, Optional

from core.http_api.contracts import ApiResponse, HttpApiErrorBody
from core.rejection import ReasonCode, RejectionReason

STATUS_BY_CODE = {
    ReasonCode.NO_CREDENTIALS: 401,
    ReasonCode.INVALID_CREDENTIALS: 403,
    ReasonCode.INVALID_RESOURCE: 404,
    ReasonCode.FORBIDDEN: 403,
    ReasonCode.INVALID_BODY: 400,
    ReasonCode.INVALID_METHOD: 405,
    ReasonCode.STORE_FAILURE: 500,
}

STORE_FAILURE_MESSAGE = "Internal server error."

_AUTHENTICATE_HEADER = ("WWW-Authenticate", 'Basic realm=""')


def status_for_code(code: str) -> int:
    return STATUS_BY_CODE.get(code, 500)


def error_response(
    *,
    code: str,
    message: str,
    details: Optional[dict[str, Any]] = None,
) -> ApiResponse:
    body = HttpApiErrorBody(code=code, message=message, details=details or {})
    headers: tuple[tuple[str, str], ...] = ()
    if code == ReasonCode.NO_CREDENTIALS:
        headers = (_AUTHENTICATE_HEADER,)
    return ApiResponse(
        status=status_for_code(code),
        body={"ok": False, "error": body.to_dict()},
        headers=headers,
    )


def rejection_response(reason: RejectionReason) -> ApiResponse:
    return error_response(
        code=reason.code,
        message=reason.message,
        details={"stage": reason.stage},
    )


def store_failure_response() -> ApiResponse:
    return error_response(
        code=ReasonCode.STORE_FAILURE,
        message=STORE_FAILURE_MESSAGE,
    )


def success_response(data: Any = None, *, status: int = 200, location: str | None = None) -> ApiResponse:
    headers: tuple[tuple[str, str], ...] = ()
    if location is not None:
        headers = (("Location", location),)
    return ApiResponse(status=status, body=data, headers=headers)

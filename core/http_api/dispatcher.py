"""
MEL HTTP API - Request Dispatcher
=================================
Authenticate, resolve, gate, execute. The first failing step ends the
request; nothing is retried.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from core.http_api.auth.provider import StoreAuthProvider
from core.http_api.contracts import ApiRequest, ApiResponse
from core.http_api.dependencies import HttpApiDependencies
from core.http_api.errors import (
    error_response,
    rejection_response,
    store_failure_response,
    success_response,
)
from core.permissions.constants import VERB_DELETE, VERB_GET, VERB_POST, VERB_PUT
from core.permissions.evaluator import PermissionEvaluator
from core.rejection import RejectionReason
from core.resources.base import Resource
from core.resources.errors import InvalidBody, InvalidMethod, ResourceError
from core.resources.resolver import resolve_resource

logger = logging.getLogger("mel.http")


def _decode_body(raw: bytes | None) -> Any:
    if raw is None or not raw.strip():
        return None
    try:
        return json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as exc:
        raise InvalidBody("Body must be valid JSON.") from exc


def _execute(resource: Resource, verb: str, body: bytes | None) -> ApiResponse:
    if verb == VERB_GET:
        return success_response(resource.get())
    if verb == VERB_PUT:
        resource.set(_decode_body(body))
        return success_response()
    if verb == VERB_POST:
        created = resource.create(_decode_body(body))
        return success_response(
            created.representation,
            status=201,
            location=created.location,
        )
    if verb == VERB_DELETE:
        resource.delete()
        return success_response()
    raise InvalidMethod(f"Method '{verb}' is not supported.")


def _dispatch(request: ApiRequest, verb: str, dependencies: HttpApiDependencies) -> ApiResponse:
    auth_provider = StoreAuthProvider(dependencies.store, dependencies.password_hasher)
    principal = auth_provider.authenticate(
        request.credentials,
        path=request.path,
        verb=verb,
    )
    if isinstance(principal, RejectionReason):
        return rejection_response(principal)

    resource = resolve_resource(
        principal.username,
        request.path,
        dependencies,
        created=principal.created,
    )

    evaluation = PermissionEvaluator.evaluate(verb, resource)
    if not evaluation.allowed:
        return rejection_response(
            RejectionReason(
                code=evaluation.rejection_code,
                message=evaluation.message,
                stage="permission_gate",
            )
        )

    return _execute(resource, verb, request.body)


def handle_request(
    request: ApiRequest,
    dependencies: HttpApiDependencies,
) -> ApiResponse:
    """
    Run one request through the pipeline and map the outcome to a response.

    Resource errors become their status class. Any other exception is an
    unexpected store failure: it is logged in full and the caller only gets
    a generic 500 body.
    """
    verb = request.verb.strip().upper()
    try:
        response = _dispatch(request, verb, dependencies)
    except ResourceError as exc:
        if exc.code is None:
            logger.exception("Untyped resource error handling %s %s.", verb, request.path)
            return store_failure_response()
        response = error_response(code=exc.code, message=exc.message)
    except Exception:
        logger.exception("Store failure handling %s %s.", verb, request.path)
        return store_failure_response()

    logger.debug("%s %s -> %s", verb, request.path, response.status)
    return response

"""
MEL HTTP API - Public API
=========================
"""

from core.http_api.contracts import (
    ApiRequest,
    ApiResponse,
    BasicCredentials,
    HttpApiErrorBody,
)
from core.http_api.dependencies import (
    Clock,
    HttpApiDependencies,
    IdAllocator,
    PasswordHasher,
    ProbingIdAllocator,
    UtcClock,
)
from core.http_api.dispatcher import handle_request
from core.http_api.errors import (
    STATUS_BY_CODE,
    error_response,
    rejection_response,
    status_for_code,
    store_failure_response,
    success_response,
)

__all__ = [
    "ApiRequest",
    "ApiResponse",
    "BasicCredentials",
    "HttpApiErrorBody",
    "IdAllocator",
    "Clock",
    "PasswordHasher",
    "ProbingIdAllocator",
    "UtcClock",
    "HttpApiDependencies",
    "STATUS_BY_CODE",
    "error_response",
    "rejection_response",
    "status_for_code",
    "store_failure_response",
    "success_response",
    "handle_request",
]

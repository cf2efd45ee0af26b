"""
MEL Django Adapter View
=======================
Pass-through HTTP view over core/http_api dispatch.
"""

from __future__ import annotations

from django.http import HttpRequest, HttpResponse, JsonResponse
from django.views.decorators.csrf import csrf_exempt

from adapters.django_api.wiring import build_dependencies
from core.http_api.auth.resolver import resolve_basic_credentials
from core.http_api.contracts import ApiRequest, ApiResponse
from core.http_api.dispatcher import handle_request


def _headers_from_request(request: HttpRequest) -> dict[str, str]:
    return {str(key): str(value) for key, value in request.headers.items()}


def _to_django_response(response: ApiResponse) -> HttpResponse:
    if response.body is None:
        rendered = HttpResponse(status=response.status)
    else:
        rendered = JsonResponse(response.body, status=response.status, safe=False)
    for name, value in response.headers:
        rendered[name] = value
    return rendered


@csrf_exempt
def resource_view(request: HttpRequest) -> HttpResponse:
    api_request = ApiRequest(
        verb=request.method or "",
        path=request.path,
        credentials=resolve_basic_credentials(_headers_from_request(request)),
        body=request.body or None,
    )
    return _to_django_response(handle_request(api_request, build_dependencies()))

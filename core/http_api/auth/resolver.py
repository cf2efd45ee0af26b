"""
MEL HTTP API Auth - Credential Resolvers
========================================
Extract HTTP Basic credentials from request headers.
"""

from __future__ import annotations

import base64
import binascii
from typing import Any

from core.http_api.contracts import BasicCredentials

HEADER_AUTHORIZATION = "authorization"
_BASIC_SCHEME = "basic"


def _normalize_headers(headers: dict[str, Any] | None) -> dict[str, str]:
    normalized: dict[str, str] = {}
    for key, value in (headers or {}).items():
        normalized_key = str(key).strip().lower()
        normalized_value = str(value).strip()
        normalized[normalized_key] = normalized_value
    return normalized


def resolve_basic_credentials(
    headers: dict[str, Any] | None,
) -> BasicCredentials | None:
    """
    Decode an ``Authorization: Basic`` header.

    Anything missing or malformed is treated as no credentials at all.
    """
    value = _normalize_headers(headers).get(HEADER_AUTHORIZATION)
    if not value:
        return None
    scheme, _, encoded = value.partition(" ")
    if scheme.lower() != _BASIC_SCHEME or not encoded.strip():
        return None
    try:
        decoded = base64.b64decode(encoded.strip(), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return None
    username, separator, password = decoded.partition(":")
    if not separator:
        return None
    return BasicCredentials(username=username, password=password)


def encode_basic_credentials(username: str, password: str) -> str:
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"

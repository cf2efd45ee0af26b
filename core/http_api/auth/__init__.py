"""
MEL HTTP API Auth - Public API
==============================
"""

from core.http_api.auth.provider import AuthPrincipal, StoreAuthProvider
from core.http_api.auth.resolver import (
    encode_basic_credentials,
    resolve_basic_credentials,
)

__all__ = [
    "AuthPrincipal",
    "StoreAuthProvider",
    "encode_basic_credentials",
    "resolve_basic_credentials",
]

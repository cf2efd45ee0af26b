"""
MEL HTTP API - Contracts
========================
Framework-agnostic request/response DTOs for the resource dispatcher.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class BasicCredentials:
    username: str
    password: str

    def __post_init__(self):
        if not isinstance(self.username, str):
            raise ValueError("username must be a string.")
        if not isinstance(self.password, str):
            raise ValueError("password must be a string.")


@dataclass(frozen=True)
class ApiRequest:
    verb: str
    path: str
    credentials: Optional[BasicCredentials] = None
    body: Optional[bytes] = None

    def __post_init__(self):
        if not self.verb or not isinstance(self.verb, str):
            raise ValueError("verb must be a non-empty string.")
        if not isinstance(self.path, str):
            raise ValueError("path must be a string.")
        if self.credentials is not None and not isinstance(
            self.credentials, BasicCredentials
        ):
            raise ValueError("credentials must be BasicCredentials or None.")
        if self.body is not None and not isinstance(self.body, bytes):
            raise ValueError("body must be bytes or None.")


@dataclass(frozen=True)
class HttpApiErrorBody:
    code: str
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": dict(self.details),
        }


@dataclass(frozen=True)
class ApiResponse:
    """
    Status plus an optional JSON-serialisable body.

    ``body`` of None means an empty response body.
    """

    status: int
    body: Any = None
    headers: tuple[tuple[str, str], ...] = ()

    def header(self, name: str) -> str | None:
        wanted = name.lower()
        for key, value in self.headers:
            if key.lower() == wanted:
                return value
        return None

"""
MEL Resources - Error Kinds
===========================
Recoverable failures raised by resolution and resource operations.

Anything else that escapes a resource operation is an unexpected store
failure and is handled by the dispatcher.
"""

from __future__ import annotations

from core.rejection import ReasonCode


class ResourceError(Exception):
    """Base of the typed failures; only subclasses carry a reason code."""

    code: str | None = None

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidResource(ResourceError):
    code = ReasonCode.INVALID_RESOURCE


class InvalidBody(ResourceError):
    code = ReasonCode.INVALID_BODY


class InvalidMethod(ResourceError):
    code = ReasonCode.INVALID_METHOD

"""
MEL Permissions - Permission Gate
=================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from core.permissions.constants import Capability
from core.permissions.registry import resolve_required_capability
from core.rejection import ReasonCode


@dataclass(frozen=True)
class PermissionEvaluationResult:
    allowed: bool
    rejection_code: Optional[str] = None
    message: str = ""


class PermissionEvaluator:
    @staticmethod
    def _allow() -> PermissionEvaluationResult:
        return PermissionEvaluationResult(allowed=True)

    @staticmethod
    def _deny(code: str, message: str) -> PermissionEvaluationResult:
        return PermissionEvaluationResult(
            allowed=False,
            rejection_code=code,
            message=message,
        )

    @staticmethod
    def evaluate(verb: str, resource) -> PermissionEvaluationResult:
        """
        Check the request verb against the capability mask the resource
        computed for the current principal.
        """
        required = resolve_required_capability(verb)
        if required is None:
            return PermissionEvaluator._deny(
                ReasonCode.INVALID_METHOD,
                f"Method '{verb}' is not supported.",
            )

        mask = Capability(resource.permissions())
        if mask & required:
            return PermissionEvaluator._allow()

        return PermissionEvaluator._deny(
            ReasonCode.FORBIDDEN,
            f"Missing '{required.name}' capability for this resource.",
        )

"""
MEL Permissions - Public API
============================
"""

from core.permissions.capabilities import (
    clients_capabilities,
    deliverable_capabilities,
    deliverable_list_capabilities,
    flag_capabilities,
    login_capabilities,
    project_capabilities,
    project_list_capabilities,
)
from core.permissions.constants import (
    CAPABILITY_ALL,
    Capability,
    VERB_DELETE,
    VERB_GET,
    VERB_POST,
    VERB_PUT,
)
from core.permissions.registry import resolve_required_capability


def __getattr__(name: str):
    if name in {"PermissionEvaluator", "PermissionEvaluationResult"}:
        from core.permissions.evaluator import (
            PermissionEvaluationResult,
            PermissionEvaluator,
        )

        if name == "PermissionEvaluator":
            return PermissionEvaluator
        return PermissionEvaluationResult
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")

__all__ = [
    "Capability",
    "CAPABILITY_ALL",
    "VERB_GET",
    "VERB_PUT",
    "VERB_POST",
    "VERB_DELETE",
    "login_capabilities",
    "project_list_capabilities",
    "project_capabilities",
    "flag_capabilities",
    "clients_capabilities",
    "deliverable_list_capabilities",
    "deliverable_capabilities",
    "PermissionEvaluator",
    "PermissionEvaluationResult",
    "resolve_required_capability",
]

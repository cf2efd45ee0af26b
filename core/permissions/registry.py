"""
MEL Permissions - Verb to Capability Registry
=============================================
"""

from __future__ import annotations

from core.permissions.constants import (
    Capability,
    VERB_DELETE,
    VERB_GET,
    VERB_POST,
    VERB_PUT,
)

VERB_CAPABILITY_MAP = {
    VERB_GET: Capability.GET,
    VERB_PUT: Capability.SET,
    VERB_POST: Capability.CREATE,
    VERB_DELETE: Capability.DELETE,
}


def resolve_required_capability(verb: str) -> Capability | None:
    """Resolve the capability bit a request verb requires."""
    if not isinstance(verb, str):
        return None
    return VERB_CAPABILITY_MAP.get(verb.strip().upper())

"""
MEL Permissions - Capability Derivation
=======================================
Pure functions from ownership/viewing/manager facts to a capability mask.

Masks are recomputed for every request and never stored. Child resources
derive their mask from the already-resolved parent project mask: a principal
with no rights on the project has none on its children.
"""

from __future__ import annotations

from core.permissions.constants import CAPABILITY_ALL, Capability


def login_capabilities(*, created: bool, public: bool = False) -> Capability:
    # Any password logs a public account in; it stays read-only.
    if public:
        return Capability.GET
    mask = Capability.GET | Capability.SET | Capability.DELETE
    if created:
        mask |= Capability.CREATE
    return mask


def project_list_capabilities(*, is_manager: bool) -> Capability:
    if is_manager:
        return Capability.GET | Capability.CREATE
    return Capability.GET


def project_capabilities(*, owns: bool, views: bool) -> Capability:
    if owns:
        return Capability.GET | Capability.SET | Capability.DELETE
    if views:
        return Capability.GET | Capability.DELETE
    return Capability.NONE


def flag_capabilities(project_mask: Capability) -> Capability:
    if project_mask & Capability.SET:
        return Capability.GET | Capability.SET
    if project_mask & Capability.GET:
        return Capability.GET
    return Capability.NONE


def clients_capabilities(project_mask: Capability) -> Capability:
    if project_mask & Capability.SET:
        return Capability.GET | Capability.SET
    return Capability.NONE


def deliverable_list_capabilities(project_mask: Capability) -> Capability:
    if project_mask & Capability.SET:
        return Capability.GET | Capability.CREATE
    if project_mask & Capability.GET:
        return Capability.GET
    return Capability.NONE


def deliverable_capabilities(project_mask: Capability) -> Capability:
    if project_mask & Capability.SET:
        return CAPABILITY_ALL
    return project_mask & Capability.GET

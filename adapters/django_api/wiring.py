"""
MEL Django Adapter Wiring
=========================
Constructs HttpApiDependencies for live runs.

This module is adapter-only glue:
- database-backed store through the Django ORM
- scrypt hashing with the configured work factor
- lowest-free-id allocation and a UTC calendar clock
"""

from __future__ import annotations

import threading

from django.conf import settings

from core.auth.service import DEFAULT_WORK_FACTOR, ScryptPasswordHasher
from core.http_api.dependencies import HttpApiDependencies, ProbingIdAllocator, UtcClock
from core.store.db_provider import DbStore


_DEPENDENCIES_LOCK = threading.Lock()
_DEPENDENCIES: HttpApiDependencies | None = None


def _create_dependencies() -> HttpApiDependencies:
    work_factor = getattr(settings, "MEL_PASSWORD_WORK_FACTOR", DEFAULT_WORK_FACTOR)
    return HttpApiDependencies(
        store=DbStore(),
        password_hasher=ScryptPasswordHasher(work_factor),
        id_allocator=ProbingIdAllocator(),
        clock=UtcClock(),
    )


def build_dependencies() -> HttpApiDependencies:
    """
    Lazily build one process-wide dependency set.
    """
    global _DEPENDENCIES
    with _DEPENDENCIES_LOCK:
        if _DEPENDENCIES is None:
            _DEPENDENCIES = _create_dependencies()
        return _DEPENDENCIES


def reset_dependencies() -> None:
    global _DEPENDENCIES
    with _DEPENDENCIES_LOCK:
        _DEPENDENCIES = None

"""
MEL Store - Public API
======================
"""

from core.store.models import (
    DELIVERABLE_TABLE,
    PROJECT_TABLE,
    DeliverableRecord,
    FlagState,
    ProjectRecord,
    UserRecord,
)
from core.store.provider import InMemoryStore, StoreProvider, allocate_unused_id


def __getattr__(name: str):
    if name == "DbStore":
        from core.store.db_provider import DbStore

        return DbStore
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")

__all__ = [
    "PROJECT_TABLE",
    "DELIVERABLE_TABLE",
    "UserRecord",
    "ProjectRecord",
    "FlagState",
    "DeliverableRecord",
    "StoreProvider",
    "InMemoryStore",
    "DbStore",
    "allocate_unused_id",
]

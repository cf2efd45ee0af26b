"""
MEL Store - Immutable Records
=============================
Framework-agnostic row shapes exchanged with a StoreProvider.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

PROJECT_TABLE = "projects"
DELIVERABLE_TABLE = "deliverables"

NAME_MAX_LENGTH = 127
DESCRIPTION_MAX_LENGTH = 511
DUE_MAX_LENGTH = 64
MAX_PERCENTAGE = 100


@dataclass(frozen=True)
class UserRecord:
    name: str
    salt: bytes
    password_hash: bytes
    is_manager: bool = False

    def __post_init__(self):
        if not self.name or not isinstance(self.name, str):
            raise ValueError("name must be a non-empty string.")
        if not isinstance(self.salt, bytes):
            raise ValueError("salt must be bytes.")
        if not isinstance(self.password_hash, bytes):
            raise ValueError("password_hash must be bytes.")

    @property
    def is_public(self) -> bool:
        return self.password_hash == b""


@dataclass(frozen=True)
class ProjectRecord:
    id: int
    name: str
    percentage: int
    description: str
    updated: date
    version: int = 0
    flag_value: bool = False
    flag_version: int = 0

    def __post_init__(self):
        if not isinstance(self.id, int) or self.id < 0:
            raise ValueError("id must be a non-negative int.")
        if not isinstance(self.updated, date):
            raise ValueError("updated must be a date.")


@dataclass(frozen=True)
class FlagState:
    version: int
    value: bool


@dataclass(frozen=True)
class DeliverableRecord:
    id: int
    project_id: int
    name: str
    due: str
    percentage: int
    description: str

    def __post_init__(self):
        if not isinstance(self.id, int) or self.id < 0:
            raise ValueError("id must be a non-negative int.")
        if not isinstance(self.project_id, int) or self.project_id < 0:
            raise ValueError("project_id must be a non-negative int.")

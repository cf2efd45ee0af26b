"""
MEL Resources - Body Contracts
==============================
Decoding and validation of JSON request bodies, and the JSON
representations returned for each resource.

Field names are matched case-insensitively and unknown fields are ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from core.resources.errors import InvalidBody
from core.store.models import (
    DESCRIPTION_MAX_LENGTH,
    DUE_MAX_LENGTH,
    MAX_PERCENTAGE,
    NAME_MAX_LENGTH,
    DeliverableRecord,
    FlagState,
    ProjectRecord,
    UserRecord,
)

_MISSING = object()


def _fields(payload: Any) -> dict[str, Any]:
    if not isinstance(payload, dict):
        raise InvalidBody("Body must be a JSON object.")
    return {str(key).lower(): value for key, value in payload.items()}


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _bounded_text(fields: dict[str, Any], name: str, max_length: int) -> str:
    value = fields.get(name.lower(), _MISSING)
    if not isinstance(value, str) or not value:
        raise InvalidBody(f"{name} must be a non-empty string.")
    if len(value) > max_length:
        raise InvalidBody(f"{name} must be at most {max_length} characters.")
    return value


def _percentage(fields: dict[str, Any]) -> int:
    value = fields.get("percentage", 0)
    if not _is_int(value) or value < 0 or value > MAX_PERCENTAGE:
        raise InvalidBody(f"Percentage must be an integer in 0..{MAX_PERCENTAGE}.")
    return value


def _optional_id(fields: dict[str, Any]) -> Optional[int]:
    value = fields.get("id")
    if value is None:
        return None
    if not _is_int(value) or value < 0:
        raise InvalidBody("Id must be a non-negative integer.")
    return value


def _optional_date(fields: dict[str, Any], name: str) -> Optional[date]:
    value = fields.get(name.lower())
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidBody(f"{name} must be an ISO date string.")
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise InvalidBody(f"{name} must be an ISO date string.") from exc


# ── Projects ──────────────────────────────────────────────────


@dataclass(frozen=True)
class ProjectBody:
    id: Optional[int]
    name: str
    percentage: int
    description: str
    updated: Optional[date] = None


def decode_project_body(payload: Any) -> ProjectBody:
    fields = _fields(payload)
    return ProjectBody(
        id=_optional_id(fields),
        name=_bounded_text(fields, "Name", NAME_MAX_LENGTH),
        percentage=_percentage(fields),
        description=_bounded_text(fields, "Description", DESCRIPTION_MAX_LENGTH),
        updated=_optional_date(fields, "Updated"),
    )


def encode_project(project: ProjectRecord, *, owns: bool) -> dict[str, Any]:
    return {
        "Id": project.id,
        "Name": project.name,
        "Percentage": project.percentage,
        "Description": project.description,
        "Updated": project.updated.isoformat(),
        "Version": project.version,
        "Owns": owns,
    }


# ── Flag ──────────────────────────────────────────────────────


def decode_flag_body(payload: Any) -> FlagState:
    fields = _fields(payload)
    version = fields.get("version", _MISSING)
    value = fields.get("value", _MISSING)
    if not _is_int(version) or version < 0:
        raise InvalidBody("Version must be a non-negative integer.")
    if not isinstance(value, bool):
        raise InvalidBody("Value must be a boolean.")
    return FlagState(version=version, value=value)


def encode_flag(flag: FlagState) -> dict[str, Any]:
    return {"Version": flag.version, "Value": flag.value}


# ── Clients ───────────────────────────────────────────────────


def decode_clients_body(payload: Any) -> frozenset[str]:
    if not isinstance(payload, list):
        raise InvalidBody("Body must be a JSON array of user names.")
    names = set()
    for item in payload:
        if not isinstance(item, str) or not item:
            raise InvalidBody("Client names must be non-empty strings.")
        names.add(item)
    return frozenset(names)


# ── Deliverables ──────────────────────────────────────────────


@dataclass(frozen=True)
class DeliverableBody:
    id: Optional[int]
    name: str
    due: str
    percentage: int
    description: str


def decode_deliverable_body(payload: Any) -> DeliverableBody:
    fields = _fields(payload)
    # Due is free text; only its length is bounded.
    due = fields.get("due", "")
    if due is None:
        due = ""
    if not isinstance(due, str) or len(due) > DUE_MAX_LENGTH:
        raise InvalidBody(f"Due must be a string of at most {DUE_MAX_LENGTH} characters.")
    return DeliverableBody(
        id=_optional_id(fields),
        name=_bounded_text(fields, "Name", NAME_MAX_LENGTH),
        due=due,
        percentage=_percentage(fields),
        description=_bounded_text(fields, "Description", DESCRIPTION_MAX_LENGTH),
    )


def encode_deliverable(deliverable: DeliverableRecord) -> dict[str, Any]:
    return {
        "Id": deliverable.id,
        "Name": deliverable.name,
        "Due": deliverable.due,
        "Percentage": deliverable.percentage,
        "Description": deliverable.description,
    }


# ── Login ─────────────────────────────────────────────────────


def decode_password_change(payload: Any) -> str:
    fields = _fields(payload)
    password = fields.get("password", _MISSING)
    if not isinstance(password, str) or not password:
        raise InvalidBody("Password must be a non-empty string.")
    return password


def encode_login(user: UserRecord) -> dict[str, Any]:
    return {"User": user.name, "Manager": user.is_manager}

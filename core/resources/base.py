"""
MEL Resources - Resource Interface
==================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from core.permissions.constants import Capability
from core.resources.errors import InvalidMethod


@dataclass(frozen=True)
class CreatedResource:
    location: str
    representation: Any


class Resource:
    """
    Capability-gated resource.

    Subclasses compute their mask once, at resolution time, from facts read
    for the current request, and override the operations they support.
    The defaults grant nothing and support nothing.
    """

    def permissions(self) -> Capability:
        return Capability.NONE

    def get(self) -> Any:
        raise InvalidMethod(f"{type(self).__name__} does not support GET.")

    def set(self, payload: Any) -> None:
        raise InvalidMethod(f"{type(self).__name__} does not support PUT.")

    def create(self, payload: Any) -> CreatedResource:
        raise InvalidMethod(f"{type(self).__name__} does not support POST.")

    def delete(self) -> None:
        raise InvalidMethod(f"{type(self).__name__} does not support DELETE.")

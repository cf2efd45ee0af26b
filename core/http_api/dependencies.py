"""
MEL HTTP API - Dependencies
===========================
Injected providers for storage, hashing, id allocation, and time.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Callable, Protocol


class IdAllocator(Protocol):
    def allocate(self, in_use: Callable[[int], bool]) -> int:
        ...


class Clock(Protocol):
    def today(self) -> date:
        ...


class PasswordHasher(Protocol):
    def hash(self, password: str, salt: bytes) -> bytes:
        ...


class ProbingIdAllocator:
    """
    Linear probe for the lowest unused id at or above ``start``.

    Ids freed by deletion are handed out again; live ids never are.
    """

    def __init__(self, start: int = 0):
        if not isinstance(start, int) or start < 0:
            raise ValueError("start must be a non-negative int.")
        self._start = start

    def allocate(self, in_use: Callable[[int], bool]) -> int:
        candidate = self._start
        while in_use(candidate):
            candidate += 1
        return candidate


class UtcClock:
    def today(self) -> date:
        return datetime.now(timezone.utc).date()


@dataclass(frozen=True)
class HttpApiDependencies:
    store: object
    password_hasher: PasswordHasher
    id_allocator: IdAllocator
    clock: Clock

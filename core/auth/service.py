"""
MEL Auth - Credential Service
=============================
Salting, hashing and comparison of user passwords.

This is the only module that handles raw password bytes. Everything else
talks to it through UserRecord values and the StoreProvider.
"""

from __future__ import annotations

import hashlib
import hmac
import secrets
from typing import Any

from core.store.models import UserRecord

SALT_SIZE = 256
KEY_SIZE = 256
DEFAULT_WORK_FACTOR = 1 << 16


def _ensure_string(value: Any, *, field_name: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{field_name} must be a string.")
    return value


def new_salt() -> bytes:
    return secrets.token_bytes(SALT_SIZE)


class ScryptPasswordHasher:
    """
    scrypt key derivation with a configurable CPU/memory cost.

    The work factor is not stored next to the hash, so raising it
    invalidates every existing password.
    """

    def __init__(
        self,
        work_factor: int = DEFAULT_WORK_FACTOR,
        *,
        block_size: int = 8,
        parallelism: int = 1,
    ):
        if (
            not isinstance(work_factor, int)
            or work_factor < 2
            or work_factor & (work_factor - 1)
        ):
            raise ValueError("work_factor must be a power of two greater than 1.")
        self.work_factor = work_factor
        self.block_size = block_size
        self.parallelism = parallelism

    def hash(self, password: str, salt: bytes) -> bytes:
        password = _ensure_string(password, field_name="password")
        return hashlib.scrypt(
            password.encode("utf-8"),
            salt=salt,
            n=self.work_factor,
            r=self.block_size,
            p=self.parallelism,
            maxmem=256 * self.block_size * (self.work_factor + self.parallelism),
            dklen=KEY_SIZE,
        )


def passwords_match(user: UserRecord, password: str, hasher) -> bool:
    if user.is_public:
        return True
    candidate = hasher.hash(password, user.salt)
    return hmac.compare_digest(candidate, user.password_hash)


class CredentialService:
    @staticmethod
    def provision_user(store, *, name: str, password: str, hasher) -> UserRecord:
        salt = new_salt()
        user = UserRecord(
            name=_ensure_string(name, field_name="name"),
            salt=salt,
            password_hash=hasher.hash(password, salt),
            is_manager=False,
        )
        store.insert_user(user)
        return user

    @staticmethod
    def reset_password(store, *, name: str, password: str, hasher) -> bool:
        salt = new_salt()
        return store.update_password(name, salt, hasher.hash(password, salt))

    @staticmethod
    def set_manager(store, *, name: str, is_manager: bool) -> bool:
        return store.set_manager(name, is_manager)

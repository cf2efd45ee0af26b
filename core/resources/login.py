"""
MEL Resources - Login
=====================
The authenticated user's own account.
"""

from __future__ import annotations

import logging
from typing import Any

from core.auth.service import CredentialService
from core.permissions.capabilities import login_capabilities
from core.permissions.constants import Capability
from core.resources.base import CreatedResource, Resource
from core.resources.contracts import decode_password_change, encode_login
from core.resources.errors import InvalidResource
from core.resources.projects import remove_owner
from core.store.models import UserRecord

logger = logging.getLogger("mel.resources")


class LoginResource(Resource):
    def __init__(self, *, username: str, created: bool, dependencies, public: bool = False):
        self.username = username
        self._mask = login_capabilities(created=created, public=public)
        self._dependencies = dependencies

    def permissions(self) -> Capability:
        return self._mask

    def _load(self) -> UserRecord:
        user = self._dependencies.store.find_user(self.username)
        if user is None:
            raise InvalidResource(f"Account '{self.username}' does not exist.")
        return user

    def get(self) -> dict[str, Any]:
        return encode_login(self._load())

    def create(self, payload: Any) -> CreatedResource:
        # The account itself was provisioned while authenticating.
        return CreatedResource(location="/login", representation=encode_login(self._load()))

    def set(self, payload: Any) -> None:
        # Manager is not writable here; see the promote_manager command.
        password = decode_password_change(payload)
        updated = CredentialService.reset_password(
            self._dependencies.store,
            name=self.username,
            password=password,
            hasher=self._dependencies.password_hasher,
        )
        if not updated:
            raise InvalidResource(f"Account '{self.username}' does not exist.")

    def delete(self) -> None:
        store = self._dependencies.store
        for pid in store.viewed_project_ids(self.username):
            store.delete_views(self.username, pid)
        for pid in store.owned_project_ids(self.username):
            remove_owner(store, self.username, pid)
        store.delete_user(self.username)
        logger.info("Deleted account '%s'.", self.username)

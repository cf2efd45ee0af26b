"""
MEL HTTP API Auth - Principal and Store-backed Provider
=======================================================
Password authentication against the credential store.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from core.auth.service import SALT_SIZE, CredentialService, passwords_match
from core.http_api.contracts import BasicCredentials
from core.permissions.constants import VERB_POST
from core.rejection import ReasonCode, RejectionReason
from core.resources.resolver import LOGIN_PATH

logger = logging.getLogger("mel.auth")

_STAGE = "authenticator"
_INVALID_CREDENTIALS_MESSAGE = "Invalid username or password."

# Unknown users are hashed against this salt so both rejection paths cost one hash.
_DUMMY_SALT = bytes(SALT_SIZE)


@dataclass(frozen=True)
class AuthPrincipal:
    """
    Authenticated identity for one request.

    ``created`` is True only when the account was provisioned while
    authenticating this very request.
    """

    username: str
    created: bool = False

    def __post_init__(self):
        if not self.username or not isinstance(self.username, str):
            raise ValueError("username must be a non-empty string.")


def _reject(code: str, message: str) -> RejectionReason:
    return RejectionReason(code=code, message=message, stage=_STAGE)


class StoreAuthProvider:
    """
    Authenticates HTTP Basic credentials against a StoreProvider.

    Unknown users are provisioned on the fly when, and only when, the
    request is a POST to the login resource. Users stored with an empty
    password hash are public demonstration accounts and accept any password.
    """

    def __init__(self, store, password_hasher):
        self._store = store
        self._hasher = password_hasher

    def authenticate(
        self,
        credentials: BasicCredentials | None,
        *,
        path: str,
        verb: str,
    ) -> AuthPrincipal | RejectionReason:
        if credentials is None:
            return _reject(
                ReasonCode.NO_CREDENTIALS,
                "Missing HTTP Basic credentials.",
            )
        if not credentials.username:
            return _reject(
                ReasonCode.INVALID_CREDENTIALS,
                _INVALID_CREDENTIALS_MESSAGE,
            )

        user = self._store.find_user(credentials.username)
        if user is None:
            if path == LOGIN_PATH and verb == VERB_POST:
                CredentialService.provision_user(
                    self._store,
                    name=credentials.username,
                    password=credentials.password,
                    hasher=self._hasher,
                )
                logger.info("Provisioned account '%s'.", credentials.username)
                return AuthPrincipal(username=credentials.username, created=True)
            self._hasher.hash(credentials.password, _DUMMY_SALT)
            return _reject(
                ReasonCode.INVALID_CREDENTIALS,
                _INVALID_CREDENTIALS_MESSAGE,
            )

        if not passwords_match(user, credentials.password, self._hasher):
            return _reject(
                ReasonCode.INVALID_CREDENTIALS,
                _INVALID_CREDENTIALS_MESSAGE,
            )
        return AuthPrincipal(username=user.name)

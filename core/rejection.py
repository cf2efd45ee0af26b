"""
MEL Core - Rejection Model
==========================
Structured reasons for requests that end before a resource operation
completes. Rejections are values, not exceptions: authentication and the
permission gate return them and the dispatcher maps them to a status.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RejectionReason:
    """
    Structured reason for a rejected request.

    Fields:
        code:    Machine-readable code (see ReasonCode).
        message: Human-readable explanation.
        stage:   Name of the pipeline stage that rejected the request.
    """

    code: str
    message: str
    stage: str

    def __post_init__(self):
        if not self.code or not isinstance(self.code, str):
            raise ValueError("code must be a non-empty string.")

        if not self.message or not isinstance(self.message, str):
            raise ValueError("message must be a non-empty string.")

        if not self.stage or not isinstance(self.stage, str):
            raise ValueError("stage must be a non-empty string.")


class ReasonCode:
    """
    Known rejection codes.

    Convention: SCREAMING_SNAKE_CASE.
    """

    # ── Authentication ────────────────────────────────────────
    NO_CREDENTIALS = "NO_CREDENTIALS"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"

    # ── Resolution / gating ───────────────────────────────────
    INVALID_RESOURCE = "INVALID_RESOURCE"
    FORBIDDEN = "FORBIDDEN"
    INVALID_METHOD = "INVALID_METHOD"

    # ── Payload ───────────────────────────────────────────────
    INVALID_BODY = "INVALID_BODY"

    # ── General ───────────────────────────────────────────────
    STORE_FAILURE = "STORE_FAILURE"

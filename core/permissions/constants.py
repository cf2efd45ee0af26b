"""
MEL Permissions - Capability Constants
======================================
"""

from __future__ import annotations

from enum import IntFlag


class Capability(IntFlag):
    NONE = 0
    GET = 1
    SET = 2
    CREATE = 4
    DELETE = 8


CAPABILITY_ALL = Capability.GET | Capability.SET | Capability.CREATE | Capability.DELETE

VERB_GET = "GET"
VERB_PUT = "PUT"
VERB_POST = "POST"
VERB_DELETE = "DELETE"

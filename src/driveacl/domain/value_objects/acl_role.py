"""Roles that can be granted on a shared resource."""

from enum import StrEnum


class AclRole(StrEnum):
    """Access level granted to a scope."""

    OWNER = "owner"
    WRITER = "writer"
    READER = "reader"

"""Domain value objects."""

from driveacl.domain.value_objects.acl_role import AclRole
from driveacl.domain.value_objects.scope_type import ScopeType

__all__ = [
    "AclRole",
    "ScopeType",
]

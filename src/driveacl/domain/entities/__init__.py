"""Domain entities."""

from driveacl.domain.entities.acl_entry import AclEntry, CommittedBacking, PendingBacking
from driveacl.domain.entities.drive_permission import DrivePermission

__all__ = [
    "AclEntry",
    "CommittedBacking",
    "DrivePermission",
    "PendingBacking",
]

"""Application ports - interfaces for external collaborators."""

from driveacl.application.ports.acl_owner import AclOwner
from driveacl.application.ports.api_permission import ApiPermission

__all__ = [
    "AclOwner",
    "ApiPermission",
]

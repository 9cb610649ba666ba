"""ACL entry entity - one scope-to-role binding of a shared resource."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from driveacl.domain.acl_params import normalize_params
from driveacl.domain.value_objects import ScopeType

if TYPE_CHECKING:
    from driveacl.application.ports import AclOwner, ApiPermission

logger = logging.getLogger(__name__)


@dataclass
class PendingBacking:
    """Entry described by normalized parameters, not yet sent to the service."""

    params: dict[str, Any]


@dataclass
class CommittedBacking:
    """Entry backed by a remote permission owned by an ACL collection."""

    api_permission: ApiPermission
    acl: AclOwner

    def __post_init__(self) -> None:
        if self.acl is None:
            raise ValueError("Committed entry requires an owning ACL")


class AclEntry:
    """An entry of the ACL (access control list) of a shared resource.

    Pending entries are created with ``from_params`` and passed to the ACL
    collection for creation. Committed entries are created by the collection
    with ``from_api_permission``; changing their role is persisted through
    ``acl.update_role``.
    """

    def __init__(self, backing: PendingBacking | CommittedBacking) -> None:
        self._backing = backing

    @classmethod
    def from_params(cls, params: Mapping[Any, Any]) -> AclEntry:
        """Build a pending entry.

        Accepts current keys (``type``, ``value``, ``role``, ``withLink``) as well
        as the old ``scope_type``, ``scope`` and ``with_key``.
        """
        return cls(PendingBacking(params=normalize_params(params)))

    @classmethod
    def from_api_permission(cls, api_permission: ApiPermission, acl: AclOwner) -> AclEntry:
        """Build a committed entry owned by ``acl``."""
        return cls(CommittedBacking(api_permission=api_permission, acl=acl))

    @property
    def is_pending(self) -> bool:
        return isinstance(self._backing, PendingBacking)

    @property
    def is_committed(self) -> bool:
        return isinstance(self._backing, CommittedBacking)

    @property
    def acl(self) -> AclOwner | None:
        """Owning ACL collection, None for pending entries."""
        match self._backing:
            case CommittedBacking(acl=acl):
                return acl
            case _:
                return None

    @property
    def params(self) -> dict[str, Any] | None:
        """Normalized parameters of a pending entry, None once committed."""
        match self._backing:
            case PendingBacking(params=params):
                return params
            case _:
                return None

    @property
    def api_permission(self) -> ApiPermission | None:
        match self._backing:
            case CommittedBacking(api_permission=api_permission):
                return api_permission
            case _:
                return None

    def _read(self, key: str, attribute: str) -> Any:
        match self._backing:
            case PendingBacking(params=params):
                return params.get(key)
            case CommittedBacking(api_permission=api_permission):
                return getattr(api_permission, attribute)

    @property
    def role(self) -> str | None:
        """Role given to the scope: "owner", "writer" or "reader"."""
        return self._read("role", "role")

    @role.setter
    def role(self, role: str) -> None:
        """Change the role of the scope.

        Committed entries push the change to the service through the owning ACL.
        """
        match self._backing:
            case PendingBacking(params=params):
                params["role"] = role
            case CommittedBacking(api_permission=api_permission, acl=acl):
                api_permission.role = role
                logger.debug("Updating role to %s", role)
                try:
                    acl.update_role(self)
                except Exception:
                    logger.warning("Failed to update role to %s", role)
                    raise

    @property
    def type(self) -> str | None:
        """Scope type: "user", "group", "domain" or "anyone"."""
        return self._read("type", "type")

    @property
    def value(self) -> str | None:
        """Scope identifier: email address for user/group, domain name for domain.

        None for anyone-scopes.
        """
        match self._backing:
            case PendingBacking(params=params):
                return params.get("value")
            case CommittedBacking(api_permission=api_permission):
                match api_permission.type:
                    case ScopeType.USER | ScopeType.GROUP:
                        return api_permission.email_address
                    case ScopeType.DOMAIN:
                        return api_permission.domain
                    case _:
                        return None

    @property
    def additional_roles(self) -> list[str] | None:
        return self._read("additionalRoles", "additional_roles")

    @property
    def id(self) -> str | None:
        return self._read("id", "id")

    @property
    def with_link(self) -> bool | None:
        """True if the resource is shared only with people who have the link."""
        return self._read("withLink", "with_link")

    # Names used by the old API.
    scope_type = type
    scope = value
    with_key = with_link

    def __repr__(self) -> str:
        return f"<{type(self).__name__} type={self.type!r}, value={self.value!r}, role={self.role!r}>"

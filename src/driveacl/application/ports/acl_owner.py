"""ACL owner port - collection that persists changes to committed entries."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from driveacl.domain.entities import AclEntry


class AclOwner(Protocol):
    """Port for the ACL collection that owns committed entries."""

    def update_role(self, entry: AclEntry) -> None: ...

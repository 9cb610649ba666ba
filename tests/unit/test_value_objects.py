"""Unit tests for ACL value objects."""

from driveacl.domain.entities import AclEntry
from driveacl.domain.value_objects import AclRole, ScopeType


def test_acl_role_values() -> None:
    """AclRole covers owner, writer and reader."""
    assert [r.value for r in AclRole] == ["owner", "writer", "reader"]


def test_scope_type_values() -> None:
    """ScopeType covers user, group, domain and anyone."""
    assert [s.value for s in ScopeType] == ["user", "group", "domain", "anyone"]


def test_enums_usable_as_params() -> None:
    """Enum members can be used as entry parameters and compare to strings."""
    entry = AclEntry.from_params({"type": ScopeType.DOMAIN, "value": "example.com", "role": AclRole.READER})
    assert entry.type == "domain"
    assert entry.role == "reader"

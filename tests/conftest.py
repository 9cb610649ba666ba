"""Pytest fixtures for driveacl tests."""

from __future__ import annotations

import pytest

from driveacl.domain.entities import AclEntry, DrivePermission


# --- Fake ACL collections ---


class FakeAcl:
    """In-memory ACL collection recording role updates."""

    def __init__(self) -> None:
        self.updated: list[AclEntry] = []
        self.persisted_roles: dict[str | None, str | None] = {}

    def update_role(self, entry: AclEntry) -> None:
        self.updated.append(entry)
        self.persisted_roles[entry.id] = entry.role


class FailingAcl:
    """ACL collection whose remote update always fails."""

    def __init__(self, error: Exception) -> None:
        self.error = error
        self.calls = 0

    def update_role(self, entry: AclEntry) -> None:
        self.calls += 1
        raise self.error


# --- Fixtures ---


@pytest.fixture
def fake_acl() -> FakeAcl:
    """Fresh in-memory ACL collection for each test."""
    return FakeAcl()


@pytest.fixture
def user_permission() -> DrivePermission:
    """Committed permission for a user scope."""
    return DrivePermission(
        id="perm-user-1",
        type="user",
        role="reader",
        email_address="alice@example.com",
        additional_roles=["commenter"],
        with_link=False,
    )


@pytest.fixture
def committed_entry(user_permission: DrivePermission, fake_acl: FakeAcl) -> AclEntry:
    """Committed user entry owned by fake_acl."""
    return AclEntry.from_api_permission(user_permission, fake_acl)

"""Remote permission port - permission object returned by the sharing service."""

from typing import Protocol


class ApiPermission(Protocol):
    """Port for a permission that has been accepted by the remote service.

    Scope identity depends on ``type``: ``email_address`` is set for user and
    group scopes, ``domain`` for domain scopes. Anyone-scopes have neither.
    """

    role: str | None

    @property
    def type(self) -> str | None: ...

    @property
    def id(self) -> str | None: ...

    @property
    def additional_roles(self) -> list[str] | None: ...

    @property
    def with_link(self) -> bool | None: ...

    @property
    def email_address(self) -> str | None: ...

    @property
    def domain(self) -> str | None: ...

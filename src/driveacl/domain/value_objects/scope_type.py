"""Scope kinds of an ACL entry."""

from enum import StrEnum


class ScopeType(StrEnum):
    """Kind of subject a permission is bound to.

    USER and GROUP scopes are identified by an email address, DOMAIN by a
    domain name. ANYONE has no identifier.
    """

    USER = "user"
    GROUP = "group"
    DOMAIN = "domain"
    ANYONE = "anyone"

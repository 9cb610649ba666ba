"""Normalization of ACL entry parameters across API versions."""

from collections.abc import Mapping
from enum import Enum
from typing import Any

from driveacl.domain.value_objects import ScopeType

# Old API parameter names -> current names.
LEGACY_KEYS: dict[str, str] = {
    "scope_type": "type",
    "scope": "value",
    "with_key": "withLink",
}

# The old API called public sharing "default".
LEGACY_ANYONE_VALUE = "default"


def _key_to_str(key: Any) -> str:
    if isinstance(key, Enum):
        return str(key.value)
    return str(key)


def normalize_params(params: Mapping[Any, Any]) -> dict[str, Any]:
    """Return a new dict with string keys and legacy parameters converted.

    Unknown keys are kept as they are, so callers can pass fields the remote
    service understands. The input mapping is not modified.
    """
    normalized: dict[str, Any] = {}
    for key, value in params.items():
        name = _key_to_str(key)
        if name == "scope_type" and value == LEGACY_ANYONE_VALUE:
            value = ScopeType.ANYONE.value
        normalized[LEGACY_KEYS.get(name, name)] = value
    return normalized

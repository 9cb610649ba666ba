"""Drive permission resource as returned by the Drive v3 permissions API."""

from pydantic import BaseModel, ConfigDict, Field


class DrivePermission(BaseModel):
    """Permission resource accepted by the remote service.

    Built from API JSON (camelCase keys) or by field name. Fields the entry
    does not read are ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str | None = None
    type: str | None = None
    role: str | None = None
    email_address: str | None = Field(default=None, alias="emailAddress")
    domain: str | None = None
    additional_roles: list[str] | None = Field(default=None, alias="additionalRoles")
    with_link: bool | None = Field(default=None, alias="withLink")

"""Two-field record form of an RFC 5322 email address."""

from pydantic import BaseModel, ConfigDict, Field


class EmailAddressRecord(BaseModel):
    """Persisted shape ``{"address": ..., "displayName": ...}``.

    Dump with ``by_alias=True`` to get the ``displayName`` key.

    Attributes:
        address: ``local@domain`` without display name
        display_name: Optional display name, unquoted
    """

    address: str = Field(..., description="Address without display name")
    display_name: str | None = Field(
        default=None, alias="displayName", description="Display name"
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True)

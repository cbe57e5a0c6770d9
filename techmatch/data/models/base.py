"""
Base model classes for TechMatch data models.

Provides common fields and functionality shared across all models.
"""

from typing import Annotated, Any, Optional
from uuid import UUID

from bson import ObjectId
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _stringify_id(value: Any) -> Any:
    """Render stored identifiers (ObjectId, UUID, int) as opaque strings."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (ObjectId, UUID, int)) and not isinstance(value, bool):
        return str(value)
    return value


# Opaque identifier, always a string once validated
StoredId = Annotated[str, BeforeValidator(_stringify_id)]


class BaseDocument(BaseModel):
    """
    Base document model for stored records.

    Stored attribute names are used verbatim; unknown attributes are ignored.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
        extra="ignore",
    )

    id: Optional[StoredId] = Field(default=None, alias="_id")

    def model_dump_public(self) -> dict[str, Any]:
        """Dump using public attribute names (``id`` rather than ``_id``)."""
        return self.model_dump(by_alias=False, mode="json")

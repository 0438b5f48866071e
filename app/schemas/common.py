from __future__ import annotations

from datetime import datetime
from typing import Union

from pydantic import BaseModel, ConfigDict, Field


class RefSummary(BaseModel):
    """Resolved cross-reference: at minimum the target's id and display name.

    Extra keys are kept so a fully resolved record (e.g. a Combination found by
    reverse lookup) can travel through the same field.
    """

    id: str
    name: str

    model_config = ConfigDict(extra="allow")


# An unresolvable (dangling) identifier is passed through as the raw string.
Reference = Union[RefSummary, str]


class MessageResponse(BaseModel):
    message: str


class CatalogRead(BaseModel):
    id: str
    created_at: datetime | None = Field(default=None, alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


def clean_required_text(value: object, field: str) -> str:
    # Runs before type coercion, so non-string input arrives here as-is.
    if value is None:
        value = ""
    if not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    text = value.strip()
    if not text:
        raise ValueError(f"{field} is required")
    return text


def clean_optional_text(value: str | None) -> str | None:
    if value is None:
        return None
    text = value.strip()
    return text or None


def clean_id_list(values: list[str] | None) -> list[str]:
    if not values:
        return []
    return [v.strip() for v in values if v and v.strip()]

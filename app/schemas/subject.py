from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from app.schemas.common import CatalogRead, Reference, clean_id_list, clean_optional_text, clean_required_text


class SubjectCreate(BaseModel):
    name: str
    description: str | None = None
    combinations: list[str] = Field(default_factory=list)

    @field_validator("name", mode="before")
    @classmethod
    def _validate_name(cls, v: str | None) -> str:
        return clean_required_text(v, "name")

    @field_validator("description")
    @classmethod
    def _validate_description(cls, v: str | None) -> str | None:
        return clean_optional_text(v)

    @field_validator("combinations")
    @classmethod
    def _validate_combinations(cls, v: list[str]) -> list[str]:
        return clean_id_list(v)


class SubjectUpdate(BaseModel):
    name: str | None = None
    description: str | None = None
    combinations: list[str] | None = None

    @field_validator("name", mode="before")
    @classmethod
    def _validate_name(cls, v: str | None) -> str:
        return clean_required_text(v, "name")

    @field_validator("description")
    @classmethod
    def _validate_description(cls, v: str | None) -> str | None:
        return clean_optional_text(v)

    @field_validator("combinations")
    @classmethod
    def _validate_combinations(cls, v: list[str] | None) -> list[str]:
        return clean_id_list(v)


class SubjectRead(CatalogRead):
    name: str
    description: str | None = None
    combinations: list[Reference] = Field(default_factory=list)

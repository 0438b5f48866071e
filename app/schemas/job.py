from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.schemas.common import CatalogRead, Reference, clean_id_list, clean_optional_text, clean_required_text


class JobCreate(BaseModel):
    title: str
    description: str | None = None
    related_programs: list[str] = Field(default_factory=list, alias="relatedPrograms")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("title", mode="before")
    @classmethod
    def _validate_title(cls, v: str | None) -> str:
        return clean_required_text(v, "title")

    @field_validator("description")
    @classmethod
    def _validate_description(cls, v: str | None) -> str | None:
        return clean_optional_text(v)

    @field_validator("related_programs")
    @classmethod
    def _validate_related_programs(cls, v: list[str]) -> list[str]:
        return clean_id_list(v)


class JobUpdate(BaseModel):
    title: str | None = None
    description: str | None = None
    related_programs: list[str] | None = Field(default=None, alias="relatedPrograms")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("title", mode="before")
    @classmethod
    def _validate_title(cls, v: str | None) -> str:
        return clean_required_text(v, "title")

    @field_validator("description")
    @classmethod
    def _validate_description(cls, v: str | None) -> str | None:
        return clean_optional_text(v)

    @field_validator("related_programs")
    @classmethod
    def _validate_related_programs(cls, v: list[str] | None) -> list[str]:
        return clean_id_list(v)


class JobRead(CatalogRead):
    title: str
    description: str | None = None
    related_programs: list[Reference] = Field(default_factory=list, alias="relatedPrograms")

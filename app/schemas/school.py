from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from app.schemas.common import CatalogRead, Reference, clean_id_list, clean_optional_text, clean_required_text


SchoolLevel = Literal["O-Level", "A-Level", "College"]


class SchoolCreate(BaseModel):
    name: str
    location: str | None = None
    level: SchoolLevel | None = None
    is_university: bool = Field(default=False, alias="isUniversity")
    combinations: list[str] = Field(default_factory=list)
    programs: list[str] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("name", mode="before")
    @classmethod
    def _validate_name(cls, v: str | None) -> str:
        return clean_required_text(v, "name")

    @field_validator("location")
    @classmethod
    def _validate_location(cls, v: str | None) -> str | None:
        return clean_optional_text(v)

    @field_validator("level", mode="before")
    @classmethod
    def _blank_level_is_none(cls, v: str | None) -> str | None:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("combinations", "programs")
    @classmethod
    def _validate_refs(cls, v: list[str]) -> list[str]:
        return clean_id_list(v)

    @model_validator(mode="after")
    def _level_required_unless_university(self) -> "SchoolCreate":
        if not self.is_university and not self.level:
            raise ValueError("level is required unless isUniversity is true")
        return self


class SchoolUpdate(BaseModel):
    # The level rule is checked against the merged record in the service layer.
    name: str | None = None
    location: str | None = None
    level: SchoolLevel | None = None
    is_university: bool | None = Field(default=None, alias="isUniversity")
    combinations: list[str] | None = None
    programs: list[str] | None = None

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("name", mode="before")
    @classmethod
    def _validate_name(cls, v: str | None) -> str:
        return clean_required_text(v, "name")

    @field_validator("location")
    @classmethod
    def _validate_location(cls, v: str | None) -> str | None:
        return clean_optional_text(v)

    @field_validator("level", mode="before")
    @classmethod
    def _blank_level_is_none(cls, v: str | None) -> str | None:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("is_university", mode="before")
    @classmethod
    def _null_is_false(cls, v: bool | None) -> bool:
        return False if v is None else v

    @field_validator("combinations", "programs")
    @classmethod
    def _validate_refs(cls, v: list[str] | None) -> list[str]:
        return clean_id_list(v)


class SchoolRead(CatalogRead):
    name: str
    location: str | None = None
    level: str | None = None
    is_university: bool = Field(default=False, alias="isUniversity")
    combinations: list[Reference] = Field(default_factory=list)
    programs: list[Reference] = Field(default_factory=list)

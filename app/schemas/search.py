from __future__ import annotations

from pydantic import BaseModel, Field

from app.schemas.combination import CombinationRead
from app.schemas.job import JobRead
from app.schemas.program import ProgramRead
from app.schemas.school import SchoolRead
from app.schemas.subject import SubjectRead


class SearchResponse(BaseModel):
    subjects: list[SubjectRead] = Field(default_factory=list)
    combinations: list[CombinationRead] = Field(default_factory=list)
    programs: list[ProgramRead] = Field(default_factory=list)
    schools: list[SchoolRead] = Field(default_factory=list)
    jobs: list[JobRead] = Field(default_factory=list)

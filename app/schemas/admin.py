from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CatalogCounts(BaseModel):
    subjects: int
    combinations: int
    programs: int
    schools: int
    jobs: int
    users: int


class AdminStatsResponse(BaseModel):
    generated_at: datetime = Field(alias="generatedAt")
    counts: CatalogCounts

    model_config = ConfigDict(populate_by_name=True)

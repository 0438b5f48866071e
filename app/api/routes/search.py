from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.user import User
from app.routers.dependencies import get_current_user
from app.schemas.search import SearchResponse
from app.services.catalog import ENTITIES, list_records
from app.services.references import resolve_documents


router = APIRouter(tags=["search"])


@router.get("/search", response_model=SearchResponse)
def search_catalog(
    q: str | None = Query(default=None, description="Case-insensitive substring searched in every collection"),
    db: Session = Depends(get_db),
    _user: User = Depends(get_current_user),
) -> SearchResponse:
    # A blank query returns nothing here rather than the whole catalog.
    if not q or not q.strip():
        return SearchResponse()
    results = {
        key: resolve_documents(db, entity, list_records(db, entity, q=q))
        for key, entity in ENTITIES.items()
    }
    return SearchResponse.model_validate(results)

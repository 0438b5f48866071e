from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.user import User
from app.routers.dependencies import get_current_user, require_mutation
from app.schemas.common import MessageResponse
from app.schemas.school import SchoolCreate, SchoolRead, SchoolUpdate
from app.services.catalog import SCHOOLS, create_record, delete_record, get_record, list_records, update_record
from app.services.references import resolve_document, resolve_documents


router = APIRouter(prefix="/schools", tags=["schools"])


@router.post("", response_model=SchoolRead, status_code=status.HTTP_201_CREATED)
def create_school(
    payload: SchoolCreate,
    db: Session = Depends(get_db),
    _admin: User = Depends(require_mutation("schools")),
) -> Any:
    record = create_record(db, SCHOOLS, payload.model_dump())
    return resolve_document(db, SCHOOLS, record)


@router.get("", response_model=list[SchoolRead])
def list_schools(
    q: str | None = Query(default=None, description="Case-insensitive substring of name or location"),
    db: Session = Depends(get_db),
    _user: User = Depends(get_current_user),
) -> Any:
    return resolve_documents(db, SCHOOLS, list_records(db, SCHOOLS, q=q))


@router.get("/{school_id}", response_model=SchoolRead)
def get_school(
    school_id: str,
    db: Session = Depends(get_db),
    _user: User = Depends(get_current_user),
) -> Any:
    return resolve_document(db, SCHOOLS, get_record(db, SCHOOLS, school_id))


@router.put("/{school_id}", response_model=SchoolRead)
def update_school(
    school_id: str,
    payload: SchoolUpdate,
    db: Session = Depends(get_db),
    _admin: User = Depends(require_mutation("schools")),
) -> Any:
    # The level rule is re-checked against the merged record.
    record = update_record(db, SCHOOLS, school_id, payload.model_dump(exclude_unset=True))
    return resolve_document(db, SCHOOLS, record)


@router.delete("/{school_id}", response_model=MessageResponse)
def delete_school(
    school_id: str,
    db: Session = Depends(get_db),
    _admin: User = Depends(require_mutation("schools")),
) -> MessageResponse:
    delete_record(db, SCHOOLS, school_id)
    return MessageResponse(message="School deleted successfully")

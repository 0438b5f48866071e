from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.user import User
from app.routers.dependencies import get_current_user, require_mutation
from app.schemas.common import MessageResponse
from app.schemas.subject import SubjectCreate, SubjectRead, SubjectUpdate
from app.services.catalog import SUBJECTS, create_record, delete_record, get_record, list_records, update_record
from app.services.references import resolve_detail, resolve_document, resolve_documents


router = APIRouter(prefix="/subjects", tags=["subjects"])


@router.post("", response_model=SubjectRead, status_code=status.HTTP_201_CREATED)
def create_subject(
    payload: SubjectCreate,
    db: Session = Depends(get_db),
    _admin: User = Depends(require_mutation("subjects")),
) -> Any:
    record = create_record(db, SUBJECTS, payload.model_dump())
    return resolve_document(db, SUBJECTS, record)


@router.get("", response_model=list[SubjectRead])
def list_subjects(
    q: str | None = Query(default=None, description="Case-insensitive substring of name or description"),
    db: Session = Depends(get_db),
    _user: User = Depends(get_current_user),
) -> Any:
    return resolve_documents(db, SUBJECTS, list_records(db, SUBJECTS, q=q))


@router.get("/{subject_id}", response_model=SubjectRead)
def get_subject(
    subject_id: str,
    db: Session = Depends(get_db),
    _user: User = Depends(get_current_user),
) -> Any:
    # Falls back to a reverse lookup over combinations when the stored array is empty.
    return resolve_detail(db, SUBJECTS, get_record(db, SUBJECTS, subject_id))


@router.put("/{subject_id}", response_model=SubjectRead)
def update_subject(
    subject_id: str,
    payload: SubjectUpdate,
    db: Session = Depends(get_db),
    _admin: User = Depends(require_mutation("subjects")),
) -> Any:
    record = update_record(db, SUBJECTS, subject_id, payload.model_dump(exclude_unset=True))
    return resolve_document(db, SUBJECTS, record)


@router.delete("/{subject_id}", response_model=MessageResponse)
def delete_subject(
    subject_id: str,
    db: Session = Depends(get_db),
    _admin: User = Depends(require_mutation("subjects")),
) -> MessageResponse:
    delete_record(db, SUBJECTS, subject_id)
    return MessageResponse(message="Subject deleted successfully")

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.user import User
from app.routers.dependencies import get_current_user, require_mutation
from app.schemas.combination import CombinationCreate, CombinationRead, CombinationUpdate
from app.schemas.common import MessageResponse
from app.services.catalog import COMBINATIONS, create_record, delete_record, get_record, list_records, update_record
from app.services.references import resolve_document, resolve_documents


router = APIRouter(prefix="/combinations", tags=["combinations"])


@router.post("", response_model=CombinationRead, status_code=status.HTTP_201_CREATED)
def create_combination(
    payload: CombinationCreate,
    db: Session = Depends(get_db),
    _admin: User = Depends(require_mutation("combinations")),
) -> Any:
    # Subject.combinations / Program.combinations are left untouched.
    record = create_record(db, COMBINATIONS, payload.model_dump())
    return resolve_document(db, COMBINATIONS, record)


@router.get("", response_model=list[CombinationRead])
def list_combinations(
    q: str | None = Query(default=None, description="Case-insensitive substring of name or description"),
    subject_id: str | None = Query(default=None, alias="subjectId", description="Only combinations containing this subject"),
    db: Session = Depends(get_db),
    _user: User = Depends(get_current_user),
) -> Any:
    member_of = ("subjects", subject_id) if subject_id else None
    return resolve_documents(db, COMBINATIONS, list_records(db, COMBINATIONS, q=q, member_of=member_of))


@router.get("/{combination_id}", response_model=CombinationRead)
def get_combination(
    combination_id: str,
    db: Session = Depends(get_db),
    _user: User = Depends(get_current_user),
) -> Any:
    return resolve_document(db, COMBINATIONS, get_record(db, COMBINATIONS, combination_id))


@router.put("/{combination_id}", response_model=CombinationRead)
def update_combination(
    combination_id: str,
    payload: CombinationUpdate,
    db: Session = Depends(get_db),
    _admin: User = Depends(require_mutation("combinations")),
) -> Any:
    record = update_record(db, COMBINATIONS, combination_id, payload.model_dump(exclude_unset=True))
    return resolve_document(db, COMBINATIONS, record)


@router.delete("/{combination_id}", response_model=MessageResponse)
def delete_combination(
    combination_id: str,
    db: Session = Depends(get_db),
    _admin: User = Depends(require_mutation("combinations")),
) -> MessageResponse:
    # No cascade: ids held by subjects, programs and schools are left dangling.
    delete_record(db, COMBINATIONS, combination_id)
    return MessageResponse(message="Combination deleted successfully")

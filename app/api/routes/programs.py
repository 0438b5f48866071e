from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.user import User
from app.routers.dependencies import get_current_user, require_mutation
from app.schemas.common import MessageResponse
from app.schemas.program import ProgramCreate, ProgramRead, ProgramUpdate
from app.services.catalog import PROGRAMS, create_record, delete_record, get_record, list_records, update_record
from app.services.references import resolve_detail, resolve_document, resolve_documents


router = APIRouter(prefix="/programs", tags=["programs"])


@router.post("", response_model=ProgramRead, status_code=status.HTTP_201_CREATED)
def create_program(
    payload: ProgramCreate,
    db: Session = Depends(get_db),
    _admin: User = Depends(require_mutation("programs")),
) -> Any:
    record = create_record(db, PROGRAMS, payload.model_dump())
    return resolve_document(db, PROGRAMS, record)


@router.get("", response_model=list[ProgramRead])
def list_programs(
    q: str | None = Query(default=None, description="Case-insensitive substring of name or description"),
    db: Session = Depends(get_db),
    _user: User = Depends(get_current_user),
) -> Any:
    return resolve_documents(db, PROGRAMS, list_records(db, PROGRAMS, q=q))


@router.get("/{program_id}", response_model=ProgramRead)
def get_program(
    program_id: str,
    db: Session = Depends(get_db),
    _user: User = Depends(get_current_user),
) -> Any:
    return resolve_detail(db, PROGRAMS, get_record(db, PROGRAMS, program_id))


@router.put("/{program_id}", response_model=ProgramRead)
def update_program(
    program_id: str,
    payload: ProgramUpdate,
    db: Session = Depends(get_db),
    _admin: User = Depends(require_mutation("programs")),
) -> Any:
    record = update_record(db, PROGRAMS, program_id, payload.model_dump(exclude_unset=True))
    return resolve_document(db, PROGRAMS, record)


@router.delete("/{program_id}", response_model=MessageResponse)
def delete_program(
    program_id: str,
    db: Session = Depends(get_db),
    _admin: User = Depends(require_mutation("programs")),
) -> MessageResponse:
    delete_record(db, PROGRAMS, program_id)
    return MessageResponse(message="Program deleted successfully")

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.user import User
from app.routers.dependencies import get_current_user, require_mutation
from app.schemas.common import MessageResponse
from app.schemas.job import JobCreate, JobRead, JobUpdate
from app.services.catalog import JOBS, create_record, delete_record, get_record, list_records, update_record
from app.services.references import resolve_document, resolve_documents


router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.post("", response_model=JobRead, status_code=status.HTTP_201_CREATED)
def create_job(
    payload: JobCreate,
    db: Session = Depends(get_db),
    _admin: User = Depends(require_mutation("jobs")),
) -> Any:
    record = create_record(db, JOBS, payload.model_dump())
    return resolve_document(db, JOBS, record)


@router.get("", response_model=list[JobRead])
def list_jobs(
    q: str | None = Query(default=None, description="Case-insensitive substring of title or description"),
    db: Session = Depends(get_db),
    _user: User = Depends(get_current_user),
) -> Any:
    return resolve_documents(db, JOBS, list_records(db, JOBS, q=q))


@router.get("/{job_id}", response_model=JobRead)
def get_job(
    job_id: str,
    db: Session = Depends(get_db),
    _user: User = Depends(get_current_user),
) -> Any:
    return resolve_document(db, JOBS, get_record(db, JOBS, job_id))


@router.put("/{job_id}", response_model=JobRead)
def update_job(
    job_id: str,
    payload: JobUpdate,
    db: Session = Depends(get_db),
    _admin: User = Depends(require_mutation("jobs")),
) -> Any:
    record = update_record(db, JOBS, job_id, payload.model_dump(exclude_unset=True))
    return resolve_document(db, JOBS, record)


@router.delete("/{job_id}", response_model=MessageResponse)
def delete_job(
    job_id: str,
    db: Session = Depends(get_db),
    _admin: User = Depends(require_mutation("jobs")),
) -> MessageResponse:
    delete_record(db, JOBS, job_id)
    return MessageResponse(message="Job deleted successfully")

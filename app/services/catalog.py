"""Entity store for the five catalog record types.

All types share the same create / get / list / update / delete behaviour; what
differs per type is captured by a `CatalogEntity` descriptor in `ENTITIES`.
Writes never touch other entities: cross-reference arrays are stored exactly as
given and are not cascaded or synchronized.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.errors import NotFoundError, UnexpectedError, ValidationError
from app.models.combination import Combination
from app.models.job import Job
from app.models.program import Program
from app.models.school import SCHOOL_LEVELS, School
from app.models.subject import Subject
from app.services.query_filters import array_contains, array_contains_prefilter, text_search_filter


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogEntity:
    key: str
    label: str
    model: Any
    unique_field: str = "name"
    search_fields: tuple[str, ...] = ("name", "description")
    # (field on this entity, key of the referenced entity)
    references: tuple[tuple[str, str], ...] = ()
    check: Callable[[Any], None] | None = field(default=None, compare=False)


def _check_school_level(record: School) -> None:
    if record.level is not None and record.level not in SCHOOL_LEVELS:
        raise ValidationError(f"level must be one of {', '.join(SCHOOL_LEVELS)}")
    if not record.is_university and not record.level:
        raise ValidationError("level is required unless isUniversity is true")


SUBJECTS = CatalogEntity(
    key="subjects",
    label="Subject",
    model=Subject,
    references=(("combinations", "combinations"),),
)
PROGRAMS = CatalogEntity(
    key="programs",
    label="Program",
    model=Program,
    references=(("combinations", "combinations"),),
)
COMBINATIONS = CatalogEntity(
    key="combinations",
    label="Combination",
    model=Combination,
    references=(("subjects", "subjects"), ("programs", "programs")),
)
SCHOOLS = CatalogEntity(
    key="schools",
    label="School",
    model=School,
    search_fields=("name", "location"),
    references=(("combinations", "combinations"), ("programs", "programs")),
    check=_check_school_level,
)
JOBS = CatalogEntity(
    key="jobs",
    label="Job",
    model=Job,
    unique_field="title",
    search_fields=("title", "description"),
    references=(("related_programs", "programs"),),
)

ENTITIES: dict[str, CatalogEntity] = {
    entity.key: entity for entity in (SUBJECTS, COMBINATIONS, PROGRAMS, SCHOOLS, JOBS)
}


def _ensure_unique(db: Session, entity: CatalogEntity, value: Any, *, exclude_id: str | None = None) -> None:
    column = getattr(entity.model, entity.unique_field)
    query = db.query(entity.model.id).filter(column == value)
    if exclude_id is not None:
        query = query.filter(entity.model.id != exclude_id)
    if query.first() is not None:
        raise ValidationError(f"{entity.label} with {entity.unique_field} '{value}' already exists")


def _commit(db: Session, entity: CatalogEntity, action: str) -> None:
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise ValidationError(str(getattr(exc, "orig", exc))) from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("catalog.%s entity=%s failed", action, entity.key)
        raise UnexpectedError(f"Failed to {action} {entity.label.lower()}") from exc


def create_record(db: Session, entity: CatalogEntity, data: dict[str, Any]) -> Any:
    unique_value = data.get(entity.unique_field)
    if not unique_value:
        raise ValidationError(f"{entity.unique_field} is required")
    _ensure_unique(db, entity, unique_value)

    record = entity.model(**data)
    if entity.check is not None:
        entity.check(record)
    db.add(record)
    _commit(db, entity, "create")
    db.refresh(record)
    logger.info("catalog.create entity=%s id=%s", entity.key, record.id)
    return record


def get_record(db: Session, entity: CatalogEntity, record_id: str) -> Any:
    record = db.query(entity.model).filter(entity.model.id == record_id).one_or_none()
    if record is None:
        raise NotFoundError(f"{entity.label} not found")
    return record


def list_records(
    db: Session,
    entity: CatalogEntity,
    *,
    q: str | None = None,
    member_of: tuple[str, str] | None = None,
) -> list[Any]:
    """List records in insertion order.

    `q` is a case-insensitive substring matched against the entity's search
    fields; `member_of=(field, id)` additionally requires `id` in that
    reference array. Both are optional and combine with AND.
    """

    query = db.query(entity.model)
    text_filter = text_search_filter(entity.model, entity.search_fields, q)
    if text_filter is not None:
        query = query.filter(text_filter)

    member_field: str | None = None
    member_id: str | None = None
    if member_of is not None and (member_of[1] or "").strip():
        member_field, member_id = member_of[0], member_of[1].strip()
        query = query.filter(array_contains_prefilter(entity.model, member_field, member_id))

    rows = query.order_by(entity.model.pk.asc()).all()
    if member_field is not None:
        rows = [row for row in rows if array_contains(row, member_field, member_id)]
    return rows


def find_referencing(db: Session, entity: CatalogEntity, field_name: str, target_id: str) -> list[Any]:
    """Records of `entity` whose `field_name` array contains `target_id`."""
    return list_records(db, entity, member_of=(field_name, target_id))


def update_record(db: Session, entity: CatalogEntity, record_id: str, changes: dict[str, Any]) -> Any:
    record = get_record(db, entity, record_id)

    if entity.unique_field in changes:
        unique_value = changes[entity.unique_field]
        if not unique_value:
            raise ValidationError(f"{entity.unique_field} is required")
        _ensure_unique(db, entity, unique_value, exclude_id=record.id)

    for name, value in changes.items():
        setattr(record, name, value)

    if entity.check is not None:
        try:
            entity.check(record)
        except ValidationError:
            db.rollback()
            raise

    _commit(db, entity, "update")
    db.refresh(record)
    logger.info("catalog.update entity=%s id=%s fields=%s", entity.key, record.id, sorted(changes))
    return record


def delete_record(db: Session, entity: CatalogEntity, record_id: str) -> None:
    record = get_record(db, entity, record_id)
    db.delete(record)
    _commit(db, entity, "delete")
    logger.info("catalog.delete entity=%s id=%s", entity.key, record_id)


def count_records(db: Session, entity: CatalogEntity) -> int:
    return int(db.query(func.count(entity.model.pk)).scalar() or 0)

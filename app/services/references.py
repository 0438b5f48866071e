"""Populate identifier arrays with lightweight summaries of the referenced records.

Stored arrays are never modified here; resolution only shapes response payloads.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from sqlalchemy.orm import Session

from app.schemas.combination import CombinationRead
from app.services.catalog import COMBINATIONS, ENTITIES, CatalogEntity, find_referencing


logger = logging.getLogger(__name__)


def _lookup_summaries(db: Session, target: CatalogEntity, ids: Iterable[str]) -> dict[str, dict[str, Any]]:
    wanted = sorted({i for i in ids if i})
    if not wanted:
        return {}
    display = getattr(target.model, target.unique_field)
    rows = db.query(target.model.id, display).filter(target.model.id.in_(wanted)).all()
    return {row_id: {"id": row_id, "name": label} for row_id, label in rows}


def resolve_documents(db: Session, entity: CatalogEntity, records: list[Any]) -> list[dict[str, Any]]:
    """Turn records into response documents with references resolved.

    One batched lookup per referenced entity type. Ids that no longer resolve
    are passed through as raw strings.
    """

    docs = [record.to_document() for record in records]
    for field_name, target_key in entity.references:
        target = ENTITIES[target_key]
        summaries = _lookup_summaries(db, target, (i for doc in docs for i in doc.get(field_name) or []))
        for doc in docs:
            resolved: list[Any] = []
            for ref_id in doc.get(field_name) or []:
                summary = summaries.get(ref_id)
                resolved.append(dict(summary) if summary is not None else ref_id)
            doc[field_name] = resolved
    return docs


def resolve_document(db: Session, entity: CatalogEntity, record: Any) -> dict[str, Any]:
    return resolve_documents(db, entity, [record])[0]


def resolve_detail(db: Session, entity: CatalogEntity, record: Any) -> dict[str, Any]:
    """Single-record view, with the reverse-lookup fallback for combinations.

    Subjects and Programs carry a denormalized `combinations` array that is not
    kept in sync with Combination.subjects / Combination.programs. When that
    array is empty, the combinations that reference this record are looked up
    and returned fully resolved instead. A non-empty array is trusted as-is.
    """

    doc = resolve_document(db, entity, record)
    inverse_field = _INVERSE_COMBINATION_FIELD.get(entity.key)
    if inverse_field is None or record.combinations:
        return doc

    combos = find_referencing(db, COMBINATIONS, inverse_field, record.id)
    if combos:
        logger.debug(
            "references.reverse_lookup entity=%s id=%s combinations=%d", entity.key, record.id, len(combos)
        )
    doc["combinations"] = [
        CombinationRead.model_validate(combo).model_dump(by_alias=True)
        for combo in resolve_documents(db, COMBINATIONS, combos)
    ]
    return doc


# entity key -> Combination array that points back at it
_INVERSE_COMBINATION_FIELD = {
    "subjects": "subjects",
    "programs": "programs",
}

from __future__ import annotations

import secrets
from typing import Any

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.sql import func


def generate_id() -> str:
    """Opaque 24-char hex identifier, shaped like a document-store object id."""
    return secrets.token_hex(12)


class CatalogRecordMixin:
    # `pk` keeps insertion order; `id` is the public identifier.
    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(24), unique=True, index=True, nullable=False, default=generate_id)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def to_document(self) -> dict[str, Any]:
        doc: dict[str, Any] = {}
        for column in self.__table__.columns:
            if column.key == "pk":
                continue
            value = getattr(self, column.key)
            if isinstance(value, list):
                value = list(value)
            doc[column.key] = value
        return doc

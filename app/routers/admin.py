from __future__ import annotations

from datetime import datetime, timezone
import logging

from fastapi import APIRouter, Depends
from sqlalchemy import func
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.user import User
from app.routers.dependencies import require_admin
from app.schemas.admin import AdminStatsResponse, CatalogCounts
from app.services.catalog import ENTITIES, count_records


router = APIRouter(prefix="/admin", tags=["admin"])

logger = logging.getLogger(__name__)


def _iso_now() -> datetime:
    return datetime.now(timezone.utc)


@router.get("/stats", response_model=AdminStatsResponse)
def get_admin_stats(
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
) -> AdminStatsResponse:
    counts = {key: count_records(db, entity) for key, entity in ENTITIES.items()}
    counts["users"] = int(db.query(func.count(User.id)).scalar() or 0)

    logger.info("admin.stats user_id=%s", admin.id)
    return AdminStatsResponse(generated_at=_iso_now(), counts=CatalogCounts(**counts))

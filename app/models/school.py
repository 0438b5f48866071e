from sqlalchemy import Boolean, Column, JSON, String

from app.database import Base
from app.models.mixins import CatalogRecordMixin


SCHOOL_LEVELS = ("O-Level", "A-Level", "College")


class School(CatalogRecordMixin, Base):
    __tablename__ = "schools"

    name = Column(String(255), unique=True, index=True, nullable=False)
    location = Column(String(255), nullable=True)
    level = Column(String(16), nullable=True)  # required unless is_university
    is_university = Column(Boolean, nullable=False, default=False)
    combinations = Column(JSON, nullable=False, default=list)  # O-Level / A-Level
    programs = Column(JSON, nullable=False, default=list)  # College / University

from sqlalchemy import Column, JSON, String, Text

from app.database import Base
from app.models.mixins import CatalogRecordMixin


class Subject(CatalogRecordMixin, Base):
    __tablename__ = "subjects"

    name = Column(String(255), unique=True, index=True, nullable=False)
    description = Column(Text, nullable=True)
    # Denormalized back-reference; not kept in sync with Combination.subjects.
    combinations = Column(JSON, nullable=False, default=list)

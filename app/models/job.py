from sqlalchemy import Column, JSON, String, Text

from app.database import Base
from app.models.mixins import CatalogRecordMixin


class Job(CatalogRecordMixin, Base):
    __tablename__ = "jobs"

    title = Column(String(255), unique=True, index=True, nullable=False)
    description = Column(Text, nullable=True)
    related_programs = Column(JSON, nullable=False, default=list)

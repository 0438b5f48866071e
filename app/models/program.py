from sqlalchemy import Column, JSON, String, Text

from app.database import Base
from app.models.mixins import CatalogRecordMixin


class Program(CatalogRecordMixin, Base):
    __tablename__ = "programs"

    name = Column(String(255), unique=True, index=True, nullable=False)
    description = Column(Text, nullable=True)
    combinations = Column(JSON, nullable=False, default=list)
    # Free-text lists, not foreign keys.
    schools = Column(JSON, nullable=False, default=list)
    jobs = Column(JSON, nullable=False, default=list)

from sqlalchemy import Column, JSON, String, Text

from app.database import Base
from app.models.mixins import CatalogRecordMixin


class Combination(CatalogRecordMixin, Base):
    __tablename__ = "combinations"

    name = Column(String(255), unique=True, index=True, nullable=False)
    description = Column(Text, nullable=True)
    subjects = Column(JSON, nullable=False, default=list)
    programs = Column(JSON, nullable=False, default=list)

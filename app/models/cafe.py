# app/models/cafe.py
from sqlalchemy import Column, Text, DateTime
from app.db.base import Base
from app.utils.datetime_utils import utcnow


class Cafe(Base):
    __tablename__ = "cafes"

    id = Column(Text, primary_key=True)
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    location = Column(Text, nullable=False, index=True)
    logo = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

# app/models/id_sequence.py
from sqlalchemy import Column, Text, Integer
from app.db.base import Base


class IdSequence(Base):
    __tablename__ = "id_sequences"

    name = Column(Text, primary_key=True)
    value = Column(Integer, nullable=False, default=0)

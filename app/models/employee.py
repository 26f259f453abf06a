# app/models/employee.py
from sqlalchemy import Column, Text, DateTime, Enum, ForeignKey
from sqlalchemy.orm import relationship
from app.db.base import Base
from app.models.enums import Gender
from app.utils.datetime_utils import utcnow


class Employee(Base):
    __tablename__ = "employees"

    id = Column(Text, primary_key=True)
    name = Column(Text, nullable=False)
    email_address = Column(Text, nullable=False)
    phone_number = Column(Text, nullable=False)
    gender = Column(Enum(Gender, name="gender"), nullable=False)
    cafe_id = Column(Text, ForeignKey("cafes.id"), nullable=True, index=True)
    start_date = Column(DateTime(timezone=True), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    cafe = relationship("Cafe")

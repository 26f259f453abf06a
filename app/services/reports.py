# app/services/reports.py
from datetime import datetime, timedelta
from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session
from app.models.cafe import Cafe
from app.models.employee import Employee
from app.services.cafes import get_cafe
from app.utils.datetime_utils import as_utc, utcnow


def days_worked(start_date: datetime, now: datetime) -> int:
    return (as_utc(now) - as_utc(start_date)) // timedelta(days=1)


def employee_count(db: Session, cafe_id: str) -> int:
    return db.query(Employee).filter(Employee.cafe_id == cafe_id).count()


def cafes_with_employee_counts(db: Session, location: Optional[str] = None) -> List[dict]:
    query = db.query(Cafe)
    if location:
        query = query.filter(Cafe.location == location)
    cafes = query.all()

    counts = dict(
        db.query(Employee.cafe_id, func.count(Employee.id))
        .filter(Employee.cafe_id.isnot(None))
        .group_by(Employee.cafe_id)
        .all()
    )

    data = [
        {
            "name": cafe.name,
            "description": cafe.description,
            "employees": counts.get(cafe.id, 0),
            "location": cafe.location,
            "id": cafe.id,
            "logo": cafe.logo,
        }
        for cafe in cafes
    ]
    data.sort(key=lambda row: (-row["employees"], row["name"]))
    return data


def employees_with_days_worked(db: Session, cafe_id: Optional[str] = None, now: Optional[datetime] = None) -> List[dict]:
    """
    Employees with their tenure in whole days, longest-serving first.

    When cafe_id is given the cafe must exist (NotFoundError otherwise); a
    cafe with no staff yields an empty list. The cafe column carries the
    cafe's display name, or "" for unassigned employees.
    """
    now = now or utcnow()
    query = db.query(Employee)
    if cafe_id:
        cafe_names = {cafe_id: get_cafe(db, cafe_id).name}
        query = query.filter(Employee.cafe_id == cafe_id)
    else:
        cafe_names = dict(db.query(Cafe.id, Cafe.name).all())

    data = [
        {
            "id": employee.id,
            "name": employee.name,
            "email_address": employee.email_address,
            "phone_number": employee.phone_number,
            "gender": employee.gender.value,
            "days_worked": days_worked(employee.start_date, now),
            "cafe": cafe_names.get(employee.cafe_id, ""),
            "cafe_id": employee.cafe_id,
        }
        for employee in query.all()
    ]
    data.sort(key=lambda row: (-row["days_worked"], row["name"]))
    return data

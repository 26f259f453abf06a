# app/services/employees.py
from datetime import datetime
from typing import Optional
from loguru import logger
from sqlalchemy.orm import Session
from app.core.exceptions import InvalidArgumentError, NotFoundError
from app.models.employee import Employee
from app.models.enums import Gender
from app.services.cafes import get_cafe
from app.services.employee_ids import next_employee_id
from app.utils.datetime_utils import utcnow
from app.utils.validation_functions import is_blank, validate_email, validate_employee_id, validate_gender, validate_phone_number

REQUIRED_FIELDS = ("name", "email_address", "phone_number", "gender")
MUTABLE_FIELDS = ("name", "email_address", "phone_number", "gender")


def get_employee(db: Session, employee_id: str) -> Employee:
    if not validate_employee_id(employee_id):
        raise InvalidArgumentError("Invalid employee ID format")
    employee = db.query(Employee).filter(Employee.id == employee_id).first()
    if not employee:
        raise NotFoundError("Employee not found")
    return employee


def _validate_field(field: str, value) -> None:
    if is_blank(value):
        raise InvalidArgumentError(f"{field} is required")
    if field == "email_address" and not validate_email(value):
        raise InvalidArgumentError("Invalid email format")
    if field == "phone_number" and not validate_phone_number(value):
        raise InvalidArgumentError("Phone number must be 8 digits starting with 8 or 9")
    if field == "gender" and not validate_gender(value):
        raise InvalidArgumentError("Gender must be one of: " + ", ".join(g.value for g in Gender))


def _resolve_cafe_id(db: Session, cafe_id) -> Optional[str]:
    if cafe_id is None or cafe_id == "":
        return None
    if not isinstance(cafe_id, str):
        raise InvalidArgumentError("cafeId must be a string or null")
    return get_cafe(db, cafe_id).id


def create_employee(db: Session, body: dict, now: Optional[datetime] = None) -> Employee:
    missing = [field for field in REQUIRED_FIELDS if is_blank(body.get(field))]
    if missing:
        raise InvalidArgumentError("Missing required fields", details={"fields": missing})
    for field in MUTABLE_FIELDS:
        _validate_field(field, body[field])

    cafe_id = _resolve_cafe_id(db, body.get("cafeId"))

    try:
        employee = Employee(
            id=next_employee_id(db),
            name=body["name"],
            email_address=body["email_address"],
            phone_number=body["phone_number"],
            gender=Gender(body["gender"]),
            cafe_id=cafe_id,
            start_date=now or utcnow(),
        )
        db.add(employee)
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(employee)
    logger.info(f"Created employee {employee.id} at cafe {employee.cafe_id}")
    return employee


def update_employee(db: Session, employee_id: str, body: dict, now: Optional[datetime] = None) -> Employee:
    """
    Apply a partial update to an employee.

    Only name, email_address, phone_number and gender are writable, and only
    when present in the body. A non-empty cafeId (re)assigns the employee,
    null unassigns it, and either restarts start_date.
    """
    employee = get_employee(db, employee_id)

    if "id" in body and body["id"] != employee.id:
        raise InvalidArgumentError("Employee ID cannot be updated")

    changes = {field: body[field] for field in MUTABLE_FIELDS if field in body}
    for field, value in changes.items():
        _validate_field(field, value)

    # An empty cafeId leaves the assignment alone.
    reassign = body.get("cafeId", "") != ""
    if reassign:
        new_cafe_id = _resolve_cafe_id(db, body["cafeId"])

    for field, value in changes.items():
        setattr(employee, field, Gender(value) if field == "gender" else value)

    timestamp = now or utcnow()
    if reassign:
        logger.info(f"Reassigning employee {employee.id} from {employee.cafe_id} to {new_cafe_id}")
        employee.cafe_id = new_cafe_id
        employee.start_date = timestamp
    employee.updated_at = timestamp
    db.commit()
    db.refresh(employee)
    return employee


def delete_employee(db: Session, employee_id: str) -> None:
    employee = get_employee(db, employee_id)
    db.delete(employee)
    db.commit()
    logger.info(f"Deleted employee {employee_id}")

# app/services/cafes.py
import uuid
from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.core.config import CAFE_DESCRIPTION_MAX_LENGTH
from app.core.exceptions import ConflictError, InvalidArgumentError, NotFoundError
from app.models.cafe import Cafe
from app.models.employee import Employee
from app.utils.datetime_utils import utcnow
from app.utils.validation_functions import is_blank, validate_description

REQUIRED_FIELDS = ("name", "description", "location")
MUTABLE_FIELDS = ("name", "description", "location", "logo")


def get_cafe(db: Session, cafe_id: str) -> Cafe:
    cafe = db.query(Cafe).filter(Cafe.id == cafe_id).first()
    if not cafe:
        raise NotFoundError("Cafe not found")
    return cafe


def _validate_field(field: str, value) -> None:
    if field == "logo":
        if value is not None and not isinstance(value, str):
            raise InvalidArgumentError("logo must be a string")
        return
    if is_blank(value):
        raise InvalidArgumentError(f"{field} is required")
    if field == "description" and not validate_description(value):
        raise InvalidArgumentError(
            f"description must be at most {CAFE_DESCRIPTION_MAX_LENGTH} characters"
        )


def create_cafe(db: Session, body: dict) -> Cafe:
    missing = [field for field in REQUIRED_FIELDS if is_blank(body.get(field))]
    if missing:
        raise InvalidArgumentError("Missing required fields", details={"fields": missing})
    for field in MUTABLE_FIELDS:
        _validate_field(field, body.get(field))

    cafe_id = body.get("id")
    if cafe_id is None:
        cafe_id = str(uuid.uuid4())
    elif is_blank(cafe_id):
        raise InvalidArgumentError("id must be a non-empty string")

    if db.query(Cafe).filter(Cafe.id == cafe_id).first():
        raise ConflictError(f"Cafe with id '{cafe_id}' already exists", details={"field": "id", "value": cafe_id})

    cafe = Cafe(
        id=cafe_id,
        name=body["name"],
        description=body["description"],
        location=body["location"],
        logo=body.get("logo"),
    )
    db.add(cafe)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError(f"Cafe with id '{cafe_id}' already exists", details={"field": "id", "value": cafe_id})
    db.refresh(cafe)
    logger.info(f"Created cafe {cafe.id} ({cafe.name})")
    return cafe


def update_cafe(db: Session, cafe_id: str, body: dict) -> Cafe:
    cafe = get_cafe(db, cafe_id)

    if "id" in body and body["id"] != cafe.id:
        raise InvalidArgumentError("Cafe ID cannot be updated")

    changes = {field: body[field] for field in MUTABLE_FIELDS if field in body}
    for field, value in changes.items():
        _validate_field(field, value)

    for field, value in changes.items():
        setattr(cafe, field, value)
    cafe.updated_at = utcnow()
    db.commit()
    db.refresh(cafe)
    return cafe


def delete_cafe(db: Session, cafe_id: str) -> int:
    """
    Delete a cafe together with every employee assigned to it.

    Employees go first, then the cafe, in a single transaction: either both
    deletions land or neither does. Returns the number of employees removed.
    """
    cafe = get_cafe(db, cafe_id)
    try:
        removed = (
            db.query(Employee)
            .filter(Employee.cafe_id == cafe.id)
            .delete(synchronize_session=False)
        )
        db.delete(cafe)
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.info(f"Deleted cafe {cafe_id} and {removed} employee(s)")
    return removed

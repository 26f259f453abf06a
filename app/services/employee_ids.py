# app/services/employee_ids.py
from sqlalchemy import func
from sqlalchemy.orm import Session
from app.core.config import EMPLOYEE_ID_DIGITS, EMPLOYEE_ID_PREFIX, EMPLOYEE_ID_SEQUENCE
from app.models.employee import Employee
from app.models.id_sequence import IdSequence


def format_employee_id(number: int) -> str:
    return f"{EMPLOYEE_ID_PREFIX}{number:0{EMPLOYEE_ID_DIGITS}d}"


def parse_employee_number(employee_id: str) -> int:
    return int(employee_id[len(EMPLOYEE_ID_PREFIX):])


def highest_employee_number(db: Session) -> int:
    # Ids are fixed width, so the lexical max is also the numeric max.
    last_id = db.query(func.max(Employee.id)).scalar()
    if not last_id:
        return 0
    return parse_employee_number(last_id)


def next_employee_id(db: Session) -> str:
    """
    Reserve the next employee id from the counter row.

    The increment is a single UPDATE so concurrent writers serialize on the
    row lock instead of racing on read-max-then-increment. The counter row is
    seeded from existing employees the first time it is needed; two requests
    seeding at once collide on the primary key and the loser must retry.
    Runs inside the caller's transaction: nothing is committed here.
    """
    updated = (
        db.query(IdSequence)
        .filter(IdSequence.name == EMPLOYEE_ID_SEQUENCE)
        .update({IdSequence.value: IdSequence.value + 1}, synchronize_session=False)
    )
    if not updated:
        db.add(IdSequence(name=EMPLOYEE_ID_SEQUENCE, value=highest_employee_number(db) + 1))
        db.flush()

    value = (
        db.query(IdSequence.value)
        .filter(IdSequence.name == EMPLOYEE_ID_SEQUENCE)
        .scalar()
    )
    return format_employee_id(value)

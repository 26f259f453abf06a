from datetime import datetime, timezone

from app.models.employee import Employee
from app.models.enums import Gender
from app.models.id_sequence import IdSequence
from app.services.employee_ids import (
    format_employee_id,
    highest_employee_number,
    next_employee_id,
    parse_employee_number,
)


def _add_employee(db, employee_id):
    db.add(Employee(
        id=employee_id,
        name="Seeded",
        email_address="seeded@example.com",
        phone_number="91234567",
        gender=Gender.male,
        start_date=datetime(2023, 1, 1, tzinfo=timezone.utc),
    ))
    db.commit()


def test_format_and_parse():
    assert format_employee_id(1) == "UI0000001"
    assert format_employee_id(1234567) == "UI1234567"
    assert parse_employee_number("UI0000042") == 42


def test_first_id_on_empty_table(db):
    assert highest_employee_number(db) == 0
    assert next_employee_id(db) == "UI0000001"


def test_sequential_ids_strictly_increase(db):
    first = next_employee_id(db)
    second = next_employee_id(db)
    third = next_employee_id(db)
    db.commit()

    numbers = [parse_employee_number(i) for i in (first, second, third)]
    assert numbers == [1, 2, 3]


def test_counter_seeded_from_existing_employees(db):
    _add_employee(db, "UI0000009")
    _add_employee(db, "UI0000010")

    assert next_employee_id(db) == "UI0000011"
    db.commit()
    assert db.query(IdSequence).one().value == 11


def test_ids_are_not_reused_after_delete(db):
    _add_employee(db, "UI0000005")
    assert next_employee_id(db) == "UI0000006"
    db.commit()

    db.query(Employee).delete()
    db.commit()

    assert next_employee_id(db) == "UI0000007"

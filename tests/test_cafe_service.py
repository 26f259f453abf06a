import pytest

from app.core.exceptions import ConflictError, InvalidArgumentError, NotFoundError
from app.models.cafe import Cafe
from app.models.employee import Employee
from app.services.cafes import create_cafe, delete_cafe, get_cafe, update_cafe
from app.services.employees import create_employee


def test_create_cafe_keeps_supplied_id(db, cafe_payload):
    cafe = create_cafe(db, cafe_payload)

    assert cafe.id == "cafe_1"
    assert cafe.logo is None
    assert get_cafe(db, "cafe_1").name == "Joe's Café"


def test_create_cafe_generates_id_when_missing(db, cafe_payload):
    del cafe_payload["id"]
    cafe = create_cafe(db, cafe_payload)

    assert len(cafe.id) == 36


def test_create_cafe_rejects_duplicate_id(db, cafe_payload):
    create_cafe(db, cafe_payload)

    with pytest.raises(ConflictError) as exc_info:
        create_cafe(db, dict(cafe_payload, name="Another"))

    assert "cafe_1" in exc_info.value.message
    assert exc_info.value.details == {"field": "id", "value": "cafe_1"}
    assert db.query(Cafe).count() == 1


def test_create_cafe_requires_fields(db):
    with pytest.raises(InvalidArgumentError) as exc_info:
        create_cafe(db, {"name": "Only a name"})

    assert exc_info.value.details == {"fields": ["description", "location"]}


def test_create_cafe_rejects_long_description(db, cafe_payload):
    cafe_payload["description"] = "x" * 257

    with pytest.raises(InvalidArgumentError):
        create_cafe(db, cafe_payload)


def test_update_cafe_changes_only_supplied_fields(db, cafe_payload):
    create_cafe(db, cafe_payload)

    cafe = update_cafe(db, "cafe_1", {"name": "Joe's Diner", "logo": "/logos/joe.png", "unknown": "ignored"})

    assert cafe.name == "Joe's Diner"
    assert cafe.logo == "/logos/joe.png"
    assert cafe.description == "Corner shop"
    assert cafe.location == "Main St"
    assert not hasattr(cafe, "unknown")


def test_update_cafe_rejects_id_change(db, cafe_payload):
    create_cafe(db, cafe_payload)

    with pytest.raises(InvalidArgumentError):
        update_cafe(db, "cafe_1", {"id": "cafe_2"})

    assert get_cafe(db, "cafe_1")


def test_update_cafe_allows_unchanged_id(db, cafe_payload):
    create_cafe(db, cafe_payload)

    cafe = update_cafe(db, "cafe_1", {"id": "cafe_1", "location": "High St"})

    assert cafe.location == "High St"


def test_update_missing_cafe(db):
    with pytest.raises(NotFoundError):
        update_cafe(db, "nope", {"name": "x"})


def test_delete_cafe_cascades_to_its_employees_only(db, cafe_payload, employee_payload):
    create_cafe(db, cafe_payload)
    create_cafe(db, dict(cafe_payload, id="cafe_2", name="Other"))
    create_employee(db, employee_payload)
    create_employee(db, dict(employee_payload, name="Bob Tan"))
    survivor = create_employee(db, dict(employee_payload, name="Cat Ng", cafeId="cafe_2"))

    removed = delete_cafe(db, "cafe_1")

    assert removed == 2
    assert db.query(Employee).filter(Employee.cafe_id == "cafe_1").count() == 0
    assert [e.id for e in db.query(Employee).all()] == [survivor.id]
    with pytest.raises(NotFoundError):
        get_cafe(db, "cafe_1")


def test_delete_missing_cafe(db):
    with pytest.raises(NotFoundError):
        delete_cafe(db, "nope")


def test_delete_cafe_rolls_back_when_cafe_delete_fails(db, monkeypatch, cafe_payload, employee_payload):
    create_cafe(db, cafe_payload)
    create_employee(db, employee_payload)

    def fail_delete(instance):
        raise RuntimeError("delete failed")

    monkeypatch.setattr(db, "delete", fail_delete)

    with pytest.raises(RuntimeError):
        delete_cafe(db, "cafe_1")

    monkeypatch.undo()
    db.expire_all()
    assert get_cafe(db, "cafe_1")
    assert db.query(Employee).filter(Employee.cafe_id == "cafe_1").count() == 1

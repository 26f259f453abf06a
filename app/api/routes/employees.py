# app/api/routes/employees.py

from fastapi import APIRouter, Query, Request, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from app.db.get_db import get_db
from app.services import employees as employee_service
from app.services.reports import employees_with_days_worked
from app.utils.helpers import cafe_to_dict, employee_to_dict, read_json_body, success_response

router = APIRouter()


@router.post("/")
async def create_employee(request: Request, db: Session = Depends(get_db)):
    body = await read_json_body(request)
    employee = employee_service.create_employee(db, body)
    return JSONResponse(status_code=201, content=employee_to_dict(employee))


# List employees by tenure, optionally for a single cafe
@router.get("/")
def list_employees(
    cafe: str = Query(None),
    db: Session = Depends(get_db)
):
    return employees_with_days_worked(db, cafe_id=cafe)


@router.get("/{employee_id}")
def get_employee(employee_id: str, db: Session = Depends(get_db)):
    employee = employee_service.get_employee(db, employee_id)
    data = employee_to_dict(employee)
    data["cafe"] = cafe_to_dict(employee.cafe) if employee.cafe else None
    return data


@router.put("/{employee_id}")
async def update_employee(employee_id: str, request: Request, db: Session = Depends(get_db)):
    body = await read_json_body(request)
    employee = employee_service.update_employee(db, employee_id, body)
    return employee_to_dict(employee)


@router.delete("/{employee_id}")
def delete_employee(employee_id: str, db: Session = Depends(get_db)):
    employee_service.delete_employee(db, employee_id)
    return success_response(message="Employee deleted successfully")

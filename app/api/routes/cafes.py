# app/api/routes/cafes.py

from fastapi import APIRouter, Query, Request, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from app.db.get_db import get_db
from app.services import cafes as cafe_service
from app.services.reports import cafes_with_employee_counts, employee_count
from app.utils.helpers import cafe_to_dict, read_json_body, success_response

router = APIRouter()


@router.post("/")
async def create_cafe(request: Request, db: Session = Depends(get_db)):
    body = await read_json_body(request)
    cafe = cafe_service.create_cafe(db, body)
    return JSONResponse(status_code=201, content=cafe_to_dict(cafe))


# List cafes with live employee counts, busiest first
@router.get("/")
def list_cafes(
    location: str = Query(None),
    db: Session = Depends(get_db)
):
    return cafes_with_employee_counts(db, location=location)


@router.get("/{cafe_id}")
def get_cafe(cafe_id: str, db: Session = Depends(get_db)):
    cafe = cafe_service.get_cafe(db, cafe_id)
    data = cafe_to_dict(cafe)
    data["employees"] = employee_count(db, cafe.id)
    return data


@router.put("/{cafe_id}")
async def update_cafe(cafe_id: str, request: Request, db: Session = Depends(get_db)):
    body = await read_json_body(request)
    cafe = cafe_service.update_cafe(db, cafe_id, body)
    return cafe_to_dict(cafe)


@router.delete("/{cafe_id}")
def delete_cafe(cafe_id: str, db: Session = Depends(get_db)):
    removed = cafe_service.delete_cafe(db, cafe_id)
    return success_response(
        data={"id": cafe_id, "employees_deleted": removed},
        message="Cafe and its employees deleted successfully"
    )

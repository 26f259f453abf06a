# app/utils/helpers.py
import json
from fastapi import Request
from app.core.exceptions import InvalidArgumentError
from app.models.cafe import Cafe
from app.models.employee import Employee
from app.utils.datetime_utils import as_utc

def success_response(data=None, message="Operation successful"):
    return {"success": True, "data": data, "message": message}


def error_response(code, message, details=None):
    return {"success": False, "error": {"code": code, "message": message, "details": details}}


async def read_json_body(request: Request) -> dict:
    """
    Parse the request body as a JSON object.
    Raises InvalidArgumentError for an empty, malformed or non-object body.
    """
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise InvalidArgumentError("Request body must be a valid JSON object")
    if not isinstance(body, dict):
        raise InvalidArgumentError("Request body must be a valid JSON object")
    return body


def cafe_to_dict(cafe: Cafe) -> dict:
    return {
        "id": cafe.id,
        "name": cafe.name,
        "description": cafe.description,
        "location": cafe.location,
        "logo": cafe.logo,
    }


def employee_to_dict(employee: Employee) -> dict:
    return {
        "id": employee.id,
        "name": employee.name,
        "email_address": employee.email_address,
        "phone_number": employee.phone_number,
        "gender": employee.gender.value,
        "cafe": employee.cafe_id,
        "start_date": as_utc(employee.start_date).isoformat(),
    }

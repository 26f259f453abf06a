# app/api/routes/default.py

import time
from fastapi import APIRouter
from app.utils.helpers import success_response

router = APIRouter()

STARTED_AT = time.monotonic()


# Root route
@router.get("/")
def root():
    return success_response(message="Welcome to the Cafe Management System API!")


@router.get("/health")
def health():
    return {"status": "Healthy", "uptime": round(time.monotonic() - STARTED_AT, 3)}

import sys
import time
from contextlib import asynccontextmanager
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

# Import routers
from app.api.routes import cafes, default, employees
from app.core.config import CORS_ORIGINS, LOG_LEVEL
from app.core.exceptions import AppError
from app.db.base import Base
from app.db.get_db import engine
from app.models import cafe, employee, id_sequence  # noqa: F401  register tables
from app.utils.error_codes import ERROR_CODES, HTTP_STATUS_TO_ERROR_CODE
from app.utils.helpers import error_response

logger.remove()
logger.add(
    sys.stdout,
    format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
    level=LOG_LEVEL
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready")
    yield
    engine.dispose()
    logger.info("Database connection closed")


app = FastAPI(
    title="Cafe Manager API",
    description="FastAPI backend for managing cafes and their employees",
    version="1.0.0",
    lifespan=lifespan
)

# --- CORS Middleware ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials="*" not in CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)")
    return response


# Include routers
app.include_router(default.router, tags=["Default"])
app.include_router(cafes.router, prefix="/cafes", tags=["Cafes"])
app.include_router(employees.router, prefix="/employees", tags=["Employees"])

@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(exc.code, exc.message, exc.details),
    )

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    error_code = HTTP_STATUS_TO_ERROR_CODE.get(exc.status_code, "SERVER_ERROR")
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(error_code, exc.detail),
    )

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=422,
        content=error_response(
            HTTP_STATUS_TO_ERROR_CODE.get(422, "VALIDATION_ERROR"),
            "Invalid request: Please send the correct content type and required fields.",
            jsonable_encoder(exc.errors())
        ),
    )

@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.opt(exception=exc).error(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content=error_response(ERROR_CODES["SERVER_ERROR"], str(exc)),
    )

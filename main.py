import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import DBAPIError, IntegrityError, OperationalError, TimeoutError as PoolTimeoutError
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

import config
from database import check_connection, init_db
from exceptions import ConstraintViolation, DormError, DuplicateKey, Unavailable
from logging_config import setup_logging
from routers import all_routers

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if config.AUTO_CREATE_TABLES:
        init_db()
    if not check_connection():
        logger.error("Database is unreachable; requests will fail with 503 until it recovers")
    logger.info("Dormitory backend started")
    yield
    logger.info("Dormitory backend stopped")


# App instance
app = FastAPI(title="Dormitory Management API", lifespan=lifespan)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def error_response(status_code: int, message: str, kind: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message, "error": kind})


def _is_unique_violation(exc: IntegrityError) -> bool:
    # SQLite: "UNIQUE constraint failed"; SQL Server: "Violation of UNIQUE KEY" or "duplicate key"
    message = str(exc.orig).lower()
    return "unique" in message or "duplicate" in message


# Error handlers
@app.exception_handler(DormError)
async def dorm_error_handler(request: Request, exc: DormError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return error_response(exc.status_code, exc.message, exc.kind)


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.warning("Integrity violation on %s %s: %s", request.method, request.url.path, exc.orig)
    if _is_unique_violation(exc):
        err = DuplicateKey("A record with the same unique value already exists")
    else:
        err = ConstraintViolation("The record violates a database constraint")
    return error_response(err.status_code, err.message, err.kind)


@app.exception_handler(OperationalError)
@app.exception_handler(DBAPIError)
@app.exception_handler(PoolTimeoutError)
async def database_unavailable_handler(request: Request, exc: Exception):
    logger.error("Database failure on %s %s: %s", request.method, request.url.path, exc)
    err = Unavailable("The database is temporarily unavailable, please retry later")
    return error_response(err.status_code, err.message, err.kind)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return error_response(404, "Route not found", "NotFound")
    return error_response(exc.status_code, str(exc.detail), "HTTPError")


for router in all_routers:
    app.include_router(router)


@app.get("/", tags=["health"])
def root():
    return {"message": "Dormitory Management API is running"}


# Internal error fallback middleware
@app.middleware("http")
async def internal_error_middleware(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response(500, "Internal server error", "InternalError")


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=config.PORT, reload=True)

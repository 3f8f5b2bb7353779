# app/shared/error_handlers.py
import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.shared.exceptions import HealthcareAPIError, StorageFailure

logger = logging.getLogger(__name__)


async def healthcare_error_handler(request: Request, exc: HealthcareAPIError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"❌ {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ()) if part != "body"),
            "message": error.get("msg"),
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder({"detail": "Invalid request", "errors": errors}),
    )


async def storage_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    # Storage details stay in the log, clients only see a generic message
    logger.error(f"❌ Storage failure on {request.method} {request.url.path}: {exc}", exc_info=exc)
    failure = StorageFailure()
    return JSONResponse(status_code=failure.status_code, content=failure.to_dict())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(HealthcareAPIError, healthcare_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, storage_error_handler)

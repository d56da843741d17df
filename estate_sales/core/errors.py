# =========================================================
# ERROR TAXONOMY
#
# Raised by the data-access layer and routers, converted to the
# {success, message, error?} envelope by the handlers below.
# =========================================================

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class EstateSaleError(Exception):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, error: str | None = None):
        super().__init__(message)
        self.message = message
        self.error = error


class ValidationError(EstateSaleError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(EstateSaleError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(EstateSaleError):
    status_code = status.HTTP_400_BAD_REQUEST


class ResetInProgressError(ConflictError):
    status_code = status.HTTP_429_TOO_MANY_REQUESTS


class OperationTimeoutError(EstateSaleError):
    status_code = status.HTTP_408_REQUEST_TIMEOUT


class ResetFailedError(EstateSaleError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def envelope(message: str, error: str | None = None) -> dict:
    body = {"success": False, "message": message}
    if error:
        body["error"] = error
    return body


# =========================================================
# HANDLERS
# =========================================================

async def estate_sale_error_handler(request: Request, exc: EstateSaleError):
    logger.info(
        f"{request.method} {request.url.path} rejected: {exc.message}"
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=envelope(exc.message, exc.error),
    )


def _field_name(loc) -> str:
    # ("body", "startDate") -> "startDate"
    parts = [str(part) for part in loc if part not in ("body", "query", "path")]
    return ".".join(parts) or str(loc[-1])


def describe_validation_errors(errors) -> str:
    missing = [_field_name(err["loc"]) for err in errors if err["type"] == "missing"]
    if missing:
        return "Missing required fields: " + ", ".join(missing)

    parts = []
    for err in errors:
        msg = err["msg"].removeprefix("Value error, ")
        parts.append(f"{_field_name(err['loc'])}: {msg}")
    return "Invalid input - " + "; ".join(parts)


async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=envelope(describe_validation_errors(exc.errors())),
    )


async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception(f"Database error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=envelope("Internal server error"),
    )


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=envelope("Internal server error"),
    )

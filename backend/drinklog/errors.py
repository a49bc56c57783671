"""Domain errors and the handlers that render them as JSON.

Every error response carries a single ``code`` field. Codes are deliberately
coarse: a 400 never says which field failed, and a lookup miss looks the same
whether the id is unknown or belongs to someone else.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class DrinkLogError(Exception):
    """Base class for errors that map onto an HTTP status and code."""

    status_code = status.HTTP_400_BAD_REQUEST
    code = "error"

    def __init__(self, reason: str = ""):
        super().__init__(reason or self.code)
        self.reason = reason


class Unauthorized(DrinkLogError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "unauthorized"


class InvalidIncomeData(DrinkLogError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "invalid income data"


class Conflict(DrinkLogError):
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, code: str, reason: str = ""):
        self.code = code
        super().__init__(reason)


class StoreError(Exception):
    """Unexpected persistence failure; rendered by the generic handler."""


def _error_body(code: str) -> dict:
    return {"code": code}


async def _domain_error_handler(request: Request, exc: DrinkLogError) -> JSONResponse:
    logger.warning(
        "%s %s rejected with %d (%s): %s",
        request.method, request.url.path, exc.status_code, exc.code, exc.reason,
    )
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc.code))


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("%s %s rejected: malformed body", request.method, request.url.path)
    return JSONResponse(
        status_code=InvalidIncomeData.status_code,
        content=_error_body(InvalidIncomeData.code),
    )


async def _store_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Store error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("internal error"),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach all error handlers to the application."""
    app.add_exception_handler(DrinkLogError, _domain_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(StoreError, _store_error_handler)
    app.add_exception_handler(SQLAlchemyError, _store_error_handler)

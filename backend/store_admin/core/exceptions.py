"""HTTP error taxonomy and the app-level handlers that render it.

Error bodies are bare JSON strings (``"Unauthorized"``), not ``{"detail": ...}``
objects, so existing dashboard clients keep working.
"""

import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class InvalidFields(HTTPException):
    def __init__(self, detail: str = "Invalid fields"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class AuthenticationRequired(HTTPException):
    def __init__(self, detail: str = "Unauthenticated"):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


class AuthorizationDenied(HTTPException):
    """Caller is authenticated but does not own the store.

    Reported as 404 so the existence of other tenants' stores is not revealed.
    """

    def __init__(self, detail: str = "Unauthorized"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class SignatureInvalid(HTTPException):
    def __init__(self, detail: str = "Webhook Error"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class InternalError(HTTPException):
    def __init__(self, detail: str = "Internal error"):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(exc.detail, status_code=exc.status_code, headers=exc.headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse("Invalid fields", status_code=status.HTTP_400_BAD_REQUEST)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse("Internal error", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

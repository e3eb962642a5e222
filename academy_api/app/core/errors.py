"""
Error taxonomy and JSON error responses.

Handlers raise the ``HTTPException`` subclasses defined here; the
exception handlers registered by ``register_exception_handlers`` turn
them (and FastAPI's own validation errors) into JSON bodies carrying a
``message`` field.
"""

import logging
from typing import Dict, Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class BadRequest(HTTPException):
    def __init__(self, message: str) -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


class Unauthorized(HTTPException):
    def __init__(self, message: str = "Akses ditolak") -> None:
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=message,
            headers={"WWW-Authenticate": "Bearer"},
        )


class Forbidden(HTTPException):
    def __init__(self, message: str = "Token tidak valid") -> None:
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=message)


class UpstreamFailure(HTTPException):
    """A Record Store, Media Upload or Credential Store call failed.

    ``service`` names the collaborator; the original error is kept on
    ``__cause__`` and logged, while clients only see a generic message.
    """

    def __init__(self, service: str, message: Optional[str] = None) -> None:
        self.service = service
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=message or f"Gagal menghubungi layanan {service}",
        )


def _error_body(message: str, **extra) -> Dict:
    body = {"message": message}
    body.update(extra)
    return body


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if isinstance(exc, UpstreamFailure):
        logger.error(
            "%s %s failed in %s: %r",
            request.method,
            request.url.path,
            exc.service,
            exc.__cause__,
        )
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"loc": [str(part) for part in err.get("loc", ())], "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body("Data permintaan tidak valid", errors=errors),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

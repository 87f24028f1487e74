"""
Error kinds raised by the service layer and their HTTP mapping.

Services and the database gateway raise ``ServiceError`` tagged with an
``ErrorKind``.  The application registers ``service_error_handler`` so
every kind is answered with the same body shape::

    {"error": "<message>", "kind": "<kind value>"}

and the status code attached to the kind.
"""

import logging
from enum import Enum

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    VALIDATION = "validation_error"
    DUPLICATE_KEY = "duplicate_key"
    NOT_FOUND = "not_found"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]


_STATUS_CODES = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.DUPLICATE_KEY: status.HTTP_409_CONFLICT,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


class ServiceError(Exception):
    """A failure that is reported to the client rather than crashing the request."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.message, "kind": self.kind.value}


def validation_error(message: str) -> ServiceError:
    return ServiceError(ErrorKind.VALIDATION, message)


def not_found(message: str = "User not found") -> ServiceError:
    return ServiceError(ErrorKind.NOT_FOUND, message)


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    logger.warning("%s %s failed (%s): %s", request.method, request.url.path, exc.kind.value, exc.message)
    return JSONResponse(status_code=exc.kind.status_code, content=exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report FastAPI's own parameter validation in the service's error shape."""
    errors = exc.errors()
    message = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}" for err in errors
    ) or "Invalid request"
    return await service_error_handler(request, validation_error(message))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error", "kind": "internal_error"},
    )

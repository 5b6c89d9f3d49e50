"""Service-layer exceptions and the handlers that turn them into JSON errors."""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

logger = logging.getLogger(__name__)


class ServiceException(Exception):
    """Base exception for service layer errors."""
    pass


class RecordNotFoundError(ServiceException):
    """Raised when a referenced record does not exist."""
    pass


class ResumeNotFoundError(RecordNotFoundError):
    pass


class JobNotFoundError(RecordNotFoundError):
    pass


async def service_exception_handler(request: Request, exc: ServiceException) -> JSONResponse:
    status_code = 404 if isinstance(exc, RecordNotFoundError) else 500
    if status_code == 500:
        logger.error("Service error in %s: %s", request.url.path, exc, exc_info=True)
    else:
        logger.info("Not found in %s: %s", request.url.path, exc)

    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": str(exc),
            "type": exc.__class__.__name__,
        },
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Give HTTPException the same body shape as service errors."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": exc.detail,
            "type": "HTTPException",
        },
        headers=getattr(exc, "headers", None),
    )

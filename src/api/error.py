"""API error types

Use case errors are raised as ClientError and rendered as
{"error": {"code": ..., "message": ...}}.
"""

import logging
from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse
from libs.result import Error

logger = logging.getLogger(__name__)


class ClientError(HTTPException):
    """HTTP error carrying a use case Error"""

    def __init__(self, error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(status_code=status_code, detail=error.message)
        self.error = error


def status_for(error: Error) -> int:
    """HTTP status for a use case error code"""
    if error.code == "GIG_LIMIT_REACHED":
        return status.HTTP_403_FORBIDDEN
    if error.code.endswith("_NOT_FOUND"):
        return status.HTTP_404_NOT_FOUND
    if error.code == "INVOICE_ALREADY_EXISTS":
        return status.HTTP_409_CONFLICT
    return status.HTTP_400_BAD_REQUEST


def raise_for(error: Error):
    """Raise the ClientError matching a use case error"""
    raise ClientError(error, status_code=status_for(error))


async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
    logger.info(
        f"{request.method} {request.url.path} -> {exc.status_code} "
        f"{exc.error.code}: {exc.error.reason}"
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": {"code": exc.error.code, "message": exc.error.message}},
    )

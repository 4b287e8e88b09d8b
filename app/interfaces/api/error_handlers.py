"""Global exception handlers registered on the FastAPI application."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register the validation and catch-all handlers on ``app``."""

    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed requests, including missing codes, as 400 Bad Request."""

    logger.info("Validation error on %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": _validation_failures(exc)},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled exception on %s", request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": [{"field": "", "message": "An unexpected error occurred"}]},
    )


def _validation_failures(exc: RequestValidationError) -> list[dict[str, str]]:
    failures = []
    for error in exc.errors():
        # Drop the "body"/"query"/"path" prefix; keep the client-facing name.
        location = [str(part) for part in error["loc"][1:]] or [str(error["loc"][0])]
        failures.append({"field": ".".join(location), "message": error["msg"]})
    return failures

#!/usr/bin/env python3
"""
Error Handlers for the HTTP API

Every error leaves the API as JSON. Validation problems and ValueErrors are
client errors (400); anything else is logged with the request path and
reported as a server error (500).
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


def error_response(message: str, status_code: int = 400) -> JSONResponse:
    """Short error body used by the route handlers."""
    return JSONResponse({"error": message}, status_code=status_code)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected invalid request body for %s %s", request.method, request.url.path)
    return error_response("Invalid input. Expected a JSON array of transaction strings.")


async def handle_exception(request: Request, exc: Exception) -> JSONResponse:
    """Log an unhandled exception and describe it in the response body."""
    status_code = 400 if isinstance(exc, ValueError) else 500
    logger.error(
        "An unhandled exception occurred while processing request %s with method %s",
        request.url.path,
        request.method,
        exc_info=exc,
    )
    return JSONResponse(
        {
            "error": {
                "message": str(exc),
                "type": type(exc).__name__,
                "path": request.url.path,
            }
        },
        status_code=status_code,
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(ValueError, handle_exception)
    app.add_exception_handler(Exception, handle_exception)

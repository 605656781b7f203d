"""Error taxonomy shared by all bounded contexts, and its HTTP translation.

Domain code raises these exceptions; the FastAPI layer turns each one into a
stable status code and a short message. Nothing else about the failure leaves
the process.
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = structlog.get_logger(__name__)


class BrewbarError(Exception):
    """Base class for every error surfaced to API callers."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class BadRequest(BrewbarError):
    status_code = 400
    default_message = "Bad request"


class Unauthorized(BrewbarError):
    status_code = 401
    default_message = "Unauthorized"


class Forbidden(BrewbarError):
    status_code = 403
    default_message = "Forbidden"


class NotFound(BrewbarError):
    status_code = 404
    default_message = "Not found"


class Conflict(BrewbarError):
    status_code = 409
    default_message = "Conflict"


class InternalError(BrewbarError):
    status_code = 500
    default_message = "Internal server error"


def register_error_handlers(app: FastAPI) -> None:
    """Translate the error taxonomy (and malformed request bodies) into JSON responses."""

    @app.exception_handler(BrewbarError)
    async def handle_brewbar_error(request: Request, exc: BrewbarError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("request_failed", path=request.url.path, detail=exc.message)
        else:
            logger.info("request_rejected", path=request.url.path, status=exc.status_code, detail=exc.message)
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

    @app.exception_handler(RequestValidationError)
    async def handle_malformed_body(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Missing or mistyped fields are a plain 400, same as any other bad request
        logger.info("request_malformed", path=request.url.path, errors=len(exc.errors()))
        return JSONResponse(status_code=400, content={"detail": BadRequest.default_message})

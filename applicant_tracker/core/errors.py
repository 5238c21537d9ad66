"""
Error types and their HTTP rendering.

Every failure leaves the API as {"success": false, "error": <message>}:
- NotFoundError      -> 404 (no applicant with the given id)
- ValidationFailure  -> 400 (bad upload, malformed request body)
- PersistenceError   -> 500 (disk or database failure, message passed through)
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Applicant not found"


class ApplicantTrackerError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ApplicantTrackerError):
    status_code = 404


class ValidationFailure(ApplicantTrackerError):
    status_code = 400


class PersistenceError(ApplicantTrackerError):
    status_code = 500


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


def _format_validation_error(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        location = ".".join(str(item) for item in err.get("loc", ()) if item != "body")
        parts.append(f"{location}: {err.get('msg')}" if location else err.get("msg", ""))
    return "; ".join(parts) or "Invalid request"


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the JSON error handlers to an app."""

    @app.exception_handler(ApplicantTrackerError)
    async def handle_tracker_error(request: Request, exc: ApplicantTrackerError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        # A path id that is not an int64 matches no applicant
        if any(tuple(err.get("loc", ()))[:1] == ("path",) for err in exc.errors()):
            return error_response(404, NOT_FOUND_MESSAGE)
        return error_response(400, _format_validation_error(exc))

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response(500, str(exc))

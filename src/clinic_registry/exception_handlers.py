"""Global exception handlers for the FastAPI application.

REST endpoints let ``SchedulingError`` propagate; the handler below turns it
into an HTTP error response. The GraphQL surface never reaches this handler
because its resolvers answer with sentinel records instead.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from loguru import logger

from clinic_registry.exceptions import SchedulingError, SchedulingErrorKind

SCHEDULING_ERROR_STATUS: dict[SchedulingErrorKind, int] = {
    SchedulingErrorKind.INVALID_DOCTOR_ID: status.HTTP_404_NOT_FOUND,
    SchedulingErrorKind.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    SchedulingErrorKind.DUPLICATE_EVENT_ID: status.HTTP_409_CONFLICT,
    SchedulingErrorKind.TIME_SLOT_TAKEN: status.HTTP_409_CONFLICT,
}


async def scheduling_error_handler(request: Request, exc: SchedulingError) -> JSONResponse:
    """Answer a rejected REST operation with its status code and reason."""
    status_code = SCHEDULING_ERROR_STATUS[exc.kind]
    logger.info(f"{request.method} {request.url.path} rejected: {exc.kind} ({exc})")
    return JSONResponse(status_code=status_code, content={"detail": str(exc), "kind": exc.kind.value})


def register_exception_handlers(app: FastAPI) -> None:
    """Register all custom exception handlers with the FastAPI app."""
    app.add_exception_handler(SchedulingError, scheduling_error_handler)
    logger.debug("Registered exception handlers")

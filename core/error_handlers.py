"""Error handlers for the analytics API.

Every error leaves the app as `{"error": {"message", "status_code", ...}}`.
Rejected anthropometric input additionally names the offending `field`
so a form can highlight it.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from core.exceptions import AppException, InvalidInputError
from core.logger import get_logger

logger = get_logger("core.error_handlers")


def create_error_response(message: str, status_code: int, **extra) -> JSONResponse:
    """Build the JSON error envelope.

    Args:
        message: Error message shown to the client.
        status_code: HTTP status code.
        **extra: Additional keys placed inside the `error` object; keys
            with empty values are left out.
    """
    error_body = {"message": message, "status_code": status_code}
    error_body.update({k: v for k, v in extra.items() if v})
    return JSONResponse(status_code=status_code, content={"error": error_body})


async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
    """Turn a rejected weight, height or age into a 400 naming the field."""
    logger.info("Rejected %s on %s %s: %s", exc.field, request.method, request.url.path, exc.message)
    return create_error_response(exc.message, exc.status_code, field=exc.field)


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle any other application exception with its own status code."""
    logger.warning("Application error: %s [%s %s]", exc.message, request.method, request.url.path)
    return create_error_response(exc.message, exc.status_code, details=exc.details)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report request bodies that do not fit the schemas (unknown goal, negative calories...)."""
    errors = [
        {"field": ".".join(str(loc) for loc in error["loc"]), "message": error["msg"], "type": error["type"]}
        for error in exc.errors()
    ]
    logger.warning("Validation error on %s %s: %s", request.method, request.url.path, errors)
    return create_error_response(
        "Validation error",
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        details={"validation_errors": errors},
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log an unexpected failure and hide its internals from the client."""
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return create_error_response(
        "An internal server error occurred",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        details={"type": "internal_error"},
    )


def register_exception_handlers(app):
    """Register all exception handlers with the FastAPI app.

    `InvalidInputError` is registered ahead of its `AppException` base;
    Starlette picks the handler for the most specific class either way.
    """
    app.add_exception_handler(InvalidInputError, invalid_input_handler)
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
    logger.info("Exception handlers registered")

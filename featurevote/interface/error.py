"""Interface layer errors and their HTTP rendering."""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class InterfaceError(Exception):
    """Base interface error.

    Carries everything needed to render an error response body:
    {"success": false, "error": ..., "message": ..., "details": [...]}
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(
        self,
        error: str,
        message: str | None = None,
        details: list[dict[str, str]] | None = None,
    ):
        self.error = error
        self.message = message
        self.details = details
        super().__init__(message or error)

    def to_body(self) -> dict:
        body: dict = {"success": False, "error": self.error}
        if self.message is not None:
            body["message"] = self.message
        if self.details is not None:
            body["details"] = self.details
        return body


class ValidationError(InterfaceError):
    """Request validation error."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(InterfaceError):
    """Resource not found error."""

    status_code = status.HTTP_404_NOT_FOUND


class ServiceUnavailableError(InterfaceError):
    """Storage temporarily unavailable; the client may retry."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


def _field_name(loc: tuple) -> str:
    """Last meaningful element of a pydantic error location."""
    parts = [str(p) for p in loc if p not in ("body", "path", "query")]
    return parts[-1] if parts else "body"


async def interface_error_handler(request: Request, exc: InterfaceError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render FastAPI request validation failures as 400 responses."""
    error = ValidationError(
        "Validation failed",
        details=[
            {"field": _field_name(tuple(err["loc"])), "message": err["msg"]}
            for err in exc.errors()
        ],
    )
    return await interface_error_handler(request, error)


def register_error_handlers(app: FastAPI) -> None:
    """Attach interface error handlers to the application.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(InterfaceError, interface_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

# crewhub/core/errors.py
"""
Error taxonomy and the handlers that render it.

Services raise these directly (they are HTTPException subclasses), so a
router never has to translate domain failures into status codes.

Every error body has the shape ``{"message": "..."}``; request validation
failures add ``"field"`` naming the first offending input.
"""
import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


class ValidationError(HTTPException):
    def __init__(self, message: str, field: str | None = None):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=message)
        self.field = field


class UnauthenticatedError(HTTPException):
    """No valid session: missing, malformed, expired or logged-out token."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=message)


class UnauthorizedError(HTTPException):
    """Bad login credentials. Unknown user and wrong password look the same."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=message)


class ForbiddenError(HTTPException):
    def __init__(self, message: str = "Forbidden"):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=message)


class NotFoundError(HTTPException):
    def __init__(self, message: str = "Not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=message)


class InvalidStateTransition(HTTPException):
    def __init__(self, current: str, requested: str):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Invalid status transition: {current} -> {requested}",
        )
        self.current = current
        self.requested = requested


class InternalError(HTTPException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=INTERNAL_ERROR_MESSAGE,
        )


def _first_validation_error(exc: RequestValidationError) -> tuple[str, str | None]:
    errors = exc.errors()
    if not errors:
        return "Invalid request", None
    first = errors[0]
    # loc looks like ("body", "visitTime") or ("query", "pincode")
    loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")]
    field = ".".join(loc) or None
    message = first.get("msg", "Invalid request")
    # pydantic prefixes messages raised from validators
    message = message.removeprefix("Value error, ")
    return message, field


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    body: dict = {"message": exc.detail}
    field = getattr(exc, "field", None)
    if field:
        body["field"] = field
    return JSONResponse(status_code=exc.status_code, content=body, headers=exc.headers)


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    message, field = _first_validation_error(exc)
    body: dict = {"message": message}
    if field:
        body["field"] = field
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    error = InternalError()
    return JSONResponse(status_code=error.status_code, content={"message": error.detail})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

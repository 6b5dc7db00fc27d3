# Third-party imports
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import sentry_sdk
from sqlalchemy.exc import SQLAlchemyError

# Local application imports
from civicdesk.core.exceptions import CivicDeskError
from civicdesk.core.monitoring.logging import get_logger
from civicdesk.schemas.common import BaseResponse
from civicdesk.schemas.common.response_schemas import DetailsType

logger = get_logger(__name__)

# Error codes for HTTPExceptions raised directly by routes and dependencies
HTTP_ERROR_CODES = {
    400: "bad_request",
    404: "not_found",
    405: "method_not_allowed",
    409: "conflict",
    413: "payload_too_large",
    500: "internal_server_error",
}

MAX_VALIDATION_MESSAGES = 5
_VALUE_ERROR_PREFIX = "Value error, "


def error_response(
    status_code: int,
    code: str,
    message: str,
    details: DetailsType | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    body = BaseResponse.failure(code=code, message=message, details=details).model_dump()
    return JSONResponse(status_code=status_code, content=body, headers=headers)


def format_validation_errors(exc: RequestValidationError) -> str:
    """One readable line per invalid field, e.g. ``location_lat: Input should be less than or equal to 90``."""
    messages = []
    for error in exc.errors():
        message = error.get("msg", "").removeprefix(_VALUE_ERROR_PREFIX)
        field = ".".join(str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path"))
        messages.append(f"{field}: {message}" if field else message)

    if not messages:
        return "Invalid request data"
    if len(messages) > MAX_VALIDATION_MESSAGES:
        hidden = len(messages) - MAX_VALIDATION_MESSAGES
        messages = [*messages[:MAX_VALIDATION_MESSAGES], f"and {hidden} more"]
    return "; ".join(messages)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:  # noqa: ARG001
        detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
        code = HTTP_ERROR_CODES.get(exc.status_code, "error")
        return error_response(exc.status_code, code, detail, headers=exc.headers)

    @app.exception_handler(CivicDeskError)
    async def domain_exception_handler(request: Request, exc: CivicDeskError) -> JSONResponse:  # noqa: ARG001
        return error_response(exc.status_code, exc.error_code, exc.message, exc.details)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:  # noqa: ARG001
        return error_response(400, "bad_request", format_validation_errors(exc))

    @app.exception_handler(SQLAlchemyError)
    async def store_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.error(f"Record store error on {request.method} {request.url.path}: {exc}", exc_info=exc)
        sentry_sdk.capture_exception(exc)
        return error_response(
            503,
            "store_unavailable",
            "The complaint store could not complete the request. Please try again.",
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
        sentry_sdk.capture_exception(exc)
        return error_response(500, "internal_server_error", "An unexpected error occurred. Please try again later.")

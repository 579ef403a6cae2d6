"""Error kinds shared across contexts and their HTTP translation.

Domain code raises protean's ``ValidationError`` (unprocessable input or an
illegal state transition) and ``ObjectNotFoundError``; access-policy denials
raise ``AccessDenied``. ``register_error_handlers`` maps each kind onto the
standard error envelope.
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import (
    InvalidOperationError,
    ObjectNotFoundError,
    TransactionError,
    ValidationError,
)
from sqlalchemy.exc import IntegrityError

from shared.exceptions import AccessDenied, Unauthenticated

logger = structlog.get_logger(__name__)


def _first_message(messages):
    """Pull a human-readable sentence out of protean's error payloads."""
    if isinstance(messages, dict):
        for value in messages.values():
            if isinstance(value, (list, tuple)) and value:
                return str(value[0])
            if value:
                return str(value)
        return "Unprocessable request"
    if isinstance(messages, (list, tuple)) and messages:
        return str(messages[0])
    return str(messages)


def error_body(code: int, message: str, errors=None) -> dict:
    body = {"status": "error", "message": message, "code": code}
    if errors:
        body["errors"] = errors
    return body


def register_error_handlers(app: FastAPI) -> None:
    """Install exception handlers translating domain errors to HTTP responses."""

    @app.exception_handler(ObjectNotFoundError)
    async def not_found_handler(request: Request, exc: ObjectNotFoundError):
        message = _first_message(getattr(exc, "messages", None) or str(exc))
        return JSONResponse(status_code=404, content=error_body(404, message))

    @app.exception_handler(AccessDenied)
    async def access_denied_handler(request: Request, exc: AccessDenied):
        logger.info("Access denied", path=request.url.path, reason=exc.message)
        return JSONResponse(status_code=403, content=error_body(403, exc.message))

    @app.exception_handler(Unauthenticated)
    async def unauthenticated_handler(request: Request, exc: Unauthenticated):
        return JSONResponse(status_code=401, content=error_body(401, exc.message))

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        messages = getattr(exc, "messages", None) or str(exc)
        errors = messages if isinstance(messages, dict) else None
        return JSONResponse(status_code=422, content=error_body(422, _first_message(messages), errors))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = {}
        for error in exc.errors():
            field = ".".join(str(part) for part in error["loc"] if part != "body")
            errors.setdefault(field, []).append(error["msg"])
        return JSONResponse(status_code=422, content=error_body(422, _first_message(errors), errors))

    @app.exception_handler(InvalidOperationError)
    async def invalid_operation_handler(request: Request, exc: InvalidOperationError):
        message = _first_message(getattr(exc, "messages", None) or str(exc))
        return JSONResponse(status_code=422, content=error_body(422, message))

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError):
        # A unique key lost a race against a concurrent request.
        logger.warning("Unique constraint violated", path=request.url.path)
        return JSONResponse(status_code=422, content=error_body(422, "Duplicate record"))

    @app.exception_handler(TransactionError)
    async def transaction_error_handler(request: Request, exc: TransactionError):
        # protean wraps commit failures; only unique-key violations are the caller's fault.
        if (exc.extra_info or {}).get("original_exception") != "IntegrityError":
            raise exc
        logger.warning("Unique constraint violated on commit", path=request.url.path)
        return JSONResponse(status_code=422, content=error_body(422, "Duplicate record"))

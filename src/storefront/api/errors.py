"""Map storefront errors to HTTP responses.

Every error body has the shape ``{"error": <message>, "statusCode": <code>}``;
validation failures add ``"fields": {<field>: [<messages>]}``.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ProteanException, ValidationError

from storefront.errors import ErrorKind, StorefrontError
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

_VALIDATION_FAILED = "Validation failed"
_LOCATION_PREFIXES = ("body", "query", "path", "header")


def _error_body(message: str, status_code: int, fields: dict | None = None) -> dict:
    body = {"error": message, "statusCode": status_code}
    if fields is not None:
        body["fields"] = fields
    return body


def _field_name(location) -> str:
    parts = [str(part) for part in location]
    if parts and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]
    return ".".join(parts) or "request"


def request_validation_fields(exc: RequestValidationError) -> dict[str, list[str]]:
    fields: dict[str, list[str]] = {}
    for error in exc.errors():
        fields.setdefault(_field_name(error.get("loc", ())), []).append(error.get("msg", "Invalid value"))
    return fields


def register_error_handlers(app: FastAPI) -> None:
    status = ErrorKind.BAD_REQUEST.status_code

    @app.exception_handler(StorefrontError)
    async def storefront_error_handler(request: Request, exc: StorefrontError) -> JSONResponse:
        code = exc.kind.status_code
        return JSONResponse(status_code=code, content=_error_body(exc.message, code))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status,
            content=_error_body(_VALIDATION_FAILED, status, request_validation_fields(exc)),
        )

    @app.exception_handler(ValidationError)
    async def domain_validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status,
            content=_error_body(_VALIDATION_FAILED, status, exc.messages),
        )

    @app.exception_handler(ProteanException)
    async def infrastructure_error_handler(request: Request, exc: ProteanException) -> JSONResponse:
        logger.exception("request.failed", path=request.url.path, error_type=type(exc).__name__)
        return JSONResponse(status_code=status, content=_error_body("Request could not be completed", status))

# catalog/errors.py
from http import HTTPStatus
from typing import Dict, Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .validation import FieldError, describe_request_error


def error_response(
    status_code: int,
    error: str,
    message: str,
    headers: Optional[Dict[str, str]] = None,
    **extra,
) -> JSONResponse:
    body = {"error": error, "message": message}
    body.update(extra)
    return JSONResponse(status_code=status_code, content=body, headers=headers)


def validation_error_response(err: FieldError) -> JSONResponse:
    extra = {"field": err.field} if err.field else {}
    return error_response(400, err.title, err.message, **extra)


def product_not_found(product_id: str) -> JSONResponse:
    return error_response(404, "Product not found", f"Product with ID {product_id} does not exist")


def request_target(request: Request) -> str:
    query = request.url.query
    return f"{request.url.path}?{query}" if query else request.url.path


def route_not_found(request: Request) -> JSONResponse:
    return error_response(404, "Route not found", f"Cannot {request.method} {request_target(request)}")


# ---------------------------
# Exception handlers
# ---------------------------
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # the router raises 404 for unknown paths and 405 for known paths with the wrong method
    if exc.status_code in (404, 405):
        return route_not_found(request)
    try:
        title = HTTPStatus(exc.status_code).phrase
    except ValueError:
        title = "Error"
    return error_response(exc.status_code, title, str(exc.detail), headers=getattr(exc, "headers", None))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    first = errors[0] if errors else {}
    return validation_error_response(describe_request_error(first))

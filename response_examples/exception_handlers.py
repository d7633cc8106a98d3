import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from response_examples.utils.problems import (
    ProblemResponse,
    internal_error_problem,
    problem,
    validation_problem,
)

logger = logging.getLogger(__name__)


def _error_key(error: dict) -> str:
    """Turn a pydantic error location into a field key, dropping the 'body' prefix."""
    loc = [str(part) for part in error.get("loc", ())]
    if error.get("type") == "json_invalid" or not loc:
        return "body"
    if loc[0] in ("body", "query", "path") and len(loc) > 1:
        loc = loc[1:]
    # Same casing as the rule-based validators (stockQuantity -> StockQuantity)
    return ".".join(part[:1].upper() + part[1:] for part in loc)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> ProblemResponse:
    detail = exc.detail if isinstance(exc.detail, str) else None
    return problem(
        exc.status_code,
        detail=detail,
        instance=request.url.path,
        headers=exc.headers,
    )


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> ProblemResponse:
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        errors.setdefault(_error_key(error), []).append(error.get("msg", "Invalid value."))
    logger.warning("Request validation failed for %s: %s", request.url.path, errors)
    return validation_problem(errors, instance=request.url.path)


async def unhandled_exception_handler(request: Request, exc: Exception) -> ProblemResponse:
    logger.exception("Unhandled exception while processing %s %s", request.method, request.url.path)
    return internal_error_problem(instance=request.url.path)


# Exception handler mapping
EXCEPTION_HANDLERS = {
    StarletteHTTPException: http_exception_handler,
    RequestValidationError: request_validation_error_handler,
    Exception: unhandled_exception_handler,  # Catch-all for unhandled exceptions
}


def register_exception_handlers(app):
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)

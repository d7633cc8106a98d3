"""Canned problem responses for the error demonstration endpoints.

Every function here is a pure function of its (optional) input.
"""
import logging
from typing import Optional

from response_examples.schemas.error_demo import ConflictRequest, ValidationRequest
from response_examples.services.validation import validate_contact
from response_examples.utils.problems import (
    ProblemResponse,
    internal_error_problem,
    problem,
    validation_problem,
)

logger = logging.getLogger(__name__)

RATE_LIMIT_RETRY_AFTER = 60
MAINTENANCE_RETRY_AFTER = 120


def validation_error(request: Optional[ValidationRequest]) -> ProblemResponse:
    return validation_problem(validate_contact(request))


def bad_request() -> ProblemResponse:
    return problem(
        400,
        title="Bad Request",
        detail=(
            "The request contains malformed JSON or unsupported content type. "
            "This is a general bad request error, not a validation error."
        ),
    )


def unauthorized() -> ProblemResponse:
    # Status only, like a bare challenge from an auth layer
    return problem(401, headers={"WWW-Authenticate": "Bearer"})


def forbidden() -> ProblemResponse:
    return problem(
        403,
        title="Forbidden",
        detail=(
            "You do not have permission to access this resource. "
            "This operation requires administrator privileges."
        ),
    )


def not_found(resource_id: int) -> ProblemResponse:
    return problem(
        404,
        title="Resource not found",
        detail=f"The requested resource with ID {resource_id} was not found in the system.",
    )


def conflict(request: Optional[ConflictRequest]) -> ProblemResponse:
    identifier = request.identifier if request and request.identifier is not None else "unknown"
    return problem(
        409,
        title="Conflict",
        detail=(
            f"A resource with identifier '{identifier}' already exists. "
            "Please use a different identifier or update the existing resource."
        ),
    )


def unprocessable() -> ProblemResponse:
    return problem(
        422,
        title="Unprocessable Entity",
        detail=(
            "The request was well-formed but contains semantic errors. "
            "For example, the start date cannot be after the end date."
        ),
        type_="https://tools.ietf.org/html/rfc4918#section-11.2",
    )


def rate_limit() -> ProblemResponse:
    return problem(
        429,
        title="Too Many Requests",
        detail=(
            "Rate limit exceeded. You have made too many requests in a short period. "
            "Please wait before making additional requests."
        ),
        headers={"Retry-After": str(RATE_LIMIT_RETRY_AFTER)},
    )


def server_error() -> ProblemResponse:
    """Simulate an internal fault and report it as a generic 500."""
    logger.error("Simulated internal fault while processing the server-error demo")
    return internal_error_problem()


def service_unavailable() -> ProblemResponse:
    return problem(
        503,
        title="Service Unavailable",
        detail=(
            "The service is temporarily unavailable due to maintenance or high load. "
            "Please try again later."
        ),
        headers={"Retry-After": str(MAINTENANCE_RETRY_AFTER)},
    )

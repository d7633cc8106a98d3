from typing import Optional

from fastapi import APIRouter, Body, status

from response_examples.schemas.error_demo import (
    ConflictRequest,
    UnprocessableRequest,
    ValidationRequest,
)
from response_examples.schemas.problem import ProblemDetails, ValidationProblemDetails
from response_examples.services import error_demo_service

router = APIRouter(prefix="/errors", tags=["Error Examples"])


def problem_responses(status_code: int, description: str, model=ProblemDetails) -> dict:
    return {status_code: {"model": model, "description": description}}


@router.post(
    "/validation-error",
    response_model=None,
    responses=problem_responses(
        status.HTTP_400_BAD_REQUEST, "Validation failures", ValidationProblemDetails
    ),
    summary="Demonstrates a 400 Bad Request with validation errors",
    description=(
        "Returns a validation problem response listing every failed field. "
        "Pass invalid data to trigger validation errors."
    )
)
def validation_error(payload: Optional[ValidationRequest] = Body(None)):
    """
    Validate a contact body.

    - **name**: required, at least 3 characters
    - **email**: required, must contain '@'
    - **age**: between 0 and 120
    """
    return error_demo_service.validation_error(payload)


@router.post(
    "/bad-request",
    response_model=None,
    responses=problem_responses(status.HTTP_400_BAD_REQUEST, "Malformed request"),
    summary="Demonstrates a 400 Bad Request with problem details",
    description="Returns a problem response for a malformed request that isn't a validation error."
)
def bad_request():
    return error_demo_service.bad_request()


@router.get(
    "/unauthorized",
    response_model=None,
    responses=problem_responses(status.HTTP_401_UNAUTHORIZED, "Authentication required"),
    summary="Demonstrates a 401 Unauthorized error",
    description="Returns a problem response indicating authentication is required."
)
def unauthorized():
    return error_demo_service.unauthorized()


@router.get(
    "/forbidden",
    response_model=None,
    responses=problem_responses(status.HTTP_403_FORBIDDEN, "Insufficient privileges"),
    summary="Demonstrates a 403 Forbidden error",
    description="Returns a problem response indicating the user lacks permission to access this resource."
)
def forbidden():
    return error_demo_service.forbidden()


@router.get(
    "/not-found/{resource_id:int}",
    response_model=None,
    responses=problem_responses(status.HTTP_404_NOT_FOUND, "Resource not found"),
    summary="Demonstrates a 404 Not Found error",
    description="Any ID value will trigger a 404 response; non-numeric IDs match no route and are also answered with 404."
)
def not_found(resource_id: int):
    return error_demo_service.not_found(resource_id)


@router.post(
    "/conflict",
    response_model=None,
    responses=problem_responses(status.HTTP_409_CONFLICT, "Resource already exists"),
    summary="Demonstrates a 409 Conflict error",
    description=(
        "Returns a problem response when there's a conflict with the current state, "
        "such as attempting to create a duplicate resource."
    )
)
def conflict(payload: Optional[ConflictRequest] = Body(None)):
    return error_demo_service.conflict(payload)


@router.post(
    "/unprocessable",
    response_model=None,
    responses=problem_responses(422, "Semantically invalid request"),
    summary="Demonstrates a 422 Unprocessable Entity error",
    description="Returns a problem response when the request is well-formed but semantically incorrect."
)
def unprocessable(payload: Optional[UnprocessableRequest] = Body(None)):
    return error_demo_service.unprocessable()


@router.get(
    "/rate-limit",
    response_model=None,
    responses=problem_responses(status.HTTP_429_TOO_MANY_REQUESTS, "Rate limit exceeded"),
    summary="Demonstrates a 429 Too Many Requests error",
    description="Returns a problem response when rate limit is exceeded. No real limiting is applied."
)
def rate_limit():
    return error_demo_service.rate_limit()


@router.get(
    "/server-error",
    response_model=None,
    responses=problem_responses(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal fault"),
    summary="Demonstrates a 500 Internal Server Error",
    description="Simulates an internal fault and returns the generic internal error problem response."
)
def server_error():
    return error_demo_service.server_error()


@router.get(
    "/service-unavailable",
    response_model=None,
    responses=problem_responses(status.HTTP_503_SERVICE_UNAVAILABLE, "Service temporarily down"),
    summary="Demonstrates a 503 Service Unavailable error",
    description=(
        "Returns a problem response when a service dependency is unavailable "
        "or the service is temporarily down."
    )
)
def service_unavailable():
    return error_demo_service.service_unavailable()

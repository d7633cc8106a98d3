from http import HTTPStatus
from typing import Mapping, Optional, Sequence

from fastapi.responses import JSONResponse

from response_examples.schemas.problem import ProblemDetails, ValidationProblemDetails

PROBLEM_MEDIA_TYPE = "application/problem+json"

RFC9110 = "https://tools.ietf.org/html/rfc9110"

# Problem type URI for each status code we emit
PROBLEM_TYPES = {
    400: f"{RFC9110}#section-15.5.1",
    401: f"{RFC9110}#section-15.5.2",
    403: f"{RFC9110}#section-15.5.4",
    404: f"{RFC9110}#section-15.5.5",
    405: f"{RFC9110}#section-15.5.6",
    406: f"{RFC9110}#section-15.5.7",
    408: f"{RFC9110}#section-15.5.9",
    409: f"{RFC9110}#section-15.5.10",
    412: f"{RFC9110}#section-15.5.13",
    415: f"{RFC9110}#section-15.5.16",
    422: f"{RFC9110}#section-15.5.21",
    429: "https://tools.ietf.org/html/rfc6585#section-4",
    500: f"{RFC9110}#section-15.6.1",
    502: f"{RFC9110}#section-15.6.3",
    503: f"{RFC9110}#section-15.6.4",
    504: f"{RFC9110}#section-15.6.5",
}

VALIDATION_TITLE = "One or more validation errors occurred."
VALIDATION_DETAIL = "See the errors property for the fields that failed validation."

INTERNAL_ERROR_TITLE = "An error occurred while processing your request."
INTERNAL_ERROR_DETAIL = "An unexpected error occurred. Please try again later."


class ProblemResponse(JSONResponse):
    """JSON response carrying a problem details body."""

    media_type = PROBLEM_MEDIA_TYPE

    def __init__(
        self,
        problem: ProblemDetails,
        headers: Optional[Mapping[str, str]] = None
    ):
        self.problem = problem
        super().__init__(
            content=problem.model_dump(exclude_none=True),
            status_code=problem.status,
            headers=headers,
        )


def problem_type(status_code: int) -> str:
    """Return the problem type URI for a status code."""
    if status_code in PROBLEM_TYPES:
        return PROBLEM_TYPES[status_code]
    return f"{RFC9110}#section-15.6.1" if status_code >= 500 else f"{RFC9110}#section-15.5.1"


def reason_phrase(status_code: int) -> str:
    """Standard reason phrase, or a generic one for codes outside HTTPStatus."""
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Server Error" if status_code >= 500 else "Client Error"


def problem(
    status_code: int,
    detail: Optional[str] = None,
    title: Optional[str] = None,
    type_: Optional[str] = None,
    instance: Optional[str] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> ProblemResponse:
    """
    Build a problem response for ``status_code``.

    Title and type fall back to the standard reason phrase and the
    RFC section for the status code.
    """
    phrase = reason_phrase(status_code)
    return ProblemResponse(
        ProblemDetails(
            type=type_ or problem_type(status_code),
            title=title or phrase,
            status=status_code,
            detail=detail or phrase,
            instance=instance,
        ),
        headers=headers,
    )


def validation_problem(
    errors: Mapping[str, Sequence[str]],
    instance: Optional[str] = None,
) -> ProblemResponse:
    """Build a 400 response listing every field that failed validation."""
    return ProblemResponse(
        ValidationProblemDetails(
            type=problem_type(400),
            title=VALIDATION_TITLE,
            status=400,
            detail=VALIDATION_DETAIL,
            instance=instance,
            errors={field: list(messages) for field, messages in errors.items()},
        )
    )


def internal_error_problem(instance: Optional[str] = None) -> ProblemResponse:
    """Generic 500 response. Never exposes the underlying error."""
    return problem(
        500,
        detail=INTERNAL_ERROR_DETAIL,
        title=INTERNAL_ERROR_TITLE,
        instance=instance,
    )

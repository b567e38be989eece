"""
Error classification.

Maps every ErrorKind to the HTTP status returned to clients. The
table must cover each kind; the message is always the error's own
human-readable text.
"""

from dataclasses import dataclass

from question_service.domain.questions.errors import ErrorKind, QuestionServiceError

HTTP_403 = 403
HTTP_404 = 404
HTTP_416 = 416
HTTP_429 = 429
HTTP_500 = 500

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.MISSING_PARAMETER: HTTP_416,
    ErrorKind.PARSE_ERROR: HTTP_416,
    ErrorKind.INVALID_ARGUMENTS_ORDER: HTTP_416,
    ErrorKind.INVALID_QUESTION: HTTP_416,
    ErrorKind.ORIGIN_FORBIDDEN: HTTP_403,
    ErrorKind.ROUTE_NOT_FOUND: HTTP_404,
    ErrorKind.RATE_LIMITED: HTTP_429,
    ErrorKind.INTERNAL: HTTP_500,
}


@dataclass(frozen=True)
class ErrorClassification:
    """Transport-level outcome of a failure."""

    status_code: int
    message: str

    @property
    def is_client_error(self) -> bool:
        """True below 500. Client errors are logged as warnings, the rest as errors."""
        return self.status_code < HTTP_500


def classify(error: QuestionServiceError) -> ErrorClassification:
    """Return the status code and client-facing message for ``error``."""
    return ErrorClassification(
        status_code=STATUS_BY_KIND[error.kind],
        message=error.message,
    )

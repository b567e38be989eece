"""
Error taxonomy for the question service.

Every failure that can leave the service boundary is one of these
errors. Each concrete error is tagged with exactly one ErrorKind; the
boundary classifier maps kinds to HTTP status codes.
No framework imports allowed.
"""

from enum import Enum


class ErrorKind(Enum):
    """Tag identifying which failure an error represents."""

    MISSING_PARAMETER = "missing_parameter"
    PARSE_ERROR = "parse_error"
    INVALID_ARGUMENTS_ORDER = "invalid_arguments_order"
    INVALID_QUESTION = "invalid_question"
    ORIGIN_FORBIDDEN = "origin_forbidden"
    ROUTE_NOT_FOUND = "route_not_found"
    RATE_LIMITED = "rate_limited"
    INTERNAL = "internal"


class QuestionServiceError(Exception):
    """Base error for all question service errors.

    Attributes:
        kind: The tag consumed by the error classifier.
        message: Human-readable description of the violated constraint.
    """

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class MissingParameterError(QuestionServiceError):
    """Raised when only one of the pagination bounds is supplied."""

    kind = ErrorKind.MISSING_PARAMETER

    def __init__(self, parameter: str) -> None:
        super().__init__(f"Missing parameter: {parameter}")
        self.parameter = parameter


class PaginationParseError(QuestionServiceError):
    """Raised when a pagination bound is not a non-negative integer."""

    kind = ErrorKind.PARSE_ERROR

    def __init__(self, parameter: str, value: str, reason: str) -> None:
        super().__init__(f"Cannot parse parameter '{parameter}': {reason}")
        self.parameter = parameter
        self.value = value
        self.reason = reason


class InvalidArgumentsOrderError(QuestionServiceError):
    """Raised when the end bound is below the start bound."""

    kind = ErrorKind.INVALID_ARGUMENTS_ORDER

    def __init__(self, start: int, end: int) -> None:
        super().__init__(
            "Order of arguments is invalid. 'Start' cannot be greater than 'end'"
        )
        self.start = start
        self.end = end


class InvalidQuestionError(QuestionServiceError):
    """Raised when a question payload is malformed."""

    kind = ErrorKind.INVALID_QUESTION

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid question: {reason}")
        self.reason = reason


class OriginForbiddenError(QuestionServiceError):
    """Raised when a cross-origin request violates the CORS policy."""

    kind = ErrorKind.ORIGIN_FORBIDDEN

    def __init__(self, reason: str) -> None:
        super().__init__(f"CORS request forbidden: {reason}")
        self.reason = reason


class RouteNotFoundError(QuestionServiceError):
    """Raised when no handler matches the request method and path."""

    kind = ErrorKind.ROUTE_NOT_FOUND

    def __init__(self, method: str, path: str) -> None:
        super().__init__("Route not found")
        self.method = method
        self.path = path


class RateLimitedError(QuestionServiceError):
    """Raised when a client exceeds its request quota."""

    kind = ErrorKind.RATE_LIMITED

    def __init__(self, limit: str) -> None:
        super().__init__(f"Rate limit exceeded: {limit}")
        self.limit = limit


class InternalServiceError(QuestionServiceError):
    """Wraps an unexpected failure. The cause is logged, never returned."""

    kind = ErrorKind.INTERNAL

    def __init__(self, cause: str) -> None:
        super().__init__("Internal server error")
        self.cause = cause

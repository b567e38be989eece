"""
Centralized error handlers for FastAPI.

Translates every failure into the question service error taxonomy
and answers with the classified status and a plain-text message.
No stack traces or internal details are exposed to clients.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from question_service.domain.questions.errors import (
    InternalServiceError,
    InvalidQuestionError,
    QuestionServiceError,
    RateLimitedError,
    RouteNotFoundError,
)
from question_service.shared.errors.classifier import classify

logger = logging.getLogger(__name__)

HTTP_404 = 404
HTTP_405 = 405


def build_error_response(error: QuestionServiceError) -> PlainTextResponse:
    """Classify ``error`` and build the plain-text response for it."""
    classification = classify(error)
    if classification.is_client_error:
        logger.warning(
            "%s -> %d: %s",
            error.kind.value,
            classification.status_code,
            classification.message,
        )
    else:
        logger.error("%s -> %d", error.kind.value, classification.status_code)
    return PlainTextResponse(
        classification.message,
        status_code=classification.status_code,
    )


def describe_validation_errors(errors: list[dict[str, Any]]) -> str:
    """Summarize the first request validation failure as 'field: message'."""
    if not errors:
        return "malformed payload"
    first = errors[0]
    location = [str(part) for part in first.get("loc", ()) if part != "body"]
    field = ".".join(location) or "body"
    return f"{field}: {first.get('msg', 'invalid value')}"


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(QuestionServiceError)
    async def handle_question_service_error(
        _request: Request, exc: QuestionServiceError
    ) -> PlainTextResponse:
        """Handle errors raised by the domain and application layers."""
        return build_error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> PlainTextResponse:
        """Handle question payloads rejected by schema validation."""
        return build_error_response(
            InvalidQuestionError(describe_validation_errors(list(exc.errors())))
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> PlainTextResponse:
        """Handle unmatched routes. Other HTTP errors keep their status."""
        if exc.status_code in (HTTP_404, HTTP_405):
            return build_error_response(
                RouteNotFoundError(request.method, request.url.path)
            )
        logger.warning("HTTP error %d: %s", exc.status_code, exc.detail)
        return PlainTextResponse(
            str(exc.detail), status_code=exc.status_code, headers=exc.headers
        )

    # SlowAPIMiddleware calls this handler synchronously.
    @app.exception_handler(RateLimitExceeded)
    def handle_rate_limit_exceeded(
        _request: Request, exc: RateLimitExceeded
    ) -> PlainTextResponse:
        """Handle clients exceeding their request quota."""
        return build_error_response(RateLimitedError(str(exc.detail)))

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> PlainTextResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return build_error_response(InternalServiceError(type(exc).__name__))

"""
Cross-origin policy middleware.

Starlette's CORSMiddleware answers a rejected preflight with 400.
This subclass reports the rejection as an ORIGIN_FORBIDDEN error so
it leaves through the same classifier as every other failure.
"""

import logging

from starlette.datastructures import Headers
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import Response

from question_service.domain.questions.errors import OriginForbiddenError
from question_service.shared.errors.handlers import build_error_response

logger = logging.getLogger(__name__)

HTTP_400 = 400


class CrossOriginMiddleware(CORSMiddleware):
    """CORS middleware whose failed preflights are classified as forbidden."""

    def preflight_response(self, request_headers: Headers) -> Response:
        response = super().preflight_response(request_headers)
        if response.status_code != HTTP_400:
            return response

        # Starlette's body reads "Disallowed CORS origin, method, headers".
        reason = bytes(response.body).decode("utf-8", errors="replace")
        logger.info(
            "Rejected preflight from %s: %s",
            request_headers.get("origin", "<none>"),
            reason,
        )
        return build_error_response(OriginForbiddenError(reason))

"""
Pagination window extraction.

Turns the raw query-string mapping of a listing request into a
validated Pagination, or None when no window was requested.
"""

from typing import Mapping, Optional

from question_service.domain.questions.entities import Pagination
from question_service.domain.questions.errors import (
    InvalidArgumentsOrderError,
    MissingParameterError,
    PaginationParseError,
)

START_PARAM = "start"
END_PARAM = "end"


def _parse_bound(name: str, raw: str) -> int:
    """Parse a base-10 non-negative integer, accepting a leading '+'."""
    digits = raw[1:] if raw.startswith("+") else raw
    if not digits:
        raise PaginationParseError(
            name, raw, "cannot parse integer from empty string"
        )
    if not (digits.isascii() and digits.isdigit()):
        raise PaginationParseError(name, raw, "invalid digit found in string")
    try:
        return int(digits)
    except ValueError as exc:
        # int() refuses digit strings past sys.get_int_max_str_digits().
        raise PaginationParseError(
            name, raw, "number too large to fit in target type"
        ) from exc


def extract_pagination(params: Mapping[str, str]) -> Optional[Pagination]:
    """Validate the start/end query parameters.

    Args:
        params: Query parameter names mapped to their raw string values.

    Returns:
        A Pagination when both bounds are present, None when neither is.

    Raises:
        MissingParameterError: Only one of start/end was supplied.
        PaginationParseError: A bound is not a non-negative integer.
        InvalidArgumentsOrderError: end is below start.
    """
    has_start = START_PARAM in params
    has_end = END_PARAM in params

    if not has_start and not has_end:
        return None
    if not has_end:
        raise MissingParameterError(END_PARAM)
    if not has_start:
        raise MissingParameterError(START_PARAM)

    start = _parse_bound(START_PARAM, params[START_PARAM])
    end = _parse_bound(END_PARAM, params[END_PARAM])

    if end < start:
        raise InvalidArgumentsOrderError(start, end)
    return Pagination(start=start, end=end)

"""
Rate limiting configuration and setup.

Uses slowapi to enforce per-client rate limits. Each application
builds its own limiter, so counters and the enabled flag never leak
between application instances. Limits are applied to every matched
route by ``SlowAPIMiddleware`` through ``default_limits``.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

DEFAULT_RATE_LIMIT = "60/minute"


def build_limiter(enabled: bool = True, rate_limit: str = DEFAULT_RATE_LIMIT) -> Limiter:
    """Create a limiter for one application.

    Args:
        enabled: Whether limits are enforced.
        rate_limit: Limit string such as "60/minute".

    Returns:
        A limiter with its own in-memory counters, for ``app.state.limiter``.
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=[rate_limit],
        enabled=enabled,
    )

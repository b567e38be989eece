"""
Logging configuration for the question service.

One stdout handler with a pipe-separated format, shared by the API
server and the CLI. Question payloads are never logged; store and use
case modules log ids and counts only.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Per-request chatter from the server and the limiter.
NOISY_LOGGERS = ("uvicorn.access", "uvicorn.error", "slowapi")


def resolve_level(name: str) -> int:
    """Map a level name such as "debug" to its number. Unknown names give INFO."""
    level = getattr(logging, name.upper(), None)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: str = "INFO") -> None:
    """Route service logs to stdout at ``level``.

    The server and limiter loggers stay at WARNING or above whatever
    ``level`` is, so a DEBUG run shows store and use case activity
    without one line per request.
    """
    root_level = resolve_level(level)
    logging.basicConfig(
        level=root_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(root_level, logging.WARNING))

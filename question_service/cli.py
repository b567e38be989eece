"""
CLI entry point for the question service.

Usage:
    # Serve the API on the configured loopback address (127.0.0.1:3030)
    question-service serve

    # Serve on another port with a custom seed document
    question-service serve --port 8080 --seed-path ./questions.json

    # Validate a seed document without starting the server
    question-service check-seed ./questions.json
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from question_service.core.config import settings
from question_service.infrastructure.questions.seed_loader import (
    SeedDataError,
    load_seed_questions,
)
from question_service.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace) -> int:
    """Start the API server with uvicorn."""
    import uvicorn

    from question_service.main import create_app

    overrides = {
        "host": args.host,
        "port": args.port,
        "log_level": args.log_level,
        "seed_path": args.seed_path,
    }
    effective = settings.model_copy(
        update={key: value for key, value in overrides.items() if value is not None}
    )

    try:
        app = create_app(settings=effective)
    except SeedDataError as exc:
        logger.error("%s", exc)
        return 1

    logger.info("Serving at http://%s:%d", effective.host, effective.port)
    uvicorn.run(app, host=effective.host, port=effective.port, log_level="warning")
    return 0


def cmd_check_seed(args: argparse.Namespace) -> int:
    """Validate a seed document and report how many questions it holds."""
    configure_logging(level=args.log_level or settings.log_level)
    path = args.path or settings.seed_path
    try:
        questions = load_seed_questions(path)
    except SeedDataError as exc:
        logger.error("%s", exc)
        return 1
    print(f"{path}: {len(questions)} questions")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Question Service CLI")
    parser.add_argument(
        "--log-level", default=None, dest="log_level",
        help="Log level (DEBUG, INFO, WARNING, ERROR)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # Serve
    serve_parser = subparsers.add_parser("serve", help="Start the HTTP API")
    serve_parser.add_argument(
        "--host", default=None,
        help=f"Listen address (default {settings.host})",
    )
    serve_parser.add_argument(
        "--port", type=int, default=None,
        help=f"Listen port (default {settings.port})",
    )
    serve_parser.add_argument(
        "--seed-path", type=Path, default=None, dest="seed_path",
        help="JSON document loaded into the store at startup",
    )
    serve_parser.set_defaults(func=cmd_serve)

    # Check seed
    check_parser = subparsers.add_parser(
        "check-seed", help="Validate a seed document"
    )
    check_parser.add_argument(
        "path", type=Path, nargs="?", default=None,
        help="Seed document (default: the configured seed path)",
    )
    check_parser.set_defaults(func=cmd_check_seed)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())

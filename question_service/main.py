"""
Application entry point.

Creates the FastAPI application and wires together:
- The shared question store, seeded at construction
- Routers (questions, health)
- Error handlers (centralized error classification)
- Security middleware (headers, CORS, rate limiting)
- Logging configuration

No business logic belongs here.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from slowapi.middleware import SlowAPIMiddleware

from question_service.core.config import Settings, settings as default_settings
from question_service.domain.questions.ports import QuestionRepository
from question_service.infrastructure.questions.in_memory_store import (
    InMemoryQuestionStore,
)
from question_service.infrastructure.questions.seed_loader import load_seed_questions
from question_service.interfaces.health import router as health_router
from question_service.interfaces.questions.router import router as questions_router
from question_service.shared.errors.handlers import register_error_handlers
from question_service.shared.logging import configure_logging
from question_service.shared.security.cors import CrossOriginMiddleware
from question_service.shared.security.headers import SecurityHeadersMiddleware
from question_service.shared.security.rate_limiting import build_limiter

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[QuestionRepository] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application.

    Args:
        settings: Configuration to use. Defaults to the environment-loaded settings.
        store: Question store to serve. When omitted, a new in-memory
            store is seeded from ``settings.seed_path``.

    Returns:
        A fully configured FastAPI application instance.

    Raises:
        SeedDataError: The seed document is missing or invalid.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level)

    if store is None:
        store = InMemoryQuestionStore(load_seed_questions(settings.seed_path))

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    app.state.question_store = store

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(
        enabled=settings.rate_limit_enabled,
        rate_limit=settings.rate_limit_default,
    )

    # --- Security Middleware (last added runs first) ---
    app.add_middleware(SlowAPIMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CrossOriginMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(questions_router)

    logger.info("%s %s ready", settings.project_name, settings.version)
    return app


app = create_app()

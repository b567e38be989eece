"""
Shared fixtures for the question service test-suite.

Rate limiting is switched off before the application package is
imported so the module-level app does not enforce quotas in tests.
"""

import os

os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from question_service.core.config import Settings  # noqa: E402
from question_service.domain.questions.entities import Question  # noqa: E402
from question_service.infrastructure.questions.in_memory_store import (  # noqa: E402
    InMemoryQuestionStore,
)
from question_service.main import create_app  # noqa: E402


def _question(
    qid: str,
    title: str | None = None,
    content: str | None = None,
    tags: list[str] | None = None,
) -> Question:
    """Build a Question with readable defaults derived from the id."""
    return Question.create(
        id=qid,
        title=title or f"Question {qid}",
        content=content or f"Content of question {qid}",
        tags=tags,
    )


@pytest.fixture
def seed_questions() -> list[Question]:
    """Three questions, the size used by the windowing examples."""
    return [
        _question("1", tags=["faq"]),
        _question("2"),
        _question("3", tags=["faq", "rust"]),
    ]


@pytest.fixture
def store(seed_questions: list[Question]) -> InMemoryQuestionStore:
    return InMemoryQuestionStore(seed_questions)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(rate_limit_enabled=False, log_level="WARNING")


@pytest.fixture
def client(test_settings: Settings, store: InMemoryQuestionStore):
    """TestClient bound to an app serving the three-question store."""
    app = create_app(settings=test_settings, store=store)
    with TestClient(app) as test_client:
        yield test_client

"""
Seed data loading.

Reads the JSON document that populates the store at startup. The
document is either an array of question objects or an object whose
values are question objects keyed by id.
"""

import logging
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, TypeAdapter, ValidationError

from question_service.domain.questions.entities import Question
from question_service.domain.questions.errors import InvalidQuestionError

logger = logging.getLogger(__name__)


class SeedDataError(Exception):
    """Raised when the seed document cannot be read or validated."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Invalid seed data in {path}: {reason}")
        self.path = path
        self.reason = reason


class SeedQuestion(BaseModel):
    """Shape of a single question in the seed document."""

    id: str
    title: str
    content: str
    tags: Optional[list[str]] = None


_SEED_ADAPTER = TypeAdapter(list[SeedQuestion] | dict[str, SeedQuestion])


def parse_seed_questions(raw: str | bytes, path: Path) -> list[Question]:
    """Validate a seed document and convert it to domain entities.

    Args:
        raw: The JSON document.
        path: Where the document came from, used in error messages.

    Raises:
        SeedDataError: The document is not valid JSON, does not match
            the question schema, or contains an empty id.
    """
    try:
        parsed: Any = _SEED_ADAPTER.validate_json(raw)
    except ValidationError as exc:
        raise SeedDataError(path, str(exc)) from exc

    entries = list(parsed.values()) if isinstance(parsed, dict) else parsed
    try:
        return [
            Question.create(
                id=entry.id,
                title=entry.title,
                content=entry.content,
                tags=entry.tags,
            )
            for entry in entries
        ]
    except InvalidQuestionError as exc:
        raise SeedDataError(path, exc.message) from exc


def load_seed_questions(path: Path) -> list[Question]:
    """Read and parse the seed document at ``path``.

    Raises:
        SeedDataError: The file is missing, unreadable or invalid.
    """
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise SeedDataError(path, exc.strerror or str(exc)) from exc

    questions = parse_seed_questions(raw, path)
    logger.info("Loaded %d seed questions from %s", len(questions), path)
    return questions

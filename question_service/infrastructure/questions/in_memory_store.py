"""
Adapter: in-memory question store.

Implements the QuestionRepository port with a dict guarded by an
AsyncReadWriteLock. Contents live for the lifetime of the process.
"""

import logging
from typing import Iterable, Optional

from question_service.domain.questions.entities import Question, QuestionId
from question_service.domain.questions.ports import QuestionRepository
from question_service.infrastructure.questions.rwlock import AsyncReadWriteLock

logger = logging.getLogger(__name__)


class InMemoryQuestionStore(QuestionRepository):
    """Concurrent id -> Question mapping.

    One instance is created per application and shared by every request
    through the dependency layer.
    """

    def __init__(self, questions: Optional[Iterable[Question]] = None) -> None:
        """Initialize the store.

        Args:
            questions: Optional initial contents. Later duplicates of an
                id overwrite earlier ones.
        """
        self._questions: dict[QuestionId, Question] = {}
        self._lock = AsyncReadWriteLock()
        for question in questions or ():
            self._questions[question.id] = question

    async def get_all(self) -> list[Question]:
        async with self._lock.read():
            return list(self._questions.values())

    async def insert(self, question: Question) -> None:
        async with self._lock.write():
            replaced = question.id in self._questions
            self._questions[question.id] = question
        logger.debug(
            "Stored question %s (%s)",
            question.id,
            "replaced" if replaced else "new",
        )

    async def count(self) -> int:
        async with self._lock.read():
            return len(self._questions)

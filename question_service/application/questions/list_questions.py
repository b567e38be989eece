"""
Use case: List stored questions, optionally windowed.

Input: ListQuestionsQuery (optional Pagination)
Output: list[Question]
Side effects: None (read-only query).
Failure cases: None. Windows past the end of the listing are clamped.
"""

import logging

from question_service.application.questions.dtos import ListQuestionsQuery
from question_service.domain.questions.entities import Pagination, Question
from question_service.domain.questions.ports import QuestionRepository

logger = logging.getLogger(__name__)


def apply_window(questions: list[Question], pagination: Pagination) -> list[Question]:
    """Return the half-open slice [start, min(end, len)) of ``questions``.

    An empty list is returned when start lies at or beyond the clamped end.
    """
    end = min(pagination.end, len(questions))
    if pagination.start >= end:
        return []
    return questions[pagination.start:end]


class ListQuestionsUseCase:
    """Orchestrates reading a store snapshot and windowing it."""

    def __init__(self, question_repo: QuestionRepository) -> None:
        """Initialize the use case.

        Args:
            question_repo: Store to read the snapshot from.
        """
        self._question_repo = question_repo

    async def execute(self, query: ListQuestionsQuery) -> list[Question]:
        """Run the list questions use case.

        Args:
            query: Optional pagination window.

        Returns:
            The full snapshot, or the requested window of it.
        """
        snapshot = await self._question_repo.get_all()

        if query.pagination is None:
            logger.info("Listing all questions: count=%d", len(snapshot))
            return snapshot

        window = apply_window(snapshot, query.pagination)
        logger.info(
            "Listing questions: start=%d, end=%d, total=%d, returned=%d",
            query.pagination.start,
            query.pagination.end,
            len(snapshot),
            len(window),
        )
        return window

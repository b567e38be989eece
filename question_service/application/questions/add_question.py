"""
Use case: Insert or replace a question.

Input: AddQuestionCommand
Output: QuestionId of the stored question
Side effects: Upserts into the question store.
Failure cases: InvalidQuestionError if the id is empty.
"""

import logging

from question_service.application.questions.dtos import AddQuestionCommand
from question_service.domain.questions.entities import Question, QuestionId
from question_service.domain.questions.ports import QuestionRepository

logger = logging.getLogger(__name__)


class AddQuestionUseCase:
    """Orchestrates validating a question payload and storing it."""

    def __init__(self, question_repo: QuestionRepository) -> None:
        self._question_repo = question_repo

    async def execute(self, command: AddQuestionCommand) -> QuestionId:
        """Run the add question use case.

        Args:
            command: The question payload.

        Returns:
            The id under which the question was stored.

        Raises:
            InvalidQuestionError: If the id is empty.
        """
        question = Question.create(
            id=command.id,
            title=command.title,
            content=command.content,
            tags=command.tags,
        )
        await self._question_repo.insert(question)
        logger.info("Question added: id=%s", question.id)
        return question.id

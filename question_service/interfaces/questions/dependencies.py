"""
Dependency injection for the questions bounded context.

The store is created once by the application factory and kept on
``app.state``; each request receives use cases wired to that shared
instance.
"""

from fastapi import Depends, Request

from question_service.application.questions.add_question import AddQuestionUseCase
from question_service.application.questions.list_questions import ListQuestionsUseCase
from question_service.domain.questions.ports import QuestionRepository


def get_question_store(request: Request) -> QuestionRepository:
    """Return the store owned by the running application."""
    return request.app.state.question_store


def get_list_questions_use_case(
    store: QuestionRepository = Depends(get_question_store),
) -> ListQuestionsUseCase:
    """Build ListQuestionsUseCase around the shared store."""
    return ListQuestionsUseCase(question_repo=store)


def get_add_question_use_case(
    store: QuestionRepository = Depends(get_question_store),
) -> AddQuestionUseCase:
    """Build AddQuestionUseCase around the shared store."""
    return AddQuestionUseCase(question_repo=store)

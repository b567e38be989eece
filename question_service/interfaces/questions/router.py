"""
FastAPI router for the questions bounded context.

All routes delegate to use cases. No business logic here.
Body validation is handled by Pydantic schemas, query validation by
the domain pagination extractor. Error mapping is handled by the
centralized error handlers.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from question_service.application.questions.add_question import AddQuestionUseCase
from question_service.application.questions.dtos import (
    AddQuestionCommand,
    ListQuestionsQuery,
)
from question_service.application.questions.list_questions import ListQuestionsUseCase
from question_service.domain.questions.pagination import extract_pagination
from question_service.interfaces.questions.dependencies import (
    get_add_question_use_case,
    get_list_questions_use_case,
)
from question_service.interfaces.questions.schemas import QuestionSchema

router = APIRouter(prefix="/questions", tags=["questions"])

QUESTION_ADDED = "Question added"
ERROR_RESPONSES = {
    416: {"description": "Invalid pagination or question payload"},
    429: {"description": "Rate limit exceeded"},
}


@router.get(
    "",
    response_model=list[QuestionSchema],
    responses=ERROR_RESPONSES,
    summary="List questions",
    description=(
        "Return every stored question, or the half-open window [start, end) "
        "when both start and end query parameters are given."
    ),
)
async def get_questions(
    request: Request,
    use_case: ListQuestionsUseCase = Depends(get_list_questions_use_case),
) -> list[QuestionSchema]:
    """List questions, optionally windowed by start/end."""
    params = dict(request.query_params)
    pagination = extract_pagination(params) if params else None
    questions = await use_case.execute(ListQuestionsQuery(pagination=pagination))
    return [QuestionSchema.from_entity(q) for q in questions]


@router.post(
    "",
    response_class=PlainTextResponse,
    responses=ERROR_RESPONSES,
    summary="Add a question",
    description="Insert a question, replacing any stored question with the same id.",
)
async def add_question(
    payload: QuestionSchema,
    use_case: AddQuestionUseCase = Depends(get_add_question_use_case),
) -> PlainTextResponse:
    """Upsert a question by id."""
    command = AddQuestionCommand(
        id=payload.id,
        title=payload.title,
        content=payload.content,
        tags=tuple(payload.tags) if payload.tags is not None else None,
    )
    await use_case.execute(command)
    return PlainTextResponse(QUESTION_ADDED)

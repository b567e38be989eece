"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
Returns application status, version and the current store size.
"""

from fastapi import APIRouter, Depends, Request

from question_service.domain.questions.ports import QuestionRepository
from question_service.interfaces.questions.dependencies import get_question_store
from question_service.interfaces.questions.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status, version and question count.",
)
async def health_check(
    request: Request,
    store: QuestionRepository = Depends(get_question_store),
) -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(
        status="ok",
        version=request.app.version,
        question_count=await store.count(),
    )

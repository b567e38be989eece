"""
Pydantic schemas for question API request/response validation.

These schemas define the JSON wire format of a question.
No business logic belongs here; id emptiness is checked by the domain.
"""

from typing import Optional

from pydantic import BaseModel, Field

from question_service.domain.questions.entities import Question


class QuestionSchema(BaseModel):
    """Wire representation of a question, used for both request and response.

    Attributes:
        id: Question identifier as a plain string.
        title: Question title.
        content: Question body.
        tags: Optional ordered labels; null when absent.
    """

    id: str = Field(..., description="Unique question identifier")
    title: str = Field(..., description="Question title")
    content: str = Field(..., description="Question body")
    tags: Optional[list[str]] = Field(default=None, description="Optional labels")

    @classmethod
    def from_entity(cls, question: Question) -> "QuestionSchema":
        return cls(
            id=str(question.id),
            title=question.title,
            content=question.content,
            tags=list(question.tags) if question.tags is not None else None,
        )


class HealthResponse(BaseModel):
    """Response schema for the health endpoint."""

    status: str
    version: str
    question_count: int

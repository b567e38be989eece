"""
Data Transfer Objects for the questions application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from typing import Optional

from question_service.domain.questions.entities import Pagination


@dataclass(frozen=True)
class ListQuestionsQuery:
    """Input DTO for listing questions.

    Attributes:
        pagination: Window to return, or None for the whole store.
    """

    pagination: Optional[Pagination] = None


@dataclass(frozen=True)
class AddQuestionCommand:
    """Input DTO for inserting or replacing a question.

    Attributes:
        id: Question identifier. Must not be empty.
        title: Question title.
        content: Question body.
        tags: Optional ordered labels.
    """

    id: str
    title: str
    content: str
    tags: Optional[tuple[str, ...]] = None

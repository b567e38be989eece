"""
Domain entities for the questions bounded context.

Entities are immutable value objects. They contain no framework
imports and no IO operations.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from question_service.domain.questions.errors import InvalidQuestionError


@dataclass(frozen=True)
class QuestionId:
    """Non-empty string identifier of a question.

    Equality and hashing use the wrapped string, so two ids built from
    the same text address the same store slot.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise InvalidQuestionError("id must be a string")
        if not self.value:
            raise InvalidQuestionError("id must not be empty")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Question:
    """A single FAQ-style entry.

    Attributes:
        id: Unique identifier.
        title: Short question title.
        content: Question body.
        tags: Optional ordered labels. None when the question has no tags.
    """

    id: QuestionId
    title: str
    content: str
    tags: Optional[tuple[str, ...]] = None

    @classmethod
    def create(
        cls,
        id: str,
        title: str,
        content: str,
        tags: Optional[Iterable[str]] = None,
    ) -> "Question":
        """Build a Question from primitive values, validating the id."""
        return cls(
            id=QuestionId(id),
            title=title,
            content=content,
            tags=tuple(tags) if tags is not None else None,
        )


@dataclass(frozen=True)
class Pagination:
    """Half-open window [start, end) over a listing.

    Both bounds are non-negative and start <= end.
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < 0:
            raise ValueError("Pagination bounds must be non-negative")
        if self.start > self.end:
            raise ValueError("Pagination start must not exceed end")

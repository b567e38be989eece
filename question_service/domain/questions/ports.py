"""
Port interfaces (ABCs) for the questions bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
"""

from abc import ABC, abstractmethod

from question_service.domain.questions.entities import Question


class QuestionRepository(ABC):
    """Port for the authoritative collection of questions.

    Implementations must be safe under concurrent access: any number of
    readers may proceed together, a writer excludes everyone else.
    """

    @abstractmethod
    async def get_all(self) -> list[Question]:
        """Return a snapshot of every stored question."""
        raise NotImplementedError

    @abstractmethod
    async def insert(self, question: Question) -> None:
        """Upsert a question by id. An existing record is overwritten."""
        raise NotImplementedError

    @abstractmethod
    async def count(self) -> int:
        """Return the number of stored questions."""
        raise NotImplementedError

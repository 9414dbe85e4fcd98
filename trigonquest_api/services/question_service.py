"""
Question service for business logic.

Implements the Service pattern for question-related operations.
"""

from typing import List

from trigonquest.schema import Question

from ..repositories.question_repository import QuestionRepositoryInterface
from ..core.logging import get_logger

logger = get_logger(__name__)


class QuestionService:
    """
    Service for question operations.

    Read-only access to the question source.
    """

    def __init__(self, repository: QuestionRepositoryInterface):
        self.repository = repository

    async def list_questions(self) -> List[Question]:
        """List all available questions"""
        questions = await self.repository.list()

        logger.info(
            "Questions listed",
            extra_data={"count": len(questions)}
        )

        return questions

    async def get_question(self, question_id: str) -> Question:
        """
        Get a question by ID.

        Raises:
            QuestionNotFoundError: If question doesn't exist
        """
        logger.debug(
            "Fetching question",
            extra_data={"question_id": question_id}
        )

        return await self.repository.get(question_id)

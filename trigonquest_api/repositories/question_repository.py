"""
Question repository for data access.

Implements the Repository pattern for question retrieval. Questions are
immutable reference data: they are loaded once (from a YAML question bank)
and only read afterwards.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, List, Optional

import yaml
from pydantic import ValidationError

from trigonquest.schema import Question

from ..core.errors import QuestionNotFoundError, QuestionBankError
from ..core.logging import get_logger
from ..core.config import settings

logger = get_logger(__name__)


class QuestionRepositoryInterface(ABC):
    """Abstract interface for question repository"""

    @abstractmethod
    async def get(self, question_id: str) -> Question:
        """Get question by ID"""
        pass

    @abstractmethod
    async def list(self) -> List[Question]:
        """List all questions in presentation order"""
        pass

    @abstractmethod
    async def exists(self, question_id: str) -> bool:
        """Check if question exists"""
        pass


class InMemoryQuestionRepository(QuestionRepositoryInterface):
    """
    In-memory question repository.

    Keeps questions in the order they were supplied.
    """

    def __init__(self, questions: Iterable[Question] = ()):
        self._questions: dict[str, Question] = {}

        for question in questions:
            if question.id in self._questions:
                raise QuestionBankError("<memory>", f"duplicate question id '{question.id}'")
            self._questions[question.id] = question

        logger.info(
            "Initialized InMemoryQuestionRepository",
            extra_data={"count": len(self._questions)}
        )

    @classmethod
    def from_yaml(cls, path: str | Path) -> "InMemoryQuestionRepository":
        """
        Load a question bank from a YAML file.

        The file holds a top-level ``questions`` list using the wire (camelCase)
        field names.

        Raises:
            QuestionBankError: If the file is missing, unparsable or invalid
        """
        path = Path(path)

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise QuestionBankError(str(path), str(e)) from e

        if not isinstance(data, dict) or not isinstance(data.get("questions"), list):
            raise QuestionBankError(str(path), "expected a top-level 'questions' list")

        try:
            questions = [Question.model_validate(item) for item in data["questions"]]
        except ValidationError as e:
            raise QuestionBankError(str(path), str(e)) from e

        logger.info(
            "Loaded question bank",
            extra_data={"path": str(path), "count": len(questions)}
        )

        return cls(questions)

    async def get(self, question_id: str) -> Question:
        """Get question by ID"""
        question = self._questions.get(question_id)

        if question is None:
            logger.warning(
                "Question not found",
                extra_data={"question_id": question_id}
            )
            raise QuestionNotFoundError(question_id)

        return question

    async def list(self) -> List[Question]:
        """List all questions"""
        return list(self._questions.values())

    async def exists(self, question_id: str) -> bool:
        """Check if question exists"""
        return question_id in self._questions


# Singleton instance
_question_repository: Optional[InMemoryQuestionRepository] = None


def get_question_repository() -> InMemoryQuestionRepository:
    """Get question repository instance (singleton)"""
    global _question_repository

    if _question_repository is None:
        _question_repository = InMemoryQuestionRepository.from_yaml(settings.QUESTIONS_FILE)

    return _question_repository

"""
Validation service for answer submissions.

Resolves the question an answer refers to and hands both to the validators.
The caller always gets a ValidationResult back: unknown question ids and
unsupported question types are reported in the result, not raised.
"""

from typing import Optional

from trigonquest.schema import Question, UserAnswer, ValidationResult
from trigonquest.validation import ValidatorRegistry, default_registry

from ..repositories.question_repository import QuestionRepositoryInterface
from ..core.errors import QuestionNotFoundError
from ..core.logging import get_logger
from ..core.config import settings

logger = get_logger(__name__)


class ValidationService:
    """
    Service for answer validation.

    Holds no per-request state, so one instance can serve concurrent requests.
    """

    def __init__(
        self,
        repository: QuestionRepositoryInterface,
        registry: Optional[ValidatorRegistry] = None,
        tolerance: Optional[float] = None,
        vertex_threshold: Optional[float] = None,
    ):
        self.repository = repository
        self.registry = registry or default_registry()
        self.options = {
            "tolerance": tolerance if tolerance is not None else settings.BISECTOR_TOLERANCE_DEGREES,
            "vertex_threshold": vertex_threshold if vertex_threshold is not None else settings.VERTEX_THRESHOLD,
        }

    async def validate_answer(self, answer: UserAnswer) -> ValidationResult:
        """
        Validate a submitted answer.

        Args:
            answer: The user's construction

        Returns:
            ValidationResult for the answer
        """
        logger.info(
            "Validating answer",
            extra_data={
                "question_id": answer.question_id,
                "num_lines": len(answer.drawn_lines),
                "num_points": len(answer.drawn_points),
            }
        )

        question: Optional[Question]
        try:
            question = await self.repository.get(answer.question_id)
        except QuestionNotFoundError:
            question = None

        result = self.registry.validate_answer(answer, question, **self.options)

        logger.info(
            "Validation completed",
            extra_data={
                "question_id": answer.question_id,
                "is_correct": result.is_correct,
                "partial_credit": result.partial_credit,
            }
        )

        return result

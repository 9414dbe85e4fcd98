"""
Construction validator framework.

Provides the abstract base class for question-type validators and a registry
for type-based dispatch. Validators are pure: they read an answer and a
question and return a fresh :class:`ValidationResult`. They never raise for
well-typed input; configuration defects in a question come back as an
incorrect result with a diagnostic message.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from ..schema import Question, QuestionType, UserAnswer, ValidationResult

logger = logging.getLogger(__name__)

QUESTION_NOT_FOUND_MESSAGE = "Question not found"
UNKNOWN_TYPE_MESSAGE = "Unknown question type"


class ConstructionValidator(BaseModel, ABC):
    """
    Abstract base class for construction validators.

    Each validator scores answers for one question type.

    Subclasses must implement:
    - evaluate(): Core scoring logic
    - question_type: Class variable for type identification
    """

    model_config = ConfigDict(validate_assignment=True)

    question_type: ClassVar[QuestionType]

    tolerance: float = Field(default=15.0, gt=0, description="Full-credit angular tolerance in degrees")

    @abstractmethod
    def evaluate(self, answer: UserAnswer, question: Question) -> ValidationResult:
        """
        Score an answer against its question.

        Args:
            answer: Submitted construction
            question: The question being answered

        Returns:
            ValidationResult with correctness, message and optional hint
        """

    @staticmethod
    def reject(message: str, hint: Optional[str] = None) -> ValidationResult:
        """Incorrect result without partial credit."""
        return ValidationResult(is_correct=False, message=message, partial_credit=False, hint=hint)


class ValidatorRegistry(BaseModel):
    """
    Registry for construction validators.

    Maps question types to validator classes.
    """

    _validators: dict[QuestionType, type[ConstructionValidator]] = PrivateAttr(default_factory=dict)

    def register(self, question_type: QuestionType, validator_class: type[ConstructionValidator]) -> None:
        """
        Register a validator for a question type.

        Raises:
            TypeError: If validator_class is not a ConstructionValidator subclass
        """
        if not (isinstance(validator_class, type) and issubclass(validator_class, ConstructionValidator)):
            raise TypeError(f"validator_class must be a subclass of ConstructionValidator, got {validator_class}")
        self._validators[QuestionType(question_type)] = validator_class

    def get_validator(self, question_type: QuestionType) -> Optional[type[ConstructionValidator]]:
        return self._validators.get(question_type)

    def create_validator(self, question_type: QuestionType, **options: Any) -> Optional[ConstructionValidator]:
        """
        Create a validator instance for a question type.

        Returns:
            Validator instance, or None if the type is not supported
        """
        validator_class = self.get_validator(question_type)
        if validator_class is None:
            return None
        return validator_class(**options)

    def supported_types(self) -> list[QuestionType]:
        return list(self._validators)

    def validate_answer(
        self,
        answer: UserAnswer,
        question: Optional[Question],
        **options: Any,
    ) -> ValidationResult:
        """
        Validate an answer, dispatching on the question type.

        Args:
            answer: Submitted construction
            question: The question, or None if its id did not resolve
            **options: Validator options (e.g. tolerance)

        Returns:
            ValidationResult; never raises for missing questions or
            unsupported question types
        """
        if question is None:
            logger.debug("No question for answer %s", answer.question_id)
            return ConstructionValidator.reject(QUESTION_NOT_FOUND_MESSAGE)

        validator = self.create_validator(question.type, **options)
        if validator is None:
            logger.debug("No validator for question type %s", question.type)
            return ConstructionValidator.reject(UNKNOWN_TYPE_MESSAGE)

        return validator.evaluate(answer, question)

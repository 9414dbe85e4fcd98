"""
Answer validation entry point.

``validate`` is the submit-answer contract: it always returns a well-formed
:class:`ValidationResult` and holds no state between calls, so it is safe to
call concurrently.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Optional

from ..schema import Question, QuestionType, UserAnswer, ValidationResult
from .angle_bisector import AngleBisectorValidator
from .validator import ValidatorRegistry


@lru_cache()
def default_registry() -> ValidatorRegistry:
    """Registry with every implemented question type (cached)"""
    registry = ValidatorRegistry()
    registry.register(QuestionType.ANGLE_BISECTOR, AngleBisectorValidator)
    return registry


def validate(
    answer: UserAnswer,
    question: Optional[Question],
    registry: Optional[ValidatorRegistry] = None,
    **options: Any,
) -> ValidationResult:
    """
    Validate a submitted construction.

    Args:
        answer: The user's answer
        question: Question the answer refers to (None if it was not found)
        registry: Validator registry (defaults to all built-in validators)
        **options: Validator options such as ``tolerance`` or ``vertex_threshold``

    Returns:
        ValidationResult for the answer
    """
    registry = registry or default_registry()
    return registry.validate_answer(answer, question, **options)

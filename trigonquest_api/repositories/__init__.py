"""Repositories package"""

from .question_repository import (
    QuestionRepositoryInterface,
    InMemoryQuestionRepository,
    get_question_repository,
)

__all__ = [
    "QuestionRepositoryInterface",
    "InMemoryQuestionRepository",
    "get_question_repository",
]

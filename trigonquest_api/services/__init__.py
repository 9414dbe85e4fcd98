"""Services package"""

from .question_service import QuestionService
from .validation_service import ValidationService

__all__ = [
    "QuestionService",
    "ValidationService",
]

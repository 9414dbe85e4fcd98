"""Core utilities package"""

from .config import settings, get_settings
from .logging import setup_logging, get_logger
from .errors import (
    TrigonQuestError,
    QuestionNotFoundError,
    InvalidAnswerError,
    QuestionBankError,
    register_error_handlers,
)

__all__ = [
    "settings",
    "get_settings",
    "setup_logging",
    "get_logger",
    "TrigonQuestError",
    "QuestionNotFoundError",
    "InvalidAnswerError",
    "QuestionBankError",
    "register_error_handlers",
]

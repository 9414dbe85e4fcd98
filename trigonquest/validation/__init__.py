"""
Construction answer validation.

Provides:
- ConstructionValidator base class and ValidatorRegistry dispatch
- AngleBisectorValidator for angle_bisector questions
- validate(): the stateless submit-answer entry point
"""

from .angle_bisector import AngleBisectorValidator
from .dispatch import default_registry, validate
from .validator import (
    QUESTION_NOT_FOUND_MESSAGE,
    UNKNOWN_TYPE_MESSAGE,
    ConstructionValidator,
    ValidatorRegistry,
)

__all__ = [
    "AngleBisectorValidator",
    "ConstructionValidator",
    "ValidatorRegistry",
    "default_registry",
    "validate",
    "QUESTION_NOT_FOUND_MESSAGE",
    "UNKNOWN_TYPE_MESSAGE",
]

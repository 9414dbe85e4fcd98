"""
Shared data model for construction questions.

These models are exchanged between the drawing engine, the validators and the
HTTP service. Python attributes are snake_case; the wire format is camelCase
(``isUserDrawn``, ``givenAngles``, ``questionId`` ...) and both spellings are
accepted on input.

All coordinates are canvas pixel coordinates. Nothing in this package rescales
or converts them.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SchemaModel(BaseModel):
    """Base model with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Point(SchemaModel):
    """Point in canvas space. Immutable once created."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    x: float
    y: float


class Line(SchemaModel):
    """
    Directed segment from ``start`` to ``end``.

    ``is_user_drawn`` is False for given/reference geometry and True for
    user or solution geometry.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    start: Point
    end: Point
    is_user_drawn: bool = False


class Angle(SchemaModel):
    """
    Angle formed by the rays ``vertex -> point1`` and ``vertex -> point2``.

    When ``measure`` (degrees) is set it is authoritative: the rays may be
    drawn at a different literal angle than the one the question talks about.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    point1: Point
    vertex: Point
    point2: Point
    measure: Optional[float] = Field(None, description="Angle measure in degrees")


class QuestionType(str, Enum):
    """Construction question types"""
    ANGLE_BISECTOR = "angle_bisector"
    ANGLE_MEASUREMENT = "angle_measurement"
    COMPLEMENTARY_ANGLES = "complementary_angles"
    SUPPLEMENTARY_ANGLES = "supplementary_angles"


class ToolMode(str, Enum):
    """Drawing tools available on the canvas"""
    POINT = "point"
    LINE = "line"
    ANGLE_BISECTOR = "angle_bisector"
    MEASURE = "measure"


class CorrectAnswer(SchemaModel):
    """Reference solution for a question"""
    bisector_line: Optional[Line] = None
    angle_measure: Optional[float] = None
    points: Optional[list[Point]] = None


class Question(SchemaModel):
    """A construction exercise and its reference geometry"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str = Field(..., description="Question identifier")
    type: QuestionType
    title: str
    description: str
    instructions: list[str] = Field(default_factory=list)
    given_points: list[Point] = Field(default_factory=list)
    given_lines: list[Line] = Field(default_factory=list)
    given_angles: list[Angle] = Field(default_factory=list)
    correct_answer: CorrectAnswer = Field(default_factory=CorrectAnswer)
    hint: Optional[str] = None


class UserAnswer(SchemaModel):
    """Snapshot of a user's construction submitted for one attempt"""
    question_id: str
    drawn_lines: list[Line]
    drawn_points: list[Point]
    angle_measure: Optional[float] = None


class ValidationResult(SchemaModel):
    """Verdict for a single answer submission"""
    is_correct: bool
    message: str
    partial_credit: bool = False
    hint: Optional[str] = None


__all__ = [
    "Point",
    "Line",
    "Angle",
    "QuestionType",
    "ToolMode",
    "CorrectAnswer",
    "Question",
    "UserAnswer",
    "ValidationResult",
]

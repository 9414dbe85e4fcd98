"""
Angle bisector validator.

Scores the most recent line of a construction by comparing its direction from
the angle's vertex with the exact bisector direction. All angles are in
degrees, normalized into ``[0, 360)`` before comparison.
"""

from __future__ import annotations

import logging
from typing import ClassVar

from pydantic import Field

from ..geometry.angles import AngleUnit, angular_distance, clamp_signed, direction, is_point_near, normalize_angle
from ..schema import Angle, Line, Point, Question, QuestionType, UserAnswer, ValidationResult
from .validator import ConstructionValidator

logger = logging.getLogger(__name__)

NO_LINES_MESSAGE = (
    "You haven't drawn any lines yet. Try drawing a line from the vertex that splits the angle in half."
)
NO_CORRECT_ANSWER_MESSAGE = "No correct answer defined for this question"
NO_VERTEX_MESSAGE = "No vertex found in question"
NOT_AT_VERTEX_MESSAGE = "The angle bisector must start from the vertex of the angle. Try again!"
NOT_AT_VERTEX_HINT = "Make sure your line starts at the point where the two given lines meet."
CORRECT_MESSAGE = (
    "Perfect! You've correctly drawn the angle bisector. The line divides the angle into two equal parts."
)
CLOSE_MESSAGE = "You're close! Your bisector is slightly off. Try to make the two angles more equal."
CLOSE_HINT = "Aim to split the angle exactly in half. The two resulting angles should be equal."
INCORRECT_MESSAGE = (
    "Not quite right. Remember, the angle bisector should divide the angle into two equal parts."
)


class AngleBisectorValidator(ConstructionValidator):
    """
    Validator for ``angle_bisector`` questions.

    Only the first given angle is scored and only the last drawn line counts;
    earlier lines stay on the canvas but are ignored.

    Classification by angular difference ``d`` from the expected bisector:
    - ``d <= tolerance``: correct
    - ``d <= 2 * tolerance``: incorrect with partial credit
    - otherwise: incorrect, with the question's own hint
    """

    question_type: ClassVar[QuestionType] = QuestionType.ANGLE_BISECTOR

    vertex_threshold: float = Field(
        default=20.0, ge=0, description="How close a line endpoint must be to the vertex"
    )

    def evaluate(self, answer: UserAnswer, question: Question) -> ValidationResult:
        if not answer.drawn_lines:
            return self.reject(NO_LINES_MESSAGE)

        if question.correct_answer.bisector_line is None:
            logger.warning("Question %s has no bisector line", question.id)
            return self.reject(NO_CORRECT_ANSWER_MESSAGE)

        if not question.given_angles:
            logger.warning("Question %s has no given angle", question.id)
            return self.reject(NO_VERTEX_MESSAGE)

        angle = question.given_angles[0]
        vertex = angle.vertex
        user_line = answer.drawn_lines[-1]

        if not self.starts_at_vertex(user_line, vertex):
            return self.reject(NOT_AT_VERTEX_MESSAGE, hint=NOT_AT_VERTEX_HINT)

        difference = angular_distance(
            self.line_direction(user_line, vertex),
            self.expected_bisector_direction(angle),
            AngleUnit.DEGREES,
        )
        logger.debug("Question %s: bisector off by %.2f degrees", question.id, difference)

        if difference <= self.tolerance:
            return ValidationResult(is_correct=True, message=CORRECT_MESSAGE, partial_credit=False)

        if difference <= self.tolerance * 2:
            return ValidationResult(
                is_correct=False,
                message=CLOSE_MESSAGE,
                partial_credit=True,
                hint=CLOSE_HINT,
            )

        return self.reject(INCORRECT_MESSAGE, hint=question.hint)

    def starts_at_vertex(self, line: Line, vertex: Point) -> bool:
        return is_point_near(line.start, vertex, self.vertex_threshold) or is_point_near(
            line.end, vertex, self.vertex_threshold
        )

    def line_direction(self, line: Line, vertex: Point) -> float:
        """
        Direction of a drawn line as seen from the vertex, in degrees.

        Uses the endpoint away from the vertex: ``end`` when ``start`` is at
        the vertex (including when both are), otherwise ``start``.
        """
        far_end = line.end if is_point_near(line.start, vertex, self.vertex_threshold) else line.start
        return direction(far_end, vertex, AngleUnit.DEGREES)

    @staticmethod
    def expected_bisector_direction(angle: Angle) -> float:
        """
        Exact bisector direction in degrees, in ``[0, 360)``.

        A given ``measure`` overrides the angle between the drawn rays. Without
        one, the ray difference is clamped once, so rays at 180 and 0 bisect
        to 90.
        """
        unit = AngleUnit.DEGREES
        ray1 = direction(angle.point1, angle.vertex, unit)

        if angle.measure is not None:
            expected = ray1 + angle.measure / 2
        else:
            ray2 = direction(angle.point2, angle.vertex, unit)
            expected = ray1 + clamp_signed(ray2 - ray1, unit) / 2

        return normalize_angle(expected, unit)

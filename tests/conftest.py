"""
Shared pytest fixtures for the construction core.

Provides:
- The three reference questions (measured right angle, unmeasured angle,
  measured acute angle)
- Helpers for building points along a direction
"""

import math

import pytest

from trigonquest.schema import Angle, CorrectAnswer, Line, Point, Question, QuestionType, UserAnswer


def ray_point(vertex: Point, degrees: float, length: float = 100.0) -> Point:
    """Point at ``length`` from ``vertex`` in canvas direction ``degrees``."""
    radians = math.radians(degrees)
    return Point(x=vertex.x + length * math.cos(radians), y=vertex.y + length * math.sin(radians))


def answer_with(question: Question, *lines: Line, points: tuple = ()) -> UserAnswer:
    return UserAnswer(question_id=question.id, drawn_lines=list(lines), drawn_points=list(points))


def bisector_question(
    question_id: str,
    point1: Point,
    vertex: Point,
    point2: Point,
    measure: float | None = None,
    bisector_end: Point | None = None,
    hint: str | None = None,
) -> Question:
    return Question(
        id=question_id,
        type=QuestionType.ANGLE_BISECTOR,
        title=f"Question {question_id}",
        description="Draw the angle bisector",
        instructions=["Draw a line from the vertex that splits the angle in half"],
        given_points=[point1, vertex, point2],
        given_lines=[Line(start=vertex, end=point1), Line(start=vertex, end=point2)],
        given_angles=[Angle(point1=point1, vertex=vertex, point2=point2, measure=measure)],
        correct_answer=CorrectAnswer(
            bisector_line=Line(start=vertex, end=bisector_end, is_user_drawn=True) if bisector_end else None
        ),
        hint=hint,
    )


@pytest.fixture
def q1() -> Question:
    """Right angle, rays towards 270 and 0 degrees, measure 90"""
    return bisector_question(
        "q1",
        Point(x=400, y=100),
        Point(x=400, y=300),
        Point(x=600, y=300),
        measure=90,
        bisector_end=Point(x=541, y=159),
        hint="The angle bisector divides the 90° angle into two 45° angles.",
    )


@pytest.fixture
def q2() -> Question:
    """Unmeasured angle, rays towards 225 and ~303.69 degrees"""
    return bisector_question(
        "q2",
        Point(x=300, y=200),
        Point(x=400, y=300),
        Point(x=500, y=150),
        bisector_end=Point(x=400, y=175),
        hint="Look at the angles formed by each ray from the vertex.",
    )


@pytest.fixture
def q3() -> Question:
    """Acute angle whose measure (60) differs from the drawn rays"""
    return bisector_question(
        "q3",
        Point(x=350, y=250),
        Point(x=400, y=350),
        Point(x=550, y=250),
        measure=60,
        bisector_end=Point(x=450, y=250),
    )


@pytest.fixture(name="ray_point")
def ray_point_fixture():
    """Factory for points along a canvas direction."""
    return ray_point


@pytest.fixture(name="answer_with")
def answer_with_fixture():
    """Factory for answers to a question."""
    return answer_with


@pytest.fixture(name="bisector_question")
def bisector_question_fixture():
    """Factory for angle_bisector questions."""
    return bisector_question

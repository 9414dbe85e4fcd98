"""
Pytest configuration and fixtures.

Provides shared fixtures for testing.
"""

import pytest
from pathlib import Path

from fastapi.testclient import TestClient

from trigonquest.schema import Angle, CorrectAnswer, Line, Point, Question, QuestionType

from trigonquest_api.main import app
from trigonquest_api.repositories import InMemoryQuestionRepository


@pytest.fixture
def client():
    """FastAPI test client (runs the app lifespan)"""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def right_angle_question() -> Question:
    """90 degree angle opening from straight up (270 deg) towards the right"""
    vertex = Point(x=400, y=300)
    return Question(
        id="right",
        type=QuestionType.ANGLE_BISECTOR,
        title="Right Angle",
        description="Bisect the right angle",
        given_points=[Point(x=400, y=100), vertex, Point(x=600, y=300)],
        given_angles=[
            Angle(point1=Point(x=400, y=100), vertex=vertex, point2=Point(x=600, y=300), measure=90)
        ],
        correct_answer=CorrectAnswer(
            bisector_line=Line(start=vertex, end=Point(x=541, y=159), is_user_drawn=True)
        ),
        hint="Go diagonally from the vertex.",
    )


@pytest.fixture
def measurement_question() -> Question:
    """Question of a type that has no validator"""
    return Question(
        id="measure",
        type=QuestionType.ANGLE_MEASUREMENT,
        title="Measure",
        description="Measure the angle",
    )


@pytest.fixture
def question_repository(right_angle_question, measurement_question) -> InMemoryQuestionRepository:
    """Repository with one gradable and one unsupported question"""
    return InMemoryQuestionRepository([right_angle_question, measurement_question])


@pytest.fixture
def question_bank_file(tmp_path: Path) -> Path:
    """Small YAML question bank"""
    path = tmp_path / "questions.yaml"
    path.write_text("""
questions:
  - id: only
    type: angle_bisector
    title: Only Question
    description: Bisect it
    givenAngles:
      - point1: {x: 0, y: 0}
        vertex: {x: 100, y: 100}
        point2: {x: 200, y: 0}
    correctAnswer:
      bisectorLine:
        start: {x: 100, y: 100}
        end: {x: 100, y: 0}
        isUserDrawn: true
""", encoding="utf-8")
    return path

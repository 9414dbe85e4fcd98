"""Tests for the shared wire models."""

import pytest
from pydantic import ValidationError

from trigonquest.schema import Line, Point, Question, QuestionType, UserAnswer, ValidationResult


class TestAliases:

    def test_dumps_camel_case(self, q1):
        data = q1.model_dump(by_alias=True, exclude_none=True)

        assert set(data) >= {"id", "type", "givenPoints", "givenLines", "givenAngles", "correctAnswer", "hint"}
        assert data["type"] == "angle_bisector"
        assert data["givenLines"][0]["isUserDrawn"] is False
        assert data["correctAnswer"]["bisectorLine"]["isUserDrawn"] is True
        assert data["givenAngles"][0]["measure"] == 90

    def test_accepts_either_spelling(self):
        camel = UserAnswer.model_validate({"questionId": "q1", "drawnLines": [], "drawnPoints": []})
        snake = UserAnswer.model_validate({"question_id": "q1", "drawn_lines": [], "drawn_points": []})
        assert camel == snake

    def test_question_round_trips_through_wire_format(self, q2):
        data = q2.model_dump(mode="json", by_alias=True, exclude_none=True)

        assert "measure" not in data["givenAngles"][0]
        assert Question.model_validate(data) == q2

    def test_validation_result_defaults(self):
        result = ValidationResult(is_correct=True, message="ok")

        assert result.partial_credit is False
        assert result.model_dump(by_alias=True, exclude_none=True) == {
            "isCorrect": True,
            "message": "ok",
            "partialCredit": False,
        }


class TestValidation:

    def test_geometry_is_immutable(self):
        point = Point(x=1, y=2)
        with pytest.raises(ValidationError):
            point.x = 3

    def test_line_defaults_to_given(self):
        line = Line(start=Point(x=0, y=0), end=Point(x=1, y=1))
        assert line.is_user_drawn is False

    @pytest.mark.parametrize("payload", [
        {"drawnLines": [], "drawnPoints": []},
        {"questionId": "q1", "drawnPoints": []},
        {"questionId": "q1", "drawnLines": "nope", "drawnPoints": []},
        {"questionId": "q1", "drawnLines": [{"start": {"x": 0}, "end": {"x": 1, "y": 1}}], "drawnPoints": []},
        {"questionId": "q1", "drawnLines": [], "drawnPoints": [{"x": "left", "y": 0}]},
    ])
    def test_malformed_answers(self, payload):
        with pytest.raises(ValidationError):
            UserAnswer.model_validate(payload)

    def test_unknown_question_type(self, q1):
        data = q1.model_dump(by_alias=True)
        data["type"] = "angle_trisector"
        with pytest.raises(ValidationError):
            Question.model_validate(data)

    def test_question_type_values(self):
        assert QuestionType("complementary_angles") is QuestionType.COMPLEMENTARY_ANGLES

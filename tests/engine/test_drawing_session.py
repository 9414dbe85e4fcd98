"""Tests for the pointer-driven drawing session."""

import math

import pytest
from pydantic import ValidationError

from trigonquest.engine import DrawingSession
from trigonquest.geometry.angles import direction, distance
from trigonquest.schema import Line, Point, ToolMode

VERTEX = Point(x=400, y=300)


@pytest.fixture
def session(q1):
    return DrawingSession.from_question(q1)


@pytest.fixture
def bisector_session(session):
    session.select_tool(ToolMode.ANGLE_BISECTOR)
    return session


class TestFromQuestion:

    def test_copies_given_geometry(self, q1, session):
        assert session.given_points == q1.given_points
        assert session.given_angles == q1.given_angles
        assert session.active_tool is ToolMode.LINE
        assert not session.has_drawing

    def test_tunable_defaults(self, session):
        assert session.grid_size == 20
        assert session.snap_threshold == 15
        assert session.bisector_snap_tolerance == 0.15
        assert session.preview_length == 200
        assert set(DrawingSession.model_fields) == {
            "given_points", "given_lines", "given_angles", "user_lines", "user_points",
            "active_tool", "show_grid", "disabled", "current_point", "selected_angle",
            "preview_line", "hovered_point", "grid_size", "snap_threshold",
            "bisector_snap_tolerance", "preview_length",
        }

    def test_options_are_validated(self, q1):
        with pytest.raises(ValidationError):
            DrawingSession.from_question(q1, grid_size=0)


class TestPointTool:

    def test_places_point(self):
        session = DrawingSession(active_tool=ToolMode.POINT)

        placed = session.click(Point(x=10, y=10))

        assert placed == Point(x=10, y=10)
        assert session.user_points == [Point(x=10, y=10)]

    def test_snaps_to_existing_user_point(self):
        session = DrawingSession(active_tool=ToolMode.POINT)
        session.click(Point(x=10, y=10))

        assert session.click(Point(x=14, y=13)) == Point(x=10, y=10)

    def test_snaps_to_grid_when_shown(self):
        session = DrawingSession(active_tool=ToolMode.POINT)
        assert session.toggle_grid() is True

        assert session.click(Point(x=31, y=49)) == Point(x=40, y=40)


class TestLineTool:

    def test_first_click_sets_anchor(self, session):
        assert session.click(Point(x=100, y=100)) is None
        assert session.current_point == Point(x=100, y=100)
        assert session.user_lines == []

    def test_preview_follows_pointer(self, session):
        session.click(Point(x=100, y=100))

        preview = session.pointer_move(Point(x=200, y=150))

        assert preview == Line(start=Point(x=100, y=100), end=Point(x=200, y=150), is_user_drawn=True)
        assert session.preview_line == preview

    def test_no_preview_without_anchor(self, session):
        assert session.pointer_move(Point(x=200, y=150)) is None

    def test_second_click_emits_line(self, session):
        session.click(Point(x=100, y=100))
        session.pointer_move(Point(x=200, y=150))

        line = session.click(Point(x=200, y=150))

        assert line == Line(start=Point(x=100, y=100), end=Point(x=200, y=150), is_user_drawn=True)
        assert session.user_lines == [line]
        assert session.current_point is None
        assert session.preview_line is None

    def test_anchor_snaps_to_given_point(self, session):
        session.click(Point(x=395, y=298))
        assert session.current_point == VERTEX


class TestBisectorTool:

    def test_hover_near_vertex_previews_exact_bisector(self, bisector_session):
        preview = bisector_session.pointer_move(Point(x=405, y=305))

        assert preview.start == VERTEX
        assert preview.is_user_drawn
        assert preview.end.x == pytest.approx(400 + 200 / math.sqrt(2))
        assert preview.end.y == pytest.approx(300 - 200 / math.sqrt(2))

    def test_hover_away_from_vertex_clears_preview(self, bisector_session):
        bisector_session.pointer_move(Point(x=405, y=305))
        assert bisector_session.pointer_move(Point(x=100, y=500)) is None

    def test_click_away_from_vertex_does_nothing(self, bisector_session):
        assert bisector_session.click(Point(x=100, y=500)) is None
        assert bisector_session.current_point is None
        assert bisector_session.selected_angle is None

    def test_click_near_vertex_locks_angle(self, q1, bisector_session):
        assert bisector_session.click(Point(x=402, y=298)) is None
        assert bisector_session.current_point == VERTEX
        assert bisector_session.selected_angle == q1.given_angles[0]

    def test_locked_preview_is_magnetic(self, bisector_session, ray_point):
        bisector_session.click(VERTEX)

        preview = bisector_session.pointer_move(ray_point(VERTEX, 320, 100))

        assert preview.start == VERTEX
        assert direction(preview.end, VERTEX) == pytest.approx(315)
        assert distance(preview.end, VERTEX) == pytest.approx(100)

    def test_second_click_draws_snapped_bisector(self, bisector_session, ray_point):
        bisector_session.click(VERTEX)

        line = bisector_session.click(ray_point(VERTEX, 320, 100))

        assert line.start == VERTEX
        assert direction(line.end, VERTEX) == pytest.approx(315)
        assert bisector_session.user_lines == [line]
        assert bisector_session.current_point is None
        assert bisector_session.selected_angle is None
        assert bisector_session.preview_line is None

    def test_second_click_off_bisector_keeps_pointer(self, bisector_session, ray_point):
        bisector_session.click(VERTEX)
        pointer = ray_point(VERTEX, 335, 100)

        line = bisector_session.click(pointer)

        assert line.end == pointer

    def test_inert_without_given_angles(self):
        session = DrawingSession(active_tool=ToolMode.ANGLE_BISECTOR, given_points=[VERTEX])

        assert session.click(VERTEX) is None
        assert session.pointer_move(VERTEX) is None
        assert session.current_point is None


class TestHoverAndLeave:

    def test_hover_reports_nearby_point(self, session):
        session.pointer_move(Point(x=598, y=303))
        assert session.hovered_point == Point(x=600, y=300)

    def test_hover_clears_away_from_points(self, session):
        session.pointer_move(Point(x=598, y=303))
        session.pointer_move(Point(x=700, y=500))
        assert session.hovered_point is None

    def test_leave_drops_preview_but_keeps_anchor(self, session):
        session.click(Point(x=100, y=100))
        session.pointer_move(Point(x=598, y=303))

        session.pointer_leave()

        assert session.preview_line is None
        assert session.hovered_point is None
        assert session.current_point == Point(x=100, y=100)


class TestMeasureTool:

    def test_clicks_have_no_effect(self, session):
        session.select_tool(ToolMode.MEASURE)

        assert session.click(VERTEX) is None
        assert session.pointer_move(Point(x=500, y=200)) is None
        assert not session.has_drawing
        assert session.current_point is None


class TestToolbarActions:

    def _draw_point_then_line(self, session):
        session.select_tool(ToolMode.POINT)
        point = session.click(Point(x=50, y=50))
        session.select_tool(ToolMode.LINE)
        session.click(Point(x=100, y=100))
        line = session.click(Point(x=200, y=100))
        return point, line

    def test_undo_removes_lines_before_points(self, session):
        point, line = self._draw_point_then_line(session)

        assert session.undo() == line
        assert session.undo() == point
        assert session.undo() is None

    def test_clear_removes_everything(self, session):
        self._draw_point_then_line(session)

        session.clear()

        assert session.user_lines == []
        assert session.user_points == []

    def test_select_tool_abandons_construction(self, session):
        session.click(Point(x=100, y=100))
        session.pointer_move(Point(x=200, y=200))

        session.select_tool(ToolMode.POINT)

        assert session.active_tool is ToolMode.POINT
        assert session.current_point is None
        assert session.preview_line is None

    def test_deselect_tool(self, session):
        session.select_tool(None)
        assert session.click(Point(x=10, y=10)) is None
        assert not session.has_drawing

    def test_toggle_grid(self, session):
        assert session.toggle_grid() is True
        assert session.toggle_grid() is False


class TestDisabled:

    def test_ignores_input(self, session):
        _, line = TestToolbarActions()._draw_point_then_line(session)
        session.disabled = True

        assert session.click(Point(x=10, y=10)) is None
        assert session.pointer_move(Point(x=20, y=20)) is None
        assert session.undo() is None
        session.clear()

        assert session.user_lines == [line]
        assert len(session.user_points) == 1

    def test_retry_starts_over(self, session):
        TestToolbarActions()._draw_point_then_line(session)
        session.click(Point(x=10, y=10))
        session.disabled = True

        session.retry()

        assert not session.disabled
        assert not session.has_drawing
        assert session.current_point is None


class TestToAnswer:

    def test_snapshot_of_drawing(self, q1, session):
        session.click(VERTEX)
        line = session.click(Point(x=541, y=159))

        answer = session.to_answer(q1.id)
        session.clear()

        assert answer.question_id == "q1"
        assert answer.drawn_lines == [line]
        assert answer.drawn_points == []

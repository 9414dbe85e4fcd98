"""
Drawing session state.

A :class:`DrawingSession` holds everything one canvas needs while a user works
on a question: the given geometry, what the user has drawn so far, the active
tool and the in-progress construction (anchor, selected angle, preview).

Pointer events are delivered one at a time and each handler runs to completion,
so the session needs no locking. Handlers never touch the network or storage;
they only transform geometry and session state.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from ..geometry.bisector import (
    DEFAULT_BISECTOR_SNAP_TOLERANCE,
    DEFAULT_PREVIEW_LENGTH,
    bisector_theoretical_endpoint,
    magnetic_bisector_endpoint,
)
from ..geometry.snapping import (
    DEFAULT_GRID_SIZE,
    DEFAULT_SNAP_THRESHOLD,
    find_hovered_point,
    nearest_angle,
    resolve_pointer_position,
)
from ..schema import Angle, Line, Point, Question, ToolMode, UserAnswer

logger = logging.getLogger(__name__)

Drawn = Union[Point, Line]


class DrawingSession(BaseModel):
    """
    Per-canvas interaction state driven by pointer events.

    Attributes:
        given_points: Reference points from the question (snap targets)
        given_lines: Reference lines from the question
        given_angles: Angles the bisector tool can lock onto
        user_lines: Lines drawn so far, in drawing order
        user_points: Points placed so far, in placement order
        active_tool: Selected tool, or None for no tool
        show_grid: Snap to the grid before snapping to points
        disabled: Ignore pointer input (e.g. after submitting)
        current_point: Anchor of an in-progress line or bisector
        selected_angle: Angle locked by the bisector tool
        preview_line: Dashed preview of the in-progress construction
        hovered_point: Existing point under the pointer
    """

    model_config = ConfigDict(validate_assignment=True)

    given_points: list[Point] = Field(default_factory=list)
    given_lines: list[Line] = Field(default_factory=list)
    given_angles: list[Angle] = Field(default_factory=list)

    user_lines: list[Line] = Field(default_factory=list)
    user_points: list[Point] = Field(default_factory=list)

    active_tool: Optional[ToolMode] = ToolMode.LINE
    show_grid: bool = False
    disabled: bool = False

    current_point: Optional[Point] = None
    selected_angle: Optional[Angle] = None
    preview_line: Optional[Line] = None
    hovered_point: Optional[Point] = None

    grid_size: float = Field(default=DEFAULT_GRID_SIZE, gt=0, description="Grid spacing in canvas units")
    snap_threshold: float = Field(default=DEFAULT_SNAP_THRESHOLD, gt=0, description="Point/vertex snap distance")
    bisector_snap_tolerance: float = Field(
        default=DEFAULT_BISECTOR_SNAP_TOLERANCE, ge=0, description="Magnetic bisector snap, radians"
    )
    preview_length: float = Field(default=DEFAULT_PREVIEW_LENGTH, gt=0, description="Length of the bisector preview")

    @classmethod
    def from_question(cls, question: Question, **options) -> "DrawingSession":
        """Start a fresh session over a question's given geometry."""
        return cls(
            given_points=list(question.given_points),
            given_lines=list(question.given_lines),
            given_angles=list(question.given_angles),
            **options,
        )

    @property
    def snap_candidates(self) -> list[Point]:
        """Snap targets: given points first, then user points."""
        return [*self.given_points, *self.user_points]

    @property
    def has_drawing(self) -> bool:
        return bool(self.user_lines or self.user_points)

    def resolve(self, raw_point: Point) -> Point:
        """Map a raw pointer position to the point the user is pointing at."""
        return resolve_pointer_position(
            raw_point,
            self.snap_candidates,
            show_grid=self.show_grid,
            threshold=self.snap_threshold,
            grid_size=self.grid_size,
        )

    # Pointer events

    def pointer_move(self, raw_point: Point) -> Optional[Line]:
        """
        Update the preview and hover state for a pointer move.

        Args:
            raw_point: Pointer position in canvas coordinates

        Returns:
            The current preview line (None if nothing is previewed)
        """
        if self.disabled:
            return self.preview_line

        point = self.resolve(raw_point)

        if self.active_tool is ToolMode.LINE and self.current_point is not None:
            self.preview_line = Line(start=self.current_point, end=point, is_user_drawn=True)

        elif self.active_tool is ToolMode.ANGLE_BISECTOR and self.given_angles:
            if self.current_point is None:
                angle = self._angle_at(point)
                if angle is not None:
                    self.preview_line = Line(
                        start=angle.vertex,
                        end=bisector_theoretical_endpoint(angle, self.preview_length),
                        is_user_drawn=True,
                    )
                else:
                    self.preview_line = None
            elif self.selected_angle is not None:
                self.preview_line = Line(
                    start=self.current_point,
                    end=self._bisector_end(point),
                    is_user_drawn=True,
                )

        self.hovered_point = find_hovered_point(point, self.snap_candidates, self.snap_threshold)
        return self.preview_line

    def click(self, raw_point: Point) -> Optional[Drawn]:
        """
        Handle a click with the active tool.

        Args:
            raw_point: Click position in canvas coordinates

        Returns:
            The point or line added to the drawing, or None if the click only
            changed the in-progress construction (or did nothing)
        """
        if self.disabled:
            return None

        point = self.resolve(raw_point)

        if self.active_tool is ToolMode.POINT:
            self.user_points.append(point)
            logger.debug("Placed point (%s, %s)", point.x, point.y)
            return point

        if self.active_tool is ToolMode.LINE:
            if self.current_point is None:
                self.current_point = point
                return None

            line = Line(start=self.current_point, end=point, is_user_drawn=True)
            self.user_lines.append(line)
            self.current_point = None
            self.preview_line = None
            logger.debug("Drew line from (%s, %s) to (%s, %s)", line.start.x, line.start.y, line.end.x, line.end.y)
            return line

        if self.active_tool is ToolMode.ANGLE_BISECTOR and self.given_angles:
            if self.current_point is None:
                angle = self._angle_at(point)
                if angle is not None:
                    self.current_point = angle.vertex
                    self.selected_angle = angle
                    logger.debug("Locked angle at vertex (%s, %s)", angle.vertex.x, angle.vertex.y)
                return None

            if self.selected_angle is not None:
                line = Line(start=self.current_point, end=self._bisector_end(point), is_user_drawn=True)
                self.user_lines.append(line)
                self.current_point = None
                self.selected_angle = None
                self.preview_line = None
                logger.debug("Drew bisector to (%s, %s)", line.end.x, line.end.y)
                return line

        # MEASURE has no canvas behavior
        return None

    def pointer_leave(self) -> None:
        """Pointer left the canvas: drop transient preview and hover state."""
        self.preview_line = None
        self.hovered_point = None

    # Toolbar actions

    def select_tool(self, tool: Optional[ToolMode]) -> None:
        """Switch tools, abandoning any in-progress construction."""
        self.active_tool = tool
        self.cancel_construction()

    def toggle_grid(self) -> bool:
        self.show_grid = not self.show_grid
        return self.show_grid

    def cancel_construction(self) -> None:
        self.current_point = None
        self.selected_angle = None
        self.preview_line = None

    def undo(self) -> Optional[Drawn]:
        """
        Remove the most recent line, or the most recent point if no lines remain.

        Returns:
            The removed element, or None if there was nothing to undo
        """
        if self.disabled:
            return None
        if self.user_lines:
            return self.user_lines.pop()
        if self.user_points:
            return self.user_points.pop()
        return None

    def clear(self) -> None:
        """Remove every drawn line and point."""
        if self.disabled:
            return
        self.user_lines.clear()
        self.user_points.clear()

    def retry(self) -> None:
        """Start the same question over: re-enable input and discard the drawing."""
        self.disabled = False
        self.cancel_construction()
        self.clear()

    def to_answer(self, question_id: str) -> UserAnswer:
        """Snapshot the drawing as an answer submission."""
        return UserAnswer(
            question_id=question_id,
            drawn_lines=list(self.user_lines),
            drawn_points=list(self.user_points),
        )

    # Helpers

    def _angle_at(self, point: Point) -> Optional[Angle]:
        """Nearest given angle whose vertex is within snap distance of ``point``."""
        angle, vertex_distance = nearest_angle(point, self.given_angles)
        if angle is not None and vertex_distance < self.snap_threshold:
            return angle
        return None

    def _bisector_end(self, point: Point) -> Point:
        return magnetic_bisector_endpoint(self.selected_angle, point, self.bisector_snap_tolerance)

"""
Pointer snapping.

Turns raw pointer coordinates into the point the user actually means:
grid snap first (when the grid is shown), then snap onto an existing point.
"""

from __future__ import annotations

import math
from typing import Iterable, Optional, Sequence

from ..schema import Angle, Point
from .angles import distance

DEFAULT_GRID_SIZE = 20.0
DEFAULT_SNAP_THRESHOLD = 15.0


def snap_to_grid(point: Point, grid_size: float = DEFAULT_GRID_SIZE) -> Point:
    """
    Round each coordinate to the nearest multiple of ``grid_size``.

    Args:
        point: Raw point
        grid_size: Grid spacing in canvas units (must be positive)

    Returns:
        Snapped point
    """
    if grid_size <= 0:
        raise ValueError("grid_size must be positive")

    return Point(
        x=round_half_up(point.x / grid_size) * grid_size,
        y=round_half_up(point.y / grid_size) * grid_size,
    )


def round_half_up(value: float) -> float:
    # halves go up; round() would send them to the even neighbour
    return math.floor(value + 0.5)


def snap_to_point(
    point: Point,
    candidates: Iterable[Point],
    threshold: float = DEFAULT_SNAP_THRESHOLD,
) -> Point:
    """
    Snap onto the first candidate strictly closer than ``threshold``.

    Candidates are checked in order and the first match wins, even when a
    later candidate is closer.
    """
    for candidate in candidates:
        if distance(candidate, point) < threshold:
            return candidate
    return point


def find_hovered_point(
    point: Point,
    candidates: Iterable[Point],
    threshold: float = DEFAULT_SNAP_THRESHOLD,
) -> Optional[Point]:
    """Return the candidate under the pointer, or None."""
    for candidate in candidates:
        if distance(candidate, point) < threshold:
            return candidate
    return None


def resolve_pointer_position(
    raw_point: Point,
    candidates: Iterable[Point],
    show_grid: bool = False,
    threshold: float = DEFAULT_SNAP_THRESHOLD,
    grid_size: float = DEFAULT_GRID_SIZE,
) -> Point:
    """
    Canonical transform from raw pointer input to a placed point.

    Args:
        raw_point: Pointer position in canvas coordinates
        candidates: Points to snap onto (given points first, then user points)
        show_grid: Apply grid snapping before point snapping
        threshold: Point snapping distance
        grid_size: Grid spacing

    Returns:
        The resolved point
    """
    point = snap_to_grid(raw_point, grid_size) if show_grid else raw_point
    return snap_to_point(point, candidates, threshold)


def nearest_angle(point: Point, angles: Sequence[Angle]) -> tuple[Optional[Angle], float]:
    """
    Find the angle whose vertex is closest to ``point``.

    Plain linear scan; questions carry one or two angles at most. On ties the
    earlier angle wins.

    Returns:
        Tuple of (angle, vertex_distance), or (None, inf) when there are no angles
    """
    best: Optional[Angle] = None
    best_distance = math.inf

    for angle in angles:
        d = distance(point, angle.vertex)
        if d < best_distance:
            best = angle
            best_distance = d

    return best, best_distance

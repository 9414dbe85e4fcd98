"""
Bisector geometry for the angle-bisector tool.

All directions here are radians measured in canvas space.
"""

from __future__ import annotations

import math

from ..schema import Angle, Point
from .angles import (
    AngleUnit,
    angular_distance,
    direction,
    distance,
    normalize_angle,
    point_at,
    wrap_signed,
)
from .snapping import round_half_up

DEFAULT_PREVIEW_LENGTH = 200.0
# ~8.6 degrees
DEFAULT_BISECTOR_SNAP_TOLERANCE = 0.15


def bisector_direction(angle: Angle) -> float:
    """
    Direction of the bisector of ``angle`` in radians, in ``[0, 2*pi)``.

    With a ``measure`` the bisector is ``point1``'s direction turned by half the
    measure. Without one it is the mean of both ray directions, using the
    wrapped signed difference so rays on either side of the +-pi seam average
    correctly.
    """
    unit = AngleUnit.RADIANS
    ray1 = direction(angle.point1, angle.vertex, unit)

    if angle.measure is not None:
        half_span = math.radians(angle.measure) / 2
    else:
        ray2 = direction(angle.point2, angle.vertex, unit)
        half_span = wrap_signed(ray2 - ray1, unit) / 2

    return normalize_angle(ray1 + half_span, unit)


def bisector_theoretical_endpoint(angle: Angle, length: float = DEFAULT_PREVIEW_LENGTH) -> Point:
    """Point at ``length`` from the vertex along the exact bisector."""
    return point_at(angle.vertex, bisector_direction(angle), length, AngleUnit.RADIANS)


def magnetic_bisector_endpoint(
    angle: Angle,
    pointer: Point,
    tolerance: float = DEFAULT_BISECTOR_SNAP_TOLERANCE,
) -> Point:
    """
    Pull ``pointer`` onto the exact bisector ray when it is close enough.

    If the pointer's direction from the vertex is within ``tolerance`` radians
    of the bisector, the returned point lies on the bisector at the pointer's
    distance from the vertex. Otherwise the pointer is returned unchanged.
    """
    vertex = angle.vertex
    unit = AngleUnit.RADIANS
    user_direction = direction(pointer, vertex, unit)
    theoretical = bisector_direction(angle)

    if angular_distance(user_direction, theoretical, unit) < tolerance:
        return point_at(vertex, theoretical, distance(pointer, vertex), unit)

    return pointer


def interior_angle_degrees(angle: Angle) -> float:
    """Angle between the two rays in degrees, in ``[0, 180]``."""
    unit = AngleUnit.DEGREES
    return angular_distance(
        direction(angle.point1, angle.vertex, unit),
        direction(angle.point2, angle.vertex, unit),
        unit,
    )


def display_measure(angle: Angle) -> float:
    """Label shown next to an angle: its measure if given, else the ray angle rounded half up."""
    if angle.measure is not None:
        return angle.measure
    return float(round_half_up(interior_angle_degrees(angle)))

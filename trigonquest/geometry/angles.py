"""
Angle primitives shared by the drawing engine and the validators.

The engine works in radians (live preview) and the validators work in
degrees (scoring), parameterized by :class:`AngleUnit`. Directions are
normalized into ``[0, full turn)`` and unsigned differences are folded into
``[0, half turn]`` on both sides.

Signed differences follow two conventions. The engine wraps into
``(-half turn, half turn]`` with :func:`wrap_signed`. The validators clamp
once into ``[-half turn, half turn]`` with :func:`clamp_signed`, which leaves
an exact half turn in either direction untouched.
"""

from __future__ import annotations

import math
from enum import Enum

from ..schema import Point


class AngleUnit(str, Enum):
    """Unit used for an angle value"""
    DEGREES = "degrees"
    RADIANS = "radians"

    @property
    def full_turn(self) -> float:
        return 360.0 if self is AngleUnit.DEGREES else 2 * math.pi

    @property
    def half_turn(self) -> float:
        return 180.0 if self is AngleUnit.DEGREES else math.pi


def normalize_angle(angle: float, unit: AngleUnit = AngleUnit.DEGREES) -> float:
    """
    Normalize an angle into ``[0, full turn)``.

    Args:
        angle: Angle value in ``unit``
        unit: Degrees or radians

    Returns:
        Equivalent angle in the canonical non-negative range
    """
    full = unit.full_turn
    normalized = math.fmod(angle, full)
    if normalized < 0:
        normalized += full
    # fmod of a tiny negative value can round up to exactly one full turn
    if normalized >= full:
        normalized -= full
    return normalized


def wrap_signed(delta: float, unit: AngleUnit = AngleUnit.DEGREES) -> float:
    """Wrap a signed angular difference into ``(-half turn, half turn]``."""
    full = unit.full_turn
    half = unit.half_turn
    while delta > half:
        delta -= full
    while delta <= -half:
        delta += full
    return delta


def clamp_signed(delta: float, unit: AngleUnit = AngleUnit.DEGREES) -> float:
    """
    Bring a difference of two normalized directions into ``[-half turn, half turn]``.

    A single correction step: ``-half`` and ``+half`` both stay as they are.
    """
    if delta < -unit.half_turn:
        return delta + unit.full_turn
    if delta > unit.half_turn:
        return delta - unit.full_turn
    return delta


def angular_distance(a: float, b: float, unit: AngleUnit = AngleUnit.DEGREES) -> float:
    """Unsigned difference between two directions, folded into ``[0, half turn]``."""
    full = unit.full_turn
    difference = math.fmod(abs(a - b), full)
    if difference > unit.half_turn:
        difference = full - difference
    return difference


def direction(point: Point, vertex: Point, unit: AngleUnit = AngleUnit.DEGREES) -> float:
    """
    Direction of the ray from ``vertex`` through ``point``.

    Measured with ``atan2`` in canvas space (y grows downwards, so a
    positive angle turns clockwise on screen) and normalized into
    ``[0, full turn)``.
    """
    radians = math.atan2(point.y - vertex.y, point.x - vertex.x)
    if unit is AngleUnit.DEGREES:
        return normalize_angle(math.degrees(radians), unit)
    return normalize_angle(radians, unit)


def to_radians(angle: float, unit: AngleUnit) -> float:
    return angle if unit is AngleUnit.RADIANS else math.radians(angle)


def distance(p: Point, q: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p.x - q.x, p.y - q.y)


def is_point_near(p: Point, q: Point, threshold: float) -> bool:
    """True if ``p`` lies within ``threshold`` (inclusive) of ``q``."""
    return distance(p, q) <= threshold


def point_at(vertex: Point, angle: float, length: float, unit: AngleUnit = AngleUnit.RADIANS) -> Point:
    """Point at ``length`` from ``vertex`` along direction ``angle``."""
    radians = to_radians(angle, unit)
    return Point(
        x=vertex.x + length * math.cos(radians),
        y=vertex.y + length * math.sin(radians),
    )

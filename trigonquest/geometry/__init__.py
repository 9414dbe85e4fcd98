"""
Construction geometry.

Provides:
- Angle primitives for degrees and radians
- Grid and point snapping for pointer input
- Bisector directions, preview endpoints and magnetic snapping
"""

from .angles import (
    AngleUnit,
    angular_distance,
    clamp_signed,
    direction,
    distance,
    is_point_near,
    normalize_angle,
    point_at,
    wrap_signed,
)
from .bisector import (
    DEFAULT_BISECTOR_SNAP_TOLERANCE,
    DEFAULT_PREVIEW_LENGTH,
    bisector_direction,
    bisector_theoretical_endpoint,
    display_measure,
    interior_angle_degrees,
    magnetic_bisector_endpoint,
)
from .snapping import (
    DEFAULT_GRID_SIZE,
    DEFAULT_SNAP_THRESHOLD,
    find_hovered_point,
    nearest_angle,
    resolve_pointer_position,
    snap_to_grid,
    snap_to_point,
)

__all__ = [
    "AngleUnit",
    "angular_distance",
    "clamp_signed",
    "direction",
    "distance",
    "is_point_near",
    "normalize_angle",
    "point_at",
    "wrap_signed",
    "DEFAULT_BISECTOR_SNAP_TOLERANCE",
    "DEFAULT_PREVIEW_LENGTH",
    "bisector_direction",
    "bisector_theoretical_endpoint",
    "display_measure",
    "interior_angle_degrees",
    "magnetic_bisector_endpoint",
    "DEFAULT_GRID_SIZE",
    "DEFAULT_SNAP_THRESHOLD",
    "find_hovered_point",
    "nearest_angle",
    "resolve_pointer_position",
    "snap_to_grid",
    "snap_to_point",
]

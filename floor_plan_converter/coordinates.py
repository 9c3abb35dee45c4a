"""Mapping from planar floor plan coordinates to 3D world space."""

import math

from .exceptions import GeometryOverflowError, InvalidScaleError
from .models import Point2D, Point3D


def validate_scale(scale: float) -> float:
    """Check that a planar-to-meter scale is usable.

    Args:
        scale: Meters per planar unit

    Returns:
        The scale as a float

    Raises:
        InvalidScaleError: If the scale is zero, negative, NaN or infinite
    """
    try:
        value = float(scale)
    except (TypeError, ValueError):
        raise InvalidScaleError(scale) from None

    if not math.isfinite(value) or value <= 0:
        raise InvalidScaleError(scale)

    return value


def to_3d(point: Point2D, scale: float) -> Point3D:
    """Convert a planar point to world space.

    The planar Y axis (pointing down the image) maps to the negated world
    Z axis in a right-handed, Y-up world: ``(x, y) -> (x*s, 0, -y*s)``.

    Args:
        point: Point in planar units
        scale: Meters per planar unit

    Returns:
        Point on the floor plane (y = 0)

    Raises:
        GeometryOverflowError: If the scaled point is not finite
    """
    scale = validate_scale(scale)
    x = point.x * scale
    z = -point.y * scale

    if not (math.isfinite(x) and math.isfinite(z)):
        raise GeometryOverflowError(
            f"Point ({point.x}, {point.y}) overflows at scale {scale}"
        )

    return Point3D(x=x, y=0.0, z=z)

"""Floor slab generation from room outlines."""

import logging
from typing import Optional, Sequence

import numpy as np

from .coordinates import validate_scale
from .models import ConversionParams, FloorMesh3D, Point2D, Room

logger = logging.getLogger(__name__)


def _boundary_vertices(rooms: Sequence[Room]) -> np.ndarray:
    """Stack every boundary vertex of every room into an (N, 2) array."""
    points = [(p.x, p.y) for room in rooms for p in room.boundary]
    return np.array(points, dtype=float).reshape(-1, 2)


def _fallback_floor(params: ConversionParams) -> FloorMesh3D:
    size = params.fallback_floor_size
    return FloorMesh3D(
        position=(0.0, 0.0, 0.0),
        size=(size, size, params.floor_thickness),
    )


def floor_from_rooms(
    rooms: Sequence[Room],
    scale: float,
    params: Optional[ConversionParams] = None,
) -> FloorMesh3D:
    """Create a floor slab covering the bounding box of all rooms.

    When no room has any boundary vertex, or the outlines do not fit in
    finite world coordinates, a fallback slab of nominal size is
    centered at the origin, so the scene always has a floor.

    Args:
        rooms: Rooms with boundaries in planar units
        scale: Meters per planar unit
        params: Conversion parameters

    Returns:
        FloorMesh3D at floor level (y = 0)
    """
    params = params or ConversionParams()
    scale = validate_scale(scale)

    vertices = _boundary_vertices(rooms)

    if len(vertices) == 0:
        if rooms:
            logger.warning("No room has a boundary, using fallback floor")
        return _fallback_floor(params)

    min_x, min_y = vertices.min(axis=0)
    max_x, max_y = vertices.max(axis=0)

    # Planar Y maps to negated world Z
    with np.errstate(over="ignore", invalid="ignore"):
        center_x = (min_x + max_x) / 2 * scale
        center_z = -(min_y + max_y) / 2 * scale
        width = (max_x - min_x) * scale
        depth = (max_y - min_y) * scale

    if not np.all(np.isfinite([center_x, center_z, width, depth])):
        logger.warning("Room outlines overflow at scale %s, using fallback floor", scale)
        return _fallback_floor(params)

    return FloorMesh3D(
        position=(float(center_x), 0.0, float(center_z)),
        size=(float(width), float(depth), params.floor_thickness),
    )


def polygon_area(boundary: Sequence[Point2D], scale: float = 1.0) -> float:
    """Calculate the area of a room outline in square meters.

    Uses the shoelace formula; the polygon is implicitly closed.

    Args:
        boundary: Polygon vertices in planar units
        scale: Meters per planar unit

    Returns:
        Area in m² (0.0 for fewer than three vertices)
    """
    if len(boundary) < 3:
        return 0.0

    pts = np.array([(p.x, p.y) for p in boundary], dtype=float)
    x, y = pts[:, 0], pts[:, 1]
    pixel_area = 0.5 * abs(np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1)))

    return float(pixel_area * scale ** 2)

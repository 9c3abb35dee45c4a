"""Conversion of walls, doors and windows into 3D box meshes."""

import logging
import math
from typing import Optional

from .coordinates import to_3d
from .exceptions import GeometryOverflowError
from .models import (
    ConversionParams,
    Door,
    DoorDirection,
    DoorMesh3D,
    Point2D,
    Point3D,
    Vector3,
    Wall,
    WallMesh3D,
    Window,
    WindowMesh3D,
)

logger = logging.getLogger(__name__)

IDENTITY_ROTATION = (0.0, 0.0, 0.0)
QUARTER_TURN = (0.0, math.pi / 2, 0.0)


def _all_finite(*vectors: Vector3) -> bool:
    return all(math.isfinite(v) for vector in vectors for v in vector)


def _scaled_point(point: Point2D, scale: float, kind: str, element_id: str) -> Optional[Point3D]:
    """Transform a point, or log and return None when it overflows."""
    try:
        return to_3d(point, scale)
    except GeometryOverflowError as e:
        logger.warning("Skipping %s %s: %s", kind, element_id, e)
        return None


def wall_to_mesh(wall: Wall, scale: float) -> Optional[WallMesh3D]:
    """Convert a wall segment into a box standing on the floor.

    The box is authored along world X and rotated about Y to follow the
    wall. Its vertical extent spans the floor (y = 0) up to the wall height.

    Wall thickness is a metric value coming straight from the analysis and
    is not multiplied by ``scale``, while the length is derived from scaled
    endpoints. Keep this asymmetry; normalizing it changes wall proportions
    of existing plans.

    Args:
        wall: Wall in planar units
        scale: Meters per planar unit

    Returns:
        WallMesh3D, or None if the wall has zero length or does not fit in
        finite world coordinates
    """
    start = _scaled_point(wall.start, scale, "wall", wall.id)
    end = _scaled_point(wall.end, scale, "wall", wall.id)
    if start is None or end is None:
        return None

    dx = end.x - start.x
    dz = end.z - start.z
    length = math.hypot(dx, dz)

    # Also catches distinct endpoints that collapse after scaling
    if length == 0:
        logger.warning("Skipping zero-length wall %s", wall.id)
        return None

    angle = math.atan2(dz, dx)

    position = (start.x + dx / 2, wall.height / 2, start.z + dz / 2)
    size = (length, wall.height, wall.thickness)
    rotation = (0.0, angle, 0.0)

    if not _all_finite(position, size, rotation):
        logger.warning("Skipping wall %s: geometry overflows at scale %s", wall.id, scale)
        return None

    return WallMesh3D(id=wall.id, position=position, size=size, rotation=rotation)


def door_to_mesh(
    door: Door,
    scale: float,
    params: Optional[ConversionParams] = None,
) -> Optional[DoorMesh3D]:
    """Convert a door into a thin slab centered between floor and lintel.

    Doors carry no orientation vector, only a cardinal direction, so a
    vertical door is turned a quarter turn and anything else stays aligned
    with world X.

    Args:
        door: Door in planar units
        scale: Meters per planar unit
        params: Conversion parameters

    Returns:
        DoorMesh3D, or None if it does not fit in finite world coordinates
    """
    params = params or ConversionParams()
    pos = _scaled_point(door.position, scale, "door", door.id)
    if pos is None:
        return None

    rotation = QUARTER_TURN if door.direction == DoorDirection.VERTICAL else IDENTITY_ROTATION
    position = (pos.x, door.height / 2, pos.z)
    size = (door.width * scale, door.height, params.opening_depth)

    if not _all_finite(position, size):
        logger.warning("Skipping door %s: geometry overflows at scale %s", door.id, scale)
        return None

    return DoorMesh3D(id=door.id, position=position, size=size, rotation=rotation)


def window_to_mesh(
    window: Window,
    scale: float,
    params: Optional[ConversionParams] = None,
) -> Optional[WindowMesh3D]:
    """Convert a window into a thin slab centered between sill and head.

    Args:
        window: Window in planar units
        scale: Meters per planar unit
        params: Conversion parameters

    Returns:
        WindowMesh3D, or None if it does not fit in finite world coordinates
    """
    params = params or ConversionParams()
    pos = _scaled_point(window.position, scale, "window", window.id)
    if pos is None:
        return None

    position = (pos.x, window.from_floor + window.height / 2, pos.z)
    size = (window.width * scale, window.height, params.opening_depth)

    if not _all_finite(position, size):
        logger.warning("Skipping window %s: geometry overflows at scale %s", window.id, scale)
        return None

    return WindowMesh3D(
        id=window.id,
        position=position,
        size=size,
        rotation=IDENTITY_ROTATION,
    )
